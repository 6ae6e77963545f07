"""
PDBe client.

Covers the PDBe REST summaries for entries and chemical components, and the
ideal-coordinate SDF files for chemical components.
"""

import logging
from typing import Any

from bio_apis import browser
from bio_apis.base import BaseClient
from bio_apis.exceptions import DecodeError, NotFoundError
from bio_apis.pdbe.schemas import CompoundSummary, EntrySummary
from bio_apis.schemas import DataSource
from bio_apis.settings import api_settings
from bio_apis.validation import validate_ccd_id, validate_pdb_id

logger = logging.getLogger(__name__)


class PdbeClient(BaseClient):
    """
    HTTP client for PDBe.

    Example:
        async with PdbeClient() as client:
            summary = await client.get_entry_summary("1cbs")
            atp = await client.get_compound_summary("ATP")
            sdf = await client.load_sdf("ATP")
    """

    source = DataSource.PDBE

    async def get_entry_summary(self, pdb_id: str) -> EntrySummary:
        """
        Load the PDBe summary for a PDB entry.

        Raises:
            NotFoundError: PDBe has no record for the ID
        """
        pdb_id = validate_pdb_id(pdb_id)
        payload = await self.get_json(
            f"{api_settings.pdbe_api_url}/pdb/entry/summary/{pdb_id.lower()}",
            resource_type="entry",
            resource_id=pdb_id,
        )
        record = self._unwrap(payload, pdb_id, "entry")
        return self.parse_model(EntrySummary, {**record, "pdb_id": pdb_id})

    async def get_compound_summary(self, ccd_id: str) -> CompoundSummary:
        """Load the PDBe summary for a chemical component."""
        ccd_id = validate_ccd_id(ccd_id)
        payload = await self.get_json(
            f"{api_settings.pdbe_api_url}/pdb/compound/summary/{ccd_id}",
            resource_type="chemical component",
            resource_id=ccd_id,
        )
        record = self._unwrap(payload, ccd_id, "chemical component")
        return self.parse_model(CompoundSummary, {**record, "ccd_id": ccd_id})

    async def load_sdf(self, ccd_id: str) -> str:
        """Download the ideal-coordinates SDF for a chemical component."""
        ccd_id = validate_ccd_id(ccd_id)
        return await self.get_text(
            sdf_url(ccd_id),
            resource_type="chemical component",
            resource_id=ccd_id,
        )

    def open_overview(self, ccd_id: str) -> bool:
        return browser.open_url(overview_url(validate_ccd_id(ccd_id)))

    def _unwrap(self, payload: Any, ident: str, resource_type: str) -> dict:
        """Pull the single record out of PDBe's `{id: [record]}` envelope."""
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(payload).__name__}",
                source=self.source.value,
            )

        # Entry responses are keyed lower-case, compound responses upper-case
        records = payload.get(ident.lower()) or payload.get(ident.upper())
        if not records:
            raise NotFoundError(resource_type, ident, source=self.source.value, status_code=None)
        if not isinstance(records, list) or not isinstance(records[0], dict):
            raise DecodeError(
                f"Unexpected {resource_type} envelope for {ident}",
                source=self.source.value,
                field=ident,
            )
        return records[0]


def sdf_url(ccd_id: str) -> str:
    return f"{api_settings.pdbe_files_url}/{ccd_id.upper()}_ideal.sdf"


def overview_url(ccd_id: str) -> str:
    return f"{api_settings.pdbe_web_url}/{ccd_id.upper()}"
