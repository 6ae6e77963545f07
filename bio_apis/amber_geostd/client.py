"""
Amber GeoStd client.

Loads Mol2, FRCMOD and Lib files for small organic molecules from the
Amber GeoStd collection. Identifiers are GeoStd codes, which match PDBe
chemical component IDs, or PubChem CIDs.
"""

import logging

from bio_apis.amber_geostd.schemas import GeostdData, GeostdItem, GeostdItemResponse
from bio_apis.base import BaseClient
from bio_apis.schemas import DataSource
from bio_apis.settings import api_settings
from bio_apis.validation import validate_geostd_ident, validate_search_text

logger = logging.getLogger(__name__)


class AmberGeostdClient(BaseClient):
    """
    HTTP client for the Amber GeoStd file host.

    Example:
        async with AmberGeostdClient() as client:
            items = await client.find_mols("benzene")
            files = await client.load_mol_files(items[0].ident)
            if files.frcmod is not None:
                ...
    """

    source = DataSource.AMBER_GEOSTD

    async def get_all_mols(self) -> list[GeostdItem]:
        """List every molecule in the collection."""
        payload = await self.get_json(
            f"{api_settings.amber_geostd_url}/get-all-mols",
            resource_type="molecule list",
        )
        return list(self.parse_model(GeostdItemResponse, payload).result)

    async def find_mols(self, search_text: str) -> list[GeostdItem]:
        """Search molecules by keyword. No match is an empty list."""
        search_text = validate_search_text(search_text)
        payload = await self.post_json(
            f"{api_settings.amber_geostd_url}/find-mols",
            {"search_text": search_text},
            resource_type="molecule search",
            resource_id=search_text,
        )
        return list(self.parse_model(GeostdItemResponse, payload).result)

    async def load_mol_files(self, ident: str) -> GeostdData:
        """
        Load the Mol2 text for a molecule, with FRCMOD and Lib if available.

        Raises:
            NotFoundError: No molecule with that identifier
            DecodeError: Response lacks the Mol2 text
        """
        ident = validate_geostd_ident(ident)
        payload = await self.post_json(
            f"{api_settings.amber_geostd_url}/load-mol-files",
            {"ident": ident},
            resource_type="molecule",
            resource_id=ident,
        )
        data = self.parse_model(GeostdData, payload)
        logger.debug(
            f"[{self.source.value}] {ident}: frcmod={data.frcmod is not None}, lib={data.lib is not None}"
        )
        return data
