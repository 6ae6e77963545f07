"""
PubChem HTTP client.

Executes PubChemQuery objects against PUG REST. `execute` returns the raw
body for the requested output format; the typed helpers cover the
responses whose shape is fixed by the operation (identifier lists, property
tables, synonyms).
"""

import logging
from typing import Any, Iterable

import httpx

from bio_apis import browser
from bio_apis.base import BaseClient
from bio_apis.exceptions import DecodeError, InvalidInputError, RateLimitError, RemoteError
from bio_apis.pubchem.query import (
    CompoundProperty,
    Domain,
    IdNamespace,
    Operation,
    OutputFormat,
    Property,
    PubChemQuery,
    StructureSearch,
)
from bio_apis.pubchem.schemas import (
    CompoundProperties,
    IdentifierListResponse,
    InformationListResponse,
    PropertyTableResponse,
)
from bio_apis.schemas import DataSource
from bio_apis.settings import api_settings
from bio_apis.validation import validate_cid

logger = logging.getLogger(__name__)


class PubChemClient(BaseClient):
    """
    HTTP client for PubChem PUG REST.

    Example:
        async with PubChemClient() as client:
            query = PubChemQuery(Domain.COMPOUND, IdNamespace.NAME, ("aspirin",), Operation.CIDS)
            cids = await client.get_cids(query)

            props = await client.get_properties([2244], ["MolecularWeight", "XLogP"])
            sdf = await client.load_sdf(2244)
    """

    source = DataSource.PUBCHEM

    # Standard property names for get_properties
    STANDARD_PROPERTIES = (
        CompoundProperty.MOLECULAR_FORMULA,
        CompoundProperty.MOLECULAR_WEIGHT,
        CompoundProperty.SMILES,
        CompoundProperty.INCHI,
        CompoundProperty.INCHIKEY,
        CompoundProperty.IUPAC_NAME,
        CompoundProperty.TITLE,
        CompoundProperty.XLOGP,
        CompoundProperty.EXACT_MASS,
        CompoundProperty.TPSA,
        CompoundProperty.COMPLEXITY,
        CompoundProperty.CHARGE,
        CompoundProperty.HBOND_DONOR_COUNT,
        CompoundProperty.HBOND_ACCEPTOR_COUNT,
        CompoundProperty.ROTATABLE_BOND_COUNT,
        CompoundProperty.HEAVY_ATOM_COUNT,
    )

    # PUG REST limit for a comma-separated CID list in one URL
    MAX_BATCH = 100

    def _get_default_headers(self) -> dict[str, str]:
        return {**super()._get_default_headers(), "Accept": "application/json"}

    def _raise_for_status(
        self,
        response: httpx.Response,
        resource_type: str,
        resource_id: str,
    ) -> None:
        # PubChem reports throttling as 503 with a PUGREST.ServerBusy fault
        if response.status_code == 503 and "ServerBusy" in response.text:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                source=self.source.value,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                response_body=response.text,
                status_code=response.status_code,
            )

        # PubChem returns 400 with a Fault message for unparseable SMILES etc.
        if response.status_code == 400:
            message = _fault_message(response) or response.text[:200]
            raise RemoteError(
                f"Bad request: {message}",
                source=self.source.value,
                status_code=400,
                response_body=response.text,
            )

        super()._raise_for_status(response, resource_type, resource_id)

    # =========================================================================
    # Generic query execution
    # =========================================================================

    async def execute(self, query: PubChemQuery) -> str | bytes:
        """
        Run a query and return the undecoded body.

        PNG output is returned as bytes; every other format as text.
        """
        request = query.build()
        response = await self.request(
            request.method,
            request.url,
            data=request.data,
            resource_type=query.domain.value,
            resource_id=",".join(query.identifiers),
        )
        if query.output is OutputFormat.PNG:
            return response.content
        return response.text

    async def execute_json(self, query: PubChemQuery) -> Any:
        """Run a JSON query and return the decoded body."""
        if query.output is not OutputFormat.JSON:
            raise InvalidInputError(
                f"execute_json needs JSON output, got {query.output.value}",
                source=self.source.value,
                field="output",
            )
        request = query.build()
        response = await self.request(
            request.method,
            request.url,
            data=request.data,
            resource_type=query.domain.value,
            resource_id=",".join(query.identifiers),
        )
        return self.parse_json(response)

    # =========================================================================
    # Typed helpers
    # =========================================================================

    async def get_cids(self, query: PubChemQuery) -> list[int]:
        """
        Run a `cids` query and return the CID list.

        Legacy structure searches and formula searches answer asynchronously
        with a ListKey; run those through execute_json and look the ListKey up
        yourself, or use the fastformula namespace.
        """
        if query.operation is not Operation.CIDS:
            raise InvalidInputError("get_cids needs the cids operation", source=self.source.value, field="operation")
        if isinstance(query.namespace, StructureSearch):
            raise InvalidInputError(
                "Legacy structure searches are asynchronous; use a FastSearch namespace or execute_json",
                source=self.source.value,
                field="namespace",
            )
        if query.namespace is IdNamespace.FORMULA:
            raise InvalidInputError(
                "Formula searches are asynchronous; use the fastformula namespace or execute_json",
                source=self.source.value,
                field="namespace",
            )

        payload = await self.execute_json(query)
        parsed = self.parse_model(IdentifierListResponse, payload)
        if parsed.identifier_list.cid is None:
            raise self._missing("IdentifierList.CID")
        return list(parsed.identifier_list.cid)

    async def get_properties(
        self,
        cids: Iterable[int],
        properties: Iterable[CompoundProperty | str] | None = None,
    ) -> list[CompoundProperties]:
        """
        Get property table rows for up to MAX_BATCH compounds.

        Args:
            cids: PubChem Compound IDs
            properties: Property names (default: STANDARD_PROPERTIES)
        """
        cids = [validate_cid(c) for c in cids]
        if len(cids) > self.MAX_BATCH:
            raise InvalidInputError(
                f"Maximum {self.MAX_BATCH} CIDs per property request",
                source=self.source.value,
                field="cids",
            )

        query = PubChemQuery(
            domain=Domain.COMPOUND,
            namespace=IdNamespace.CID,
            identifiers=tuple(cids),
            operation=Property(tuple(properties or self.STANDARD_PROPERTIES)),
        )
        payload = await self.execute_json(query)
        return list(self.parse_model(PropertyTableResponse, payload).property_table.properties)

    async def get_synonyms(self, cid: int) -> list[str]:
        """Get synonyms/names for a compound, most common first."""
        query = PubChemQuery(
            domain=Domain.COMPOUND,
            namespace=IdNamespace.CID,
            identifiers=(validate_cid(cid),),
            operation=Operation.SYNONYMS,
        )
        payload = await self.execute_json(query)
        info = self.parse_model(InformationListResponse, payload).information_list.information
        if not info or info[0].synonym is None:
            raise self._missing("InformationList.Information[0].Synonym")
        return list(info[0].synonym)

    async def load_sdf(self, cid: int, record_type: str = "3d") -> str:
        """
        Download a compound record as SDF text.

        Args:
            cid: PubChem Compound ID
            record_type: "3d" (computed conformer) or "2d"
        """
        if record_type not in ("2d", "3d"):
            raise InvalidInputError(
                f"record_type must be '2d' or '3d', got {record_type!r}",
                source=self.source.value,
                field="record_type",
            )
        query = PubChemQuery(
            domain=Domain.COMPOUND,
            namespace=IdNamespace.CID,
            identifiers=(validate_cid(cid),),
            operation=Operation.RECORD,
            output=OutputFormat.SDF,
            options={"record_type": record_type},
        )
        return await self.execute(query)

    # =========================================================================
    # Browser
    # =========================================================================

    def open_overview(self, cid: int) -> bool:
        return browser.open_url(overview_url(validate_cid(cid)))

    def _missing(self, field: str) -> DecodeError:
        return DecodeError(f"Response has no {field}", source=self.source.value, field=field)


def overview_url(cid: int) -> str:
    return f"{api_settings.pubchem_web_url}/compound/{cid}"


def _fault_message(response: httpx.Response) -> str | None:
    try:
        return response.json().get("Fault", {}).get("Message")
    except (ValueError, AttributeError):
        return None
