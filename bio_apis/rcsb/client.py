"""
RCSB PDB client.

Covers:
- Data API entry documents (typed PdbEntry / PdbMetadata)
- Search API (typed SearchResults)
- mmCIF, structure-factor, validation and density map downloads, served
  gzip-compressed and decompressed here
- Browser shortcuts for the structure pages
"""

import logging
import random

from bio_apis import browser
from bio_apis.base import BaseClient, decompress_gzip
from bio_apis.exceptions import InvalidInputError, NotFoundError
from bio_apis.rcsb import urls
from bio_apis.rcsb.normalizer import RcsbNormalizer
from bio_apis.rcsb.schemas import FilesAvailable, PdbEntry, PdbMetadata, SearchResults
from bio_apis.rcsb.search import (
    Operator,
    Paginate,
    RequestOptions,
    ReturnType,
    ScoringStrategy,
    SearchParameters,
    SearchPayload,
    SearchQuery,
    SequenceType,
    Service,
)
from bio_apis.schemas import DataSource
from bio_apis.settings import api_settings
from bio_apis.validation import validate_pdb_id, validate_sequence

logger = logging.getLogger(__name__)

# Cap on sequence-search hits, to keep follow-up Data API lookups bounded
MAX_RESULTS = 8


class RcsbClient(BaseClient):
    """
    HTTP client for the RCSB PDB.

    Example:
        async with RcsbClient() as client:
            meta = await client.load_metadata("1ba3")
            cif_text = await client.load_cif("1ba3")
            hits = await client.search_by_sequence("MKTAYIAKQR...")
    """

    source = DataSource.RCSB

    def __init__(self, normalizer: RcsbNormalizer | None = None, **kwargs):
        super().__init__(**kwargs)
        self._normalizer = normalizer or RcsbNormalizer()

    # =========================================================================
    # Data API
    # =========================================================================

    async def get_entry(self, ident: str) -> PdbEntry:
        """
        Load the Data API document for an entry.

        Args:
            ident: 4-character or extended PDB ID

        Raises:
            InvalidInputError: Malformed ID (no request is sent)
            NotFoundError: No such entry
            DecodeError: Document doesn't match PdbEntry
        """
        ident = validate_pdb_id(ident)
        payload = await self.get_json(
            urls.entry_url(ident),
            resource_type="entry",
            resource_id=ident,
        )
        return self.parse_model(PdbEntry, payload)

    async def load_metadata(self, ident: str) -> PdbMetadata:
        """Title, method, resolution, chain count and primary citation for an entry."""
        entry = await self.get_entry(ident)
        return self._normalizer.to_metadata(entry)

    # =========================================================================
    # Search API
    # =========================================================================

    async def search(self, payload: SearchPayload) -> SearchResults:
        """
        Run a Search API query.

        The API answers HTTP 204 when nothing matches; that is returned as an
        empty result set, not an error.
        """
        response = await self.request(
            "POST",
            api_settings.rcsb_search_url,
            json_data=payload.to_json(),
            resource_type="search",
        )

        if response.status_code == 204 or not response.content:
            return SearchResults(
                query_id=None,
                result_type=payload.return_type.value,
                total_count=0,
                result_set=(),
            )

        return self.parse_model(SearchResults, self.parse_json(response))

    async def search_by_sequence(
        self,
        sequence: str,
        *,
        sequence_type: SequenceType = SequenceType.PROTEIN,
        identity_cutoff: float = 0.9,
        evalue_cutoff: float = 1,
        limit: int = MAX_RESULTS,
    ) -> SearchResults:
        """
        Find entries whose polymer sequences match the given sequence.

        Titles are not included; call get_entry / load_metadata for the hits
        you want to display.
        """
        sequence = validate_sequence(sequence)
        if not 0 <= identity_cutoff <= 1:
            raise InvalidInputError("identity_cutoff must be within [0, 1]", field="identity_cutoff")
        if evalue_cutoff < 0:
            raise InvalidInputError("evalue_cutoff must be >= 0", field="evalue_cutoff")
        if limit < 1:
            raise InvalidInputError("limit must be >= 1", field="limit")

        return await self.search(
            sequence_search_payload(
                sequence,
                sequence_type=sequence_type,
                identity_cutoff=identity_cutoff,
                evalue_cutoff=evalue_cutoff,
                limit=limit,
            )
        )

    async def get_newly_released(self, rng: random.Random | None = None) -> str:
        """
        Pick a random entry released within the past week.

        Raises:
            NotFoundError: Nothing was released in the window
        """
        results = await self.search(newly_released_payload())
        if not results.result_set:
            raise NotFoundError("recent release", "now-1w", source=self.source.value, status_code=None)

        hit = (rng or random).choice(results.result_set)
        return hit.identifier

    # =========================================================================
    # File downloads
    # =========================================================================

    async def _load_gz_text(self, url: str, resource_type: str, ident: str) -> str:
        data = await self.get_bytes(url, resource_type=resource_type, resource_id=ident)
        return self.decompress_text(data)

    async def load_cif(self, ident: str) -> str:
        """
        Download an entry's atomic coordinates as PDBx/mmCIF text.

        The compressed file is fetched and decompressed here to save bandwidth.

        Raises:
            DecodeError: The download was not valid gzip data
        """
        ident = validate_pdb_id(ident)
        return await self._load_gz_text(urls.cif_gz_url(ident), "structure", ident)

    async def load_structure_factors_cif(self, ident: str) -> str:
        """Download the structure factors mmCIF (experimental reflections)."""
        ident = validate_pdb_id(ident)
        return await self._load_gz_text(
            urls.structure_factors_cif_gz_url(ident), "structure factors", ident
        )

    async def load_validation_cif(self, ident: str) -> str:
        ident = validate_pdb_id(ident)
        return await self._load_gz_text(urls.validation_cif_gz_url(ident), "validation report", ident)

    async def load_validation_2fo_fc_cif(self, ident: str) -> str:
        """Download the 2Fo-Fc map coefficients from the validation pipeline."""
        ident = validate_pdb_id(ident)
        return await self._load_gz_text(
            urls.validation_2fo_fc_cif_gz_url(ident), "2fo-fc map coefficients", ident
        )

    async def load_validation_fo_fc_cif(self, ident: str) -> str:
        """Download the Fo-Fc map coefficients from the validation pipeline."""
        ident = validate_pdb_id(ident)
        return await self._load_gz_text(
            urls.validation_fo_fc_cif_gz_url(ident), "fo-fc map coefficients", ident
        )

    async def get_map_url(self, ident: str) -> str:
        """
        URL of the EMDB density map for a cryo-EM entry.

        Raises:
            NotFoundError: The entry has no EMDB cross-reference
        """
        entry = await self.get_entry(ident)
        url = self._normalizer.map_url(entry)
        if url is None:
            raise NotFoundError("density map", entry.rcsb_id, source=self.source.value, status_code=None)
        return url

    async def load_map(self, entry: PdbEntry) -> bytes:
        """
        Download and decompress the density map for an already-loaded entry.

        The map is binary (CCP4/MRC) and returned undecoded.
        """
        url = self._normalizer.map_url(entry)
        if url is None:
            raise NotFoundError("density map", entry.rcsb_id, source=self.source.value, status_code=None)
        data = await self.get_bytes(url, resource_type="density map", resource_id=entry.rcsb_id)
        return decompress_gzip(data, source=self.source.value)

    async def file_exists(self, url: str) -> bool:
        return await self.head_ok(url)

    async def get_files_available(
        self,
        ident: str,
        entry: PdbEntry | None = None,
    ) -> FilesAvailable:
        """
        Report which auxiliary files exist for an entry.

        Issues one HEAD request per file kind, in sequence. Pass a loaded
        entry to check for a density map; without one, map is reported False.
        """
        ident = validate_pdb_id(ident)
        map_url = self._normalizer.map_url(entry) if entry is not None else None

        return FilesAvailable(
            validation=await self.file_exists(urls.validation_cif_gz_url(ident)),
            validation_2fo_fc=await self.file_exists(urls.validation_2fo_fc_cif_gz_url(ident)),
            validation_fo_fc=await self.file_exists(urls.validation_fo_fc_cif_gz_url(ident)),
            structure_factors=await self.file_exists(urls.structure_factors_cif_gz_url(ident)),
            map=await self.file_exists(map_url) if map_url else False,
        )

    # =========================================================================
    # Browser
    # =========================================================================

    def open_overview(self, ident: str) -> bool:
        return browser.open_url(urls.overview_url(validate_pdb_id(ident)))

    def open_3d_view(self, ident: str) -> bool:
        return browser.open_url(urls.view_3d_url(validate_pdb_id(ident)))

    def open_structure(self, ident: str) -> bool:
        """Open the raw mmCIF file in the browser."""
        return browser.open_url(urls.structure_view_url(validate_pdb_id(ident)))


# =============================================================================
# Payload builders
# =============================================================================


def sequence_search_payload(
    sequence: str,
    *,
    sequence_type: SequenceType = SequenceType.PROTEIN,
    identity_cutoff: float = 0.9,
    evalue_cutoff: float = 1,
    limit: int = MAX_RESULTS,
) -> SearchPayload:
    return SearchPayload(
        return_type=ReturnType.ENTRY,
        query=SearchQuery(
            service=Service.SEQUENCE,
            parameters=SearchParameters(
                value=sequence,
                sequence_type=sequence_type,
                evalue_cutoff=evalue_cutoff,
                identity_cutoff=identity_cutoff,
            ),
        ),
        request_options=RequestOptions(
            scoring_strategy=ScoringStrategy.SEQUENCE,
            paginate=Paginate(start=0, rows=limit),
        ),
    )


def newly_released_payload() -> SearchPayload:
    """https://search.rcsb.org/#search-example-12"""
    return SearchPayload(
        return_type=ReturnType.ENTRY,
        query=SearchQuery(
            service=Service.TEXT,
            parameters=SearchParameters(
                attribute="rcsb_accession_info.initial_release_date",
                operator=Operator.GREATER,
                value="now-1w",
            ),
        ),
    )
