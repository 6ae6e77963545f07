"""
RCSB entry normalizer.

Derives compact records and follow-up URLs from a full PdbEntry, kept apart
from HTTP so it can be used on entries loaded from anywhere.
"""

import logging

from bio_apis.rcsb.schemas import PdbEntry, PdbMetadata
from bio_apis.rcsb.urls import emdb_map_gz_url

logger = logging.getLogger(__name__)


class RcsbNormalizer:
    """
    Maps PdbEntry documents to derived records.

    Usage:
        normalizer = RcsbNormalizer()
        metadata = normalizer.to_metadata(entry)
        map_url = normalizer.map_url(entry)
    """

    def to_metadata(self, entry: PdbEntry) -> PdbMetadata:
        info = entry.rcsb_entry_info
        resolution = min(info.resolution_combined) if info.resolution_combined else None
        citation = entry.rcsb_primary_citation

        return PdbMetadata(
            rcsb_id=entry.rcsb_id,
            title=entry.struct_.title,
            experimental_method=info.experimental_method,
            resolution=resolution,
            chain_count=info.deposited_polymer_entity_instance_count,
            primary_citation_title=citation.title if citation else None,
        )

    def emdb_code(self, entry: PdbEntry) -> str | None:
        """EMDB accession cross-referenced by the entry, if any (cryo-EM entries)."""
        for db in entry.database2 or []:
            if db.database_id == "EMDB":
                return db.database_code
        return None

    def map_url(self, entry: PdbEntry) -> str | None:
        code = self.emdb_code(entry)
        if code is None:
            logger.debug(f"{entry.rcsb_id} has no EMDB cross-reference")
            return None
        return emdb_map_gz_url(code)
