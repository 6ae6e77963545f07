"""
RCSB PDB package.

Provides:
- RcsbClient: Data API, Search API, file downloads, browser shortcuts
- RcsbNormalizer: Derives PdbMetadata / map URLs from entries
- Search payload models and enums
"""

from bio_apis.rcsb.client import (
    MAX_RESULTS,
    RcsbClient,
    newly_released_payload,
    sequence_search_payload,
)
from bio_apis.rcsb.normalizer import RcsbNormalizer
from bio_apis.rcsb.schemas import (
    Cell,
    Citation,
    Database2,
    FilesAvailable,
    PdbEntry,
    PdbMetadata,
    RcsbEntryInfo,
    SearchHit,
    SearchResults,
)
from bio_apis.rcsb.search import (
    NodeType,
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
    Sort,
    SortDirection,
)

__all__ = [
    # Client
    "RcsbClient",
    "RcsbNormalizer",
    "MAX_RESULTS",
    "sequence_search_payload",
    "newly_released_payload",
    # Records
    "PdbEntry",
    "PdbMetadata",
    "RcsbEntryInfo",
    "Cell",
    "Citation",
    "Database2",
    "SearchHit",
    "SearchResults",
    "FilesAvailable",
    # Search payload
    "SearchPayload",
    "SearchQuery",
    "SearchParameters",
    "RequestOptions",
    "Paginate",
    "Sort",
    # Enums
    "Operator",
    "ReturnType",
    "NodeType",
    "Service",
    "SequenceType",
    "ScoringStrategy",
    "SortDirection",
]
