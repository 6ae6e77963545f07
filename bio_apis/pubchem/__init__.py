"""
PubChem package.

Provides:
- PubChemQuery: Validated PUG REST query builder
- PubChemClient: Executes queries, typed helpers for CIDs/properties/synonyms
"""

from bio_apis.pubchem.client import PubChemClient, overview_url
from bio_apis.pubchem.query import (
    NAMESPACES_BY_DOMAIN,
    OPERATIONS_BY_DOMAIN,
    CompoundProperty,
    Domain,
    FastSearch,
    FastSearchInput,
    FastSearchKind,
    IdNamespace,
    Operation,
    OutputFormat,
    Property,
    PubChemQuery,
    PubChemRequest,
    StructureInput,
    StructureSearch,
    StructureSearchKind,
    Xrefs,
    XrefType,
)
from bio_apis.pubchem.schemas import (
    CompoundProperties,
    IdentifierListResponse,
    InformationListResponse,
    PropertyTableResponse,
)

__all__ = [
    # Client
    "PubChemClient",
    "overview_url",
    # Query
    "PubChemQuery",
    "PubChemRequest",
    "Domain",
    "IdNamespace",
    "StructureSearch",
    "StructureSearchKind",
    "StructureInput",
    "FastSearch",
    "FastSearchKind",
    "FastSearchInput",
    "Operation",
    "Property",
    "CompoundProperty",
    "Xrefs",
    "XrefType",
    "OutputFormat",
    "NAMESPACES_BY_DOMAIN",
    "OPERATIONS_BY_DOMAIN",
    # Records
    "CompoundProperties",
    "PropertyTableResponse",
    "IdentifierListResponse",
    "InformationListResponse",
]
