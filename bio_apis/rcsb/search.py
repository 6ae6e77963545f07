"""
RCSB Search API request payloads.

See https://search.rcsb.org/#search-api. Only the attributes a caller sets
are serialized; enums carry the exact wire strings.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================


class Operator(str, Enum):
    """Comparison operators for attribute queries."""

    EXACT_MATCH = "exact_match"
    EXISTS = "exists"
    GREATER = "greater"
    LESS = "less"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS_OR_EQUAL = "less_or_equal"
    EQUALS = "equals"
    CONTAINS_PHRASE = "contains_phrase"
    CONTAINS_WORDS = "contains_words"
    RANGE = "range"
    IN = "in"


class ReturnType(str, Enum):
    """https://search.rcsb.org/#return-type"""

    ENTRY = "entry"
    ASSEMBLY = "assembly"
    POLYMER_ENTITY = "polymer_entity"
    NON_POLYMER_ENTITY = "non_polymer_entity"
    POLYMER_INSTANCE = "polymer_instance"
    MOL_DEFINITION = "mol_definition"


class NodeType(str, Enum):
    TERMINAL = "terminal"
    GROUP = "group"


class Service(str, Enum):
    TEXT = "text"
    FULL_TEXT = "full_text"
    TEXT_CHEM = "text_chem"
    STRUCTURE = "structure"
    STRUCMOTIF = "strucmotif"
    SEQUENCE = "sequence"
    SEQMOTIF = "seqmotif"
    CHEMICAL = "chemical"


class SequenceType(str, Enum):
    PROTEIN = "protein"
    DNA = "dna"
    RNA = "rna"


class ScoringStrategy(str, Enum):
    COMBINED = "combined"
    SEQUENCE = "sequence"
    SEQMOTIF = "seqmotif"
    STRUCMOTIF = "strucmotif"
    STRUCTURE = "structure"
    CHEMICAL = "chemical"
    TEXT = "text"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# =============================================================================
# Payload
# =============================================================================


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SearchParameters(_Payload):
    """Parameters of a terminal query node; which ones apply depends on the service."""

    value: str | int | float | list[str] | None = None
    sequence_type: SequenceType | None = None
    evalue_cutoff: float | None = None
    identity_cutoff: float | None = None
    operator: Operator | None = None
    # https://search.rcsb.org/structure-search-attributes.html
    attribute: str | None = None
    pattern: str | None = None


class SearchQuery(_Payload):
    type_: NodeType = Field(NodeType.TERMINAL, alias="type")
    service: Service = Service.TEXT
    parameters: SearchParameters


class Sort(_Payload):
    sort_by: str
    direction: SortDirection = SortDirection.DESC
    random_seed: int | None = None


class Paginate(_Payload):
    start: int = 0
    rows: int = 10


class RequestOptions(_Payload):
    scoring_strategy: ScoringStrategy | None = None
    sort: list[Sort] | None = None
    paginate: Paginate | None = None


class SearchPayload(_Payload):
    """Top-level Search API request body."""

    return_type: ReturnType = ReturnType.ENTRY
    query: SearchQuery
    request_options: RequestOptions | None = None
    request_info: dict | None = None

    def to_json(self) -> dict:
        """Wire form: aliases applied, unset optional fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
