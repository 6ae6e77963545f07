"""
PDBe REST API records.

PDBe keys every response by the queried ID (lower-case for entries,
upper-case for chemical components) and wraps the record in a list:

    {"1cbs": [{"title": "...", ...}]}

The client unwraps that envelope; these models describe the inner record.
"""

from pydantic import Field

from bio_apis.schemas import Record


class Assembly(Record):
    assembly_id: str
    name: str | None = None
    form: str | None = None
    preferred: bool | None = None


class EntrySummary(Record):
    """Summary of a PDB entry as served by /pdb/entry/summary."""

    pdb_id: str = Field(..., description="Upper-case ID, filled from the response key")
    title: str
    release_date: str | None = None
    deposition_date: str | None = None
    revision_date: str | None = None
    experimental_method: tuple[str, ...] | None = None
    entry_authors: tuple[str, ...] | None = None
    number_of_entities: dict[str, int] | None = None
    assemblies: tuple[Assembly, ...] | None = None


class CompoundSummary(Record):
    """Summary of a chemical component as served by /pdb/compound/summary."""

    ccd_id: str = Field(..., description="Upper-case ID, filled from the response key")
    name: str
    formula: str | None = None
    weight: float | None = None
    inchi: str | None = None
    inchikey: str | None = None
    formal_charge: int | None = None
    chem_comp_type: str | None = None
    creation_date: str | None = None
    revision_date: str | None = None
