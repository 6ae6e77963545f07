"""
RCSB response records.

PdbEntry mirrors a subset of the Data API `core/entry` document. Fields the
API may legitimately omit are optional; the handful every entry carries are
required, so a truncated document fails to decode rather than yielding a
half-empty record.
"""

from pydantic import Field, field_validator

from bio_apis.schemas import Record


# =============================================================================
# Data API: core/entry
# =============================================================================


class PdbStruct(Record):
    title: str


class Database2(Record):
    database_code: str
    database_id: str


class Cell(Record):
    angle_alpha: float
    angle_beta: float
    angle_gamma: float
    length_a: float
    length_b: float
    length_c: float
    zpdb: int | None = None


class Citation(Record):
    id: str
    rcsb_is_primary: str
    title: str | None = None
    country: str | None = None
    journal_abbrev: str | None = None
    journal_id_astm: str | None = None
    journal_id_csd: str | None = None
    journal_id_issn: str | None = None
    journal_volume: str | None = None
    page_first: str | None = None
    page_last: str | None = None
    pdbx_database_id_pub_med: int | None = None
    pdbx_database_id_doi: str | None = None
    rcsb_authors: tuple[str, ...] | None = None
    rcsb_journal_abbrev: str | None = None
    year: int | None = None

    @field_validator("journal_volume", "page_first", "page_last", mode="before")
    @classmethod
    def number_as_text(cls, v):
        # Served as int, numeric string or free text ("e1003") depending on the journal
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class PrimaryCitation(Record):
    id: str | None = None
    title: str | None = None
    journal_abbrev: str | None = None
    year: int | None = None
    pdbx_database_id_doi: str | None = None
    pdbx_database_id_pub_med: int | None = None


class Exptl(Record):
    method: str


class PdbxDatabaseStatus(Record):
    status_code: str
    deposit_site: str | None = None
    pdb_format_compatible: str | None = None
    process_site: str | None = None
    recvd_initial_deposition_date: str | None = None
    status_code_sf: str | None = None
    sgentry: str | None = None


class RcsbEntryInfo(Record):
    experimental_method: str
    deposited_polymer_entity_instance_count: int
    polymer_entity_count: int

    resolution_combined: tuple[float, ...] | None = None
    assembly_count: int | None = None
    branched_entity_count: int | None = None
    cis_peptide_count: int | None = None
    deposited_atom_count: int | None = None
    deposited_hydrogen_atom_count: int | None = None
    deposited_model_count: int | None = None
    deposited_modeled_polymer_monomer_count: int | None = None
    deposited_nonpolymer_entity_instance_count: int | None = None
    deposited_polymer_monomer_count: int | None = None
    deposited_solvent_atom_count: int | None = None
    deposited_unmodeled_polymer_monomer_count: int | None = None
    diffrn_radiation_wavelength_maximum: float | None = None
    diffrn_radiation_wavelength_minimum: float | None = None
    disulfide_bond_count: int | None = None
    entity_count: int | None = None
    experimental_method_count: int | None = None
    inter_mol_covalent_bond_count: int | None = None
    inter_mol_metalic_bond_count: int | None = None
    molecular_weight: float | None = None
    na_polymer_entity_types: str | None = None
    nonpolymer_entity_count: int | None = None
    nonpolymer_molecular_weight_maximum: float | None = None
    nonpolymer_molecular_weight_minimum: float | None = None
    polymer_composition: str | None = None
    polymer_entity_count_dna: int | None = None
    polymer_entity_count_rna: int | None = None
    polymer_entity_count_nucleic_acid: int | None = None
    polymer_entity_count_nucleic_acid_hybrid: int | None = None
    polymer_entity_count_protein: int | None = None
    polymer_entity_taxonomy_count: int | None = None
    polymer_molecular_weight_maximum: float | None = None
    polymer_molecular_weight_minimum: float | None = None
    polymer_monomer_count_maximum: int | None = None
    polymer_monomer_count_minimum: int | None = None
    selected_polymer_entity_types: str | None = None


class PdbEntry(Record):
    """Top-level record from the RCSB Data API entry endpoint."""

    rcsb_id: str
    struct_: PdbStruct = Field(..., alias="struct")
    rcsb_entry_info: RcsbEntryInfo
    pdbx_database_status: PdbxDatabaseStatus | None = None
    database2: tuple[Database2, ...] | None = None
    cell: Cell | None = None
    citation: tuple[Citation, ...] | None = None
    exptl: tuple[Exptl, ...] | None = None
    rcsb_primary_citation: PrimaryCitation | None = None


class PdbMetadata(Record):
    """Compact summary of an entry."""

    rcsb_id: str
    title: str
    experimental_method: str
    resolution: float | None = Field(None, description="Best resolution in Å; None for NMR etc.")
    chain_count: int = Field(..., description="Deposited polymer instances (chains)")
    primary_citation_title: str | None = None


# =============================================================================
# Search API
# =============================================================================


class SearchHit(Record):
    identifier: str
    score: float


class SearchResults(Record):
    query_id: str | None
    result_type: str
    total_count: int
    result_set: tuple[SearchHit, ...]


# =============================================================================
# File availability
# =============================================================================


class FilesAvailable(Record):
    """Which auxiliary files the RCSB hosts for an entry."""

    validation: bool
    validation_2fo_fc: bool
    validation_fo_fc: bool
    structure_factors: bool
    map: bool
