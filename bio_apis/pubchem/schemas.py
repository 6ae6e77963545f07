"""
PubChem response records.

Field aliases are the PUG REST JSON keys, so records validate straight from
the response body.
"""

from decimal import Decimal

from pydantic import Field, field_validator

from bio_apis.schemas import Record


# =============================================================================
# Property table
# =============================================================================


class CompoundProperties(Record):
    """
    One row of a PUG REST property table.

    Only CID is guaranteed; every other column is present only when requested.
    """

    cid: int = Field(..., alias="CID")

    # --- Structure ---
    molecular_formula: str | None = Field(None, alias="MolecularFormula")
    smiles: str | None = Field(None, alias="SMILES")
    connectivity_smiles: str | None = Field(None, alias="ConnectivitySMILES")
    canonical_smiles: str | None = Field(None, alias="CanonicalSMILES")
    isomeric_smiles: str | None = Field(None, alias="IsomericSMILES")
    inchi: str | None = Field(None, alias="InChI")
    inchikey: str | None = Field(None, alias="InChIKey", min_length=27, max_length=27)

    # --- Names ---
    iupac_name: str | None = Field(None, alias="IUPACName")
    title: str | None = Field(None, alias="Title")

    # --- Molecular Properties ---
    molecular_weight: Decimal | None = Field(None, alias="MolecularWeight")
    exact_mass: Decimal | None = Field(None, alias="ExactMass")
    monoisotopic_mass: Decimal | None = Field(None, alias="MonoisotopicMass")
    xlogp: Decimal | None = Field(None, alias="XLogP", description="XLogP3")
    tpsa: Decimal | None = Field(None, alias="TPSA", description="Topological polar surface area")
    complexity: Decimal | None = Field(None, alias="Complexity")
    charge: int | None = Field(None, alias="Charge")

    # --- Counts ---
    hbond_donor_count: int | None = Field(None, alias="HBondDonorCount")
    hbond_acceptor_count: int | None = Field(None, alias="HBondAcceptorCount")
    rotatable_bond_count: int | None = Field(None, alias="RotatableBondCount")
    heavy_atom_count: int | None = Field(None, alias="HeavyAtomCount")
    atom_stereo_count: int | None = Field(None, alias="AtomStereoCount")
    defined_atom_stereo_count: int | None = Field(None, alias="DefinedAtomStereoCount")
    undefined_atom_stereo_count: int | None = Field(None, alias="UndefinedAtomStereoCount")
    bond_stereo_count: int | None = Field(None, alias="BondStereoCount")
    covalent_unit_count: int | None = Field(None, alias="CovalentUnitCount")

    @field_validator(
        "molecular_weight", "exact_mass", "monoisotopic_mass", "xlogp", "tpsa", "complexity", mode="before"
    )
    @classmethod
    def float_as_decimal_text(cls, v):
        # Decimal from the printed value, not the binary float
        if isinstance(v, float):
            return str(v)
        return v


class PropertyTable(Record):
    properties: tuple[CompoundProperties, ...] = Field(..., alias="Properties")


class PropertyTableResponse(Record):
    property_table: PropertyTable = Field(..., alias="PropertyTable")


# =============================================================================
# Identifier and information lists
# =============================================================================


class IdentifierList(Record):
    cid: tuple[int, ...] | None = Field(None, alias="CID")
    sid: tuple[int, ...] | None = Field(None, alias="SID")
    aid: tuple[int, ...] | None = Field(None, alias="AID")


class IdentifierListResponse(Record):
    identifier_list: IdentifierList = Field(..., alias="IdentifierList")


class Information(Record):
    cid: int | None = Field(None, alias="CID")
    sid: int | None = Field(None, alias="SID")
    synonym: tuple[str, ...] | None = Field(None, alias="Synonym")


class InformationList(Record):
    information: tuple[Information, ...] = Field(..., alias="Information")


class InformationListResponse(Record):
    information_list: InformationList = Field(..., alias="InformationList")
