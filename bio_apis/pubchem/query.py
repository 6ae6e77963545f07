"""
PubChem PUG REST query builder.

A PUG REST URL has four axes:

    {base}/{domain}/{namespace}/{identifiers}/{operation}/{output}[?options]

This module models each axis as an enum or a small frozen variant and checks
the combination when the query is constructed, so a request PubChem would
reject with HTTP 400 cannot be built in the first place.

See https://pubchem.ncbi.nlm.nih.gov/docs/pug-rest
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union
from urllib.parse import quote, urlencode

from bio_apis.exceptions import InvalidInputError
from bio_apis.settings import api_settings
from bio_apis.validation import validate_positive_int


# =============================================================================
# Axes
# =============================================================================


class Domain(str, Enum):
    COMPOUND = "compound"
    SUBSTANCE = "substance"
    ASSAY = "assay"


class IdNamespace(str, Enum):
    """Namespaces that interpret the identifiers directly."""

    CID = "cid"
    SID = "sid"
    AID = "aid"
    NAME = "name"
    SMILES = "smiles"
    INCHI = "inchi"
    INCHIKEY = "inchikey"
    SDF = "sdf"
    FORMULA = "formula"
    FASTFORMULA = "fastformula"
    LISTKEY = "listkey"


class StructureSearchKind(str, Enum):
    """Legacy (asynchronous) structure searches; results come back as a ListKey."""

    SUBSTRUCTURE = "substructure"
    SUPERSTRUCTURE = "superstructure"
    SIMILARITY = "similarity"
    IDENTITY = "identity"


class StructureInput(str, Enum):
    SMILES = "smiles"
    INCHI = "inchi"
    SDF = "sdf"
    CID = "cid"


class FastSearchKind(str, Enum):
    """Synchronous structure searches."""

    FASTIDENTITY = "fastidentity"
    FASTSIMILARITY_2D = "fastsimilarity_2d"
    FASTSIMILARITY_3D = "fastsimilarity_3d"
    FASTSUBSTRUCTURE = "fastsubstructure"
    FASTSUPERSTRUCTURE = "fastsuperstructure"


class FastSearchInput(str, Enum):
    SMILES = "smiles"
    SMARTS = "smarts"
    INCHI = "inchi"
    SDF = "sdf"
    CID = "cid"


class Operation(str, Enum):
    """Operations without arguments."""

    RECORD = "record"
    SYNONYMS = "synonyms"
    CIDS = "cids"
    SIDS = "sids"
    AIDS = "aids"
    ASSAYSUMMARY = "assaysummary"
    DESCRIPTION = "description"
    CLASSIFICATION = "classification"
    CONFORMERS = "conformers"
    CONCISE = "concise"
    SUMMARY = "summary"


class CompoundProperty(str, Enum):
    """Property table columns (compound domain only)."""

    MOLECULAR_FORMULA = "MolecularFormula"
    MOLECULAR_WEIGHT = "MolecularWeight"
    SMILES = "SMILES"
    CONNECTIVITY_SMILES = "ConnectivitySMILES"
    CANONICAL_SMILES = "CanonicalSMILES"
    ISOMERIC_SMILES = "IsomericSMILES"
    INCHI = "InChI"
    INCHIKEY = "InChIKey"
    IUPAC_NAME = "IUPACName"
    TITLE = "Title"
    XLOGP = "XLogP"
    EXACT_MASS = "ExactMass"
    MONOISOTOPIC_MASS = "MonoisotopicMass"
    TPSA = "TPSA"
    COMPLEXITY = "Complexity"
    CHARGE = "Charge"
    HBOND_DONOR_COUNT = "HBondDonorCount"
    HBOND_ACCEPTOR_COUNT = "HBondAcceptorCount"
    ROTATABLE_BOND_COUNT = "RotatableBondCount"
    HEAVY_ATOM_COUNT = "HeavyAtomCount"
    ISOTOPE_ATOM_COUNT = "IsotopeAtomCount"
    ATOM_STEREO_COUNT = "AtomStereoCount"
    DEFINED_ATOM_STEREO_COUNT = "DefinedAtomStereoCount"
    UNDEFINED_ATOM_STEREO_COUNT = "UndefinedAtomStereoCount"
    BOND_STEREO_COUNT = "BondStereoCount"
    DEFINED_BOND_STEREO_COUNT = "DefinedBondStereoCount"
    UNDEFINED_BOND_STEREO_COUNT = "UndefinedBondStereoCount"
    COVALENT_UNIT_COUNT = "CovalentUnitCount"
    PATENT_COUNT = "PatentCount"
    PATENT_FAMILY_COUNT = "PatentFamilyCount"
    LITERATURE_COUNT = "LiteratureCount"
    VOLUME_3D = "Volume3D"
    CONFORMER_COUNT_3D = "ConformerCount3D"
    FINGERPRINT_2D = "Fingerprint2D"


class XrefType(str, Enum):
    REGISTRY_ID = "RegistryID"
    RN = "RN"
    PUBMED_ID = "PubMedID"
    MMDB_ID = "MMDBID"
    PROTEIN_GI = "ProteinGI"
    NUCLEOTIDE_GI = "NucleotideGI"
    TAXONOMY_ID = "TaxonomyID"
    MIM_ID = "MIMID"
    GENE_ID = "GeneID"
    PROBE_ID = "ProbeID"
    PATENT_ID = "PatentID"


class OutputFormat(str, Enum):
    JSON = "JSON"
    XML = "XML"
    SDF = "SDF"
    CSV = "CSV"
    TXT = "TXT"
    PNG = "PNG"
    ASNT = "ASNT"


def _coerce(enum_cls, value, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidInputError(
            f"Invalid {field_name} {value!r}; expected one of: {allowed}",
            field=field_name,
        ) from None


# =============================================================================
# Parametrised namespace / operation variants
# =============================================================================


@dataclass(frozen=True)
class StructureSearch:
    """`{kind}/{input}` namespace, e.g. similarity/smiles."""

    kind: StructureSearchKind
    input: StructureInput

    def __post_init__(self):
        object.__setattr__(self, "kind", _coerce(StructureSearchKind, self.kind, "structure search kind"))
        object.__setattr__(self, "input", _coerce(StructureInput, self.input, "structure search input"))

    @property
    def path(self) -> str:
        return f"{self.kind.value}/{self.input.value}"


@dataclass(frozen=True)
class FastSearch:
    """`{kind}/{input}` namespace, e.g. fastsimilarity_2d/cid."""

    kind: FastSearchKind
    input: FastSearchInput

    def __post_init__(self):
        object.__setattr__(self, "kind", _coerce(FastSearchKind, self.kind, "fast search kind"))
        object.__setattr__(self, "input", _coerce(FastSearchInput, self.input, "fast search input"))
        if self.input is FastSearchInput.SMARTS and self.kind not in (
            FastSearchKind.FASTSUBSTRUCTURE,
            FastSearchKind.FASTSUPERSTRUCTURE,
        ):
            raise InvalidInputError(
                f"SMARTS input is only supported by substructure/superstructure searches, not {self.kind.value}",
                field="namespace",
            )

    @property
    def path(self) -> str:
        return f"{self.kind.value}/{self.input.value}"


@dataclass(frozen=True)
class Property:
    """`property/{names}` operation."""

    names: tuple[CompoundProperty, ...]

    def __post_init__(self):
        if isinstance(self.names, (str, CompoundProperty)):
            names = (self.names,)
        else:
            names = tuple(self.names)
        if not names:
            raise InvalidInputError("At least one property name is required", field="operation")
        object.__setattr__(
            self, "names", tuple(_coerce(CompoundProperty, n, "property") for n in names)
        )

    @property
    def path(self) -> str:
        return "property/" + ",".join(n.value for n in self.names)


@dataclass(frozen=True)
class Xrefs:
    """`xrefs/{types}` operation."""

    types: tuple[XrefType, ...]

    def __post_init__(self):
        if isinstance(self.types, (str, XrefType)):
            types = (self.types,)
        else:
            types = tuple(self.types)
        if not types:
            raise InvalidInputError("At least one xref type is required", field="operation")
        object.__setattr__(self, "types", tuple(_coerce(XrefType, t, "xref type") for t in types))

    @property
    def path(self) -> str:
        return "xrefs/" + ",".join(t.value for t in self.types)


Namespace = Union[IdNamespace, StructureSearch, FastSearch]
QueryOperation = Union[Operation, Property, Xrefs]


# =============================================================================
# Legality tables
# =============================================================================

NAMESPACES_BY_DOMAIN: dict[Domain, frozenset[IdNamespace]] = {
    Domain.COMPOUND: frozenset(
        {
            IdNamespace.CID,
            IdNamespace.NAME,
            IdNamespace.SMILES,
            IdNamespace.INCHI,
            IdNamespace.INCHIKEY,
            IdNamespace.SDF,
            IdNamespace.FORMULA,
            IdNamespace.FASTFORMULA,
            IdNamespace.LISTKEY,
        }
    ),
    Domain.SUBSTANCE: frozenset({IdNamespace.SID, IdNamespace.NAME, IdNamespace.LISTKEY}),
    Domain.ASSAY: frozenset({IdNamespace.AID, IdNamespace.LISTKEY}),
}

OPERATIONS_BY_DOMAIN: dict[Domain, frozenset[Operation]] = {
    Domain.COMPOUND: frozenset(
        {
            Operation.RECORD,
            Operation.SYNONYMS,
            Operation.CIDS,
            Operation.SIDS,
            Operation.AIDS,
            Operation.ASSAYSUMMARY,
            Operation.DESCRIPTION,
            Operation.CLASSIFICATION,
            Operation.CONFORMERS,
        }
    ),
    Domain.SUBSTANCE: frozenset(
        {
            Operation.RECORD,
            Operation.SYNONYMS,
            Operation.CIDS,
            Operation.SIDS,
            Operation.AIDS,
            Operation.ASSAYSUMMARY,
            Operation.DESCRIPTION,
            Operation.CLASSIFICATION,
        }
    ),
    Domain.ASSAY: frozenset(
        {
            Operation.RECORD,
            Operation.CONCISE,
            Operation.CIDS,
            Operation.SIDS,
            Operation.AIDS,
            Operation.DESCRIPTION,
            Operation.SUMMARY,
            Operation.CLASSIFICATION,
        }
    ),
}

# Operations whose result is a flat list, which PubChem can also serve as TXT
_LIST_OPERATIONS = frozenset(
    {Operation.CIDS, Operation.SIDS, Operation.AIDS, Operation.SYNONYMS, Operation.CONFORMERS}
)

# Namespaces whose identifiers are numeric and may be batched with commas
_NUMERIC_NAMESPACES = frozenset({IdNamespace.CID, IdNamespace.SID, IdNamespace.AID})
_BATCHABLE_NAMESPACES = _NUMERIC_NAMESPACES | {IdNamespace.INCHIKEY}

# Inputs that carry slashes / newlines and must be sent in a POST body
_POST_ONLY_INPUTS = frozenset({"inchi", "sdf"})


# =============================================================================
# Query
# =============================================================================


@dataclass(frozen=True)
class PubChemRequest:
    """A fully built request, ready for the HTTP layer."""

    method: str
    url: str
    data: dict[str, str] | None = None


@dataclass(frozen=True)
class PubChemQuery:
    """
    A validated PUG REST query.

    Example:
        # Direct lookup of two compounds' properties
        query = PubChemQuery(
            domain=Domain.COMPOUND,
            namespace=IdNamespace.CID,
            identifiers=(2244, 3672),
            operation=Property(("MolecularWeight", "XLogP")),
        )

        # 2D similarity search from a SMILES string
        query = PubChemQuery(
            domain=Domain.COMPOUND,
            namespace=FastSearch(FastSearchKind.FASTSIMILARITY_2D, FastSearchInput.SMILES),
            identifiers=("CC(=O)OC1=CC=CC=C1C(=O)O",),
            operation=Operation.CIDS,
            options={"Threshold": 95},
        )

        request = query.build()

    Raises:
        InvalidInputError: Unknown axis value, illegal axis combination, or
            identifiers that don't fit the namespace
    """

    domain: Domain
    namespace: Namespace
    identifiers: tuple[str | int, ...]
    operation: QueryOperation = Operation.RECORD
    output: OutputFormat = OutputFormat.JSON
    options: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "domain", _coerce(Domain, self.domain, "domain"))
        if isinstance(self.namespace, str) and not isinstance(self.namespace, IdNamespace):
            object.__setattr__(self, "namespace", _coerce(IdNamespace, self.namespace, "namespace"))
        if isinstance(self.operation, str) and not isinstance(self.operation, Operation):
            object.__setattr__(self, "operation", _coerce(Operation, self.operation, "operation"))
        object.__setattr__(self, "output", _coerce(OutputFormat, self.output, "output"))

        self._check_namespace()
        object.__setattr__(self, "identifiers", self._normalize_identifiers())
        object.__setattr__(self, "options", self._normalize_options())
        self._check_operation()
        self._check_output()

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _normalize_identifiers(self) -> tuple[str, ...]:
        ids = self.identifiers
        if isinstance(ids, (str, int)):
            ids = (ids,)
        ids = tuple(ids)
        if not ids:
            raise InvalidInputError("At least one identifier is required", field="identifiers")

        numeric = self.namespace in _NUMERIC_NAMESPACES or (
            isinstance(self.namespace, (StructureSearch, FastSearch)) and self.namespace.input.value == "cid"
        )
        normalized = []
        for value in ids:
            if numeric:
                label = self.namespace.value if isinstance(self.namespace, IdNamespace) else "cid"
                normalized.append(str(validate_positive_int(value, label)))
                continue
            if not isinstance(value, str) or not value.strip():
                raise InvalidInputError(f"Identifier must be a non-empty string, got {value!r}", field="identifiers")
            # Leading blank lines are part of a molfile header
            normalized.append(value if self._input_kind == "sdf" else value.strip())

        if len(normalized) > 1 and self.namespace not in _BATCHABLE_NAMESPACES:
            raise InvalidInputError(
                f"Namespace {self._namespace_path} accepts a single identifier, got {len(normalized)}",
                field="identifiers",
            )
        return tuple(normalized)

    def _normalize_options(self) -> tuple[tuple[str, str], ...]:
        opts = self.options
        if isinstance(opts, dict):
            opts = opts.items()
        return tuple(sorted((str(k), str(v)) for k, v in opts))

    def _check_namespace(self) -> None:
        ns = self.namespace
        if isinstance(ns, (StructureSearch, FastSearch)):
            if self.domain is not Domain.COMPOUND:
                raise InvalidInputError(
                    f"Structure search ({ns.path}) is only available for the compound domain, "
                    f"not {self.domain.value}",
                    field="namespace",
                )
            return
        if not isinstance(ns, IdNamespace):
            raise InvalidInputError(f"Invalid namespace {ns!r}", field="namespace")
        if ns not in NAMESPACES_BY_DOMAIN[self.domain]:
            raise InvalidInputError(
                f"Namespace {ns.value} is not valid for the {self.domain.value} domain",
                field="namespace",
            )

    def _check_operation(self) -> None:
        op = self.operation
        if isinstance(op, Property):
            if self.domain is not Domain.COMPOUND:
                raise InvalidInputError("Property tables are only available for compounds", field="operation")
            return
        if isinstance(op, Xrefs):
            if self.domain is Domain.ASSAY:
                raise InvalidInputError("Xrefs are only available for compounds and substances", field="operation")
            return
        if not isinstance(op, Operation):
            raise InvalidInputError(f"Invalid operation {op!r}", field="operation")
        if op not in OPERATIONS_BY_DOMAIN[self.domain]:
            raise InvalidInputError(
                f"Operation {op.value} is not valid for the {self.domain.value} domain",
                field="operation",
            )

    def _check_output(self) -> None:
        out = self.output
        op = self.operation
        if out in (OutputFormat.JSON, OutputFormat.XML):
            return

        if out in (OutputFormat.SDF, OutputFormat.PNG):
            ok = op is Operation.RECORD and self.domain is not Domain.ASSAY
        elif out is OutputFormat.CSV:
            ok = isinstance(op, Property) or op is Operation.CONCISE
        elif out is OutputFormat.TXT:
            ok = op in _LIST_OPERATIONS or (isinstance(op, Property) and len(op.names) == 1)
        else:  # ASNT
            ok = op in (Operation.RECORD, Operation.DESCRIPTION)

        if not ok:
            raise InvalidInputError(
                f"Output {out.value} is not available for {self._operation_path} on {self.domain.value}",
                field="output",
            )

    # -------------------------------------------------------------------------
    # URL building
    # -------------------------------------------------------------------------

    @property
    def _namespace_path(self) -> str:
        ns = self.namespace
        return ns.path if isinstance(ns, (StructureSearch, FastSearch)) else ns.value

    @property
    def _operation_path(self) -> str:
        op = self.operation
        return op.path if isinstance(op, (Property, Xrefs)) else op.value

    @property
    def _input_kind(self) -> str:
        """Name of the form field PubChem expects when identifiers go in a POST body."""
        ns = self.namespace
        return ns.input.value if isinstance(ns, (StructureSearch, FastSearch)) else ns.value

    @property
    def uses_post(self) -> bool:
        kind = self._input_kind
        if kind in _POST_ONLY_INPUTS:
            return True
        # Slashes in SMILES stereo bonds can't travel inside a path segment
        return kind in ("smiles", "smarts") and any("/" in v for v in self.identifiers)

    def build(self, base_url: str | None = None) -> PubChemRequest:
        """Build the request. Deterministic for equal queries."""
        base = (base_url or api_settings.pubchem_rest_url).rstrip("/")
        prefix = f"{base}/{self.domain.value}/{self._namespace_path}"
        suffix = f"{self._operation_path}/{self.output.value}"
        query_string = f"?{urlencode(self.options)}" if self.options else ""

        if self.uses_post:
            return PubChemRequest(
                method="POST",
                url=f"{prefix}/{suffix}{query_string}",
                data={self._input_kind: self.identifiers[0]},
            )

        ids = ",".join(quote(v, safe="") for v in self.identifiers)
        return PubChemRequest(method="GET", url=f"{prefix}/{ids}/{suffix}{query_string}")
