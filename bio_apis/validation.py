"""
Identifier validation shared by the provider modules.

Each validator returns the normalized identifier or raises InvalidInputError,
so bad input never reaches the network.
"""

import re

from bio_apis.exceptions import InvalidInputError

# Legacy 4-character PDB IDs ("1ba3") and extended IDs ("pdb_00001ba3")
_PDB_ID_RE = re.compile(r"^(?:[0-9][A-Za-z0-9]{3}|pdb_[A-Za-z0-9]{8})$", re.IGNORECASE)
_DRUGBANK_ID_RE = re.compile(r"^DB\d{5}$", re.IGNORECASE)
_CCD_ID_RE = re.compile(r"^[A-Za-z0-9]{1,5}$")
_LMSD_ID_RE = re.compile(r"^LM[A-Z]{2}[A-Z0-9]{4,10}$", re.IGNORECASE)
_GEOSTD_IDENT_RE = re.compile(r"^[A-Za-z0-9_]{1,10}$")
_BLAST_RID_RE = re.compile(r"^[A-Z0-9]{6,20}$")

# IUPAC one-letter codes for amino acids and nucleotides, incl. ambiguity codes,
# stop (*) and gap (-)
_SEQUENCE_RE = re.compile(r"^[ABCDEFGHIKLMNOPQRSTUVWXYZ*\-]+$")


def _require_str(value: object, field: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{field} must be a string, got {type(value).__name__}", field=field)
    value = value.strip()
    if not value:
        raise InvalidInputError(f"{field} must not be empty", field=field)
    return value


def validate_pdb_id(ident: str) -> str:
    """Validate a PDB entry ID; returns it upper-cased ("1BA3", "PDB_00001BA3")."""
    ident = _require_str(ident, "pdb_id")
    if not _PDB_ID_RE.match(ident):
        raise InvalidInputError(f"Invalid PDB ID: {ident!r}", field="pdb_id")
    return ident.upper()


def validate_positive_int(value: int | str, field: str) -> int:
    """Validate a numeric database ID (CID, SID, AID)."""
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be an integer", field=field)
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise InvalidInputError(f"{field} must be numeric, got {value!r}", field=field)
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        raise InvalidInputError(f"{field} must be a positive integer, got {value!r}", field=field)
    return value


def validate_cid(cid: int | str) -> int:
    return validate_positive_int(cid, "cid")


def validate_sid(sid: int | str) -> int:
    return validate_positive_int(sid, "sid")


def validate_aid(aid: int | str) -> int:
    return validate_positive_int(aid, "aid")


def validate_drugbank_id(ident: str) -> str:
    """Validate a DrugBank accession ("DB00945")."""
    ident = _require_str(ident, "drugbank_id")
    if not _DRUGBANK_ID_RE.match(ident):
        raise InvalidInputError(f"Invalid DrugBank ID: {ident!r}", field="drugbank_id")
    return ident.upper()


def validate_ccd_id(ident: str) -> str:
    """Validate a wwPDB Chemical Component Dictionary ID ("ATP", "HEM")."""
    ident = _require_str(ident, "ccd_id")
    if not _CCD_ID_RE.match(ident):
        raise InvalidInputError(f"Invalid chemical component ID: {ident!r}", field="ccd_id")
    return ident.upper()


def validate_lmsd_id(ident: str) -> str:
    """Validate a LIPID MAPS ID ("LMFA01010001")."""
    ident = _require_str(ident, "lmsd_id")
    if not _LMSD_ID_RE.match(ident):
        raise InvalidInputError(f"Invalid LIPID MAPS ID: {ident!r}", field="lmsd_id")
    return ident.upper()


def validate_geostd_ident(ident: str) -> str:
    """Validate an Amber GeoStd / PDBe ligand code. Case is preserved."""
    ident = _require_str(ident, "ident")
    if not _GEOSTD_IDENT_RE.match(ident):
        raise InvalidInputError(f"Invalid GeoStd identifier: {ident!r}", field="ident")
    return ident


def validate_blast_rid(rid: str) -> str:
    """Validate a BLAST request ID."""
    rid = _require_str(rid, "rid").upper()
    if not _BLAST_RID_RE.match(rid):
        raise InvalidInputError(f"Invalid BLAST RID: {rid!r}", field="rid")
    return rid


def validate_sequence(sequence: str) -> str:
    """
    Validate a protein or nucleotide sequence.

    Whitespace (including line breaks) is removed and letters are
    upper-cased. FASTA headers are not accepted.
    """
    sequence = "".join(_require_str(sequence, "sequence").split()).upper()
    if not _SEQUENCE_RE.match(sequence):
        bad = sorted({c for c in sequence if not _SEQUENCE_RE.match(c)})
        raise InvalidInputError(
            f"Sequence contains invalid characters: {''.join(bad)!r}",
            field="sequence",
        )
    return sequence


def validate_search_text(text: str) -> str:
    return _require_str(text, "search_text")
