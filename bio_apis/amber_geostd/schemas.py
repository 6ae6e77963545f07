"""Amber GeoStd records."""

from bio_apis.schemas import Record


class GeostdItem(Record):
    """A molecule in the collection, and which parameter files it ships with."""

    ident: str
    frcmod_avail: bool
    lib_avail: bool


class GeostdData(Record):
    """Text content of a molecule's Mol2 file, plus FRCMOD and Lib when available."""

    mol2: str
    frcmod: str | None = None
    lib: str | None = None


class GeostdItemResponse(Record):
    result: tuple[GeostdItem, ...]
