"""Amber GeoStd package: Mol2 / FRCMOD / Lib files for small molecules."""

from bio_apis.amber_geostd.client import AmberGeostdClient
from bio_apis.amber_geostd.schemas import GeostdData, GeostdItem

__all__ = ["AmberGeostdClient", "GeostdItem", "GeostdData"]
