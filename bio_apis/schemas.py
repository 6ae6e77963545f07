"""
Shared schema pieces for all provider modules.

Provider-specific records live next to their client; this module only holds
what every provider needs.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DataSource(str, Enum):
    """External data source identifier."""

    RCSB = "rcsb"
    PUBCHEM = "pubchem"
    PDBE = "pdbe"
    DRUGBANK = "drugbank"
    LMSD = "lmsd"
    AMBER_GEOSTD = "amber_geostd"
    NCBI_BLAST = "ncbi_blast"


class Record(BaseModel):
    """
    Base class for parsed response records.

    Records are immutable once built. Keys the provider sends that we don't
    model are dropped; keys we model but the provider omitted are either
    optional (None) or a decode failure. Collection fields are tuples.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
