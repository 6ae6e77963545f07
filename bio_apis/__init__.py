"""
Typed async clients for public biology and chemistry databases.

Usage:
    from bio_apis import RcsbClient, PubChemClient, NotFoundError

    async with RcsbClient() as rcsb:
        try:
            meta = await rcsb.load_metadata("1ba3")
        except NotFoundError:
            ...

Every client method sends at most one request (RcsbClient.get_files_available
sends one HEAD per file kind) and raises an ApiError subclass on failure.
"""

from bio_apis.amber_geostd import AmberGeostdClient
from bio_apis.drugbank import DrugBankClient
from bio_apis.exceptions import (
    ApiError,
    AuthenticationError,
    DecodeError,
    InvalidInputError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RemoteError,
    ServiceUnavailableError,
    TimeoutError,
)
from bio_apis.lmsd import LmsdClient
from bio_apis.ncbi import BlastClient
from bio_apis.pdbe import PdbeClient
from bio_apis.pubchem import PubChemClient, PubChemQuery
from bio_apis.rcsb import RcsbClient
from bio_apis.schemas import DataSource, Record
from bio_apis.settings import ApiSettings, api_settings

__version__ = "0.1.0"

__all__ = [
    # Clients
    "RcsbClient",
    "PubChemClient",
    "PubChemQuery",
    "PdbeClient",
    "DrugBankClient",
    "LmsdClient",
    "AmberGeostdClient",
    "BlastClient",
    # Shared
    "DataSource",
    "Record",
    "ApiSettings",
    "api_settings",
    # Exceptions
    "ApiError",
    "InvalidInputError",
    "NetworkError",
    "TimeoutError",
    "RemoteError",
    "NotFoundError",
    "AuthenticationError",
    "RateLimitError",
    "ServiceUnavailableError",
    "DecodeError",
]
