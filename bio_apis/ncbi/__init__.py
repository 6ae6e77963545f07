"""
NCBI package.

Provides:
- BlastClient: Submit/poll BLAST searches through the URL API
- put_params / get_params: The request parameters, for inspection or reuse
"""

from bio_apis.ncbi.blast import (
    DEFAULT_DATABASES,
    BlastClient,
    get_params,
    put_params,
    results_page_url,
    search_page_url,
)
from bio_apis.ncbi.schemas import BlastFormat, BlastJob, BlastPoll, BlastProgram, BlastStatus

__all__ = [
    "BlastClient",
    "put_params",
    "get_params",
    "search_page_url",
    "results_page_url",
    "DEFAULT_DATABASES",
    "BlastProgram",
    "BlastFormat",
    "BlastStatus",
    "BlastJob",
    "BlastPoll",
]
