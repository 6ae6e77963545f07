"""PDBe package: entry and chemical component summaries, component SDF files."""

from bio_apis.pdbe.client import PdbeClient, overview_url, sdf_url
from bio_apis.pdbe.schemas import Assembly, CompoundSummary, EntrySummary

__all__ = [
    "PdbeClient",
    "sdf_url",
    "overview_url",
    "EntrySummary",
    "CompoundSummary",
    "Assembly",
]
