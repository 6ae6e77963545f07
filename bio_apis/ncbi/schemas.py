"""NCBI BLAST enums and records."""

from enum import Enum

from bio_apis.schemas import Record


class BlastProgram(str, Enum):
    BLASTP = "blastp"
    BLASTN = "blastn"
    BLASTX = "blastx"
    TBLASTN = "tblastn"
    TBLASTX = "tblastx"


class BlastFormat(str, Enum):
    """FORMAT_TYPE values for retrieving results."""

    TEXT = "Text"
    XML = "XML"
    JSON2_S = "JSON2_S"
    HTML = "HTML"


class BlastStatus(str, Enum):
    QUEUED = "queued"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


class BlastJob(Record):
    """A submitted search. Only the RID is needed to poll it."""

    rid: str
    estimated_seconds: int | None = None
    status: BlastStatus = BlastStatus.QUEUED


class BlastPoll(Record):
    """
    One status check of a submitted search.

    payload holds the formatted results when status is DONE and is None
    otherwise.
    """

    rid: str
    status: BlastStatus
    payload: str | None = None
