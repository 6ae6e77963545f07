"""
NCBI BLAST URL API client.

BLAST searches are asynchronous on NCBI's side: `submit` queues a search and
returns its request ID (RID); `poll` checks it once. Callers decide how long
to wait between polls; NCBI asks for no more than one poll per minute per
RID.

See https://blast.ncbi.nlm.nih.gov/doc/blast-help/developerinfo.html
"""

import html
import logging
import re
from urllib.parse import urlencode

from bio_apis import browser
from bio_apis.base import BaseClient
from bio_apis.exceptions import DecodeError, InvalidInputError, NotFoundError, RemoteError
from bio_apis.ncbi.schemas import BlastFormat, BlastJob, BlastPoll, BlastProgram, BlastStatus
from bio_apis.schemas import DataSource
from bio_apis.settings import api_settings
from bio_apis.validation import validate_blast_rid, validate_positive_int, validate_sequence

logger = logging.getLogger(__name__)

# Submit and poll pages carry their machine-readable part in a comment:
#   <!--QBlastInfoBegin
#       RID = 8GWH2D4X016
#       RTOE = 21
#   QBlastInfoEnd
#   -->
_RID_RE = re.compile(r"^\s*RID = (\S+)", re.MULTILINE)
_RTOE_RE = re.compile(r"^\s*RTOE = (\d+)", re.MULTILINE)
_STATUS_RE = re.compile(r"^\s*Status=(\w+)", re.MULTILINE)
_ERROR_RE = re.compile(r'class="error[^"]*"[^>]*>(.*?)</', re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")

# Database searched when none is given
DEFAULT_DATABASES = {
    BlastProgram.BLASTP: "nr",
    BlastProgram.BLASTX: "nr",
    BlastProgram.BLASTN: "nt",
    BlastProgram.TBLASTN: "nt",
    BlastProgram.TBLASTX: "nt",
}


class BlastClient(BaseClient):
    """
    HTTP client for NCBI BLAST.

    Example:
        async with BlastClient() as client:
            job = await client.submit("MKTAYIAKQRQISFVKSHFSRQ")
            await asyncio.sleep(job.estimated_seconds or 60)
            result = await client.poll(job.rid)
            while result.status is BlastStatus.RUNNING:
                await asyncio.sleep(60)
                result = await client.poll(job.rid)
    """

    source = DataSource.NCBI_BLAST

    async def submit(
        self,
        sequence: str,
        program: BlastProgram = BlastProgram.BLASTP,
        database: str | None = None,
        expect: float | None = None,
        hitlist_size: int | None = None,
    ) -> BlastJob:
        """
        Queue a BLAST search.

        Args:
            sequence: Query sequence (protein or nucleotide letters)
            program: BLAST program
            database: Database name (default: nr for protein, nt for nucleotide)
            expect: E-value threshold
            hitlist_size: Maximum number of hits to keep

        Raises:
            RemoteError: NCBI rejected the submission (message from the page)
            DecodeError: The page carried no RID
        """
        form = put_params(sequence, program, database, expect, hitlist_size)
        body = await self.post_form_text(api_settings.blast_url, form, resource_type="blast submission")

        rid_match = _RID_RE.search(body)
        if rid_match is None:
            message = _error_message(body)
            if message:
                raise RemoteError(f"Submission rejected: {message}", source=self.source.value, response_body=body)
            raise DecodeError("No RID in submission response", source=self.source.value, field="RID")

        rtoe_match = _RTOE_RE.search(body)
        job = BlastJob(
            rid=rid_match.group(1),
            estimated_seconds=int(rtoe_match.group(1)) if rtoe_match else None,
        )
        logger.info(f"[{self.source.value}] Submitted {form['PROGRAM']} search, RID {job.rid}")
        return job

    async def poll(self, rid: str, format_type: BlastFormat = BlastFormat.TEXT) -> BlastPoll:
        """
        Check a submitted search once.

        Returns RUNNING (no payload) while NCBI is still working, DONE with the
        formatted results, or FAILED.

        Raises:
            NotFoundError: NCBI doesn't know the RID (unknown or expired)
        """
        rid = validate_blast_rid(rid)
        body = await self.get_text(
            api_settings.blast_url,
            params=get_params(rid, format_type),
            resource_type="blast search",
            resource_id=rid,
        )

        if not body.strip():
            return BlastPoll(rid=rid, status=BlastStatus.RUNNING)

        status_match = _STATUS_RE.search(body)
        status = status_match.group(1).upper() if status_match else "READY"

        if status == "WAITING":
            return BlastPoll(rid=rid, status=BlastStatus.RUNNING)
        if status == "READY":
            return BlastPoll(rid=rid, status=BlastStatus.DONE, payload=body)
        if status == "FAILED":
            logger.warning(f"[{self.source.value}] Search {rid} failed")
            return BlastPoll(rid=rid, status=BlastStatus.FAILED)
        if status == "UNKNOWN":
            raise NotFoundError("blast search", rid, source=self.source.value, status_code=None)

        raise DecodeError(f"Unrecognised search status {status!r}", source=self.source.value, field="Status")

    # =========================================================================
    # Browser
    # =========================================================================

    def open_search(self, sequence: str, program: BlastProgram = BlastProgram.BLASTP) -> bool:
        """Open the BLAST web form pre-filled with a sequence."""
        return browser.open_url(search_page_url(sequence, program))

    def open_results(self, rid: str) -> bool:
        return browser.open_url(results_page_url(rid))


# =============================================================================
# Parameter builders
# =============================================================================


def put_params(
    sequence: str,
    program: BlastProgram = BlastProgram.BLASTP,
    database: str | None = None,
    expect: float | None = None,
    hitlist_size: int | None = None,
) -> dict[str, str]:
    """Form fields for a CMD=Put submission."""
    sequence = validate_sequence(sequence)
    program = _program(program)

    params = {
        "CMD": "Put",
        "PROGRAM": program.value,
        "DATABASE": database.strip() if database else DEFAULT_DATABASES[program],
        "QUERY": sequence,
    }
    if not params["DATABASE"]:
        raise InvalidInputError("database must not be empty", field="database")
    if expect is not None:
        if expect <= 0:
            raise InvalidInputError("expect must be > 0", field="expect")
        params["EXPECT"] = str(expect)
    if hitlist_size is not None:
        params["HITLIST_SIZE"] = str(validate_positive_int(hitlist_size, "hitlist_size"))
    return params


def get_params(rid: str, format_type: BlastFormat = BlastFormat.TEXT) -> dict[str, str]:
    """Query parameters for a CMD=Get poll."""
    try:
        format_type = BlastFormat(format_type)
    except ValueError:
        raise InvalidInputError(f"Invalid format_type {format_type!r}", field="format_type") from None
    return {"CMD": "Get", "RID": validate_blast_rid(rid), "FORMAT_TYPE": format_type.value}


def search_page_url(sequence: str, program: BlastProgram = BlastProgram.BLASTP) -> str:
    params = {
        "PAGE_TYPE": "BlastSearch",
        "PROGRAM": _program(program).value,
        "QUERY": validate_sequence(sequence),
    }
    return f"{api_settings.blast_url}?{urlencode(params)}"


def results_page_url(rid: str) -> str:
    return f"{api_settings.blast_url}?{urlencode({'CMD': 'Get', 'RID': validate_blast_rid(rid)})}"


def _program(program: BlastProgram | str) -> BlastProgram:
    try:
        return BlastProgram(program)
    except ValueError:
        allowed = ", ".join(p.value for p in BlastProgram)
        raise InvalidInputError(f"Invalid program {program!r}; expected one of: {allowed}", field="program") from None


def _error_message(body: str) -> str | None:
    match = _ERROR_RE.search(body)
    if match is None:
        return None
    text = html.unescape(_TAG_RE.sub("", match.group(1))).strip()
    return " ".join(text.split()) or None
