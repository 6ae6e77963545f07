"""
Tests for the NCBI BLAST client with mocked URL API pages.

Tests:
1. submit parses RID/RTOE from the QBlastInfo block
2. submit surfaces NCBI's error message, or DecodeError without one
3. poll maps WAITING/READY/FAILED/UNKNOWN and blank bodies
4. Parameter builders are deterministic and validate input
"""

import pytest

from bio_apis.exceptions import DecodeError, InvalidInputError, NotFoundError, RemoteError
from bio_apis.ncbi import (
    BlastClient,
    BlastFormat,
    BlastProgram,
    BlastStatus,
    get_params,
    put_params,
    results_page_url,
    search_page_url,
)

BLAST_URL = "https://blast.ncbi.nlm.nih.gov/Blast.cgi"

# =============================================================================
# Mock pages - NCBI BLAST URL API
# =============================================================================

MOCK_SUBMIT_PAGE = """<!DOCTYPE html>
<html><head><title>NCBI Blast</title></head>
<body>
<!--QBlastInfoBegin
    RID = 8GWH2D4X016
    RTOE = 21
QBlastInfoEnd
-->
<form action="Blast.cgi" name="RequestFormattingOptions"></form>
</body></html>
"""

MOCK_SUBMIT_ERROR_PAGE = """<!DOCTYPE html>
<html><body>
<div class="error msInf">Message ID#24 Error: Failed to read the Blast query:
  Protein FASTA provided for nucleotide sequence</div>
</body></html>
"""

MOCK_WAITING_PAGE = """<html><body>
<!--QBlastInfoBegin
    Status=WAITING
QBlastInfoEnd
-->
<p>This page will be automatically updated in <b>16</b> seconds</p>
</body></html>
"""

MOCK_FAILED_PAGE = """<!--QBlastInfoBegin
    Status=FAILED
QBlastInfoEnd
-->"""

MOCK_UNKNOWN_PAGE = """<!--QBlastInfoBegin
    Status=UNKNOWN
QBlastInfoEnd
-->"""

MOCK_TEXT_RESULTS = """BLASTP 2.16.0+
Reference: Stephen F. Altschul, Thomas L. Madden, ...

RID: 8GWH2D4X016

Database: All non-redundant GenBank CDS translations+PDB+SwissProt+PIR+PRF
Query= unnamed protein product

Sequences producing significant alignments:                          (Bits)  Value

WP_000000001.1 hypothetical protein [Escherichia coli]                 45.1    1e-05
"""


@pytest.fixture
def blast(mock_http):
    return BlastClient(client=mock_http)


# =============================================================================
# Test: submit
# =============================================================================


class TestSubmit:
    async def test_returns_rid_and_estimate(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text=MOCK_SUBMIT_PAGE)

        job = await blast.submit("MKTAYIAKQRQISFVKSHFSRQ")

        assert job.rid == "8GWH2D4X016"
        assert job.estimated_seconds == 21
        assert job.status is BlastStatus.QUEUED

        call = mock_http.request.call_args
        assert call.args == ("POST", BLAST_URL)
        assert call.kwargs["data"] == {
            "CMD": "Put",
            "PROGRAM": "blastp",
            "DATABASE": "nr",
            "QUERY": "MKTAYIAKQRQISFVKSHFSRQ",
        }

    async def test_missing_rtoe(self, blast, mock_http, mock_response_factory):
        page = MOCK_SUBMIT_PAGE.replace("    RTOE = 21\n", "")
        mock_http.request.return_value = mock_response_factory(text=page)

        job = await blast.submit("MKTAYIAKQR")

        assert job.estimated_seconds is None

    async def test_error_page_is_remote_error(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text=MOCK_SUBMIT_ERROR_PAGE)

        with pytest.raises(RemoteError) as exc_info:
            await blast.submit("MKTAYIAKQR", program=BlastProgram.BLASTN)

        assert "Protein FASTA provided for nucleotide sequence" in exc_info.value.message

    async def test_page_without_rid_is_decode_error(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text="<html><body>Maintenance</body></html>")

        with pytest.raises(DecodeError):
            await blast.submit("MKTAYIAKQR")

    async def test_invalid_sequence_makes_no_request(self, blast, mock_http):
        with pytest.raises(InvalidInputError):
            await blast.submit(">header\nMKTAYIAKQR")

        mock_http.request.assert_not_called()


# =============================================================================
# Test: poll
# =============================================================================


class TestPoll:
    async def test_waiting_is_running_without_payload(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text=MOCK_WAITING_PAGE)

        result = await blast.poll("8GWH2D4X016")

        assert result.status is BlastStatus.RUNNING
        assert result.payload is None
        call = mock_http.request.call_args
        assert call.args == ("GET", BLAST_URL)
        assert call.kwargs["params"] == {"CMD": "Get", "RID": "8GWH2D4X016", "FORMAT_TYPE": "Text"}

    async def test_blank_body_is_running(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text="  \n")

        result = await blast.poll("8GWH2D4X016")

        assert result.status is BlastStatus.RUNNING
        assert result.payload is None

    async def test_results_without_status_are_done(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text=MOCK_TEXT_RESULTS)

        result = await blast.poll("8gwh2d4x016")

        assert result.rid == "8GWH2D4X016"
        assert result.status is BlastStatus.DONE
        assert result.payload == MOCK_TEXT_RESULTS

    async def test_ready_status_is_done(self, blast, mock_http, mock_response_factory):
        page = "<!--QBlastInfoBegin\n    Status=READY\nQBlastInfoEnd\n-->\n" + MOCK_TEXT_RESULTS
        mock_http.request.return_value = mock_response_factory(text=page)

        result = await blast.poll("8GWH2D4X016", format_type=BlastFormat.TEXT)

        assert result.status is BlastStatus.DONE
        assert "Sequences producing significant alignments" in result.payload

    async def test_failed(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text=MOCK_FAILED_PAGE)

        result = await blast.poll("8GWH2D4X016")

        assert result.status is BlastStatus.FAILED
        assert result.payload is None

    async def test_unknown_rid_is_not_found(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text=MOCK_UNKNOWN_PAGE)

        with pytest.raises(NotFoundError) as exc_info:
            await blast.poll("8GWH2D4X016")

        assert exc_info.value.resource_id == "8GWH2D4X016"

    async def test_unrecognised_status_is_decode_error(self, blast, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text="Status=PAUSED\n")

        with pytest.raises(DecodeError):
            await blast.poll("8GWH2D4X016")

    async def test_invalid_rid_makes_no_request(self, blast, mock_http):
        with pytest.raises(InvalidInputError):
            await blast.poll("")

        mock_http.request.assert_not_called()


# =============================================================================
# Test: parameter builders
# =============================================================================


class TestParams:
    def test_put_params_with_options(self):
        params = put_params(
            "acgt acgt",
            program="blastn",
            expect=0.001,
            hitlist_size=50,
        )

        assert params == {
            "CMD": "Put",
            "PROGRAM": "blastn",
            "DATABASE": "nt",
            "QUERY": "ACGTACGT",
            "EXPECT": "0.001",
            "HITLIST_SIZE": "50",
        }

    def test_put_params_deterministic(self):
        assert put_params("MKTAYIAKQR", database="pdbaa") == put_params("MKTAYIAKQR", database="pdbaa")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"program": "blastz"},
            {"expect": 0},
            {"hitlist_size": 0},
            {"database": "   "},
        ],
    )
    def test_put_params_rejects(self, kwargs):
        with pytest.raises(InvalidInputError):
            put_params("MKTAYIAKQR", **kwargs)

    def test_get_params(self):
        assert get_params("8gwh2d4x016", BlastFormat.JSON2_S) == {
            "CMD": "Get",
            "RID": "8GWH2D4X016",
            "FORMAT_TYPE": "JSON2_S",
        }

    def test_get_params_rejects_unknown_format(self):
        with pytest.raises(InvalidInputError):
            get_params("8GWH2D4X016", "PDF")

    def test_page_urls(self):
        assert results_page_url("8GWH2D4X016") == f"{BLAST_URL}?CMD=Get&RID=8GWH2D4X016"
        assert search_page_url("mkta", BlastProgram.BLASTP) == (
            f"{BLAST_URL}?PAGE_TYPE=BlastSearch&PROGRAM=blastp&QUERY=MKTA"
        )


def test_open_results(blast, no_browser):
    assert blast.open_results("8GWH2D4X016") is True
    no_browser.assert_called_once_with(f"{BLAST_URL}?CMD=Get&RID=8GWH2D4X016")
