"""Tests for the PDBe client with mocked API responses."""

import pytest

from bio_apis.exceptions import DecodeError, InvalidInputError, NotFoundError
from bio_apis.pdbe import PdbeClient, overview_url, sdf_url

# =============================================================================
# Mock JSON Fixtures - PDBe REST API Response Format
# =============================================================================

MOCK_ENTRY_SUMMARY_1CBS = {
    "1cbs": [
        {
            "title": "Crystal structure of cellular retinoic acid binding protein type II in complex with all-trans-retinoic acid",
            "release_date": "19950126",
            "deposition_date": "19940928",
            "revision_date": "20110713",
            "experimental_method": ["X-ray diffraction"],
            "entry_authors": ["Kleywegt, G.J.", "Bergfors, T.", "Jones, T.A."],
            "number_of_entities": {"water": 1, "polypeptide": 1, "ligand": 1, "dna": 0, "rna": 0},
            "assemblies": [{"assembly_id": "1", "name": "monomer", "form": "homo", "preferred": True}],
            "related_structures": [],
        }
    ]
}

MOCK_COMPOUND_SUMMARY_ATP = {
    "ATP": [
        {
            "name": "ADENOSINE-5'-TRIPHOSPHATE",
            "formula": "C10 H16 N5 O13 P3",
            "weight": 507.181,
            "inchikey": "ZKHQWZAMYRWXGA-KQYNXXCUSA-N",
            "formal_charge": 0,
            "chem_comp_type": "non-polymer",
            "creation_date": "19990708",
        }
    ]
}

MOCK_SDF_ATP_IDEAL = """ATP
  PDBeChem 3D

 47 49  0  0  1  0  0  0  0  0999 V2000
M  END
$$$$
"""


@pytest.fixture
def pdbe(mock_http):
    return PdbeClient(client=mock_http)


class TestEntrySummary:
    async def test_summary(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data=MOCK_ENTRY_SUMMARY_1CBS)

        summary = await pdbe.get_entry_summary("1CBS")

        assert summary.pdb_id == "1CBS"
        assert summary.title.startswith("Crystal structure of cellular retinoic acid")
        assert summary.experimental_method == ("X-ray diffraction",)
        assert summary.number_of_entities["polypeptide"] == 1
        assert summary.assemblies[0].preferred is True
        assert mock_http.request.call_args.args == (
            "GET",
            "https://www.ebi.ac.uk/pdbe/api/pdb/entry/summary/1cbs",
        )

    async def test_omitted_fields_are_none(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={"1cbs": [{"title": "T"}]})

        summary = await pdbe.get_entry_summary("1cbs")

        assert summary.experimental_method is None
        assert summary.entry_authors is None
        assert summary.number_of_entities is None
        assert summary.assemblies is None

    async def test_empty_lists_stay_empty(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(
            json_data={"1cbs": [{"title": "T", "entry_authors": [], "assemblies": []}]}
        )

        summary = await pdbe.get_entry_summary("1cbs")

        assert summary.entry_authors == ()
        assert summary.assemblies == ()

    async def test_empty_envelope_is_not_found(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={})

        with pytest.raises(NotFoundError) as exc_info:
            await pdbe.get_entry_summary("9zzz")

        assert exc_info.value.status_code is None

    async def test_http_404_is_not_found(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(404, json_data={})

        with pytest.raises(NotFoundError) as exc_info:
            await pdbe.get_entry_summary("9zzz")

        assert exc_info.value.status_code == 404

    async def test_non_list_envelope_is_decode_error(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={"1cbs": {"title": "x"}})

        with pytest.raises(DecodeError):
            await pdbe.get_entry_summary("1cbs")

    async def test_missing_title_is_decode_error(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={"1cbs": [{"release_date": "19950126"}]})

        with pytest.raises(DecodeError) as exc_info:
            await pdbe.get_entry_summary("1cbs")

        assert exc_info.value.field == "title"


class TestCompounds:
    async def test_compound_summary(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data=MOCK_COMPOUND_SUMMARY_ATP)

        atp = await pdbe.get_compound_summary("atp")

        assert atp.ccd_id == "ATP"
        assert atp.name == "ADENOSINE-5'-TRIPHOSPHATE"
        assert atp.weight == 507.181
        assert atp.inchi is None

    async def test_load_sdf(self, pdbe, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(text=MOCK_SDF_ATP_IDEAL)

        sdf = await pdbe.load_sdf("atp")

        assert sdf == MOCK_SDF_ATP_IDEAL
        assert mock_http.request.call_args.args[1] == (
            "https://www.ebi.ac.uk/pdbe/static/files/pdbechem_v2/ATP_ideal.sdf"
        )

    async def test_invalid_ccd_id(self, pdbe, mock_http):
        with pytest.raises(InvalidInputError):
            await pdbe.load_sdf("TOOLONG")
        mock_http.request.assert_not_called()

    def test_urls(self):
        assert sdf_url("hem") == "https://www.ebi.ac.uk/pdbe/static/files/pdbechem_v2/HEM_ideal.sdf"
        assert overview_url("HEM") == "https://www.ebi.ac.uk/pdbe-srv/pdbechem/chemicalCompound/show/HEM"

    def test_open_overview(self, pdbe, no_browser):
        assert pdbe.open_overview("hem") is True
        no_browser.assert_called_once_with(overview_url("HEM"))
