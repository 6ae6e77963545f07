"""Tests for the Amber GeoStd client with mocked responses."""

import pytest

from bio_apis.amber_geostd import AmberGeostdClient, GeostdData, GeostdItem
from bio_apis.exceptions import DecodeError, InvalidInputError, NotFoundError

BASE = "https://www.athanorlab.com"

MOCK_ALL_MOLS = {
    "result": [
        {"ident": "CPB", "frcmod_avail": True, "lib_avail": True},
        {"ident": "ATP", "frcmod_avail": True, "lib_avail": False},
        {"ident": "2244", "frcmod_avail": False, "lib_avail": False},
    ]
}

MOCK_MOL2_CPB = """@<TRIPOS>MOLECULE
CPB
   28    29     1     0     0
SMALL
bcc
"""

MOCK_FRCMOD_CPB = """remark goes here
MASS

BOND
ca-cl  229.9   1.739
"""


@pytest.fixture
def geostd(mock_http):
    return AmberGeostdClient(client=mock_http)


class TestListing:
    async def test_get_all_mols(self, geostd, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data=MOCK_ALL_MOLS)

        items = await geostd.get_all_mols()

        assert items[0] == GeostdItem(ident="CPB", frcmod_avail=True, lib_avail=True)
        assert [i.ident for i in items] == ["CPB", "ATP", "2244"]
        assert mock_http.request.call_args.args == ("GET", f"{BASE}/get-all-mols")

    async def test_find_mols_posts_search_text(self, geostd, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={"result": MOCK_ALL_MOLS["result"][:1]})

        items = await geostd.find_mols("  chloro ")

        assert len(items) == 1
        call = mock_http.request.call_args
        assert call.args == ("POST", f"{BASE}/find-mols")
        assert call.kwargs["json"] == {"search_text": "chloro"}

    async def test_find_mols_no_match(self, geostd, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={"result": []})

        assert await geostd.find_mols("unobtainium") == []

    async def test_find_mols_rejects_empty_text(self, geostd, mock_http):
        with pytest.raises(InvalidInputError):
            await geostd.find_mols("   ")
        mock_http.request.assert_not_called()

    async def test_missing_result_key_is_decode_error(self, geostd, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={"items": []})

        with pytest.raises(DecodeError):
            await geostd.get_all_mols()


class TestLoadMolFiles:
    async def test_mol2_and_frcmod(self, geostd, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(
            json_data={"mol2": MOCK_MOL2_CPB, "frcmod": MOCK_FRCMOD_CPB, "lib": None}
        )

        data = await geostd.load_mol_files("CPB")

        assert data == GeostdData(mol2=MOCK_MOL2_CPB, frcmod=MOCK_FRCMOD_CPB)
        assert data.lib is None
        call = mock_http.request.call_args
        assert call.args == ("POST", f"{BASE}/load-mol-files")
        assert call.kwargs["json"] == {"ident": "CPB"}

    async def test_optional_files_absent(self, geostd, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={"mol2": MOCK_MOL2_CPB})

        data = await geostd.load_mol_files("CPB")

        assert data.frcmod is None
        assert data.lib is None

    async def test_missing_mol2_is_decode_error(self, geostd, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(json_data={"frcmod": MOCK_FRCMOD_CPB})

        with pytest.raises(DecodeError) as exc_info:
            await geostd.load_mol_files("CPB")

        assert exc_info.value.field == "mol2"

    async def test_unknown_ident(self, geostd, mock_http, mock_response_factory):
        mock_http.request.return_value = mock_response_factory(404, text="Not found")

        with pytest.raises(NotFoundError):
            await geostd.load_mol_files("ZZZ")

    @pytest.mark.parametrize("ident", ["", "has space", "semi;colon"])
    async def test_invalid_ident(self, geostd, mock_http, ident):
        with pytest.raises(InvalidInputError):
            await geostd.load_mol_files(ident)
        mock_http.request.assert_not_called()
