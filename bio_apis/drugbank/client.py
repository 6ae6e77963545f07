"""
DrugBank structure downloads.

Only the public structure files and drug pages are used; the licensed
DrugBank API is not.
"""

from bio_apis import browser
from bio_apis.base import BaseClient
from bio_apis.schemas import DataSource
from bio_apis.settings import api_settings
from bio_apis.validation import validate_drugbank_id


class DrugBankClient(BaseClient):
    """
    HTTP client for DrugBank public structure files.

    Example:
        async with DrugBankClient() as client:
            sdf = await client.load_sdf("DB00945")
    """

    source = DataSource.DRUGBANK

    async def load_sdf(self, drugbank_id: str) -> str:
        """Download a drug's 3D structure as SDF text."""
        drugbank_id = validate_drugbank_id(drugbank_id)
        return await self.get_text(
            sdf_url(drugbank_id),
            resource_type="drug",
            resource_id=drugbank_id,
        )

    def open_overview(self, drugbank_id: str) -> bool:
        return browser.open_url(overview_url(validate_drugbank_id(drugbank_id)))


def sdf_url(drugbank_id: str) -> str:
    return (
        f"{api_settings.drugbank_web_url}/structures/small_molecule_drugs/"
        f"{drugbank_id.upper()}.sdf?type=3d"
    )


def overview_url(drugbank_id: str) -> str:
    return f"{api_settings.drugbank_web_url}/drugs/{drugbank_id.upper()}"
