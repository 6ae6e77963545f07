"""LIPID MAPS Structure Database (LMSD) client."""

from bio_apis import browser
from bio_apis.base import BaseClient
from bio_apis.schemas import DataSource
from bio_apis.settings import api_settings
from bio_apis.validation import validate_lmsd_id


class LmsdClient(BaseClient):
    """
    HTTP client for LMSD structure files.

    Example:
        async with LmsdClient() as client:
            sdf = await client.load_sdf("LMFA01010001")
    """

    source = DataSource.LMSD

    async def load_sdf(self, lm_id: str) -> str:
        """Download a lipid structure as SDF text. LMSD serves 2D coordinates only."""
        lm_id = validate_lmsd_id(lm_id)
        return await self.get_text(sdf_url(lm_id), resource_type="lipid", resource_id=lm_id)

    def open_overview(self, lm_id: str) -> bool:
        return browser.open_url(overview_url(validate_lmsd_id(lm_id)))


def sdf_url(lm_id: str) -> str:
    return f"{api_settings.lmsd_url}/{lm_id.upper()}?format=sdf"


def overview_url(lm_id: str) -> str:
    return f"{api_settings.lmsd_url}/{lm_id.upper()}"
