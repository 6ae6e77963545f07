"""DrugBank package: public 3D structure files and drug pages."""

from bio_apis.drugbank.client import DrugBankClient, overview_url, sdf_url

__all__ = ["DrugBankClient", "sdf_url", "overview_url"]
