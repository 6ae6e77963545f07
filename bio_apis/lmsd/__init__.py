"""LIPID MAPS package: 2D lipid structure files and overview pages."""

from bio_apis.lmsd.client import LmsdClient, overview_url, sdf_url

__all__ = ["LmsdClient", "sdf_url", "overview_url"]
