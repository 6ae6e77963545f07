"""
RCSB URL builders.

Pure functions: the same identifier always yields the same URL. Callers are
expected to pass identifiers through validate_pdb_id first.

- Data API: https://data.rcsb.org/#data-api
- Search API: https://search.rcsb.org/#search-api
- File downloads: https://www.rcsb.org/docs/programmatic-access/file-download-services
"""

from bio_apis.settings import api_settings


def overview_url(ident: str) -> str:
    """Structure summary page. Works with legacy and extended IDs."""
    return f"{api_settings.rcsb_web_url}/structure/{ident}"


def view_3d_url(ident: str) -> str:
    return f"{api_settings.rcsb_web_url}/3d-view/{ident}"


def structure_view_url(ident: str) -> str:
    """PDBx/mmCIF file rendered inline in the browser."""
    return f"{api_settings.rcsb_files_url}/view/{ident}.cif"


def entry_url(ident: str) -> str:
    return f"{api_settings.rcsb_data_url}/entry/{ident}"


def cif_url(ident: str) -> str:
    return f"{api_settings.rcsb_files_url}/download/{ident.upper()}.cif"


def cif_gz_url(ident: str) -> str:
    return cif_url(ident) + ".gz"


def structure_factors_cif_url(ident: str) -> str:
    return f"{api_settings.rcsb_files_url}/download/{ident.upper()}-sf.cif"


def structure_factors_cif_gz_url(ident: str) -> str:
    return structure_factors_cif_url(ident) + ".gz"


def _validation_base_url(ident: str) -> str:
    return f"{api_settings.rcsb_files_url}/validation/download/{ident.lower()}_validation"


def validation_cif_gz_url(ident: str) -> str:
    return _validation_base_url(ident) + ".cif.gz"


def validation_2fo_fc_cif_gz_url(ident: str) -> str:
    return _validation_base_url(ident) + "_2fo-fc_map_coef.cif.gz"


def validation_fo_fc_cif_gz_url(ident: str) -> str:
    return _validation_base_url(ident) + "_fo-fc_map_coef.cif.gz"


def emdb_map_gz_url(emdb_code: str) -> str:
    """
    Density map for an EMDB entry.

    Example: EMD-39757 -> .../pub/emdb/structures/EMD-39757/map/emd_39757.map.gz
    """
    file_stem = emdb_code.replace("-", "_").lower()
    return f"{api_settings.rcsb_files_url}/pub/emdb/structures/{emdb_code}/map/{file_stem}.map.gz"
