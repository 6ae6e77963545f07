"""
Settings for the provider clients.

Environment variables (prefix BIO_APIS_):
- BIO_APIS_RCSB_DATA_URL, BIO_APIS_RCSB_SEARCH_URL, BIO_APIS_RCSB_FILES_URL,
  BIO_APIS_RCSB_WEB_URL: RCSB endpoints
- BIO_APIS_PUBCHEM_REST_URL, BIO_APIS_PUBCHEM_WEB_URL: PubChem endpoints
- BIO_APIS_PDBE_API_URL, BIO_APIS_PDBE_FILES_URL, BIO_APIS_PDBE_WEB_URL: PDBe endpoints
- BIO_APIS_DRUGBANK_WEB_URL: DrugBank public site
- BIO_APIS_LMSD_URL: LIPID MAPS structure database
- BIO_APIS_AMBER_GEOSTD_URL: Amber GeoStd file host
- BIO_APIS_BLAST_URL: NCBI BLAST URL API

- BIO_APIS_TIMEOUT: Request timeout (seconds)
- BIO_APIS_USER_AGENT: User-Agent header sent with every request
- BIO_APIS_LOG_REQUESTS: Log every outgoing request at INFO
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    """Settings for provider clients."""

    # ==========================================================================
    # RCSB PDB
    # ==========================================================================

    rcsb_data_url: str = Field(
        default="https://data.rcsb.org/rest/v1/core",
        description="RCSB Data API base URL",
    )
    rcsb_search_url: str = Field(
        default="https://search.rcsb.org/rcsbsearch/v2/query",
        description="RCSB Search API endpoint",
    )
    rcsb_files_url: str = Field(
        default="https://files.rcsb.org",
        description="RCSB file download host",
    )
    rcsb_web_url: str = Field(
        default="https://www.rcsb.org",
        description="RCSB human-facing web site",
    )

    # ==========================================================================
    # PubChem
    # ==========================================================================

    pubchem_rest_url: str = Field(
        default="https://pubchem.ncbi.nlm.nih.gov/rest/pug",
        description="PubChem PUG REST API base URL",
    )
    pubchem_web_url: str = Field(
        default="https://pubchem.ncbi.nlm.nih.gov",
        description="PubChem web site",
    )

    # ==========================================================================
    # PDBe
    # ==========================================================================

    pdbe_api_url: str = Field(
        default="https://www.ebi.ac.uk/pdbe/api",
        description="PDBe REST API base URL",
    )
    pdbe_files_url: str = Field(
        default="https://www.ebi.ac.uk/pdbe/static/files/pdbechem_v2",
        description="PDBe chemical component file host",
    )
    pdbe_web_url: str = Field(
        default="https://www.ebi.ac.uk/pdbe-srv/pdbechem/chemicalCompound/show",
        description="PDBe chemical component pages",
    )

    # ==========================================================================
    # Small-molecule sources
    # ==========================================================================

    drugbank_web_url: str = Field(
        default="https://go.drugbank.com",
        description="DrugBank public web site (structure downloads)",
    )
    lmsd_url: str = Field(
        default="https://www.lipidmaps.org/databases/lmsd",
        description="LIPID MAPS Structure Database",
    )
    amber_geostd_url: str = Field(
        default="https://www.athanorlab.com",
        description="Host serving Amber GeoStd Mol2/FRCMOD/Lib files",
    )

    # ==========================================================================
    # NCBI BLAST
    # ==========================================================================

    blast_url: str = Field(
        default="https://blast.ncbi.nlm.nih.gov/Blast.cgi",
        description="NCBI BLAST URL API (CGI endpoint)",
    )

    # ==========================================================================
    # HTTP Client Settings
    # ==========================================================================

    timeout: int = Field(
        default=30,
        description="Default request timeout in seconds",
        ge=1,
        le=300,
    )
    user_agent: str = Field(
        default="bio-apis/0.1 (python)",
        description="User-Agent header for outgoing requests",
    )

    # ==========================================================================
    # Logging
    # ==========================================================================

    log_requests: bool = Field(
        default=True,
        description="Log all outgoing requests",
    )

    model_config = {
        "env_prefix": "BIO_APIS_",
        "case_sensitive": False,
    }


# Singleton instance
api_settings = ApiSettings()
