from license_catalog.client import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS, LicenseClient, LicenseDetails
from license_catalog.selector import DEFAULT_LICENSE_ID, default_license_index, select_license

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_LICENSE_ID",
    "DEFAULT_TIMEOUT_SECONDS",
    "LicenseClient",
    "LicenseDetails",
    "default_license_index",
    "select_license",
]
