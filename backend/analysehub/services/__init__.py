from analysehub.services.base import DataProvider
from analysehub.services.http_api import HttpDataProvider
from analysehub.services.loader import LOAD_ERROR_MESSAGE, DashboardLoader
from analysehub.services.static_files import StaticFileProvider


def build_provider(settings) -> DataProvider:
    """Create the data provider selected by ``settings.data_provider``."""
    if settings.data_provider == "static":
        return StaticFileProvider(settings.data_dir)
    if settings.data_provider == "http":
        if not settings.data_api_base_url:
            raise ValueError("DATA_API_BASE_URL must be set when DATA_PROVIDER is \"http\"")
        return HttpDataProvider(settings.data_api_base_url, timeout=settings.fetch_timeout_seconds or 30.0)
    raise ValueError(f"Unknown data provider: {settings.data_provider}")


__all__ = [
    "DataProvider",
    "HttpDataProvider",
    "StaticFileProvider",
    "DashboardLoader",
    "LOAD_ERROR_MESSAGE",
    "build_provider",
]
