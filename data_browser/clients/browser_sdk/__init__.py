from data_browser.clients.browser_sdk.collection_client import CollectionClient
from data_browser.clients.browser_sdk.config import ConfigError, SDKConfig
from data_browser.clients.browser_sdk.errors import ApiError, NetworkFailure
from data_browser.clients.browser_sdk.http_client import HttpClient
from data_browser.clients.browser_sdk.normalizers import CollectionPage, normalize_collection_page

__all__ = [
    "SDKConfig",
    "ConfigError",
    "ApiError",
    "NetworkFailure",
    "HttpClient",
    "CollectionClient",
    "CollectionPage",
    "normalize_collection_page",
]
