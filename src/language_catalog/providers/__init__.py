"""
Catalog Source Providers
"""

from .base import SourceProvider, ProviderError
from .http import CatalogHTTPClient

__all__ = [
    "SourceProvider",
    "ProviderError",
    "CatalogHTTPClient",
]
