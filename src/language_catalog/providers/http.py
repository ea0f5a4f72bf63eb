"""
HTTP Utilities for Catalog Downloads

This module provides the HTTP client used to download the ISO 639 catalogs.

Features:
- Retry with exponential backoff on transient status codes
- Disk cache keyed by a fixed file name per catalog
- Local file reads for offline runs
"""

from pathlib import Path
from typing import Optional, Union

import requests
from loguru import logger
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .base import ProviderError, SourceProvider


class CatalogHTTPClient(SourceProvider):
    """HTTP client with a simple file cache for catalog documents."""

    def __init__(self,
                 user_agent: str = "language-catalog/1.0.0",
                 timeout: int = 30,
                 max_retries: int = 3,
                 backoff_factor: float = 1.0,
                 cache_dir: Optional[Union[str, Path]] = None):
        """Initialize the HTTP client."""
        self.user_agent = user_agent
        self.timeout = timeout

        if cache_dir is None:
            cache_dir = Path.home() / ".cache" / "language_catalog"
        self.cache_dir = Path(cache_dir)

        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent,
            'Accept': 'text/html,text/plain,*/*;q=0.8',
        })

        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)

    def cache_path(self, cache_name: str) -> Path:
        return self.cache_dir / cache_name

    def fetch(self, url: str, cache_name: str, force_refresh: bool = False) -> str:
        """
        Return the document at url, from cache when available.

        Args:
            url: Document URL
            cache_name: File name of the cached copy
            force_refresh: Ignore an existing cached copy

        Returns:
            Document text

        Raises:
            ProviderError: If the download or the cache write fails
        """
        path = self.cache_path(cache_name)
        if path.exists() and not force_refresh:
            logger.debug(f"Cache hit for {url}: {path}")
            return self.read_local(path)

        try:
            logger.info(f"Downloading {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Request failed for {url}: {e}")
            raise ProviderError("http", f"Could not download {url}: {e}") from e

        # Both catalogs are UTF-8; do not trust a missing charset header
        try:
            text = response.content.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ProviderError("http", f"{url} is not valid UTF-8: {e}") from e

        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding='utf-8')
        except OSError as e:
            raise ProviderError("http", f"Could not write cache file {path}: {e}") from e

        logger.info(f"Cached {url} as {path}")
        return text

    @staticmethod
    def read_local(path: Union[str, Path]) -> str:
        """Read a catalog document from disk."""
        try:
            return Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ProviderError("file", f"Could not read {path}: {e}") from e

    def clear_cache(self) -> int:
        """Delete cached documents; returns the number of files removed."""
        removed = 0
        if self.cache_dir.exists():
            for cache_file in self.cache_dir.iterdir():
                if cache_file.is_file():
                    cache_file.unlink()
                    removed += 1
        logger.info(f"Removed {removed} cached files from {self.cache_dir}")
        return removed

    def close(self):
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
