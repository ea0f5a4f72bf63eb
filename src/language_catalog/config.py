"""
Language Catalog Configuration

This module provides configuration utilities for the language table
generator. The configuration model itself lives in schemas.py.
"""

import os
from pathlib import Path

from loguru import logger

from .schemas import DEFAULT_LEGACY_URL, DEFAULT_MODERN_URL, LanguageCatalogConfig


def get_default_config() -> LanguageCatalogConfig:
    """Get default configuration with environment variable overrides.

    Returns:
        LanguageCatalogConfig: Effective configuration
    """
    try:
        legacy_url = os.getenv("LANGUAGE_CATALOG_LEGACY_URL", DEFAULT_LEGACY_URL)
        modern_url = os.getenv("LANGUAGE_CATALOG_MODERN_URL", DEFAULT_MODERN_URL)
        cache_dir = Path(
            os.getenv(
                "LANGUAGE_CATALOG_CACHE_DIR",
                str(Path.home() / ".cache" / "language_catalog"),
            )
        )
        output_dir = Path(os.getenv("LANGUAGE_CATALOG_OUTPUT_DIR", "data"))
        user_agent = os.getenv("LANGUAGE_CATALOG_USER_AGENT", "language-catalog/1.0.0")
        timeout = int(os.getenv("LANGUAGE_CATALOG_TIMEOUT", "30"))
        max_retries = int(os.getenv("LANGUAGE_CATALOG_MAX_RETRIES", "3"))
        log_level = os.getenv("LANGUAGE_CATALOG_LOG_LEVEL", "INFO")

        return LanguageCatalogConfig(
            legacy_url=legacy_url,
            modern_url=modern_url,
            cache_dir=cache_dir,
            output_dir=output_dir,
            user_agent=user_agent,
            timeout=timeout,
            max_retries=max_retries,
            log_level=log_level,
        )

    except Exception as e:
        logger.error(f"Error loading configuration: {e}")
        raise


def load_config() -> LanguageCatalogConfig:
    """Alias for get_default_config."""
    return get_default_config()
