"""
Language Catalog

Builds a canonical, deduplicated ISO 639 language table by reconciling the
ISO 639-2 code list (Library of Congress) with the ISO 639-3 code table
(SIL International).

The package is organized as:
- parsers/: HTML table extraction and the two catalog parsers
- providers/: catalog download and cache
- table.py, reconcile.py, reserved.py, emitter.py: the reconciliation core
- usecase.py: pipeline orchestration
- writer.py: CSV/JSON output and manifest
- cli/: typer command line interface
"""

from .schemas import LanguageRecord, LanguageCatalogConfig, LanguageTableResult, DatasetManifest
from .config import get_default_config, load_config
from .table import LanguageTable
from .reconcile import Reconciler, reconcile
from .reserved import ReservedCodeInjector, reserved_records
from .emitter import emit, as_rows
from .usecase import LanguageTableUseCase, SourceMissingError, build_language_table

__version__ = "1.0.0"

__all__ = [
    # Use cases
    "LanguageTableUseCase",
    "build_language_table",
    "SourceMissingError",

    # Core
    "LanguageTable",
    "Reconciler",
    "reconcile",
    "ReservedCodeInjector",
    "reserved_records",
    "emit",
    "as_rows",

    # Configuration
    "get_default_config",
    "load_config",

    # Models
    "LanguageRecord",
    "LanguageCatalogConfig",
    "LanguageTableResult",
    "DatasetManifest",
]
