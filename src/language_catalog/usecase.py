"""
Use Cases for the Language Table Generator

This module contains the pipeline that turns the two ISO 639 catalogs into
one sorted language table, and the use case that acquires the sources and
writes the result.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from .emitter import emit
from .parsers.legacy import LegacyCatalogParser
from .parsers.modern import ModernCatalogParser
from .providers.base import SourceProvider
from .providers.http import CatalogHTTPClient
from .reconcile import Reconciler
from .reserved import ReservedCodeInjector, RESERVED_SUFFIXES
from .schemas import LanguageCatalogConfig, LanguageRecord, LanguageTableResult
from .writer import OUTPUT_FORMATS, write_bundle


class SourceMissingError(Exception):
    """A required catalog document is missing or empty."""

    def __init__(self, source_name: str):
        self.source_name = source_name
        super().__init__(f"{source_name} source is missing or empty")


def _require_sources(legacy_text: Optional[str], modern_text: Optional[str]) -> None:
    if not legacy_text:
        raise SourceMissingError("ISO 639-2")
    if not modern_text:
        raise SourceMissingError("ISO 639-3")


def build_language_table(legacy_text: str, modern_text: str,
                         include_reserved: bool = True,
                         result: Optional[LanguageTableResult] = None) -> List[LanguageRecord]:
    """
    Reconcile both catalogs into the final, sorted record list.

    Args:
        legacy_text: ISO 639-2 code list HTML
        modern_text: ISO 639-3 tab separated table
        include_reserved: Add the qaa-qad local use entries
        result: Optional result object that receives run statistics

    Returns:
        Records sorted by name, then by the remaining fields

    Raises:
        SourceMissingError: If either source is missing, before any parsing
        ParserError: If the ISO 639-3 table has no header
    """
    _require_sources(legacy_text, modern_text)

    legacy_records = LegacyCatalogParser().parse(legacy_text)
    modern_entries = ModernCatalogParser().parse(modern_text)

    reconciler = Reconciler()
    reconciler.add_legacy(legacy_records)
    table = reconciler.add_modern(modern_entries)

    if include_reserved:
        ReservedCodeInjector().inject(table)

    records = emit(table)

    if result is not None:
        result.legacy_records = reconciler.legacy_added
        result.modern_entries = reconciler.modern_added
        result.overridden = reconciler.overridden
        result.reserved = len(RESERVED_SUFFIXES) if include_reserved else 0
        result.records = records

    return records


class LanguageTableUseCase:
    """Main use case: acquire sources, build the table, write the bundle."""

    def __init__(self, config: LanguageCatalogConfig, client: Optional[SourceProvider] = None):
        self.config = config
        # A client passed in stays open; one created here is closed by run()
        self.owns_client = client is None
        self.client = client or CatalogHTTPClient(
            user_agent=config.user_agent,
            timeout=config.timeout,
            max_retries=config.max_retries,
            backoff_factor=config.backoff_factor,
            cache_dir=config.cache_dir,
        )

    def load_sources(self, legacy_file: Optional[Path] = None,
                     modern_file: Optional[Path] = None,
                     force_refresh: bool = False) -> tuple:
        """
        Acquire both catalog documents; local files win over downloads.

        Raises:
            ProviderError: If either document cannot be obtained
        """
        if legacy_file:
            legacy_text = self.client.read_local(legacy_file)
        else:
            legacy_text = self.client.fetch(
                self.config.legacy_url, self.config.legacy_cache_name, force_refresh
            )

        if modern_file:
            modern_text = self.client.read_local(modern_file)
        else:
            modern_text = self.client.fetch(
                self.config.modern_url, self.config.modern_cache_name, force_refresh
            )

        return legacy_text, modern_text

    def run(self, legacy_file: Optional[Path] = None,
            modern_file: Optional[Path] = None,
            output_dir: Optional[Path] = None,
            formats: Sequence[str] = OUTPUT_FORMATS,
            force_refresh: bool = False,
            write: bool = True) -> LanguageTableResult:
        """
        Run one complete generation.

        Errors from acquisition abort the run before anything is merged or
        written.
        """
        result = LanguageTableResult()
        logger.info("Starting language table generation")

        try:
            legacy_text, modern_text = self.load_sources(legacy_file, modern_file, force_refresh)
        finally:
            if self.owns_client:
                self.client.close()

        build_language_table(
            legacy_text,
            modern_text,
            include_reserved=self.config.include_reserved,
            result=result,
        )

        if write:
            files = write_bundle(
                result.records,
                output_dir or self.config.output_dir,
                formats=formats,
                legacy_source=str(legacy_file) if legacy_file else self.config.legacy_url,
                modern_source=str(modern_file) if modern_file else self.config.modern_url,
            )
            result.output_files = [str(f) for f in files]

        result.mark_completed()
        logger.info(
            f"Generated {result.total_records} records in {result.duration_seconds:.2f}s"
        )
        return result
