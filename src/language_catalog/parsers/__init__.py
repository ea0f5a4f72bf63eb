"""
Catalog Parsers

This package contains the parsers for the two ISO 639 catalogs.
"""

from .base import TableParser, ParserError
from .html_table import TableExtractor, extract_table_rows
from .legacy import LegacyCatalogParser, split_code_field
from .modern import ModernCatalogParser, ModernColumns

__all__ = [
    "TableParser",
    "ParserError",
    "TableExtractor",
    "extract_table_rows",
    "LegacyCatalogParser",
    "split_code_field",
    "ModernCatalogParser",
    "ModernColumns",
]
