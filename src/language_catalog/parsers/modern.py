"""
ISO 639-3 Catalog Parser

Parses the SIL ISO 639-3 code table: a tab separated file whose first line
names the columns. Columns are looked up by (lower-cased) name, so extra or
reordered columns in future releases do not break parsing.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger

from .base import ParserError, TableParser

RawModernEntry = Dict[str, Optional[str]]

# Constructed, Living & Special
RETAINED_LANGUAGE_TYPES = frozenset({"C", "L", "S"})

LINE_SPLIT = re.compile(r"(?:\r?\n)+")


@dataclass(frozen=True)
class ModernColumns:
    """Lower-cased names of the ISO 639-3 columns the reconciler reads."""

    identifier: str = "id"
    alpha_2: str = "part1"
    bibliographic: str = "part2b"
    terminology: str = "part2t"
    name: str = "ref_name"
    category: str = "language_type"

    def required(self) -> List[str]:
        return [
            self.identifier,
            self.alpha_2,
            self.bibliographic,
            self.terminology,
            self.name,
            self.category,
        ]


class ModernCatalogParser(TableParser):
    """Parser for the ISO 639-3 tab separated code table."""

    def __init__(self, columns: Optional[ModernColumns] = None):
        self.columns = columns or ModernColumns()

    @property
    def supported_formats(self) -> List[str]:
        return ['tsv']

    @staticmethod
    def parse_header(line: str) -> List[str]:
        return [name.strip().lower() for name in line.lstrip("\ufeff").split("\t")]

    @staticmethod
    def parse_line(headers: List[str], line: str) -> RawModernEntry:
        """Map one data line onto the header; missing or empty values become None."""
        parts = line.split("\t")
        return {
            name: parts[idx] if idx < len(parts) and parts[idx] else None
            for idx, name in enumerate(headers)
        }

    def is_retained(self, entry: RawModernEntry) -> bool:
        return entry.get(self.columns.category) in RETAINED_LANGUAGE_TYPES

    def parse_all(self, raw_text: str) -> List[RawModernEntry]:
        """
        Parse every data line, without category filtering.

        Raises:
            ParserError: If the document has no header line
        """
        lines = [line for line in LINE_SPLIT.split(raw_text or "") if line]
        if not lines:
            raise ParserError("iso639_3", "No header line found")

        headers = self.parse_header(lines[0])
        missing = [name for name in self.columns.required() if name not in headers]
        if missing:
            logger.warning(f"ISO 639-3 header lacks columns: {', '.join(missing)}")

        return [self.parse_line(headers, line) for line in lines[1:]]

    def parse(self, raw_text: str) -> List[RawModernEntry]:
        """
        Parse the ISO 639-3 table and keep constructed, living and special
        languages only.

        Args:
            raw_text: Content of iso-639-3.tab

        Returns:
            Field dictionaries in source order
        """
        entries = self.parse_all(raw_text)
        retained = [entry for entry in entries if self.is_retained(entry)]

        logger.info(
            f"Parsed {len(entries)} ISO 639-3 entries, "
            f"retained {len(retained)}, filtered {len(entries) - len(retained)}"
        )
        return retained
