"""
ISO 639-2 Catalog Parser

Parses the Library of Congress ISO 639-2 code list. Each data row holds
the 3-letter code field, the ISO 639-1 code and the English name. Where
the bibliographic and terminology codes differ the code field reads
like ``fre (B) fra (T)``.
"""

import re
from typing import List, Optional, Tuple

from loguru import logger

from ..schemas import LanguageRecord
from .base import TableParser
from .html_table import TableExtractor

BT_CODE_PATTERN = re.compile(r"^([a-z]{3}) *\(([bt])\).*?([a-z]{3})")


def split_code_field(code_field: str) -> Tuple[str, str]:
    """
    Resolve a code cell into its bibliographic and terminology codes.

    Args:
        code_field: First cell of an ISO 639-2 row

    Returns:
        (alpha_3_b, alpha_3_t); both are the raw cell when it carries no
        B/T annotation
    """
    match = BT_CODE_PATTERN.match(code_field.lower())
    if not match:
        return code_field, code_field

    first, flag, second = match.groups()
    if flag == 'b':
        return first, second
    return second, first


class LegacyCatalogParser(TableParser):
    """Parser for the ISO 639-2 HTML code list."""

    def __init__(self, extractor: Optional[TableExtractor] = None):
        self.extractor = extractor or TableExtractor()

    @property
    def supported_formats(self) -> List[str]:
        return ['html']

    def parse_row(self, row: List[str]) -> Optional[LanguageRecord]:
        """
        Build a preliminary record from one extracted row.

        Args:
            row: Cell strings (code field, alpha-2 code, name, ...)

        Returns:
            LanguageRecord keyed by the bibliographic code, or None when
            the row is too short or has no name
        """
        if len(row) < 3 or not row[2]:
            logger.debug(f"Skipping incomplete ISO 639-2 row: {row}")
            return None

        alpha_3_b, alpha_3_t = split_code_field(row[0])

        return LanguageRecord(
            name=row[2],
            alpha_3_to_use=alpha_3_b,
            alpha_3=alpha_3_t,
            bibliographic=alpha_3_b if alpha_3_b != alpha_3_t else None,
            alpha_2=row[1] or None,
            has_639_2=True,
        )

    def parse(self, raw_text: str) -> List[LanguageRecord]:
        """
        Parse the ISO 639-2 document.

        Args:
            raw_text: HTML of the code list

        Returns:
            Records in source order
        """
        records = []
        for row in self.extractor.parse(raw_text):
            record = self.parse_row(row)
            if record:
                records.append(record)

        logger.info(f"Parsed {len(records)} ISO 639-2 records")
        return records
