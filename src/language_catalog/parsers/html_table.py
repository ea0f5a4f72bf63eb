"""
HTML Table Extractor

This module turns the rows of an HTML data table into lists of plain-text
cells. It is the only place that knows about markup; downstream parsers
work on cell strings.
"""

import re
import warnings
from typing import List, Optional, Union

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning
from loguru import logger

from .base import TableParser

# The ISO 639-2 code list wraps its data table inside a layout table.
NESTED_TABLE_BOUNDARY = re.compile(r"^.*?<table[^>]+>.*?<table[^>]+>", re.IGNORECASE | re.DOTALL)

warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)


class TableExtractor(TableParser):
    """
    Extract data rows from marked-up text.

    Everything up to the end of the boundary match is skipped, so wrapping
    containers and unrelated tables in front of the data table are ignored.
    Rows without cells are dropped and the first remaining row is treated
    as the header and dropped as well.
    """

    def __init__(self, boundary: Optional[Union[str, re.Pattern]] = NESTED_TABLE_BOUNDARY):
        """
        Initialize the extractor.

        Args:
            boundary: Pattern whose match marks the start of the data table
                (None parses the whole document)
        """
        if isinstance(boundary, str):
            boundary = re.compile(boundary, re.IGNORECASE | re.DOTALL)
        self.boundary = boundary

    @property
    def supported_formats(self) -> List[str]:
        return ['html']

    def _skip_to_boundary(self, content: str) -> str:
        if self.boundary is None:
            return content

        match = self.boundary.search(content)
        if not match:
            logger.debug("Table boundary not found, parsing whole document")
            return content

        return content[match.end():]

    @staticmethod
    def _clean_cell(cell) -> str:
        text = cell.get_text(" ", strip=True)
        # Normalize whitespace, including non-breaking spaces
        return ' '.join(text.split())

    def parse(self, raw_text: str) -> List[List[str]]:
        """
        Extract table rows from HTML.

        Args:
            raw_text: HTML document

        Returns:
            Data rows (header removed), each a list of cell strings
        """
        if not raw_text:
            return []

        soup = BeautifulSoup(self._skip_to_boundary(raw_text), 'html.parser')

        rows: List[List[str]] = []
        for tr in soup.find_all('tr'):
            # Unclosed <tr> tags nest following rows; only keep own cells
            cells = [
                self._clean_cell(cell)
                for cell in tr.find_all(['td', 'th'])
                if cell.find_parent('tr') is tr
            ]
            if cells:
                rows.append(cells)

        logger.debug(f"Extracted {len(rows)} table rows (including header)")
        return rows[1:]


def extract_table_rows(content: str, boundary: Optional[Union[str, re.Pattern]] = NESTED_TABLE_BOUNDARY) -> List[List[str]]:
    """Convenience wrapper around TableExtractor.parse."""
    return TableExtractor(boundary).parse(content)
