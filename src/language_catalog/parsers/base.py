"""
Base Parser Interface

This module defines the protocol/interface for catalog parsers.
Parsers are responsible for converting raw source text into structured data.
"""

from abc import abstractmethod
from typing import Any, Iterable, Protocol


class TableParser(Protocol):
    """
    Protocol for catalog parsers.

    Parsers convert the raw text of one standards catalog (HTML, tab
    separated values) into a sequence of structured items.
    """

    @abstractmethod
    def parse(self, raw_text: str) -> Iterable[Any]:
        """
        Parse raw source text.

        Args:
            raw_text: Raw document as downloaded

        Returns:
            Iterable of parsed items, in source order

        Raises:
            ParserError: If the input is structurally unusable
        """
        pass

    @property
    @abstractmethod
    def supported_formats(self) -> list[str]:
        """List of supported raw data formats (e.g., ['html', 'tsv'])."""
        pass


class ParserError(Exception):
    """Base exception for parser-related errors."""

    def __init__(self, parser_name: str, message: str):
        self.parser_name = parser_name
        self.message = message
        super().__init__(f"{parser_name} parser failed: {message}")
