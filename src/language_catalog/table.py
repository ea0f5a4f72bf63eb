"""
Keyed Language Table

The working table of one generation run: an insertion-ordered mapping
from canonical 3-letter code to LanguageRecord. Writes are last-write-wins;
a put at an existing key replaces the whole record.
"""

from collections import OrderedDict
from typing import Dict, Iterator, List, Optional

from loguru import logger

from .schemas import LanguageRecord


class LanguageTable:
    """Ordered mapping of canonical code to LanguageRecord for a single run."""

    def __init__(self):
        self._records: "OrderedDict[str, LanguageRecord]" = OrderedDict()
        self.replacements: Dict[str, int] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def get(self, key: str) -> Optional[LanguageRecord]:
        return self._records.get(key)

    def put(self, record: LanguageRecord) -> bool:
        """
        Store a record at its canonical code.

        Returns:
            True when a record already existed at that key and was replaced
        """
        key = record.alpha_3_to_use
        existed = key in self._records
        if existed:
            self.replacements[key] = self.replacements.get(key, 0) + 1
            logger.debug(f"Replacing record at '{key}': {self._records[key].name} -> {record.name}")
        self._records[key] = record
        return existed

    def records(self) -> List[LanguageRecord]:
        """Records in insertion order."""
        return list(self._records.values())
