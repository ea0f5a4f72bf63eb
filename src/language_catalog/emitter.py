"""
Deterministic output ordering for the language table.
"""

from typing import Iterable, List, Tuple

from .schemas import LanguageRecord
from .table import LanguageTable


def sort_key(record: LanguageRecord) -> Tuple[str, str, str, str, str]:
    # Name first; the remaining fields only break ties
    return record.as_row()


def emit(table: LanguageTable) -> List[LanguageRecord]:
    """Drop the keys and return the records in their final order."""
    return sorted(table.records(), key=sort_key)


def as_rows(records: Iterable[LanguageRecord]) -> List[Tuple[str, str, str, str, str]]:
    """Records as (name, code, alpha-2, bibliographic, has_639_2) string tuples."""
    return [record.as_row() for record in records]
