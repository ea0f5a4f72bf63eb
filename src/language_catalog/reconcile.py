"""
Catalog Reconciliation

Merges ISO 639-2 records and ISO 639-3 entries into one LanguageTable.

ISO 639-3 entries take precedence: an entry whose key already holds an
ISO 639-2 record replaces that record completely. Only the fact that the
key existed survives, as ``has_639_2``. Fields are never merged
individually.
"""

from typing import Dict, Iterable, Optional

from loguru import logger

from .parsers.modern import ModernColumns, RawModernEntry
from .schemas import LanguageRecord
from .table import LanguageTable


class Reconciler:
    """Merge both catalogs into a LanguageTable."""

    def __init__(self, table: Optional[LanguageTable] = None, columns: Optional[ModernColumns] = None):
        self.table = table if table is not None else LanguageTable()
        self.columns = columns or ModernColumns()
        self.legacy_added = 0
        self.modern_added = 0
        self.overridden = 0
        self.skipped = 0

    def add_legacy(self, records: Iterable[LanguageRecord]) -> LanguageTable:
        """Insert ISO 639-2 records; duplicates within the source are last-write-wins."""
        for record in records:
            if self.table.put(record):
                logger.debug(f"Duplicate ISO 639-2 code '{record.alpha_3_to_use}'")
            self.legacy_added += 1
        return self.table

    def merge_key(self, entry: RawModernEntry) -> Optional[str]:
        """Canonical code of an ISO 639-3 entry: Part2B when present, else Id."""
        return entry.get(self.columns.bibliographic) or entry.get(self.columns.identifier)

    def terminology_code(self, entry: RawModernEntry) -> Optional[str]:
        """Part2T when present, else Id."""
        return entry.get(self.columns.terminology) or entry.get(self.columns.identifier)

    def is_usable(self, entry: RawModernEntry) -> bool:
        """An entry needs a key, a terminology code and a non-blank name."""
        name = entry.get(self.columns.name)
        return bool(self.merge_key(entry) and self.terminology_code(entry) and name and name.strip())

    def build_record(self, entry: RawModernEntry, existed: bool) -> LanguageRecord:
        cols = self.columns
        key = self.merge_key(entry)
        part2b = entry.get(cols.bibliographic)
        alpha_3 = self.terminology_code(entry)

        return LanguageRecord(
            name=entry.get(cols.name),
            alpha_3_to_use=key,
            alpha_3=alpha_3,
            bibliographic=part2b if part2b and part2b != alpha_3 else None,
            alpha_2=entry.get(cols.alpha_2),
            has_639_2=existed,
        )

    def add_modern(self, entries: Iterable[RawModernEntry]) -> LanguageTable:
        """
        Insert ISO 639-3 entries, replacing whatever is stored at their key.

        Entries without a usable key or name are skipped with a warning.
        """
        for entry in entries:
            if not self.is_usable(entry):
                logger.warning(f"Skipping ISO 639-3 entry without code or name: {entry}")
                self.skipped += 1
                continue

            key = self.merge_key(entry)

            # Only the ISO 639-2 presence of the previous record carries over
            previous = self.table.get(key)
            existed = previous is not None and previous.has_639_2
            self.table.put(self.build_record(entry, existed))

            self.modern_added += 1
            if existed:
                self.overridden += 1

        logger.info(
            f"Reconciled {self.legacy_added} ISO 639-2 records and {self.modern_added} "
            f"ISO 639-3 entries into {len(self.table)} codes ({self.overridden} overrides, "
            f"{len(self.replaced_keys)} codes written more than once, {self.skipped} skipped)"
        )
        return self.table

    @property
    def replaced_keys(self) -> Dict[str, int]:
        """Codes that were overwritten, with how often."""
        return dict(self.table.replacements)


def reconcile(legacy_records: Iterable[LanguageRecord], modern_entries: Iterable[RawModernEntry],
              table: Optional[LanguageTable] = None) -> LanguageTable:
    """Merge both catalogs into a (new or given) LanguageTable."""
    reconciler = Reconciler(table)
    reconciler.add_legacy(legacy_records)
    return reconciler.add_modern(modern_entries)
