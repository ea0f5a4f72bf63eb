"""
Reserved Code Entries

ISO 639-2 sets aside qaa-qtz for local use. The first four codes of that
range are added to every table so users can tag tracks with them; they are
always flagged as ISO 639-2 codes.
"""

from typing import List

from loguru import logger

from .schemas import LanguageRecord
from .table import LanguageTable

RESERVED_PREFIX = "qa"
RESERVED_SUFFIXES = "abcd"


def reserved_records() -> List[LanguageRecord]:
    """The synthetic records for qaa, qab, qac and qad."""
    records = []
    for letter in RESERVED_SUFFIXES:
        code = f"{RESERVED_PREFIX}{letter}"
        records.append(LanguageRecord(
            name=f"Reserved for local use: {code}",
            alpha_3_to_use=code,
            alpha_3=code,
            bibliographic=None,
            alpha_2=None,
            has_639_2=True,
        ))
    return records


class ReservedCodeInjector:
    """Append the reserved local-use entries to a LanguageTable."""

    def inject(self, table: LanguageTable) -> LanguageTable:
        for record in reserved_records():
            if table.put(record):
                logger.warning(f"Reserved code '{record.alpha_3_to_use}' replaced a catalog entry")
        logger.debug(f"Injected {len(RESERVED_SUFFIXES)} reserved codes")
        return table
