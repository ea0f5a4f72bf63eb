"""
Data Writer for the Language Table

Writes the emitted records to CSV and JSON plus a manifest. Values and
order are written exactly as emitted.
"""

import hashlib
import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd
from loguru import logger

from .emitter import as_rows
from .schemas import ROW_FIELDS, DatasetManifest, LanguageRecord, __version__

SCHEMA_VERSION = __version__
BASE_NAME = "iso639_languages"
OUTPUT_FORMATS = ("csv", "json")


def to_dataframe(records: Sequence[LanguageRecord]) -> pd.DataFrame:
    """Convert records to a DataFrame of string columns in emitted order."""
    return pd.DataFrame(as_rows(records), columns=list(ROW_FIELDS), dtype=str)


def _sha256(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


def write_csv(records: Sequence[LanguageRecord], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_dataframe(records).to_csv(path, index=False, encoding='utf-8', lineterminator='\n')
    logger.info(f"Wrote {len(records)} records to {path}")
    return path


def write_json(records: Sequence[LanguageRecord], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = [dict(zip(ROW_FIELDS, row)) for row in as_rows(records)]
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(rows, f, indent=2, ensure_ascii=False)
        f.write('\n')
    logger.info(f"Wrote {len(records)} records to {path}")
    return path


def generate_manifest(records: Sequence[LanguageRecord], files: List[Path],
                      legacy_source: Optional[str] = None,
                      modern_source: Optional[str] = None) -> DatasetManifest:
    """Describe a bundle: record count and a digest per output file."""
    digests: Dict[str, str] = {Path(f).name: _sha256(Path(f)) for f in files}
    return DatasetManifest(
        schema_version=SCHEMA_VERSION,
        record_count=len(records),
        legacy_source=legacy_source,
        modern_source=modern_source,
        files=digests,
    )


def write_bundle(records: Sequence[LanguageRecord], output_dir: Path,
                 formats: Sequence[str] = OUTPUT_FORMATS,
                 legacy_source: Optional[str] = None,
                 modern_source: Optional[str] = None) -> List[Path]:
    """
    Write the requested formats and a manifest.json into output_dir.

    Returns:
        Paths of all files written, manifest last
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    unknown = [fmt for fmt in formats if fmt not in OUTPUT_FORMATS]
    if unknown:
        raise ValueError(f"Unsupported output format(s): {', '.join(unknown)}")

    written: List[Path] = []
    if "csv" in formats:
        written.append(write_csv(records, output_dir / f"{BASE_NAME}.csv"))
    if "json" in formats:
        written.append(write_json(records, output_dir / f"{BASE_NAME}.json"))

    manifest = generate_manifest(records, written, legacy_source, modern_source)
    manifest_path = output_dir / "manifest.json"
    manifest_path.write_text(manifest.model_dump_json(indent=2), encoding='utf-8')
    written.append(manifest_path)

    logger.info(f"Bundle written to {output_dir}")
    return written
