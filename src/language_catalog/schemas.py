"""
Single Source of Truth (SSOT) Schema for the Language Catalog

This module defines the authoritative data models for the reconciled
ISO 639 language table: the canonical language record, the run
configuration, the run result and the dataset manifest written next to
the output files.

Version: 1.0.0
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, validator

# Schema version for governance
__version__ = "1.0.0"

DEFAULT_LEGACY_URL = "https://www.loc.gov/standards/iso639-2/php/code_list.php"
DEFAULT_MODERN_URL = (
    "https://iso639-3.sil.org/sites/iso639-3/files/downloads/iso-639-3.tab"
)

# Field order of the rows handed to downstream renderers
ROW_FIELDS = ("name", "alpha_3_to_use", "alpha_2", "bibliographic", "has_639_2")


# --------------------------------------------------------------------------- #
# Core Data Models                                                             #
# --------------------------------------------------------------------------- #


class LanguageRecord(BaseModel):
    """One language identity, keyed by the code chosen as canonical."""

    name: str = Field(..., description="Display (reference) name")
    alpha_3_to_use: str = Field(
        ..., description="Canonical 3-letter code, unique across the table"
    )
    alpha_3: str = Field(..., description="ISO 639-2/T terminology code")
    bibliographic: Optional[str] = Field(
        None, description="ISO 639-2/B code, only when it differs from alpha_3"
    )
    alpha_2: Optional[str] = Field(None, description="ISO 639-1 two-letter code")
    has_639_2: bool = Field(
        ..., description="Whether the code is also listed in the ISO 639-2 catalog"
    )

    @validator("name")
    def validate_name(cls, v: str) -> str:
        """Reject empty display names."""
        if not v or not v.strip():
            raise ValueError("Language name cannot be empty")
        return v

    @validator("bibliographic")
    def validate_bibliographic(cls, v: Optional[str], values) -> Optional[str]:
        """A bibliographic code equal to the terminology code is not an alternative."""
        if v is not None and v == values.get("alpha_3"):
            raise ValueError("bibliographic code must differ from alpha_3")
        return v

    def as_row(self) -> Tuple[str, str, str, str, str]:
        """Return the record as the 5-tuple consumed by renderers."""
        return (
            self.name,
            self.alpha_3_to_use,
            self.alpha_2 or "",
            self.bibliographic or "",
            "true" if self.has_639_2 else "false",
        )


class DatasetManifest(BaseModel):
    """Manifest describing one generated language table bundle."""

    schema_version: str = Field(default=__version__)
    generated_at: datetime = Field(default_factory=datetime.now)
    record_count: int = Field(..., ge=0)
    legacy_source: Optional[str] = Field(None, description="ISO 639-2 source URL or path")
    modern_source: Optional[str] = Field(None, description="ISO 639-3 source URL or path")
    files: Dict[str, str] = Field(
        default_factory=dict, description="Output file name to sha256 digest"
    )


class LanguageTableResult(BaseModel):
    """Result model for a complete generation run."""

    records: List[LanguageRecord] = Field(default_factory=list)
    legacy_records: int = Field(default=0, description="Records parsed from ISO 639-2")
    modern_entries: int = Field(default=0, description="ISO 639-3 entries retained")
    overridden: int = Field(default=0, description="ISO 639-2 keys replaced by ISO 639-3")
    reserved: int = Field(default=0, description="Synthetic reserved entries added")
    output_files: List[str] = Field(default_factory=list)
    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def total_records(self) -> int:
        return len(self.records)

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds()

    def mark_completed(self) -> None:
        self.completed_at = datetime.now()


# --------------------------------------------------------------------------- #
# Configuration                                                                #
# --------------------------------------------------------------------------- #


class LanguageCatalogConfig(BaseModel):
    """Configuration for a language table generation run."""

    legacy_url: str = Field(default=DEFAULT_LEGACY_URL)
    modern_url: str = Field(default=DEFAULT_MODERN_URL)
    legacy_cache_name: str = Field(default="iso-639-2.html")
    modern_cache_name: str = Field(default="iso-639-3.tab")
    cache_dir: Path = Field(default=Path.home() / ".cache" / "language_catalog")
    output_dir: Path = Field(default=Path("data"))
    user_agent: str = Field(default="language-catalog/1.0.0")
    timeout: int = Field(default=30, ge=1)
    max_retries: int = Field(default=3, ge=0)
    backoff_factor: float = Field(default=1.0, ge=0)
    include_reserved: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    @validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
