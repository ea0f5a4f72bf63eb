"""
Tests for Data Writer

Tests the writer module functionality for generating output files and manifests.
"""

import hashlib
import json

import pytest

from language_catalog.schemas import LanguageRecord
from language_catalog.writer import (
    SCHEMA_VERSION,
    generate_manifest,
    to_dataframe,
    write_bundle,
    write_csv,
    write_json,
)


@pytest.fixture
def records():
    return [
        LanguageRecord(name="French", alpha_3_to_use="fre", alpha_3="fra",
                       bibliographic="fre", alpha_2="fr", has_639_2=True),
        LanguageRecord(name="Ghotuo", alpha_3_to_use="aaa", alpha_3="aaa", has_639_2=False),
    ]


class TestToDataFrame:
    """Test DataFrame conversion."""

    def test_columns_and_values(self, records):
        df = to_dataframe(records)

        assert list(df.columns) == ["name", "alpha_3_to_use", "alpha_2", "bibliographic", "has_639_2"]
        assert df.iloc[0]["bibliographic"] == "fre"
        assert df.iloc[1]["alpha_2"] == ""
        assert df.iloc[1]["has_639_2"] == "false"

    def test_empty_list(self):
        assert len(to_dataframe([])) == 0


class TestWriteFiles:
    """Test CSV and JSON output."""

    def test_write_csv(self, records, tmp_path):
        path = write_csv(records, tmp_path / "out" / "languages.csv")

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "name,alpha_3_to_use,alpha_2,bibliographic,has_639_2"
        assert lines[1] == "French,fre,fr,fre,true"
        assert lines[2] == "Ghotuo,aaa,,,false"

    def test_write_json_keeps_order(self, records, tmp_path):
        path = write_json(records, tmp_path / "languages.json")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert [row["name"] for row in data] == ["French", "Ghotuo"]
        assert data[1] == {
            "name": "Ghotuo",
            "alpha_3_to_use": "aaa",
            "alpha_2": "",
            "bibliographic": "",
            "has_639_2": "false",
        }


class TestBundle:
    """Test bundle and manifest generation."""

    def test_generate_manifest(self, records, tmp_path):
        path = write_csv(records, tmp_path / "languages.csv")
        manifest = generate_manifest(records, [path], legacy_source="a.html", modern_source="b.tab")

        assert manifest.schema_version == SCHEMA_VERSION
        assert manifest.record_count == 2
        assert manifest.legacy_source == "a.html"
        assert manifest.files == {"languages.csv": hashlib.sha256(path.read_bytes()).hexdigest()}

    def test_write_bundle_all_formats(self, records, tmp_path):
        files = write_bundle(records, tmp_path)

        assert [f.name for f in files] == ["iso639_languages.csv", "iso639_languages.json", "manifest.json"]
        manifest = json.loads((tmp_path / "manifest.json").read_text(encoding="utf-8"))
        assert manifest["record_count"] == 2
        assert set(manifest["files"]) == {"iso639_languages.csv", "iso639_languages.json"}

    def test_write_bundle_single_format(self, records, tmp_path):
        files = write_bundle(records, tmp_path, formats=("json",))
        assert [f.name for f in files] == ["iso639_languages.json", "manifest.json"]

    def test_write_bundle_unknown_format(self, records, tmp_path):
        with pytest.raises(ValueError):
            write_bundle(records, tmp_path, formats=("xml",))
