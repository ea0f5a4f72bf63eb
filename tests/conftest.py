"""
Pytest configuration and shared catalog fixtures.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

LEGACY_HTML = """<!DOCTYPE html>
<html>
<head><title>ISO 639-2 Language Code List</title></head>
<body>
<table width="100%" class="layout">
  <tr><td>Navigation</td><td>Codes for the Representation of Names of Languages</td></tr>
  <tr><td colspan="2">
    <table border="1" cellpadding="2" summary="ISO 639-2 codes">
      <tr>
        <th scope="col">ISO 639-2 Code</th>
        <th scope="col">ISO 639-1 Code</th>
        <th scope="col">English name of Language</th>
        <th scope="col">French name of Language</th>
      </tr>
      <tr valign="top"><td>ang</td><td>&nbsp;</td><td>English, Old (ca.450-1100)</td><td>anglo-saxon (ca.450-1100)</td></tr>
      <tr valign="top"><td>eng</td><td>en</td><td>English</td><td>anglais</td></tr>
      <tr valign="top"><td>fre (B)<br>fra (T)</td><td>fr</td><td>French</td><td>fran&ccedil;ais</td></tr>
      <tr valign="top"><td>ger (B)<br/>deu (T)</td><td>de</td><td>German</td><td>allemand</td></tr>
      <tr valign="top"><td>qaa-qtz</td><td>&nbsp;</td><td>Reserved for local use</td><td>r&eacute;serv&eacute;e &agrave; l'usage local</td></tr>
    </table>
  </td></tr>
</table>
</body>
</html>
"""

MODERN_HEADER = "Id\tPart2B\tPart2T\tPart1\tScope\tLanguage_Type\tRef_Name\tComment"

MODERN_LINES = [
    "aaa\t\t\t\tI\tL\tGhotuo\t",
    "deu\tger\tdeu\tde\tI\tL\tGerman\t",
    "eng\teng\teng\ten\tI\tL\tEnglish\t",
    "ang\tang\tang\t\tI\tH\tOld English (ca. 450-1100)\t",
    "epo\tepo\tepo\teo\tI\tC\tEsperanto\t",
    "fra\tfre\tfra\tfr\tI\tL\tFrench\t",
    "grc\tgrc\tgrc\t\tI\tA\tAncient Greek (to 1453)\t",
    "zxx\tzxx\tzxx\t\tS\tS\tNo linguistic content\t",
]

MODERN_TSV = "\r\n".join([MODERN_HEADER] + MODERN_LINES) + "\r\n"


@pytest.fixture
def legacy_html():
    """ISO 639-2 code list excerpt wrapped in a layout table."""
    return LEGACY_HTML


@pytest.fixture
def modern_tsv():
    """ISO 639-3 code table excerpt with CRLF line endings."""
    return MODERN_TSV


@pytest.fixture
def source_files(tmp_path: Path, legacy_html, modern_tsv):
    """Both catalogs written to disk."""
    legacy = tmp_path / "iso-639-2.html"
    modern = tmp_path / "iso-639-3.tab"
    legacy.write_text(legacy_html, encoding="utf-8")
    modern.write_text(modern_tsv, encoding="utf-8")
    return legacy, modern


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI commands replace the loguru sink; restore a default one afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
