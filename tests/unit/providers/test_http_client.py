"""
Tests for the catalog HTTP client and its file cache.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from language_catalog.providers.base import ProviderError, SourceProvider
from language_catalog.providers.http import CatalogHTTPClient

URL = "https://example.com/iso-639-3.tab"


def make_response(text: str) -> Mock:
    response = Mock()
    response.content = text.encode("utf-8")
    response.raise_for_status = Mock()
    return response


class TestCatalogHTTPClient:
    """Test downloads, caching and error handling."""

    def setup_method(self):
        self.client = None

    def teardown_method(self):
        if self.client:
            self.client.close()

    def test_download_writes_cache(self, tmp_path):
        self.client = CatalogHTTPClient(cache_dir=tmp_path / "cache")

        with patch.object(self.client.session, "get", return_value=make_response("Id\tRef_Name\n")) as mock_get:
            text = self.client.fetch(URL, "iso-639-3.tab")

        assert text == "Id\tRef_Name\n"
        assert (tmp_path / "cache" / "iso-639-3.tab").read_text(encoding="utf-8") == text
        mock_get.assert_called_once_with(URL, timeout=30)

    def test_cache_hit_skips_network(self, tmp_path):
        (tmp_path / "iso-639-3.tab").write_text("cached", encoding="utf-8")
        self.client = CatalogHTTPClient(cache_dir=tmp_path)

        with patch.object(self.client.session, "get") as mock_get:
            assert self.client.fetch(URL, "iso-639-3.tab") == "cached"

        mock_get.assert_not_called()

    def test_force_refresh_downloads_again(self, tmp_path):
        (tmp_path / "iso-639-3.tab").write_text("cached", encoding="utf-8")
        self.client = CatalogHTTPClient(cache_dir=tmp_path)

        with patch.object(self.client.session, "get", return_value=make_response("fresh")):
            assert self.client.fetch(URL, "iso-639-3.tab", force_refresh=True) == "fresh"

        assert (tmp_path / "iso-639-3.tab").read_text(encoding="utf-8") == "fresh"

    def test_utf8_body_decoded(self, tmp_path):
        self.client = CatalogHTTPClient(cache_dir=tmp_path)

        with patch.object(self.client.session, "get", return_value=make_response("français")):
            assert self.client.fetch(URL, "x.html") == "français"

    def test_request_failure_raises_provider_error(self, tmp_path):
        self.client = CatalogHTTPClient(cache_dir=tmp_path)

        with patch.object(self.client.session, "get", side_effect=requests.ConnectionError("down")):
            with pytest.raises(ProviderError) as exc_info:
                self.client.fetch(URL, "iso-639-3.tab")

        assert exc_info.value.provider_name == "http"
        assert not (tmp_path / "iso-639-3.tab").exists()

    def test_http_error_status_raises_provider_error(self, tmp_path):
        self.client = CatalogHTTPClient(cache_dir=tmp_path)
        response = make_response("")
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")

        with patch.object(self.client.session, "get", return_value=response):
            with pytest.raises(ProviderError):
                self.client.fetch(URL, "iso-639-3.tab")

    def test_read_local_missing_file(self, tmp_path):
        with pytest.raises(ProviderError) as exc_info:
            CatalogHTTPClient.read_local(tmp_path / "missing.html")
        assert exc_info.value.provider_name == "file"

    def test_clear_cache(self, tmp_path):
        (tmp_path / "a.html").write_text("a", encoding="utf-8")
        (tmp_path / "b.tab").write_text("b", encoding="utf-8")
        self.client = CatalogHTTPClient(cache_dir=tmp_path)

        assert self.client.clear_cache() == 2
        assert list(tmp_path.iterdir()) == []

    def test_clear_missing_cache_dir(self, tmp_path):
        self.client = CatalogHTTPClient(cache_dir=tmp_path / "never-created")
        assert self.client.clear_cache() == 0

    def test_session_headers(self, tmp_path):
        self.client = CatalogHTTPClient(user_agent="test-agent/0.1", cache_dir=tmp_path)
        assert self.client.session.headers["User-Agent"] == "test-agent/0.1"

    def test_invalid_utf8_body_raises_provider_error(self, tmp_path):
        self.client = CatalogHTTPClient(cache_dir=tmp_path)
        response = make_response("")
        response.content = b"\xff\xfe bad"

        with patch.object(self.client.session, "get", return_value=response):
            with pytest.raises(ProviderError) as exc_info:
                self.client.fetch(URL, "iso-639-3.tab")

        assert exc_info.value.provider_name == "http"
        assert not (tmp_path / "iso-639-3.tab").exists()

    def test_read_local_invalid_utf8(self, tmp_path):
        path = tmp_path / "broken.html"
        path.write_bytes(b"<td>\xe9</td>")

        with pytest.raises(ProviderError) as exc_info:
            CatalogHTTPClient.read_local(path)
        assert exc_info.value.provider_name == "file"

    def test_implements_source_provider(self):
        assert SourceProvider in CatalogHTTPClient.__mro__
