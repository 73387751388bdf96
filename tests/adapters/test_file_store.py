"""Unit tests for FileImageStore and file name derivation."""

import os

import aiohttp
import pytest
from unittest.mock import patch

from image_downloader.adapters.storage.file_store import FileImageStore, filename_for_url
from image_downloader.domain.errors import PersistError

URL = "https://cdn.discordapp.com/attachments/123456/987654/cool_shoe.png"


def _mock_download_session(status=200, body=b"\x89PNG", error=None, urls=None):
    class FakeResponse:
        async def read(self):
            return body

        async def __aenter__(self):
            self.status = status
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, **kwargs):
            pass

        def get(self, url):
            if error is not None:
                raise error
            if urls is not None:
                urls.append(url)
            return FakeResponse()

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


class TestFilenameForUrl:
    def test_stem_and_extension(self):
        assert filename_for_url(URL) == "987654.png"

    def test_idempotent(self):
        assert filename_for_url(URL) == filename_for_url(URL)

    def test_extension_from_last_period(self):
        url = "https://cdn.discordapp.com/attachments/1/2/archive.tar.gz"
        assert filename_for_url(url) == "2.gz"

    def test_query_string_ignored(self):
        url = URL + "?ex=65f1&is=65e0&hm=abc123&"
        assert filename_for_url(url) == "987654.png"

    def test_too_few_segments(self):
        with pytest.raises(PersistError):
            filename_for_url("https://cdn.discordapp.com/a.png")

    def test_no_extension(self):
        with pytest.raises(PersistError):
            filename_for_url("https://cdn/attachments/1/2/file")


class TestPersist:
    @pytest.mark.asyncio
    async def test_writes_bytes(self, tmp_path):
        urls = []
        store = FileImageStore(announce=False)
        with patch(
            "image_downloader.adapters.storage.file_store.aiohttp.ClientSession",
            _mock_download_session(body=b"imagebytes", urls=urls),
        ):
            path = await store.persist(URL, tmp_path)

        assert path == tmp_path / "987654.png"
        assert path.read_bytes() == b"imagebytes"
        assert urls == [URL]

    @pytest.mark.asyncio
    async def test_same_url_same_path_overwrites(self, tmp_path):
        store = FileImageStore(announce=False)
        target = "image_downloader.adapters.storage.file_store.aiohttp.ClientSession"
        with patch(target, _mock_download_session(body=b"first")):
            first = await store.persist(URL, tmp_path)
        with patch(target, _mock_download_session(body=b"second")):
            second = await store.persist(URL, tmp_path)

        assert first == second
        assert second.read_bytes() == b"second"
        assert os.listdir(tmp_path) == ["987654.png"]

    @pytest.mark.asyncio
    async def test_announces_saved_file(self, tmp_path, capsys):
        store = FileImageStore()
        with patch(
            "image_downloader.adapters.storage.file_store.aiohttp.ClientSession",
            _mock_download_session(),
        ):
            await store.persist(URL, tmp_path)
        assert "Saved 987654.png!" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_http_error(self, tmp_path):
        store = FileImageStore(announce=False)
        with patch(
            "image_downloader.adapters.storage.file_store.aiohttp.ClientSession",
            _mock_download_session(status=404),
        ):
            with pytest.raises(PersistError, match="HTTP 404"):
                await store.persist(URL, tmp_path)
        assert os.listdir(tmp_path) == []

    @pytest.mark.asyncio
    async def test_network_error(self, tmp_path):
        store = FileImageStore(announce=False)
        with patch(
            "image_downloader.adapters.storage.file_store.aiohttp.ClientSession",
            _mock_download_session(error=aiohttp.ClientConnectionError("boom")),
        ):
            with pytest.raises(PersistError, match="boom"):
                await store.persist(URL, tmp_path)

    @pytest.mark.asyncio
    async def test_missing_directory(self, tmp_path):
        store = FileImageStore(announce=False)
        with patch(
            "image_downloader.adapters.storage.file_store.aiohttp.ClientSession",
            _mock_download_session(),
        ):
            with pytest.raises(PersistError, match="Failed to save"):
                await store.persist(URL, tmp_path / "missing")
