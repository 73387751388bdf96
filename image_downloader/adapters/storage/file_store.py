"""Local file image store — implements ImageStorePort."""

import asyncio
import os
import tempfile
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

import aiohttp

from image_downloader.domain.errors import PersistError

_NAME_SEGMENT = 5  # https: / "" / host / attachments / <channel> / <name> / ...


def filename_for_url(url: str) -> str:
    """Derive ``<stem>.<ext>`` from an attachment URL.

    The stem is the sixth slash-separated segment of the URL and the extension
    is whatever follows its last period. Query string and fragment are ignored.
    """
    scheme, netloc, path, _query, _fragment = urlsplit(url)
    bare = urlunsplit((scheme, netloc, path, "", ""))
    segments = bare.split("/")
    if len(segments) <= _NAME_SEGMENT or not segments[_NAME_SEGMENT]:
        raise PersistError(f"Cannot derive a file name from {url!r}")
    if "." not in bare:
        raise PersistError(f"Cannot derive a file extension from {url!r}")
    stem = segments[_NAME_SEGMENT]
    ext = bare.rsplit(".", 1)[1]
    if not ext or "/" in ext:
        raise PersistError(f"Cannot derive a file extension from {url!r}")
    return f"{stem}.{ext}"


class FileImageStore:
    """Downloads attachment bytes and writes them under a destination directory."""

    def __init__(self, timeout_seconds: float = 30.0, announce: bool = True):
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._announce = announce

    @staticmethod
    def path_for(url: str, destination: Path) -> Path:
        return Path(destination) / filename_for_url(url)

    async def _download(self, url: str) -> bytes:
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url) as resp:
                    if resp.status >= 400:
                        raise PersistError(f"HTTP {resp.status} downloading {url}")
                    return await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise PersistError(f"Failed to download {url}: {e}") from e

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        # Atomic write; an existing file is replaced
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_path, str(path))
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    async def persist(self, url: str, destination: Path) -> Path:
        path = self.path_for(url, destination)
        data = await self._download(url)
        try:
            self._write(path, data)
        except OSError as e:
            raise PersistError(f"Failed to save {path}: {e}") from e
        if self._announce:
            print(f"Saved {path.name}!")
        return path
