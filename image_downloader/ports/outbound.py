"""Outbound ports — interfaces for the remote feed and local storage."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from image_downloader.domain.models import Message


@runtime_checkable
class MessageSourcePort(Protocol):
    """Interface for fetching one page of channel messages.

    Returns messages with ID strictly greater than ``after`` (0 = no lower
    bound), newest first, at most one page in size. An empty list means the
    feed is exhausted. Raises TransportError on failure.
    """

    async def fetch_page(self, channel_id: str, token: str, after: int) -> List[Message]: ...


@runtime_checkable
class ImageStorePort(Protocol):
    """Interface for persisting one image URL into a directory.

    Returns the written path. Raises PersistError on failure.
    """

    async def persist(self, url: str, destination: Path) -> Path: ...
