"""Discord REST client using aiohttp — implements MessageSourcePort."""

import asyncio
import sys
from typing import List, Optional

import aiohttp
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from image_downloader.config import DEFAULT_API_BASE, PAGE_LIMIT
from image_downloader.domain.errors import TransportError
from image_downloader.domain.models import Attachment, Message


def _log(msg: str):
    print(msg, file=sys.stderr)


class AttachmentPayload(BaseModel):
    url: str
    width: Optional[int] = None


class MessagePayload(BaseModel):
    # Discord sends snowflakes as numeric strings
    id: int = Field(ge=0)
    attachments: List[AttachmentPayload] = Field(default_factory=list)

    def to_domain(self) -> Message:
        return Message(
            id=self.id,
            attachments=tuple(Attachment(url=a.url, width=a.width) for a in self.attachments),
        )


_PAGE_ADAPTER = TypeAdapter(List[MessagePayload])


class DiscordMessageClient:
    """Async client for ``GET /channels/{id}/messages``.

    Pages come back newest first. ``after=0`` sends no ``after`` parameter,
    which asks for the most recent page.
    """

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        page_limit: int = PAGE_LIMIT,
        timeout_seconds: float = 30.0,
    ):
        self._api_base = api_base.rstrip("/")
        self._page_limit = page_limit
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def messages_url(self, channel_id: str) -> str:
        return f"{self._api_base}/channels/{channel_id}/messages"

    def build_params(self, after: int) -> dict:
        params = {"limit": str(self._page_limit)}
        if after > 0:
            params["after"] = str(after)
        return params

    @staticmethod
    def parse_page(data) -> List[Message]:
        """Validate a decoded response body and convert it to domain messages."""
        try:
            payload = _PAGE_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise TransportError(f"Malformed message page: {e.error_count()} validation error(s)") from e
        return [m.to_domain() for m in payload]

    async def fetch_page(self, channel_id: str, token: str, after: int) -> List[Message]:
        url = self.messages_url(channel_id)
        headers = {"Authorization": f"Bot {token}"}
        params = self.build_params(after)

        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url, headers=headers, params=params) as resp:
                    if resp.status >= 400:
                        body = await resp.text()
                        raise TransportError(
                            f"HTTP {resp.status} fetching messages from channel {channel_id}: {body[:200]}"
                        )
                    data = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Failed to fetch messages from channel {channel_id}: {e}") from e
        except ValueError as e:
            raise TransportError(f"Response from channel {channel_id} is not valid JSON") from e

        page = self.parse_page(data)
        _log(f"GET {url} after={after or '-'} -> {len(page)} message(s)")
        return page
