"""Paginator — walks a newest-first message feed forward by cursor."""

import sys
from typing import List

from image_downloader.domain.errors import TransportError
from image_downloader.domain.models import Message
from image_downloader.ports.outbound import MessageSourcePort


def _log(msg: str):
    print(msg, file=sys.stderr)


class Paginator:
    """Requests successive pages of messages newer than a moving cursor.

    Each page comes back newest-first, so the first message of a non-empty
    page carries the largest ID and becomes the next ``after`` value.
    """

    def __init__(self, source: MessageSourcePort, channel_id: str, token: str, start: int = 0):
        self._source = source
        self._channel_id = channel_id
        self._token = token
        self.cursor = start
        self.pages_fetched = 0
        self.exhausted = False

    async def next_page(self) -> List[Message]:
        """Fetch the page after the current cursor and advance it.

        Returns an empty list once the feed is exhausted.
        """
        if self.exhausted:
            return []

        page = await self._source.fetch_page(self._channel_id, self._token, self.cursor)
        if not page:
            self.exhausted = True
            _log(f"Feed exhausted after {self.pages_fetched} page(s) (cursor={self.cursor})")
            return []

        newest = page[0].id
        if newest <= self.cursor:
            raise TransportError(
                f"Feed did not advance: newest message {newest} is not after cursor {self.cursor}"
            )

        _log(f"Fetched page of {len(page)} message(s) after {self.cursor}")
        self.cursor = newest
        self.pages_fetched += 1
        return page
