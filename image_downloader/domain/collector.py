"""Collector — filters image attachments and enforces the quantity budget."""

import sys
from pathlib import Path
from typing import Dict, List, Optional

from image_downloader.domain.models import Message
from image_downloader.ports.outbound import ImageStorePort


def _log(msg: str):
    print(msg, file=sys.stderr)


class Collector:
    """Persists the images of each message and tracks which messages counted.

    ``collected`` maps a message ID to the number of images stored from it.
    A message enters the mapping once, after its first image is stored, so
    its size is the number of messages that contributed images.

    The budget is checked once per message, before its attachments, so a
    message that passes the check has all of its images stored even if that
    takes the total past ``quantity``.
    """

    def __init__(self, store: ImageStorePort, destination: Path, quantity: Optional[int] = None):
        self._store = store
        self._destination = destination
        self._quantity = quantity
        self.collected: Dict[int, int] = {}

    @property
    def budget_reached(self) -> bool:
        return self._quantity is not None and len(self.collected) >= self._quantity

    async def process_page(self, page: List[Message]) -> bool:
        """Store images from one page, in order.

        Returns True if another page should be requested, False once the
        budget has been reached.
        """
        for message in page:
            if self.budget_reached:
                _log(f"Budget of {self._quantity} reached, stopping")
                return False
            if message.id in self.collected:
                continue
            await self._process_message(message)

        return not self.budget_reached

    async def _process_message(self, message: Message):
        for attachment in message.images():
            await self._store.persist(attachment.url, self._destination)
            self.collected[message.id] = self.collected.get(message.id, 0) + 1
