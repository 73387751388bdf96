"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from image_downloader.domain.snowflake import is_snowflake_text


@dataclass(frozen=True)
class Attachment:
    """A file attached to a message. Only images carry a width."""

    url: str
    width: Optional[int] = None

    @property
    def is_image(self) -> bool:
        return self.width is not None


@dataclass(frozen=True)
class Message:
    """A channel message; ``id`` is a snowflake, so it grows with send time."""

    id: int
    attachments: Tuple[Attachment, ...] = ()

    def images(self) -> List[Attachment]:
        return [att for att in self.attachments if att.is_image]


@dataclass(frozen=True)
class Settings:
    """Per-run settings, built once before the loop and never mutated.

    ``start`` is a snowflake lower bound (0 = no lower bound).
    ``quantity`` caps the number of messages images are collected from
    (None = unbounded).
    """

    channel_id: str
    token: str
    destination: Path
    start: int = 0
    quantity: Optional[int] = None

    def __post_init__(self):
        if not is_snowflake_text(self.channel_id):
            raise ValueError(f"Channel ID must be numeric: {self.channel_id!r}")
        if self.start < 0:
            raise ValueError(f"Start boundary must not be negative: {self.start}")
        if self.quantity is not None and self.quantity < 1:
            raise ValueError(
                f"Quantity must be a positive integer or None for unbounded, got {self.quantity}"
            )

    @property
    def has_time_range(self) -> bool:
        return self.start > 0


class StopReason(Enum):
    EXHAUSTED = "exhausted"  # an empty page came back
    BUDGET = "budget"  # quantity reached


@dataclass
class RunSummary:
    """Outcome of a completed run."""

    collected: Dict[int, int] = field(default_factory=dict)
    pages_fetched: int = 0
    stop_reason: StopReason = StopReason.EXHAUSTED
    time_range: bool = False

    @property
    def messages_collected(self) -> int:
        return len(self.collected)

    @property
    def images_saved(self) -> int:
        return sum(self.collected.values())

    def report(self) -> str:
        count = self.messages_collected
        if count == 0:
            if self.time_range:
                return "The selected channel doesn't contain any images in the selected time range!"
            return "The selected channel doesn't contain any images!"
        noun = "image" if count == 1 else "images"
        return f"Successfully saved {count} {noun}!"
