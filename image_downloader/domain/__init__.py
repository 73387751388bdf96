"""Domain layer — pure Python, no framework dependencies."""

from image_downloader.domain.collector import Collector
from image_downloader.domain.downloader import ImageDownloader
from image_downloader.domain.errors import DownloaderError, PersistError, TransportError
from image_downloader.domain.models import Attachment, Message, RunSummary, Settings, StopReason
from image_downloader.domain.paginator import Paginator
from image_downloader.domain.snowflake import (
    DISCORD_EPOCH_MS,
    datetime_from_snowflake,
    parse_start_date,
    snowflake_from_datetime,
)

__all__ = [
    "Attachment",
    "Collector",
    "DISCORD_EPOCH_MS",
    "DownloaderError",
    "ImageDownloader",
    "Message",
    "Paginator",
    "PersistError",
    "RunSummary",
    "Settings",
    "StopReason",
    "TransportError",
    "datetime_from_snowflake",
    "parse_start_date",
    "snowflake_from_datetime",
]
