"""Discord Image Downloader — save every image posted in a channel."""

__version__ = "0.1.0"

from image_downloader.domain import (  # noqa: E402
    Attachment,
    DownloaderError,
    ImageDownloader,
    Message,
    PersistError,
    RunSummary,
    Settings,
    TransportError,
)

__all__ = [
    "Attachment",
    "DownloaderError",
    "ImageDownloader",
    "Message",
    "PersistError",
    "RunSummary",
    "Settings",
    "TransportError",
]
