"""Port interfaces (Hexagonal Architecture)."""

from image_downloader.ports.outbound import ImageStorePort, MessageSourcePort

__all__ = [
    "ImageStorePort",
    "MessageSourcePort",
]
