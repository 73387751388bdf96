"""Adapters — Discord REST transport and local file storage."""

from image_downloader.adapters.discord.client import DiscordMessageClient
from image_downloader.adapters.storage.file_store import FileImageStore, filename_for_url

__all__ = [
    "DiscordMessageClient",
    "FileImageStore",
    "filename_for_url",
]
