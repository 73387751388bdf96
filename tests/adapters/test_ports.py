"""Tests for port protocol conformance.

Verifies that the adapters implement the expected interfaces.
"""

from image_downloader.adapters.discord.client import DiscordMessageClient
from image_downloader.adapters.storage.file_store import FileImageStore
from image_downloader.ports.outbound import ImageStorePort, MessageSourcePort


class TestPortConformance:
    def test_discord_client_is_message_source(self):
        assert isinstance(DiscordMessageClient(), MessageSourcePort)

    def test_file_store_is_image_store(self):
        assert isinstance(FileImageStore(), ImageStorePort)

    def test_file_store_is_not_message_source(self):
        assert not isinstance(FileImageStore(), MessageSourcePort)
