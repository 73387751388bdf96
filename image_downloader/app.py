"""Application entrypoint — settings, run, summary, exit code."""

import asyncio
import sys
from typing import Callable, Optional

from image_downloader import __version__
from image_downloader.adapters.discord.client import DiscordMessageClient
from image_downloader.adapters.storage.file_store import FileImageStore
from image_downloader.config import DownloaderConfig, SettingsDefaults
from image_downloader.domain.downloader import ImageDownloader
from image_downloader.domain.errors import DownloaderError
from image_downloader.domain.models import RunSummary, Settings
from image_downloader.prompts import collect_settings

REPO_URL = "https://github.com/subreme/discord-image-downloader"


def print_banner():
    print(f"Discord Image Downloader v{__version__}")
    print("Made by Subreme :)")


def build_downloader(config: DownloaderConfig) -> ImageDownloader:
    source = DiscordMessageClient(
        api_base=config.api_base,
        page_limit=config.page_limit,
        timeout_seconds=config.request_timeout_seconds,
    )
    store = FileImageStore(timeout_seconds=config.request_timeout_seconds)
    return ImageDownloader(source, store)


async def download(settings: Settings, config: Optional[DownloaderConfig] = None) -> RunSummary:
    """Run one download with the real Discord and filesystem adapters."""
    config = config or DownloaderConfig.from_env()
    # Separates progress output from the last prompt
    print()
    summary = await build_downloader(config).run(settings)
    print(f"\n{summary.report()}")
    return summary


def main(input_fn: Callable[[], str] = input) -> int:
    config = DownloaderConfig.from_env()
    print_banner()

    try:
        settings = collect_settings(SettingsDefaults.from_env(), input_fn=input_fn)
    except (EOFError, KeyboardInterrupt):
        print("\nInterrupted by user")
        return 1

    try:
        asyncio.run(download(settings, config))
    except DownloaderError as e:
        print(f"\nError: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1

    print(f"\nMake sure to star {REPO_URL} if you found this useful!")
    if config.pause_on_exit:
        print("\nHit `Enter` to close!")
        try:
            input_fn()
        except (EOFError, KeyboardInterrupt):
            pass
    return 0


def run():
    """Entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
