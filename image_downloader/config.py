"""Configuration — environment variables and typed config."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_BASE = "https://discordapp.com/api"
PAGE_LIMIT = 100  # max messages per request accepted by the API
DEFAULT_OUTPUT_DIRNAME = "Discord Images"

_TRUTHY = ("1", "true", "yes", "on")
DEFAULT_REQUEST_TIMEOUT = 30.0


def _log(msg: str):
    print(msg, file=sys.stderr)


def _read_timeout(raw: str) -> float:
    """Parse a positive timeout in seconds, falling back to the default."""
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if not 0 < value < float("inf"):
        _log(
            f"Unsupported DOWNLOADER_REQUEST_TIMEOUT={raw!r}, "
            f"falling back to {DEFAULT_REQUEST_TIMEOUT}"
        )
        return DEFAULT_REQUEST_TIMEOUT
    return value


@dataclass
class DownloaderConfig:
    """Transport and shell behaviour, independent of any single run."""

    api_base: str = DEFAULT_API_BASE
    page_limit: int = PAGE_LIMIT
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT
    pause_on_exit: bool = True

    @classmethod
    def from_env(cls) -> "DownloaderConfig":
        return cls(
            api_base=os.getenv("DISCORD_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            request_timeout_seconds=_read_timeout(os.getenv("DOWNLOADER_REQUEST_TIMEOUT", "30")),
            pause_on_exit=os.getenv("DOWNLOADER_PAUSE_ON_EXIT", "true").strip().lower()
            in _TRUTHY,
        )


@dataclass
class SettingsDefaults:
    """Raw run settings taken from the environment.

    An empty string means the value was not provided and must be prompted for.
    """

    token: str = ""
    channel_id: str = ""
    start_date: str = ""
    quantity: str = ""
    output_dir: str = ""

    @classmethod
    def from_env(cls) -> "SettingsDefaults":
        return cls(
            token=os.getenv("DISCORD_BOT_TOKEN", "").strip(),
            channel_id=os.getenv("DISCORD_CHANNEL_ID", "").strip(),
            start_date=os.getenv("IMAGE_START_DATE", "").strip(),
            quantity=os.getenv("IMAGE_QUANTITY", "").strip(),
            output_dir=os.getenv("IMAGE_OUTPUT_DIR", "").strip(),
        )
