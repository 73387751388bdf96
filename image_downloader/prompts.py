"""Interactive settings — fill in anything the environment did not provide."""

import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TypeVar

from image_downloader.config import DEFAULT_OUTPUT_DIRNAME, SettingsDefaults
from image_downloader.domain.models import Settings
from image_downloader.domain.snowflake import is_ascii_digits, is_snowflake_text, parse_start_date

T = TypeVar("T")

_MIN_TOKEN_LENGTH = 11

TOKEN_PROMPT = "What's your bot's token?"
CHANNEL_PROMPT = "What channel are the images in?"
DATE_PROMPT = "How far back should we search?\nLeave blank to download all images."
QUANTITY_PROMPT = "How many images should be downloaded at most?\nLeave blank for an unlimited amount."
PATH_PROMPT = "Where should the images be saved?\nLeave blank to use the default path."


def _log(msg: str):
    print(msg, file=sys.stderr)


def _is_default(text: str) -> bool:
    return not text or text.lower() == "default"


def validate_token(text: str) -> str:
    # Real bot tokens are far longer; this only catches obvious typos
    if len(text) < _MIN_TOKEN_LENGTH:
        raise ValueError("No bot token is that short!")
    return text


def validate_channel(text: str) -> str:
    if not is_snowflake_text(text):
        raise ValueError("Invalid input!\nDiscord Channel IDs only contain numerical characters.")
    return text


def parse_quantity(text: str) -> Optional[int]:
    """Blank, ``default`` or 0 mean unbounded (None)."""
    if _is_default(text):
        return None
    if not is_ascii_digits(text):
        raise ValueError(
            "Invalid input!\n"
            "Make sure to either select a positive integer or to hit `Enter` immediately."
        )
    return int(text) or None


def resolve_output_dir(text: str, cwd: Optional[Path] = None) -> Path:
    """Create (if needed) and return the directory images are saved into."""
    if _is_default(text):
        path = (cwd or Path.cwd()) / DEFAULT_OUTPUT_DIRNAME
    else:
        path = Path(text).expanduser()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        raise ValueError(
            "Failed to create directory!\n"
            "Selected Filepath might be invalid, please use the following format: `foo/bar`."
        )
    return path


def ask(prompt: str, input_fn: Callable[[], str] = input) -> str:
    print(f"\n{prompt}\n")
    return input_fn().strip()


def prompt_until_valid(
    prompt: str,
    parse: Callable[[str], T],
    input_fn: Callable[[], str] = input,
) -> T:
    """Re-ask until ``parse`` accepts the answer.

    EOFError and KeyboardInterrupt propagate to the caller.
    """
    while True:
        answer = ask(prompt, input_fn)
        try:
            return parse(answer)
        except ValueError as e:
            print(f"\n{e}")


def _resolve(
    env_name: str,
    env_value: str,
    prompt: str,
    parse: Callable[[str], T],
    input_fn: Callable[[], str],
) -> T:
    if env_value:
        try:
            return parse(env_value)
        except ValueError as e:
            _log(f"Ignoring {env_name}: {e}")
    return prompt_until_valid(prompt, parse, input_fn)


def collect_settings(
    defaults: Optional[SettingsDefaults] = None,
    input_fn: Callable[[], str] = input,
    now: Optional[datetime] = None,
    cwd: Optional[Path] = None,
) -> Settings:
    """Build run Settings from environment defaults, prompting for the rest."""
    defaults = defaults or SettingsDefaults()

    token = _resolve("DISCORD_BOT_TOKEN", defaults.token, TOKEN_PROMPT, validate_token, input_fn)
    channel_id = _resolve(
        "DISCORD_CHANNEL_ID", defaults.channel_id, CHANNEL_PROMPT, validate_channel, input_fn
    )
    start = _resolve(
        "IMAGE_START_DATE",
        defaults.start_date,
        DATE_PROMPT,
        lambda text: parse_start_date(text, now=now),
        input_fn,
    )
    quantity = _resolve("IMAGE_QUANTITY", defaults.quantity, QUANTITY_PROMPT, parse_quantity, input_fn)
    destination = _resolve(
        "IMAGE_OUTPUT_DIR",
        defaults.output_dir,
        PATH_PROMPT,
        lambda text: resolve_output_dir(text, cwd=cwd),
        input_fn,
    )

    return Settings(
        channel_id=channel_id,
        token=token,
        destination=destination,
        start=start,
        quantity=quantity,
    )
