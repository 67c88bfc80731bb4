"""Environment configuration and path helpers."""

import logging
import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

LOG_LEVEL_ENV = "SPANSTATUS_LOG_LEVEL"
LOG_FILE_ENV = "SPANSTATUS_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"

_LEVEL_NAMES = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


PathLike = Union[str, Path]


def load_environment(env_file: PathLike | None = None) -> bool:
    """
    Load variables from a .env file.

    Variables already present in the environment are left untouched.

    Args:
        env_file: Path to the .env file. Defaults to searching from the
                  current working directory.

    Returns:
        True if the file defined any variables
    """
    if env_file is None:
        return load_dotenv(override=False)
    return load_dotenv(Path(env_file), override=False)


def resolve_log_level(value: str | None = None) -> str:
    """Resolve a log level name, falling back to DEFAULT_LOG_LEVEL."""
    if value is None:
        value = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)

    level = value.strip().upper()
    if level not in _LEVEL_NAMES:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using %s", value, DEFAULT_LOG_LEVEL
        )
        return DEFAULT_LOG_LEVEL
    return level


def resolve_log_file(value: PathLike | None = None) -> Path | None:
    """Resolve the log file path. None means console-only logging."""
    if value is None:
        value = os.getenv(LOG_FILE_ENV)

    if not value:
        return None

    return Path(value).expanduser().resolve()
