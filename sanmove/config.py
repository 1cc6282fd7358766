"""Configuration module for loading environment variables and logging setup."""

import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from loguru import logger

DEFAULT_ENV_FILE = ".env"
DEFAULT_LOG_LEVEL = "WARNING"

# Track whether environment has been loaded
_ENV_LOADED = False


def load_env(filename: str | None = None, override: bool = False) -> Path | None:
    """Load codec settings (currently SANMOVE_LOG_LEVEL) from a .env file.

    Once loaded, subsequent calls are skipped unless override=True.
    Tests should use override=True to reload different configs.

    Args:
        filename: Optional .env filename. Defaults to SANMOVE_ENV_FILE, then
            ENV_FILE, then '.env'.
        override: Whether to override existing environment variables.

    Returns:
        Path to the .env file that was loaded, or None if not found.
    """
    global _ENV_LOADED

    if _ENV_LOADED and not override:
        return None

    env_file = (
        filename
        or os.environ.get("SANMOVE_ENV_FILE")
        or os.environ.get("ENV_FILE", DEFAULT_ENV_FILE)
    )
    dotenv_path = find_dotenv(env_file, usecwd=True)

    if not dotenv_path:
        logger.debug(f"No .env file found: {env_file}")
        return None

    load_dotenv(dotenv_path, override=override)
    _ENV_LOADED = True
    logger.debug(
        f"Loaded environment from: {dotenv_path} (log level {get_log_level()})"
    )
    return Path(dotenv_path)


def get_log_level() -> str:
    """Log level from SANMOVE_LOG_LEVEL, uppercased, or the default."""
    return os.environ.get("SANMOVE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: str | None = None) -> int:
    """Replace loguru's default sink with a stderr sink at the given level.

    Args:
        level: Level name such as 'DEBUG'. Defaults to get_log_level().

    Returns:
        Handler id of the new sink.
    """
    logger.remove()
    return logger.add(sys.stderr, level=level or get_log_level())
