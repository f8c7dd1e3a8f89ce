import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values
from rich.console import Console
from rich.logging import RichHandler

PROGRAM_KEY = "CMDDISPATCH_PROG"
LOG_LEVEL_KEY = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from .env and the environment."""

    program: str
    log_level: str = DEFAULT_LOG_LEVEL


def _get_env_values(env_file: str | Path) -> dict[str, str]:
    """Helper to merge .env values with the real environment, which wins."""
    values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
    values.update(os.environ)
    return values


def default_program_name() -> str:
    """Get the program name from argv[0]"""
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "program"


def load_settings(env_file: str | Path = ".env") -> Settings:
    """Load settings from env_file overlaid by the process environment."""
    values = _get_env_values(env_file)
    program = values.get(PROGRAM_KEY) or default_program_name()
    log_level = (values.get(LOG_LEVEL_KEY) or DEFAULT_LOG_LEVEL).upper()
    return Settings(program=program, log_level=log_level)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Send log records to stderr through rich.

    Unknown level names fall back to WARNING.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    level_value = getattr(logging, level.upper(), None)
    root.setLevel(level_value if isinstance(level_value, int) else logging.WARNING)
