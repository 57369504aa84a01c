"""Configuration and logging setup for Ponto."""

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ponto.db.store import default_records_path

DEFAULT_LOG_LEVEL = "WARNING"


def get_config_path() -> Path:
    """Get the config file path."""
    home = os.environ.get("HOME") or "."
    return Path(home) / ".config" / "ponto" / "config.toml"


def get_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration.

    Returns:
        Config dict, empty if the file is missing or unreadable.
    """
    import toml

    config_path = config_path or get_config_path()

    if not config_path.exists():
        return {}

    try:
        return toml.load(config_path)
    except Exception as e:
        logging.getLogger(__name__).info("Ignoring config %s: %s", config_path, e)
        return {}


def get_records_path(config: dict) -> Path:
    """Get the records file path, honouring ``[storage] path``."""
    override = config.get("storage", {}).get("path")
    if override:
        return Path(override).expanduser()
    return default_records_path()


def setup_logging(config: dict) -> None:
    """Send log records to stderr through rich."""
    level_name = str(config.get("logging", {}).get("level", DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
