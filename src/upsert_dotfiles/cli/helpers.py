"""Shared helper functions for the CLI."""

import logging
import signal
import sys
from pathlib import Path
from typing import List, Optional

from ..config import Config

logger = logging.getLogger(__name__)

# Supported config filenames (in order of preference)
CONFIG_FILENAMES: List[str] = [".upsert-dotfiles.yaml", ".upsert-dotfiles.yml"]


def get_config_path(home: Optional[Path] = None) -> Path:
    """Find the config file path, checking both .yaml and .yml extensions.

    Returns the first existing config file, or the default
    (.upsert-dotfiles.yaml) if none exist.
    """
    home_dir = home or Path.home()
    for filename in CONFIG_FILENAMES:
        path = home_dir / filename
        if path.exists():
            return path
    return home_dir / CONFIG_FILENAMES[0]


def get_config() -> Config:
    """Load config from ~/.upsert-dotfiles.yaml or .yml."""
    return Config(get_config_path())


def exit_on_sigterm() -> None:
    """Turn SIGTERM into SystemExit so context managers unwind."""

    def _handler(signum, frame):
        logger.info("Received SIGTERM, cleaning up")
        sys.exit(128 + signum)

    signal.signal(signal.SIGTERM, _handler)
