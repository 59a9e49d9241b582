"""Utility helpers shared by the CLI and library code."""

import importlib.metadata
import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the CLI.

    Warnings and errors only by default; everything down to DEBUG when
    verbose is set.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def get_version() -> str:
    """Return the installed package version."""
    try:
        return importlib.metadata.version("upsert-dotfiles")
    except importlib.metadata.PackageNotFoundError:
        return "(development)"
