"""Candidate entries: which top-level names of the fetched tree to copy."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from .config import Config, Policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One file or directory considered for copying."""

    name: str
    source: Path
    destination: Path

    @classmethod
    def between(cls, name: str, source_root: Path, target_root: Path) -> "Entry":
        return cls(name, source_root / name, target_root / name)


def allow_list_entries(
    source_root: Path,
    target_root: Path,
    names: Iterable[str],
) -> List[Entry]:
    """Build entries from a fixed list of names, keeping list order.

    Names missing from the fetched tree produce no entry.
    """
    entries = []
    for name in names:
        entry = Entry.between(name, source_root, target_root)
        # lexists so a dangling symlink in the source still counts
        if not os.path.lexists(entry.source):
            logger.debug(f"{name} not present in source, skipping")
            continue
        entries.append(entry)
    return entries


def enumerated_entries(
    source_root: Path,
    target_root: Path,
    exclude: Iterable[str],
) -> List[Entry]:
    """Build entries from every direct child of the fetched tree.

    Hidden entries are included. Order is whatever the filesystem
    reports.
    """
    excluded = set(exclude)
    entries = []
    for name in os.listdir(source_root):
        if name in excluded:
            logger.debug(f"{name} is excluded, skipping")
            continue
        entries.append(Entry.between(name, source_root, target_root))
    return entries


def candidate_entries(
    config: Config,
    source_root: Path,
    target_root: Path,
) -> List[Entry]:
    """Build the candidate list using the configured policy."""
    if config.policy is Policy.ENUMERATE:
        return enumerated_entries(source_root, target_root, config.exclude)
    return allow_list_entries(source_root, target_root, config.include)
