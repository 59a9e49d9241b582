"""Copying fetched dotfiles into the target directory.

The copy loop walks the candidate entries in order. Entries whose
destination is free are copied straight away. Conflicting entries are
put to the user, unless they already chose to overwrite everything
that remains in this run.
"""

import logging
import os
import shutil
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

import typer

from .config import Config
from .entries import Entry, candidate_entries
from .fetch import shallow_clone, staging_dir

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "File '{name}' already exists.\n"
    "[y] overwrite this file\n"
    "[n] skip this file\n"
    "[a] overwrite this file and ALL remaining dotfiles\n"
    "Choose [y/n/a]"
)
INVALID_ANSWER = "Please enter y, n, or a."


class CopyError(RuntimeError):
    """Raised when an entry could not be copied into place."""


class Decision(Enum):
    """Answer to a conflict prompt."""

    OVERWRITE = "y"
    SKIP = "n"
    OVERWRITE_ALL = "a"


@dataclass
class RunState:
    """State carried through one run of the copy loop.

    overwrite_all only ever goes from False to True.
    """

    overwrite_all: bool = False


@dataclass
class SyncResult:
    """Names copied and skipped during a run."""

    copied: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


def resolve_conflict(raw: str) -> Optional[Decision]:
    """Map a raw answer to a Decision, or None if it is not one."""
    answer = raw.strip().lower()
    for decision in Decision:
        if answer == decision.value:
            return decision
    return None


def prompt_for_decision(entry: Entry) -> Decision:
    """Ask the user what to do with a conflicting entry.

    Keeps asking until a valid answer is given. Ctrl-C or end of input
    raise click's Abort.
    """
    while True:
        answer = typer.prompt(
            PROMPT_TEMPLATE.format(name=entry.name),
            default="",
            show_default=False,
        )
        decision = resolve_conflict(answer)
        if decision is not None:
            return decision
        typer.echo(INVALID_ANSWER)


def copy_entry(entry: Entry) -> None:
    """Copy an entry over its destination.

    Directories are merged into an existing destination directory.
    Symlinks are copied as links, dangling ones included.
    """
    logger.debug(f"Copying {entry.source} -> {entry.destination}")
    source_is_tree = entry.source.is_dir() and not entry.source.is_symlink()
    if not source_is_tree and entry.destination.is_dir():
        raise CopyError(
            f"Failed to copy {entry.name}: destination is a directory"
        )
    try:
        if source_is_tree:
            shutil.copytree(
                entry.source,
                entry.destination,
                symlinks=True,
                dirs_exist_ok=True,
            )
        elif entry.source.is_symlink():
            if os.path.lexists(entry.destination):
                entry.destination.unlink()
            os.symlink(os.readlink(entry.source), entry.destination)
        else:
            shutil.copy(entry.source, entry.destination)
    except OSError as e:
        raise CopyError(f"Failed to copy {entry.name}: {e}")


def upsert(
    entries: Iterable[Entry],
    state: Optional[RunState] = None,
    ask: Callable[[Entry], Decision] = prompt_for_decision,
) -> SyncResult:
    """Copy entries into place, asking about conflicts.

    Args:
        entries: Candidate entries, processed in order.
        state: Run state; a fresh one is used if not given.
        ask: Called for each conflict while overwrite_all is unset.

    Returns:
        SyncResult with the names copied and skipped.

    Raises:
        CopyError: An entry could not be copied. Later entries are
            not processed.
    """
    if state is None:
        state = RunState()
    result = SyncResult()

    for entry in entries:
        if entry.destination.exists() and not state.overwrite_all:
            decision = ask(entry)
            if decision is Decision.SKIP:
                logger.info(f"Skipped {entry.name}")
                result.skipped.append(entry.name)
                continue
            if decision is Decision.OVERWRITE_ALL:
                logger.info("Overwriting all remaining entries")
                state.overwrite_all = True

        copy_entry(entry)
        logger.info(f"Copied {entry.name}")
        result.copied.append(entry.name)

    return result


def preview(entries: Iterable[Entry]) -> List[Tuple[str, bool]]:
    """Return (name, destination exists) for each entry."""
    return [(entry.name, entry.destination.exists()) for entry in entries]


@contextmanager
def fetched_entries(config: Config, target: Path) -> Iterator[List[Entry]]:
    """Clone the remote into staging and yield the candidate entries.

    The staging directory is gone once the block exits, however it
    exits.
    """
    with staging_dir() as staging:
        shallow_clone(config.repo_url, staging)
        entries = candidate_entries(config, staging, target)
        logger.debug(
            f"{len(entries)} candidate(s): {', '.join(e.name for e in entries)}"
        )
        yield entries


def sync(
    config: Config,
    target: Path,
    state: Optional[RunState] = None,
    ask: Callable[[Entry], Decision] = prompt_for_decision,
) -> SyncResult:
    """Fetch the shared dotfiles and copy them into target.

    Raises:
        FetchError: The clone failed; nothing has been copied.
        CopyError: An entry could not be copied.
    """
    with fetched_entries(config, target) as entries:
        return upsert(entries, state=state, ask=ask)
