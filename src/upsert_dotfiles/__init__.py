"""upsert-dotfiles - Pull shared dotfiles into the current project."""

from .config import Config
from .entries import Entry
from .sync import Decision, RunState, SyncResult, sync, upsert
from .utils import get_version

__all__ = [
    "Config",
    "Decision",
    "Entry",
    "RunState",
    "SyncResult",
    "get_version",
    "sync",
    "upsert",
]
