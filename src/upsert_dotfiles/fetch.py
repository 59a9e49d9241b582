"""Fetching the shared dotfiles repository into a staging directory."""

import logging
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

STAGING_PREFIX = "upsert-dotfiles-"


class FetchError(RuntimeError):
    """Raised when the remote repository could not be cloned."""


def is_git_available() -> bool:
    """Check if git is installed and accessible."""
    return shutil.which("git") is not None


def get_subprocess_error(e: subprocess.CalledProcessError) -> str:
    """Extract error message from CalledProcessError.

    Handles both string and bytes stderr, returning a clean string.
    """
    stderr = getattr(e, "stderr", "") or ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr.strip()


@contextmanager
def staging_dir() -> Iterator[Path]:
    """Yield a fresh temporary directory, removed on every exit path."""
    with tempfile.TemporaryDirectory(prefix=STAGING_PREFIX) as tmp:
        logger.debug(f"Created staging directory {tmp}")
        try:
            yield Path(tmp)
        finally:
            logger.debug(f"Removing staging directory {tmp}")


def shallow_clone(repo_url: str, dest: Path, timeout: int = 120) -> None:
    """Clone the latest snapshot of repo_url into dest.

    Raises:
        FetchError: git is missing, the clone failed or timed out.
    """
    logger.info(f"Cloning {repo_url} (depth 1) into {dest}")
    try:
        subprocess.run(
            ["git", "clone", "--depth=1", repo_url, str(dest)],
            check=True,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise FetchError("git not found on PATH")
    except subprocess.TimeoutExpired:
        raise FetchError(f"Cloning {repo_url} timed out after {timeout}s")
    except subprocess.CalledProcessError as e:
        detail = get_subprocess_error(e) or f"exit status {e.returncode}"
        raise FetchError(f"Could not clone {repo_url}: {detail}")
