"""Best-effort authorship lookup from git history."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from skillsync.constants.discovery import GIT_EXECUTABLE, GIT_LOG_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class AuthorLookup(Protocol):
    """Callable returning the most recent contributor of *path*, if known."""

    def __call__(self, path: Path) -> str | None: ...


class NullAuthorLookup:
    """Lookup that never finds an author."""

    def __call__(self, path: Path) -> str | None:
        return None


class GitAuthorLookup:
    """Resolve the last commit author of a file with ``git log``.

    Every failure (git missing, not a repository, untracked file, timeout)
    yields ``None``.
    """

    def __init__(
        self,
        repo_root: Path,
        *,
        executable: str = GIT_EXECUTABLE,
        timeout: float = GIT_LOG_TIMEOUT_SECONDS,
    ) -> None:
        self.repo_root = repo_root
        self.executable = executable
        self.timeout = timeout

    def __call__(self, path: Path) -> str | None:
        command = [self.executable, "log", "--format=%an", "-1", "--", str(path)]
        try:
            completed = subprocess.run(
                command,
                cwd=self.repo_root,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("git author lookup failed for %s: %s", path, exc)
            return None

        if completed.returncode != 0:
            logger.debug("git log exited %d for %s", completed.returncode, path)
            return None

        author = completed.stdout.strip()
        return author or None
