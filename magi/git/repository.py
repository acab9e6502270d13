"""A handle on a git working tree, driven through the git command."""

from __future__ import annotations

import subprocess
from pathlib import Path

from magi.errors import GitError, IoError


class Repository:
    """A git repository opened at a path inside its working tree."""

    def __init__(self, path: str | Path = ".") -> None:
        self._start = Path(path)
        try:
            result = self._run("rev-parse", "--show-toplevel", cwd=self._start)
        except FileNotFoundError as exc:
            raise GitError(f"could not open repository at '{path}'") from exc
        if result.returncode != 0:
            raise GitError(
                result.stderr.strip() or f"could not open repository at '{path}'"
            )
        self.path = Path(result.stdout.strip())

    @staticmethod
    def _run(*args: str, cwd: Path) -> subprocess.CompletedProcess[str]:
        try:
            return subprocess.run(
                ["git", "-c", "core.quotePath=false", *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            raise
        except OSError as exc:
            raise IoError(exc) from exc

    def git(self, *args: str) -> str:
        """Run a git command in the repository and return its standard output."""
        result = self._run(*args, cwd=self.path)
        if result.returncode != 0:
            raise GitError(result.stderr.strip() or f"git {' '.join(args)} failed")
        return result.stdout

    def try_git(self, *args: str) -> str | None:
        """Like git(), but return None when the command fails."""
        try:
            return self.git(*args)
        except GitError:
            return None