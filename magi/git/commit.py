"""Committing through git itself so that hooks and the user's editor are used."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from magi.errors import IoError


@dataclass
class CommitResult:
    """Outcome of a commit."""

    success: bool
    message: str


def _git(repo_path: str | Path, *args: str, capture: bool = False):
    try:
        return subprocess.run(
            ["git", "-C", str(repo_path), *args],
            capture_output=capture,
        )
    except OSError as exc:
        raise IoError(exc) from exc


def _last_subject(repo_path: str | Path) -> str:
    out = _git(repo_path, "log", "-1", "--format=%s", capture=True).stdout
    return out.decode("utf-8", errors="replace").strip()


def run_commit_with_editor(repo_path: str | Path) -> CommitResult:
    """Run `git commit`, opening the configured editor."""
    if _git(repo_path, "commit").returncode == 0:
        return CommitResult(True, _last_subject(repo_path))
    return CommitResult(False, "Commit aborted")


def run_amend_commit_with_editor(repo_path: str | Path) -> CommitResult:
    """Run `git commit --amend`, opening the configured editor."""
    if _git(repo_path, "commit", "--amend").returncode == 0:
        return CommitResult(True, f"Amended: {_last_subject(repo_path)}")
    return CommitResult(False, "Amend aborted")