"""Pushing and querying branches and remotes."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from magi.errors import IoError
from magi.git.repository import Repository


@dataclass(frozen=True)
class PushSuccess:
    """The push succeeded."""


@dataclass(frozen=True)
class PushFailure:
    """The push failed; `message` holds git's error output."""

    message: str


def _git(repo_path: str | Path, *args: str) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(
            ["git", "-C", str(repo_path), *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise IoError(exc) from exc


def get_remotes(repo: Repository) -> list[str]:
    """Names of the configured remotes, empty if there are none."""
    out = repo.try_git("remote")
    return out.split() if out else []


def push(repo_path: str | Path, args: Sequence[str]) -> PushSuccess | PushFailure:
    """Run `git push -v` with the given extra arguments."""
    result = _git(repo_path, "push", "-v", *args)
    if result.returncode == 0:
        return PushSuccess()
    return PushFailure(result.stderr.strip() or "Push failed")


def get_current_branch(repo_path: str | Path) -> str | None:
    """The current branch name, or None when HEAD is detached or unknown."""
    result = _git(repo_path, "rev-parse", "--abbrev-ref", "HEAD")
    if result.returncode != 0:
        return None
    branch = result.stdout.strip()
    return None if branch == "HEAD" else branch


def get_upstream_branch(repo_path: str | Path) -> str | None:
    """The upstream of the current branch, or None if none is configured."""
    result = _git(repo_path, "rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}")
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None