"""Staging and unstaging of files."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from magi.errors import IoError


def _run(repo_path: str | Path, *args: str) -> None:
    try:
        subprocess.run(["git", "-C", str(repo_path), *args], capture_output=True)
    except OSError as exc:
        raise IoError(exc) from exc


def stage_files(repo_path: str | Path, files: Sequence[str]) -> None:
    """Stage the given files; nothing happens when there are none."""
    if files:
        _run(repo_path, "add", "--", *files)


def unstage_files(repo_path: str | Path, files: Sequence[str]) -> None:
    """Unstage the given files; nothing happens when there are none."""
    if files:
        _run(repo_path, "reset", "HEAD", "--", *files)