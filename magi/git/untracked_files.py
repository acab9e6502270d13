"""The "Untracked files" section."""

from __future__ import annotations

from collections.abc import Iterator

from magi.git.repository import Repository
from magi.model import Line, SectionHeader, SectionKind, SectionType, UntrackedFile


def _untracked_paths(repository: Repository) -> Iterator[str]:
    out = repository.git(
        "status", "--porcelain=v1", "-z", "--untracked-files=normal", "--ignored=no"
    )
    entries = iter(out.split("\0"))
    for entry in entries:
        if len(entry) < 4:
            continue
        code, path = entry[:2], entry[3:]
        if "R" in code or "C" in code:
            # The original path of a rename or copy follows as its own entry.
            next(entries, None)
            continue
        if code == "??":
            yield path


def get_lines(repository: Repository) -> list[Line]:
    """A header and one line per untracked file, or nothing if there are none."""
    paths = list(_untracked_paths(repository))
    if not paths:
        return []
    section = SectionType(SectionKind.UNTRACKED_FILES)
    lines = [Line(SectionHeader("Untracked files", len(paths)), section)]
    lines.extend(Line(UntrackedFile(path), section) for path in paths)
    return lines