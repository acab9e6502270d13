"""The repository handle and the assembled status buffer."""

from __future__ import annotations

from pathlib import Path

from magi.git import info, recent_commits, staged_changes, unstaged_changes, untracked_files
from magi.git.repository import Repository
from magi.model import EmptyLine, Line


class GitInfo:
    """Access to a repository and the lines of its status buffer."""

    def __init__(self, path: str | Path = ".") -> None:
        self.repository = Repository(path)

    def has_staged_changes(self) -> bool:
        """True if the index differs from HEAD; raises GitError when there is no HEAD."""
        out = self.repository.git(
            "diff", "--cached", "--name-only", "--no-renames", "--no-ext-diff", "HEAD", "--"
        )
        return bool(out.strip())

    def get_lines(self) -> list[Line]:
        """Lines of every non-empty section, separated by one empty line each."""
        sections = [
            info.get_lines(self.repository),
            untracked_files.get_lines(self.repository),
            unstaged_changes.get_lines(self.repository),
            staged_changes.get_lines(self.repository),
            recent_commits.get_lines(self.repository),
        ]
        result: list[Line] = []
        for section in filter(None, sections):
            if result:
                result.append(Line(EmptyLine(), None))
            result.extend(section)
        return result