"""The "Staged changes" section: differences between HEAD and the index."""

from __future__ import annotations

from magi.git.diff_utils import build_change_lines, collect_file_changes
from magi.git.repository import Repository
from magi.model import Line, SectionKind, SectionType, StagedFile

_DIFF_OPTIONS = (
    "--no-color",
    "--no-ext-diff",
    "--no-textconv",
    "--no-renames",
    "--submodule=short",
    "--src-prefix=a/",
    "--dst-prefix=b/",
)


def get_lines(repository: Repository) -> list[Line]:
    """Lines for every file whose index entry differs from HEAD; raises GitError without HEAD."""
    patch = repository.git("diff", "--cached", *_DIFF_OPTIONS, "HEAD", "--")
    return build_change_lines(
        collect_file_changes(patch),
        "Staged changes",
        SectionType(SectionKind.STAGED_CHANGES),
        StagedFile,
        lambda path: SectionType(SectionKind.STAGED_FILE, path=path),
        lambda path, index: SectionType(SectionKind.STAGED_HUNK, path=path, hunk_index=index),
    )