"""The "Unstaged changes" section: differences between the index and the working tree."""

from __future__ import annotations

from magi.git.diff_utils import build_change_lines, collect_file_changes
from magi.git.repository import Repository
from magi.model import Line, SectionKind, SectionType, UnstagedFile

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
    """Lines for every file whose working copy differs from the index."""
    patch = repository.git("diff", *_DIFF_OPTIONS, "--")
    return build_change_lines(
        collect_file_changes(patch),
        "Unstaged changes",
        SectionType(SectionKind.UNSTAGED_CHANGES),
        UnstagedFile,
        lambda path: SectionType(SectionKind.UNSTAGED_FILE, path=path),
        lambda path, index: SectionType(SectionKind.UNSTAGED_HUNK, path=path, hunk_index=index),
    )