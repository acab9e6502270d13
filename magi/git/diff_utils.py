"""Parsing of unified diffs into files, hunks and lines, and their display lines."""

from __future__ import annotations

from typing import Callable

from magi.model import (
    DiffHunk,
    DiffLine,
    DiffLineType,
    FileChange,
    FileStatus,
    Line,
    LineContent,
    SectionHeader,
    SectionType,
)

FileChangesWithDiffs = list[tuple[FileChange, list[tuple[DiffHunk, list[DiffLine]]]]]

_LINE_TYPES = {
    "+": DiffLineType.ADDITION,
    "-": DiffLineType.DELETION,
    " ": DiffLineType.CONTEXT,
}

_STATUS_MARKERS = {
    "new file mode": FileStatus.NEW,
    "deleted file mode": FileStatus.DELETED,
    "rename from": FileStatus.RENAMED,
    "copy from": FileStatus.COPIED,
}


class _FileBlock:
    def __init__(self, path: str) -> None:
        self.path = path
        self.status = FileStatus.MODIFIED
        self.hunks: list[tuple[DiffHunk, list[DiffLine]]] = []


def _blocks(patch: str):
    block: _FileBlock | None = None
    in_hunk = False
    for raw in patch.splitlines():
        if raw.startswith("diff --git "):
            if block is not None:
                yield block
            rest = raw[len("diff --git "):]
            idx = rest.rfind(" b/")
            path = rest[idx + 3:] if idx >= 0 else rest
            block = _FileBlock(path or "<unknown>")
            in_hunk = False
            continue
        if block is None:
            continue
        if raw.startswith("@@"):
            in_hunk = True
            if not any(h.header == raw for h, _ in block.hunks):
                block.hunks.append((DiffHunk(raw), []))
            continue
        if not in_hunk:
            for marker, status in _STATUS_MARKERS.items():
                if raw.startswith(marker):
                    block.status = status
            if raw.startswith("old mode") and block.status is FileStatus.MODIFIED:
                block.status = FileStatus.MODIFIED
            if raw.startswith("+++ b/"):
                block.path = raw[len("+++ b/"):]
            elif raw.startswith("rename to ") or raw.startswith("copy to "):
                block.path = raw.split(" to ", 1)[1]
            continue
        line_type = _LINE_TYPES.get(raw[:1])
        if line_type is not None and block.hunks:
            block.hunks[-1][1].append(DiffLine(raw[1:], line_type))
    if block is not None:
        yield block


def collect_file_changes(patch: str) -> FileChangesWithDiffs:
    """Group a unified diff into files, each with its hunks and their lines."""
    result: FileChangesWithDiffs = []
    by_path: dict[str, int] = {}
    for block in _blocks(patch):
        if block.path in by_path:
            hunks = result[by_path[block.path]][1]
            for hunk, lines in block.hunks:
                if not any(h.header == hunk.header for h, _ in hunks):
                    hunks.append((hunk, lines))
            continue
        by_path[block.path] = len(result)
        result.append((FileChange(block.path, block.status), block.hunks))
    return result


def build_change_lines(
    file_changes: FileChangesWithDiffs,
    header_title: str,
    header_section: SectionType,
    make_file_content: Callable[[FileChange], LineContent],
    make_file_section: Callable[[str], SectionType],
    make_hunk_section: Callable[[str, int], SectionType],
) -> list[Line]:
    """Turn file changes into a section header, file lines, hunk headers and diff lines."""
    if not file_changes:
        return []
    lines = [Line(SectionHeader(header_title, len(file_changes)), header_section)]
    for file_change, hunks in file_changes:
        path = file_change.path
        lines.append(Line(make_file_content(file_change), make_file_section(path)))
        for hunk_index, (hunk, diff_lines) in enumerate(hunks):
            hunk_section = make_hunk_section(path, hunk_index)
            lines.append(Line(hunk, hunk_section))
            lines.extend(Line(diff_line, hunk_section) for diff_line in diff_lines)
    return lines