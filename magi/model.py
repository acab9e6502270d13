"""Application state: the buffer lines, UI state, popups and toasts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

from magi.config.theme import Theme
from magi.git.types import CommitInfo, GitRef, TagInfo
from magi.msg import Message, PushInputChar

if TYPE_CHECKING:
    from magi.git.git_info import GitInfo


class ToastStyle(Enum):
    """Visual style of a toast notification."""

    SUCCESS = auto()
    INFO = auto()
    WARNING = auto()


@dataclass
class Toast:
    """A notification that disappears once `expires_at` (monotonic seconds) passes."""

    message: str
    style: ToastStyle
    expires_at: float


class InputMode(Enum):
    """The current input mode of the application."""

    NORMAL = "NORMAL"
    VISUAL = "VISUAL"
    SEARCH = "SEARCH"

    def display_name(self) -> str:
        """Name shown in the status bar."""
        return self.value


class FileStatus(Enum):
    """How a file changed."""

    MODIFIED = auto()
    DELETED = auto()
    NEW = auto()
    RENAMED = auto()
    COPIED = auto()
    TYPE_CHANGE = auto()


@dataclass(frozen=True)
class FileChange:
    """A changed file and its status."""

    path: str
    status: FileStatus


@dataclass(frozen=True)
class DiffHunk:
    """A hunk header such as '@@ -7,6 +7,7 @@'."""

    header: str


class DiffLineType(Enum):
    """Kind of a line inside a hunk."""

    CONTEXT = auto()
    ADDITION = auto()
    DELETION = auto()


@dataclass(frozen=True)
class DiffLine:
    """A single line of a diff."""

    content: str
    line_type: DiffLineType


@dataclass(frozen=True)
class EmptyLine:
    """A blank separator line."""


@dataclass
class HeadRef:
    """The line describing HEAD."""

    ref: GitRef


@dataclass
class PushRef:
    """The line describing the push target of HEAD."""

    ref: GitRef


@dataclass(frozen=True)
class SectionHeader:
    """A section title with an optional item count."""

    title: str
    count: int | None = None


@dataclass(frozen=True)
class UntrackedFile:
    """An untracked file path."""

    path: str


@dataclass(frozen=True)
class UnstagedFile:
    """A file with unstaged changes."""

    change: FileChange


@dataclass(frozen=True)
class StagedFile:
    """A file with staged changes."""

    change: FileChange


LineContent = Union[
    EmptyLine,
    HeadRef,
    PushRef,
    TagInfo,
    SectionHeader,
    UntrackedFile,
    UnstagedFile,
    StagedFile,
    DiffHunk,
    DiffLine,
    CommitInfo,
]

_HEADER_CONTENT = (SectionHeader, UnstagedFile, StagedFile, HeadRef)


class SectionKind(Enum):
    """Kinds of collapsible sections."""

    INFO = auto()
    UNTRACKED_FILES = auto()
    UNSTAGED_CHANGES = auto()
    UNSTAGED_FILE = auto()
    UNSTAGED_HUNK = auto()
    STAGED_CHANGES = auto()
    STAGED_FILE = auto()
    STAGED_HUNK = auto()
    RECENT_COMMITS = auto()


_PARENT_KIND = {
    SectionKind.UNSTAGED_FILE: SectionKind.UNSTAGED_CHANGES,
    SectionKind.UNSTAGED_HUNK: SectionKind.UNSTAGED_FILE,
    SectionKind.STAGED_FILE: SectionKind.STAGED_CHANGES,
    SectionKind.STAGED_HUNK: SectionKind.STAGED_FILE,
}

_FILE_KINDS = frozenset({SectionKind.UNSTAGED_FILE, SectionKind.STAGED_FILE})


@dataclass(frozen=True)
class SectionType:
    """A section a line belongs to; file and hunk sections carry a path, hunks an index."""

    kind: SectionKind
    path: str | None = None
    hunk_index: int | None = None

    def parent_section(self) -> SectionType | None:
        """The section whose collapse hides this one, if any."""
        parent_kind = _PARENT_KIND.get(self.kind)
        if parent_kind is None:
            return None
        if parent_kind in _FILE_KINDS:
            return SectionType(parent_kind, path=self.path)
        return SectionType(parent_kind)

    def is_hidden_by(self, collapsed: set[SectionType] | frozenset[SectionType]) -> bool:
        """True if any ancestor section is collapsed."""
        current = self.parent_section()
        while current is not None:
            if current in collapsed:
                return True
            current = current.parent_section()
        return False

    def default_collapsed(self) -> bool:
        """File sections start collapsed."""
        return self.kind in _FILE_KINDS

    def file_path(self) -> str | None:
        """The path for file-level sections, otherwise None."""
        return self.path if self.kind in _FILE_KINDS else None


@dataclass
class Line:
    """One line of the buffer and the section it belongs to."""

    content: LineContent
    section: SectionType | None = None

    def is_hidden(self, collapsed_sections: set[SectionType] | frozenset[SectionType]) -> bool:
        """True if this line is hidden by a collapsed section."""
        if self.section is None:
            return False
        if self.section.is_hidden_by(collapsed_sections):
            return True
        return self.section in collapsed_sections and not isinstance(
            self.content, _HEADER_CONTENT
        )

    def collapsible_section(self) -> SectionType | None:
        """The section toggled when this line is a header, else None."""
        content = self.content
        if isinstance(content, SectionHeader) and self.section is not None:
            return self.section
        if isinstance(content, HeadRef):
            return SectionType(SectionKind.INFO)
        if isinstance(content, UnstagedFile):
            return SectionType(SectionKind.UNSTAGED_FILE, path=content.change.path)
        if isinstance(content, StagedFile):
            return SectionType(SectionKind.STAGED_FILE, path=content.change.path)
        return None


@dataclass
class UiModel:
    """State passed to the view to render the main UI."""

    lines: list[Line] = field(default_factory=list)
    cursor_position: int = 0
    scroll_offset: int = 0
    viewport_height: int = 0
    collapsed_sections: set[SectionType] = field(default_factory=set)
    visual_mode_anchor: int | None = None
    search_query: str = ""
    search_mode_active: bool = False

    def is_visual_mode(self) -> bool:
        """True if a visual selection is active."""
        return self.visual_mode_anchor is not None

    def visual_selection_range(self) -> tuple[int, int] | None:
        """The inclusive (start, end) selection, ordered, if visual mode is active."""
        if self.visual_mode_anchor is None:
            return None
        anchor = self.visual_mode_anchor
        return min(anchor, self.cursor_position), max(anchor, self.cursor_position)

    def current_mode(self) -> InputMode:
        """The input mode implied by the UI state."""
        if self.search_mode_active:
            return InputMode.SEARCH
        if self.is_visual_mode():
            return InputMode.VISUAL
        return InputMode.NORMAL


class RunningState(Enum):
    """Whether the main loop keeps going."""

    RUNNING = auto()
    DONE = auto()


@dataclass(frozen=True)
class LaunchExternalCommand:
    """Tells the main loop to suspend rendering while a command runs."""

    message: Message | PushInputChar


@dataclass(frozen=True)
class ErrorPopup:
    """A popup showing an error message."""

    message: str


@dataclass(frozen=True)
class HelpPopup:
    """The key binding help popup."""


@dataclass(frozen=True)
class CommitPopup:
    """The commit options popup."""


@dataclass
class PushPopupState:
    """State of the push popup."""

    local_branch: str
    upstream: str | None
    default_remote: str
    input_mode: bool = False
    input_text: str = ""


Popup = Union[ErrorPopup, HelpPopup, CommitPopup, PushPopupState]


@dataclass
class Model:
    """The whole application state."""

    git_info: GitInfo
    running_state: RunningState | LaunchExternalCommand = RunningState.RUNNING
    ui_model: UiModel = field(default_factory=UiModel)
    theme: Theme = field(default_factory=Theme.default_theme)
    popup: Popup | None = None
    toast: Toast | None = None