"""Messages that drive updates of the application state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Message(Enum):
    """Actions the application can perform."""

    QUIT = auto()
    REFRESH = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    HALF_PAGE_UP = auto()
    HALF_PAGE_DOWN = auto()
    SCROLL_LINE_DOWN = auto()
    SCROLL_LINE_UP = auto()
    TOGGLE_SECTION = auto()

    COMMIT = auto()
    AMEND = auto()

    DISMISS_POPUP = auto()
    STAGE_ALL_MODIFIED = auto()
    UNSTAGE_ALL = auto()

    ENTER_VISUAL_MODE = auto()
    EXIT_VISUAL_MODE = auto()

    SHOW_HELP = auto()
    SHOW_COMMIT_POPUP = auto()
    SHOW_PUSH_POPUP = auto()
    PUSH_UPSTREAM = auto()
    PUSH_ENTER_INPUT_MODE = auto()
    PUSH_INPUT_BACKSPACE = auto()
    PUSH_INPUT_COMPLETE = auto()
    PUSH_CONFIRM_INPUT = auto()


@dataclass(frozen=True)
class PushInputChar:
    """A character typed into the push popup's input field."""

    char: str