"""Mapping of key presses to messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto

from magi.model import CommitPopup, ErrorPopup, HelpPopup, Model, PushPopupState
from magi.msg import Message, PushInputChar


class KeyCode(Enum):
    """Non-character keys; character keys are plain one-character strings."""

    ESC = auto()
    ENTER = auto()
    TAB = auto()
    BACKSPACE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class KeyModifiers(Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a KeyCode or a character, with its modifiers."""

    code: KeyCode | str
    modifiers: KeyModifiers = KeyModifiers.NONE


_NONE = KeyModifiers.NONE
_CTRL = KeyModifiers.CONTROL
_SHIFT = KeyModifiers.SHIFT

_NORMAL_BINDINGS: dict[tuple[KeyModifiers, KeyCode | str], Message] = {
    (_CTRL, "r"): Message.REFRESH,
    (_CTRL, "u"): Message.HALF_PAGE_UP,
    (_CTRL, "d"): Message.HALF_PAGE_DOWN,
    (_CTRL, "e"): Message.SCROLL_LINE_DOWN,
    (_CTRL, "y"): Message.SCROLL_LINE_UP,
    (_SHIFT, "S"): Message.STAGE_ALL_MODIFIED,
    (_SHIFT, "U"): Message.UNSTAGE_ALL,
    (_SHIFT, "V"): Message.ENTER_VISUAL_MODE,
    (_SHIFT, "P"): Message.SHOW_PUSH_POPUP,
    (_NONE, "?"): Message.SHOW_HELP,
    (_NONE, "q"): Message.QUIT,
    (_NONE, "k"): Message.MOVE_UP,
    (_NONE, KeyCode.UP): Message.MOVE_UP,
    (_NONE, "j"): Message.MOVE_DOWN,
    (_NONE, KeyCode.DOWN): Message.MOVE_DOWN,
    (_NONE, KeyCode.TAB): Message.TOGGLE_SECTION,
    (_NONE, "c"): Message.SHOW_COMMIT_POPUP,
}


def _is_dismiss(mods: KeyModifiers, code: KeyCode | str) -> bool:
    return (mods == _NONE and code in (KeyCode.ESC, "q")) or (mods == _CTRL and code == "g")


def _push_key(
    state: PushPopupState, mods: KeyModifiers, code: KeyCode | str
) -> Message | PushInputChar | None:
    if state.input_mode:
        if (mods == _NONE and code == KeyCode.ESC) or (mods == _CTRL and code == "g"):
            return Message.DISMISS_POPUP
        if mods == _NONE and code == KeyCode.ENTER:
            return Message.PUSH_CONFIRM_INPUT
        if mods == _NONE and code == KeyCode.BACKSPACE:
            return Message.PUSH_INPUT_BACKSPACE
        if mods == _NONE and code == KeyCode.TAB:
            return Message.PUSH_INPUT_COMPLETE
        if mods in (_NONE, _SHIFT) and isinstance(code, str):
            return PushInputChar(code)
        return None
    if _is_dismiss(mods, code):
        return Message.DISMISS_POPUP
    if mods == _NONE and code == "u":
        return Message.PUSH_UPSTREAM if state.upstream is not None else Message.PUSH_ENTER_INPUT_MODE
    return None


def handle_key(key: KeyEvent, model: Model) -> Message | PushInputChar | None:
    """The message a key press triggers in the given state, or None."""
    mods, code = key.modifiers, key.code
    popup = model.popup

    if isinstance(popup, ErrorPopup):
        return Message.DISMISS_POPUP if code in (KeyCode.ENTER, KeyCode.ESC) else None

    if isinstance(popup, HelpPopup):
        return Message.DISMISS_POPUP if _is_dismiss(mods, code) else None

    if isinstance(popup, CommitPopup):
        if _is_dismiss(mods, code):
            return Message.DISMISS_POPUP
        if mods == _NONE and code == "c":
            return Message.COMMIT
        if mods == _NONE and code == "a":
            return Message.AMEND
        return None

    if isinstance(popup, PushPopupState):
        return _push_key(popup, mods, code)

    if model.ui_model.is_visual_mode():
        if (mods == _NONE and code == KeyCode.ESC) or (mods == _CTRL and code in ("g", "c")):
            return Message.EXIT_VISUAL_MODE
        if mods == _NONE and code == KeyCode.TAB:
            return None

    return _NORMAL_BINDINGS.get((mods, code))