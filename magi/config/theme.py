"""Colour themes for the user interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Named terminal colours."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "darkgray"
    LIGHT_RED = "lightred"
    LIGHT_GREEN = "lightgreen"
    LIGHT_YELLOW = "lightyellow"
    LIGHT_BLUE = "lightblue"
    LIGHT_MAGENTA = "lightmagenta"
    LIGHT_CYAN = "lightcyan"
    WHITE = "white"
    RESET = "reset"


@dataclass(frozen=True)
class Rgb:
    """A 24-bit colour."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Indexed:
    """A colour from the 256-colour ANSI palette."""

    index: int


AnyColor = Color | Rgb | Indexed


@dataclass
class Theme:
    """All semantic colour roles; defaults form the built-in default theme."""

    section_header: AnyColor = Color.YELLOW
    ref_label: AnyColor = Color.YELLOW
    tag_label: AnyColor = Color.YELLOW

    diff_addition: AnyColor = Color.GREEN
    diff_deletion: AnyColor = Color.RED
    diff_context: AnyColor = Color.WHITE
    diff_hunk: AnyColor = Color.CYAN

    remote_branch: AnyColor = Color.GREEN
    local_branch: AnyColor = Color.BLUE
    detached_head: AnyColor = Color.RED

    untracked_file: AnyColor = Color.RED
    unstaged_status: AnyColor = Color.MAGENTA
    staged_status: AnyColor = Color.GREEN
    file_path: AnyColor = Color.WHITE

    commit_hash: AnyColor = Rgb(139, 69, 19)
    text: AnyColor = Color.RESET

    selection_bg: AnyColor = Rgb(60, 60, 80)

    status_bar_bg: AnyColor = Rgb(40, 40, 50)
    status_bar_fg: AnyColor = Color.WHITE
    status_mode_normal_bg: AnyColor = Rgb(100, 149, 237)
    status_mode_normal_fg: AnyColor = Rgb(30, 30, 40)
    status_mode_visual_bg: AnyColor = Rgb(186, 133, 217)
    status_mode_visual_fg: AnyColor = Rgb(30, 30, 40)
    status_mode_search_bg: AnyColor = Rgb(250, 215, 140)
    status_mode_search_fg: AnyColor = Rgb(30, 30, 40)

    @classmethod
    def default_theme(cls) -> Theme:
        """The built-in default theme."""
        return cls()

    @classmethod
    def catppuccin_frappe(cls) -> Theme:
        """Catppuccin Frappe theme."""
        yellow = Rgb(229, 200, 144)
        green = Rgb(166, 209, 137)
        red = Rgb(231, 130, 132)
        text = Rgb(198, 208, 245)
        blue = Rgb(140, 170, 238)
        surface0 = Rgb(48, 52, 70)
        return cls(
            section_header=yellow,
            ref_label=yellow,
            tag_label=yellow,
            diff_addition=green,
            diff_deletion=red,
            diff_context=text,
            diff_hunk=blue,
            remote_branch=green,
            local_branch=blue,
            detached_head=red,
            untracked_file=red,
            unstaged_status=Rgb(244, 184, 228),
            staged_status=green,
            file_path=text,
            commit_hash=Rgb(239, 159, 118),
            text=text,
            selection_bg=Rgb(65, 69, 89),
            status_bar_bg=surface0,
            status_bar_fg=text,
            status_mode_normal_bg=blue,
            status_mode_normal_fg=surface0,
            status_mode_visual_bg=Rgb(202, 158, 230),
            status_mode_visual_fg=surface0,
            status_mode_search_bg=yellow,
            status_mode_search_fg=surface0,
        )

    @classmethod
    def catppuccin_mocha(cls) -> Theme:
        """Catppuccin Mocha theme."""
        yellow = Rgb(249, 226, 175)
        green = Rgb(166, 227, 161)
        red = Rgb(243, 139, 168)
        text = Rgb(205, 214, 244)
        blue = Rgb(137, 180, 250)
        base = Rgb(30, 30, 46)
        return cls(
            section_header=yellow,
            ref_label=yellow,
            tag_label=yellow,
            diff_addition=green,
            diff_deletion=red,
            diff_context=text,
            diff_hunk=blue,
            remote_branch=green,
            local_branch=blue,
            detached_head=red,
            untracked_file=red,
            unstaged_status=Rgb(245, 194, 231),
            staged_status=green,
            file_path=text,
            commit_hash=Rgb(250, 179, 135),
            text=text,
            selection_bg=Rgb(49, 50, 68),
            status_bar_bg=base,
            status_bar_fg=text,
            status_mode_normal_bg=blue,
            status_mode_normal_fg=base,
            status_mode_visual_bg=Rgb(203, 166, 247),
            status_mode_visual_fg=base,
            status_mode_search_bg=yellow,
            status_mode_search_fg=base,
        )

    @classmethod
    def from_name(cls, name: str) -> Theme | None:
        """Return a built-in theme by name, or None if unknown."""
        builders = {
            "default": cls.default_theme,
            "catppuccin-frappe": cls.catppuccin_frappe,
            "catppuccin-mocha": cls.catppuccin_mocha,
        }
        builder = builders.get(name.lower().replace("_", "-"))
        return builder() if builder else None