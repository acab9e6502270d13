"""User configuration loading and theme resolution."""

from __future__ import annotations

import dataclasses
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import platformdirs

from magi.config.theme import AnyColor, Color, Indexed, Rgb, Theme

_NAMED_COLORS = {
    "black": Color.BLACK,
    "red": Color.RED,
    "green": Color.GREEN,
    "yellow": Color.YELLOW,
    "blue": Color.BLUE,
    "magenta": Color.MAGENTA,
    "cyan": Color.CYAN,
    "gray": Color.GRAY,
    "grey": Color.GRAY,
    "darkgray": Color.DARK_GRAY,
    "darkgrey": Color.DARK_GRAY,
    "lightred": Color.LIGHT_RED,
    "lightgreen": Color.LIGHT_GREEN,
    "lightyellow": Color.LIGHT_YELLOW,
    "lightblue": Color.LIGHT_BLUE,
    "lightmagenta": Color.LIGHT_MAGENTA,
    "lightcyan": Color.LIGHT_CYAN,
    "white": Color.WHITE,
    "reset": Color.RESET,
}

_DIGITS = {10: "0-9", 16: "0-9a-f"}


def _parse_u8(text: str, base: int = 10) -> int | None:
    """Parse an unsigned byte, allowing an optional leading '+'."""
    match = re.fullmatch(rf"\+?([{_DIGITS[base]}]+)", text)
    if not match:
        return None
    value = int(match.group(1), base)
    return value if value <= 255 else None


def parse_color(s: str) -> AnyColor | None:
    """Parse a colour: a name, #rrggbb, #rgb, rgb(r, g, b) or a 0-255 index."""
    s = s.strip().lower()

    named = _NAMED_COLORS.get(s)
    if named is not None:
        return named

    if s.startswith("#"):
        hex_part = s[1:]
        if len(hex_part) == 6:
            channels = [_parse_u8(hex_part[i : i + 2], 16) for i in (0, 2, 4)]
            if None in channels:
                return None
            return Rgb(*channels)
        if len(hex_part) == 3:
            channels = [_parse_u8(ch, 16) for ch in hex_part]
            if None in channels:
                return None
            return Rgb(*(c * 17 for c in channels))

    if s.startswith("rgb(") and s.endswith(")"):
        parts = s[4:-1].split(",")
        if len(parts) == 3:
            channels = [_parse_u8(part.strip()) for part in parts]
            if None in channels:
                return None
            return Rgb(*channels)

    index = _parse_u8(s)
    if index is not None:
        return Indexed(index)

    return None


@dataclass
class ColorOverrides:
    """Colour overrides from the config file."""

    section_header: str | None = None
    ref_label: str | None = None
    tag_label: str | None = None
    diff_addition: str | None = None
    diff_deletion: str | None = None
    diff_context: str | None = None
    diff_hunk: str | None = None
    remote_branch: str | None = None
    local_branch: str | None = None
    detached_head: str | None = None
    untracked_file: str | None = None
    unstaged_status: str | None = None
    file_path: str | None = None
    commit_hash: str | None = None
    text: str | None = None
    selection_bg: str | None = None


class ConfigError(Exception):
    """Failure to read or parse the config file."""

    IO = "IO error"
    PARSE = "Parse error"

    def __init__(self, kind: str, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind}: {detail}")


@dataclass
class Config:
    """Main configuration."""

    theme: str = "default"
    colors: ColorOverrides = field(default_factory=ColorOverrides)

    @classmethod
    def default_path(cls) -> Path:
        """Path of the config file in the user's config directory."""
        return platformdirs.user_config_path() / "magi" / "config.toml"

    @classmethod
    def load(cls) -> Config:
        """Load the config from the default path, falling back to defaults."""
        try:
            return cls.load_from_path(cls.default_path())
        except ConfigError:
            return cls()

    @classmethod
    def load_from_path(cls, path: str | Path) -> Config:
        """Load the config from the given file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(ConfigError.IO, str(exc)) from exc
        return cls.from_toml(text)

    @classmethod
    def from_toml(cls, text: str) -> Config:
        """Parse the config from TOML text."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(ConfigError.PARSE, str(exc)) from exc

        theme = data.get("theme", "default")
        if not isinstance(theme, str):
            raise ConfigError(ConfigError.PARSE, "invalid type for `theme`, expected a string")

        colors = data.get("colors", {})
        if not isinstance(colors, dict):
            raise ConfigError(ConfigError.PARSE, "invalid type for `colors`, expected a table")

        overrides = {}
        for f in dataclasses.fields(ColorOverrides):
            value = colors.get(f.name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigError(
                    ConfigError.PARSE, f"invalid type for `colors.{f.name}`, expected a string"
                )
            overrides[f.name] = value

        return cls(theme=theme, colors=ColorOverrides(**overrides))

    def resolve_theme(self) -> Theme:
        """Return the named theme with valid colour overrides applied."""
        theme = Theme.from_name(self.theme) or Theme.default_theme()
        changes = {}
        for f in dataclasses.fields(ColorOverrides):
            raw = getattr(self.colors, f.name)
            if raw is None:
                continue
            color = parse_color(raw)
            if color is not None:
                changes[f.name] = color
        return dataclasses.replace(theme, **changes)