"""Error types raised by the application."""

from __future__ import annotations


class MagiError(Exception):
    """Base class for all application errors."""


class IoError(MagiError):
    """An operating-system level I/O failure."""

    def __init__(self, error: OSError | str) -> None:
        self.error = error
        super().__init__(f"I/O error: {error}")


class GitError(MagiError):
    """A failure reported by git."""

    def __init__(self, message: object) -> None:
        self.message = message
        super().__init__(f"Git error: {message}")