"""Exceptions raised by the measuring core."""

from __future__ import annotations

from pathlib import Path


class DirSizeError(Exception):
    """Base class for dirsize errors."""


class InvalidArgumentError(DirSizeError, ValueError):
    """Raised for invalid collection arguments, before anything is measured."""


class EntryNotFoundError(DirSizeError):
    """Raised when an entry does not exist or cannot be stat'ed."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot find path '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ListingError(DirSizeError):
    """Raised when a subtree cannot be listed and partial results are not allowed."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot list '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
