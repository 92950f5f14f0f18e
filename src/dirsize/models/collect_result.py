"""Collection result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dirsize.models.size_result import SizeResult


@dataclass(frozen=True, slots=True)
class EntryError:
    """An input entry that could not be measured."""

    entry: str
    kind: str  # "not_found" or "permission_denied"
    message: str


@dataclass(frozen=True, slots=True)
class ListingWarning:
    """A subtree skipped while measuring ``entry``; it contributed 0 bytes."""

    path: Path
    entry: str
    message: str


@dataclass(slots=True)
class CollectResult:
    """Sorted results of one collection run plus what went wrong along the way."""

    results: list[SizeResult] = field(default_factory=list)
    errors: list[EntryError] = field(default_factory=list)
    warnings: list[ListingWarning] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(r.byte_size for r in self.results)

    @property
    def ok(self) -> bool:
        """True when every entry was measured."""
        return not self.errors
