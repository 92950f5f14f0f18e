"""dirsize data models."""

from dirsize.models.size_result import EntryKind, ScaleUnit, SizeResult
from dirsize.models.collect_result import CollectResult, EntryError, ListingWarning

__all__ = [
    "CollectResult",
    "EntryError",
    "EntryKind",
    "ListingWarning",
    "ScaleUnit",
    "SizeResult",
]
