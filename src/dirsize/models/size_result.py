"""Size result dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    FILE = "File"
    DIRECTORY = "Directory"


class ScaleUnit(str, Enum):
    KB = "KB"
    MB = "MB"
    GB = "GB"


@dataclass(frozen=True, slots=True)
class SizeResult:
    """Measured size of a single file or directory.

    ``scaled_value`` and ``scale_unit`` are derived from ``byte_size`` alone,
    so two results with equal byte counts always display the same way.
    """

    kind: EntryKind
    name: str
    path: Path
    byte_size: int
    scaled_value: Decimal
    scale_unit: ScaleUnit

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
