"""Byte count to KB/MB/GB conversion."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal

from dirsize.models.size_result import ScaleUnit

KIB = 1024
MIB = 1024**2
GIB = 1024**3

_TWO_PLACES = Decimal("0.01")

# Checked in order; the comparison is strict, so exactly 1 MiB is still KB
# and exactly 1 GiB is still MB.
_THRESHOLDS: tuple[tuple[int, ScaleUnit], ...] = (
    (GIB, ScaleUnit.GB),
    (MIB, ScaleUnit.MB),
)


def scale(byte_size: int) -> tuple[Decimal, ScaleUnit]:
    """Convert a byte count to a (value, unit) pair.

    The value is rounded to two decimal places using round-half-to-even.

    >>> scale(2 * 1024 * 1024)
    (Decimal('2.00'), <ScaleUnit.MB: 'MB'>)
    """
    if byte_size < 0:
        raise ValueError(f"byte_size must be non-negative, got {byte_size}")

    divisor, unit = KIB, ScaleUnit.KB
    for threshold, threshold_unit in _THRESHOLDS:
        if byte_size > threshold:
            divisor, unit = threshold, threshold_unit
            break

    value = (Decimal(byte_size) / Decimal(divisor)).quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN)
    return value, unit


def format_size(value: Decimal, unit: ScaleUnit) -> str:
    """Render a scaled value, e.g. ``"4.20 MB"``."""
    return f"{value} {unit.value}"
