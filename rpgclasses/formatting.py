"""Fixed-point formatting of character statistics."""

from __future__ import annotations

import math
import struct

_DEFAULT_PRECISION = 6


def _precision(decimal_places: int) -> int:
    # A negative precision falls back to the stream default.
    return _DEFAULT_PRECISION if decimal_places < 0 else decimal_places


def _to_single(value: float) -> float:
    """Round a value to the nearest single-precision float."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def truncate_double(value: float, decimal_places: int = 3) -> str:
    """Format a double-precision value with a fixed number of decimals."""
    return f"{value:.{_precision(decimal_places)}f}"


def truncate_float(value: float, decimal_places: int = 3) -> str:
    """Format a value as a single-precision float with a fixed number of decimals."""
    return f"{_to_single(value):.{_precision(decimal_places)}f}"