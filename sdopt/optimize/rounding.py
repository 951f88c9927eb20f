"""Five-decimal rounding primitives and trace formatting helpers.

Two primitives with different semantics are used at fixed places in the
descent loop and must not be swapped:

``floor5``
    Rounds the decimal value of a double toward negative infinity at the
    fifth fractional digit. Applied to stored iterates, objective values
    and the tolerance scalar.
``round5``
    Scales by ``1e5``, rounds half away from zero and scales back. Applied to
    gradient components entering the update and to displayed iterates.

Both pass NaN and infinities through unchanged and never return ``-0.0``.
"""

from __future__ import annotations

import math
from decimal import ROUND_FLOOR, Context, Decimal
from typing import Iterable

import numpy as np

DIGITS = 5
SCALE = 10.0**DIGITS
_QUANTUM = Decimal(1).scaleb(-DIGITS)
# wide enough for the integer digits of any finite double plus the fraction
_CONTEXT = Context(prec=330)


def floor5(value: float) -> float:
    """Floor ``value`` to 5 fractional digits.

    The double is read through its shortest round-trip decimal form, so
    ``floor5(floor5(v)) == floor5(v)``. A double lying just below a 5-digit
    decimal (``0.3`` is stored as ``0.29999999999999998...``) therefore floors
    to that decimal rather than one step under it, unlike a reading of its
    exact binary expansion.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    floored = Decimal(repr(value)).quantize(_QUANTUM, rounding=ROUND_FLOOR, context=_CONTEXT)
    return float(floored) + 0.0


def round5(value: float) -> float:
    """Round ``value`` half away from zero to 5 fractional digits."""
    value = float(value)
    if not math.isfinite(value):
        return value
    scaled = value * SCALE
    if abs(scaled) >= 2.0**52:
        # already integral at this scale
        return value
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) / SCALE + 0.0


def floor5_array(values: Iterable[float]) -> np.ndarray:
    return np.array([floor5(v) for v in np.asarray(values, dtype=float)], dtype=float)


def round5_array(values: Iterable[float]) -> np.ndarray:
    return np.array([round5(v) for v in np.asarray(values, dtype=float)], dtype=float)


def format_scalar(value: float) -> str:
    """Render with exactly five fractional digits (``0.00000`` pattern)."""
    return f"{value:.{DIGITS}f}"


def format_vector(values: Iterable[float]) -> str:
    """Space-separated ``round5`` components with a trailing space."""
    return "".join(format_scalar(round5(v)) + " " for v in np.asarray(values, dtype=float))


def format_raw(value: float) -> str:
    """Render a double in plain ``Double.toString`` style.

    Decimal notation for magnitudes in ``[1e-3, 1e7)`` (``6.0``, ``0.25``),
    scientific notation with an upper-case ``E`` otherwise (``1.0E-5``).
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"
    if 1e-3 <= abs(value) < 1e7:
        text = repr(value)
        return text if "." in text else text + ".0"
    mantissa, exponent = np.format_float_scientific(value, unique=True, trim="0").split("e")
    return f"{mantissa}E{int(exponent)}"


__all__ = [
    "DIGITS",
    "SCALE",
    "floor5",
    "floor5_array",
    "format_raw",
    "format_scalar",
    "format_vector",
    "round5",
    "round5_array",
]
