"""
Unit normalization between pixel and rem lengths.

Every numeric input to the generators passes through parse_scalar exactly
once. Bare numbers are pixels, strings ending in ``rem`` are rem, and any
other string is read as a pixel number (``"12px"`` and ``"12"`` are both
12px).

Strict mode (the default) rejects anything that is not a finite number with an
optional ``px``/``rem`` suffix. Lenient mode reproduces the legacy
``parseFloat`` reading: the longest numeric prefix wins and an unparsable
value becomes NaN, which then shows up verbatim in generated CSS.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Any

from .types import REM_BASE_PX, Pixels, Rem, ScalarValue

logger = logging.getLogger(__name__)

_STRICT_SCALAR = re.compile(
    r"^\s*(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)(?:\s*(?P<unit>px|rem))?\Z"
)
_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class InvalidScalarValue(ValueError):
    """Raised when a value cannot be read as a pixel or rem length.

    Attributes:
        value: The rejected input, exactly as received.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f"Cannot read {value!r} as a px or rem length")
        self.value = value


def parse_scalar(value: Any, *, strict: bool = True) -> ScalarValue:
    """
    Build a ScalarValue from a raw theme or call-site value.

    Parameters
    ----------
    value:
        A number (pixels), a ``"<n>rem"`` string, or a ``"<n>px"`` / ``"<n>"``
        string (pixels). An existing Pixels or Rem is returned unchanged.
    strict:
        When False, fall back to legacy prefix parsing and yield NaN for
        unparsable input instead of raising.

    Raises
    ------
    InvalidScalarValue
        In strict mode, if *value* is not a recognised length.
    """
    if isinstance(value, (Pixels, Rem)):
        return value
    if strict:
        return _parse_strict(value)
    return _parse_lenient(value)


def to_rem(value: Any, *, strict: bool = True) -> float:
    """Return *value* as a number of rem."""
    return parse_scalar(value, strict=strict).to_rem()


def to_px(value: Any, *, strict: bool = True) -> float:
    """Return *value* as a number of pixels."""
    return parse_scalar(value, strict=strict).to_px()


def px_to_rem(px: float) -> float:
    """Convert a pixel count to rem."""
    return px / REM_BASE_PX


def rem_to_px(rem: float) -> float:
    """Convert a rem count to pixels."""
    return rem * REM_BASE_PX


def format_number(value: float) -> str:
    """
    Render a number the way it appears inside generated CSS strings.

    Integral values carry no decimal point (``1`` not ``1.0``), other values
    use the shortest round-trip digits in positional notation. Exponent
    notation is only used below 1e-6 or from 1e21 up, matching how the host
    build tool stringifies numbers. NaN and infinities render as ``NaN``,
    ``Infinity`` and ``-Infinity``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    magnitude = abs(value)
    if 1e-6 <= magnitude < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")

    mantissa, exponent = repr(value).split("e")
    return f"{mantissa}e{int(exponent):+d}"


# ── Helpers ───────────────────────────────────────────────────────────────────


def _parse_strict(value: Any) -> ScalarValue:
    if isinstance(value, bool):
        raise InvalidScalarValue(value)
    if isinstance(value, (int, float)):
        return Pixels(_finite(value, value))
    if not isinstance(value, str):
        raise InvalidScalarValue(value)

    match = _STRICT_SCALAR.match(value)
    if match is None:
        raise InvalidScalarValue(value)
    number = _finite(match.group("number"), value)
    if match.group("unit") == "rem":
        return Rem(number)
    return Pixels(number)


def _finite(number: Any, original: Any) -> float:
    """Return *number* as a float, rejecting NaN, infinities and overflow."""
    try:
        result = float(number)
    except OverflowError:
        raise InvalidScalarValue(original) from None
    if not math.isfinite(result):
        raise InvalidScalarValue(original)
    return result


def _parse_lenient(value: Any) -> ScalarValue:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Pixels(float(value))

    text = str(value) if value is not None else ""
    number = _parse_float_prefix(text)
    if math.isnan(number):
        logger.warning("Unparsable length %r read as NaN", value)
    if isinstance(value, str) and value.endswith("rem"):
        return Rem(number)
    return Pixels(number)


def _parse_float_prefix(text: str) -> float:
    """Read the longest leading float from *text*; NaN when there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))
