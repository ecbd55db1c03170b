"""
Shared utilities for the fundamentals style generators.

Provides the unit layer used identically by the fluid type calculator, the
container synthesizer and the spacing scale: ScalarValue parsing, px/rem
conversion, number formatting for generated CSS, and class-name escaping.
"""

from .conversion import (
    InvalidScalarValue,
    format_number,
    parse_scalar,
    px_to_rem,
    rem_to_px,
    to_px,
    to_rem,
)
from .escape import Escaper, escape_class_name
from .types import REM_BASE_PX, Pixels, Rem, ScalarValue

__all__ = [
    # types
    "Pixels",
    "Rem",
    "ScalarValue",
    "REM_BASE_PX",
    # conversion
    "InvalidScalarValue",
    "parse_scalar",
    "to_rem",
    "to_px",
    "px_to_rem",
    "rem_to_px",
    "format_number",
    # escaping
    "Escaper",
    "escape_class_name",
]
