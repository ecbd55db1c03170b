"""
Core type definitions for the unit layer.

ScalarValue is a tagged union of two frozen dataclasses, Pixels and Rem.
Values are built once at the boundary by conversion.parse_scalar; the string
they came from is never inspected again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

REM_BASE_PX: float = 16.0


@dataclass(frozen=True)
class Pixels:
    """An absolute length in CSS pixels."""

    value: float

    def to_rem(self) -> float:
        return self.value / REM_BASE_PX

    def to_px(self) -> float:
        return self.value


@dataclass(frozen=True)
class Rem:
    """A length relative to the root font size (1rem == 16px)."""

    value: float

    def to_rem(self) -> float:
        return self.value

    def to_px(self) -> float:
        return self.value * REM_BASE_PX


ScalarValue = Union[Pixels, Rem]
