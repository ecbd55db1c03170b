"""
Fluid type calculator: font-size and line-height clamps across a viewport range.

Given a minimum and maximum size and the viewport widths at which each should
apply, a CSS ``clamp()`` is derived whose preferred value is the straight line
through both endpoints:

    factor    = (max - min) / (max_width - min_width)         rem per px
    intercept = min - min_width * factor                      rem
    slope     = (max*16 - min*16) / (max_width - min_width) * 100   vw

    clamp(<lower>rem, <intercept>rem + <slope>vw, <upper>rem)

The lower and upper bounds are the smaller and larger of the two sizes, so a
size that shrinks as the viewport grows still clamps correctly. Font size and
line height are computed independently with the same viewport widths.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from fundamentals.utilities.conversion import format_number, parse_scalar
from fundamentals.utilities.types import REM_BASE_PX, Pixels, ScalarValue

logger = logging.getLogger(__name__)

DEFAULT_MIN_WIDTH_PX: float = 320
DEFAULT_MAX_WIDTH_PX: float = 1920


@dataclass(frozen=True)
class FluidAuxiliary:
    """Companion values emitted alongside a fluid font size."""

    line_height: str
    letter_spacing: str
    font_weight: str

    def to_dict(self) -> dict[str, str]:
        return {
            "lineHeight": self.line_height,
            "letterSpacing": self.letter_spacing,
            "fontWeight": self.font_weight,
        }


@dataclass(frozen=True)
class FluidResult:
    """
    A fluid font size and its auxiliary values.

    Unpacks as a pair, ``clamp, auxiliary = fluid_type(...)``, mirroring the
    ``[fontSize, {lineHeight, letterSpacing, fontWeight}]`` shape a host
    theme expects for a font-size entry.
    """

    clamp: str
    auxiliary: FluidAuxiliary

    def __iter__(self) -> Iterator[Any]:
        yield self.clamp
        yield self.auxiliary

    def to_theme_value(self) -> tuple[str, dict[str, str]]:
        """Return the host font-size entry: ``(clamp, {lineHeight, letterSpacing, fontWeight})``."""
        return self.clamp, self.auxiliary.to_dict()


@dataclass(frozen=True)
class FluidRange:
    """
    Inputs for one fluid type step, already normalized to ScalarValues.

    Attributes:
        min_value / max_value: Font size at min_width / max_width.
        min_line_height / max_line_height: Line height at min_width / max_width.
        letter_spacing: Passed through untouched.
        font_weight: Passed through untouched.
        min_width / max_width: Viewport widths bounding the interpolation.
            Must differ once converted to pixels.
    """

    min_value: ScalarValue
    max_value: ScalarValue
    min_line_height: ScalarValue
    max_line_height: ScalarValue
    letter_spacing: str = "0"
    font_weight: str = "400"
    min_width: ScalarValue = Pixels(DEFAULT_MIN_WIDTH_PX)
    max_width: ScalarValue = Pixels(DEFAULT_MAX_WIDTH_PX)

    def __post_init__(self) -> None:
        if self.min_width.to_px() == self.max_width.to_px():
            raise ValueError(
                f"min_width and max_width must differ, both are {format_number(self.min_width.to_px())}px"
            )

    @classmethod
    def parse(
        cls,
        min_value: Any,
        max_value: Any,
        min_line_height: Any,
        max_line_height: Any,
        letter_spacing: Any = "0",
        font_weight: Any = "400",
        min_width: Any = DEFAULT_MIN_WIDTH_PX,
        max_width: Any = DEFAULT_MAX_WIDTH_PX,
        *,
        strict: bool = True,
    ) -> FluidRange:
        """Build a FluidRange from raw numbers / unit strings."""
        return cls(
            min_value=parse_scalar(min_value, strict=strict),
            max_value=parse_scalar(max_value, strict=strict),
            min_line_height=parse_scalar(min_line_height, strict=strict),
            max_line_height=parse_scalar(max_line_height, strict=strict),
            letter_spacing=str(letter_spacing),
            font_weight=str(font_weight),
            min_width=parse_scalar(min_width, strict=strict),
            max_width=parse_scalar(max_width, strict=strict),
        )


def calculate_clamp(
    min_rem: float,
    max_rem: float,
    min_width_px: float,
    max_width_px: float,
) -> str:
    """
    Return the ``clamp()`` expression interpolating *min_rem* to *max_rem*.

    Parameters
    ----------
    min_rem / max_rem:
        Sizes in rem at *min_width_px* and *max_width_px* respectively.
    min_width_px / max_width_px:
        Viewport widths in pixels. Must differ.

    Raises
    ------
    ValueError
        If the two widths are equal.
    """
    width_span = max_width_px - min_width_px
    if width_span == 0:
        raise ValueError(f"min and max viewport widths must differ, both are {min_width_px}px")

    factor = (max_rem - min_rem) / width_span
    intercept = min_rem - min_width_px * factor
    slope_vw = ((max_rem * REM_BASE_PX - min_rem * REM_BASE_PX) / width_span) * 100

    lower = format_number(min(min_rem, max_rem))
    upper = format_number(max(min_rem, max_rem))
    return f"clamp({lower}rem, {format_number(intercept)}rem + {format_number(slope_vw)}vw, {upper}rem)"


def fluid_clamps(fluid_range: FluidRange) -> FluidResult:
    """Compute the font-size and line-height clamps for *fluid_range*."""
    min_width_px = fluid_range.min_width.to_px()
    max_width_px = fluid_range.max_width.to_px()

    font_clamp = calculate_clamp(
        fluid_range.min_value.to_rem(),
        fluid_range.max_value.to_rem(),
        min_width_px,
        max_width_px,
    )
    line_clamp = calculate_clamp(
        fluid_range.min_line_height.to_rem(),
        fluid_range.max_line_height.to_rem(),
        min_width_px,
        max_width_px,
    )
    return FluidResult(
        clamp=font_clamp,
        auxiliary=FluidAuxiliary(
            line_height=line_clamp,
            letter_spacing=fluid_range.letter_spacing,
            font_weight=fluid_range.font_weight,
        ),
    )


def fluid_type(
    min_value: Any,
    max_value: Any,
    min_line_height: Any,
    max_line_height: Any,
    letter_spacing: Any = "0",
    font_weight: Any = "400",
    min_width: Any = DEFAULT_MIN_WIDTH_PX,
    max_width: Any = DEFAULT_MAX_WIDTH_PX,
    *,
    strict: bool = True,
) -> FluidResult:
    """
    Calculate fluid typography for one font-size step.

    Sizes and widths accept a number (pixels), ``"<n>px"`` or ``"<n>rem"``.

    Example
    -------
    >>> clamp, aux = fluid_type(30, 40, 36, 46)
    >>> clamp
    'clamp(1.875rem, 1.75rem + 0.625vw, 2.5rem)'

    Raises
    ------
    InvalidScalarValue
        In strict mode, if any size or width is not a recognised length.
    ValueError
        If *min_width* and *max_width* resolve to the same pixel width.
    """
    fluid_range = FluidRange.parse(
        min_value,
        max_value,
        min_line_height,
        max_line_height,
        letter_spacing,
        font_weight,
        min_width,
        max_width,
        strict=strict,
    )
    return fluid_clamps(fluid_range)


def fluid_font_sizes(
    scale: Mapping[str, Sequence[Any] | Mapping[str, Any]],
    *,
    strict: bool = True,
) -> dict[str, FluidResult]:
    """
    Compute a named fluid type scale.

    Each entry holds the arguments of :func:`fluid_type`, either positionally
    (``h1: [30, 40, 36, 46]``) or by keyword
    (``body: {min_value: 16, max_value: 18, ...}``). Entry order is preserved.
    """
    sizes: dict[str, FluidResult] = {}
    for name, args in scale.items():
        if isinstance(args, Mapping):
            sizes[name] = fluid_type(**args, strict=strict)
        elif isinstance(args, Sequence) and not isinstance(args, str):
            sizes[name] = fluid_type(*args, strict=strict)
        else:
            raise TypeError(
                f"fluid type entry {name!r} must be a list or mapping of arguments, "
                f"got {type(args).__name__}"
            )
    logger.debug("Computed %d fluid font sizes", len(sizes))
    return sizes
