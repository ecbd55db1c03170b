"""
Bounded spacing scale: fixed-step utilities for sizing, margin, padding, gap
and inset.

For every step ``i`` in ``1..MAX`` and every entry in SPACING_PROPERTIES one
utility rule is emitted, mapping ``.<prefix>-<i>`` to ``i/16 rem`` (so step
``i`` is ``i`` pixels at the default root size):

    .m-4   { margin: 0.25rem }
    .-m-4  { margin: -0.25rem }
    .mx-4  { margin-left: 0.25rem; margin-right: 0.25rem }

Prefixes starting with ``-`` negate the value and keep the ``-`` in the class
name. Axis entries set both properties of the pair in a single rule; they are
never merged with the single-side rules of the same step.

The output size is MAX x len(SPACING_PROPERTIES). Output grows linearly with
MAX and every rule is regenerated on each build, so keep MAX as small as the
design allows.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from fundamentals.schemas.rule import StyleRule
from fundamentals.utilities.conversion import format_number
from fundamentals.utilities.escape import Escaper, escape_class_name
from fundamentals.utilities.types import REM_BASE_PX

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEP = 150
NEGATION_MARKER = "-"

# Above this many rules a warning is logged; nothing is capped.
LARGE_SCALE_WARNING_RULES = 50_000


@dataclass(frozen=True)
class SpacingProperty:
    """
    One row of the spacing table.

    Attributes:
        prefix: Class-name prefix; a leading ``-`` marks the negated variant.
        properties: CSS properties set by the utility, in emission order.
    """

    prefix: str
    properties: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.prefix or self.prefix == NEGATION_MARKER:
            raise ValueError(f"SpacingProperty prefix must name a utility, got {self.prefix!r}")
        if not self.properties:
            raise ValueError(f"SpacingProperty {self.prefix!r} must set at least one property")

    @property
    def negative(self) -> bool:
        return self.prefix.startswith(NEGATION_MARKER)


def _pair(prefix: str, *properties: str) -> tuple[SpacingProperty, SpacingProperty]:
    """Return the positive and negated rows for *prefix*."""
    return (
        SpacingProperty(prefix, properties),
        SpacingProperty(NEGATION_MARKER + prefix, properties),
    )


SPACING_PROPERTIES: tuple[SpacingProperty, ...] = (
    SpacingProperty("h", ("height",)),
    SpacingProperty("min-h", ("min-height",)),
    SpacingProperty("max-h", ("max-height",)),
    SpacingProperty("w", ("width",)),
    SpacingProperty("min-w", ("min-width",)),
    SpacingProperty("max-w", ("max-width",)),
    *_pair("m", "margin"),
    *_pair("mt", "margin-top"),
    *_pair("mr", "margin-right"),
    *_pair("ml", "margin-left"),
    *_pair("mb", "margin-bottom"),
    *_pair("my", "margin-top", "margin-bottom"),
    *_pair("mx", "margin-left", "margin-right"),
    *_pair("p", "padding"),
    *_pair("pt", "padding-top"),
    *_pair("pr", "padding-right"),
    *_pair("pl", "padding-left"),
    *_pair("pb", "padding-bottom"),
    *_pair("py", "padding-top", "padding-bottom"),
    *_pair("px", "padding-left", "padding-right"),
    SpacingProperty("gap", ("gap",)),
    SpacingProperty("gap-x", ("column-gap",)),
    SpacingProperty("gap-y", ("row-gap",)),
    SpacingProperty("top", ("top",)),
    SpacingProperty("left", ("left",)),
    SpacingProperty("right", ("right",)),
    SpacingProperty("bottom", ("bottom",)),
    SpacingProperty("inset", ("inset",)),
)


@dataclass(frozen=True)
class ScaleBound:
    """Last step of the spacing scale; steps run 1..max_step inclusive."""

    max_step: int = DEFAULT_MAX_STEP

    def __post_init__(self) -> None:
        # Integral floats such as 150.0 are accepted.
        if isinstance(self.max_step, float) and self.max_step.is_integer():
            object.__setattr__(self, "max_step", int(self.max_step))
        if isinstance(self.max_step, bool) or not isinstance(self.max_step, int):
            raise TypeError(f"max_step must be a whole number, got {self.max_step!r}")
        if self.max_step < 1:
            raise ValueError(f"max_step must be >= 1, got {self.max_step}")

    @classmethod
    def from_theme(cls, theme: Any) -> ScaleBound:
        """Read ``spacing.MAX`` from a theme lookup ``theme(path, default)``."""
        return cls(max_step=theme("spacing.MAX", DEFAULT_MAX_STEP))

    def steps(self) -> range:
        return range(1, self.max_step + 1)


def spacing_value(step: int, negative: bool = False) -> str:
    """Return the rem value for *step*, e.g. ``"0.25rem"`` for 4."""
    value = f"{format_number(step / REM_BASE_PX)}rem"
    return f"{NEGATION_MARKER}{value}" if negative else value


def synthesize_step(
    step: int,
    escape: Escaper = escape_class_name,
    table: Sequence[SpacingProperty] = SPACING_PROPERTIES,
) -> list[StyleRule]:
    """Return one utility rule per table row for a single *step*."""
    positive = spacing_value(step)
    negative = spacing_value(step, negative=True)

    rules: list[StyleRule] = []
    for row in table:
        value = negative if row.negative else positive
        selector = "." + escape(f"{row.prefix}-{step}")
        rules.append(StyleRule.build(selector, {prop: value for prop in row.properties}))
    return rules


def warn_if_large(
    bound: ScaleBound,
    table: Sequence[SpacingProperty] = SPACING_PROPERTIES,
) -> bool:
    """Log a warning when *bound* expands to more than LARGE_SCALE_WARNING_RULES rules.

    Returns True when the warning was logged.
    """
    expected = bound.max_step * len(table)
    if expected <= LARGE_SCALE_WARNING_RULES:
        return False
    logger.warning(
        "Spacing scale MAX=%d emits %d rules; build time grows linearly with MAX",
        bound.max_step,
        expected,
    )
    return True


def synthesize_spacing(
    bound: ScaleBound = ScaleBound(),
    escape: Escaper = escape_class_name,
    table: Sequence[SpacingProperty] = SPACING_PROPERTIES,
) -> list[StyleRule]:
    """
    Expand the spacing table across every step of *bound*.

    Parameters
    ----------
    bound:
        Scale bound; defaults to 150 steps.
    escape:
        Selector-escaping capability applied to every generated class name.
    table:
        Rows to expand; defaults to SPACING_PROPERTIES.

    Returns
    -------
    list[StyleRule]
        ``bound.max_step * len(table)`` rules, step-major: all rows for step
        1, then all rows for step 2, and so on.
    """
    warn_if_large(bound, table)

    rules: list[StyleRule] = []
    for step in bound.steps():
        rules.extend(synthesize_step(step, escape, table))
    logger.debug("Synthesized %d spacing rules for MAX=%d", len(rules), bound.max_step)
    return rules
