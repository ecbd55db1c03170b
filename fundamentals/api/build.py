"""
Public stylesheet build API.

build_stylesheet() is the single entry point that takes a theme and returns
everything the generators derive from it: container components, the spacing
utility scale, and the fluid font-size scale. It wires theme lookup →
container synthesizer → spacing synthesizer → fluid type calculator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

from fundamentals.components.containers import synthesize_containers
from fundamentals.schemas.rule import StyleRule
from fundamentals.spacing.scale import ScaleBound, synthesize_spacing
from fundamentals.theme.store import ThemeStore, load_default_theme
from fundamentals.typography.fluid import FluidResult, fluid_font_sizes
from fundamentals.utilities.escape import Escaper, escape_class_name
from fundamentals.writer.css import render_stylesheet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stylesheet:
    """Output of a build."""

    components: tuple[StyleRule, ...]
    utilities: tuple[StyleRule, ...]
    font_sizes: MappingProxyType[str, FluidResult]

    def __post_init__(self) -> None:
        if not isinstance(self.font_sizes, MappingProxyType):
            raise TypeError(
                "font_sizes must be a MappingProxyType, "
                f"got {type(self.font_sizes).__name__}"
            )

    @property
    def rules(self) -> tuple[StyleRule, ...]:
        """Components first, then utilities."""
        return self.components + self.utilities

    def to_css(self) -> str:
        return render_stylesheet(self.rules)


def build_stylesheet(
    theme: ThemeStore | None = None,
    *,
    escape: Escaper = escape_class_name,
    strict: bool = True,
) -> Stylesheet:
    """
    Generate every rule and font size defined by *theme*.

    Parameters
    ----------
    theme:
        Theme values; defaults to the packaged default theme.
    escape:
        Selector-escaping capability for generated utility class names.
    strict:
        When False, fall back to the legacy lenient reading of malformed
        lengths (NaN) and undefined breakpoints (``undefined``).

    Returns
    -------
    Stylesheet
        Container components, spacing utilities and fluid font sizes.

    Raises
    ------
    InvalidScalarValue
        In strict mode, if a fluid type entry holds an unreadable length.
    MissingBreakpoint
        In strict mode, if a container references an undefined breakpoint.
    """
    if theme is None:
        theme = load_default_theme()

    components = synthesize_containers(theme.section("containers"), theme.screen, strict=strict)
    utilities = synthesize_spacing(ScaleBound.from_theme(theme), escape)
    font_sizes = fluid_font_sizes(theme.section("fluidType"), strict=strict)

    logger.info(
        "Built %d components, %d utilities, %d font sizes",
        len(components),
        len(utilities),
        len(font_sizes),
    )
    return Stylesheet(
        components=tuple(components),
        utilities=tuple(utilities),
        font_sizes=MappingProxyType(font_sizes),
    )
