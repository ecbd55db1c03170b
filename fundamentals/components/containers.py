"""
Container component synthesizer.

Each named theme container becomes one component rule: a centred,
full-width block capped at a max width, with inline padding that steps up at
the breakpoints listed in its responsive-padding mapping.

Theme shape (``containers`` key):

    DEFAULT: [1440px, 1rem, {md: 2rem, lg: 3rem}]
    md:      [768px,  1rem, {md: 2rem}]

``DEFAULT`` renders as ``.container``; every other name as
``.container--<name>``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from fundamentals.schemas.rule import StyleRule
from fundamentals.theme.store import MissingBreakpoint

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER = "DEFAULT"
CONTAINER_CLASS = "container"

# Condition text emitted for an unresolved breakpoint in lenient mode.
_UNRESOLVED_SCREEN = "undefined"

ScreenLookup = Union[Callable[[str], Any], Mapping[str, Any]]


@dataclass(frozen=True)
class ContainerSpec:
    """
    One named container definition.

    Attributes:
        name: Theme key; ``DEFAULT`` selects the bare ``.container`` class.
        max_width: CSS max-width value, e.g. ``"1440px"``.
        base_padding: Inline padding below the first breakpoint.
        responsive_padding: Breakpoint name -> inline padding from that
            breakpoint up, in emission order.
    """

    name: str
    max_width: str
    base_padding: str
    responsive_padding: MappingProxyType[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ContainerSpec name must not be empty")
        if not isinstance(self.responsive_padding, MappingProxyType):
            raise TypeError(
                "responsive_padding must be a MappingProxyType, "
                f"got {type(self.responsive_padding).__name__}"
            )

    @classmethod
    def from_theme_entry(cls, name: str, entry: Sequence[Any]) -> ContainerSpec:
        """Build a spec from the theme list ``[maxWidth, basePadding, {bp: padding}]``.

        The responsive mapping may be omitted or null.
        """
        if isinstance(entry, (str, bytes)) or not 2 <= len(entry) <= 3:
            raise ValueError(
                f"container {name!r} must be [maxWidth, basePadding, responsivePadding], got {entry!r}"
            )
        responsive = entry[2] if len(entry) == 3 and entry[2] is not None else {}
        if not isinstance(responsive, Mapping):
            raise ValueError(
                f"container {name!r} responsive padding must be a mapping, got {type(responsive).__name__}"
            )
        return cls(
            name=name,
            max_width=str(entry[0]),
            base_padding=str(entry[1]),
            responsive_padding=MappingProxyType({str(k): str(v) for k, v in responsive.items()}),
        )


def container_selector(name: str) -> str:
    """Return the class selector for container *name*."""
    if name == DEFAULT_CONTAINER:
        return f".{CONTAINER_CLASS}"
    return f".{CONTAINER_CLASS}--{name}"


def synthesize_container(
    spec: ContainerSpec,
    screens: ScreenLookup,
    *,
    strict: bool = True,
) -> StyleRule:
    """
    Build the component rule for one container.

    Parameters
    ----------
    spec:
        The container definition.
    screens:
        Breakpoint lookup: a mapping or a callable returning the min-width
        for a breakpoint name, or None when undefined.
    strict:
        When False, an undefined breakpoint is logged and emitted as
        ``@media (min-width: undefined)`` instead of raising.

    Raises
    ------
    MissingBreakpoint
        In strict mode, if a responsive-padding key has no screen value.
    """
    declarations = {
        "max-width": spec.max_width,
        "width": "100%",
        "margin-left": "auto",
        "margin-right": "auto",
        "padding-left": spec.base_padding,
        "padding-right": spec.base_padding,
    }

    conditionals: dict[str, dict[str, str]] = {}
    for screen_name, padding in spec.responsive_padding.items():
        min_width = _lookup_screen(screens, screen_name)
        if min_width is None:
            if strict:
                raise MissingBreakpoint(screen_name, container=spec.name)
            logger.warning(
                "Container %r references undefined breakpoint %r", spec.name, screen_name
            )
            min_width = _UNRESOLVED_SCREEN
        conditionals[f"@media (min-width: {min_width})"] = {
            "padding-left": padding,
            "padding-right": padding,
        }

    return StyleRule.build(container_selector(spec.name), declarations, conditionals)


def synthesize_containers(
    containers: Mapping[str, Sequence[Any] | ContainerSpec],
    screens: ScreenLookup,
    *,
    strict: bool = True,
) -> list[StyleRule]:
    """
    Build one component rule per named container, in mapping order.

    *containers* values may be theme lists or ready-made ContainerSpecs.
    See :func:`synthesize_container` for *screens* and *strict*.
    """
    rules: list[StyleRule] = []
    for name, entry in containers.items():
        spec = entry if isinstance(entry, ContainerSpec) else ContainerSpec.from_theme_entry(name, entry)
        rules.append(synthesize_container(spec, screens, strict=strict))
    logger.debug("Synthesized %d container rules", len(rules))
    return rules


# ── Helpers ───────────────────────────────────────────────────────────────────


def _lookup_screen(screens: ScreenLookup, name: str) -> str | None:
    if isinstance(screens, Mapping):
        value = screens.get(name)
    else:
        value = screens(name)
    return None if value is None else str(value)
