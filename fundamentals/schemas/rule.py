"""
StyleRule schema: the single output unit of every generator.

A rule binds one selector to a flat block of CSS declarations plus zero or
more conditional blocks keyed by an at-rule expression such as
``@media (min-width: 768px)``. Property names are canonical kebab-case CSS
(``margin-top``, ``max-width``).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class StyleRule:
    """
    One selector and its declarations.

    Attributes:
        selector: Full selector including the leading ``.`` for classes.
        declarations: CSS property -> value, in emission order.
        conditionals: At-rule expression -> declarations applied under it,
            in emission order.
    """

    selector: str
    declarations: MappingProxyType[str, str]
    conditionals: MappingProxyType[str, MappingProxyType[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not self.selector:
            raise ValueError("StyleRule selector must not be empty")
        if not isinstance(self.declarations, MappingProxyType):
            raise TypeError(
                f"declarations must be a MappingProxyType, got {type(self.declarations).__name__}"
            )
        if not isinstance(self.conditionals, MappingProxyType):
            raise TypeError(
                f"conditionals must be a MappingProxyType, got {type(self.conditionals).__name__}"
            )

    @classmethod
    def build(
        cls,
        selector: str,
        declarations: Mapping[str, str],
        conditionals: Mapping[str, Mapping[str, str]] | None = None,
    ) -> StyleRule:
        """Construct a rule from plain mappings, freezing copies of them."""
        frozen_conditionals = {
            condition: MappingProxyType(dict(block))
            for condition, block in (conditionals or {}).items()
        }
        return cls(
            selector=selector,
            declarations=MappingProxyType(dict(declarations)),
            conditionals=MappingProxyType(frozen_conditionals),
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Return the nested-object shape a host build tool registers.

        ``{selector: {property: value, ..., condition: {property: value}}}``.
        The result is a fresh mutable copy.
        """
        body: dict[str, Any] = dict(self.declarations)
        for condition, block in self.conditionals.items():
            body[condition] = dict(block)
        return {self.selector: body}


def rules_to_dict(rules: Iterable[StyleRule]) -> dict[str, Any]:
    """Merge several rules into one registration mapping, preserving order.

    Later rules with a selector already present replace the earlier entry.
    """
    merged: dict[str, Any] = {}
    for rule in rules:
        merged.update(rule.to_dict())
    return merged
