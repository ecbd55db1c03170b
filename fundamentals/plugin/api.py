"""
Host boundary for the plugin entry points.

PluginApi is the capability bundle a host build tool hands to a plugin:
theme lookup, class-name escaping, and two registration sinks. RuleCollector
is the in-process host used by the public API and the tests; it records every
registration call in order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from fundamentals.theme.store import ThemeStore
from fundamentals.utilities.escape import Escaper, escape_class_name


@runtime_checkable
class PluginApi(Protocol):
    """Protocol for the host capabilities a plugin may use."""

    def theme(self, path: str, default: Any = None) -> Any: ...

    def e(self, name: str) -> str: ...

    def add_components(self, rules: Mapping[str, Any]) -> None: ...

    def add_utilities(self, rules: Mapping[str, Any]) -> None: ...


@dataclass
class RuleCollector:
    """
    In-process host that records registered rule mappings.

    Attributes:
        store: Theme values served by :meth:`theme`.
        escaper: Class-name escaper served by :meth:`e`.
        components: One entry per ``add_components`` call, in call order.
        utilities: One entry per ``add_utilities`` call, in call order.
    """

    store: ThemeStore
    escaper: Escaper = escape_class_name
    components: list[dict[str, Any]] = field(default_factory=list)
    utilities: list[dict[str, Any]] = field(default_factory=list)

    def theme(self, path: str, default: Any = None) -> Any:
        return self.store.get(path, default)

    def e(self, name: str) -> str:
        return self.escaper(name)

    def add_components(self, rules: Mapping[str, Any]) -> None:
        self.components.append(dict(rules))

    def add_utilities(self, rules: Mapping[str, Any]) -> None:
        self.utilities.append(dict(rules))

    @property
    def rule_count(self) -> int:
        """Total number of selectors registered across both sinks."""
        return sum(len(batch) for batch in self.components) + sum(
            len(batch) for batch in self.utilities
        )
