"""
Theme store: a read-only named-value lookup over a nested theme mapping.

Generators never reach into global configuration. They receive a ThemeStore
(or any callable with the same ``theme(path, default)`` shape) and read the
keys they need by dotted path:

    store = ThemeStore.from_yaml(path)
    store.get("screens.md")            # "768px", or None when absent
    store("spacing.MAX", 150)          # host-style call with a default

The whole tree is frozen on construction: mappings become MappingProxyType
and lists become tuples. Nothing writes to a store after it is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_THEME_FILE = _DATA_DIR / "default_theme.yaml"

_MISSING = object()


class MissingBreakpoint(KeyError):
    """Raised when responsive padding names a breakpoint the theme does not define.

    Attributes:
        breakpoint: The unresolved breakpoint name.
        container: Name of the container entry that referenced it.
    """

    def __init__(self, breakpoint: str, container: str | None = None) -> None:
        where = f" (container {container!r})" if container is not None else ""
        super().__init__(f"Breakpoint {breakpoint!r} is not defined in theme screens{where}")
        self.breakpoint = breakpoint
        self.container = container

    def __str__(self) -> str:
        return str(self.args[0])


class ThemeStore:
    """
    Read-only theme values addressed by dotted path.

    Instantiate directly from a mapping (e.g. in tests), or use
    :meth:`from_yaml` / :func:`load_default_theme` to read a theme file.
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        self.values: MappingProxyType[str, Any] = _freeze(values)

    # ── Loading ────────────────────────────────────────────────────────────────

    @classmethod
    def from_yaml(cls, path: Path | str) -> ThemeStore:
        """Load a theme from a YAML file.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        ValueError
            If the file is not valid YAML or its top level is not a mapping.
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Theme file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse theme file {path}: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ValueError(f"Theme file {path} must contain a mapping, got {type(data).__name__}")
        return cls(cast(Mapping[str, Any], data))

    # ── Queries ────────────────────────────────────────────────────────────────

    def get(self, path: str, default: Any = None) -> Any:
        """Return the value at dotted *path*, or *default* when any segment is missing."""
        node: Any = self.values
        for segment in path.split("."):
            if not isinstance(node, Mapping):
                return default
            node = node.get(segment, _MISSING)
            if node is _MISSING:
                return default
        return node

    def require(self, path: str) -> Any:
        """Return the value at dotted *path*.

        Raises KeyError if the path does not resolve.
        """
        value = self.get(path, _MISSING)
        if value is _MISSING:
            raise KeyError(f"Theme has no value at {path!r}")
        return value

    def section(self, path: str) -> MappingProxyType[str, Any]:
        """Return the mapping at *path*, or an empty mapping when absent."""
        value = self.get(path)
        if value is None:
            return MappingProxyType({})
        if not isinstance(value, Mapping):
            raise TypeError(f"Theme value at {path!r} must be a mapping, got {type(value).__name__}")
        return cast(MappingProxyType[str, Any], value)

    def screen(self, name: str) -> str | None:
        """Return the min-width of breakpoint *name*, or None when undefined."""
        value = self.get(f"screens.{name}")
        return None if value is None else str(value)

    def __call__(self, path: str, default: Any = None) -> Any:
        return self.get(path, default)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.get(path, _MISSING) is not _MISSING


def load_default_theme() -> ThemeStore:
    """Return a fresh store for the packaged default theme."""
    return ThemeStore.from_yaml(DEFAULT_THEME_FILE)


# ── Helpers ───────────────────────────────────────────────────────────────────


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value
