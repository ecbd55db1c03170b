from .store import DEFAULT_THEME_FILE, MissingBreakpoint, ThemeStore, load_default_theme

__all__ = ["DEFAULT_THEME_FILE", "MissingBreakpoint", "ThemeStore", "load_default_theme"]
