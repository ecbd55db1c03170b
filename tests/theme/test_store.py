"""Tests for theme.store — ThemeStore, MissingBreakpoint, default theme."""

from types import MappingProxyType

import pytest

from fundamentals.theme.store import (
    DEFAULT_THEME_FILE,
    MissingBreakpoint,
    ThemeStore,
    load_default_theme,
)


@pytest.fixture(scope="module")
def store():
    return ThemeStore(
        {
            "screens": {"md": "768px", "lg": "1024px"},
            "spacing": {"MAX": 40},
            "containers": {"DEFAULT": ["1440px", "1rem", {"md": "2rem"}]},
        }
    )


class TestGet:
    def test_top_level(self, store):
        assert store.get("spacing")["MAX"] == 40

    def test_dotted_path(self, store):
        assert store.get("screens.md") == "768px"

    def test_missing_returns_none(self, store):
        assert store.get("screens.xl") is None

    def test_missing_returns_default(self, store):
        assert store.get("colors.primary", "#000") == "#000"

    def test_path_through_scalar_returns_default(self, store):
        assert store.get("spacing.MAX.extra", "x") == "x"

    def test_call_style(self, store):
        assert store("spacing.MAX", 150) == 40
        assert store("spacing.MIN", 1) == 1

    def test_contains(self, store):
        assert "screens.md" in store
        assert "screens.xl" not in store


class TestRequireAndSection:
    def test_require_present(self, store):
        assert store.require("screens.lg") == "1024px"

    def test_require_missing_raises(self, store):
        with pytest.raises(KeyError, match="screens.xl"):
            store.require("screens.xl")

    def test_section_present(self, store):
        assert set(store.section("screens")) == {"md", "lg"}

    def test_section_missing_is_empty(self, store):
        assert len(store.section("fluidType")) == 0

    def test_section_of_scalar_raises(self, store):
        with pytest.raises(TypeError):
            store.section("spacing.MAX")

    def test_screen_lookup(self, store):
        assert store.screen("md") == "768px"
        assert store.screen("xl") is None


class TestImmutability:
    def test_values_are_read_only(self, store):
        assert isinstance(store.values, MappingProxyType)
        with pytest.raises(TypeError):
            store.values["spacing"] = {}  # type: ignore[index]

    def test_nested_mappings_frozen(self, store):
        assert isinstance(store.get("screens"), MappingProxyType)

    def test_lists_become_tuples(self, store):
        entry = store.get("containers.DEFAULT")
        assert entry == ("1440px", "1rem", MappingProxyType({"md": "2rem"}))

    def test_source_mutation_does_not_leak(self):
        source = {"screens": {"md": "768px"}}
        s = ThemeStore(source)
        source["screens"]["md"] = "1px"
        assert s.get("screens.md") == "768px"


class TestFromYaml:
    def test_loads_file(self, tmp_path):
        path = tmp_path / "theme.yaml"
        path.write_text("screens:\n  md: 768px\nspacing:\n  MAX: 12\n")
        s = ThemeStore.from_yaml(path)
        assert s.get("screens.md") == "768px"
        assert s.get("spacing.MAX") == 12

    def test_empty_file_is_empty_theme(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ThemeStore.from_yaml(path).get("screens") is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Theme file not found"):
            ThemeStore.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("screens: [unclosed\n")
        with pytest.raises(ValueError, match="Failed to parse"):
            ThemeStore.from_yaml(path)

    def test_non_mapping_top_level(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            ThemeStore.from_yaml(path)


class TestDefaultTheme:
    def test_file_is_packaged(self):
        assert DEFAULT_THEME_FILE.is_file()

    def test_default_spacing_max(self):
        assert load_default_theme().get("spacing.MAX") == 150

    def test_default_screens(self):
        theme = load_default_theme()
        assert theme.screen("md") == "768px"
        assert theme.screen("2xl") == "1536px"

    def test_default_containers_reference_defined_screens(self):
        theme = load_default_theme()
        for name, entry in theme.section("containers").items():
            for bp in entry[2]:
                assert theme.screen(bp) is not None, f"{name} uses undefined {bp}"


class TestMissingBreakpoint:
    def test_is_key_error(self):
        assert issubclass(MissingBreakpoint, KeyError)

    def test_attributes_and_message(self):
        err = MissingBreakpoint("xxl", container="md")
        assert err.breakpoint == "xxl"
        assert err.container == "md"
        assert "'xxl'" in str(err)
        assert "'md'" in str(err)

    def test_without_container(self):
        err = MissingBreakpoint("xxl")
        assert err.container is None
        assert "container" not in str(err)
