"""Tests for spacing.scale — spacing table, ScaleBound and rule expansion."""

import logging

import pytest

from fundamentals.spacing import scale as scale_module
from fundamentals.spacing.scale import (
    SPACING_PROPERTIES,
    ScaleBound,
    SpacingProperty,
    spacing_value,
    synthesize_spacing,
    synthesize_step,
    warn_if_large,
)
from fundamentals.theme.store import ThemeStore

TABLE_SIZE = len(SPACING_PROPERTIES)


@pytest.fixture(scope="module")
def default_rules():
    return synthesize_spacing(ScaleBound(150))


def _by_selector(rules):
    return {rule.selector: rule for rule in rules}


class TestSpacingTable:
    def test_table_size(self):
        assert TABLE_SIZE == 42

    def test_prefixes_unique(self):
        prefixes = [row.prefix for row in SPACING_PROPERTIES]
        assert len(prefixes) == len(set(prefixes))

    def test_every_negative_has_positive_twin(self):
        prefixes = {row.prefix for row in SPACING_PROPERTIES}
        for row in SPACING_PROPERTIES:
            if row.negative:
                assert row.prefix[1:] in prefixes

    def test_axis_rows_set_two_properties(self):
        rows = {row.prefix: row for row in SPACING_PROPERTIES}
        assert rows["my"].properties == ("margin-top", "margin-bottom")
        assert rows["-mx"].properties == ("margin-left", "margin-right")
        assert rows["py"].properties == ("padding-top", "padding-bottom")
        assert rows["px"].properties == ("padding-left", "padding-right")

    def test_gap_axes(self):
        rows = {row.prefix: row for row in SPACING_PROPERTIES}
        assert rows["gap-x"].properties == ("column-gap",)
        assert rows["gap-y"].properties == ("row-gap",)

    def test_invalid_rows(self):
        with pytest.raises(ValueError):
            SpacingProperty("", ("margin",))
        with pytest.raises(ValueError):
            SpacingProperty("-", ("margin",))
        with pytest.raises(ValueError):
            SpacingProperty("m", ())


class TestScaleBound:
    def test_default(self):
        assert ScaleBound().max_step == 150

    def test_steps_inclusive(self):
        assert list(ScaleBound(3).steps()) == [1, 2, 3]

    @pytest.mark.parametrize("bad", [0, -5])
    def test_non_positive_rejected(self, bad):
        with pytest.raises(ValueError):
            ScaleBound(bad)

    @pytest.mark.parametrize("bad", [1.5, "150", True])
    def test_non_int_rejected(self, bad):
        with pytest.raises(TypeError):
            ScaleBound(bad)

    def test_from_theme(self):
        assert ScaleBound.from_theme(ThemeStore({"spacing": {"MAX": 24}})).max_step == 24

    def test_integral_float_accepted(self):
        bound = ScaleBound(150.0)
        assert bound.max_step == 150
        assert isinstance(bound.max_step, int)
        assert list(bound.steps())[-1] == 150

    def test_from_theme_float(self):
        assert ScaleBound.from_theme(ThemeStore({"spacing": {"MAX": 24.0}})).max_step == 24

    def test_from_theme_default(self):
        assert ScaleBound.from_theme(ThemeStore({})).max_step == 150


class TestSpacingValue:
    def test_quarter_rem(self):
        assert spacing_value(4) == "0.25rem"

    def test_whole_rem(self):
        assert spacing_value(16) == "1rem"

    def test_one_pixel(self):
        assert spacing_value(1) == "0.0625rem"

    def test_negative(self):
        assert spacing_value(4, negative=True) == "-0.25rem"


class TestSynthesizeStep:
    def test_one_rule_per_row(self):
        assert len(synthesize_step(4)) == TABLE_SIZE

    def test_margin(self):
        rules = _by_selector(synthesize_step(4))
        assert dict(rules[".m-4"].declarations) == {"margin": "0.25rem"}

    def test_negative_margin_keeps_marker(self):
        rules = _by_selector(synthesize_step(4))
        assert dict(rules[".-m-4"].declarations) == {"margin": "-0.25rem"}
        assert ".m--4" not in rules

    def test_axis_rule_not_merged(self):
        rules = _by_selector(synthesize_step(8))
        assert dict(rules[".mx-8"].declarations) == {"margin-left": "0.5rem", "margin-right": "0.5rem"}
        assert dict(rules[".ml-8"].declarations) == {"margin-left": "0.5rem"}

    def test_escaper_applied_to_every_name(self):
        seen = []

        def escape(name):
            seen.append(name)
            return name.upper()

        rules = synthesize_step(2, escape)
        assert len(seen) == TABLE_SIZE
        assert "-my-2" in seen
        assert ".-MY-2" in {r.selector for r in rules}

    def test_custom_table(self):
        table = (SpacingProperty("sz", ("width", "height")),)
        (rule,) = synthesize_step(2, table=table)
        assert rule.selector == ".sz-2"
        assert dict(rule.declarations) == {"width": "0.125rem", "height": "0.125rem"}

    def test_no_conditionals(self):
        assert all(len(r.conditionals) == 0 for r in synthesize_step(1))


class TestSynthesizeSpacing:
    def test_rule_count(self, default_rules):
        assert len(default_rules) == 150 * TABLE_SIZE

    def test_selectors_unique(self, default_rules):
        assert len({r.selector for r in default_rules}) == len(default_rules)

    def test_step_major_order(self, default_rules):
        assert default_rules[0].selector == ".h-1"
        assert default_rules[TABLE_SIZE].selector == ".h-2"
        assert default_rules[-1].selector == ".inset-150"

    def test_known_rules(self, default_rules):
        rules = _by_selector(default_rules)
        assert dict(rules[".m-4"].declarations) == {"margin": "0.25rem"}
        assert dict(rules[".-m-4"].declarations) == {"margin": "-0.25rem"}
        assert dict(rules[".max-w-150"].declarations) == {"max-width": "9.375rem"}
        assert dict(rules[".-py-16"].declarations) == {"padding-top": "-1rem", "padding-bottom": "-1rem"}

    def test_monotonic_extension(self, default_rules):
        extended = synthesize_spacing(ScaleBound(200))
        assert len(extended) - len(default_rules) == 50 * TABLE_SIZE
        assert extended[: len(default_rules)] == default_rules

    def test_deterministic(self):
        assert synthesize_spacing(ScaleBound(5)) == synthesize_spacing(ScaleBound(5))

    def test_large_scale_warning(self, monkeypatch, caplog):
        monkeypatch.setattr(scale_module, "LARGE_SCALE_WARNING_RULES", TABLE_SIZE)
        with caplog.at_level(logging.WARNING, logger="fundamentals.spacing.scale"):
            synthesize_spacing(ScaleBound(2))
        assert "MAX=2" in caplog.text

    def test_warn_if_large_threshold(self, monkeypatch, caplog):
        monkeypatch.setattr(scale_module, "LARGE_SCALE_WARNING_RULES", 2 * TABLE_SIZE)
        with caplog.at_level(logging.WARNING, logger="fundamentals.spacing.scale"):
            assert warn_if_large(ScaleBound(2)) is False
            assert warn_if_large(ScaleBound(3)) is True
        assert "MAX=3" in caplog.text
        assert "MAX=2" not in caplog.text

    def test_no_warning_for_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fundamentals.spacing.scale"):
            synthesize_spacing(ScaleBound(3))
        assert caplog.text == ""
