"""Attribute table and value validation."""

import math

import pytest

from qthematic.core.attributes import (
    ATTRIBUTES, GROUPS, AttributeKey, AttributeKind, keys_in_group, validate_value,
)
from qthematic.core.color import Color32
from qthematic.core.visuals import Visuals, get_path


class TestTable:
    def test_every_key_has_a_spec_in_enumeration_order(self):
        assert list(ATTRIBUTES) == list(AttributeKey)

    def test_key_count(self):
        assert len(AttributeKey) == 66

    def test_every_path_resolves_on_both_bases(self):
        for key, spec in ATTRIBUTES.items():
            for base in (Visuals.dark(), Visuals.light()):
                value = get_path(base, spec.path)
                assert value is not None, key

    def test_path_value_matches_kind(self):
        kinds = {
            AttributeKind.COLOR: Color32,
            AttributeKind.FLOAT: float,
            AttributeKind.U8: int,
            AttributeKind.BOOL: bool,
        }
        base = Visuals.dark()
        for key, spec in ATTRIBUTES.items():
            assert isinstance(get_path(base, spec.path), kinds[spec.kind]), key

    def test_paths_are_unique(self):
        paths = [spec.path for spec in ATTRIBUTES.values()]
        assert len(paths) == len(set(paths))

    def test_groups_cover_every_key(self):
        grouped = [key for group in GROUPS for key in keys_in_group(group)]
        assert sorted(grouped, key=lambda k: k.value) == sorted(AttributeKey, key=lambda k: k.value)

    def test_widget_state_groups_have_eight_keys(self):
        for group in ("Noninteractive", "Inactive", "Hovered", "Active", "Open"):
            assert len(keys_in_group(group)) == 8


class TestJsonNames:
    def test_json_name_prefix(self):
        assert AttributeKey.WINDOW_FILL.json_name == "override_window_fill"

    def test_from_json_name(self):
        assert AttributeKey.from_json_name("override_striped") is AttributeKey.STRIPED
        assert AttributeKey.from_json_name("override_unknown") is None
        assert AttributeKey.from_json_name("striped") is None


class TestValidateValue:
    def test_color_from_sequence(self):
        assert validate_value(AttributeKey.TEXT_COLOR, [1, 2, 3, 4]) == Color32(1, 2, 3, 4)

    def test_color_rejects_string(self):
        with pytest.raises(TypeError):
            validate_value(AttributeKey.TEXT_COLOR, "red")

    def test_color_rejects_partial_channels(self):
        with pytest.raises(ValueError):
            validate_value(AttributeKey.TEXT_COLOR, (1, 2, 3))

    def test_float_accepts_int(self):
        value = validate_value(AttributeKey.WINDOW_STROKE_WIDTH, 2)
        assert value == 2.0 and isinstance(value, float)

    def test_float_rejects_bool_and_nan(self):
        with pytest.raises(TypeError):
            validate_value(AttributeKey.WINDOW_STROKE_WIDTH, True)
        with pytest.raises(ValueError):
            validate_value(AttributeKey.WINDOW_STROKE_WIDTH, math.nan)

    def test_float_rejects_int_too_large_for_float(self):
        with pytest.raises(ValueError):
            validate_value(AttributeKey.WINDOW_STROKE_WIDTH, 10 ** 400)

    def test_u8_range(self):
        assert validate_value(AttributeKey.WINDOW_CORNER_RADIUS, 255) == 255
        with pytest.raises(ValueError):
            validate_value(AttributeKey.WINDOW_CORNER_RADIUS, 256)
        with pytest.raises(TypeError):
            validate_value(AttributeKey.WINDOW_CORNER_RADIUS, 2.5)

    def test_bool_strict(self):
        assert validate_value(AttributeKey.STRIPED, False) is False
        with pytest.raises(TypeError):
            validate_value(AttributeKey.STRIPED, 1)
