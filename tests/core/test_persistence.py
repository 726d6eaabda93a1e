"""Theme JSON persistence."""

import json

import jsonschema
import pytest

from qthematic.core.attributes import AttributeKey
from qthematic.core.color import Color32
from qthematic.core.errors import DeserializationError, SerializationError, ThemeIOError
from qthematic.core.persistence import (
    from_dict, load, load_from_file, save, save_to_file, theme_schema, to_dict,
)
from qthematic.core.presets import all_presets
from qthematic.core.randomizer import randomize
from qthematic.core.theme_config import ThemeConfig


class TestRoundTrip:
    def test_default(self):
        assert load(save(ThemeConfig())) == ThemeConfig()

    @pytest.mark.parametrize("preset", all_presets(), ids=lambda p: p.name)
    def test_presets(self, preset):
        assert load(save(preset)) == preset

    def test_randomized(self):
        for seed in range(100):
            config = randomize(seed=seed)
            assert load(save(config)) == config

    def test_every_kind(self, config_factory):
        config = config_factory(
            window_stroke_width=1.25,
            window_corner_radius=9,
            striped=True,
            selection_stroke_color=(1, 2, 3, 0),
            widget_open_expansion=-0.5,
        )
        assert load(save(config)) == config

    def test_unicode_name(self):
        config = ThemeConfig(name="Thème ☾")
        assert load(save(config)).name == "Thème ☾"


class TestFormat:
    def test_custom_window_fill_document(self, config_factory):
        config = config_factory(name="Custom", dark_mode=False, window_fill=(10, 20, 30, 255))
        data = json.loads(save(config))
        assert data == {
            "name": "Custom",
            "dark_mode": False,
            "override_window_fill": [10, 20, 30, 255],
        }

    def test_absent_fields_are_omitted(self):
        data = json.loads(save(ThemeConfig()))
        assert set(data) == {"name", "dark_mode"}

    def test_key_order_is_stable(self, config_factory):
        config = config_factory(error_fg_color=(1, 1, 1, 1), text_color=(2, 2, 2, 2))
        keys = list(json.loads(save(config)))
        assert keys == ["name", "dark_mode", "override_text_color", "override_error_fg_color"]

    def test_save_returns_utf8_bytes(self):
        assert isinstance(save(ThemeConfig()), bytes)

    def test_to_dict_matches_schema(self):
        for preset in all_presets():
            jsonschema.validate(instance=to_dict(preset), schema=theme_schema())

    def test_schema_is_valid(self):
        jsonschema.Draft202012Validator.check_schema(theme_schema())


class TestLoadErrors:
    def test_malformed_json(self):
        with pytest.raises(DeserializationError):
            load(b"{ invalid_json ]")

    def test_invalid_utf8(self):
        with pytest.raises(DeserializationError):
            load(b"\xff\xfe{")

    @pytest.mark.parametrize("missing", ["name", "dark_mode"])
    def test_missing_required_key(self, missing):
        doc = {"name": "x", "dark_mode": True}
        del doc[missing]
        with pytest.raises(DeserializationError) as exc:
            load(json.dumps(doc))
        assert exc.value.offending_key == missing

    def test_string_where_color_expected(self):
        doc = '{"name": "x", "dark_mode": true, "override_text_color": "red"}'
        with pytest.raises(DeserializationError) as exc:
            load(doc)
        assert exc.value.offending_key == "override_text_color"

    @pytest.mark.parametrize("raw", [[1, 2, 3], [1, 2, 3, 4, 5], [0, 0, 256, 0], [0, 0, -1, 0]])
    def test_bad_color_arrays(self, raw):
        doc = {"name": "x", "dark_mode": True, "override_panel_fill": raw}
        with pytest.raises(DeserializationError) as exc:
            from_dict(doc)
        assert exc.value.offending_key == "override_panel_fill"

    def test_bool_where_number_expected(self):
        doc = {"name": "x", "dark_mode": True, "override_window_stroke_width": True}
        with pytest.raises(DeserializationError):
            from_dict(doc)

    def test_fractional_radius_rejected(self):
        doc = {"name": "x", "dark_mode": True, "override_window_corner_radius": 2.5}
        with pytest.raises(DeserializationError):
            from_dict(doc)

    def test_wrong_type_for_dark_mode(self):
        with pytest.raises(DeserializationError):
            from_dict({"name": "x", "dark_mode": "yes"})

    def test_top_level_not_an_object(self):
        with pytest.raises(DeserializationError):
            load("[1, 2, 3]")

    def test_number_too_large_for_float(self):
        doc = '{"name": "x", "dark_mode": true, "override_window_stroke_width": 1' + "0" * 400 + "}"
        with pytest.raises(DeserializationError) as exc:
            load(doc)
        assert exc.value.offending_key == "override_window_stroke_width"

    def test_name_that_cannot_be_encoded(self):
        with pytest.raises(DeserializationError) as exc:
            load('{"name": "\\ud800", "dark_mode": true}')
        assert exc.value.offending_key == "name"


class TestTolerance:
    def test_unknown_field_ignored(self):
        doc = {
            "name": "x",
            "dark_mode": False,
            "override_text_color": [1, 2, 3, 4],
            "override_from_the_future": [9, 9, 9, 9],
        }
        config = from_dict(doc)
        assert config.present_keys() == [AttributeKey.TEXT_COLOR]
        assert config.get(AttributeKey.TEXT_COLOR) == Color32(1, 2, 3, 4)

    def test_null_means_absent(self):
        config = from_dict({"name": "x", "dark_mode": True, "override_striped": None})
        assert config.is_empty()

    def test_integral_float_accepted_for_radius(self):
        config = from_dict({"name": "x", "dark_mode": True, "override_window_corner_radius": 4.0})
        assert config.get(AttributeKey.WINDOW_CORNER_RADIUS) == 4
        assert isinstance(config.get(AttributeKey.WINDOW_CORNER_RADIUS), int)

    def test_int_accepted_for_float(self):
        config = from_dict({"name": "x", "dark_mode": True, "override_clip_rect_margin": 2})
        assert config.get(AttributeKey.CLIP_RECT_MARGIN) == 2.0


class TestSerializationErrors:
    def test_unencodable_value(self):
        config = ThemeConfig()
        # Bypass validation to simulate a corrupted in-memory value
        config.overrides[AttributeKey.WINDOW_STROKE_WIDTH] = float("inf")
        with pytest.raises(SerializationError):
            save(config)

    def test_unencodable_name(self):
        config = ThemeConfig(name="bad \ud800 name")
        with pytest.raises(SerializationError):
            save(config)


class TestFiles:
    def test_file_round_trip(self, tmp_path, config_factory):
        path = tmp_path / "mine.theme.json"
        config = config_factory(name="Mine", striped=True)
        save_to_file(config, path)
        assert load_from_file(path) == config

    def test_missing_file_is_io_error(self, tmp_path):
        path = tmp_path / "missing.theme.json"
        with pytest.raises(ThemeIOError) as exc:
            load_from_file(path)
        assert exc.value.operation == "read"
        assert exc.value.path == str(path)

    def test_unwritable_path_is_io_error(self, tmp_path):
        with pytest.raises(ThemeIOError) as exc:
            save_to_file(ThemeConfig(), tmp_path)
        assert exc.value.operation == "write"

    def test_parse_error_is_distinct_from_io_error(self, tmp_path):
        path = tmp_path / "broken.theme.json"
        path.write_text("{ nope", encoding="utf-8")
        with pytest.raises(DeserializationError):
            load_from_file(path)
