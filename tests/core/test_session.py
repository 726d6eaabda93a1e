"""Editor session reducer and preset tracking."""

import pytest

from qthematic.core.attributes import ATTRIBUTES, AttributeKey, AttributeKind
from qthematic.core.color import Color32
from qthematic.core.errors import DeserializationError, ThemeIOError
from qthematic.core.merge import to_visuals
from qthematic.core.persistence import save_to_file
from qthematic.core.presets import all_presets, nord_preset
from qthematic.core.randomizer import NumpyColorSource
from qthematic.core.session import CUSTOM_LABEL, ThemeEditorState
from qthematic.core.visuals import Visuals


@pytest.fixture
def state():
    return ThemeEditorState()


class TestDefaults:
    def test_starts_on_dark_preset(self, state):
        assert state.selected_preset_index == 0
        assert state.selected_preset_label() == "Dark"
        assert state.resolved() == Visuals.dark()
        assert len(state.presets) == len(all_presets())

    def test_scratch_covers_color_keys(self, state):
        color_keys = {k for k, s in ATTRIBUTES.items() if s.kind is AttributeKind.COLOR}
        assert set(state.scratch) == color_keys
        assert state.scratch[AttributeKey.WINDOW_FILL] == Visuals.dark().window_fill

    def test_storybook_defaults(self, state):
        assert state.storybook_checkbox is True
        assert state.storybook_radio == 1
        assert state.storybook_slider == 50.0
        assert state.storybook_text == "Example text"
        assert state.storybook_combo_selected == 0
        assert state.show_code_export is False


class TestEdits:
    def test_edit_sets_override_and_recomputes(self, state, red):
        resolved = state.apply_edit(AttributeKey.TEXT_COLOR, red)
        assert resolved.text_color == red
        assert state.resolved().text_color == red
        assert state.current_config.get(AttributeKey.TEXT_COLOR) == red
        assert state.scratch[AttributeKey.TEXT_COLOR] == red

    def test_edit_marks_custom_but_keeps_index(self, state, red):
        state.apply_edit(AttributeKey.TEXT_COLOR, red)
        assert state.selected_preset_index == 0
        assert state.selected_preset_label() == CUSTOM_LABEL
        assert state.is_custom()

    def test_reverting_edit_restores_preset_label(self, state, red):
        state.apply_edit(AttributeKey.TEXT_COLOR, red)
        state.apply_edit(AttributeKey.TEXT_COLOR, None)
        assert state.selected_preset_label() == "Dark"
        assert state.resolved() == Visuals.dark()

    def test_edit_does_not_touch_preset_catalog(self, state, red):
        state.apply_edit(AttributeKey.TEXT_COLOR, red)
        assert state.presets[0].is_empty()

    def test_invalid_value_raises(self, state):
        with pytest.raises(TypeError):
            state.apply_edit(AttributeKey.STRIPED, "yes")

    def test_effective_value(self, state):
        assert state.effective_value(AttributeKey.WINDOW_CORNER_RADIUS) == 6
        state.apply_edit(AttributeKey.WINDOW_CORNER_RADIUS, 12)
        assert state.effective_value(AttributeKey.WINDOW_CORNER_RADIUS) == 12

    def test_rename_diverges(self, state):
        state.set_name("Mine")
        assert state.current_config.name == "Mine"
        assert state.selected_preset_label() == CUSTOM_LABEL

    def test_dark_mode_toggle_refreshes_scratch(self, state):
        state.set_dark_mode(False)
        assert state.resolved() == Visuals.light()
        assert state.scratch[AttributeKey.WINDOW_FILL] == Visuals.light().window_fill


class TestWholesaleReplacement:
    def test_select_preset(self, state):
        resolved = state.select_preset(3)
        assert state.selected_preset_label() == "Nord"
        assert resolved == to_visuals(nord_preset())
        assert state.scratch[AttributeKey.WINDOW_FILL] == Color32(46, 52, 64)

    def test_select_preset_out_of_range(self, state):
        with pytest.raises(IndexError):
            state.select_preset(len(state.presets))

    def test_reset_to_light(self, state, red):
        state.apply_edit(AttributeKey.TEXT_COLOR, red)
        state.reset_to(False)
        assert state.selected_preset_label() == "Light"
        assert state.resolved() == Visuals.light()

    def test_randomize_clears_index(self, state):
        state.randomize(NumpyColorSource(seed=4))
        assert state.selected_preset_index is None
        assert state.selected_preset_label() == CUSTOM_LABEL
        assert state.current_config.name == "Random"

    def test_load_config_matching_preset_selects_it(self, state):
        state.load_config(nord_preset())
        assert state.selected_preset_index == 3

    def test_load_config_custom(self, state, config_factory):
        state.load_config(config_factory(striped=True))
        assert state.selected_preset_index is None
        assert state.resolved().striped is True

    def test_load_file(self, state, tmp_path, config_factory):
        path = tmp_path / "t.theme.json"
        config = config_factory(name="Saved", window_fill=(1, 2, 3, 255))
        save_to_file(config, path)
        state.load_file(path)
        assert state.current_config == config
        assert state.scratch[AttributeKey.WINDOW_FILL] == Color32(1, 2, 3, 255)

    def test_failed_load_leaves_state(self, state, tmp_path):
        state.select_preset(2)
        bad = tmp_path / "bad.theme.json"
        bad.write_text('{"name": 1}', encoding="utf-8")
        with pytest.raises(DeserializationError):
            state.load_file(bad)
        with pytest.raises(ThemeIOError):
            state.load_file(tmp_path / "missing.theme.json")
        assert state.selected_preset_label() == "Dracula"

    def test_save_file(self, state, tmp_path):
        path = tmp_path / "out.theme.json"
        state.select_preset(4)
        state.save_file(path)
        other = ThemeEditorState()
        other.load_file(path)
        assert other.selected_preset_label() == "Gruvbox Dark"
