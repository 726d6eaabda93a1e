"""Built-in preset catalog."""

import pytest

from qthematic.core.attributes import AttributeKey
from qthematic.core.color import Color32
from qthematic.core.presets import (
    DEFAULT_PRESET, HEADLINE_KEYS, PRESETS, all_presets, dracula_preset,
    preset_by_name,
)

EXPECTED_ORDER = [
    "Dark", "Light", "Dracula", "Nord", "Gruvbox Dark", "Solarized Dark",
    "Solarized Light", "Monokai", "One Dark", "Tokyo Night", "Catppuccin Mocha",
]


def test_catalog_order():
    assert [p.name for p in all_presets()] == EXPECTED_ORDER


def test_registry_matches_catalog():
    assert list(PRESETS) == EXPECTED_ORDER
    assert DEFAULT_PRESET in PRESETS


def test_dark_and_light_have_no_overrides():
    dark, light = all_presets()[:2]
    assert dark.dark_mode and dark.is_empty()
    assert not light.dark_mode and light.is_empty()


def test_palettes_set_exactly_the_headline_keys():
    for preset in all_presets()[2:]:
        assert preset.present_keys() == [k for k in AttributeKey if k in HEADLINE_KEYS]
        assert all(preset.get(k).is_opaque() for k in HEADLINE_KEYS)


def test_only_solarized_light_is_light_among_palettes():
    light = [p.name for p in all_presets()[2:] if not p.dark_mode]
    assert light == ["Solarized Light"]


def test_factory_is_value_stable():
    assert dracula_preset() == dracula_preset()
    assert dracula_preset() is not dracula_preset()


def test_factory_results_are_independent():
    a = dracula_preset()
    a.set(AttributeKey.TEXT_COLOR, Color32(0, 0, 0))
    assert dracula_preset().get(AttributeKey.TEXT_COLOR) == Color32(248, 248, 242)


def test_dracula_literal_values():
    p = dracula_preset()
    assert p.get(AttributeKey.WINDOW_FILL) == Color32(40, 42, 54, 255)
    assert p.get(AttributeKey.ERROR_FG_COLOR) == Color32(255, 85, 85, 255)


def test_preset_by_name():
    assert preset_by_name("Nord").name == "Nord"
    with pytest.raises(KeyError):
        preset_by_name("Nope")
