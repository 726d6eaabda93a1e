"""Built-in theme presets."""

from typing import Callable

from .attributes import AttributeKey
from .color import Color32
from .theme_config import ThemeConfig

# Colors set by every palette preset and by the randomizer
HEADLINE_KEYS = (
    AttributeKey.TEXT_COLOR,
    AttributeKey.WINDOW_FILL,
    AttributeKey.PANEL_FILL,
    AttributeKey.SELECTION_BG,
    AttributeKey.HYPERLINK_COLOR,
    AttributeKey.FAINT_BG_COLOR,
    AttributeKey.EXTREME_BG_COLOR,
    AttributeKey.CODE_BG_COLOR,
    AttributeKey.WARN_FG_COLOR,
    AttributeKey.ERROR_FG_COLOR,
)


def _palette(name: str, dark_mode: bool, *colors: tuple[int, int, int]) -> ThemeConfig:
    """Build a preset from ten opaque RGB triples in HEADLINE_KEYS order."""
    assert len(colors) == len(HEADLINE_KEYS), name
    return ThemeConfig(
        name=name,
        dark_mode=dark_mode,
        overrides={key: Color32.from_rgb(*rgb) for key, rgb in zip(HEADLINE_KEYS, colors)},
    )


def dark_preset() -> ThemeConfig:
    return ThemeConfig(name="Dark", dark_mode=True)


def light_preset() -> ThemeConfig:
    return ThemeConfig(name="Light", dark_mode=False)


def dracula_preset() -> ThemeConfig:
    return _palette(
        "Dracula", True,
        (248, 248, 242), (40, 42, 54), (68, 71, 90), (98, 114, 164), (139, 233, 253),
        (68, 71, 90), (21, 22, 30), (68, 71, 90), (241, 250, 140), (255, 85, 85),
    )


def nord_preset() -> ThemeConfig:
    return _palette(
        "Nord", True,
        (216, 222, 233), (46, 52, 64), (59, 66, 82), (136, 192, 208), (136, 192, 208),
        (59, 66, 82), (29, 33, 42), (59, 66, 82), (235, 203, 139), (191, 97, 106),
    )


def gruvbox_dark_preset() -> ThemeConfig:
    return _palette(
        "Gruvbox Dark", True,
        (235, 219, 178), (40, 40, 40), (60, 56, 54), (102, 92, 84), (131, 165, 152),
        (60, 56, 54), (29, 32, 33), (60, 56, 54), (250, 189, 47), (251, 73, 52),
    )


def solarized_dark_preset() -> ThemeConfig:
    return _palette(
        "Solarized Dark", True,
        (131, 148, 150), (0, 43, 54), (7, 54, 66), (88, 110, 117), (42, 161, 152),
        (7, 54, 66), (0, 30, 38), (7, 54, 66), (181, 137, 0), (220, 50, 47),
    )


def solarized_light_preset() -> ThemeConfig:
    return _palette(
        "Solarized Light", False,
        (101, 123, 131), (253, 246, 227), (238, 232, 213), (147, 161, 161), (38, 139, 210),
        (238, 232, 213), (253, 246, 227), (238, 232, 213), (181, 137, 0), (220, 50, 47),
    )


def monokai_preset() -> ThemeConfig:
    return _palette(
        "Monokai", True,
        (248, 248, 242), (39, 40, 34), (73, 72, 62), (73, 72, 62), (102, 217, 239),
        (73, 72, 62), (30, 31, 25), (73, 72, 62), (230, 219, 116), (249, 38, 114),
    )


def one_dark_preset() -> ThemeConfig:
    return _palette(
        "One Dark", True,
        (171, 178, 191), (40, 44, 52), (33, 37, 43), (61, 66, 77), (97, 175, 239),
        (33, 37, 43), (21, 23, 27), (33, 37, 43), (229, 192, 123), (224, 108, 117),
    )


def tokyo_night_preset() -> ThemeConfig:
    return _palette(
        "Tokyo Night", True,
        (192, 202, 245), (26, 27, 38), (36, 40, 59), (56, 62, 90), (122, 162, 247),
        (36, 40, 59), (16, 17, 28), (36, 40, 59), (224, 175, 104), (247, 118, 142),
    )


def catppuccin_mocha_preset() -> ThemeConfig:
    return _palette(
        "Catppuccin Mocha", True,
        (205, 214, 244), (30, 30, 46), (49, 50, 68), (88, 91, 112), (137, 180, 250),
        (49, 50, 68), (17, 17, 27), (49, 50, 68), (249, 226, 175), (243, 139, 168),
    )


_FACTORIES: tuple[Callable[[], ThemeConfig], ...] = (
    dark_preset,
    light_preset,
    dracula_preset,
    nord_preset,
    gruvbox_dark_preset,
    solarized_dark_preset,
    solarized_light_preset,
    monokai_preset,
    one_dark_preset,
    tokyo_night_preset,
    catppuccin_mocha_preset,
)

PRESETS: dict[str, Callable[[], ThemeConfig]] = {
    factory().name: factory for factory in _FACTORIES
}

DEFAULT_PRESET = "Dark"


def all_presets() -> list[ThemeConfig]:
    """Fresh copies of every preset, in display order."""
    return [factory() for factory in _FACTORIES]


def preset_by_name(name: str) -> ThemeConfig:
    factory = PRESETS.get(name)
    if factory is None:
        raise KeyError(f"Unknown preset: {name}")
    return factory()
