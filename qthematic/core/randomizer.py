"""Random theme generation with an injectable random source."""

from typing import Optional, Protocol

import numpy as np

from .color import Color32
from .presets import HEADLINE_KEYS
from .theme_config import ThemeConfig

RANDOM_THEME_NAME = "Random"


class ColorSource(Protocol):
    def next_bool(self) -> bool: ...

    def next_color(self) -> Color32: ...


class NumpyColorSource:
    """ColorSource backed by a numpy Generator.

    Two sources built with the same seed produce the same sequence.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def next_bool(self) -> bool:
        return bool(self._rng.integers(0, 2))

    def next_color(self) -> Color32:
        r, g, b = (int(c) for c in self._rng.integers(0, 256, size=3))
        return Color32(r, g, b, 255)


def randomize(source: Optional[ColorSource] = None, seed: Optional[int] = None) -> ThemeConfig:
    """Generate a theme with a random mode and random opaque headline colors.

    Args:
        source: Random source to draw from. Takes precedence over *seed*.
        seed: Seed for a fresh NumpyColorSource when *source* is not given.
    """
    if source is None:
        source = NumpyColorSource(seed)

    dark_mode = source.next_bool()
    overrides = {key: source.next_color() for key in HEADLINE_KEYS}
    return ThemeConfig(name=RANDOM_THEME_NAME, dark_mode=dark_mode, overrides=overrides)
