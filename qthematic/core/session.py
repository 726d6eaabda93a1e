"""Editor session state for the live theme editor."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from qthematic.logging import get_logger

from .attributes import ATTRIBUTES, AttributeKey, AttributeKind, OverrideValue
from .color import Color32
from .merge import get_attribute, to_visuals
from .persistence import load_from_file, save_to_file
from .presets import all_presets, dark_preset, light_preset
from .randomizer import ColorSource, randomize
from .theme_config import ThemeConfig
from .visuals import Visuals

logger = get_logger(__name__)

CUSTOM_LABEL = "Custom"


class ThemeEditorState:
    """
    Holds the theme being edited and everything the editor panel needs
    around it.

    All mutations go through the methods below. Each one leaves
    ``current_config`` updated and the resolved style recomputed, so the
    caller only has to install :meth:`resolved` into the GUI.

    ``selected_preset_index`` records the last preset the user picked.
    Edits do not clear it; :meth:`selected_preset_label` compares the live
    theme against that preset and reports ``"Custom"`` once they differ.
    """

    def __init__(self, presets: Optional[list[ThemeConfig]] = None):
        self.presets: list[ThemeConfig] = presets if presets is not None else all_presets()
        self.current_config: ThemeConfig = self.presets[0].copy()
        self.selected_preset_index: Optional[int] = 0
        self.show_code_export = False

        # Sample widgets in the preview
        self.storybook_checkbox = True
        self.storybook_radio = 1
        self.storybook_slider = 50.0
        self.storybook_text = "Example text"
        self.storybook_combo_selected = 0

        self._resolved: Visuals = to_visuals(self.current_config)
        # Color picker buffers, only meaningful during a widget interaction
        self.scratch: dict[AttributeKey, Color32] = {}
        self.reset_scratch()

    # -- Derived state -------------------------------------------------------

    def resolved(self) -> Visuals:
        return self._resolved

    def selected_preset(self) -> Optional[ThemeConfig]:
        index = self.selected_preset_index
        if index is None or not 0 <= index < len(self.presets):
            return None
        return self.presets[index]

    def selected_preset_label(self) -> str:
        preset = self.selected_preset()
        if preset is None or preset != self.current_config:
            return CUSTOM_LABEL
        return preset.name

    def is_custom(self) -> bool:
        return self.selected_preset_label() == CUSTOM_LABEL

    def effective_value(self, key: AttributeKey) -> OverrideValue:
        """The override if set, else the base value, as shown in the editor."""
        return get_attribute(self._resolved, key)

    # -- Mutations -----------------------------------------------------------

    def _replace_config(self, config: ThemeConfig) -> None:
        self.current_config = config
        self._recompute()
        self.reset_scratch()

    def _recompute(self) -> None:
        self._resolved = to_visuals(self.current_config)

    def reset_scratch(self) -> None:
        """Refill the color picker buffers from the resolved style."""
        self.scratch = {
            key: get_attribute(self._resolved, key)
            for key, spec in ATTRIBUTES.items()
            if spec.kind is AttributeKind.COLOR
        }

    def apply_edit(self, key: AttributeKey, value: Optional[OverrideValue]) -> Visuals:
        """Set (or clear, when *value* is None) one override."""
        self.current_config.set(key, value)
        self._recompute()
        if key in self.scratch:
            self.scratch[key] = get_attribute(self._resolved, key)
        logger.debug(f"Edit {key.value} -> {value!r}")
        return self._resolved

    def set_name(self, name: str) -> None:
        self.current_config.name = name

    def set_dark_mode(self, dark_mode: bool) -> Visuals:
        self.current_config.dark_mode = dark_mode
        self._recompute()
        self.reset_scratch()
        return self._resolved

    def select_preset(self, index: int) -> Visuals:
        if not 0 <= index < len(self.presets):
            raise IndexError(f"Preset index out of range: {index}")
        self.selected_preset_index = index
        self._replace_config(self.presets[index].copy())
        logger.debug(f"Selected preset {self.presets[index].name!r}")
        return self._resolved

    def _index_of(self, config: ThemeConfig) -> Optional[int]:
        for index, preset in enumerate(self.presets):
            if preset == config:
                return index
        return None

    def reset_to(self, dark_mode: bool) -> Visuals:
        """Replace the theme with the plain Dark or Light preset."""
        config = dark_preset() if dark_mode else light_preset()
        self.selected_preset_index = self._index_of(config)
        self._replace_config(config)
        return self._resolved

    def randomize(self, source: Optional[ColorSource] = None) -> Visuals:
        self.selected_preset_index = None
        self._replace_config(randomize(source))
        return self._resolved

    def load_config(self, config: ThemeConfig) -> Visuals:
        self.selected_preset_index = self._index_of(config)
        self._replace_config(config.copy())
        return self._resolved

    def load_file(self, path: Union[str, Path]) -> Visuals:
        """Load a theme file. Errors propagate and leave the session unchanged."""
        return self.load_config(load_from_file(path))

    def save_file(self, path: Union[str, Path]) -> None:
        save_to_file(self.current_config, path)
