"""The closed set of style attributes a theme can override.

Each :class:`AttributeKey` maps to an :class:`AttributeSpec` in the ordered
``ATTRIBUTES`` table. The table drives merging, persistence, code export
and the editor panel, so adding an attribute is a table change only.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .color import Color32

OverrideValue = Union[Color32, float, int, bool]

JSON_PREFIX = "override_"


class AttributeKind(Enum):
    COLOR = "color"
    FLOAT = "float"
    U8 = "u8"
    BOOL = "bool"


class AttributeKey(Enum):
    """Stable identifiers; the JSON field is ``override_<value>``."""

    TEXT_COLOR = "text_color"
    WEAK_TEXT_COLOR = "weak_text_color"
    HYPERLINK_COLOR = "hyperlink_color"
    FAINT_BG_COLOR = "faint_bg_color"
    EXTREME_BG_COLOR = "extreme_bg_color"
    CODE_BG_COLOR = "code_bg_color"
    WARN_FG_COLOR = "warn_fg_color"
    ERROR_FG_COLOR = "error_fg_color"

    WINDOW_FILL = "window_fill"
    WINDOW_STROKE_COLOR = "window_stroke_color"
    WINDOW_STROKE_WIDTH = "window_stroke_width"
    WINDOW_CORNER_RADIUS = "window_corner_radius"
    WINDOW_SHADOW_SIZE = "window_shadow_size"

    PANEL_FILL = "panel_fill"
    POPUP_SHADOW_SIZE = "popup_shadow_size"

    SELECTION_BG = "selection_bg"
    SELECTION_STROKE_COLOR = "selection_stroke_color"
    SELECTION_STROKE_WIDTH = "selection_stroke_width"

    WIDGET_NONINTERACTIVE_BG_FILL = "widget_noninteractive_bg_fill"
    WIDGET_NONINTERACTIVE_WEAK_BG_FILL = "widget_noninteractive_weak_bg_fill"
    WIDGET_NONINTERACTIVE_BG_STROKE_COLOR = "widget_noninteractive_bg_stroke_color"
    WIDGET_NONINTERACTIVE_BG_STROKE_WIDTH = "widget_noninteractive_bg_stroke_width"
    WIDGET_NONINTERACTIVE_CORNER_RADIUS = "widget_noninteractive_corner_radius"
    WIDGET_NONINTERACTIVE_FG_STROKE_COLOR = "widget_noninteractive_fg_stroke_color"
    WIDGET_NONINTERACTIVE_FG_STROKE_WIDTH = "widget_noninteractive_fg_stroke_width"
    WIDGET_NONINTERACTIVE_EXPANSION = "widget_noninteractive_expansion"

    WIDGET_INACTIVE_BG_FILL = "widget_inactive_bg_fill"
    WIDGET_INACTIVE_WEAK_BG_FILL = "widget_inactive_weak_bg_fill"
    WIDGET_INACTIVE_BG_STROKE_COLOR = "widget_inactive_bg_stroke_color"
    WIDGET_INACTIVE_BG_STROKE_WIDTH = "widget_inactive_bg_stroke_width"
    WIDGET_INACTIVE_CORNER_RADIUS = "widget_inactive_corner_radius"
    WIDGET_INACTIVE_FG_STROKE_COLOR = "widget_inactive_fg_stroke_color"
    WIDGET_INACTIVE_FG_STROKE_WIDTH = "widget_inactive_fg_stroke_width"
    WIDGET_INACTIVE_EXPANSION = "widget_inactive_expansion"

    WIDGET_HOVERED_BG_FILL = "widget_hovered_bg_fill"
    WIDGET_HOVERED_WEAK_BG_FILL = "widget_hovered_weak_bg_fill"
    WIDGET_HOVERED_BG_STROKE_COLOR = "widget_hovered_bg_stroke_color"
    WIDGET_HOVERED_BG_STROKE_WIDTH = "widget_hovered_bg_stroke_width"
    WIDGET_HOVERED_CORNER_RADIUS = "widget_hovered_corner_radius"
    WIDGET_HOVERED_FG_STROKE_COLOR = "widget_hovered_fg_stroke_color"
    WIDGET_HOVERED_FG_STROKE_WIDTH = "widget_hovered_fg_stroke_width"
    WIDGET_HOVERED_EXPANSION = "widget_hovered_expansion"

    WIDGET_ACTIVE_BG_FILL = "widget_active_bg_fill"
    WIDGET_ACTIVE_WEAK_BG_FILL = "widget_active_weak_bg_fill"
    WIDGET_ACTIVE_BG_STROKE_COLOR = "widget_active_bg_stroke_color"
    WIDGET_ACTIVE_BG_STROKE_WIDTH = "widget_active_bg_stroke_width"
    WIDGET_ACTIVE_CORNER_RADIUS = "widget_active_corner_radius"
    WIDGET_ACTIVE_FG_STROKE_COLOR = "widget_active_fg_stroke_color"
    WIDGET_ACTIVE_FG_STROKE_WIDTH = "widget_active_fg_stroke_width"
    WIDGET_ACTIVE_EXPANSION = "widget_active_expansion"

    WIDGET_OPEN_BG_FILL = "widget_open_bg_fill"
    WIDGET_OPEN_WEAK_BG_FILL = "widget_open_weak_bg_fill"
    WIDGET_OPEN_BG_STROKE_COLOR = "widget_open_bg_stroke_color"
    WIDGET_OPEN_BG_STROKE_WIDTH = "widget_open_bg_stroke_width"
    WIDGET_OPEN_CORNER_RADIUS = "widget_open_corner_radius"
    WIDGET_OPEN_FG_STROKE_COLOR = "widget_open_fg_stroke_color"
    WIDGET_OPEN_FG_STROKE_WIDTH = "widget_open_fg_stroke_width"
    WIDGET_OPEN_EXPANSION = "widget_open_expansion"

    RESIZE_CORNER_SIZE = "resize_corner_size"
    TEXT_CURSOR_WIDTH = "text_cursor_width"
    CLIP_RECT_MARGIN = "clip_rect_margin"
    BUTTON_FRAME = "button_frame"
    COLLAPSING_HEADER_FRAME = "collapsing_header_frame"
    INDENT_HAS_LEFT_VLINE = "indent_has_left_vline"
    STRIPED = "striped"
    SLIDER_TRAILING_FILL = "slider_trailing_fill"

    @property
    def json_name(self) -> str:
        return JSON_PREFIX + self.value

    @classmethod
    def from_json_name(cls, name: str) -> AttributeKey | None:
        """Map ``override_<id>`` back to a key; None for unknown names."""
        if not name.startswith(JSON_PREFIX):
            return None
        try:
            return cls(name[len(JSON_PREFIX):])
        except ValueError:
            return None


@dataclass(frozen=True)
class AttributeSpec:
    kind: AttributeKind
    path: tuple[str, ...]
    label: str
    group: str


WIDGET_STATES = ("noninteractive", "inactive", "hovered", "active", "open")

GROUPS = (
    "Text",
    "Window",
    "Panel",
    "Selection",
    "Noninteractive",
    "Inactive",
    "Hovered",
    "Active",
    "Open",
    "UI Options",
)

C, F, U, B = AttributeKind.COLOR, AttributeKind.FLOAT, AttributeKind.U8, AttributeKind.BOOL


def _build_table() -> dict[AttributeKey, AttributeSpec]:
    K = AttributeKey
    table = {
        K.TEXT_COLOR: AttributeSpec(C, ("text_color",), "Text", "Text"),
        K.WEAK_TEXT_COLOR: AttributeSpec(C, ("weak_text_color",), "Weak text", "Text"),
        K.HYPERLINK_COLOR: AttributeSpec(C, ("hyperlink_color",), "Hyperlink", "Text"),
        K.FAINT_BG_COLOR: AttributeSpec(C, ("faint_bg_color",), "Faint background", "Text"),
        K.EXTREME_BG_COLOR: AttributeSpec(C, ("extreme_bg_color",), "Extreme background", "Text"),
        K.CODE_BG_COLOR: AttributeSpec(C, ("code_bg_color",), "Code background", "Text"),
        K.WARN_FG_COLOR: AttributeSpec(C, ("warn_fg_color",), "Warning", "Text"),
        K.ERROR_FG_COLOR: AttributeSpec(C, ("error_fg_color",), "Error", "Text"),

        K.WINDOW_FILL: AttributeSpec(C, ("window_fill",), "Fill", "Window"),
        K.WINDOW_STROKE_COLOR: AttributeSpec(C, ("window_stroke", "color"), "Border", "Window"),
        K.WINDOW_STROKE_WIDTH: AttributeSpec(F, ("window_stroke", "width"), "Border width", "Window"),
        K.WINDOW_CORNER_RADIUS: AttributeSpec(U, ("window_corner_radius",), "Corner radius", "Window"),
        K.WINDOW_SHADOW_SIZE: AttributeSpec(U, ("window_shadow", "spread"), "Shadow size", "Window"),

        K.PANEL_FILL: AttributeSpec(C, ("panel_fill",), "Fill", "Panel"),
        K.POPUP_SHADOW_SIZE: AttributeSpec(U, ("popup_shadow", "spread"), "Popup shadow size", "Panel"),

        K.SELECTION_BG: AttributeSpec(C, ("selection", "bg_fill"), "Background", "Selection"),
        K.SELECTION_STROKE_COLOR: AttributeSpec(C, ("selection", "stroke", "color"), "Stroke", "Selection"),
        K.SELECTION_STROKE_WIDTH: AttributeSpec(F, ("selection", "stroke", "width"), "Stroke width", "Selection"),
    }

    for state in WIDGET_STATES:
        group = state.capitalize()
        prefix = f"WIDGET_{state.upper()}_"
        base = ("widgets", state)
        table[K[prefix + "BG_FILL"]] = AttributeSpec(C, base + ("bg_fill",), "Fill", group)
        table[K[prefix + "WEAK_BG_FILL"]] = AttributeSpec(C, base + ("weak_bg_fill",), "Weak fill", group)
        table[K[prefix + "BG_STROKE_COLOR"]] = AttributeSpec(C, base + ("bg_stroke", "color"), "Border", group)
        table[K[prefix + "BG_STROKE_WIDTH"]] = AttributeSpec(F, base + ("bg_stroke", "width"), "Border width", group)
        table[K[prefix + "CORNER_RADIUS"]] = AttributeSpec(U, base + ("corner_radius",), "Corner radius", group)
        table[K[prefix + "FG_STROKE_COLOR"]] = AttributeSpec(C, base + ("fg_stroke", "color"), "Foreground", group)
        table[K[prefix + "FG_STROKE_WIDTH"]] = AttributeSpec(F, base + ("fg_stroke", "width"), "Foreground width", group)
        table[K[prefix + "EXPANSION"]] = AttributeSpec(F, base + ("expansion",), "Expansion", group)

    table.update({
        K.RESIZE_CORNER_SIZE: AttributeSpec(F, ("resize_corner_size",), "Resize corner size", "UI Options"),
        K.TEXT_CURSOR_WIDTH: AttributeSpec(F, ("text_cursor", "stroke", "width"), "Text cursor width", "UI Options"),
        K.CLIP_RECT_MARGIN: AttributeSpec(F, ("clip_rect_margin",), "Clip rect margin", "UI Options"),
        K.BUTTON_FRAME: AttributeSpec(B, ("button_frame",), "Button frame", "UI Options"),
        K.COLLAPSING_HEADER_FRAME: AttributeSpec(B, ("collapsing_header_frame",), "Collapsing frame", "UI Options"),
        K.INDENT_HAS_LEFT_VLINE: AttributeSpec(B, ("indent_has_left_vline",), "Indent vline", "UI Options"),
        K.STRIPED: AttributeSpec(B, ("striped",), "Striped", "UI Options"),
        K.SLIDER_TRAILING_FILL: AttributeSpec(B, ("slider_trailing_fill",), "Slider trailing fill", "UI Options"),
    })

    # Table order must follow enumeration order
    return {key: table[key] for key in AttributeKey}


ATTRIBUTES: dict[AttributeKey, AttributeSpec] = _build_table()


def keys_in_group(group: str) -> list[AttributeKey]:
    return [key for key, spec in ATTRIBUTES.items() if spec.group == group]


def validate_value(key: AttributeKey, value: Any) -> OverrideValue:
    """Coerce *value* to the kind declared for *key*.

    Raises:
        TypeError: value has the wrong type for the key
        ValueError: value has the right type but is out of range
    """
    kind = ATTRIBUTES[key].kind

    if kind is AttributeKind.COLOR:
        if isinstance(value, Color32):
            return Color32.from_rgba_unmultiplied(*value)
        if isinstance(value, (list, tuple)):
            return Color32.from_array(value)
        raise TypeError(f"{key.value}: expected a color, got {type(value).__name__}")

    if kind is AttributeKind.FLOAT:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{key.value}: expected a number, got {type(value).__name__}")
        try:
            number = float(value)
        except OverflowError as e:
            raise ValueError(f"{key.value}: number too large for a float") from e
        if not math.isfinite(number):
            raise ValueError(f"{key.value}: expected a finite number, got {number}")
        return number

    if kind is AttributeKind.U8:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{key.value}: expected an int, got {type(value).__name__}")
        if not 0 <= value <= 255:
            raise ValueError(f"{key.value}: expected 0..255, got {value}")
        return value

    if not isinstance(value, bool):
        raise TypeError(f"{key.value}: expected a bool, got {type(value).__name__}")
    return value
