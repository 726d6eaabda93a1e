"""Complete style records: the base styles and resolved styles.

``Visuals`` mirrors the attribute set of an immediate-mode GUI style
(text and background colors, window chrome, selection, five widget
interaction states, layout flags). Instances are frozen; deriving a
modified style always produces a new record, so the two canonical bases
returned by :func:`resolve_base` can be shared freely.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from .color import BLACK, TRANSPARENT, WHITE, Color32


@dataclass(frozen=True)
class Stroke:
    width: float
    color: Color32


NO_STROKE = Stroke(0.0, TRANSPARENT)


@dataclass(frozen=True)
class Shadow:
    offset: tuple[int, int]
    blur: int
    spread: int
    color: Color32


@dataclass(frozen=True)
class Selection:
    bg_fill: Color32
    stroke: Stroke


@dataclass(frozen=True)
class TextCursorStyle:
    stroke: Stroke
    blink: bool = True


@dataclass(frozen=True)
class WidgetVisuals:
    """Style of a widget in one interaction state."""

    bg_fill: Color32
    weak_bg_fill: Color32
    bg_stroke: Stroke
    corner_radius: int
    fg_stroke: Stroke
    expansion: float


@dataclass(frozen=True)
class Widgets:
    noninteractive: WidgetVisuals
    inactive: WidgetVisuals
    hovered: WidgetVisuals
    active: WidgetVisuals
    open: WidgetVisuals

    @classmethod
    def dark(cls) -> Widgets:
        return cls(
            noninteractive=WidgetVisuals(
                bg_fill=Color32.gray(27),
                weak_bg_fill=Color32.gray(27),
                bg_stroke=Stroke(1.0, Color32.gray(60)),
                corner_radius=2,
                fg_stroke=Stroke(1.0, Color32.gray(140)),
                expansion=0.0,
            ),
            inactive=WidgetVisuals(
                bg_fill=Color32.gray(60),
                weak_bg_fill=Color32.gray(60),
                bg_stroke=NO_STROKE,
                corner_radius=2,
                fg_stroke=Stroke(1.0, Color32.gray(180)),
                expansion=0.0,
            ),
            hovered=WidgetVisuals(
                bg_fill=Color32.gray(70),
                weak_bg_fill=Color32.gray(70),
                bg_stroke=Stroke(1.0, Color32.gray(150)),
                corner_radius=3,
                fg_stroke=Stroke(1.5, Color32.gray(240)),
                expansion=1.0,
            ),
            active=WidgetVisuals(
                bg_fill=Color32.gray(55),
                weak_bg_fill=Color32.gray(55),
                bg_stroke=Stroke(1.0, WHITE),
                corner_radius=2,
                fg_stroke=Stroke(2.0, WHITE),
                expansion=1.0,
            ),
            open=WidgetVisuals(
                bg_fill=Color32.gray(27),
                weak_bg_fill=Color32.gray(45),
                bg_stroke=Stroke(1.0, Color32.gray(60)),
                corner_radius=2,
                fg_stroke=Stroke(1.0, Color32.gray(210)),
                expansion=0.0,
            ),
        )

    @classmethod
    def light(cls) -> Widgets:
        return cls(
            noninteractive=WidgetVisuals(
                bg_fill=Color32.gray(248),
                weak_bg_fill=Color32.gray(248),
                bg_stroke=Stroke(1.0, Color32.gray(190)),
                corner_radius=2,
                fg_stroke=Stroke(1.0, Color32.gray(80)),
                expansion=0.0,
            ),
            inactive=WidgetVisuals(
                bg_fill=Color32.gray(230),
                weak_bg_fill=Color32.gray(230),
                bg_stroke=NO_STROKE,
                corner_radius=2,
                fg_stroke=Stroke(1.0, Color32.gray(60)),
                expansion=0.0,
            ),
            hovered=WidgetVisuals(
                bg_fill=Color32.gray(220),
                weak_bg_fill=Color32.gray(220),
                bg_stroke=Stroke(1.0, Color32.gray(105)),
                corner_radius=3,
                fg_stroke=Stroke(1.5, BLACK),
                expansion=1.0,
            ),
            active=WidgetVisuals(
                bg_fill=Color32.gray(165),
                weak_bg_fill=Color32.gray(165),
                bg_stroke=Stroke(1.0, BLACK),
                corner_radius=2,
                fg_stroke=Stroke(2.0, BLACK),
                expansion=1.0,
            ),
            open=WidgetVisuals(
                bg_fill=Color32.gray(220),
                weak_bg_fill=Color32.gray(220),
                bg_stroke=Stroke(1.0, Color32.gray(160)),
                corner_radius=2,
                fg_stroke=Stroke(1.0, BLACK),
                expansion=0.0,
            ),
        )


@dataclass(frozen=True)
class Visuals:
    """A fully populated style. Every attribute always has a value."""

    dark_mode: bool

    text_color: Color32
    weak_text_color: Color32
    hyperlink_color: Color32
    faint_bg_color: Color32
    extreme_bg_color: Color32
    code_bg_color: Color32
    warn_fg_color: Color32
    error_fg_color: Color32

    window_fill: Color32
    window_stroke: Stroke
    window_corner_radius: int
    window_shadow: Shadow

    panel_fill: Color32
    popup_shadow: Shadow

    selection: Selection
    widgets: Widgets

    resize_corner_size: float
    text_cursor: TextCursorStyle
    clip_rect_margin: float
    button_frame: bool
    collapsing_header_frame: bool
    indent_has_left_vline: bool
    striped: bool
    slider_trailing_fill: bool

    @classmethod
    def dark(cls) -> Visuals:
        return cls(
            dark_mode=True,
            text_color=Color32.gray(140),
            weak_text_color=Color32.gray(100),
            hyperlink_color=Color32(90, 170, 255),
            faint_bg_color=Color32.from_additive_luminance(5),
            extreme_bg_color=Color32.gray(10),
            code_bg_color=Color32.gray(64),
            warn_fg_color=Color32(255, 143, 0),
            error_fg_color=Color32(255, 0, 0),
            window_fill=Color32.gray(27),
            window_stroke=Stroke(1.0, Color32.gray(60)),
            window_corner_radius=6,
            window_shadow=Shadow((10, 20), 15, 0, Color32.from_black_alpha(96)),
            panel_fill=Color32.gray(27),
            popup_shadow=Shadow((6, 10), 8, 0, Color32.from_black_alpha(96)),
            selection=Selection(Color32(0, 92, 128), Stroke(1.0, Color32(192, 222, 255))),
            widgets=Widgets.dark(),
            resize_corner_size=12.0,
            text_cursor=TextCursorStyle(Stroke(2.0, Color32(192, 222, 255))),
            clip_rect_margin=3.0,
            button_frame=True,
            collapsing_header_frame=False,
            indent_has_left_vline=True,
            striped=False,
            slider_trailing_fill=False,
        )

    @classmethod
    def light(cls) -> Visuals:
        return cls(
            dark_mode=False,
            text_color=Color32.gray(80),
            weak_text_color=Color32.gray(140),
            hyperlink_color=Color32(0, 155, 255),
            faint_bg_color=Color32.gray(245),
            extreme_bg_color=Color32.gray(255),
            code_bg_color=Color32.gray(230),
            warn_fg_color=Color32(255, 100, 0),
            error_fg_color=Color32(255, 0, 0),
            window_fill=Color32.gray(248),
            window_stroke=Stroke(1.0, Color32.gray(190)),
            window_corner_radius=6,
            window_shadow=Shadow((10, 20), 15, 0, Color32.from_black_alpha(25)),
            panel_fill=Color32.gray(248),
            popup_shadow=Shadow((6, 10), 8, 0, Color32.from_black_alpha(25)),
            selection=Selection(Color32(144, 209, 255), Stroke(1.0, Color32(0, 83, 125))),
            widgets=Widgets.light(),
            resize_corner_size=12.0,
            text_cursor=TextCursorStyle(Stroke(2.0, Color32(0, 83, 125))),
            clip_rect_margin=3.0,
            button_frame=True,
            collapsing_header_frame=False,
            indent_has_left_vline=True,
            striped=False,
            slider_trailing_fill=False,
        )


_DARK = Visuals.dark()
_LIGHT = Visuals.light()


def resolve_base(dark_mode: bool) -> Visuals:
    """Return the canonical dark or light base style."""
    return _DARK if dark_mode else _LIGHT


def get_path(record: Any, path: tuple[str, ...]) -> Any:
    """Read a nested field, e.g. ``("widgets", "hovered", "bg_fill")``."""
    value = record
    for name in path:
        value = getattr(value, name)
    return value


def replace_path(record: Any, path: tuple[str, ...], value: Any) -> Any:
    """Return a copy of *record* with the nested field at *path* replaced.

    Only the records along *path* are rebuilt; siblings are shared.
    """
    head, *rest = path
    if rest:
        value = replace_path(getattr(record, head), tuple(rest), value)
    return dataclasses.replace(record, **{head: value})
