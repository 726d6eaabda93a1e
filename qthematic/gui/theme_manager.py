"""Global theme manager: installs a resolved style into the running app."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from qthematic.core.color import Color32
from qthematic.core.visuals import Stroke, Visuals, WidgetVisuals, resolve_base
from qthematic.logging import get_logger

logger = get_logger(__name__)


def to_qcolor(color: Color32) -> QColor:
    return QColor(color.r, color.g, color.b, color.a)


def from_qcolor(color: QColor) -> Color32:
    return Color32(color.red(), color.green(), color.blue(), color.alpha())


def _css(color: Color32) -> str:
    return f"rgba({color.r}, {color.g}, {color.b}, {color.a})"


def _border(stroke: Stroke) -> str:
    if stroke.width <= 0 or stroke.color.a == 0:
        return "none"
    return f"{stroke.width:g}px solid {_css(stroke.color)}"


def _widget_rules(w: WidgetVisuals) -> str:
    return (
        f"background-color: {_css(w.weak_bg_fill)};\n"
        f"    border: {_border(w.bg_stroke)};\n"
        f"    border-radius: {w.corner_radius}px;\n"
        f"    color: {_css(w.fg_stroke.color)};\n"
        f"    margin: {max(0.0, 1.0 - w.expansion):g}px;"
    )


def build_stylesheet(v: Visuals) -> str:
    """Application stylesheet for a resolved style."""
    widgets = v.widgets

    if v.button_frame:
        button = f"""
QPushButton {{
    {_widget_rules(widgets.inactive)}
    padding: 4px 10px;
}}

QPushButton:hover {{
    {_widget_rules(widgets.hovered)}
}}

QPushButton:pressed, QPushButton:checked {{
    {_widget_rules(widgets.active)}
}}
"""
    else:
        button = f"""
QPushButton {{
    background-color: transparent;
    border: none;
    color: {_css(widgets.inactive.fg_stroke.color)};
    padding: 4px 10px;
}}

QPushButton:hover {{
    color: {_css(widgets.hovered.fg_stroke.color)};
}}
"""

    slider_fill = v.selection.bg_fill if v.slider_trailing_fill else widgets.inactive.bg_fill
    group_border = _border(widgets.noninteractive.bg_stroke) if v.collapsing_header_frame else "none"

    return f"""
QMainWindow {{
    background-color: {_css(v.panel_fill)};
}}

QWidget {{
    background-color: {_css(v.window_fill)};
    color: {_css(v.text_color)};
    selection-background-color: {_css(v.selection.bg_fill)};
    selection-color: {_css(v.selection.stroke.color)};
}}

QDialog, QDockWidget {{
    background-color: {_css(v.window_fill)};
    border: {_border(v.window_stroke)};
    border-radius: {v.window_corner_radius}px;
}}

QToolBar, QStatusBar {{
    background-color: {_css(v.panel_fill)};
    border: {_border(widgets.noninteractive.bg_stroke)};
}}

QGroupBox {{
    border: {group_border};
    border-radius: {widgets.noninteractive.corner_radius}px;
    margin-top: 14px;
    padding-top: 4px;
}}

QGroupBox::title {{
    subcontrol-origin: margin;
    left: 6px;
    color: {_css(widgets.noninteractive.fg_stroke.color)};
}}
{button}
QPushButton:disabled {{
    {_widget_rules(widgets.noninteractive)}
    color: {_css(v.weak_text_color)};
}}

QLineEdit, QPlainTextEdit, QTextEdit, QSpinBox, QDoubleSpinBox {{
    background-color: {_css(v.extreme_bg_color)};
    border: {_border(widgets.inactive.bg_stroke)};
    border-radius: {widgets.inactive.corner_radius}px;
    padding: 2px 4px;
}}

QLineEdit:focus, QPlainTextEdit:focus, QTextEdit:focus {{
    border: {_border(v.selection.stroke)};
}}

QComboBox {{
    {_widget_rules(widgets.inactive)}
    padding: 2px 6px;
}}

QComboBox:hover {{
    {_widget_rules(widgets.hovered)}
}}

QComboBox:on {{
    {_widget_rules(widgets.open)}
}}

QComboBox QAbstractItemView {{
    background-color: {_css(widgets.open.bg_fill)};
    border: {_border(v.window_stroke)};
}}

QSlider::groove:horizontal {{
    background-color: {_css(widgets.inactive.bg_fill)};
    height: 4px;
    border-radius: 2px;
}}

QSlider::sub-page:horizontal {{
    background-color: {_css(slider_fill)};
    border-radius: 2px;
}}

QSlider::handle:horizontal {{
    background-color: {_css(widgets.inactive.fg_stroke.color)};
    width: 12px;
    margin: -5px 0;
    border-radius: 6px;
}}

QSlider::handle:horizontal:hover {{
    background-color: {_css(widgets.hovered.fg_stroke.color)};
}}

QListView, QTreeView, QTableView {{
    background-color: {_css(v.extreme_bg_color)};
    alternate-background-color: {_css(v.faint_bg_color)};
}}

QToolTip, QMenu {{
    background-color: {_css(v.window_fill)};
    color: {_css(v.text_color)};
    border: {_border(v.window_stroke)};
}}

QLabel[role="weak"] {{
    color: {_css(v.weak_text_color)};
}}

QLabel[role="warning"] {{
    color: {_css(v.warn_fg_color)};
}}

QLabel[role="error"] {{
    color: {_css(v.error_fg_color)};
}}

QLabel[role="code"] {{
    background-color: {_css(v.code_bg_color)};
    font-family: "JetBrains Mono", monospace;
    padding: 6px;
}}

QLabel[overridden="true"] {{
    font-weight: bold;
}}

QFrame[role="faint"] {{
    background-color: {_css(v.faint_bg_color)};
}}

QFrame[role="extreme"] {{
    background-color: {_css(v.extreme_bg_color)};
}}
"""


def build_palette(v: Visuals) -> QPalette:
    """QPalette carrying the colors widgets read outside the stylesheet."""
    role = QPalette.ColorRole
    palette = QPalette()
    palette.setColor(role.Window, to_qcolor(v.window_fill))
    palette.setColor(role.WindowText, to_qcolor(v.text_color))
    palette.setColor(role.Base, to_qcolor(v.extreme_bg_color))
    palette.setColor(role.AlternateBase, to_qcolor(v.faint_bg_color))
    palette.setColor(role.Text, to_qcolor(v.text_color))
    palette.setColor(role.PlaceholderText, to_qcolor(v.weak_text_color))
    palette.setColor(role.Button, to_qcolor(v.widgets.inactive.weak_bg_fill))
    palette.setColor(role.ButtonText, to_qcolor(v.widgets.inactive.fg_stroke.color))
    palette.setColor(role.Highlight, to_qcolor(v.selection.bg_fill))
    palette.setColor(role.HighlightedText, to_qcolor(v.selection.stroke.color))
    palette.setColor(role.Link, to_qcolor(v.hyperlink_color))
    palette.setColor(role.LinkVisited, to_qcolor(v.hyperlink_color))
    palette.setColor(role.ToolTipBase, to_qcolor(v.window_fill))
    palette.setColor(role.ToolTipText, to_qcolor(v.text_color))
    palette.setColor(role.BrightText, to_qcolor(v.error_fg_color))
    palette.setColor(role.Mid, to_qcolor(v.widgets.noninteractive.bg_stroke.color))

    disabled = QPalette.ColorGroup.Disabled
    for text_role in (role.Text, role.WindowText, role.ButtonText):
        palette.setColor(disabled, text_role, to_qcolor(v.weak_text_color))
    return palette


class ThemeManager(QObject):
    """Singleton that owns the installed style and the app stylesheet."""

    theme_changed = pyqtSignal(object)
    _instance: Optional["ThemeManager"] = None

    def __init__(self, app: Optional[QApplication] = None):
        super().__init__()
        self._app = app or QApplication.instance()
        self._current: Optional[Visuals] = None

    @classmethod
    def instance(cls, app: Optional[QApplication] = None) -> "ThemeManager":
        if cls._instance is None:
            cls._instance = cls(app)
        elif app is not None:
            cls._instance._app = app
        return cls._instance

    def install(self, visuals: Visuals) -> None:
        """Apply *visuals* to the application and notify listeners."""
        if self._app is None:
            self._app = QApplication.instance()

        if self._app is not None:
            self._app.setPalette(build_palette(visuals))
            self._app.setStyleSheet(build_stylesheet(visuals))
        else:
            logger.warning("No QApplication; theme recorded but not installed")

        self._current = visuals
        self.theme_changed.emit(visuals)

    @property
    def current(self) -> Visuals:
        if self._current is None:
            self.install(resolve_base(True))
        return self._current
