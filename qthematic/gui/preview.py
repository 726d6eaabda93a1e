"""StorybookPreview: sample widgets that show the installed theme."""

from typing import Optional

import numpy as np
import pyqtgraph as pg
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QButtonGroup, QCheckBox, QComboBox, QFrame, QGroupBox, QHBoxLayout,
    QLabel, QLineEdit, QListWidget, QPushButton, QRadioButton, QSlider,
    QVBoxLayout, QWidget,
)

from qthematic.core.session import ThemeEditorState
from qthematic.core.visuals import Visuals

from .theme_manager import ThemeManager, to_qcolor

COMBO_ITEMS = ("First option", "Second option", "Third option")
RADIO_LABELS = ("Option 1", "Option 2", "Option 3")


class StorybookPreview(QWidget):
    """Sample controls bound to the session's storybook fields.

    Most of the look comes from the application stylesheet; the plot and
    list flags are applied here on ``theme_changed``.
    """

    def __init__(self, state: ThemeEditorState, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._state = state
        self._setup_ui()

        tm = ThemeManager.instance()
        tm.theme_changed.connect(self._apply_theme)
        self._apply_theme(tm.current)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        text_box = QGroupBox("Text")
        text_layout = QVBoxLayout(text_box)
        text_layout.addWidget(QLabel("Regular text"))
        weak = QLabel("Weak text")
        weak.setProperty("role", "weak")
        text_layout.addWidget(weak)
        link = QLabel('<a href="https://example.com">Hyperlink</a>')
        link.setTextFormat(Qt.TextFormat.RichText)
        text_layout.addWidget(link)
        warning = QLabel("Warning: This is a warning message")
        warning.setProperty("role", "warning")
        text_layout.addWidget(warning)
        error = QLabel("Error: This is an error message")
        error.setProperty("role", "error")
        text_layout.addWidget(error)
        code = QLabel('def main():\n    print("Hello, world!")')
        code.setProperty("role", "code")
        text_layout.addWidget(code)
        layout.addWidget(text_box)

        controls = QGroupBox("Controls")
        controls_layout = QVBoxLayout(controls)

        buttons = QHBoxLayout()
        buttons.addWidget(QPushButton("Button"))
        disabled = QPushButton("Disabled")
        disabled.setEnabled(False)
        buttons.addWidget(disabled)
        buttons.addStretch()
        controls_layout.addLayout(buttons)

        self._checkbox = QCheckBox("Checkbox")
        self._checkbox.setChecked(self._state.storybook_checkbox)
        self._checkbox.toggled.connect(self._on_checkbox)
        controls_layout.addWidget(self._checkbox)

        radios = QHBoxLayout()
        self._radio_group = QButtonGroup(self)
        for i, text in enumerate(RADIO_LABELS):
            radio = QRadioButton(text)
            self._radio_group.addButton(radio, i)
            radios.addWidget(radio)
        self._radio_group.button(self._state.storybook_radio).setChecked(True)
        self._radio_group.idClicked.connect(self._on_radio)
        controls_layout.addLayout(radios)

        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setRange(0, 100)
        self._slider.setValue(int(self._state.storybook_slider))
        self._slider.valueChanged.connect(self._on_slider)
        controls_layout.addWidget(self._slider)

        self._line_edit = QLineEdit(self._state.storybook_text)
        self._line_edit.textEdited.connect(self._on_text)
        controls_layout.addWidget(self._line_edit)

        self._combo = QComboBox()
        self._combo.addItems(COMBO_ITEMS)
        self._combo.setCurrentIndex(self._state.storybook_combo_selected)
        self._combo.currentIndexChanged.connect(self._on_combo)
        controls_layout.addWidget(self._combo)

        self._list = QListWidget()
        self._list.addItems([f"Row {i}" for i in range(1, 6)])
        self._list.setCurrentRow(1)
        self._list.setMaximumHeight(110)
        controls_layout.addWidget(self._list)
        layout.addWidget(controls)

        backgrounds = QHBoxLayout()
        for role, text in (("faint", "Faint background"), ("extreme", "Extreme background")):
            frame = QFrame()
            frame.setProperty("role", role)
            frame_layout = QVBoxLayout(frame)
            frame_layout.addWidget(QLabel(text))
            backgrounds.addWidget(frame)
        layout.addLayout(backgrounds)

        self._plot_widget = pg.PlotWidget()
        self._plot_widget.setMinimumHeight(140)
        self._plot_widget.useOpenGL(False)
        self._plot_widget.setMouseEnabled(x=False, y=False)
        t = np.linspace(0.0, 4.0 * np.pi, 400)
        self._curve = self._plot_widget.plot(t, np.sin(t))
        self._warn_curve = self._plot_widget.plot(t, 0.5 * np.cos(t))
        layout.addWidget(self._plot_widget)
        layout.addStretch()

    def _apply_theme(self, visuals: Visuals) -> None:
        self._list.setAlternatingRowColors(visuals.striped)

        self._plot_widget.setBackground(to_qcolor(visuals.extreme_bg_color))
        axis_pen = pg.mkPen(color=to_qcolor(visuals.widgets.noninteractive.fg_stroke.color), width=1)
        for ax in ('left', 'bottom'):
            self._plot_widget.getAxis(ax).setPen(axis_pen)
            self._plot_widget.getAxis(ax).setTextPen(axis_pen)
        self._plot_widget.showGrid(x=True, y=True, alpha=0.25)
        self._curve.setPen(pg.mkPen(color=to_qcolor(visuals.hyperlink_color), width=2))
        self._warn_curve.setPen(pg.mkPen(color=to_qcolor(visuals.warn_fg_color), width=1))

    # -- Storybook state -----------------------------------------------------

    def _on_checkbox(self, checked: bool) -> None:
        self._state.storybook_checkbox = checked

    def _on_radio(self, index: int) -> None:
        self._state.storybook_radio = index

    def _on_slider(self, value: int) -> None:
        self._state.storybook_slider = float(value)

    def _on_text(self, text: str) -> None:
        self._state.storybook_text = text

    def _on_combo(self, index: int) -> None:
        self._state.storybook_combo_selected = index
