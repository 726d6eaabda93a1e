"""
ThemeEditorPanel: live editor for a ThemeEditorState.

Every widget interaction becomes one ``(key, value_or_none)`` edit on the
session; the session recomputes the resolved style and the panel installs
it through ThemeManager, so the whole application previews the change
immediately.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QCheckBox, QComboBox, QDoubleSpinBox, QFileDialog, QGridLayout,
    QGroupBox, QHBoxLayout, QLabel, QLineEdit, QMessageBox,
    QPlainTextEdit, QPushButton, QScrollArea, QSpinBox, QVBoxLayout, QWidget,
)

from qthematic.core.attributes import ATTRIBUTES, GROUPS, AttributeKey, AttributeKind, keys_in_group
from qthematic.core.code_export import to_source_snippet
from qthematic.core.errors import ThemeError
from qthematic.core.persistence import THEME_FILE_SUFFIX
from qthematic.core.randomizer import ColorSource
from qthematic.core.session import CUSTOM_LABEL, ThemeEditorState
from qthematic.core.settings import get_setting, set_setting
from qthematic.core.visuals import Visuals
from qthematic.logging import get_logger

from .color_button import ColorButton
from .theme_manager import ThemeManager

logger = get_logger(__name__)

FILE_FILTER = f"Theme Files (*{THEME_FILE_SUFFIX});;JSON Files (*.json);;All Files (*)"


class ThemeEditorPanel(QWidget):
    """Theme editor: header controls, one group per attribute group, code export."""

    theme_applied = pyqtSignal(object)  # Visuals

    def __init__(
        self,
        state: Optional[ThemeEditorState] = None,
        manager: Optional[ThemeManager] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._state = state if state is not None else ThemeEditorState()
        self._manager = manager if manager is not None else ThemeManager.instance()
        self._editors: dict[AttributeKey, QWidget] = {}
        self._labels: dict[AttributeKey, QLabel] = {}

        self._setup_ui()
        self._sync_from_state()

    @property
    def state(self) -> ThemeEditorState:
        return self._state

    # ── UI setup ──────────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        title = QLabel("Theme Studio")
        font = title.font()
        font.setPointSize(font.pointSize() + 4)
        font.setBold(True)
        title.setFont(font)
        layout.addWidget(title)

        header = QHBoxLayout()
        header.addWidget(QLabel("Theme:"))
        self._name_edit = QLineEdit()
        self._name_edit.textEdited.connect(self._on_name_edited)
        header.addWidget(self._name_edit, 1)

        self._dark_check = QCheckBox("Dark Mode")
        self._dark_check.toggled.connect(self._on_dark_mode_toggled)
        header.addWidget(self._dark_check)

        self._preset_combo = QComboBox()
        for preset in self._state.presets:
            self._preset_combo.addItem(preset.name)
        self._preset_combo.addItem(CUSTOM_LABEL)
        self._preset_combo.activated.connect(self._on_preset_activated)
        header.addWidget(QLabel("Preset:"))
        header.addWidget(self._preset_combo)
        layout.addLayout(header)

        actions = QHBoxLayout()
        self._randomize_btn = QPushButton("Randomize")
        self._randomize_btn.clicked.connect(lambda: self.randomize())
        self._reset_dark_btn = QPushButton("Reset Dark")
        self._reset_dark_btn.clicked.connect(lambda: self.reset_to(True))
        self._reset_light_btn = QPushButton("Reset Light")
        self._reset_light_btn.clicked.connect(lambda: self.reset_to(False))
        self._save_btn = QPushButton("Save…")
        self._save_btn.clicked.connect(self._on_save_clicked)
        self._load_btn = QPushButton("Load…")
        self._load_btn.clicked.connect(self._on_load_clicked)
        self._export_btn = QPushButton("Export Code")
        self._export_btn.setCheckable(True)
        self._export_btn.toggled.connect(self._on_export_toggled)
        for btn in (self._randomize_btn, self._reset_dark_btn, self._reset_light_btn,
                    self._save_btn, self._load_btn, self._export_btn):
            actions.addWidget(btn)
        actions.addStretch()
        layout.addLayout(actions)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        body = QWidget()
        body_layout = QVBoxLayout(body)
        for group in GROUPS:
            body_layout.addWidget(self._build_group(group))
        body_layout.addStretch()
        scroll.setWidget(body)
        layout.addWidget(scroll, 1)

        self._export_view = QPlainTextEdit()
        self._export_view.setReadOnly(True)
        self._export_view.setFont(QFont("JetBrains Mono"))
        self._copy_btn = QPushButton("Copy")
        self._copy_btn.clicked.connect(self._on_copy_clicked)
        self._export_view.setVisible(False)
        self._copy_btn.setVisible(False)
        layout.addWidget(self._export_view)
        layout.addWidget(self._copy_btn)

    def _build_group(self, group: str) -> QGroupBox:
        box = QGroupBox(group)
        grid = QGridLayout(box)
        for row, key in enumerate(keys_in_group(group)):
            spec = ATTRIBUTES[key]
            label = QLabel(spec.label)
            label.setToolTip(key.json_name)
            editor = self._build_editor(key, spec.kind)
            reset = QPushButton("Reset")
            reset.setToolTip(f"Inherit {spec.label.lower()} from the base style")
            reset.clicked.connect(lambda _checked=False, k=key: self.reset_attribute(k))

            grid.addWidget(label, row, 0)
            grid.addWidget(editor, row, 1)
            grid.addWidget(reset, row, 2)
            self._labels[key] = label
            self._editors[key] = editor
        return box

    def _build_editor(self, key: AttributeKey, kind: AttributeKind) -> QWidget:
        value = self._state.effective_value(key)
        if kind is AttributeKind.COLOR:
            editor = ColorButton(value, title=ATTRIBUTES[key].label)
            editor.color_changed.connect(lambda c, k=key: self.edit(k, c))
        elif kind is AttributeKind.FLOAT:
            editor = QDoubleSpinBox()
            editor.setRange(-10.0, 100.0)
            editor.setSingleStep(0.5)
            editor.setDecimals(2)
            editor.valueChanged.connect(lambda v, k=key: self.edit(k, v))
        elif kind is AttributeKind.U8:
            editor = QSpinBox()
            editor.setRange(0, 255)
            editor.valueChanged.connect(lambda v, k=key: self.edit(k, v))
        else:
            editor = QCheckBox()
            editor.toggled.connect(lambda v, k=key: self.edit(k, v))
        return editor

    # ── Session operations ────────────────────────────────────────────────────

    def edit(self, key: AttributeKey, value) -> None:
        """Set one override from an editor widget."""
        self._state.apply_edit(key, value)
        self._mark_overridden(key)
        self._refresh_header()
        self._install()

    def reset_attribute(self, key: AttributeKey) -> None:
        """Clear one override so the attribute inherits the base again."""
        self._state.apply_edit(key, None)
        self._set_editor_value(key, self._state.effective_value(key))
        self._mark_overridden(key)
        self._refresh_header()
        self._install()

    def select_preset(self, index: int) -> None:
        self._state.select_preset(index)
        self._sync_from_state()

    def reset_to(self, dark_mode: bool) -> None:
        self._state.reset_to(dark_mode)
        self._sync_from_state()

    def randomize(self, source: Optional[ColorSource] = None) -> None:
        self._state.randomize(source)
        self._sync_from_state()

    def save_to(self, path: Union[str, Path]) -> bool:
        """Save the current theme; shows and logs failures. Returns success."""
        try:
            self._state.save_file(path)
        except ThemeError as e:
            logger.error(f"Save failed: {e}")
            QMessageBox.warning(self, "Save Theme", str(e))
            return False
        set_setting("last_theme_path", str(path))
        return True

    def load_from(self, path: Union[str, Path]) -> bool:
        """Load a theme file; shows and logs failures. Returns success."""
        try:
            self._state.load_file(path)
        except ThemeError as e:
            logger.error(f"Load failed: {e}")
            QMessageBox.warning(self, "Load Theme", str(e))
            return False
        set_setting("last_theme_path", str(path))
        self._sync_from_state()
        return True

    # ── Slots ─────────────────────────────────────────────────────────────────

    def _on_name_edited(self, text: str) -> None:
        self._state.set_name(text)
        self._refresh_header()

    def _on_dark_mode_toggled(self, checked: bool) -> None:
        self._state.set_dark_mode(checked)
        self._sync_from_state()

    def _on_preset_activated(self, index: int) -> None:
        if index < len(self._state.presets):
            self.select_preset(index)
        else:
            # "Custom" is a label, not a theme
            self._refresh_header()

    def _on_export_toggled(self, checked: bool) -> None:
        self._state.show_code_export = checked
        self._export_view.setVisible(checked)
        self._copy_btn.setVisible(checked)
        self._refresh_export()

    def _on_copy_clicked(self) -> None:
        clipboard = QGuiApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(self._export_view.toPlainText())

    def _default_path(self) -> str:
        last = get_setting("last_theme_path")
        if last:
            return last
        name = self._state.current_config.name.strip().lower().replace(" ", "_") or "theme"
        return f"{name}{THEME_FILE_SUFFIX}"

    def _on_save_clicked(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Save Theme", self._default_path(), FILE_FILTER)
        if path:
            self.save_to(path)

    def _on_load_clicked(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Load Theme", self._default_path(), FILE_FILTER)
        if path:
            self.load_from(path)

    # ── Refresh ───────────────────────────────────────────────────────────────

    def _set_editor_value(self, key: AttributeKey, value) -> None:
        editor = self._editors[key]
        editor.blockSignals(True)
        try:
            if isinstance(editor, ColorButton):
                editor.set_color(value)
            elif isinstance(editor, QDoubleSpinBox):
                # Grow the range so loaded values are shown, not clamped
                if not editor.minimum() <= value <= editor.maximum():
                    editor.setRange(min(editor.minimum(), value), max(editor.maximum(), value))
                editor.setValue(value)
            elif isinstance(editor, QSpinBox):
                editor.setValue(value)
            else:
                editor.setChecked(value)
        finally:
            editor.blockSignals(False)

    def _mark_overridden(self, key: AttributeKey) -> None:
        label = self._labels[key]
        overridden = self._state.current_config.is_set(key)
        if label.property("overridden") == overridden:
            return
        # Styled by the QLabel[overridden="true"] rule
        label.setProperty("overridden", overridden)
        label.style().unpolish(label)
        label.style().polish(label)

    def _refresh_header(self) -> None:
        config = self._state.current_config
        if self._name_edit.text() != config.name:
            self._name_edit.setText(config.name)

        label = self._state.selected_preset_label()
        index = self._preset_combo.findText(label)
        if label == CUSTOM_LABEL or index < 0:
            index = self._preset_combo.count() - 1
        self._preset_combo.setCurrentIndex(index)
        self._refresh_export()

    def _refresh_export(self) -> None:
        if self._state.show_code_export:
            self._export_view.setPlainText(to_source_snippet(self._state.current_config))

    def _sync_from_state(self) -> None:
        """Push the whole session into the widgets, then install the style."""
        self._dark_check.blockSignals(True)
        self._dark_check.setChecked(self._state.current_config.dark_mode)
        self._dark_check.blockSignals(False)

        for key in self._editors:
            self._set_editor_value(key, self._state.effective_value(key))
            self._mark_overridden(key)
        self._refresh_header()
        self._install()

    def _install(self) -> None:
        visuals: Visuals = self._state.resolved()
        self._manager.install(visuals)
        self.theme_applied.emit(visuals)
