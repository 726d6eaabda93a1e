"""
Demo window: a storybook preview with the theme editor docked beside it.
"""

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSlot
from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QDockWidget, QMainWindow, QScrollArea, QStatusBar, QToolBar

from qthematic.core.session import ThemeEditorState
from qthematic.core.settings import set_setting
from qthematic.logging import get_logger

from .editor_panel import ThemeEditorPanel
from .preview import StorybookPreview
from .theme_manager import ThemeManager

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: Optional[ThemeEditorState] = None):
        super().__init__()
        self._state = state if state is not None else ThemeEditorState()
        self.setWindowTitle("qthematic")
        self.resize(1200, 800)

        self._editor = ThemeEditorPanel(self._state)
        self._preview = StorybookPreview(self._state)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._preview)
        self.setCentralWidget(scroll)

        self._dock = QDockWidget("Theme Editor", self)
        self._dock.setWidget(self._editor)
        self._dock.setMinimumWidth(420)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self._dock)

        self._setup_toolbar()
        self._setup_preset_menu()

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        ThemeManager.instance().theme_changed.connect(self._on_theme_changed)
        self._sync_preset_menu()

    @property
    def editor(self) -> ThemeEditorPanel:
        return self._editor

    def _setup_toolbar(self) -> None:
        toolbar = QToolBar("Theme")
        toolbar.setMovable(False)
        toolbar.addAction(self._dock.toggleViewAction())
        toolbar.addSeparator()

        dark = QAction("Dark Preset", self)
        dark.triggered.connect(lambda: self._editor.reset_to(True))
        light = QAction("Light Preset", self)
        light.triggered.connect(lambda: self._editor.reset_to(False))
        randomize = QAction("Randomize", self)
        randomize.triggered.connect(lambda: self._editor.randomize())
        for action in (dark, light, randomize):
            toolbar.addAction(action)
        self.addToolBar(toolbar)

    def _setup_preset_menu(self) -> None:
        """Create View -> Preset menu mirroring the editor's preset list."""
        preset_menu = self.menuBar().addMenu("View").addMenu("Preset")

        self._preset_action_group = QActionGroup(self)
        self._preset_action_group.setExclusive(True)
        self._preset_actions: list[QAction] = []
        for index, preset in enumerate(self._state.presets):
            action = QAction(preset.name, self)
            action.setCheckable(True)
            action.triggered.connect(
                lambda checked, i=index: self._on_preset_selected(i, checked)
            )
            self._preset_action_group.addAction(action)
            self._preset_actions.append(action)
            preset_menu.addAction(action)

    def _on_preset_selected(self, index: int, checked: bool) -> None:
        if not checked:
            return
        self._editor.select_preset(index)
        name = self._state.presets[index].name
        set_setting("preset", name)
        logger.debug(f"Preset chosen from menu: {name}")

    @pyqtSlot(object)
    def _on_theme_changed(self, _visuals) -> None:
        self._status_bar.showMessage(f"Theme: {self._state.selected_preset_label()}", 3000)
        self._sync_preset_menu()

    def _sync_preset_menu(self) -> None:
        """Check the menu entry of the selected preset, or none for a custom theme."""
        index = None if self._state.is_custom() else self._state.selected_preset_index
        for i, action in enumerate(self._preset_actions):
            action.setChecked(i == index)
