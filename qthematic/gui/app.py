"""
Application entry point and setup.
"""

import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt

# Configure PyQtGraph before any plot widget is created
import pyqtgraph as pg
pg.setConfigOptions(
    useOpenGL=False,
    antialias=True,
    enableExperimental=False,
)

from qthematic.core.errors import ThemeError
from qthematic.core.presets import DEFAULT_PRESET, PRESETS
from qthematic.core.randomizer import NumpyColorSource
from qthematic.core.session import ThemeEditorState
from qthematic.core.settings import get_setting
from qthematic.logging import get_logger

from .main_window import MainWindow
from .theme_manager import ThemeManager

logger = get_logger(__name__)


def create_app() -> QApplication:
    """Create and configure the QApplication."""
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("qthematic")
    app.setOrganizationName("qthematic")
    ThemeManager.instance(app)
    return app


def build_initial_state(
    theme_path: Optional[str] = None,
    preset: Optional[str] = None,
    random_seed: Optional[int] = None,
) -> ThemeEditorState:
    """Pick the starting theme: file, then seed, then preset, then settings."""
    state = ThemeEditorState()

    if theme_path:
        try:
            state.load_file(theme_path)
            return state
        except ThemeError as e:
            logger.error(f"Could not open {theme_path}: {e}")

    if random_seed is not None:
        state.randomize(NumpyColorSource(random_seed))
        return state

    name = preset or get_setting("preset", DEFAULT_PRESET)
    if name not in PRESETS:
        logger.warning(f"Unknown preset {name!r}, using {DEFAULT_PRESET}")
        name = DEFAULT_PRESET
    names = [p.name for p in state.presets]
    state.select_preset(names.index(name))
    return state


def run_app(
    theme_path: Optional[str] = None,
    preset: Optional[str] = None,
    random_seed: Optional[int] = None,
) -> int:
    """Run the theme editor demo application."""
    app = create_app()
    state = build_initial_state(theme_path, preset, random_seed)

    window = MainWindow(state)
    window.show()

    return app.exec()
