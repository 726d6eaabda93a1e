"""Shared test fixtures for the qthematic test suite.

Provides the session-wide QApplication, settings isolation, and small
factories for themes.
"""

import os
import sys

# GUI tests must run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from qthematic.core import settings
from qthematic.core.attributes import AttributeKey
from qthematic.core.color import Color32
from qthematic.core.theme_config import ThemeConfig


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication shared by all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a per-test location."""
    monkeypatch.setattr(settings, "SETTINGS_PATH", tmp_path / "config" / "settings.json")


@pytest.fixture
def config_factory():
    """Factory fixture: create ThemeConfigs from keyword overrides.

    ``config_factory(text_color=(255, 0, 0, 255))`` sets
    ``AttributeKey.TEXT_COLOR``.
    """
    def _make(name="Custom", dark_mode=True, **overrides):
        return ThemeConfig(
            name=name,
            dark_mode=dark_mode,
            overrides={AttributeKey(k): v for k, v in overrides.items()},
        )
    return _make


@pytest.fixture
def red():
    return Color32(255, 0, 0, 255)
