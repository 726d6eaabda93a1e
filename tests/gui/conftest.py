import gc

import pytest
from PyQt6 import sip
from PyQt6.QtWidgets import QApplication

from qthematic.gui.theme_manager import ThemeManager


@pytest.fixture(autouse=True)
def _enforce_widget_cleanup():
    """Error if a test leaks qthematic.* widgets without cleanup.

    Defined first in conftest.py so it tears down last (LIFO), after
    _flush_qt_events has already processed deferred events and GC'd.
    Only flags visible top-level widgets from qthematic.* modules.
    """
    app = QApplication.instance()
    if app is None:
        yield
        return

    before = set(id(w) for w in app.allWidgets())
    yield

    gc.collect()
    app.processEvents()
    app.processEvents()

    leaked = [
        w for w in app.allWidgets()
        if id(w) not in before
        and w.parent() is None
        and not sip.isdeleted(w)
        and type(w).__module__.startswith("qthematic.")
        and w.isVisible()
    ]
    if leaked:
        names = [type(w).__name__ for w in leaked]
        for w in leaked:
            w.close()
            w.deleteLater()
        app.processEvents()
        pytest.fail(
            f"Leaked {len(leaked)} widget(s) without cleanup: {names}. "
            "Add qtbot.addWidget(w) so the widget is closed at teardown.",
            pytrace=False,
        )


@pytest.fixture(autouse=True)
def _fresh_theme_manager(qapp):
    """Each test gets its own ThemeManager and a clean app stylesheet."""
    ThemeManager._instance = None
    yield
    ThemeManager._instance = None
    qapp.setStyleSheet("")


@pytest.fixture(autouse=True)
def _flush_qt_events():
    """Flush deferred Qt events between tests.

    Two processEvents passes: the first drains the queue; the second catches
    anything the first pass enqueued (e.g. deleteLater queues a destroy event).
    """
    yield
    app = QApplication.instance()
    if app is None:
        return
    app.processEvents()
    gc.collect()
    app.processEvents()
