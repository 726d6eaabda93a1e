"""Smoke tests that verify the installed package layout."""

import importlib


def test_all_subpackages_importable():
    """Every qthematic module must be importable."""
    modules = [
        "qthematic",
        "qthematic.logging",
        "qthematic.core.attributes",
        "qthematic.core.code_export",
        "qthematic.core.merge",
        "qthematic.core.persistence",
        "qthematic.core.presets",
        "qthematic.core.randomizer",
        "qthematic.core.session",
        "qthematic.core.settings",
        "qthematic.gui.app",
        "qthematic.gui.editor_panel",
        "qthematic.gui.main_window",
        "qthematic.gui.preview",
        "qthematic.gui.theme_manager",
    ]
    for name in modules:
        importlib.import_module(name)


def test_core_does_not_import_qt():
    """The theme model must stay usable without a GUI toolkit."""
    import qthematic.core.session as session

    assert "PyQt6" not in session.__dict__
    for name in ("ThemeEditorState", "to_visuals", "load_from_file"):
        assert getattr(session, name).__module__.startswith("qthematic.core")
