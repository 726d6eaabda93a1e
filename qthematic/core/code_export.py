"""Render a theme as Python source that recreates it."""

from .attributes import ATTRIBUTES, AttributeKind, OverrideValue
from .persistence import save
from .theme_config import ThemeConfig


def _literal(kind: AttributeKind, value: OverrideValue) -> str:
    if kind is AttributeKind.COLOR:
        return "Color32({}, {}, {}, {})".format(*value)
    return repr(value)


def to_source_snippet(config: ThemeConfig) -> str:
    """Python source that builds the base style and applies each override.

    Set keys appear once each, in enumeration order.
    """
    base = "dark" if config.dark_mode else "light"
    title = " ".join(config.name.split())
    lines = [
        f"# Theme: {title}",
        "from qthematic.core.attributes import AttributeKey",
        "from qthematic.core.color import Color32",
        "from qthematic.core.merge import with_attribute",
        "from qthematic.core.visuals import Visuals",
        "from qthematic.gui.theme_manager import ThemeManager",
        "",
        "",
        "def apply_theme():",
        f"    visuals = Visuals.{base}()",
    ]
    for key, value in config.items():
        literal = _literal(ATTRIBUTES[key].kind, value)
        lines.append(f"    visuals = with_attribute(visuals, AttributeKey.{key.name}, {literal})")
    lines.append("    ThemeManager.instance().install(visuals)")
    return "\n".join(lines) + "\n"


def to_embedded_snippet(config: ThemeConfig) -> str:
    """Python source that embeds the saved theme document and installs it."""
    text = save(config).decode("utf-8")
    if "'''" in text or "\\" in text:
        document = repr(text)
    else:
        document = f"'''{text}'''"
    return (
        "from qthematic.core.merge import to_visuals\n"
        "from qthematic.core.persistence import load\n"
        "from qthematic.gui.theme_manager import ThemeManager\n"
        "\n"
        f"THEME = {document}\n"
        "\n"
        "ThemeManager.instance().install(to_visuals(load(THEME)))\n"
    )
