"""Color swatch button backed by QColorDialog."""

from typing import Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QColorDialog, QPushButton, QWidget

from qthematic.core.color import Color32

from .theme_manager import from_qcolor, to_qcolor


class ColorButton(QPushButton):
    """Shows a color swatch; clicking opens a picker with alpha.

    ``color_changed`` fires only for user picks, not for :meth:`set_color`.
    """

    color_changed = pyqtSignal(object)  # Color32

    def __init__(self, color: Color32, title: str = "Pick color", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._color = color
        self._title = title
        self.setFixedSize(44, 20)
        self.clicked.connect(self._pick)
        self._refresh()

    def color(self) -> Color32:
        return self._color

    def set_color(self, color: Color32) -> None:
        if color == self._color:
            return
        self._color = color
        self._refresh()

    def choose(self, color: Color32) -> None:
        """Apply a picked color as if the user chose it."""
        self.set_color(color)
        self.color_changed.emit(color)

    def _pick(self) -> None:
        picked = QColorDialog.getColor(
            to_qcolor(self._color),
            self,
            self._title,
            QColorDialog.ColorDialogOption.ShowAlphaChannel,
        )
        if picked.isValid():
            self.choose(from_qcolor(picked))

    def _refresh(self) -> None:
        c = self._color
        self.setToolTip(c.to_hex())
        # Own stylesheet so the app theme never recolors the swatch
        self.setStyleSheet(
            f"QPushButton {{ background-color: rgba({c.r}, {c.g}, {c.b}, {c.a}); "
            f"border: 1px solid rgba(128, 128, 128, 255); border-radius: 3px; }}"
        )
