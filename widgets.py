import logging

from PySide6.QtWidgets import QLabel, QFrame, QVBoxLayout, QApplication
from PySide6.QtCore import Qt, Signal, QTimer, Property

from color_logic import hsl_to_css, hsl_to_hex
from styles import style_rule

logger = logging.getLogger(__name__)


class ClipboardUnavailable(RuntimeError):
    """Raised when text cannot be written to the system clipboard."""


def copy_to_clipboard(text):
    clipboard = QApplication.clipboard()
    if clipboard is None:
        raise ClipboardUnavailable("no system clipboard")
    clipboard.setText(text)
    # Some platforms drop the write silently
    if clipboard.text() != text:
        raise ClipboardUnavailable(f"clipboard rejected {text!r}")


class CopyLabel(QLabel):
    """
    A label that copies its text to clipboard on click and signals interactions.
    Uses dynamic property to handle flash styling without resetting font styles.
    Copy failures are logged, never shown.
    """
    hovered = Signal(bool)
    copied = Signal(str)

    def __init__(self, text="", parent=None):
        super().__init__(text, parent)
        self.setObjectName("CodeLabel")
        self.setCursor(Qt.PointingHandCursor)
        self.setAlignment(Qt.AlignCenter)

        self._flashing = False

        self.flash_timer = QTimer(self)
        self.flash_timer.timeout.connect(self.reset_style)
        self.flash_timer.setSingleShot(True)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.copy_text()

    def copy_text(self):
        text = self.text()
        try:
            copy_to_clipboard(text)
        except ClipboardUnavailable as e:
            logger.error("copy fail: %s", e)
            return False
        logger.info("copy success: %s", text)
        self.flash_effect()
        self.copied.emit(text)
        return True

    def enterEvent(self, event):
        self.hovered.emit(True)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.hovered.emit(False)
        super().leaveEvent(event)

    def get_flashing(self):
        return self._flashing

    def set_flashing(self, val):
        self._flashing = val
        self.style().unpolish(self)
        self.style().polish(self)

    flashing = Property(bool, get_flashing, set_flashing)

    def flash_effect(self):
        self.set_flashing(True)
        self.flash_timer.start(150)

    def reset_style(self):
        self.set_flashing(False)


class SwatchFrame(QFrame):
    """
    One palette color: a filled frame with its hex code on top.
    """
    def __init__(self, name, parent=None):
        super().__init__(parent)
        # e.g. "primary" -> objectName "PrimarySwatch"
        self.setObjectName(f"{name.capitalize()}Swatch")
        self.setMinimumSize(160, 220)

        self.color = None
        self.color_hex = None

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        self.label = CopyLabel()
        self.label.hovered.connect(self.set_outline)
        layout.addWidget(self.label, 0, Qt.AlignCenter)

    def set_color(self, hsl):
        self.color = hsl
        self.color_hex = hsl_to_hex(*hsl)
        self.label.setText(self.color_hex)
        self.setToolTip(hsl_to_css(hsl))
        self.set_outline(False)

    def set_outline(self, active):
        declarations = {"background-color": self.color_hex or "#000000"}
        if active:
            declarations["border"] = "2px solid #ffffff"
        self.setStyleSheet(style_rule("#" + self.objectName(), declarations))
