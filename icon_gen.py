from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor
from PySide6.QtCore import Qt, QRectF

from color_logic import hsl_to_hex
from palette_logic import derive_palette, DEFAULT_SPREAD


def create_app_icon():
    """
    Generates the application icon: a disc split into the three colors
    of a split-complementary palette.
    """
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setPen(Qt.NoPen)

    # White ring
    painter.setBrush(QColor("#ffffff"))
    painter.drawEllipse(4, 4, 56, 56)

    palette = derive_palette((200, 0.8, 0.6), DEFAULT_SPREAD)
    disc = QRectF(8, 8, 48, 48)
    # Qt angles are in 1/16th of a degree
    for i, color in enumerate(palette):
        painter.setBrush(QColor(hsl_to_hex(*color)))
        painter.drawPie(disc, (90 + i * 120) * 16, 120 * 16)

    painter.end()

    return QIcon(pixmap)
