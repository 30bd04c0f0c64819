import sys
import os
import json
import logging
import random
from PySide6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout,
                               QHBoxLayout, QPushButton, QLabel, QGroupBox,
                               QRadioButton, QCheckBox, QButtonGroup)
from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon

from styles import STYLESHEET
from palette_logic import (BOLDNESS_SPREADS, WARMTH_HUE_RANGES, generate_palette,
                           initial_palette, palette_hex_codes)
from icon_gen import create_app_icon
from widgets import SwatchFrame

logger = logging.getLogger(__name__)

# --- Constants ---
SETTINGS_FILE = "settings.json"
SETTINGS_ENV = "HUE_SPREAD_SETTINGS"
DEFAULT_SETTINGS = {
    "boldness": "balanced",
    "warmth": None,
    "always_on_top": False,
    "log_level": "INFO",
}
SWATCH_NAMES = ("primary", "secondary", "tertiary")


def load_settings(path=None):
    """
    Read UI defaults from JSON, falling back to DEFAULT_SETTINGS for
    anything missing or invalid. The file is never written.
    """
    settings = dict(DEFAULT_SETTINGS)
    path = path or os.environ.get(SETTINGS_ENV, SETTINGS_FILE)
    if os.path.exists(path):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", path, e)
            data = {}
        if isinstance(data, dict):
            settings.update({k: v for k, v in data.items() if k in DEFAULT_SETTINGS})
        else:
            logger.warning("Ignoring settings file %s: expected a JSON object", path)

    if settings["boldness"] is not None and settings["boldness"] not in BOLDNESS_SPREADS:
        logger.warning("Unknown boldness %r in settings, using default", settings["boldness"])
        settings["boldness"] = DEFAULT_SETTINGS["boldness"]
    if settings["warmth"] is not None and settings["warmth"] not in WARMTH_HUE_RANGES:
        logger.warning("Unknown warmth %r in settings, using default", settings["warmth"])
        settings["warmth"] = DEFAULT_SETTINGS["warmth"]
    level = settings["log_level"]
    if not isinstance(logging.getLevelName(str(level).upper()), int):
        logger.warning("Unknown log_level %r in settings, using default", level)
        level = DEFAULT_SETTINGS["log_level"]
    settings["log_level"] = str(level).upper()
    return settings


def configure_logging(level="INFO"):
    # basicConfig only installs the handler once; later calls just change the level
    logging.basicConfig(format="%(levelname)s: %(message)s")
    logging.getLogger().setLevel(level)


def load_icon():
    base_path = getattr(sys, '_MEIPASS', os.path.dirname(os.path.abspath(__file__)))
    for name in ["icon.ico", "icon.png"]:
        path = os.path.join(base_path, name)
        if os.path.exists(path):
            return QIcon(path)
    return create_app_icon()


class MainWindow(QMainWindow):
    def __init__(self, settings=None, rng=None):
        super().__init__()
        self.setWindowTitle("Hue Spread")
        self.setWindowIcon(load_icon())

        self.app_settings = settings or dict(DEFAULT_SETTINGS)
        self.rng = rng or random.Random()
        self.palette = None

        if self.app_settings.get("always_on_top"):
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        self.setup_ui()

        self.show_palette(initial_palette(self.rng))

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setSpacing(10)
        main_layout.setContentsMargins(10, 10, 10, 10)

        title = QLabel("Palette")
        title.setObjectName("SectionTitle")
        main_layout.addWidget(title)

        # Swatches
        swatch_row = QHBoxLayout()
        swatch_row.setSpacing(10)
        self.swatches = {}
        for name in SWATCH_NAMES:
            swatch = SwatchFrame(name)
            self.swatches[name] = swatch
            swatch_row.addWidget(swatch)
        main_layout.addLayout(swatch_row)

        # Options
        options = QHBoxLayout()

        boldness_group = QGroupBox("Boldness")
        boldness_layout = QVBoxLayout()
        self.boldness_buttons = QButtonGroup(self)
        self.boldness_buttons.setExclusive(True)
        self.boldness_radios = {}
        for name in ("reserved", "balanced", "bold"):
            radio = QRadioButton(name.capitalize())
            radio.setChecked(name == self.app_settings.get("boldness"))
            self.boldness_buttons.addButton(radio)
            self.boldness_radios[name] = radio
            boldness_layout.addWidget(radio)
        boldness_group.setLayout(boldness_layout)
        options.addWidget(boldness_group)

        warmth_group = QGroupBox("Warmth")
        warmth_layout = QVBoxLayout()
        self.warmth_boxes = {}
        for name in ("cool", "warm"):
            box = QCheckBox(name.capitalize())
            box.setChecked(name == self.app_settings.get("warmth"))
            box.toggled.connect(lambda checked, n=name: self.on_warmth_toggled(n, checked))
            self.warmth_boxes[name] = box
            warmth_layout.addWidget(box)
        warmth_group.setLayout(warmth_layout)
        options.addWidget(warmth_group)

        options.addStretch()

        self.generate_btn = QPushButton("Generate")
        self.generate_btn.setObjectName("GenerateButton")
        self.generate_btn.setCursor(Qt.PointingHandCursor)
        self.generate_btn.clicked.connect(self.generate)
        options.addWidget(self.generate_btn, 0, Qt.AlignBottom)

        main_layout.addLayout(options)

    def on_warmth_toggled(self, name, checked):
        # Cool and warm are exclusive, but neither is required
        if not checked:
            return
        for other, box in self.warmth_boxes.items():
            if other != name and box.isChecked():
                box.setChecked(False)

    def selected_boldness(self):
        for name, radio in self.boldness_radios.items():
            if radio.isChecked():
                return name
        return None

    def selected_warmth(self):
        for name, box in self.warmth_boxes.items():
            if box.isChecked():
                return name
        return None

    def generate(self):
        palette = generate_palette(self.selected_boldness(), self.selected_warmth(), self.rng)
        self.show_palette(palette)

    def show_palette(self, palette):
        self.palette = palette
        for name, color in zip(SWATCH_NAMES, palette.normalized()):
            self.swatches[name].set_color(color)
        logger.debug("Showing %s", self.hex_codes())

    def hex_codes(self):
        return palette_hex_codes(self.palette)


def run():
    configure_logging()
    settings = load_settings()
    configure_logging(settings["log_level"])

    os.environ["QT_AUTO_SCREEN_SCALE_FACTOR"] = "1"
    app = QApplication(sys.argv)
    app.setStyleSheet(STYLESHEET)

    window = MainWindow(settings)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
