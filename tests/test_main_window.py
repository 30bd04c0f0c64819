import json
import logging
import random
import re

import pytest

import main
from main import (DEFAULT_SETTINGS, SWATCH_NAMES, MainWindow, configure_logging,
                  load_settings)
from palette_logic import palette_hex_codes


def hue_distance(a, b):
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


@pytest.fixture
def window(qapp):
    win = MainWindow(dict(DEFAULT_SETTINGS), rng=random.Random(1))
    yield win
    win.close()


def test_initial_palette_rendered(window):
    codes = window.hex_codes()
    assert len(codes) == 3
    assert all(re.fullmatch(r"#[0-9a-f]{6}", c) for c in codes)

    p = window.palette
    assert p.secondary.h - p.primary.h == pytest.approx(165)
    assert window.selected_boldness() == "balanced"
    assert window.selected_warmth() is None


def test_generate_uses_selected_boldness_and_warmth(window):
    window.boldness_radios["bold"].setChecked(True)
    window.warmth_boxes["cool"].setChecked(True)

    window.generate_btn.click()

    p = window.palette
    assert 90 <= p.primary.h <= 270
    assert p.secondary.h - p.primary.h == pytest.approx(120)
    assert 0.5 <= p.primary.s <= 1.0
    assert 0.5 <= p.primary.l <= 0.8
    assert window.swatches["secondary"].label.text() == window.hex_codes()[1]


def test_warm_generation_keeps_reserved_spread(window):
    window.boldness_radios["reserved"].setChecked(True)
    window.warmth_boxes["warm"].setChecked(True)
    for _ in range(20):
        window.generate()
        p = window.palette
        assert -90 <= p.primary.h <= 45
        assert hue_distance(p.secondary.h, p.primary.h) == pytest.approx(30)


def test_warmth_choices_are_exclusive(window):
    window.warmth_boxes["cool"].setChecked(True)
    window.warmth_boxes["warm"].setChecked(True)
    assert not window.warmth_boxes["cool"].isChecked()
    assert window.selected_warmth() == "warm"

    window.warmth_boxes["warm"].setChecked(False)
    assert window.selected_warmth() is None


def test_no_boldness_selected_gives_single_color(window):
    window.boldness_buttons.setExclusive(False)
    for radio in window.boldness_radios.values():
        radio.setChecked(False)

    window.generate()
    codes = window.hex_codes()
    assert codes[0] == codes[1] == codes[2]


def test_load_settings_defaults_when_missing(tmp_path):
    assert load_settings(str(tmp_path / "missing.json")) == DEFAULT_SETTINGS


def test_load_settings_merges_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"boldness": "bold", "warmth": "cool", "unknown": 1}))
    settings = load_settings(str(path))
    assert settings["boldness"] == "bold"
    assert settings["warmth"] == "cool"
    assert "unknown" not in settings


def test_load_settings_rejects_bad_values(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"boldness": "loud", "warmth": "tepid"}))
    with caplog.at_level(logging.WARNING):
        settings = load_settings(str(path))
    assert settings["boldness"] == "balanced"
    assert settings["warmth"] is None
    assert "Unknown boldness" in caplog.text


def test_load_settings_ignores_broken_json(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING):
        assert load_settings(str(path)) == DEFAULT_SETTINGS
    assert "unreadable" in caplog.text


def test_load_settings_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"always_on_top": True}))
    monkeypatch.setenv("HUE_SPREAD_SETTINGS", str(path))
    assert load_settings()["always_on_top"] is True


def test_hex_codes_follow_the_palette(window):
    window.boldness_radios["balanced"].setChecked(True)
    window.warmth_boxes["warm"].setChecked(True)
    for _ in range(10):
        window.generate()
        assert window.hex_codes() == palette_hex_codes(window.palette)
        assert [window.swatches[n].label.text() for n in SWATCH_NAMES] == window.hex_codes()
        assert all(0 <= window.swatches[n].color.h < 360 for n in SWATCH_NAMES)


@pytest.mark.parametrize("bad_level", ["basic_format", "verbose", [10], None, 10])
def test_load_settings_rejects_bad_log_level(tmp_path, caplog, bad_level):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": bad_level}))
    with caplog.at_level(logging.WARNING):
        settings = load_settings(str(path))
    assert settings["log_level"] == DEFAULT_SETTINGS["log_level"]
    assert "Unknown log_level" in caplog.text


def test_load_settings_accepts_lowercase_log_level(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": "debug"}))
    assert load_settings(str(path))["log_level"] == "DEBUG"


def test_configure_logging_changes_level_on_later_calls():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging()
        assert root.level == logging.INFO
        configure_logging("DEBUG")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_run_configures_logging_before_reading_settings(monkeypatch):
    calls = []

    class FakeApp:
        def __init__(self, argv):
            pass

        def setStyleSheet(self, sheet):
            pass

        def exec(self):
            return 0

    class FakeWindow:
        def __init__(self, settings):
            calls.append(("window", settings["log_level"]))

        def show(self):
            pass

    def fake_load_settings():
        calls.append(("load",))
        return dict(DEFAULT_SETTINGS, log_level="DEBUG")

    monkeypatch.setattr(main, "configure_logging", lambda level="INFO": calls.append(("configure", level)))
    monkeypatch.setattr(main, "load_settings", fake_load_settings)
    monkeypatch.setattr(main, "QApplication", FakeApp)
    monkeypatch.setattr(main, "MainWindow", FakeWindow)

    assert main.run() == 0
    assert calls == [("configure", "INFO"), ("load",), ("configure", "DEBUG"), ("window", "DEBUG")]
