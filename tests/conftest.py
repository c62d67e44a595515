# -*- coding: utf-8 -*-
"""Shared pytest fixtures for the list picker."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def fruit_names() -> list[str]:
    return ["Apple", "Banana", "Cherry"]


@pytest.fixture
def rich_items() -> list[dict]:
    return [
        {"name": "Display", "is_header": True},
        {"name": "Color", "options": ["#ff0000", "#00ff00"], "selected_option": 1},
        {"name": "Wi-Fi", "supports_enabling": True, "enabled": False},
        {"name": "Bluetooth"},
        {"name": "Audio", "is_header": True},
        {"name": "Volume", "options": ["low", "mid", "high"]},
    ]


@pytest.fixture
def rich_json_file(tmp_path: Path, rich_items: list[dict]) -> Path:
    path = tmp_path / "settings_menu.json"
    path.write_text(json.dumps({"items": rich_items}, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.txt"
    path.write_text("Apple\n\n   \nBanana\r\n  Cherry pie\n", encoding="utf-8")
    return path


@pytest.fixture
def default_config() -> dict:
    from listpicker.config import get_default_config

    return get_default_config()


@pytest.fixture
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    app.processEvents()


@pytest.fixture(autouse=True)
def reset_logging():
    import logging

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for attr in ("_listpicker_logging_configured", "_listpicker_session_log"):
        if hasattr(root, attr):
            delattr(root, attr)


@pytest.fixture
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    settings_dir = tmp_path / "config"
    settings_dir.mkdir()
    monkeypatch.setenv("LISTPICKER_SETTINGS", str(settings_dir / "settings.json"))
    for name in ("LISTPICKER_ROW_COUNT", "LISTPICKER_LOG_LEVEL", "LISTPICKER_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    return settings_dir
