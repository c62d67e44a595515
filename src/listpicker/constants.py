# -*- coding: utf-8 -*-
"""Application constants."""

from __future__ import annotations

from enum import IntEnum

APP_NAME = "listpicker"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "~/.config/listpicker/settings.json"
SETTINGS_ENV_VAR = "LISTPICKER_SETTINGS"

# Rows available to the list body, title included.
MAIN_ROW_COUNT = 8

STDIN_SENTINEL = "-"
DEFAULT_ITEMS_KEY = "items"

INPUT_FORMATS = ("json", "text")
STDOUT_VALUES = ("selected", "state")

FACE_BUTTONS = ("A", "B", "X", "Y")
DPAD_BUTTONS = ("UP", "DOWN", "LEFT", "RIGHT")
PHYSICAL_BUTTONS = FACE_BUTTONS + ("MENU",) + DPAD_BUTTONS

DEFAULT_BUTTONS = {
    "confirm": "A",
    "cancel": "B",
    "action": "",
    "enable": "Y",
}

DEFAULT_BUTTON_TEXTS = {
    "confirm": "SELECT",
    "cancel": "BACK",
    "action": "ACTION",
    "enable": "TOGGLE",
}

DEFAULT_KEYMAP = {
    "A": ["A", "Return"],
    "B": ["B", "Backspace"],
    "X": ["X"],
    "Y": ["Y", "Space"],
    "MENU": ["Escape"],
    "UP": ["Up"],
    "DOWN": ["Down"],
    "LEFT": ["Left"],
    "RIGHT": ["Right"],
}


class ExitCode(IntEnum):
    """Process exit codes reported to the calling script."""

    SUCCESS = 0
    ERROR = 1
    CANCEL = 2
    MENU = 3
    ACTION = 4
    PARSE_ERROR = 10
    SERIALIZE_ERROR = 11
    INTERRUPTED = 130


# Outcomes that print a result on stdout.
EMITTING_EXIT_CODES = frozenset({ExitCode.SUCCESS, ExitCode.ACTION})
