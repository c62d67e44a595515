# -*- coding: utf-8 -*-
"""Translate key events into picker commands."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, Qt, pyqtSignal

from listpicker.constants import DPAD_BUTTONS
from listpicker.core.commands import DPAD_COMMANDS, Command, apply_command, resolve_button
from listpicker.core.navigator import ListNavigator
from listpicker.models.picker_options import PickerOptions

logger = logging.getLogger(__name__)


def build_key_lookup(keymap: dict[str, list[str]]) -> dict[int, str]:
    """Resolve Qt key names (``Return``, ``A``, ``Up``) to physical buttons."""
    lookup: dict[int, str] = {}
    for button, names in keymap.items():
        for name in names:
            key = getattr(Qt.Key, f"Key_{name}", None)
            if key is None:
                logger.warning("Unknown key name %r for button %s", name, button)
                continue
            lookup[key.value] = button
    return lookup


class PickerController(QObject):
    """Own the navigator for the lifetime of the window."""

    state_changed = pyqtSignal()
    finished = pyqtSignal(int)

    def __init__(
        self,
        navigator: ListNavigator,
        options: PickerOptions,
        keymap: dict[str, list[str]],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.navigator = navigator
        self.options = options
        self._keys = build_key_lookup(keymap)
        self._finished_emitted = False

    def button_for_key(self, key: int) -> str | None:
        return self._keys.get(int(key))

    def handle_key_press(self, key: int, auto_repeat: bool = False) -> bool:
        """D-pad buttons act on press, including auto-repeat."""
        button = self.button_for_key(key)
        if button not in DPAD_BUTTONS:
            return False
        return self.dispatch(DPAD_COMMANDS[button], repeat=auto_repeat)

    def handle_key_release(self, key: int, auto_repeat: bool = False) -> bool:
        """Face and menu buttons act once, on release."""
        if auto_repeat:
            return False
        button = self.button_for_key(key)
        if button is None or button in DPAD_BUTTONS:
            return False
        command = resolve_button(self.options, button)
        if command is None:
            return False
        return self.dispatch(command)

    def dispatch(self, command: Command, repeat: bool = False) -> bool:
        redraw = apply_command(self.navigator, command, repeat=repeat)
        if redraw:
            self.state_changed.emit()
        if self.navigator.terminated and not self._finished_emitted:
            self._finished_emitted = True
            logger.info("Picker finished with exit code %d", self.navigator.exit_code)
            self.finished.emit(int(self.navigator.exit_code))
        return redraw
