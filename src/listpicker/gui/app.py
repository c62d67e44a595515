# -*- coding: utf-8 -*-
"""Run the interactive picker inside a Qt event loop."""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication

from listpicker.constants import ExitCode
from listpicker.core.commands import Command
from listpicker.core.navigator import ListNavigator
from listpicker.gui.controller import PickerController
from listpicker.gui.picker_window import PickerWindow
from listpicker.models.picker_options import PickerOptions

logger = logging.getLogger(__name__)

# Idle tick so Python signal handlers get a chance to run.
PACING_INTERVAL_MS = 50


def run_picker(navigator: ListNavigator, options: PickerOptions, settings: dict[str, Any]) -> ExitCode:
    """Show the picker until a terminal command arrives; return its exit code."""
    app = QApplication.instance() or QApplication(sys.argv[:1])
    controller = PickerController(navigator, options, settings["keymap"])
    window = PickerWindow(controller)
    controller.finished.connect(lambda _code: app.quit())

    def _on_sigint(signum: int, frame: Any) -> None:
        del signum, frame
        controller.dispatch(Command.INTERRUPT)

    previous_handler = signal.signal(signal.SIGINT, _on_sigint)
    pacing = QTimer()
    pacing.timeout.connect(lambda: None)
    pacing.start(PACING_INTERVAL_MS)

    if settings["display"].get("fullscreen"):
        window.showFullScreen()
    else:
        window.show()
    window.activateWindow()
    window.setFocus()
    logger.debug("Picker window shown with %d item(s)", navigator.state.item_count)

    try:
        if not navigator.terminated:
            app.exec()
    finally:
        pacing.stop()
        signal.signal(signal.SIGINT, previous_handler)
        window.close()

    if navigator.exit_code is None:
        navigator.terminate(ExitCode.CANCEL)
    return navigator.exit_code
