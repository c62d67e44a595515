# -*- coding: utf-8 -*-
"""List picker window."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QKeyEvent
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from listpicker.constants import DEFAULT_BUTTON_TEXTS
from listpicker.core.commands import Command
from listpicker.gui.controller import PickerController
from listpicker.models.list_item import ListItem


def format_row(item: ListItem) -> str:
    """Text shown for one row."""
    text = item.name
    if item.is_header_row:
        return text
    if item.can_toggle:
        text = f"[{'x' if item.is_enabled else ' '}] {text}"
    option = item.current_option
    if option is not None:
        text = f"{text}  < {option} >"
    return text


class PickerWindow(QWidget):
    """Title, one label per visible row and a button hint bar."""

    def __init__(self, controller: PickerController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle(controller.options.header or "listpicker")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(4)

        self.title_label = QLabel(controller.options.header)
        self.title_label.setObjectName("titleLabel")
        self.title_label.setVisible(bool(controller.options.header))
        layout.addWidget(self.title_label)

        self.row_labels: list[QLabel] = []
        for _ in range(controller.navigator.state.page_size):
            label = QLabel("")
            label.setObjectName("rowLabel")
            layout.addWidget(label)
            self.row_labels.append(label)

        layout.addStretch(1)
        self.hint_label = QLabel(self.hint_text())
        self.hint_label.setObjectName("hintLabel")
        layout.addWidget(self.hint_label)

        controller.state_changed.connect(self.refresh)
        self.refresh()

    def hint_text(self) -> str:
        options = self.controller.options
        hints = []
        if options.enable_button and any(item.can_toggle for item in self.controller.navigator.state.items):
            hints.append(f"{options.enable_button} {DEFAULT_BUTTON_TEXTS['enable']}")
        if options.action_button:
            hints.append(f"{options.action_button} {options.action_text}")
        hints.append(f"{options.cancel_button} {options.cancel_text}")
        hints.append(f"{options.confirm_button} {options.confirm_text}")
        return "   ".join(hints)

    def refresh(self) -> None:
        state = self.controller.navigator.state
        visible = state.visible_items()
        for row, label in enumerate(self.row_labels):
            if row >= len(visible):
                label.setText("")
                label.setProperty("selected", False)
                label.setProperty("header", False)
                continue
            index, item = visible[row]
            label.setText(format_row(item))
            label.setProperty("selected", index == state.selected)
            label.setProperty("header", item.is_header_row)
            font = label.font()
            font.setBold(index == state.selected or item.is_header_row)
            label.setFont(font)
            label.setEnabled(item.is_header_row or item.is_enabled)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if self.controller.button_for_key(event.key()) is None:
            super().keyPressEvent(event)
            return
        self.controller.handle_key_press(event.key(), event.isAutoRepeat())
        event.accept()

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if self.controller.button_for_key(event.key()) is None:
            super().keyReleaseEvent(event)
            return
        self.controller.handle_key_release(event.key(), event.isAutoRepeat())
        event.accept()

    def closeEvent(self, event: QCloseEvent) -> None:
        # Closing the window without a button press counts as cancel.
        if not self.controller.navigator.terminated:
            self.controller.dispatch(Command.CANCEL)
        super().closeEvent(event)
