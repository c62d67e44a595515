# -*- coding: utf-8 -*-
"""Abstract input commands and their effect on the navigator."""

from __future__ import annotations

from enum import Enum

from listpicker.constants import ExitCode
from listpicker.core.navigator import ListNavigator
from listpicker.models.picker_options import PickerOptions


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    ACTION = "action"
    ENABLE = "enable"
    MENU = "menu"
    INTERRUPT = "interrupt"


TERMINAL_EXIT_CODES: dict[Command, ExitCode] = {
    Command.CONFIRM: ExitCode.SUCCESS,
    Command.CANCEL: ExitCode.CANCEL,
    Command.ACTION: ExitCode.ACTION,
    Command.MENU: ExitCode.MENU,
    Command.INTERRUPT: ExitCode.INTERRUPTED,
}

DPAD_COMMANDS: dict[str, Command] = {
    "UP": Command.UP,
    "DOWN": Command.DOWN,
    "LEFT": Command.LEFT,
    "RIGHT": Command.RIGHT,
}

ROLE_COMMANDS: dict[str, Command] = {
    "confirm": Command.CONFIRM,
    "cancel": Command.CANCEL,
    "action": Command.ACTION,
    "enable": Command.ENABLE,
}


def resolve_button(options: PickerOptions, button: str) -> Command | None:
    """Translate a physical button into the command it is bound to."""
    if button == "MENU":
        return Command.MENU
    if button in DPAD_COMMANDS:
        return DPAD_COMMANDS[button]
    role = options.button_roles().get(button)
    if role is None:
        return None
    return ROLE_COMMANDS[role]


def apply_command(navigator: ListNavigator, command: Command, repeat: bool = False) -> bool:
    """Apply one command; returns whether a redraw is needed."""
    if navigator.terminated:
        return False
    if command in TERMINAL_EXIT_CODES:
        navigator.terminate(TERMINAL_EXIT_CODES[command])
        return False
    if command is Command.UP:
        return navigator.move_selection(-1, repeat=repeat)
    if command is Command.DOWN:
        return navigator.move_selection(1, repeat=repeat)
    if command is Command.LEFT:
        return navigator.page_or_cycle(-1)
    if command is Command.RIGHT:
        return navigator.page_or_cycle(1)
    if command is Command.ENABLE:
        return navigator.toggle_enabled()
    return False
