# -*- coding: utf-8 -*-
"""Validated command line options."""

from __future__ import annotations

from dataclasses import dataclass

from listpicker.constants import (
    DEFAULT_BUTTON_TEXTS,
    DEFAULT_BUTTONS,
    FACE_BUTTONS,
    INPUT_FORMATS,
    STDOUT_VALUES,
)


class OptionsError(ValueError):
    """Raised when the command line options are inconsistent."""


@dataclass
class PickerOptions:
    file: str = ""
    format: str = "json"
    item_key: str = ""
    header: str = ""
    stdout_value: str = "selected"
    confirm_button: str = DEFAULT_BUTTONS["confirm"]
    confirm_text: str = DEFAULT_BUTTON_TEXTS["confirm"]
    cancel_button: str = DEFAULT_BUTTONS["cancel"]
    cancel_text: str = DEFAULT_BUTTON_TEXTS["cancel"]
    action_button: str = DEFAULT_BUTTONS["action"]
    action_text: str = DEFAULT_BUTTON_TEXTS["action"]
    enable_button: str = DEFAULT_BUTTONS["enable"]

    def button_roles(self) -> dict[str, str]:
        """Map assigned physical buttons to their role."""
        roles = {
            "confirm": self.confirm_button,
            "cancel": self.cancel_button,
            "action": self.action_button,
            "enable": self.enable_button,
        }
        return {button: role for role, button in roles.items() if button}

    def validate(self) -> list[str]:
        errors: list[str] = []
        for role in ("confirm", "cancel"):
            button = getattr(self, f"{role}_button")
            if button not in FACE_BUTTONS:
                errors.append(f"Invalid {role} button {button!r}; expected one of {', '.join(FACE_BUTTONS)}.")
        for role in ("action", "enable"):
            button = getattr(self, f"{role}_button")
            if button and button not in FACE_BUTTONS:
                errors.append(f"Invalid {role} button {button!r}; expected one of {', '.join(FACE_BUTTONS)}.")

        assigned = [
            button
            for button in (self.confirm_button, self.cancel_button, self.action_button, self.enable_button)
            if button
        ]
        if len(set(assigned)) != len(assigned):
            errors.append("Confirm, cancel, action and enable buttons must all be different.")

        if not self.file:
            errors.append("No file provided; use --file PATH or --file - for stdin.")
        if self.format not in INPUT_FORMATS:
            errors.append(f"Invalid format {self.format!r}; expected json or text.")
        if self.stdout_value not in STDOUT_VALUES:
            errors.append(f"Invalid stdout value {self.stdout_value!r}; expected selected or state.")
        return errors

    def ensure_valid(self) -> None:
        errors = self.validate()
        if errors:
            raise OptionsError(" ".join(errors))
