# -*- coding: utf-8 -*-
"""List item data model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ListItem:
    """One row of the picker.

    Optional fields are ``None`` when the input never set them, so the result
    writer can leave them out again. ``option_index`` is the live option
    choice; ``selected_option`` only records the value read at load.
    """

    name: str
    is_header: bool | None = None
    enabled: bool | None = None
    supports_enabling: bool | None = None
    options: list[str] = field(default_factory=list)
    selected_option: int | None = None
    option_index: int = 0

    def __post_init__(self) -> None:
        if self.selected_option is not None:
            self.option_index = self.selected_option

    @property
    def is_header_row(self) -> bool:
        return bool(self.is_header)

    @property
    def is_enabled(self) -> bool:
        return True if self.enabled is None else self.enabled

    @property
    def can_toggle(self) -> bool:
        return bool(self.supports_enabling)

    @property
    def current_option(self) -> str | None:
        if not self.options:
            return None
        return self.options[self.option_index]
