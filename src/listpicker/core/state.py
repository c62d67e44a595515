# -*- coding: utf-8 -*-
"""List state container."""

from __future__ import annotations

from dataclasses import dataclass, field

from listpicker.models.list_item import ListItem


@dataclass
class ListState:
    """Items plus the selection and the visible window ``[first_visible, last_visible)``."""

    items: list[ListItem] = field(default_factory=list)
    page_size: int = 1
    selected: int = 0
    first_visible: int = 0
    last_visible: int = 0
    has_options: bool = False

    @property
    def item_count(self) -> int:
        return len(self.items)

    def selected_item(self) -> ListItem | None:
        if not 0 <= self.selected < len(self.items):
            return None
        return self.items[self.selected]

    def visible_items(self) -> list[tuple[int, ListItem]]:
        return [(index, self.items[index]) for index in range(self.first_visible, self.last_visible)]
