# -*- coding: utf-8 -*-
"""Selection, paging and item mutation over a list state."""

from __future__ import annotations

import logging

from listpicker.constants import ExitCode
from listpicker.core.state import ListState
from listpicker.models.list_item import ListItem

logger = logging.getLogger(__name__)


class ListNavigator:
    """Own the list state and apply navigation commands to it.

    Every operation returns ``True`` when something visible changed, so the
    caller can skip the redraw otherwise. Nothing changes once the navigator
    has been terminated.
    """

    def __init__(self, state: ListState) -> None:
        self.state = state
        self.exit_code: ExitCode | None = None
        self._settle_initial_selection()

    @property
    def terminated(self) -> bool:
        return self.exit_code is not None

    def current(self) -> ListItem | None:
        return self.state.selected_item()

    def _settle_initial_selection(self) -> None:
        state = self.state
        for index, item in enumerate(state.items):
            if not item.is_header_row:
                state.selected = index
                break
        self._scroll_into_view()

    def _window_span(self) -> int:
        return min(self.state.page_size, self.state.item_count)

    def _scroll_into_view(self) -> None:
        """Slide the window by the smallest amount that shows the selection."""
        state = self.state
        if not state.items:
            state.selected = state.first_visible = state.last_visible = 0
            return
        span = self._window_span()
        if state.last_visible - state.first_visible != span:
            state.last_visible = min(state.first_visible + span, state.item_count)
            state.first_visible = state.last_visible - span
        if state.selected < state.first_visible:
            state.first_visible = state.selected
            state.last_visible = state.first_visible + span
        elif state.selected >= state.last_visible:
            state.last_visible = state.selected + 1
            state.first_visible = state.last_visible - span

    def _snapshot(self) -> tuple[int, int, int]:
        return self.state.selected, self.state.first_visible, self.state.last_visible

    def _at_edge(self, delta: int) -> bool:
        """True when no selectable item lies beyond the selection in ``delta`` direction."""
        items = self.state.items
        index = self.state.selected + delta
        while 0 <= index < len(items):
            if not items[index].is_header_row:
                return False
            index += delta
        return True

    def move_selection(self, delta: int, repeat: bool = False) -> bool:
        """Step the selection up (-1) or down (+1), wrapping at the ends.

        A header is skipped with one extra step and no second check, so two
        adjacent headers can still end up selected. Auto-repeat stops at the
        edges instead of wrapping.
        """
        state = self.state
        if self.terminated or not state.items or delta not in (-1, 1):
            return False
        if repeat and self._at_edge(delta):
            return False

        count = state.item_count
        before = self._snapshot()
        target = state.selected + delta
        if 0 <= target < count and state.items[target].is_header_row:
            target += delta

        if target < 0 or target >= count:
            span = self._window_span()
            if target < 0:
                target = count - 1
                state.first_visible, state.last_visible = count - span, count
            else:
                target = 0
                state.first_visible, state.last_visible = 0, span
            nxt = target + delta
            if state.items[target].is_header_row and 0 <= nxt < count:
                target = nxt

        state.selected = target
        self._scroll_into_view()
        return self._snapshot() != before

    def page_or_cycle(self, direction: int) -> bool:
        """Cycle the selected item's option, or jump a page when no item has options."""
        if self.terminated or not self.state.items or direction not in (-1, 1):
            return False
        if self.state.has_options:
            return self._cycle_option(direction)
        return self._jump_page(direction)

    def _cycle_option(self, direction: int) -> bool:
        item = self.current()
        if item is None or item.is_header_row or not item.is_enabled or not item.options:
            return False
        previous = item.option_index
        item.option_index = (previous + direction) % len(item.options)
        logger.debug("Option for %r: %d -> %d", item.name, previous, item.option_index)
        return item.option_index != previous

    def _jump_page(self, direction: int) -> bool:
        state = self.state
        count = state.item_count
        page = state.page_size
        span = self._window_span()
        before = self._snapshot()

        target = state.selected + direction * page
        if target < 0:
            target = 0
            state.first_visible, state.last_visible = 0, span
        elif target >= count:
            target = count - 1
            state.first_visible, state.last_visible = count - span, count
        elif direction < 0 and target < state.first_visible:
            state.first_visible = max(0, state.first_visible - page)
            state.last_visible = state.first_visible + span
        elif direction > 0 and target >= state.last_visible:
            state.last_visible = min(state.last_visible + page, count)
            state.first_visible = state.last_visible - span

        if state.items[target].is_header_row:
            for candidate in (target + direction, target - direction):
                if 0 <= candidate < count and not state.items[candidate].is_header_row:
                    target = candidate
                    break

        state.selected = target
        self._scroll_into_view()
        return self._snapshot() != before

    def toggle_enabled(self) -> bool:
        """Flip the enabled flag of the selected item if it supports enabling."""
        item = self.current()
        if self.terminated or item is None or item.is_header_row or not item.can_toggle:
            return False
        item.enabled = not item.is_enabled
        logger.debug("Item %r enabled=%s", item.name, item.enabled)
        return True

    def terminate(self, exit_code: ExitCode) -> None:
        """Record the outcome; later calls keep the first outcome."""
        if self.terminated:
            return
        self.exit_code = ExitCode(exit_code)
        logger.debug("Terminated with exit code %d", self.exit_code)
