# -*- coding: utf-8 -*-
"""Render the final list state for stdout."""

from __future__ import annotations

import json
from typing import Any

from listpicker.constants import DEFAULT_ITEMS_KEY
from listpicker.core.state import ListState
from listpicker.models.list_item import ListItem


class SerializeError(ValueError):
    """Raised when the result cannot be rendered."""


def item_to_dict(item: ListItem) -> dict[str, Any]:
    """Build the output object, keeping only fields the input had set."""
    if item.is_header_row:
        return {"name": item.name, "is_header": True}

    data: dict[str, Any] = {"name": item.name}
    if item.enabled is not None or item.supports_enabling is not None:
        data["enabled"] = item.is_enabled
    if item.selected_option is not None:
        data["selected_option"] = item.option_index
    if item.supports_enabling is not None:
        data["supports_enabling"] = item.supports_enabling
    if item.options:
        data["options"] = list(item.options)
    return data


def state_to_dict(state: ListState, item_key: str = "") -> dict[str, Any]:
    return {
        item_key or DEFAULT_ITEMS_KEY: [item_to_dict(item) for item in state.items],
        "selected": state.selected,
    }


def serialize_result(state: ListState, mode: str = "selected", item_key: str = "") -> str:
    """Return the selected name (``selected``) or a JSON dump of the list (``state``)."""
    if mode == "selected":
        item = state.selected_item()
        if item is None:
            raise SerializeError("No item is selected")
        text = item.name
    elif mode == "state":
        try:
            text = json.dumps(state_to_dict(state, item_key), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializeError(f"Failed to encode list state: {exc}") from exc
    else:
        raise SerializeError(f"Unsupported stdout value: {mode}")

    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SerializeError(f"Result is not encodable as UTF-8: {exc}") from exc
    return text
