# -*- coding: utf-8 -*-
"""Build a list state from plain text or JSON input."""

from __future__ import annotations

import logging
from typing import Any, BinaryIO

import json5

from listpicker.constants import MAIN_ROW_COUNT
from listpicker.core.state import ListState
from listpicker.models.list_item import ListItem
from listpicker.utils.file_utils import read_source_bytes

logger = logging.getLogger(__name__)

ASCII_WHITESPACE = " \t\n\r\v\f"


class LoadError(Exception):
    """Base class for input problems that abort the run."""


class SourceReadError(LoadError):
    """Raised when the file or stdin cannot be read."""


class JsonParseError(LoadError):
    """Raised when the input is not valid JSON (comments allowed)."""


class ItemsKeyError(LoadError):
    """Raised when the items array is missing or is not an array."""


def page_size_for(title: str, row_count: int = MAIN_ROW_COUNT) -> int:
    """Rows left for items once the title row is taken."""
    return max(1, row_count - (1 if title else 0))


def parse_text_items(raw: bytes) -> list[ListItem]:
    """One item per line holding anything besides ASCII whitespace."""
    text = raw.decode("utf-8", errors="replace")
    items: list[ListItem] = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if not line.strip(ASCII_WHITESPACE):
            continue
        items.append(ListItem(name=line))
    return items


def _optional_bool(entry: dict[str, Any], key: str, position: int) -> bool | None:
    if key not in entry:
        return None
    value = entry[key]
    if isinstance(value, bool):
        return value
    logger.warning("Item %d: ignoring non-boolean %s=%r", position, key, value)
    return None


def _options(entry: dict[str, Any], position: int) -> list[str]:
    raw = entry.get("options")
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Item %d: options must be an array, got %r", position, raw)
        return []
    options = [value for value in raw if isinstance(value, str)]
    if len(options) != len(raw):
        logger.warning("Item %d: dropped %d non-string option(s)", position, len(raw) - len(options))
    return options


def _selected_option(entry: dict[str, Any], options: list[str], position: int) -> int | None:
    if "selected_option" not in entry:
        return None
    value = entry["selected_option"]
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Item %d: ignoring non-integer selected_option=%r", position, value)
        return None

    upper = max(len(options) - 1, 0)
    if value < 0 or value > upper:
        clamped = min(max(value, 0), upper)
        logger.warning(
            "Item %d: selected_option %d out of range for %d option(s), using %d",
            position,
            value,
            len(options),
            clamped,
        )
        return clamped
    return value


def parse_item(entry: Any, position: int) -> ListItem:
    """Turn one JSON array element into a list item."""
    if isinstance(entry, str):
        return ListItem(name=entry)
    if not isinstance(entry, dict):
        logger.warning("Item %d: expected a string or an object, got %r", position, entry)
        return ListItem(name="")

    name = entry.get("name")
    if not isinstance(name, str):
        name = ""

    options = _options(entry, position)
    item = ListItem(
        name=name,
        is_header=_optional_bool(entry, "is_header", position),
        enabled=_optional_bool(entry, "enabled", position),
        supports_enabling=_optional_bool(entry, "supports_enabling", position),
        options=options,
        selected_option=_selected_option(entry, options, position),
    )
    if item.enabled is False and not item.can_toggle:
        logger.warning("Item %d (%s) is disabled without supporting enabling", position, name)
    return item


def parse_json_items(raw: bytes, item_key: str = "") -> list[ListItem]:
    """Parse a JSON array of items, at the root or under ``item_key``."""
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise JsonParseError(f"Input is not valid UTF-8: {exc}") from exc

    try:
        root = json5.loads(text)
    except ValueError as exc:
        raise JsonParseError(f"Failed to parse JSON: {exc}") from exc
    except RecursionError as exc:
        raise JsonParseError("Failed to parse JSON: nesting is too deep") from exc

    if item_key:
        if not isinstance(root, dict):
            raise ItemsKeyError(f"Expected a JSON object holding '{item_key}'")
        if item_key not in root:
            raise ItemsKeyError(f"Missing items key '{item_key}'")
        entries = root[item_key]
    else:
        entries = root

    if not isinstance(entries, list):
        where = f"'{item_key}'" if item_key else "the JSON root"
        raise ItemsKeyError(f"Expected an array at {where}")

    return [parse_item(entry, position) for position, entry in enumerate(entries)]


def build_state(items: list[ListItem], page_size: int) -> ListState:
    """Wrap parsed items with the initial window and aggregate flags."""
    return ListState(
        items=items,
        page_size=page_size,
        selected=0,
        first_visible=0,
        last_visible=min(len(items), page_size),
        has_options=any(item.options for item in items),
    )


def load_list(
    source: str,
    fmt: str = "json",
    item_key: str = "",
    title: str = "",
    row_count: int = MAIN_ROW_COUNT,
    stdin: BinaryIO | None = None,
) -> ListState:
    """Read ``source`` (a path or ``-``) and return the initial list state."""
    try:
        raw = read_source_bytes(source, stdin=stdin)
    except OSError as exc:
        raise SourceReadError(f"Failed to read {source!r}: {exc}") from exc

    if fmt == "text":
        items = parse_text_items(raw)
    elif fmt == "json":
        items = parse_json_items(raw, item_key)
    else:
        raise ValueError(f"Unsupported input format: {fmt}")

    state = build_state(items, page_size_for(title, row_count))
    logger.info("Loaded %d item(s) from %s (format=%s)", state.item_count, source, fmt)
    return state
