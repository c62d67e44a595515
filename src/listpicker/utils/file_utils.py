# -*- coding: utf-8 -*-
"""File helpers with UTF-8 defaults."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, BinaryIO

from listpicker.constants import STDIN_SENTINEL


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON file."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def read_source_bytes(source: str, stdin: BinaryIO | None = None) -> bytes:
    """Read a whole file, or all of stdin when ``source`` is ``-``."""
    if source == STDIN_SENTINEL:
        stream = stdin if stdin is not None else sys.stdin.buffer
        return stream.read()
    return Path(source).read_bytes()
