# -*- coding: utf-8 -*-
"""Logger setup for stderr + optional session file logging."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_session_logging(level: str = "WARNING", log_dir: str | Path | None = None, app_name: str = "listpicker") -> Path | None:
    """Configure root logging once per process.

    Returns the session log path when ``log_dir`` is set, otherwise ``None``.
    """
    root = logging.getLogger()
    if getattr(root, "_listpicker_logging_configured", False):
        return getattr(root, "_listpicker_session_log", None)

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    root.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(numeric_level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    session_log_path: Path | None = None
    if log_dir:
        logs_dir = Path(log_dir).expanduser()
        safe_app_name = app_name.lower().replace(" ", "-")
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        session_log_path = logs_dir / f"{safe_app_name}-{timestamp}-{os.getpid()}.log"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
            # The session file always keeps the full trace.
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            root.setLevel(logging.DEBUG)
            for handler in root.handlers:
                if handler is not file_handler and isinstance(handler, logging.StreamHandler):
                    handler.setLevel(numeric_level)
            root.debug("Session log file established: %s", session_log_path)
        except OSError as exc:
            root.error("Failed to establish session log file: %s", exc)
            session_log_path = None

    root._listpicker_logging_configured = True  # type: ignore[attr-defined]
    root._listpicker_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path
