# -*- coding: utf-8 -*-
"""CLI module entry point for `python -m listpicker`."""

from __future__ import annotations

from listpicker.main import main


if __name__ == "__main__":
    raise SystemExit(main())
