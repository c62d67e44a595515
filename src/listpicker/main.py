# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

from listpicker.cli.picker_cli import main as cli_main


def main() -> int:
    """Start the list picker."""
    return cli_main()
