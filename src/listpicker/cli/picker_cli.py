# -*- coding: utf-8 -*-
"""Command line interface for the list picker."""

from __future__ import annotations

import logging
from typing import Any, BinaryIO

import click
import typer

from listpicker.config import ConfigError, load_config
from listpicker.constants import APP_NAME, EMITTING_EXIT_CODES, ExitCode
from listpicker.core.loader import ItemsKeyError, JsonParseError, SourceReadError, load_list
from listpicker.core.navigator import ListNavigator
from listpicker.core.serializer import SerializeError, serialize_result
from listpicker.models.picker_options import OptionsError, PickerOptions
from listpicker.utils.logger import setup_session_logging

app = typer.Typer(help="Pick an item from a JSON or text list.", add_completion=False)
logger = logging.getLogger(__name__)


def run_interactive(navigator: ListNavigator, options: PickerOptions, settings: dict[str, Any]) -> ExitCode:
    """Hand the navigator to the GUI until the user finishes."""
    from listpicker.gui.app import run_picker

    return run_picker(navigator, options, settings)


def execute(
    options: PickerOptions,
    settings: dict[str, Any] | None = None,
    stdin: BinaryIO | None = None,
) -> ExitCode:
    """Validate, load, run the picker and print the result. Returns the exit code."""
    try:
        if settings is None:
            settings = load_config()
    except ConfigError as exc:
        logger.error("Invalid settings: %s", exc)
        return ExitCode.ERROR

    setup_session_logging(settings["logging"]["level"], settings["logging"]["log_dir"] or None, APP_NAME)

    try:
        options.ensure_valid()
    except OptionsError as exc:
        logger.error("%s", exc)
        return ExitCode.ERROR

    try:
        state = load_list(
            options.file,
            options.format,
            options.item_key,
            options.header,
            settings["display"]["row_count"],
            stdin=stdin,
        )
    except SourceReadError as exc:
        logger.error("%s", exc)
        return ExitCode.ERROR
    except (JsonParseError, ItemsKeyError) as exc:
        logger.error("%s", exc)
        return ExitCode.PARSE_ERROR

    navigator = ListNavigator(state)
    exit_code = ExitCode(run_interactive(navigator, options, settings))
    if exit_code not in EMITTING_EXIT_CODES:
        return exit_code

    try:
        output = serialize_result(state, options.stdout_value, options.item_key)
    except SerializeError as exc:
        logger.error("%s", exc)
        return ExitCode.SERIALIZE_ERROR

    typer.echo(output)
    return exit_code


@app.command()
def pick(
    file: str = typer.Option("", "--file", help="Path to the input file, or - for stdin"),
    input_format: str = typer.Option("json", "--format", help="Input format: json or text"),
    item_key: str = typer.Option("", "--item-key", help="Key of the items array in the JSON root object"),
    header: str = typer.Option("", "--header", help="Title shown above the list"),
    stdout_value: str = typer.Option("selected", "--stdout-value", help="Print the selected name or the full state"),
    confirm_button: str = typer.Option("A", "--confirm-button", help="Button that confirms the selection"),
    confirm_text: str = typer.Option("SELECT", "--confirm-text", help="Label for the confirm button"),
    cancel_button: str = typer.Option("B", "--cancel-button", help="Button that cancels"),
    cancel_text: str = typer.Option("BACK", "--cancel-text", help="Label for the cancel button"),
    action_button: str = typer.Option("", "--action-button", help="Button that exits with the action code"),
    action_text: str = typer.Option("ACTION", "--action-text", help="Label for the action button"),
    enable_button: str = typer.Option("Y", "--enable-button", help="Button that toggles the selected item"),
) -> None:
    """Show the list and report the user's choice."""
    options = PickerOptions(
        file=file,
        format=input_format,
        item_key=item_key,
        header=header,
        stdout_value=stdout_value,
        confirm_button=confirm_button,
        confirm_text=confirm_text,
        cancel_button=cancel_button,
        cancel_text=cancel_text,
        action_button=action_button,
        action_text=action_text,
        enable_button=enable_button,
    )
    raise typer.Exit(code=int(execute(options)))


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    command = typer.main.get_command(app)
    try:
        result = command.main(args=argv, prog_name=APP_NAME, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return int(ExitCode.ERROR)
    except (click.exceptions.Abort, KeyboardInterrupt):
        return int(ExitCode.INTERRUPTED)
    return int(result or 0)
