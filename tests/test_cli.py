# -*- coding: utf-8 -*-
"""Tests for the command line entry point and exit codes."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from listpicker.cli import picker_cli
from listpicker.cli.picker_cli import execute, main
from listpicker.constants import ExitCode
from listpicker.core.commands import Command, apply_command
from listpicker.models.picker_options import PickerOptions


def _scripted(*commands: Command):
    def runner(navigator, options, settings):
        for command in commands:
            apply_command(navigator, command)
        return navigator.exit_code

    return runner


@pytest.fixture
def fruit_file(tmp_path: Path, fruit_names: list[str]) -> Path:
    path = tmp_path / "fruit.json"
    path.write_text(json.dumps(fruit_names), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _settings(isolated_settings: Path) -> Path:
    return isolated_settings


def test_confirm_prints_selected_name(monkeypatch, capsys, fruit_file: Path) -> None:
    monkeypatch.setattr(picker_cli, "run_interactive", _scripted(Command.DOWN, Command.CONFIRM))
    assert main(["--file", str(fruit_file)]) == 0
    assert capsys.readouterr().out == "Banana\n"


def test_cancel_prints_nothing(monkeypatch, capsys, fruit_file: Path) -> None:
    monkeypatch.setattr(picker_cli, "run_interactive", _scripted(Command.CANCEL))
    assert main(["--file", str(fruit_file)]) == ExitCode.CANCEL
    assert capsys.readouterr().out == ""


def test_menu_exit_code(monkeypatch, capsys, fruit_file: Path) -> None:
    monkeypatch.setattr(picker_cli, "run_interactive", _scripted(Command.MENU))
    assert main(["--file", str(fruit_file)]) == ExitCode.MENU
    assert capsys.readouterr().out == ""


def test_action_button_emits_result(monkeypatch, capsys, fruit_file: Path) -> None:
    monkeypatch.setattr(picker_cli, "run_interactive", _scripted(Command.UP, Command.ACTION))
    assert main(["--file", str(fruit_file), "--action-button", "X"]) == ExitCode.ACTION
    assert capsys.readouterr().out == "Cherry\n"


def test_interrupt_exit_code(monkeypatch, capsys, fruit_file: Path) -> None:
    monkeypatch.setattr(picker_cli, "run_interactive", _scripted(Command.INTERRUPT))
    assert main(["--file", str(fruit_file)]) == ExitCode.INTERRUPTED
    assert capsys.readouterr().out == ""


def test_state_output_uses_item_key(monkeypatch, capsys, rich_json_file: Path) -> None:
    monkeypatch.setattr(picker_cli, "run_interactive", _scripted(Command.DOWN, Command.ENABLE, Command.CONFIRM))
    code = main(["--file", str(rich_json_file), "--item-key", "items", "--stdout-value", "state"])
    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["selected"] == 2
    assert output["items"][2]["enabled"] is True
    assert output["items"][0] == {"name": "Display", "is_header": True}


def test_text_format_from_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr(picker_cli, "run_interactive", _scripted(Command.DOWN, Command.CONFIRM))
    options = PickerOptions(file="-", format="text")
    assert execute(options, stdin=io.BytesIO(b"one\n\ntwo\n")) == 0
    assert capsys.readouterr().out == "two\n"


def test_missing_file_flag_is_an_error(capsys) -> None:
    assert main([]) == ExitCode.ERROR
    assert capsys.readouterr().out == ""


def test_duplicate_buttons_are_an_error(fruit_file: Path) -> None:
    assert main(["--file", str(fruit_file), "--confirm-button", "B"]) == ExitCode.ERROR


def test_invalid_button_is_an_error(fruit_file: Path) -> None:
    assert main(["--file", str(fruit_file), "--cancel-button", "START"]) == ExitCode.ERROR


def test_invalid_format_is_an_error(fruit_file: Path) -> None:
    assert main(["--file", str(fruit_file), "--format", "yaml"]) == ExitCode.ERROR


def test_unknown_flag_is_an_error_not_cancel(fruit_file: Path) -> None:
    assert main(["--file", str(fruit_file), "--bogus"]) == ExitCode.ERROR


def test_unreadable_file_is_an_error(tmp_path: Path) -> None:
    assert main(["--file", str(tmp_path / "missing.json")]) == ExitCode.ERROR


def test_malformed_json_is_a_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('["Apple",', encoding="utf-8")
    assert main(["--file", str(path)]) == ExitCode.PARSE_ERROR


def test_deeply_nested_json_is_a_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "deep.json"
    path.write_text("[" * 5000 + "]" * 5000, encoding="utf-8")
    assert main(["--file", str(path)]) == ExitCode.PARSE_ERROR


def test_missing_items_key_is_a_parse_error(fruit_file: Path) -> None:
    assert main(["--file", str(fruit_file), "--item-key", "items"]) == ExitCode.PARSE_ERROR


def test_invalid_settings_is_an_error(isolated_settings: Path, fruit_file: Path) -> None:
    (isolated_settings / "settings.json").write_text('{"display": {"row_count": 0}}', encoding="utf-8")
    assert main(["--file", str(fruit_file)]) == ExitCode.ERROR


def test_settings_path_that_is_a_directory_is_an_error(isolated_settings: Path, fruit_file: Path) -> None:
    (isolated_settings / "settings.json").mkdir()
    assert main(["--file", str(fruit_file)]) == ExitCode.ERROR


def test_help_exits_cleanly(capsys) -> None:
    assert main(["--help"]) == 0
    assert "--stdout-value" in capsys.readouterr().out


def test_serialize_failure_exit_code(monkeypatch, capsys, fruit_file: Path) -> None:
    from listpicker.core.serializer import SerializeError

    def _fail(state, mode, item_key):
        raise SerializeError("boom")

    monkeypatch.setattr(picker_cli, "run_interactive", _scripted(Command.CONFIRM))
    monkeypatch.setattr(picker_cli, "serialize_result", _fail)
    assert main(["--file", str(fruit_file)]) == ExitCode.SERIALIZE_ERROR
    assert capsys.readouterr().out == ""
