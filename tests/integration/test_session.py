"""
End-to-end sessions through the root menu.

These drive `run_tracker` with a scripted console, and the `record-tracker`
CLI through typer's CliRunner, exactly as a user would type.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from record_tracker import main as main_module
from record_tracker.app import build_root_menu, run_tracker
from record_tracker.main import app
from record_tracker.manager import ActivityManager
from record_tracker.store import RecordStore

ALICE = "Alice, age 30, email alice@example.com, #0"
BOB = "Bob, age 25, email bob@example.com, #1"

ADD_ALICE = ["1", "Alice", "alice@example.com", "30"]
ADD_BOB = ["1", "Bob", "bob@example.com", "25"]
EXIT = ["4"]


def test_root_menu_options(make_console):
    console = make_console()
    store = RecordStore()
    menu = build_root_menu(store, ActivityManager(console), console, title="T")
    assert [o.label for o in menu.options] == [
        "Add Record",
        "List Records",
        "Query Records",
        "Exit",
    ]


def test_add_list_query_session(make_console, test_settings):
    console = make_console(ADD_ALICE + ADD_BOB + ["2", "3", "age", "30"] + EXIT)

    store = run_tracker(console=console, settings=test_settings)

    out = console.output
    assert out.startswith(
        "Record Tracker v1.0\n\n\n"
        "1. Add Record\n2. List Records\n3. Query Records\n4. Exit\n\n> "
    )
    assert "Enter the name: Enter the email address: Enter the age: Added record #0\n" in out
    assert "Added record #1\n" in out
    assert out.index(f"> {ALICE}\n{BOB}\n") > out.index("Added record #1")
    assert "\nRecords Found\n=============\n" + ALICE + "\n\n> " in out
    assert BOB not in out.split("Records Found")[1]
    assert [r.format() for r in store.all] == [ALICE, BOB]


def test_invalid_age_does_not_create_a_record(make_console, test_settings):
    console = make_console(["1", "Alice", "alice@example.com", "-5", "abc", "30"] + EXIT)

    store = run_tracker(console=console, settings=test_settings)

    assert console.output.count("Invalid age. Try again.") == 2
    assert console.output.count("Enter the age: ") == 3
    assert [r.id for r in store.all] == [0]


def test_out_of_range_menu_choice_reprompts(make_console, test_settings):
    console = make_console(["99"] + EXIT)

    store = run_tracker(console=console, settings=test_settings)

    assert "> Invalid option 99\n> " in console.output
    assert len(store) == 0


def test_duplicate_record_is_silently_dropped(make_console, test_settings):
    console = make_console(ADD_ALICE + ADD_ALICE + ["2"] + EXIT)

    store = run_tracker(console=console, settings=test_settings)

    assert "Added record #1" in console.output
    assert [r.id for r in store.all] == [0]


def test_exit_empties_the_stack(make_console, test_settings):
    console = make_console(EXIT + ["never read"])
    run_tracker(console=console, settings=test_settings)
    assert console.stdin.readline() == "never read\n"


def test_title_override(make_console, test_settings):
    console = make_console(EXIT)
    run_tracker(console=console, settings=test_settings, title="People")
    assert console.output.startswith("People\n")


def test_cli_run_command(monkeypatch):
    monkeypatch.setenv("TRACKER_MAX_EMPTY_READS", "3")
    runner = CliRunner()
    script = "\n".join(ADD_ALICE + ["2"] + EXIT) + "\n"

    result = runner.invoke(app, ["run", "--title", "CLI Tracker"], input=script)

    assert result.exit_code == 0, result.output
    assert result.output.startswith("CLI Tracker\n")
    assert "Added record #0" in result.output
    assert ALICE in result.output


def test_cli_without_command_starts_session(monkeypatch):
    monkeypatch.setenv("TRACKER_MAX_EMPTY_READS", "3")
    runner = CliRunner()

    result = runner.invoke(app, [], input="4\n")

    assert result.exit_code == 0, result.output
    assert "4. Exit" in result.output


def test_cli_info_command():
    runner = CliRunner()

    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0, result.output
    assert "Record Tracker Settings" in result.output


def test_empty_title_override_is_kept(make_console, test_settings):
    console = make_console(EXIT)
    run_tracker(console=console, settings=test_settings, title="")
    assert console.output.startswith("\n\n\n1. Add Record\n")


def test_keyboard_interrupt_exits_130(monkeypatch, capsys):
    def _interrupted() -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "app", _interrupted)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 130
    captured = capsys.readouterr()
    assert captured.err == "Cancelled by user.\n"
    assert captured.out == ""
