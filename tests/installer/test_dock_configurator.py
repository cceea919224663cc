# tests/installer/test_dock_configurator.py
# -*- coding: utf-8 -*-
"""
Tests for the Dock layout step.
"""

import pytest

from common.command_utils import CommandResult
from installer.components.dock.dock_configurator import (
    configure_dock,
    dock_add_command,
    dock_remove_command,
    dock_replace_command,
)

OK = CommandResult(success=True, returncode=0)
FAILED = CommandResult(success=False, returncode=1)


@pytest.fixture
def mock_run(mocker):
    return mocker.patch("installer.step_patterns.run_command", return_value=OK)


def commands(mock_run):
    return [c.args[0] for c in mock_run.call_args_list]


def test_dock_replace_command():
    assert dock_replace_command(
        "/Applications/Firefox.app|/Applications/Safari.app"
    ) == [
        "dockutil",
        "--add",
        "/Applications/Firefox.app",
        "--replacing",
        "/Applications/Safari.app",
    ]


@pytest.mark.parametrize("entry", ["/Applications/Firefox.app", "a|b|c"])
def test_dock_replace_command_malformed(entry):
    assert dock_replace_command(entry) is None


def test_dock_add_and_remove_commands():
    assert dock_add_command("/Applications/iTerm.app") == [
        "dockutil",
        "--add",
        "/Applications/iTerm.app",
    ]
    assert dock_remove_command("Mail") == ["dockutil", "--remove", "Mail"]


def test_declined_by_default(mocker, mock_run, app_settings):
    mocker.patch("builtins.input", return_value="")

    assert configure_dock(["A|B"], ["C"], ["D"], app_settings, context={}) is True
    mock_run.assert_not_called()


def test_applies_replace_add_remove_in_order(mocker, mock_run, app_settings):
    mocker.patch("builtins.input", return_value="y")

    assert configure_dock(["A|B"], ["C"], ["D"], app_settings, context={}) is True
    assert commands(mock_run) == [
        ["brew", "install", "dockutil"],
        ["dockutil", "--add", "A", "--replacing", "B"],
        ["dockutil", "--add", "C"],
        ["dockutil", "--remove", "D"],
    ]


def test_malformed_replacement_is_skipped(mocker, mock_run, app_settings):
    mocker.patch("builtins.input", return_value="y")

    assert configure_dock(["A"], [], ["D"], app_settings, context={}) is True
    assert commands(mock_run) == [
        ["brew", "install", "dockutil"],
        ["dockutil", "--remove", "D"],
    ]


def test_dockutil_install_failure_aborts(mocker, mock_run, app_settings):
    mocker.patch("builtins.input", return_value="y")
    mock_run.return_value = FAILED

    assert configure_dock(["A|B"], ["C"], ["D"], app_settings, context={}) is False
    assert mock_run.call_count == 1
