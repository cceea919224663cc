import pytest

from installer.cli_handler import (
    clear_screen,
    cli_confirm,
    cli_prompt_for_text,
    format_confirmation_prompt,
    resolve_confirmation,
)


@pytest.mark.parametrize(
    "reply, default, expected",
    [
        ("", True, True),
        ("", False, False),
        ("   ", True, True),
        ("y", False, True),
        ("Y", False, True),
        (" y ", False, True),
        ("n", True, False),
        ("N", True, False),
        ("yes", True, False),
        ("no", True, False),
        ("maybe", True, False),
    ],
)
def test_resolve_confirmation(reply, default, expected):
    assert resolve_confirmation(reply, default) is expected


def test_format_confirmation_prompt():
    assert format_confirmation_prompt("Install .NET?", False) == (
        "Install .NET? [y/N]: "
    )
    assert format_confirmation_prompt("Configure default system settings?", True) == (
        "Configure default system settings? [Y/n]: "
    )


def test_cli_confirm_reads_answer(mocker, app_settings):
    mock_input = mocker.patch("builtins.input", return_value="y")

    assert cli_confirm("Apply Dock settings?", False, app_settings) is True
    mock_input.assert_called_once_with("Apply Dock settings? [y/N]: ")


def test_cli_confirm_eof_uses_default(mocker, app_settings, mock_logger):
    mocker.patch("builtins.input", side_effect=EOFError)

    assert cli_confirm("Reboot?", True, app_settings, mock_logger) is True
    assert cli_confirm("Reboot?", False, app_settings, mock_logger) is False
    assert mock_logger.warning.call_count == 2


def test_cli_prompt_for_text_trims(mocker):
    mock_input = mocker.patch("builtins.input", return_value="  Jane Doe \n")

    assert cli_prompt_for_text("Please enter your git username") == "Jane Doe"
    mock_input.assert_called_once_with("Please enter your git username: ")


def test_cli_prompt_for_text_eof(mocker):
    mocker.patch("builtins.input", side_effect=EOFError)

    assert cli_prompt_for_text("Please enter your git email") == ""


def test_clear_screen_disabled(mocker, app_settings):
    mock_run = mocker.patch("installer.cli_handler.subprocess.run")

    clear_screen(app_settings)

    mock_run.assert_not_called()


def test_clear_screen_enabled(mocker, app_settings):
    mock_run = mocker.patch("installer.cli_handler.subprocess.run")
    enabled = app_settings.model_copy(update={"clear_screen": True})

    clear_screen(enabled)

    mock_run.assert_called_once_with(["clear"], check=False)
