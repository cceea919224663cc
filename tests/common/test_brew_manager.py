import pytest

from common.macos.brew_manager import BrewManager


@pytest.fixture
def mock_run_command(mocker, ok):
    return mocker.patch(
        "common.macos.brew_manager.run_command", return_value=ok
    )


def test_install_command_formula():
    assert BrewManager.install_command("git") == ["brew", "install", "git"]


def test_install_command_cask():
    assert BrewManager.install_command("firefox", cask=True) == [
        "brew",
        "install",
        "--cask",
        "firefox",
    ]


@pytest.mark.parametrize("operation", ["update", "upgrade", "cleanup", "doctor"])
def test_maintenance_commands(mock_run_command, app_settings, operation):
    env = {"PATH": "/opt/homebrew/bin"}
    brew = BrewManager(app_settings, env=env)

    assert getattr(brew, operation)() is True
    assert mock_run_command.call_args.args[0] == ["brew", operation]
    assert mock_run_command.call_args.kwargs["env"] is env


def test_failure_is_returned(mocker, app_settings, failed):
    mocker.patch("common.macos.brew_manager.run_command", return_value=failed)

    assert BrewManager(app_settings).doctor() is False
