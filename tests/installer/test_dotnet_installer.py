import pytest

from common.command_utils import CommandResult
from installer.components.dotnet.dotnet_installer import (
    dotnet_root_export_line,
    install_dotnet,
)

OK = CommandResult(success=True, returncode=0)
FAILED = CommandResult(success=False, returncode=1)


@pytest.fixture
def mock_run(mocker):
    return mocker.patch("installer.step_patterns.run_command", return_value=OK)


def read_profile(app_settings):
    try:
        with open(app_settings.profile_path, encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return ""


def test_export_line(app_settings):
    assert dotnet_root_export_line(app_settings) == (
        'export DOTNET_ROOT="/opt/homebrew/opt/dotnet/libexec"'
    )


def test_already_installed_does_nothing(mocker, mock_run, app_settings):
    mock_input = mocker.patch("builtins.input")
    context = {}

    assert install_dotnet(app_settings, context=context) is True
    mock_input.assert_not_called()
    assert mock_run.call_count == 1
    assert "DOTNET_ROOT" not in context["env"]
    assert "DOTNET_ROOT" not in read_profile(app_settings)


def test_declined_by_default(mocker, mock_run, app_settings):
    mock_run.return_value = FAILED
    mocker.patch("builtins.input", return_value="")

    assert install_dotnet(app_settings, context={}) is True
    assert mock_run.call_count == 1


def test_fresh_install_exports_dotnet_root(mocker, mock_run, app_settings):
    mock_run.side_effect = [FAILED, OK, OK]
    mocker.patch("builtins.input", return_value="y")
    context = {}

    assert install_dotnet(app_settings, context=context) is True

    assert [c.args[0] for c in mock_run.call_args_list] == [
        ["dotnet", "--version"],
        ["brew", "install", "dotnet"],
        ["bash", "-c", dotnet_root_export_line(app_settings)],
    ]
    assert context["env"]["DOTNET_ROOT"] == app_settings.dotnet_root
    assert dotnet_root_export_line(app_settings) in read_profile(app_settings)


def test_install_failure(mocker, mock_run, app_settings):
    mock_run.return_value = FAILED
    mocker.patch("builtins.input", return_value="y")

    assert install_dotnet(app_settings, context={}) is False
    assert read_profile(app_settings) == ""
