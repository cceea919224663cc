import pytest

from common.command_utils import CommandResult
from installer.components.mas.mas_installer import install_app_store_apps

OK = CommandResult(success=True, returncode=0)
FAILED = CommandResult(success=False, returncode=1)


@pytest.fixture
def mock_run(mocker):
    return mocker.patch("installer.step_patterns.run_command", return_value=OK)


def test_installs_each_app_id_in_order(mock_run, app_settings):
    assert install_app_store_apps(["497799835", "1333542190"], app_settings, context={}) is True

    assert [c.args[0] for c in mock_run.call_args_list] == [
        ["mas", "--version"],
        ["mas", "install", "497799835"],
        ["mas", "install", "1333542190"],
    ]


def test_installs_mas_when_missing(mock_run, app_settings):
    mock_run.side_effect = [FAILED, OK, OK]

    assert install_app_store_apps(["497799835"], app_settings, context={}) is True
    assert mock_run.call_args_list[1].args[0] == ["brew", "install", "mas"]


def test_mas_install_failure_skips_apps(mock_run, app_settings):
    mock_run.return_value = FAILED

    assert install_app_store_apps(["497799835"], app_settings, context={}) is False
    assert mock_run.call_count == 2


def test_failed_app_does_not_stop_others(mock_run, app_settings, mock_logger):
    mock_run.side_effect = [OK, FAILED, OK]

    result = install_app_store_apps(["1", "2"], app_settings, {}, mock_logger)

    assert result is False
    assert mock_run.call_count == 3
    mock_logger.warning.assert_called_once_with(
        "⚠️ Failed to install app 1. Continuing...", exc_info=False
    )
