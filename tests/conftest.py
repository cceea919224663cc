# tests/conftest.py
import logging
from unittest.mock import MagicMock

import pytest

from common.command_utils import CommandResult
from installer.config_models import AppSettings


@pytest.fixture
def app_settings(tmp_path):
    """Settings that never clear the terminal and write to a temp profile."""
    return AppSettings(
        profile_path=str(tmp_path / ".zprofile"),
        homebrew_prefix="/opt/homebrew",
        clear_screen=False,
        keep_alive_interval=0.01,
        log_prefix="test_prefix",
    )


@pytest.fixture
def mock_logger():
    """Fixture to create a mock logger for testing."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def ok():
    return CommandResult(success=True, returncode=0)


@pytest.fixture
def failed():
    return CommandResult(success=False, returncode=1)
