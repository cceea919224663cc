# common/macos/brew_manager.py
# -*- coding: utf-8 -*-
"""
Homebrew maintenance commands used by the Homebrew steps.
"""

import logging
from typing import Dict, List, Optional

from common.command_utils import CommandResult, run_command
from installer.config_models import AppSettings


class BrewManager:
    """
    A thin manager for Homebrew maintenance using the ``brew`` CLI.

    The environment overrides passed in (``env``) are applied to every brew
    invocation. They carry values earlier steps forwarded, such as a PATH that
    includes the Homebrew prefix or ``HOMEBREW_NO_INSTALL_CLEANUP``.
    """

    def __init__(
        self,
        app_settings: AppSettings,
        logger: Optional[logging.Logger] = None,
        env: Optional[Dict[str, str]] = None,
    ):
        """
        Initializes the BrewManager.
        Args:
            app_settings: The application settings.
            logger: An optional logging object.
            env: Environment overrides for brew invocations.
        """
        self.app_settings = app_settings
        self.logger = logger or logging.getLogger(__name__)
        self.env = env

    def _brew(self, *args: str) -> CommandResult:
        return run_command(
            ["brew", *args],
            self.app_settings,
            current_logger=self.logger,
            env=self.env,
        )

    @staticmethod
    def install_command(name: str, cask: bool = False) -> List[str]:
        """Builds the argument vector that installs one formula or cask."""
        if cask:
            return ["brew", "install", "--cask", name]
        return ["brew", "install", name]

    def update(self) -> bool:
        """Fetches the newest version of Homebrew and all formulae."""
        return self._brew("update").success

    def upgrade(self) -> bool:
        """Upgrades outdated formulae and casks."""
        return self._brew("upgrade").success

    def cleanup(self) -> bool:
        """Removes stale lock files, outdated downloads and old versions."""
        return self._brew("cleanup").success

    def doctor(self) -> bool:
        """Checks the system for potential problems."""
        return self._brew("doctor").success
