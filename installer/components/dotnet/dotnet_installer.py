# installer/components/dotnet/dotnet_installer.py
# -*- coding: utf-8 -*-
"""
Optional .NET SDK installation through Homebrew.
"""

import logging
from typing import Any, Dict, Optional

from common.macos.brew_manager import BrewManager
from installer.cli_handler import clear_screen
from installer.config_models import AppSettings
from installer.step_patterns import append_profile_line, ensure, step_env

module_logger = logging.getLogger(__name__)


def dotnet_root_export_line(app_settings: AppSettings) -> str:
    return f'export DOTNET_ROOT="{app_settings.dotnet_root}"'


def install_dotnet(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Installs .NET when it is missing and the operator agrees (default no).

    After a fresh install ``DOTNET_ROOT`` is exported from the shell profile
    and forwarded to the remaining steps.
    """
    logger_to_use = current_logger if current_logger else module_logger
    env = step_env(context)
    clear_screen(app_settings, logger_to_use)

    def export_dotnet_root() -> bool:
        configured = append_profile_line(
            dotnet_root_export_line(app_settings),
            "DOTNET_ROOT environment setting",
            app_settings,
            current_logger=logger_to_use,
            env=env,
        )
        if configured:
            env["DOTNET_ROOT"] = app_settings.dotnet_root
        return configured

    return ensure(
        ".NET",
        ["dotnet", "--version"],
        BrewManager.install_command("dotnet"),
        app_settings,
        current_logger=logger_to_use,
        confirm_prompt="Install .NET?",
        confirm_default=False,
        env=env,
        after_install=export_dotnet_root,
    )
