# installer/components/mas/mas_installer.py
# -*- coding: utf-8 -*-
"""
Mac App Store applications, installed by ID through the ``mas`` CLI.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from common.command_utils import get_symbols, log_provisioner
from common.macos.brew_manager import BrewManager
from installer.cli_handler import clear_screen
from installer.config_models import AppSettings
from installer.step_patterns import apply_list, ensure, step_env

module_logger = logging.getLogger(__name__)


def install_app_store_apps(
    apps: Sequence[str],
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Ensures ``mas`` is available, then installs each App Store ID in order.

    If ``mas`` cannot be installed the step ends without attempting any app.
    Failed apps are reported and skipped.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    env = step_env(context)
    clear_screen(app_settings, logger_to_use)

    if not ensure(
        "mas",
        ["mas", "--version"],
        BrewManager.install_command("mas"),
        app_settings,
        current_logger=logger_to_use,
        env=env,
    ):
        return False

    log_provisioner(
        f"{symbols.get('package', '📦')} Installing Mac App Store applications...",
        "info",
        logger_to_use,
        app_settings,
    )
    failed = apply_list(
        apps,
        lambda app_id: ["mas", "install", app_id],
        app_settings,
        current_logger=logger_to_use,
        failure_message="Failed to install app {item}. Continuing...",
        env=env,
    )
    return not failed
