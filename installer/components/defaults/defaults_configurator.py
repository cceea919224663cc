# installer/components/defaults/defaults_configurator.py
# -*- coding: utf-8 -*-
"""
Applies macOS default settings declared as shell commands.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from common.command_utils import get_symbols, log_provisioner
from installer.cli_handler import clear_screen, cli_confirm
from installer.config_models import AppSettings
from installer.step_patterns import apply_list, step_env

module_logger = logging.getLogger(__name__)


def configure_default_settings(
    settings: Sequence[str],
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Runs each setting through ``bash -c`` in declared order once the operator
    agrees (default yes). A failing setting is reported and skipped.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    clear_screen(app_settings, logger_to_use)

    if not cli_confirm(
        "Configure default system settings?", True, app_settings, logger_to_use
    ):
        log_provisioner(
            f"{symbols.get('info', 'ℹ️')} Skipping default system settings.",
            "info",
            logger_to_use,
            app_settings,
        )
        return True

    log_provisioner(
        f"{symbols.get('gear', '⚙️')} Configuring default settings...",
        "info",
        logger_to_use,
        app_settings,
    )
    failed = apply_list(
        settings,
        lambda setting: ["bash", "-c", setting],
        app_settings,
        current_logger=logger_to_use,
        failure_message="Failed to apply setting: {item}. Continuing...",
        announce="Applying setting: {item}",
        env=step_env(context),
    )
    return not failed
