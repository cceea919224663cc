# installer/components/macos/macos_installer.py
# -*- coding: utf-8 -*-
"""
macOS system steps.

Covers the privileged operations that bracket a provisioning run: caching
sudo credentials, installing OS updates and Rosetta, and the final restart.
"""

import logging
import sys
from typing import Any, Dict, Optional

from common.command_utils import (
    get_symbols,
    log_provisioner,
    run_command,
    run_elevated_command,
)
from common.keep_alive import SudoKeepAlive
from installer.cli_handler import (
    clear_screen,
    cli_confirm,
    print_done_banner,
    print_welcome_banner,
)
from installer.config_models import AppSettings
from installer.step_patterns import ensure

module_logger = logging.getLogger(__name__)

ROSETTA_PROBE = ["arch", "-x86_64", "/usr/bin/true"]
ROSETTA_INSTALL = ["softwareupdate", "--install-rosetta", "--agree-to-license"]


def refresh_sudo_credentials(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Prompts for the administrator password once (``sudo -v``) so that the
    credential cache is warm for the rest of the run.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    clear_screen(app_settings, logger_to_use)
    print_welcome_banner()
    if not run_command(
        ["sudo", "-v"], app_settings, current_logger=logger_to_use
    ).success:
        log_provisioner(
            f"{symbols.get('error', '❌')} Error prompting for root password. Elevated steps will prompt again or fail.",
            "error",
            logger_to_use,
            app_settings,
        )
        return False
    return True


def start_keep_alive(
    keep_alive: SudoKeepAlive,
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
) -> bool:
    """Starts the background sudo refresh for the remainder of the run."""
    keep_alive.start()
    return True


def update_macos(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """Installs all available macOS software updates."""
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    clear_screen(app_settings, logger_to_use)
    log_provisioner(
        f"{symbols.get('rocket', '🚀')} Updating macOS...",
        "info",
        logger_to_use,
        app_settings,
    )
    if not run_elevated_command(
        ["softwareupdate", "-i", "-a"],
        app_settings,
        current_logger=logger_to_use,
    ).success:
        log_provisioner(
            f"{symbols.get('error', '❌')} Error updating macOS.",
            "error",
            logger_to_use,
            app_settings,
        )
        return False
    return True


def ensure_rosetta(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """Installs Rosetta 2 unless x86_64 binaries already run."""
    return ensure(
        "Rosetta",
        ROSETTA_PROBE,
        ROSETTA_INSTALL,
        app_settings,
        current_logger=current_logger or module_logger,
        elevated=True,
    )


def finish_and_restart(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Offers to restart the machine.

    On "yes" the restart command is issued and the process exits with status
    0; control never returns to the caller. On "no" a cancellation notice is
    logged and the function returns normally.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    clear_screen(app_settings, logger_to_use)
    print_done_banner()
    if not cli_confirm(
        "Would you like to reboot now?", False, app_settings, logger_to_use
    ):
        log_provisioner(
            f"{symbols.get('info', 'ℹ️')} Reboot canceled.",
            "info",
            logger_to_use,
            app_settings,
        )
        return True

    if not run_elevated_command(
        ["reboot"], app_settings, current_logger=logger_to_use
    ).success:
        log_provisioner(
            f"{symbols.get('error', '❌')} Error rebooting.",
            "error",
            logger_to_use,
            app_settings,
        )
    sys.exit(0)
