# installer/components/homebrew/homebrew_installer.py
# -*- coding: utf-8 -*-
"""
Homebrew steps: bootstrap, shell environment, health check, bulk installs
of formulae and casks, and the final cleanup.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Sequence

from common.command_utils import get_symbols, log_provisioner
from common.macos.brew_manager import BrewManager
from installer.cli_handler import clear_screen
from installer.config_models import AppSettings
from installer.step_patterns import (
    append_profile_line,
    apply_list,
    ensure,
    run_sequence,
    step_env,
)

module_logger = logging.getLogger(__name__)


def homebrew_install_command(app_settings: AppSettings) -> List[str]:
    """Builds the non-interactive invocation of the official install script."""
    return [
        "bash",
        "-c",
        f'NONINTERACTIVE=1 /bin/bash -c "$(curl -fsSL {app_settings.homebrew_install_url})"',
    ]


def homebrew_shellenv_line(app_settings: AppSettings) -> str:
    return f'eval "$({app_settings.homebrew_bin}/brew shellenv)"'


def ensure_homebrew(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """Installs Homebrew unless ``brew --version`` already works."""
    logger_to_use = current_logger if current_logger else module_logger
    clear_screen(app_settings, logger_to_use)
    return ensure(
        "Homebrew",
        ["brew", "--version"],
        homebrew_install_command(app_settings),
        app_settings,
        current_logger=logger_to_use,
        env=step_env(context),
    )


def setup_homebrew_environment(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Adds the ``brew shellenv`` line to the shell profile and forwards the
    Homebrew bin directories on PATH to every later step.
    """
    logger_to_use = current_logger if current_logger else module_logger
    env = step_env(context)
    clear_screen(app_settings, logger_to_use)

    configured = append_profile_line(
        homebrew_shellenv_line(app_settings),
        "Homebrew initialization",
        app_settings,
        current_logger=logger_to_use,
        env=env,
    )

    current_path = env.get("PATH", os.environ.get("PATH", ""))
    path_entries = [entry for entry in current_path.split(os.pathsep) if entry]
    for directory in (app_settings.homebrew_sbin, app_settings.homebrew_bin):
        if directory not in path_entries:
            path_entries.insert(0, directory)
    env["PATH"] = os.pathsep.join(path_entries)
    return configured


def check_and_update_homebrew(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Runs ``brew update`` and ``brew doctor``, stopping at the first failure.
    When both pass, later brew invocations skip automatic cleanup.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    env = step_env(context)
    clear_screen(app_settings, logger_to_use)

    log_provisioner(
        f"{symbols.get('gear', '⚙️')} Checking Homebrew installation and updating...",
        "info",
        logger_to_use,
        app_settings,
    )
    brew = BrewManager(app_settings, logger_to_use, env=env)
    if not run_sequence(
        [
            ("updating Homebrew", brew.update),
            ("running brew doctor", brew.doctor),
        ],
        app_settings,
        current_logger=logger_to_use,
    ):
        return False

    env["HOMEBREW_NO_INSTALL_CLEANUP"] = "1"
    return True


def _install_packages(
    names: Sequence[str],
    cask: bool,
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]],
    current_logger: Optional[logging.Logger],
) -> bool:
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    kind = "casks" if cask else "formulae"
    clear_screen(app_settings, logger_to_use)

    log_provisioner(
        f"{symbols.get('package', '📦')} Installing {kind}...",
        "info",
        logger_to_use,
        app_settings,
    )
    failed = apply_list(
        names,
        lambda name: BrewManager.install_command(name, cask=cask),
        app_settings,
        current_logger=logger_to_use,
        failure_message="Failed to install {item}. Continuing...",
        env=step_env(context),
    )
    return not failed


def install_formulae(
    formulae: Sequence[str],
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """Installs every formula in declared order, continuing past failures."""
    return _install_packages(
        formulae, False, app_settings, context, current_logger
    )


def install_casks(
    casks: Sequence[str],
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """Installs every cask in declared order, continuing past failures."""
    return _install_packages(casks, True, app_settings, context, current_logger)


def cleanup_homebrew(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """Update, upgrade, cleanup and doctor; the first failure ends the step."""
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    clear_screen(app_settings, logger_to_use)

    log_provisioner(
        f"{symbols.get('sparkles', '✨')} Cleaning up...",
        "info",
        logger_to_use,
        app_settings,
    )
    brew = BrewManager(app_settings, logger_to_use, env=step_env(context))
    return run_sequence(
        [
            ("updating Homebrew", brew.update),
            ("upgrading Homebrew", brew.upgrade),
            ("cleaning up Homebrew", brew.cleanup),
            ("running brew doctor", brew.doctor),
        ],
        app_settings,
        current_logger=logger_to_use,
    )
