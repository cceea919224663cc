# installer/main_installer.py
# -*- coding: utf-8 -*-
"""
Assembles and runs the provisioning pipeline.

The pipeline is a fixed sequence of steps run top to bottom. Each step is
failure-isolated: whatever happens inside it, the next step still runs. The
only fatal condition is a desired-state document that cannot be loaded, and
it is detected before any step starts.
"""

import logging
from typing import Optional

from common.command_utils import get_symbols, log_provisioner
from common.keep_alive import SudoKeepAlive
from common.orchestrator import Orchestrator
from installer.components.defaults.defaults_configurator import (
    configure_default_settings,
)
from installer.components.dock.dock_configurator import configure_dock
from installer.components.dotnet.dotnet_installer import install_dotnet
from installer.components.git.git_configurator import setup_git_identity
from installer.components.homebrew.homebrew_installer import (
    check_and_update_homebrew,
    cleanup_homebrew,
    ensure_homebrew,
    install_casks,
    install_formulae,
    setup_homebrew_environment,
)
from installer.components.macos.macos_installer import (
    ensure_rosetta,
    finish_and_restart,
    refresh_sudo_credentials,
    start_keep_alive,
    update_macos,
)
from installer.components.mas.mas_installer import install_app_store_apps
from installer.config_loader import ConfigurationError, load_desired_state
from installer.config_models import AppSettings, DesiredState

module_logger = logging.getLogger(__name__)


def build_provisioning_orchestrator(
    desired_state: DesiredState,
    app_settings: AppSettings,
    keep_alive: SudoKeepAlive,
    current_logger: Optional[logging.Logger] = None,
) -> Orchestrator:
    """
    Registers the provisioning steps in their fixed order.

    Args:
        desired_state: The loaded desired-state document.
        app_settings: The application settings.
        keep_alive: The sudo keep-alive started by the second step.
        current_logger: Logger for the orchestrator.

    Returns:
        An Orchestrator ready to ``run()``.
    """
    orchestrator = Orchestrator(app_settings, current_logger or module_logger)
    orchestrator.context["env"] = {}

    orchestrator.add_task("Refresh sudo credentials", refresh_sudo_credentials)
    orchestrator.add_task(
        "Start sudo keep-alive", start_keep_alive, args=[keep_alive]
    )
    orchestrator.add_task("Update macOS", update_macos)
    orchestrator.add_task("Install Rosetta", ensure_rosetta)
    orchestrator.add_task("Install Homebrew", ensure_homebrew)
    orchestrator.add_task(
        "Set up Homebrew environment", setup_homebrew_environment
    )
    orchestrator.add_task(
        "Check and update Homebrew", check_and_update_homebrew
    )
    orchestrator.add_task(
        "Install formulae", install_formulae, args=[desired_state.formulae]
    )
    orchestrator.add_task(
        "Install casks", install_casks, args=[desired_state.casks]
    )
    orchestrator.add_task(
        "Install App Store apps",
        install_app_store_apps,
        args=[desired_state.app_store],
    )
    orchestrator.add_task("Install .NET", install_dotnet)
    orchestrator.add_task(
        "Configure default settings",
        configure_default_settings,
        args=[desired_state.default_settings],
    )
    orchestrator.add_task(
        "Configure Dock",
        configure_dock,
        args=[
            desired_state.dock_replace,
            desired_state.dock_add,
            desired_state.dock_remove,
        ],
    )
    orchestrator.add_task("Set up Git identity", setup_git_identity)
    orchestrator.add_task("Clean up Homebrew", cleanup_homebrew)
    orchestrator.add_task("Finish and restart", finish_and_restart)
    return orchestrator


def run_provisioning(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> int:
    """
    Loads the desired state and runs the full pipeline.

    Returns:
        0 when the pipeline ran to the end (including a declined restart),
        1 when the desired-state document could not be loaded. A confirmed
        restart exits the process from within the last step.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    try:
        desired_state = load_desired_state(
            app_settings.config_file, logger_to_use
        )
    except ConfigurationError as e:
        log_provisioner(
            f"{symbols.get('critical', '🔥')} Error reading config: {e}",
            "critical",
            logger_to_use,
            app_settings,
        )
        return 1

    keep_alive = SudoKeepAlive(app_settings, logger=logger_to_use)
    orchestrator = build_provisioning_orchestrator(
        desired_state, app_settings, keep_alive, logger_to_use
    )
    try:
        orchestrator.run()
    finally:
        keep_alive.stop()
    return 0
