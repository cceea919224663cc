# installer/components/git/git_configurator.py
# -*- coding: utf-8 -*-
"""
Git identity configuration (global ``user.name`` and ``user.email``).
"""

import logging
from typing import Any, Dict, Optional, Tuple

from common.command_utils import get_symbols, log_provisioner, run_command
from installer.cli_handler import clear_screen, cli_confirm, cli_prompt_for_text
from installer.config_models import AppSettings
from installer.step_patterns import step_env

module_logger = logging.getLogger(__name__)

IDENTITY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("user.name", "username"),
    ("user.email", "email"),
)


def get_git_config_value(
    key: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
    env: Optional[Dict[str, str]] = None,
) -> str:
    """Returns the global git config value for ``key``, or "" when unset."""
    result = run_command(
        ["git", "config", "--global", key],
        app_settings,
        capture_output=True,
        quiet=True,
        current_logger=current_logger,
        env=env,
    )
    return result.stdout.strip() if result.success else ""


def set_git_config_value(
    key: str,
    value: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
    env: Optional[Dict[str, str]] = None,
) -> bool:
    return run_command(
        ["git", "config", "--global", key, value],
        app_settings,
        current_logger=current_logger,
        env=env,
    ).success


def setup_git_identity(
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Sets the global git username and email.

    Each field that already has a value is shown with an "overwrite?" prompt
    (default no). Declining either one keeps the current identity and ends
    the step without changing anything. Otherwise the operator is asked for
    both values, which are set together with ``color.ui true``. The first
    failing ``git config`` call ends the step.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    env = step_env(context)
    clear_screen(app_settings, logger_to_use)

    for key, label in IDENTITY_FIELDS:
        existing = get_git_config_value(key, app_settings, logger_to_use, env)
        if not existing:
            continue
        log_provisioner(
            f"{symbols.get('info', 'ℹ️')} Existing Git {label}: {existing}",
            "info",
            logger_to_use,
            app_settings,
        )
        if not cli_confirm(
            "Do you want to overwrite it?", False, app_settings, logger_to_use
        ):
            log_provisioner(
                f"{symbols.get('info', 'ℹ️')} Keeping existing Git {label}.",
                "info",
                logger_to_use,
                app_settings,
            )
            return True

    print("SET UP GIT")
    name = cli_prompt_for_text("Please enter your git username")
    email = cli_prompt_for_text("Please enter your git email")

    for key, value, label in (
        ("user.name", name, "username"),
        ("user.email", email, "email"),
        ("color.ui", "true", "color.ui"),
    ):
        if not set_git_config_value(
            key, value, app_settings, logger_to_use, env
        ):
            log_provisioner(
                f"{symbols.get('error', '❌')} Failed to set git {label}.",
                "error",
                logger_to_use,
                app_settings,
            )
            return False

    log_provisioner(
        f"{symbols.get('success', '✅')} Git is set up.",
        "success",
        logger_to_use,
        app_settings,
    )
    return True
