# installer/cli_handler.py
# -*- coding: utf-8 -*-
"""
Handles Command Line Interface (CLI) interactions for the provisioner.

Prompts are blocking reads from the interactive terminal. There is no
headless mode: an unexpected answer is treated as "no" and never re-prompted.
"""

import logging
import subprocess
from typing import Optional

from common.command_utils import get_symbols, log_provisioner
from installer.config_models import AppSettings

module_logger = logging.getLogger(__name__)

WELCOME_BANNER = r"""
 _           _        _ _       _
(_)         | |      | | |     | |
 _ _ __  ___| |_ __ _| | |  ___| |__
| | |_ \/ __| __/ _  | | | / __| |_ \
| | | | \__ \ || (_| | | |_\__ \ | | |
|_|_| |_|___/\__\__,_|_|_(_)___/_| |_|
"""

DONE_BANNER = r"""
______ _____ _   _  _____
|  _  \  _  | \ | ||  ___|
| | | | | | |  \| || |__
| | | | | | | .   ||  __|
| |/ /\ \_/ / |\  || |___
|___/  \___/\_| \_/\____/
"""


def resolve_confirmation(reply: str, default: bool) -> bool:
    """
    Resolves one line of operator input to a yes/no answer.

    Empty input (after trimming) yields ``default``. Otherwise only a
    case-insensitive "y" means yes; "n", "no", "yes" or anything else means no.
    """
    reply = reply.strip()
    if not reply:
        return default
    return reply.lower() == "y"


def format_confirmation_prompt(prompt_message: str, default: bool) -> str:
    indicator = "[Y/n]" if default else "[y/N]"
    return f"{prompt_message} {indicator}: "


def cli_confirm(
    prompt_message: str,
    default: bool,
    app_settings: Optional[AppSettings],
    current_logger_instance: Optional[logging.Logger] = None,
) -> bool:
    """
    Ask the operator a yes/no question on the terminal.

    Parameters:
    prompt_message : str
        The question, without the default indicator.
    default : bool
        The answer used for empty input. Rendered as "[Y/n]" or "[y/N]".
    app_settings : Optional[AppSettings]
        The application settings object providing symbols.
    current_logger_instance : Optional[logging.Logger]
        The logger instance to use for logging.

    Returns:
    bool
        The resolved answer. End of input counts as an empty answer.
    """
    logger_to_use = (
        current_logger_instance if current_logger_instance else module_logger
    )
    try:
        reply = input(format_confirmation_prompt(prompt_message, default))
    except EOFError:
        symbols = get_symbols(app_settings)
        log_provisioner(
            f"{symbols.get('warning', '!')} No user input (EOF), using default '{'Y' if default else 'N'}' for prompt: '{prompt_message}'",
            "warning",
            logger_to_use,
            app_settings,
        )
        return default
    return resolve_confirmation(reply, default)


def cli_prompt_for_text(prompt_message: str) -> str:
    """Reads one trimmed line of free text. Returns "" at end of input."""
    try:
        return input(f"{prompt_message}: ").strip()
    except EOFError:
        return ""


def clear_screen(
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """Clears the terminal unless disabled in the settings."""
    if app_settings is not None and not app_settings.clear_screen:
        return
    try:
        subprocess.run(["clear"], check=False)
    except OSError as e:
        log_provisioner(
            f"Error clearing screen: {e}",
            "debug",
            current_logger or module_logger,
            app_settings,
        )


def print_welcome_banner() -> None:
    print(WELCOME_BANNER)
    print()
    print("Enter root password")


def print_done_banner() -> None:
    print(DONE_BANNER)
    print()
