# installer/step_patterns.py
# -*- coding: utf-8 -*-
"""
Reusable shapes of a provisioning step.

Every component step is one of these, filled in with its own commands and
messages:

- ``apply_list``: run one command per item, warn about failures, keep going.
- ``gated_tool_orchestration``: confirm, install a helper tool (abort on
  failure), then run several item batches with the ``apply_list`` policy.
- ``ensure``: probe; act only when the probe fails.
- ``run_sequence``: run operations in order, stop at the first failure.
- ``append_profile_line``: idempotently add a line to a shell profile and
  evaluate it in a transient shell.
"""

import logging
from typing import (
    Any,
    Callable,
    Dict,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
)

from common.command_utils import (
    get_symbols,
    log_provisioner,
    run_command,
    run_elevated_command,
)
from common.file_utils import append_line_if_missing
from installer.cli_handler import cli_confirm
from installer.config_models import DOCK_REPLACE_DELIMITER, AppSettings

module_logger = logging.getLogger(__name__)

# Builds the argument vector for one item, or None when the item is malformed.
CommandBuilder = Callable[[str], Optional[List[str]]]


class ItemBatch(NamedTuple):
    """One list of items applied with the same command shape."""

    label: str
    items: Sequence[str]
    command_for: CommandBuilder
    failure_message: str = "Failed to apply {item}. Continuing..."
    announce: Optional[str] = None


def step_env(context: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Returns the environment overrides forwarded between steps."""
    if context is None:
        return {}
    return context.setdefault("env", {})


def split_replacement(
    entry: str, delimiter: str = DOCK_REPLACE_DELIMITER
) -> Optional[Tuple[str, str]]:
    """
    Splits a ``"<add>|<remove>"`` entry.

    Returns:
        ``(add, remove)`` when the entry contains exactly one delimiter,
        otherwise None.
    """
    parts = entry.split(delimiter)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def apply_list(
    items: Sequence[str],
    command_for: CommandBuilder,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
    failure_message: str = "Failed to apply {item}. Continuing...",
    announce: Optional[str] = None,
    env: Optional[Dict[str, str]] = None,
) -> List[str]:
    """
    Runs one command per item in declared order, continuing past failures.

    Args:
        items: The items to apply.
        command_for: Builds the argument vector for an item. Returning None
            skips the item with a warning and no invocation.
        app_settings: The application settings.
        current_logger: Logger to use.
        failure_message: Warning logged for a failed item; ``{item}`` is
            substituted.
        announce: Optional notice logged before each item, e.g.
            ``"Applying setting: {item}"``.
        env: Environment overrides for every invocation.

    Returns:
        The items whose command failed, in order.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    failed: List[str] = []

    for item in items:
        command = command_for(item)
        if command is None:
            log_provisioner(
                f"{symbols.get('warning', '⚠️')} Skipping malformed entry '{item}'.",
                "warning",
                logger_to_use,
                app_settings,
            )
            continue
        if announce:
            log_provisioner(
                f"{symbols.get('step', '➡️')} {announce.format(item=item)}",
                "info",
                logger_to_use,
                app_settings,
            )
        result = run_command(
            command, app_settings, current_logger=logger_to_use, env=env
        )
        if not result.success:
            failed.append(item)
            log_provisioner(
                f"{symbols.get('warning', '⚠️')} {failure_message.format(item=item)}",
                "warning",
                logger_to_use,
                app_settings,
            )
    return failed


def gated_tool_orchestration(
    prompt_message: str,
    default: bool,
    helper_description: str,
    helper_install: Sequence[str],
    batches: Sequence[ItemBatch],
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
    env: Optional[Dict[str, str]] = None,
) -> bool:
    """
    Confirm, install a helper tool, then apply several item batches.

    Returns:
        False if the helper could not be installed. True if the operator
        declined or once every batch was attempted (individual item failures
        are only warned about).
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    if not cli_confirm(prompt_message, default, app_settings, logger_to_use):
        log_provisioner(
            f"{symbols.get('info', 'ℹ️')} Skipped: {prompt_message}",
            "info",
            logger_to_use,
            app_settings,
        )
        return True

    log_provisioner(
        f"{symbols.get('package', '📦')} Installing {helper_description}...",
        "info",
        logger_to_use,
        app_settings,
    )
    if not run_command(
        helper_install, app_settings, current_logger=logger_to_use, env=env
    ).success:
        log_provisioner(
            f"{symbols.get('error', '❌')} Failed to install {helper_description}.",
            "error",
            logger_to_use,
            app_settings,
        )
        return False

    for batch in batches:
        if not batch.items:
            continue
        log_provisioner(
            f"{symbols.get('step', '➡️')} {batch.label}...",
            "info",
            logger_to_use,
            app_settings,
        )
        apply_list(
            batch.items,
            batch.command_for,
            app_settings,
            current_logger=logger_to_use,
            failure_message=batch.failure_message,
            announce=batch.announce,
            env=env,
        )
    return True


def ensure(
    description: str,
    probe: Sequence[str],
    action: Sequence[str],
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
    elevated: bool = False,
    confirm_prompt: Optional[str] = None,
    confirm_default: bool = False,
    env: Optional[Dict[str, str]] = None,
    after_install: Optional[Callable[[], bool]] = None,
) -> bool:
    """
    Probe-then-act: performs ``action`` only if ``probe`` fails.

    Args:
        description: Human-readable name of the resource, e.g. "Rosetta".
        probe: Cheap check command; success means nothing to do.
        action: The install/configure command.
        app_settings: The application settings.
        current_logger: Logger to use.
        elevated: Run the action through sudo.
        confirm_prompt: When set, ask before acting.
        confirm_default: Default answer of ``confirm_prompt``.
        env: Environment overrides for the probe and the action.
        after_install: Follow-up run only after a successful action; its
            result becomes the step result.

    Returns:
        False if the action (or ``after_install``) failed. True otherwise,
        including when the operator declined.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    log_provisioner(
        f"{symbols.get('info', 'ℹ️')} Checking if {description} is installed...",
        "info",
        logger_to_use,
        app_settings,
    )
    if run_command(
        probe, app_settings, quiet=True, current_logger=logger_to_use, env=env
    ).success:
        log_provisioner(
            f"{symbols.get('success', '✅')} {description} is already installed.",
            "success",
            logger_to_use,
            app_settings,
        )
        return True

    if confirm_prompt and not cli_confirm(
        confirm_prompt, confirm_default, app_settings, logger_to_use
    ):
        log_provisioner(
            f"{symbols.get('info', 'ℹ️')} Skipping {description}.",
            "info",
            logger_to_use,
            app_settings,
        )
        return True

    log_provisioner(
        f"{symbols.get('package', '📦')} Installing {description}...",
        "info",
        logger_to_use,
        app_settings,
    )
    runner = run_elevated_command if elevated else run_command
    if not runner(
        action, app_settings, current_logger=logger_to_use, env=env
    ).success:
        log_provisioner(
            f"{symbols.get('error', '❌')} Error installing {description}.",
            "error",
            logger_to_use,
            app_settings,
        )
        return False
    if after_install is not None:
        return after_install()
    return True


def run_sequence(
    operations: Sequence[Tuple[str, Callable[[], bool]]],
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Runs ``(description, operation)`` pairs in order, stopping at the first
    operation that returns False. Later operations are not attempted.

    Returns:
        True if every operation succeeded.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    for description, operation in operations:
        if not operation():
            log_provisioner(
                f"{symbols.get('error', '❌')} Error {description}.",
                "error",
                logger_to_use,
                app_settings,
            )
            return False
    return True


def append_profile_line(
    line: str,
    description: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
    env: Optional[Dict[str, str]] = None,
) -> bool:
    """
    Adds ``line`` to the shell profile once, then evaluates it.

    The evaluation happens in a transient ``bash`` child, so it only proves the
    line is valid; it cannot change this process's environment. Steps that
    need the effect forward it explicitly through the step context env.

    Returns:
        True if the line is present afterwards (already there, or appended
        and evaluated), False on a file error or failed evaluation.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    written = append_line_if_missing(
        app_settings.profile_path, line, app_settings, logger_to_use
    )
    if written is None:
        return False
    if not written:
        log_provisioner(
            f"{symbols.get('success', '✅')} {description} is already configured in {app_settings.profile_path}.",
            "success",
            logger_to_use,
            app_settings,
        )
        return True

    if not run_command(
        ["bash", "-c", line],
        app_settings,
        current_logger=logger_to_use,
        env=env,
    ).success:
        log_provisioner(
            f"{symbols.get('error', '❌')} Error evaluating {description}.",
            "error",
            logger_to_use,
            app_settings,
        )
        return False
    return True
