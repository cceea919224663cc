# common/command_utils.py
# -*- coding: utf-8 -*-
"""
Utilities for executing external commands and logging their outcome.

Every side effect of the provisioner goes through ``run_command``. A non-zero
exit status is an expected outcome here, so it is reported through the
returned ``CommandResult`` rather than raised.
"""

import logging
import os
import subprocess
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from installer.config_models import SYMBOLS_DEFAULT, AppSettings

module_logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    """Outcome of a single external command invocation."""

    model_config = ConfigDict(frozen=True)

    success: bool
    returncode: Optional[int] = None
    stdout: str = ""


def log_provisioner(
    message: str,
    level: str = "info",
    current_logger: Optional[logging.Logger] = None,
    app_settings: Optional[AppSettings] = None,
    exc_info: bool = False,
) -> None:
    """
    Logs a provisioner message at the requested level.

    Args:
        message (str): The log message to be recorded.
        level (str): The severity level of the log message. Defaults to "info".
            Common options include "debug", "info", "success", "warning",
            "error", and "critical". "success" is logged at info level.
        current_logger (Optional[logging.Logger]): A logger instance to use for
            logging. If not provided, a module-level logger will be used.
        app_settings (Optional[AppSettings]): Optional application settings.
        exc_info (bool): Include exception details in the log record.

    Returns:
        None
    """
    effective_logger = current_logger if current_logger else module_logger

    if level == "warning":
        effective_logger.warning(message, exc_info=exc_info)
    elif level == "error":
        effective_logger.error(message, exc_info=exc_info)
    elif level == "critical":
        effective_logger.critical(message, exc_info=exc_info)
    elif level == "debug":
        effective_logger.debug(message, exc_info=exc_info)
    else:
        effective_logger.info(message, exc_info=exc_info)


def get_symbols(app_settings: Optional[AppSettings]) -> Dict[str, str]:
    """Returns the symbol map of the settings, or the defaults."""
    if app_settings and app_settings.symbols:
        return app_settings.symbols
    return SYMBOLS_DEFAULT


def _get_elevated_command_prefix() -> List[str]:
    """
    Determines the command prefix that ensures elevated privileges.

    Returns:
        List[str]: ``["sudo"]`` when the process is not running as root,
        otherwise an empty list.
    """
    return [] if os.geteuid() == 0 else ["sudo"]


def run_command(
    command: Sequence[str],
    app_settings: Optional[AppSettings],
    capture_output: bool = False,
    quiet: bool = False,
    cmd_input: Optional[str] = None,
    current_logger: Optional[logging.Logger] = None,
    cwd: Optional[str] = None,
    env: Optional[Dict[str, str]] = None,
) -> CommandResult:
    """
    Executes an external program and reports whether it succeeded.

    By default the child inherits the terminal so the operator sees long
    running installs live. The call blocks until the child exits; there is
    no timeout.

    Args:
        command (Sequence[str]): Program name followed by its arguments.
        app_settings (Optional[AppSettings]): Settings providing log symbols.
        capture_output (bool): Capture stdout and stderr instead of streaming
            them. The captured stdout is returned in ``CommandResult.stdout``.
        quiet (bool): Discard the child's output and log the execution at
            debug level. Used for cheap probes.
        cmd_input (Optional[str]): Text fed to the child's standard input.
        current_logger (Optional[logging.Logger]): Logger to use.
        cwd (Optional[str]): Working directory for the child.
        env (Optional[Dict[str, str]]): Variables layered over the inherited
            environment for this invocation only.

    Returns:
        CommandResult: ``success`` is True only for exit status 0. A missing
        executable yields ``success=False`` and ``returncode=None``.
    """
    effective_logger = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    command_list = [str(part) for part in command]
    command_to_log_str = subprocess.list2cmdline(command_list)

    log_level = "debug" if quiet else "info"
    log_provisioner(
        f"{symbols.get('gear', '⚙️')} Executing: {command_to_log_str} {f'(in {cwd})' if cwd else ''}".rstrip(),
        log_level,
        effective_logger,
        app_settings,
    )

    run_kwargs: Dict = {
        "text": True,
        "input": cmd_input,
        "cwd": cwd,
        "env": {**os.environ, **env} if env else None,
    }
    if capture_output:
        run_kwargs["capture_output"] = True
    elif quiet:
        run_kwargs["stdout"] = subprocess.DEVNULL
        run_kwargs["stderr"] = subprocess.DEVNULL

    try:
        result = subprocess.run(command_list, check=False, **run_kwargs)
    except FileNotFoundError as e:
        log_provisioner(
            f"{symbols.get('error', '❌')} Command not found: {e.filename or command_list[0]}. Ensure it's installed and in PATH.",
            "debug" if quiet else "error",
            effective_logger,
            app_settings,
        )
        return CommandResult(success=False, returncode=None)
    except OSError as e:
        log_provisioner(
            f"{symbols.get('error', '❌')} Could not start `{command_to_log_str}`: {e}",
            "error",
            effective_logger,
            app_settings,
        )
        return CommandResult(success=False, returncode=None)

    stdout = result.stdout if capture_output and result.stdout else ""
    if result.returncode != 0 and not quiet:
        log_provisioner(
            f"{symbols.get('error', '❌')} Command `{command_to_log_str}` failed (rc {result.returncode}).",
            "error",
            effective_logger,
            app_settings,
        )
        if capture_output and result.stderr and result.stderr.strip():
            log_provisioner(
                f"   stderr: {result.stderr.strip()}",
                "debug",
                effective_logger,
                app_settings,
            )

    return CommandResult(
        success=result.returncode == 0,
        returncode=result.returncode,
        stdout=stdout,
    )


def run_elevated_command(
    command: Sequence[str],
    app_settings: Optional[AppSettings],
    capture_output: bool = False,
    quiet: bool = False,
    current_logger: Optional[logging.Logger] = None,
    env: Optional[Dict[str, str]] = None,
) -> CommandResult:
    """
    Executes a command with elevated permissions via ``sudo``.

    The prefix is omitted when the process already runs as root. See
    ``run_command`` for the meaning of the remaining arguments.
    """
    prefix = _get_elevated_command_prefix()
    return run_command(
        prefix + list(command),
        app_settings,
        capture_output=capture_output,
        quiet=quiet,
        current_logger=current_logger,
        env=env,
    )
