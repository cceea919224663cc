# common/file_utils.py
# -*- coding: utf-8 -*-
"""
File system utility functions for shell profile maintenance.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from installer.config_models import AppSettings

from .command_utils import get_symbols, log_provisioner

module_logger = logging.getLogger(__name__)


def profile_contains_line(profile_path: Path, line: str) -> bool:
    """Returns True if any existing line of the file contains ``line``."""
    if not profile_path.exists():
        return False
    with open(profile_path, "r", encoding="utf-8") as f:
        for existing_line in f:
            if line in existing_line:
                return True
    return False


def append_line_if_missing(
    file_path: Union[str, Path],
    line: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> Optional[bool]:
    """
    Append ``line`` to a file unless some existing line already contains it.

    The file (and its parent directory) is created when absent. Reading and
    appending are not synchronised against other writers.

    Parameters:
        file_path (Union[str, Path]): The file to update. ``~`` is expanded.
        line (str): The line to add, without trailing newline.
        app_settings (Optional[AppSettings]): Settings providing log symbols.
        current_logger (Optional[logging.Logger]): Logger to use.

    Returns:
        Optional[bool]: True if the line was written, False if it was already
        present, None if the file could not be read or written.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    path = Path(file_path).expanduser()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
        if profile_contains_line(path, line):
            log_provisioner(
                f"{symbols.get('info', 'ℹ️')} '{line}' is already in {path}.",
                "info",
                logger_to_use,
                app_settings,
            )
            return False

        existing = path.read_text(encoding="utf-8")
        with open(path, "a", encoding="utf-8") as f:
            if existing and not existing.endswith("\n"):
                f.write("\n")
            f.write(line + "\n")
    except (OSError, UnicodeDecodeError) as e:
        log_provisioner(
            f"{symbols.get('error', '❌')} Error updating {path}: {e}",
            "error",
            logger_to_use,
            app_settings,
        )
        return None

    log_provisioner(
        f"{symbols.get('success', '✅')} Added '{line}' to {path}.",
        "success",
        logger_to_use,
        app_settings,
    )
    return True
