# installer/components/dock/dock_configurator.py
# -*- coding: utf-8 -*-
"""
Dock layout through ``dockutil``: replacements, additions and removals.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from common.macos.brew_manager import BrewManager
from installer.cli_handler import clear_screen
from installer.config_models import AppSettings
from installer.step_patterns import (
    ItemBatch,
    gated_tool_orchestration,
    split_replacement,
    step_env,
)

module_logger = logging.getLogger(__name__)


def dock_replace_command(entry: str) -> Optional[List[str]]:
    """``dockutil --add A --replacing B`` for ``"A|B"``; None if malformed."""
    pair = split_replacement(entry)
    if pair is None:
        return None
    add_item, remove_item = pair
    return ["dockutil", "--add", add_item, "--replacing", remove_item]


def dock_add_command(item: str) -> List[str]:
    return ["dockutil", "--add", item]


def dock_remove_command(item: str) -> List[str]:
    return ["dockutil", "--remove", item]


def configure_dock(
    replace_items: Sequence[str],
    add_items: Sequence[str],
    remove_items: Sequence[str],
    app_settings: AppSettings,
    context: Optional[Dict[str, Any]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Asks whether to apply the Dock layout (default no), installs dockutil,
    then processes replacements, additions and removals in that order.
    """
    logger_to_use = current_logger if current_logger else module_logger
    clear_screen(app_settings, logger_to_use)

    return gated_tool_orchestration(
        "Apply Dock settings?",
        False,
        "dockutil",
        BrewManager.install_command("dockutil"),
        [
            ItemBatch(
                "Replacing Dock items",
                replace_items,
                dock_replace_command,
                "Failed to apply Dock replacement {item}. Continuing...",
            ),
            ItemBatch(
                "Adding Dock items",
                add_items,
                dock_add_command,
                "Failed to add {item}. Continuing...",
            ),
            ItemBatch(
                "Removing Dock items",
                remove_items,
                dock_remove_command,
                "Failed to remove {item}. Continuing...",
            ),
        ],
        app_settings,
        current_logger=logger_to_use,
        env=step_env(context),
    )
