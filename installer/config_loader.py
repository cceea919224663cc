# installer/config_loader.py
# -*- coding: utf-8 -*-
"""
Configuration loader for the provisioner.

Two documents are loaded here:

1. ``AppSettings`` with the precedence
   Pydantic Model Defaults < Environment Variables < Command-Line Arguments.
2. ``DesiredState`` from the YAML document naming the packages and settings
   to apply. Failure to load it is the one fatal condition of a run.
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .config_models import AppSettings, DesiredState

module_logger = logging.getLogger(__name__)

# Maps argparse destinations onto AppSettings fields.
CLI_TO_SETTINGS: Dict[str, str] = {
    "config": "config_file",
    "profile": "profile_path",
    "homebrew_prefix": "homebrew_prefix",
    "keep_alive_interval": "keep_alive_interval",
    "log_prefix": "log_prefix",
}


class ConfigurationError(Exception):
    """Raised when the desired-state document cannot be loaded."""


def load_app_settings(
    cli_args: Optional[argparse.Namespace] = None,
    current_logger: Optional[logging.Logger] = None,
) -> AppSettings:
    """
    Loads application settings with the following precedence:
    1. Pydantic Model Defaults.
    2. Environment Variables (``MACDEPLOY_*``, loaded by BaseSettings).
    3. Command-Line Arguments (highest precedence).

    Args:
        cli_args: Parsed command-line arguments (from argparse).
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        An instance of AppSettings with the fully resolved configuration.
    """
    logger_to_use = current_logger if current_logger else module_logger

    current_values_dict: Dict[str, Any] = AppSettings().model_dump()

    if cli_args:
        for cli_key, cli_value in vars(cli_args).items():
            if cli_value is None:
                continue
            if cli_key in CLI_TO_SETTINGS:
                current_values_dict[CLI_TO_SETTINGS[cli_key]] = cli_value
            elif cli_key == "no_clear" and cli_value:
                current_values_dict["clear_screen"] = False

    try:
        final_settings = AppSettings(**current_values_dict)
    except ValidationError as e:
        logger_to_use.error(f"Configuration validation failed: {e}")
        raise SystemExit(f"Configuration error: {e}") from e

    logger_to_use.debug("Successfully loaded and validated application settings")
    return final_settings


def load_desired_state(
    config_file_path: Union[str, Path],
    current_logger: Optional[logging.Logger] = None,
) -> DesiredState:
    """
    Reads and validates the desired-state YAML document.

    An empty document yields an empty DesiredState. Missing or null lists are
    empty; scalar entries are kept as strings in declared order.

    Args:
        config_file_path: Path of the YAML document.
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        The loaded DesiredState.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid YAML,
            not a mapping, or does not match the DesiredState schema.
    """
    logger_to_use = current_logger if current_logger else module_logger
    path = Path(config_file_path).expanduser()

    try:
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Configuration file '{path}' not found."
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Could not read configuration file '{path}': {e}"
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            f"Configuration file '{path}' is not valid UTF-8: {e}"
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Could not parse YAML configuration file '{path}': {e}"
        ) from e

    if yaml_data is None:
        yaml_data = {}
    if not isinstance(yaml_data, dict):
        raise ConfigurationError(
            f"Configuration file '{path}' does not contain a YAML mapping."
        )

    try:
        desired_state = DesiredState.model_validate(yaml_data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration file '{path}' is invalid: {e}"
        ) from e

    logger_to_use.info(
        f"Loaded configuration from {path}: "
        f"{len(desired_state.formulae)} formulae, {len(desired_state.casks)} casks, "
        f"{len(desired_state.app_store)} App Store apps, "
        f"{len(desired_state.default_settings)} default settings."
    )
    return desired_state
