# installer/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for application configuration.

This module defines two kinds of settings:

- ``AppSettings``: runtime knobs for the provisioner itself (paths, intervals,
  log decoration). Loaded from defaults, environment variables and CLI args.
- ``DesiredState``: the declarative list of packages and settings the machine
  should end up with. Loaded once from a YAML document and read-only afterwards.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Default Static Values (can be overridden by env/cli) ---
CONFIG_FILE_DEFAULT: str = "config.yaml"
PROFILE_PATH_DEFAULT: str = "~/.zprofile"
HOMEBREW_PREFIX_DEFAULT: str = "/opt/homebrew"
HOMEBREW_INSTALL_URL_DEFAULT: str = (
    "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
)
KEEP_ALIVE_INTERVAL_DEFAULT: float = 60.0
LOG_PREFIX_DEFAULT: str = "[MAC-DEPLOY]"
DOCK_REPLACE_DELIMITER: str = "|"

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "step": "➡️",
    "gear": "⚙️",
    "package": "📦",
    "rocket": "🚀",
    "sparkles": "✨",
    "critical": "🔥",
    "debug": "🐛",
}


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_prefix="MACDEPLOY_", extra="ignore")

    config_file: str = Field(
        default=CONFIG_FILE_DEFAULT,
        description="Path to the desired-state YAML document.",
    )
    profile_path: str = Field(
        default=PROFILE_PATH_DEFAULT,
        description="Shell profile that receives environment initialisation lines.",
    )
    homebrew_prefix: str = Field(
        default=HOMEBREW_PREFIX_DEFAULT,
        description="Installation prefix of Homebrew (/opt/homebrew on Apple silicon).",
    )
    homebrew_install_url: str = Field(
        default=HOMEBREW_INSTALL_URL_DEFAULT,
        description="URL of the official Homebrew install script.",
    )
    keep_alive_interval: float = Field(
        default=KEEP_ALIVE_INTERVAL_DEFAULT,
        gt=0,
        description="Seconds between sudo credential refreshes.",
    )
    clear_screen: bool = Field(
        default=True,
        description="Clear the terminal before each major step.",
    )
    log_prefix: str = Field(
        default=LOG_PREFIX_DEFAULT,
        description="Prefix for log messages from the provisioner.",
    )

    symbols: Dict[str, str] = Field(
        default_factory=lambda: dict(SYMBOLS_DEFAULT)
    )

    @property
    def homebrew_bin(self) -> str:
        return f"{self.homebrew_prefix.rstrip('/')}/bin"

    @property
    def homebrew_sbin(self) -> str:
        return f"{self.homebrew_prefix.rstrip('/')}/sbin"

    @property
    def dotnet_root(self) -> str:
        return f"{self.homebrew_prefix.rstrip('/')}/opt/dotnet/libexec"


class DesiredState(BaseModel):
    """
    The declarative description of what should be installed and configured.

    Every list keeps the order in which it was declared; steps apply entries
    left to right. Dock replacements are encoded as ``"<add>|<remove>"``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    casks: Tuple[str, ...] = Field(default=(), description="Homebrew casks.")
    formulae: Tuple[str, ...] = Field(
        default=(), description="Homebrew formulae."
    )
    app_store: Tuple[str, ...] = Field(
        default=(), alias="appStore", description="Mac App Store app IDs."
    )
    default_settings: Tuple[str, ...] = Field(
        default=(),
        alias="defaultSettings",
        description="Shell commands (usually `defaults write ...`) to apply.",
    )
    dock_replace: Tuple[str, ...] = Field(
        default=(),
        alias="dockReplace",
        description="Dock replacements as '<add-path>|<remove-path>'.",
    )
    dock_add: Tuple[str, ...] = Field(
        default=(), alias="dockAdd", description="Dock items to add."
    )
    dock_remove: Tuple[str, ...] = Field(
        default=(), alias="dockRemove", description="Dock items to remove."
    )

    @field_validator(
        "casks",
        "formulae",
        "app_store",
        "default_settings",
        "dock_replace",
        "dock_add",
        "dock_remove",
        mode="before",
    )
    @classmethod
    def _coerce_entries(cls, value: Optional[Any]) -> Tuple[str, ...]:
        """
        Normalises a YAML list into a tuple of strings.

        A missing or null list is empty. Scalars such as numeric App Store IDs
        are turned into their string form; nested lists or mappings are rejected.
        """
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"expected a list of strings, got {type(value).__name__}")
        entries = []
        for entry in value:
            if isinstance(entry, (dict, list, tuple)) or entry is None:
                raise ValueError(f"list entries must be scalars, got {entry!r}")
            entries.append(str(entry))
        return tuple(entries)
