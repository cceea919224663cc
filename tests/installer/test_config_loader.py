# tests/installer/test_config_loader.py
# -*- coding: utf-8 -*-
"""
Tests for loading application settings and the desired-state document.
"""

import argparse

import pytest

from installer.config_loader import (
    ConfigurationError,
    load_app_settings,
    load_desired_state,
)
from installer.config_models import (
    CONFIG_FILE_DEFAULT,
    DesiredState,
)

FULL_DOCUMENT = """\
casks:
  - firefox
  - iterm2
formulae:
  - git
  - wget
appStore:
  - 497799835
  - "1333542190"
defaultSettings:
  - defaults write com.apple.finder AppleShowAllFiles -bool true
dockReplace:
  - /Applications/Firefox.app|/Applications/Safari.app
dockAdd:
  - /Applications/iTerm.app
dockRemove:
  - Mail
"""


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_desired_state_all_keys(tmp_path):
    state = load_desired_state(write_config(tmp_path, FULL_DOCUMENT))

    assert state.casks == ("firefox", "iterm2")
    assert state.formulae == ("git", "wget")
    assert state.app_store == ("497799835", "1333542190")
    assert state.default_settings == (
        "defaults write com.apple.finder AppleShowAllFiles -bool true",
    )
    assert state.dock_replace == (
        "/Applications/Firefox.app|/Applications/Safari.app",
    )
    assert state.dock_add == ("/Applications/iTerm.app",)
    assert state.dock_remove == ("Mail",)


def test_load_desired_state_missing_keys_are_empty(tmp_path):
    state = load_desired_state(write_config(tmp_path, "formulae:\n  - git\n"))

    assert state.formulae == ("git",)
    assert state.casks == ()
    assert state.dock_remove == ()


def test_load_desired_state_null_list_is_empty(tmp_path):
    state = load_desired_state(write_config(tmp_path, "casks:\nformulae: ~\n"))

    assert state == DesiredState()


def test_load_desired_state_empty_document(tmp_path):
    assert load_desired_state(write_config(tmp_path, "")) == DesiredState()


def test_load_desired_state_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_desired_state(tmp_path / "absent.yaml")


def test_load_desired_state_malformed_yaml(tmp_path):
    with pytest.raises(ConfigurationError, match="parse"):
        load_desired_state(write_config(tmp_path, "casks: [firefox\n"))


def test_load_desired_state_non_utf8_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_bytes(b"formulae:\n  - caf\xe9\n")

    with pytest.raises(ConfigurationError, match="UTF-8"):
        load_desired_state(path)


def test_load_desired_state_not_a_mapping(tmp_path):
    with pytest.raises(ConfigurationError, match="mapping"):
        load_desired_state(write_config(tmp_path, "- git\n- wget\n"))


def test_load_desired_state_rejects_nested_entries(tmp_path):
    with pytest.raises(ConfigurationError, match="invalid"):
        load_desired_state(
            write_config(tmp_path, "formulae:\n  - name: git\n")
        )


def test_load_desired_state_rejects_scalar_list(tmp_path):
    with pytest.raises(ConfigurationError, match="invalid"):
        load_desired_state(write_config(tmp_path, "formulae: git\n"))


def test_desired_state_is_frozen():
    state = DesiredState(formulae=["git"])

    with pytest.raises(Exception):
        state.formulae = ("wget",)


def test_load_app_settings_defaults(monkeypatch):
    monkeypatch.delenv("MACDEPLOY_CONFIG_FILE", raising=False)

    settings = load_app_settings()

    assert settings.config_file == CONFIG_FILE_DEFAULT
    assert settings.clear_screen is True


def test_load_app_settings_env_overrides_default(monkeypatch):
    monkeypatch.setenv("MACDEPLOY_HOMEBREW_PREFIX", "/usr/local")

    settings = load_app_settings()

    assert settings.homebrew_prefix == "/usr/local"
    assert settings.homebrew_bin == "/usr/local/bin"


def test_load_app_settings_cli_overrides_env(monkeypatch):
    monkeypatch.setenv("MACDEPLOY_CONFIG_FILE", "from-env.yaml")
    cli_args = argparse.Namespace(
        config="from-cli.yaml",
        profile=None,
        homebrew_prefix=None,
        keep_alive_interval=None,
        log_prefix=None,
        no_clear=True,
        log_file=None,
        verbose=False,
    )

    settings = load_app_settings(cli_args)

    assert settings.config_file == "from-cli.yaml"
    assert settings.clear_screen is False


def test_load_app_settings_invalid_value_exits():
    cli_args = argparse.Namespace(keep_alive_interval=0.0)

    with pytest.raises(SystemExit):
        load_app_settings(cli_args)
