#!/usr/bin/env python3

import os
import re
from typing import Dict, Optional

import yaml

from ..core.errors import ConfigError, LibraryIOError
from .system import get_real_home

# Type definitions
SettingsDict = Dict[str, Optional[str]]

# Environment variables
LIBRARY_PATH_VAR = "KCONF_LIBRARY_PATH"
CONFIG_PATH_VAR = "KCONF_CONFIG"
DEFAULT_KUBECONFIG_VAR = "KUBECONFIG"

# Default paths
DEFAULT_CONFIG_PATH = "kconf.yaml"
DEFAULT_LIBRARY_DIR = ".kconf"
USER_CONFIG_DIR = ".config/kconf"
LIBRARY_DIR_MODE = 0o755

# Shell variable names the export line may assign
VARIABLE_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def default_settings() -> SettingsDict:
    """Settings used when no settings file exists"""
    return {
        "library_path": None,
        "kubeconfig_var": DEFAULT_KUBECONFIG_VAR,
    }


def ensure_user_config_dir() -> str:
    """Ensure the user's config directory exists"""
    user_config_dir = os.path.join(get_real_home(), USER_CONFIG_DIR)
    os.makedirs(user_config_dir, exist_ok=True)
    return user_config_dir


def find_config_file(config_path: Optional[str] = None) -> Optional[str]:
    """
    Find the settings file by checking multiple locations:
    1. Specified path from command line
    2. KCONF_CONFIG environment variable
    3. User config directory (~/.config/kconf/)

    Returns None when no settings file exists; kconf then runs on defaults.
    """
    if config_path:
        if not os.path.isfile(config_path):
            raise ConfigError(f"Config file not found at: {config_path}")
        return config_path

    env_path = os.environ.get(CONFIG_PATH_VAR, "").strip()
    if env_path:
        if not os.path.isfile(env_path):
            raise ConfigError(f"Config file not found at: {env_path}")
        return env_path

    # Without a home there is no user settings file; the library path decides later
    try:
        home = get_real_home()
    except LibraryIOError:
        return None

    user_config = os.path.join(home, USER_CONFIG_DIR, DEFAULT_CONFIG_PATH)
    if os.path.isfile(user_config):
        return user_config

    return None


def load_config(config_path: Optional[str]) -> SettingsDict:
    """Load settings from the given path, filling in defaults for missing keys"""
    settings = default_settings()
    if config_path is None:
        return settings

    try:
        with open(config_path, "r") as file:
            data = yaml.safe_load(file)
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing YAML in {config_path}: {e}") from e

    if data is None:
        return settings
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    library_path = data.get("library_path")
    if library_path is not None:
        if not isinstance(library_path, str):
            raise ConfigError("library_path must be a string")
        settings["library_path"] = library_path

    kubeconfig_var = data.get("kubeconfig_var")
    if kubeconfig_var is not None:
        if not isinstance(kubeconfig_var, str) or not VARIABLE_NAME_PATTERN.fullmatch(
            kubeconfig_var.strip()
        ):
            raise ConfigError(
                f"kubeconfig_var must be a shell variable name: {kubeconfig_var!r}"
            )
        settings["kubeconfig_var"] = kubeconfig_var.strip()

    return settings


def create_default_config(config_path: str) -> SettingsDict:
    """Create a default settings file"""
    default_config = default_settings()
    default_config["library_path"] = os.path.join(get_real_home(), DEFAULT_LIBRARY_DIR)

    # Ensure the directory exists
    os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)

    try:
        with open(config_path, "w") as f:
            yaml.dump(default_config, f, default_flow_style=False)
        return default_config
    except OSError as e:
        raise ConfigError(f"Failed to create config file: {e}") from e
