"""Configuration path helpers for surveyor."""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """Return XDG-compliant config directory: ~/.config/surveyor"""
    return Path.home() / ".config" / "surveyor"


def get_config_path() -> Path:
    """Return path to user config file.

    Priority:
    1. SURVEYOR_CONFIG environment variable (if set)
    2. ~/.config/surveyor/config.yaml (default XDG location)
    """
    if "SURVEYOR_CONFIG" in os.environ:
        return Path(os.environ["SURVEYOR_CONFIG"])

    return get_config_dir() / "config.yaml"
