"""
config_manager.py
-----------------
Configuration loader for machine settings.

Features:
- Supports .json and .yaml/.yml config files
- Looks up relative names in a small set of search directories
- Recursively merges over defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

import yaml

from reaction_machine.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

SEARCH_DIRS = [
    ".",
    "config",
]

YAML_EXTENSIONS = (".yaml", ".yml")


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename or full path (.json, .yaml or .yml)
        default_dict: Default fallback config
        strict: If True, raise exception on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = _resolve_search_path(filename)

    try:
        if path.endswith(YAML_EXTENSIONS):
            data = _load_yaml(path)
        else:
            data = _load_json(path)

        if not isinstance(data, dict):
            raise ValueError(f"top level of {path} is not a mapping")

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return default_dict.copy()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Return the first existing match in SEARCH_DIRS, else the name unchanged."""
    filename = os.fspath(filename)
    if os.path.isabs(filename) or os.path.exists(filename):
        return filename

    for directory in SEARCH_DIRS:
        candidate = os.path.join(directory, filename)
        if os.path.isfile(candidate):
            return candidate

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    """Load YAML config file. An empty file yields an empty dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (YAML)", category="loading")
    return data if data is not None else {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
