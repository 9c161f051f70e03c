"""
config_manager.py
-----------------
JSON configuration loader with default merging.

Features:
- Builds a file index of the config directories once, for O(1) lookups
- Recursively merges loaded values over defaults
- Ignores '_notes' keys so configs can carry human-readable comments
"""

import os
import json

from dodge_game.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    ".",
    "config",
    PACKAGE_CONFIG_DIR,
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file and merge it over defaults.

    Args:
        filename: Bare filename (resolved through the index) or a path.
        default_dict: Values used for any key the file does not set.
        strict: Raise FileNotFoundError instead of falling back to defaults.

    Returns:
        dict: Merged configuration.
    """
    if default_dict is None:
        default_dict = {}

    if os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    if not isinstance(data, dict):
        if strict:
            raise ValueError(f"Config {filename} must contain a JSON object")
        DebugLogger.warn(f"Ignoring {path}: top level is not an object", category="loading")
        return _merge_dicts(default_dict, {})

    return _merge_dicts(default_dict, data)


def build_file_index():
    """Scan config directories and cache every .json path. Call once at startup."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith(".json") and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    key = filename + ".json"
    if key in _FILE_INDEX:
        return _FILE_INDEX[key]

    return filename


# ===========================================================
# File Loading
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {}
    for key, value in default.items():
        merged[key] = _merge_dicts(value, {}) if isinstance(value, dict) else value

    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
