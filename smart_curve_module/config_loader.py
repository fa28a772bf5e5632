#!/usr/bin/env python3
"""
Configuration loader for curve generation.
Reads curve configurations from JSON files and writes snapshots back.
"""
import json
import logging
import os
from dataclasses import fields
from typing import Dict, Iterable, List, Optional, Tuple

from .config import CurveConfigBase, CustomCurveConfig, ParametricConfig, parse_curve_config
from .errors import InvalidConfigurationShape
from .vectors import Point3

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "curves.json"


def _default_paths() -> List[str]:
    cwd = os.getcwd()
    return [
        os.path.join(cwd, "config", DEFAULT_CONFIG_NAME),
        os.path.join(cwd, DEFAULT_CONFIG_NAME),
        os.path.join(os.path.dirname(cwd), "config", DEFAULT_CONFIG_NAME),
    ]


def load_curve_config(config_path: Optional[str] = None) -> Tuple[Dict, Optional[str]]:
    """Load a curve configuration document from a JSON file.

    Args:
        config_path: Path to the JSON file. If None, searches the default
            locations. Relative paths are tried against the working directory
            and its config/ folder.

    Returns:
        tuple: (config_dict, actual_config_path)
        - config_dict: The loaded document (or empty dict if not found)
        - actual_config_path: The absolute path that was used (or None if not found)

    The document holds a "curves" list, each entry a curve config dict:
        {"curves": [{"type": "spiral", "turns": 4, "smoothness": 1}, ...]}

    Search order when config_path is None:
        1. Current working directory: config/curves.json
        2. Current working directory: curves.json
        3. Parent directory: config/curves.json
    """
    if config_path is None:
        default_paths = _default_paths()
        for path in default_paths:
            if os.path.exists(path):
                config_path = os.path.abspath(path)
                break
        else:
            logger.warning("No curve config found in default locations: %s", default_paths)
            return {}, None

    if not os.path.isabs(config_path):
        abs_path = os.path.abspath(config_path)
        if os.path.exists(abs_path):
            config_path = abs_path
        else:
            cwd = os.getcwd()
            for test_path in (os.path.join(cwd, config_path), os.path.join(cwd, "config", config_path)):
                if os.path.exists(test_path):
                    config_path = os.path.abspath(test_path)
                    break
            else:
                config_path = abs_path

    if not os.path.exists(config_path):
        logger.warning("Curve config file not found: %s", config_path)
        return {}, None

    try:
        with open(config_path, "r") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning("Error parsing curve config %s: %s", config_path, e)
        return {}, None
    except OSError as e:
        logger.warning("Error reading curve config %s: %s", config_path, e)
        return {}, None

    if not isinstance(config, dict):
        logger.warning("Curve config %s is not a JSON object", config_path)
        return {}, None

    logger.info("Loaded curve configuration from: %s", config_path)
    return config, os.path.abspath(config_path)


def load_curve_configs(config_path: Optional[str] = None) -> List[CurveConfigBase]:
    """Load and parse the "curves" list of a config document.

    Raises:
        InvalidConfigurationShape: "curves" is not a list or an entry is malformed.
    """
    config, _ = load_curve_config(config_path)
    entries = config.get("curves", [])
    if not isinstance(entries, list):
        raise InvalidConfigurationShape("'curves' must be a list of curve configs")
    return [parse_curve_config(entry) for entry in entries]


def _jsonable(value):
    if isinstance(value, Point3):
        return list(value.to_tuple())
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if hasattr(value, "tolist"):
        return value.tolist()
    return value


def config_to_dict(config: CurveConfigBase) -> Dict:
    """JSON-ready dict for a config; the inverse of parse_curve_config()."""
    if isinstance(config, ParametricConfig):
        raise InvalidConfigurationShape("parametric configs hold a function and cannot be saved")
    out = {"type": config.type}
    for f in fields(config):
        if f.name in ("type", "params"):
            continue
        value = getattr(config, f.name)
        if value is not None:
            out[f.name] = _jsonable(value)
    if isinstance(config, CustomCurveConfig):
        out.update({k: _jsonable(v) for k, v in config.params.items()})
    return out


def save_config_snapshot(configs: Iterable[CurveConfigBase], output_path: str) -> str:
    """Save curve configurations to a JSON file.

    Useful to keep the exact curves used for a render or an animation.

    Args:
        configs: Curve configs to save.
        output_path: Path where to save the config JSON file.

    Returns:
        str: The absolute path where the config was saved.
    """
    payload = {"curves": [config_to_dict(c) for c in configs]}
    output_path = os.path.abspath(output_path)
    os.makedirs(os.path.dirname(output_path), exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2)

    logger.info("Saved curve configuration snapshot to: %s", output_path)
    return output_path
