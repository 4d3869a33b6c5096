# passforge/config.py
"""
Simple settings persistence for passforge.
Settings saved as JSON in %APPDATA%/Passforge/config.json (Windows) or ~/.passforge/config.json (fallback).
PASSFORGE_CONFIG points at a different file.
"""

import os
import json
import logging
from typing import Dict, Any

from .charsets import parse_classes
from .errors import ConfigError, PassforgeError

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "default_length": 16,
    "default_classes": ["upper", "lower", "number", "symbol"],
    "log_level": "WARNING",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Passforge")
    return os.path.join(os.path.expanduser("~"), ".passforge")

def config_path() -> str:
    override = os.getenv("PASSFORGE_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    length = cfg.get("default_length")
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ConfigError(f"default_length must be a positive integer, got {length!r}")
    names = cfg.get("default_classes") or []
    if not isinstance(names, (list, str)):
        raise ConfigError(f"default_classes must be a list of class names, got {names!r}")
    try:
        classes = parse_classes(names)
    except PassforgeError as e:
        raise ConfigError(f"default_classes: {e}") from e
    if not classes:
        raise ConfigError("default_classes must name at least one character class")
    level = str(cfg.get("log_level", "")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {cfg.get('log_level')!r}")
    cfg["log_level"] = level
    return cfg

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
        if data is not None and not isinstance(data, dict):
            raise ConfigError("top level must be a JSON object")
        # merge defaults
        out = DEFAULTS.copy()
        out.update(data or {})
        return validate_config(out)
    except (OSError, ValueError, ConfigError) as e:
        logger.warning("ignoring settings file %s: %s", p, e)
        return DEFAULTS.copy()

def save_config(cfg: Dict[str, Any]) -> str:
    validate_config(cfg)
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p
