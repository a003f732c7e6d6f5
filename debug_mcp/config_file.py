"""
Optional config file support for debug-mcp.

Reads ~/.config/debug-mcp/config.toml if it exists.
Missing config or invalid values fall back to defaults.
"""

import logging
import sys
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "debug-mcp" / "config.toml"

DEFAULTS: Dict[str, Any] = {
    "templates_dir": None,  # None means use the templates shipped with the package
    "log_level": None,  # None means use DEBUG_MCP_LOG_LEVEL or WARNING
    "debug": False,
}

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

_config: Dict[str, Any] = {}
_loaded = False


def _validate_str(value: Any, key: str) -> str | None:
    """Validate a non-empty string config value. Returns None if invalid."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    print(f"debug-mcp: config '{key}' must be a non-empty string, ignoring", file=sys.stderr)
    return None


def load_config() -> Dict[str, Any]:
    """
    Load config from TOML file, merging with defaults.

    Returns a dict with keys: templates_dir, log_level, debug.
    """
    global _config, _loaded

    if _loaded:
        return _config

    _config = dict(DEFAULTS)
    _loaded = True

    if not CONFIG_PATH.exists():
        logger.debug("No config file at %s, using defaults", CONFIG_PATH)
        return _config

    try:
        with open(CONFIG_PATH, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"debug-mcp: error reading config: {e}", file=sys.stderr)
        return _config

    # [templates] section
    templates_section = data.get("templates", {})
    if isinstance(templates_section, dict):
        templates_dir = templates_section.get("dir")
        if templates_dir is not None:
            val = _validate_str(templates_dir, "templates.dir")
            if val is not None:
                _config["templates_dir"] = val

    # [logging] section
    logging_section = data.get("logging", {})
    if isinstance(logging_section, dict):
        level = logging_section.get("level")
        if level is not None:
            if isinstance(level, str) and level.upper() in VALID_LOG_LEVELS:
                _config["log_level"] = level.upper()
            else:
                print(f"debug-mcp: unknown log level '{level}', ignoring", file=sys.stderr)

    # [debug] section
    debug_section = data.get("debug", {})
    if isinstance(debug_section, dict):
        enabled = debug_section.get("enabled")
        if isinstance(enabled, bool):
            _config["debug"] = enabled

    logger.debug("Loaded config: %s", _config)
    return _config


def get(key: str) -> Any:
    """Get a config value by key."""
    cfg = load_config()
    return cfg.get(key, DEFAULTS.get(key))


def reset():
    """Reset loaded config (for testing)."""
    global _config, _loaded
    _config = {}
    _loaded = False
