"""
Settings for debug-mcp.

Loads overrides from a .env file and the environment,
with ~/.config/debug-mcp/config.toml taking precedence.
"""

import os
import sys
import logging
from pathlib import Path
from dotenv import load_dotenv

from . import config_file

logger = logging.getLogger(__name__)

# Load .env from project root (debug_mcp/config.py -> debug_mcp/ -> project root)
_env_paths = [
    Path(__file__).parent.parent / ".env",
    Path.cwd() / ".env",
]

_env_loaded = False
for _env_path in _env_paths:
    if _env_path.exists():
        load_dotenv(dotenv_path=_env_path)
        logger.debug(f"Loaded .env from {_env_path}")
        _env_loaded = True
        break

if not _env_loaded:
    logger.debug(".env not found; using environment variables if set.")

# Templates shipped with the package
PACKAGE_TEMPLATES_DIR = Path(__file__).parent / "templates"

# config.toml overrides env vars, which override the packaged templates
_cfg_templates_dir = config_file.get("templates_dir")
TEMPLATES_DIR = Path(
    _cfg_templates_dir
    or os.getenv("DEBUG_MCP_TEMPLATES_DIR")
    or PACKAGE_TEMPLATES_DIR
).expanduser()

LOG_LEVEL = config_file.get("log_level") or os.getenv("DEBUG_MCP_LOG_LEVEL", "WARNING").upper()
if LOG_LEVEL not in config_file.VALID_LOG_LEVELS:
    print(f"debug-mcp: unknown log level '{LOG_LEVEL}', ignoring", file=sys.stderr)
    LOG_LEVEL = "WARNING"

DEBUG = bool(config_file.get("debug"))
