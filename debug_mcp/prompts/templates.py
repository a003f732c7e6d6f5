"""
Template loading for debug-mcp prompts.

Templates are plain-text files in a single directory. Only the
identifiers in TemplateId can be loaded; file names never come from
caller input.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from .. import config
from ..errors import TemplateNotFound, TemplateUnreadable

logger = logging.getLogger(__name__)


class TemplateId(str, Enum):
    """Known prompt templates."""
    BASIC = "command-basic"
    INTERACTIVE = "command-interactive"

    @property
    def filename(self) -> str:
        return f"{self.value}.txt"


def template_path(template_id: TemplateId, templates_dir: Optional[Path] = None) -> Path:
    """Resolve the file backing a template identifier."""
    if templates_dir is None:
        templates_dir = config.TEMPLATES_DIR
    return Path(templates_dir) / TemplateId(template_id).filename


def load_template(template_id: TemplateId, templates_dir: Optional[Path] = None) -> str:
    """
    Read a template's full text. Never cached.

    Args:
        template_id: Which template to load
        templates_dir: Directory holding the templates (defaults to config.TEMPLATES_DIR)

    Returns:
        Template content

    Raises:
        TemplateNotFound: If the template file does not exist
        TemplateUnreadable: If the file exists but cannot be read as UTF-8 text
    """
    template_id = TemplateId(template_id)
    path = template_path(template_id, templates_dir)
    logger.debug("Loading template %s from %s", template_id.value, path)

    if not path.exists():
        logger.error("Template not found: %s", path)
        raise TemplateNotFound(
            f"Template not found: {template_id.filename}", template_id.value, path
        )

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read template %s: %s", path, e)
        raise TemplateUnreadable(
            f"Failed to read template: {template_id.filename} ({e})", template_id.value, path
        ) from e
