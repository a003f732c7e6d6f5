"""
Exceptions raised by debug-mcp prompts.

Everything derives from PromptError so a host can catch one type.
"""

from pathlib import Path
from typing import Optional


class PromptError(Exception):
    """Base class for all prompt failures."""


class InvalidParameter(PromptError, ValueError):
    """A caller-supplied argument is missing or unusable."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class PromptNotFound(PromptError, KeyError):
    """No prompt is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown prompt: {self.name}"


class TemplateError(PromptError):
    """A template could not be loaded."""

    def __init__(self, message: str, template_id: str, path: Optional[Path] = None):
        super().__init__(message)
        self.template_id = template_id
        self.path = path


class TemplateNotFound(TemplateError):
    """The template file is missing (packaging or path problem)."""


class TemplateUnreadable(TemplateError):
    """The template file exists but could not be read."""
