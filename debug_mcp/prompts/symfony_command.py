"""
Symfony Console Command prompt.

Builds a user message asking the model to write a production-ready
Symfony Console Command, from one of two templates.
"""

import logging
import re
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional

from openai.types.chat import ChatCompletionUserMessageParam

from ..errors import InvalidParameter
from .templates import TemplateId, load_template

logger = logging.getLogger(__name__)

PROMPT_NAME = "symfony_command"
PROMPT_DESCRIPTION = "Generate a Symfony Console Command with proper structure and best practices"

_PLACEHOLDER_RE = re.compile(r"\{(command_name|description)\}")


@dataclass(frozen=True)
class CommandParams:
    """Values substituted into a command template."""
    command_name: str
    description: str


def substitute(template: str, params: CommandParams) -> str:
    """
    Replace {command_name} and {description} with the given values.

    Single pass: inserted values are not scanned again, so a value that
    looks like a placeholder stays as written. Other braces are untouched.
    """
    values = asdict(params)
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], template)


class SymfonyCommandPrompt:
    """Generates Symfony Console Command prompts for LLM code generation."""

    name = PROMPT_NAME
    description = PROMPT_DESCRIPTION

    def __init__(self, templates_dir: Optional[Path] = None):
        self.templates_dir = templates_dir

    def generate(
        self,
        command_name: str,
        description: str,
        interactive: bool = False,
    ) -> List[ChatCompletionUserMessageParam]:
        """
        Generate the prompt for creating a Symfony Console Command.

        Args:
            command_name: The command name (e.g. 'app:process-data')
            description: What the command does
            interactive: Whether the command asks the user for input

        Returns:
            A single user message

        Raises:
            InvalidParameter: If command_name or description is empty
            TemplateNotFound: If the selected template is missing
            TemplateUnreadable: If the selected template cannot be read
        """
        if not command_name:
            raise InvalidParameter("command_name", "Command name cannot be empty")
        if not description:
            raise InvalidParameter("description", "Description cannot be empty")

        template_id = TemplateId.INTERACTIVE if interactive else TemplateId.BASIC
        template = load_template(template_id, self.templates_dir)

        content = substitute(template, CommandParams(command_name, description))
        logger.debug("Rendered %s for %s (%d chars)", template_id.value, command_name, len(content))

        return [ChatCompletionUserMessageParam(role="user", content=content)]
