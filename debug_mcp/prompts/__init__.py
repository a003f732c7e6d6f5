"""Prompts shipped with debug-mcp."""

from pathlib import Path
from typing import Optional

from ..registry import PromptArgument, PromptDefinition, PromptRegistry
from .symfony_command import CommandParams, SymfonyCommandPrompt, substitute
from .templates import TemplateId, load_template


def register_default_prompts(
    registry: PromptRegistry,
    templates_dir: Optional[Path] = None,
) -> PromptRegistry:
    """Register every built-in prompt on the given registry."""
    symfony = SymfonyCommandPrompt(templates_dir=templates_dir)
    registry.register(
        PromptDefinition(
            name=symfony.name,
            description=symfony.description,
            handler=symfony.generate,
            arguments=[
                PromptArgument("command_name", "The command name (e.g. 'app:process-data')"),
                PromptArgument("description", "Description of what the command does"),
                PromptArgument(
                    "interactive",
                    "Whether the command requires user interaction (default: false)",
                    required=False,
                    type="boolean",
                ),
            ],
        )
    )
    return registry


__all__ = [
    "CommandParams",
    "SymfonyCommandPrompt",
    "TemplateId",
    "load_template",
    "register_default_prompts",
    "substitute",
]
