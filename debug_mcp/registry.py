"""
Prompt registry for debug-mcp.

Hosts enumerate and render prompts through an explicit table that is
filled at startup. Nothing is discovered by reflection.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List

from . import config
from .errors import InvalidParameter, PromptNotFound

logger = logging.getLogger(__name__)

# Debug log directory
_DEBUG_LOG_DIR = Path.home() / ".local" / "share" / "debug-mcp"
_DEBUG_LOG_FILE = _DEBUG_LOG_DIR / "debug.log"

_TRUE_STRINGS = {"true", "1", "yes"}
_FALSE_STRINGS = {"false", "0", "no"}


def _debug_log(label: str, data: Any) -> None:
    """Append a timestamped entry to the debug log file."""
    if not config.DEBUG:
        return
    try:
        _DEBUG_LOG_DIR.mkdir(parents=True, exist_ok=True)
        with open(_DEBUG_LOG_FILE, "a") as f:
            ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            f.write(f"\n{'='*72}\n")
            f.write(f"[{ts}] {label}\n")
            f.write(f"{'='*72}\n")
            f.write(json.dumps(data, indent=2, default=str))
            f.write("\n")
    except OSError as e:
        logger.warning("Could not write debug log %s: %s", _DEBUG_LOG_FILE, e)


@dataclass(frozen=True)
class PromptArgument:
    """One argument a prompt accepts."""
    name: str
    description: str
    required: bool = True
    type: str = "string"


@dataclass(frozen=True)
class PromptDefinition:
    """A named prompt bound to the callable that renders it."""
    name: str
    description: str
    handler: Callable[..., List[Dict[str, Any]]]
    arguments: List[PromptArgument] = field(default_factory=list)

    def schema(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "arguments": [
                {"name": a.name, "description": a.description, "required": a.required}
                for a in self.arguments
            ],
        }


def _coerce(arg: PromptArgument, value: Any) -> Any:
    """Check host input against the argument's declared type, converting boolean strings."""
    if arg.type == "string":
        if not isinstance(value, str):
            raise InvalidParameter(arg.name, f"Argument '{arg.name}' must be a string, got {value!r}")
        return value
    if arg.type != "boolean" or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise InvalidParameter(arg.name, f"Argument '{arg.name}' must be a boolean, got {value!r}")


class PromptRegistry:
    """Maps prompt names to their definitions, in registration order."""

    def __init__(self):
        self._prompts: Dict[str, PromptDefinition] = {}

    def register(self, definition: PromptDefinition) -> PromptDefinition:
        if definition.name in self._prompts:
            raise ValueError(f"Prompt already registered: {definition.name}")
        self._prompts[definition.name] = definition
        logger.debug("Registered prompt %s", definition.name)
        return definition

    def get(self, name: str) -> PromptDefinition:
        try:
            return self._prompts[name]
        except KeyError:
            raise PromptNotFound(name) from None

    def names(self) -> List[str]:
        return list(self._prompts)

    def list_prompts(self) -> List[Dict[str, Any]]:
        """Schemas of every registered prompt."""
        return [p.schema() for p in self._prompts.values()]

    def render(self, name: str, arguments: Dict[str, Any] | None = None) -> List[Dict[str, Any]]:
        """
        Validate arguments against a prompt's declaration and call its handler.

        Args:
            name: Registered prompt name
            arguments: Argument values keyed by argument name

        Returns:
            The handler's messages

        Raises:
            PromptNotFound: If no prompt has this name
            InvalidParameter: If an argument is missing, unknown or mistyped
        """
        definition = self.get(name)
        arguments = dict(arguments or {})

        declared = {a.name for a in definition.arguments}
        unknown = sorted(set(arguments) - declared)
        if unknown:
            raise InvalidParameter(unknown[0], f"Unknown argument for {name}: {', '.join(unknown)}")

        kwargs = {}
        for arg in definition.arguments:
            value = arguments.get(arg.name)
            if value is None:
                if arg.required:
                    raise InvalidParameter(arg.name, f"Missing required argument: {arg.name}")
                continue
            kwargs[arg.name] = _coerce(arg, value)

        logger.debug("Rendering prompt %s", name)
        messages = definition.handler(**kwargs)
        _debug_log(f"PROMPT {name}", {"arguments": kwargs, "messages": messages})
        return messages


default_registry = PromptRegistry()
