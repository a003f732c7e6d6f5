"""
debug-mcp entrypoint.

Reads a JSON request from stdin, renders the prompt, prints JSON to stdout.

    {"prompt": "symfony_command", "arguments": {...}}  -> {"messages": [...]}
    {}                                                 -> {"prompts": [...]}
"""

import json
import logging
import sys

from . import config
from .errors import PromptError
from .prompts import register_default_prompts
from .registry import default_registry


def main():
    """Read stdin, render the requested prompt, print the result."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    raw = sys.stdin.read().strip()
    if not raw:
        sys.exit(1)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"debug-mcp: invalid JSON input: {e}", file=sys.stderr)
        sys.exit(2)

    if not isinstance(data, dict):
        print("debug-mcp: input must be a JSON object", file=sys.stderr)
        sys.exit(2)

    if not default_registry.names():
        register_default_prompts(default_registry)

    if "prompt" not in data:
        print(json.dumps({"prompts": default_registry.list_prompts()}))
        sys.exit(0)

    name = data["prompt"]
    if not isinstance(name, str):
        print("debug-mcp: 'prompt' must be a string", file=sys.stderr)
        sys.exit(2)

    arguments = data.get("arguments", {})
    if not isinstance(arguments, dict):
        print("debug-mcp: 'arguments' must be a JSON object", file=sys.stderr)
        sys.exit(2)

    try:
        messages = default_registry.render(name, arguments)
    except PromptError as e:
        print(f"debug-mcp: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps({"messages": messages}))
    sys.exit(0)


if __name__ == "__main__":
    main()
