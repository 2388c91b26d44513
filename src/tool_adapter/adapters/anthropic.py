# src/tool_adapter/adapters/anthropic.py

"""Anthropic tool use format.

Flat: no `function` wrapper, schema lives under `input_schema`.
See https://docs.anthropic.com/en/docs/build-with-claude/tool-use
"""

from typing import Any

from tool_adapter.types import UniversalTool

from ._schema import convert_params, lowercase_type


def anthropic_adapter(tool: UniversalTool) -> dict[str, Any]:
    """Convert a UniversalTool to Anthropic's tool format.

    Args:
        tool: Provider-neutral tool definition.

    Returns:
        Dict in Anthropic's tool format.
    """
    properties, required = convert_params(tool.params, lowercase_type)

    return {
        "name": tool.name,
        "description": tool.description,
        "input_schema": {
            "type": "object",
            "properties": properties,
            "required": required,
        },
    }
