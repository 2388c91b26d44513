# src/tool_adapter/adapters/openai.py

"""OpenAI function calling format.

The function definition is wrapped in a `{"type": "function"}` object.
See https://platform.openai.com/docs/guides/function-calling
"""

from typing import Any

from tool_adapter.types import UniversalTool

from ._schema import convert_params, lowercase_type


def openai_adapter(tool: UniversalTool) -> dict[str, Any]:
    """Convert a UniversalTool to OpenAI's tool format.

    Args:
        tool: Provider-neutral tool definition.

    Returns:
        Dict in OpenAI's tool format.
    """
    properties, required = convert_params(tool.params, lowercase_type)

    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": {
                "type": "object",
                "properties": properties,
                "required": required,
            },
        },
    }
