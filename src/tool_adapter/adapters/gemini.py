# src/tool_adapter/adapters/gemini.py

"""Gemini function declaration format.

Type tags must be UPPERCASE (STRING, NUMBER, BOOLEAN, ARRAY, OBJECT).
Enum values and descriptions keep their case.
See https://ai.google.dev/docs/function_calling
"""

from typing import Any

from tool_adapter.types import UniversalTool

from ._schema import convert_params, uppercase_type


def gemini_adapter(tool: UniversalTool) -> dict[str, Any]:
    """Convert a UniversalTool to Gemini's function declaration format.

    Args:
        tool: Provider-neutral tool definition.

    Returns:
        Dict in Gemini's function declaration format.
    """
    properties, required = convert_params(tool.params, uppercase_type)

    return {
        "name": tool.name,
        "description": tool.description,
        "parameters": {
            "type": "OBJECT",
            "properties": properties,
            "required": required,
        },
    }
