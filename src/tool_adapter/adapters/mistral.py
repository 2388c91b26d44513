# src/tool_adapter/adapters/mistral.py

"""Mistral function calling format.

Same envelope as OpenAI. Kept as its own adapter so either API can
diverge without touching the other.
See https://docs.mistral.ai/capabilities/function_calling/
"""

from typing import Any

from tool_adapter.types import UniversalTool

from ._schema import convert_params, lowercase_type


def mistral_adapter(tool: UniversalTool) -> dict[str, Any]:
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
