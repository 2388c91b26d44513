# src/tool_adapter/adapters/_schema.py

"""Internal helper for building provider parameter schemas.

This is infrastructure, not behavior. Pure data transformation.
"""

import copy
from collections.abc import Callable
from typing import Any

from tool_adapter.types import ParamType, ToolParam


def lowercase_type(param_type: ParamType) -> str:
    return param_type.value


def uppercase_type(param_type: ParamType) -> str:
    return param_type.value.upper()


def convert_param(
    param: ToolParam, type_case: Callable[[ParamType], str]
) -> dict[str, Any]:
    """Convert a single parameter to a JSON schema property.

    Only structural type tags go through `type_case`. Enum values and
    descriptions are copied as they are.
    """
    prop: dict[str, Any] = {"type": type_case(param.type)}

    if param.description:
        prop["description"] = param.description

    if param.enum is not None:
        prop["enum"] = list(param.enum)

    if param.has_default:
        prop["default"] = _copy_default(param.default)

    if param.type is ParamType.ARRAY and param.items is not None:
        prop["items"] = {"type": type_case(param.items.type)}

    return prop


def _copy_default(value: Any) -> Any:
    """Deep copy of `value`, or `value` itself when it cannot be copied."""
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        return value


def convert_params(
    params: dict[str, ToolParam], type_case: Callable[[ParamType], str]
) -> tuple[dict[str, dict[str, Any]], list[str]]:
    """Convert all parameters of a tool.

    Returns:
        Tuple of (properties, required). `required` follows the order of
        `params`.
    """
    properties: dict[str, dict[str, Any]] = {}
    required: list[str] = []

    for param_name, param in params.items():
        properties[param_name] = convert_param(param, type_case)

        if param.required:
            required.append(param_name)

    return properties, required
