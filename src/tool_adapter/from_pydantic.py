# src/tool_adapter/from_pydantic.py

"""Build tool definitions from Pydantic input models.

Reads `model_json_schema()` one level deep. Nested models keep only their
own first-level fields, and those are not converted further.
"""

from typing import Any

from pydantic import BaseModel

from .types import ParamType, ToolItems, ToolParam, UniversalTool

_JSON_TYPES = {
    "string": ParamType.STRING,
    "integer": ParamType.NUMBER,
    "number": ParamType.NUMBER,
    "boolean": ParamType.BOOLEAN,
    "array": ParamType.ARRAY,
    "object": ParamType.OBJECT,
}


def tool_from_model(
    *,
    name: str,
    description: str,
    input_schema: type[BaseModel],
) -> UniversalTool:
    """Create a UniversalTool from a Pydantic model's fields.

    Args:
        name: Tool name, used as is.
        description: Tool description.
        input_schema: Pydantic model describing the tool's arguments.

    Returns:
        UniversalTool with one parameter per model field, in field order.
    """
    schema = input_schema.model_json_schema()
    defs = schema.get("$defs", {})
    required = set(schema.get("required", []))

    params = {
        field_name: _to_param(field_schema, defs, field_name in required)
        for field_name, field_schema in schema.get("properties", {}).items()
    }
    return UniversalTool(name=name, description=description, params=params)


def _to_param(
    schema: dict[str, Any],
    defs: dict[str, Any],
    required: bool,
    nested: bool = True,
) -> ToolParam:
    schema = _unwrap(schema, defs)
    param_type = _param_type(schema)
    fields: dict[str, Any] = {"type": param_type, "required": required}

    if schema.get("description"):
        fields["description"] = schema["description"]

    enum = schema.get("enum")
    if isinstance(enum, list) and all(isinstance(v, str) for v in enum):
        fields["enum"] = enum

    if "default" in schema:
        fields["default"] = schema["default"]

    if param_type is ParamType.ARRAY and isinstance(schema.get("items"), dict):
        fields["items"] = ToolItems(type=_param_type(_unwrap(schema["items"], defs)))

    if param_type is ParamType.OBJECT and nested and "properties" in schema:
        inner_required = set(schema.get("required", []))
        fields["properties"] = {
            key: _to_param(value, defs, key in inner_required, nested=False)
            for key, value in schema["properties"].items()
        }

    return ToolParam(**fields)


def _unwrap(schema: dict[str, Any], defs: dict[str, Any]) -> dict[str, Any]:
    """Resolve a `$ref` and strip the `null` branch of an Optional."""
    schema = _resolve_ref(schema, defs)
    for key in ("anyOf", "oneOf", "allOf"):
        variants = [v for v in schema.get(key, []) if v.get("type") != "null"]
        if variants:
            rest = {k: v for k, v in schema.items() if k != key}
            return {**_resolve_ref(variants[0], defs), **rest}
    return schema


def _resolve_ref(schema: dict[str, Any], defs: dict[str, Any]) -> dict[str, Any]:
    ref = schema.get("$ref")
    if not isinstance(ref, str):
        return schema
    target = defs.get(ref.rsplit("/", 1)[-1], {})
    return {**target, **{k: v for k, v in schema.items() if k != "$ref"}}


def _param_type(schema: dict[str, Any]) -> ParamType:
    json_type = schema.get("type")
    if isinstance(json_type, str) and json_type in _JSON_TYPES:
        return _JSON_TYPES[json_type]
    if "properties" in schema:
        return ParamType.OBJECT
    return ParamType.STRING
