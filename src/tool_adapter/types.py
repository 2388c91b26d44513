# src/tool_adapter/types.py

"""Provider-neutral tool definitions.

This is the data contract every adapter reads. No logic lives here.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer

Provider = Literal["openai", "anthropic", "gemini", "mistral"]


class ParamType(str, Enum):
    """Primitive type of a tool parameter."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class ToolItems(BaseModel):
    """Element type of an array parameter."""

    type: ParamType

    class Config:
        extra = "forbid"
        frozen = True


class ToolParam(BaseModel):
    """A single named input argument of a tool.

    `default` is present when it was supplied at all, falsy values included.
    `properties` is reserved for nested objects and ignored by the adapters.
    """

    type: ParamType
    description: str | None = None
    required: bool = False
    default: Any = None
    enum: list[str] | None = None
    items: ToolItems | None = None
    properties: dict[str, "ToolParam"] | None = None

    class Config:
        extra = "forbid"
        frozen = True

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # an unset default must stay unset after a dump/validate round trip
        data = handler(self)
        if not self.has_default:
            data.pop("default", None)
        return data


class UniversalTool(BaseModel):
    """Tool definition that can be converted to any provider format."""

    name: str
    description: str = ""
    params: dict[str, ToolParam] = {}

    class Config:
        extra = "forbid"
        frozen = True


Adapter = Callable[[UniversalTool], dict[str, Any]]
