"""Write tool definitions once, convert them to any LLM provider's format.

Example:
    >>> from tool_adapter import ToolParam, UniversalTool, adapt
    >>>
    >>> tool = UniversalTool(
    ...     name="get_weather",
    ...     description="Get current weather for a location",
    ...     params={
    ...         "location": ToolParam(type="string", required=True),
    ...         "units": ToolParam(type="string", enum=["celsius", "fahrenheit"]),
    ...     },
    ... )
    >>> openai_tool = adapt(tool, "openai")
    >>> gemini_tool = adapt(tool, "gemini")
"""

# Conversion
from .converter import adapt, adapt_all
from .errors import UnknownProviderError
from .from_pydantic import tool_from_model
from .library import ToolsLibrary

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook
from .registry import get_adapter, get_providers

# Types
from .types import Adapter, ParamType, Provider, ToolItems, ToolParam, UniversalTool

__all__ = [
    # Conversion
    "adapt",
    "adapt_all",
    "get_adapter",
    "get_providers",
    "tool_from_model",
    "ToolsLibrary",
    # Errors
    "UnknownProviderError",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Types
    "Adapter",
    "ParamType",
    "Provider",
    "ToolItems",
    "ToolParam",
    "UniversalTool",
]
