# tests/unit/adapters/test_anthropic_adapter.py

import pytest

from tool_adapter.adapters.anthropic import anthropic_adapter
from tool_adapter.types import ToolParam, UniversalTool


@pytest.fixture
def search_tool() -> UniversalTool:
    return UniversalTool(
        name="search",
        description="Search the knowledge base",
        params={
            "query": ToolParam(
                type="string", description="The search query", required=True
            ),
            "limit": ToolParam(type="number", description="Max results", default=10),
            "exact": ToolParam(type="boolean", default=False),
        },
    )


class TestAnthropicAdapter:
    def test_envelope_is_flat(self) -> None:
        """Test the exact output for a single required parameter."""
        tool = UniversalTool(
            name="get_weather",
            description="d",
            params={"location": ToolParam(type="string", required=True)},
        )

        assert anthropic_adapter(tool) == {
            "name": "get_weather",
            "description": "d",
            "input_schema": {
                "type": "object",
                "properties": {"location": {"type": "string"}},
                "required": ["location"],
            },
        }

    def test_no_function_wrapper(self, search_tool: UniversalTool) -> None:
        result = anthropic_adapter(search_tool)

        assert "type" not in result
        assert "function" not in result

    def test_properties(self, search_tool: UniversalTool) -> None:
        properties = anthropic_adapter(search_tool)["input_schema"]["properties"]

        assert properties["query"] == {
            "type": "string",
            "description": "The search query",
        }
        assert properties["limit"] == {
            "type": "number",
            "description": "Max results",
            "default": 10,
        }
        assert properties["exact"] == {"type": "boolean", "default": False}

    def test_optional_params_not_required(self, search_tool: UniversalTool) -> None:
        schema = anthropic_adapter(search_tool)["input_schema"]

        assert schema["required"] == ["query"]
        assert set(schema["properties"]) == {"query", "limit", "exact"}

    def test_empty_description_omitted(self) -> None:
        tool = UniversalTool(
            name="t",
            description="t",
            params={"x": ToolParam(type="string", description="")},
        )

        assert anthropic_adapter(tool)["input_schema"]["properties"]["x"] == {
            "type": "string"
        }
