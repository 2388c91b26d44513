import pytest
from pydantic import ValidationError

from tool_adapter import adapt, get_providers
from tool_adapter.types import ParamType, ToolItems, ToolParam, UniversalTool


def test_param_defaults() -> None:
    param = ToolParam(type="string")

    assert param.type is ParamType.STRING
    assert param.required is False
    assert param.description is None
    assert param.enum is None
    assert param.items is None
    assert param.has_default is False


def test_has_default_for_falsy_values() -> None:
    assert ToolParam(type="number", default=0).has_default
    assert ToolParam(type="boolean", default=False).has_default
    assert ToolParam(type="string", default="").has_default
    assert ToolParam(type="string", default=None).has_default


def test_items_coerced_from_dict() -> None:
    param = ToolParam(type="array", items={"type": "number"})

    assert param.items == ToolItems(type=ParamType.NUMBER)


def test_nested_properties() -> None:
    param = ToolParam(
        type="object", properties={"city": ToolParam(type="string", required=True)}
    )

    assert param.properties is not None
    assert param.properties["city"].required is True


def test_rejects_unknown_type() -> None:
    with pytest.raises(ValidationError):
        ToolParam(type="integer")


def test_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        ToolParam(type="string", format="email")


def test_tool_is_frozen() -> None:
    tool = UniversalTool(name="ping", description="Ping")

    with pytest.raises(ValidationError):
        tool.name = "pong"


def test_tool_params_default_to_empty() -> None:
    first = UniversalTool(name="a")
    second = UniversalTool(name="b")

    assert first.params == {}
    assert first.description == ""
    assert first.params is not second.params


def test_params_keep_declaration_order() -> None:
    tool = UniversalTool.model_validate(
        {
            "name": "t",
            "description": "t",
            "params": {
                "z": {"type": "string"},
                "a": {"type": "number"},
                "m": {"type": "boolean"},
            },
        }
    )

    assert list(tool.params) == ["z", "a", "m"]


def test_unset_default_not_dumped() -> None:
    param = ToolParam(type="string")

    assert "default" not in param.model_dump()
    assert "default" in ToolParam(type="string", default=None).model_dump()


def test_dump_and_reload_keeps_output() -> None:
    """Test that a saved and reloaded tool converts to the same schema."""
    tool = UniversalTool(
        name="t",
        description="t",
        params={
            "x": ToolParam(type="string"),
            "y": ToolParam(type="string", default=None),
            "z": ToolParam(
                type="object", properties={"inner": ToolParam(type="number")}
            ),
        },
    )

    from_json = UniversalTool.model_validate_json(tool.model_dump_json())
    from_dict = UniversalTool.model_validate(tool.model_dump())

    assert from_json.params["x"].has_default is False
    assert from_json.params["y"].has_default is True
    assert from_json.params["z"].properties["inner"].has_default is False
    for provider in get_providers():
        assert adapt(from_json, provider) == adapt(tool, provider)
        assert adapt(from_dict, provider) == adapt(tool, provider)
