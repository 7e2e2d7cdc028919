"""Tests for the tool abstraction helpers."""

from typing import Any

import pytest

from simple_mcp.protocol.models import ToolContent
from simple_mcp.tools.base import (
    FunctionTool,
    Tool,
    normalize_content,
    required_fields,
    to_definition,
    tool,
)
from simple_mcp.tools.echo import EchoTool


class TestToolProtocol:
    def test_echo_satisfies_protocol(self) -> None:
        assert isinstance(EchoTool(), Tool)

    def test_function_tool_satisfies_protocol(self) -> None:
        t = FunctionTool("t", "d", {}, lambda _: ToolContent.from_text(""))
        assert isinstance(t, Tool)


class TestFunctionTool:
    def test_execute_calls_function(self) -> None:
        seen: list[dict[str, Any]] = []

        def func(args: dict[str, Any]) -> ToolContent:
            seen.append(args)
            return ToolContent.from_text("ok")

        t = FunctionTool("t", "d", {}, func)
        assert t.execute({"a": 1}) == ToolContent.from_text("ok")
        assert seen == [{"a": 1}]

    def test_is_immutable(self) -> None:
        t = FunctionTool("t", "d", {}, lambda _: [])
        with pytest.raises(AttributeError):
            t.name = "other"  # type: ignore[misc]


class TestToolDecorator:
    def test_builds_function_tool(self) -> None:
        @tool(name="shout", input_schema={"type": "object", "required": ["text"]})
        def shout(args: dict[str, Any]) -> ToolContent:
            """Upper-cases text."""
            return ToolContent.from_text(args["text"].upper())

        assert isinstance(shout, FunctionTool)
        assert shout.name == "shout"
        assert shout.description == "Upper-cases text."
        assert shout.execute({"text": "hi"}).text == "HI"  # type: ignore[union-attr]

    def test_default_schema(self) -> None:
        @tool(name="noop", description="Nothing")
        def noop(args: dict[str, Any]) -> list[ToolContent]:
            return []

        assert noop.input_schema == {"type": "object", "properties": {}}
        assert noop.description == "Nothing"


class TestToDefinition:
    def test_hides_execute(self) -> None:
        definition = to_definition(EchoTool())
        assert definition.model_dump(by_alias=True).keys() == {"name", "description", "inputSchema"}


class TestRequiredFields:
    def test_strings_only(self) -> None:
        assert required_fields({"required": ["a", 1, None, "b"]}) == ["a", "b"]

    @pytest.mark.parametrize("schema", [{}, {"required": "a"}, {"required": {"a": True}}])
    def test_non_list(self, schema: dict[str, Any]) -> None:
        assert required_fields(schema) == []


class TestNormalizeContent:
    def test_single_model_wrapped(self) -> None:
        assert normalize_content(ToolContent.from_text("x")) == [{"type": "text", "text": "x"}]

    def test_single_mapping_wrapped(self) -> None:
        assert normalize_content({"type": "text", "text": "x"}) == [{"type": "text", "text": "x"}]

    def test_sequence_kept_in_order(self) -> None:
        out = normalize_content([ToolContent.from_text("1"), {"type": "text", "text": "2"}])
        assert [c["text"] for c in out] == ["1", "2"]

    def test_none_text_dropped(self) -> None:
        assert normalize_content(ToolContent(type="resource")) == [{"type": "resource"}]

    def test_empty_list(self) -> None:
        assert normalize_content([]) == []

    @pytest.mark.parametrize("output", ["text", 42, None, [1]])
    def test_rejects_non_content(self, output: Any) -> None:
        with pytest.raises(TypeError):
            normalize_content(output)

    def test_set_value_rejected(self) -> None:
        with pytest.raises(TypeError):
            normalize_content({"type": "text", "blob": {1, 2}})

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_value_rejected(self, value: float) -> None:
        with pytest.raises(ValueError):
            normalize_content([ToolContent(type="text", score=value)])  # type: ignore[call-arg]

    def test_mapping_without_type_rejected(self) -> None:
        with pytest.raises(ValueError):
            normalize_content({"text": "x"})
