"""Tool abstraction: the interface every MCP tool satisfies.

A tool is a small capability set: a unique ``name``, a human
``description``, an ``input_schema`` (a JSON Schema fragment), and an
``execute`` method mapping an arguments dict to one content item or a
list of them.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from simple_mcp.protocol.models import MCPToolDef, ToolContent

ContentItem = ToolContent | Mapping[str, Any]
ToolOutput = ContentItem | Sequence[ContentItem]


@runtime_checkable
class Tool(Protocol):
    """A named, schema-described callable exposed to MCP clients."""

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def input_schema(self) -> dict[str, Any]: ...

    def execute(self, arguments: dict[str, Any]) -> ToolOutput:
        """Run the tool. Any raised exception is reported as an internal error."""
        ...


@dataclass(frozen=True)
class FunctionTool:
    """A tool backed by a plain function.

    Usage::

        def shout(args):
            return ToolContent.from_text(args["text"].upper())

        tool = FunctionTool("shout", "Upper-cases text", schema, shout)
    """

    name: str
    description: str
    input_schema: dict[str, Any]
    func: Callable[[dict[str, Any]], ToolOutput] = field(repr=False)

    def execute(self, arguments: dict[str, Any]) -> ToolOutput:
        return self.func(arguments)


def tool(
    *,
    name: str,
    description: str = "",
    input_schema: dict[str, Any] | None = None,
) -> Callable[[Callable[[dict[str, Any]], ToolOutput]], FunctionTool]:
    """Decorator turning a function into a :class:`FunctionTool`."""

    def decorator(func: Callable[[dict[str, Any]], ToolOutput]) -> FunctionTool:
        return FunctionTool(
            name=name,
            description=description or (func.__doc__ or "").strip(),
            input_schema=input_schema or {"type": "object", "properties": {}},
            func=func,
        )

    return decorator


def to_definition(t: Tool) -> MCPToolDef:
    """Build the ``tools/list`` record for *t*; ``execute`` is never exposed."""
    return MCPToolDef(name=t.name, description=t.description, input_schema=t.input_schema)


def required_fields(schema: Mapping[str, Any]) -> list[str]:
    """Return the string entries of ``schema["required"]``.

    Anything that is not a list is treated as no requirement; non-string
    entries are skipped.
    """
    required = schema.get("required")
    if not isinstance(required, list):
        return []
    return [f for f in required if isinstance(f, str)]


def normalize_content(output: ToolOutput) -> list[dict[str, Any]]:
    """Coerce a tool's output into the wire shape: always a list of dicts.

    A single item is wrapped in a one-element list. ``None`` fields are
    dropped; unknown fields pass through. Raises ``TypeError`` or
    ``ValueError`` if an item is not a valid content object or cannot be
    written as strict JSON (sets, NaN, infinities, ...).
    """
    items: Sequence[ContentItem]
    if isinstance(output, (ToolContent, Mapping)):
        items = [output]
    elif isinstance(output, Sequence) and not isinstance(output, (str, bytes)):
        items = output
    else:
        msg = f"tool output must be a content item or a sequence of them, got {type(output).__name__}"
        raise TypeError(msg)

    result: list[dict[str, Any]] = []
    for item in items:
        if isinstance(item, ToolContent):
            result.append(item.model_dump(exclude_none=True))
        elif isinstance(item, Mapping):
            result.append(ToolContent.model_validate(dict(item)).model_dump(exclude_none=True))
        else:
            msg = f"content item must be ToolContent or a mapping, got {type(item).__name__}"
            raise TypeError(msg)

    # Fail here, inside the tool call, rather than later on the wire.
    json.dumps(result, allow_nan=False)
    return result
