"""Declarative input shapes for tools.

Each tool parameter is one variant of a tagged union (discriminated on
``type``). The same declarations render the JSON Schema advertised through
tools/list and supply the required-argument names checked before a handler
runs.
"""
from typing import Annotated, Any, Literal, Optional, Union

from mcp import types
from pydantic import BaseModel, ConfigDict, Field


class _BaseParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Argument name as sent by the client")
    description: str = Field(description="Shown to the AI client")
    required: bool = False

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}  # type: ignore[attr-defined]
        enum = getattr(self, "enum", None)
        if enum is not None:
            schema["enum"] = list(enum)
        default = getattr(self, "default", None)
        if default is not None:
            schema["default"] = default
        return schema


class NumberParam(_BaseParam):
    type: Literal["number"] = "number"
    default: Optional[Union[int, float]] = None


class StringParam(_BaseParam):
    type: Literal["string"] = "string"
    default: Optional[str] = None
    enum: Optional[tuple[str, ...]] = None


class BooleanParam(_BaseParam):
    type: Literal["boolean"] = "boolean"
    default: Optional[bool] = None


class ArrayParam(_BaseParam):
    type: Literal["array"] = "array"
    items: Literal["number", "string"] = "number"

    def json_schema(self) -> dict[str, Any]:
        return {
            "type": "array",
            "items": {"type": self.items},
            "description": self.description,
        }


Param = Annotated[
    Union[NumberParam, StringParam, BooleanParam, ArrayParam],
    Field(discriminator="type"),
]


class ToolDefinition(BaseModel):
    """Name, description and input shape of one tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    params: tuple[Param, ...] = ()

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.params if p.required]

    def input_schema(self) -> dict[str, Any]:
        """Render the input shape as a JSON Schema object.

        Examples:
            >>> ToolDefinition(
            ...     name="get_order",
            ...     description="Get an order",
            ...     params=(NumberParam(name="order_id", description="Order ID", required=True),),
            ... ).input_schema()
            {'type': 'object', 'properties': {'order_id': {'type': 'number', 'description': 'Order ID'}}, 'required': ['order_id']}
        """
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
        }
        if self.required:
            schema["required"] = self.required
        return schema

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )
