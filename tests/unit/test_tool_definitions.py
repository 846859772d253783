"""Tests for the tool catalog and input shapes."""
from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from cscart_mcp_server.dispatcher import Dispatcher  # noqa: F401 - registers tools
from cscart_mcp_server.schema import (
    ArrayParam,
    BooleanParam,
    NumberParam,
    Param,
    StringParam,
    ToolDefinition,
)
from cscart_mcp_server.tool_decorator import Tool, get_tool, list_tools

EXPECTED_TOOLS = [
    "get_products",
    "get_product",
    "create_product",
    "update_product",
    "delete_product",
    "update_product_stock",
    "get_categories",
    "get_orders",
    "get_order",
    "update_order_status",
    "get_users",
    "get_sales_statistics",
]


def properties(name: str) -> dict:
    return get_tool(name).input_schema()["properties"]


class TestCatalog:
    """Tests for tool listing."""

    def test_lists_twelve_tools_in_order(self):
        assert [t.name for t in list_tools()] == EXPECTED_TOOLS

    def test_every_tool_has_description_and_object_schema(self):
        for definition in list_tools():
            assert definition.description
            schema = definition.input_schema()
            assert schema["type"] == "object"
            assert isinstance(schema["properties"], dict)

    def test_duplicate_registration_rejected(self):
        """Registering an existing name again is a programming error."""
        with pytest.raises(ValueError, match="Tool already registered: get_products"):
            Tool("get_products", "duplicate")(lambda args: None)

    def test_mcp_tool_conversion(self):
        tool = get_tool("get_order").to_mcp_tool()
        assert tool.name == "get_order"
        assert tool.inputSchema["required"] == ["order_id"]


class TestRequiredFlags:
    """Required arguments match the CS-Cart API needs."""

    @pytest.mark.parametrize(
        "name,required",
        [
            ("get_product", ["product_id"]),
            ("create_product", ["product", "price"]),
            ("update_product", ["product_id"]),
            ("delete_product", ["product_id"]),
            ("update_product_stock", ["product_id", "amount"]),
            ("get_order", ["order_id"]),
            ("update_order_status", ["order_id", "status"]),
        ],
    )
    def test_required(self, name, required):
        assert get_tool(name).input_schema()["required"] == required

    @pytest.mark.parametrize(
        "name", ["get_products", "get_categories", "get_orders", "get_users", "get_sales_statistics"]
    )
    def test_listing_tools_have_no_required_key(self, name):
        """'required' is omitted rather than empty."""
        assert "required" not in get_tool(name).input_schema()


class TestShapes:
    """Types, enums and defaults are declared per parameter."""

    def test_get_products_shape(self):
        props = properties("get_products")
        assert list(props) == ["page", "items_per_page", "status", "category_id", "q"]
        assert props["page"] == {
            "type": "number",
            "description": "Page number for pagination",
            "default": 1,
        }
        assert props["items_per_page"]["default"] == 10
        assert props["status"]["enum"] == ["A", "D", "H"]
        assert props["status"]["description"] == (
            "Product status filter (A=Active, D=Disabled, H=Hidden)"
        )

    def test_create_product_defaults(self):
        props = properties("create_product")
        assert props["status"]["default"] == "A"
        assert props["amount"]["default"] == 0
        assert props["category_ids"] == {
            "type": "array",
            "items": {"type": "number"},
            "description": "Array of category IDs",
        }

    def test_update_product_has_no_defaults(self):
        props = properties("update_product")
        assert "default" not in props["status"]
        assert "default" not in props["amount"]

    def test_parent_id_default_zero_is_declared(self):
        assert properties("get_categories")["parent_id"]["default"] == 0

    def test_order_status_vocabulary(self):
        assert properties("get_orders")["status"]["enum"] == ["O", "P", "C", "F", "D", "B", "I"]
        assert properties("update_order_status")["status"]["enum"] == [
            "O", "P", "C", "F", "D", "B", "I",
        ]

    def test_notify_user_boolean_default(self):
        assert properties("update_order_status")["notify_user"] == {
            "type": "boolean",
            "description": "Whether to notify the user about status change",
            "default": True,
        }

    def test_periods(self):
        assert properties("get_orders")["period"]["enum"] == ["A", "D", "W", "M", "Y"]
        stats = properties("get_sales_statistics")["period"]
        assert stats["enum"] == ["D", "W", "M", "Y"]
        assert stats["default"] == "M"

    def test_user_vocabularies(self):
        props = properties("get_users")
        assert props["status"]["enum"] == ["A", "D"]
        assert props["user_type"]["enum"] == ["A", "V", "C"]


class TestParamUnion:
    """Parameters are a tagged union discriminated on 'type'."""

    def test_parses_each_variant(self):
        adapter = TypeAdapter(Param)
        assert isinstance(adapter.validate_python({"type": "number", "name": "n", "description": "d"}), NumberParam)
        assert isinstance(adapter.validate_python({"type": "string", "name": "s", "description": "d"}), StringParam)
        assert isinstance(adapter.validate_python({"type": "boolean", "name": "b", "description": "d"}), BooleanParam)
        assert isinstance(adapter.validate_python({"type": "array", "name": "a", "description": "d"}), ArrayParam)

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Param).validate_python({"type": "object", "name": "o", "description": "d"})

    def test_definitions_are_immutable(self):
        definition = ToolDefinition(name="x", description="y")
        with pytest.raises(ValidationError):
            definition.name = "z"
