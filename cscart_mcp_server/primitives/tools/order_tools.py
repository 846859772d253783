# primitives/tools/order_tools.py
"""Order management tools."""
from typing import Any

from ...api_client import UpstreamRequest
from ...schema import BooleanParam, NumberParam, StringParam
from ...tool_decorator import Tool
from ..models import ENDPOINTS, ORDER_PERIODS, ORDER_STATUSES, describe_codes
from ._request_helpers import path_id, query_from, without

ORDERS = ENDPOINTS["orders"]


@Tool(
    "get_orders",
    "Retrieve orders from the CS-Cart store",
    params=[
        NumberParam(name="page", description="Page number for pagination", default=1),
        NumberParam(name="items_per_page", description="Number of items per page", default=10),
        StringParam(
            name="status",
            description=describe_codes("Order status filter", ORDER_STATUSES),
            enum=tuple(ORDER_STATUSES),
        ),
        StringParam(
            name="period",
            description=describe_codes("Time period filter", ORDER_PERIODS),
            enum=tuple(ORDER_PERIODS),
        ),
        StringParam(name="time_from", description="Start date for custom period (YYYY-MM-DD)"),
        StringParam(name="time_to", description="End date for custom period (YYYY-MM-DD)"),
        NumberParam(name="user_id", description="Filter by user ID"),
    ],
)
def get_orders(args: dict[str, Any]) -> UpstreamRequest:
    query = query_from(
        args, "page", "items_per_page", "status", "period", "time_from", "time_to", "user_id"
    )
    return UpstreamRequest("GET", ORDERS, query=query)


@Tool(
    "get_order",
    "Get detailed information about a specific order",
    params=[NumberParam(name="order_id", description="Order ID", required=True)],
)
def get_order(args: dict[str, Any]) -> UpstreamRequest:
    return UpstreamRequest("GET", f"{ORDERS}/{path_id(args, 'order_id')}")


@Tool(
    "update_order_status",
    "Update order status",
    params=[
        NumberParam(name="order_id", description="Order ID", required=True),
        StringParam(
            name="status",
            description=describe_codes("New order status", ORDER_STATUSES),
            enum=tuple(ORDER_STATUSES),
            required=True,
        ),
        BooleanParam(
            name="notify_user",
            description="Whether to notify the user about status change",
            default=True,
        ),
    ],
)
def update_order_status(args: dict[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(
        "PUT",
        f"{ORDERS}/{path_id(args, 'order_id')}",
        body=without(args, "order_id"),
    )
