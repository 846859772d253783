# primitives/tools/category_tools.py
"""Category management tools."""
from typing import Any

from ...api_client import UpstreamRequest
from ...schema import NumberParam, StringParam
from ...tool_decorator import Tool
from ..models import ENDPOINTS, PRODUCT_STATUSES, describe_codes
from ._request_helpers import query_from


@Tool(
    "get_categories",
    "Get list of product categories",
    params=[
        NumberParam(
            name="parent_id",
            description="Parent category ID (0 for root categories)",
            default=0,
        ),
        StringParam(
            name="status",
            description=describe_codes("Category status filter", PRODUCT_STATUSES),
            enum=tuple(PRODUCT_STATUSES),
        ),
    ],
)
def get_categories(args: dict[str, Any]) -> UpstreamRequest:
    # parent_id=0 selects root categories and must reach the query string
    query = query_from(args, "parent_id", "status")
    return UpstreamRequest("GET", ENDPOINTS["categories"], query=query)
