# primitives/tools/user_tools.py
"""User management tools."""
from typing import Any

from ...api_client import UpstreamRequest
from ...schema import NumberParam, StringParam
from ...tool_decorator import Tool
from ..models import ENDPOINTS, USER_STATUSES, USER_TYPES, describe_codes
from ._request_helpers import query_from


@Tool(
    "get_users",
    "Get list of users/customers",
    params=[
        NumberParam(name="page", description="Page number for pagination", default=1),
        NumberParam(name="items_per_page", description="Number of items per page", default=10),
        StringParam(
            name="status",
            description=describe_codes("User status filter", USER_STATUSES),
            enum=tuple(USER_STATUSES),
        ),
        StringParam(
            name="user_type",
            description=describe_codes("User type filter", USER_TYPES),
            enum=tuple(USER_TYPES),
        ),
    ],
)
def get_users(args: dict[str, Any]) -> UpstreamRequest:
    query = query_from(args, "page", "items_per_page", "status", "user_type")
    return UpstreamRequest("GET", ENDPOINTS["users"], query=query)
