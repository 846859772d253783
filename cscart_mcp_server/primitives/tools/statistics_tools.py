# primitives/tools/statistics_tools.py
"""Sales statistics tools."""
from typing import Any

from ...api_client import UpstreamRequest
from ...schema import StringParam
from ...tool_decorator import Tool
from ..models import ENDPOINTS, STATISTICS_PERIODS, describe_codes
from ._request_helpers import query_from


# No check that time_from <= time_to or that either is a valid date;
# the upstream API decides.
@Tool(
    "get_sales_statistics",
    "Get sales statistics for a specific period",
    params=[
        StringParam(
            name="period",
            description=describe_codes("Time period", STATISTICS_PERIODS),
            enum=tuple(STATISTICS_PERIODS),
            default="M",
        ),
        StringParam(name="time_from", description="Start date for custom period (YYYY-MM-DD)"),
        StringParam(name="time_to", description="End date for custom period (YYYY-MM-DD)"),
    ],
)
def get_sales_statistics(args: dict[str, Any]) -> UpstreamRequest:
    query = query_from(args, "period", "time_from", "time_to")
    return UpstreamRequest("GET", f"{ENDPOINTS['statistics']}/sales", query=query)
