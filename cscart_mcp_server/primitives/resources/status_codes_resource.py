# primitives/resources/status_codes_resource.py
"""Status codes resource - static reference of CS-Cart codes accepted by the tools."""

from typing import Any

from ...resource_decorator import Resource
from ..models import (
    ENDPOINTS,
    ORDER_PERIODS,
    ORDER_STATUSES,
    PRODUCT_STATUSES,
    STATISTICS_PERIODS,
    USER_STATUSES,
    USER_TYPES,
)


@Resource(
    "cscart://status-codes",
    "CS-Cart status, user type and period codes used by the tools, plus the API endpoint map.",
    name="status_codes",
    title="CS-Cart Status Codes",
)
def status_codes() -> dict[str, Any]:
    """Get the code vocabularies used in tool arguments.

    Returns:
        dict: Code tables keyed by vocabulary name:
            - product_status / category_status: A, D, H
            - order_status: O, P, C, F, D, B, I
            - user_status: A, D
            - user_type: A, V, C
            - order_period: A, D, W, M, Y
            - statistics_period: D, W, M, Y
            - endpoints: resource name -> API path
    """
    return {
        "product_status": PRODUCT_STATUSES,
        "category_status": PRODUCT_STATUSES,
        "order_status": ORDER_STATUSES,
        "user_status": USER_STATUSES,
        "user_type": USER_TYPES,
        "order_period": ORDER_PERIODS,
        "statistics_period": STATISTICS_PERIODS,
        "endpoints": ENDPOINTS,
    }
