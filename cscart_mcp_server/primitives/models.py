"""CS-Cart status codes and endpoint map.

These are pass-through vocabularies: they document and constrain tool inputs
but are never interpreted by the server.
"""

PRODUCT_STATUSES: dict[str, str] = {
    "A": "Active",
    "D": "Disabled",
    "H": "Hidden",
}

ORDER_STATUSES: dict[str, str] = {
    "O": "Open",
    "P": "Processed",
    "C": "Complete",
    "F": "Failed",
    "D": "Declined",
    "B": "Backordered",
    "I": "Incomplete",
}

USER_STATUSES: dict[str, str] = {
    "A": "Active",
    "D": "Disabled",
}

USER_TYPES: dict[str, str] = {
    "A": "Admin",
    "V": "Vendor",
    "C": "Customer",
}

ORDER_PERIODS: dict[str, str] = {
    "A": "All time",
    "D": "Today",
    "W": "This week",
    "M": "This month",
    "Y": "This year",
}

# Sales statistics have no "all time" period
STATISTICS_PERIODS: dict[str, str] = {k: v for k, v in ORDER_PERIODS.items() if k != "A"}

ENDPOINTS: dict[str, str] = {
    "products": "/products",
    "orders": "/orders",
    "categories": "/categories",
    "users": "/users",
    "statistics": "/statistics",
}


def describe_codes(label: str, codes: dict[str, str]) -> str:
    """Build a parameter description listing each code.

    Examples:
        >>> describe_codes("User status filter", USER_STATUSES)
        'User status filter (A=Active, D=Disabled)'
    """
    listing = ", ".join(f"{code}={meaning}" for code, meaning in codes.items())
    return f"{label} ({listing})"
