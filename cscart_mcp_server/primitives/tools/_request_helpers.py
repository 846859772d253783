"""Argument-shaping helpers shared by the tool handlers."""
from typing import Any, Union

from ...api_client import format_value
from ...handler_wrappers import HandlerError

# Either an argument name used as-is, or (argument name, query key)
QueryField = Union[str, tuple[str, str]]


def is_present(arguments: dict[str, Any], name: str) -> bool:
    """An argument counts as present unless it is missing or None.

    Zero and False are present values.
    """
    # JSON null means omitted; it is never sent as a value
    return arguments.get(name) is not None


def query_from(arguments: dict[str, Any], *fields: QueryField) -> dict[str, str]:
    """Collect present arguments into an ordered query mapping.

    Examples:
        >>> query_from({"page": 2, "q": None}, "page", "q")
        {'page': '2'}
        >>> query_from({"category_id": 0, "q": "hat"}, ("category_id", "cid"), "q")
        {'cid': '0', 'q': 'hat'}
    """
    query: dict[str, str] = {}
    for field in fields:
        name, key = field if isinstance(field, tuple) else (field, field)
        if is_present(arguments, name):
            query[key] = format_value(arguments[name])
    return query


def without(arguments: dict[str, Any], *names: str) -> dict[str, Any]:
    """Copy of the arguments minus the given names."""
    return {k: v for k, v in arguments.items() if k not in names}


def path_id(arguments: dict[str, Any], name: str) -> str:
    """Render an ID argument for use in a URL path.

    Accepts non-negative integers, integral floats and digit strings.

    Raises:
        HandlerError: If the value is anything else

    Examples:
        >>> path_id({"product_id": 42.0}, "product_id")
        '42'
    """
    value = arguments[name]
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if float(value).is_integer() and value >= 0:
            return format_value(value)
    raise HandlerError(
        f"{name} must be an integer",
        hint="Pass the numeric ID as returned by the list tools",
        **{name: value},
    )
