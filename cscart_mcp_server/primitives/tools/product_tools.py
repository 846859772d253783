# primitives/tools/product_tools.py
"""Product management tools."""
from typing import Any

from ...api_client import UpstreamRequest
from ...schema import ArrayParam, NumberParam, StringParam
from ...tool_decorator import Tool
from ..models import ENDPOINTS, PRODUCT_STATUSES, describe_codes
from ._request_helpers import path_id, query_from, without

PRODUCTS = ENDPOINTS["products"]
_STATUS_CODES = tuple(PRODUCT_STATUSES)


def _product_fields(*, defaults: bool, required: tuple[str, ...] = ()) -> list:
    """Editable product fields shared by create_product and update_product."""
    return [
        StringParam(name="product", description="Product name", required="product" in required),
        NumberParam(name="price", description="Product price", required="price" in required),
        ArrayParam(name="category_ids", description="Array of category IDs", items="number"),
        StringParam(name="description", description="Product description"),
        StringParam(name="full_description", description="Full product description"),
        StringParam(
            name="status",
            description=describe_codes("Product status", PRODUCT_STATUSES),
            enum=_STATUS_CODES,
            default="A" if defaults else None,
        ),
        NumberParam(
            name="amount",
            description="Product quantity in stock",
            default=0 if defaults else None,
        ),
        NumberParam(name="weight", description="Product weight"),
        NumberParam(name="shipping_freight", description="Shipping cost"),
    ]


@Tool(
    "get_products",
    "Retrieve a list of products from the CS-Cart store",
    params=[
        NumberParam(name="page", description="Page number for pagination", default=1),
        NumberParam(name="items_per_page", description="Number of items per page", default=10),
        StringParam(
            name="status",
            description=describe_codes("Product status filter", PRODUCT_STATUSES),
            enum=_STATUS_CODES,
        ),
        NumberParam(name="category_id", description="Filter by category ID"),
        StringParam(name="q", description="Search query for product name"),
    ],
)
def get_products(args: dict[str, Any]) -> UpstreamRequest:
    query = query_from(args, "page", "items_per_page", "status", ("category_id", "cid"), "q")
    return UpstreamRequest("GET", PRODUCTS, query=query)


@Tool(
    "get_product",
    "Get detailed information about a specific product",
    params=[NumberParam(name="product_id", description="Product ID", required=True)],
)
def get_product(args: dict[str, Any]) -> UpstreamRequest:
    return UpstreamRequest("GET", f"{PRODUCTS}/{path_id(args, 'product_id')}")


@Tool(
    "create_product",
    "Create a new product in the CS-Cart store",
    params=_product_fields(defaults=True, required=("product", "price")),
)
def create_product(args: dict[str, Any]) -> UpstreamRequest:
    return UpstreamRequest("POST", PRODUCTS, body=dict(args))


@Tool(
    "update_product",
    "Update an existing product",
    params=[
        NumberParam(name="product_id", description="Product ID to update", required=True),
        *_product_fields(defaults=False),
    ],
)
def update_product(args: dict[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(
        "PUT",
        f"{PRODUCTS}/{path_id(args, 'product_id')}",
        body=without(args, "product_id"),
    )


@Tool(
    "delete_product",
    "Delete a product from the store",
    params=[NumberParam(name="product_id", description="Product ID to delete", required=True)],
)
def delete_product(args: dict[str, Any]) -> UpstreamRequest:
    return UpstreamRequest("DELETE", f"{PRODUCTS}/{path_id(args, 'product_id')}")


@Tool(
    "update_product_stock",
    "Update product stock quantity",
    params=[
        NumberParam(name="product_id", description="Product ID", required=True),
        NumberParam(name="amount", description="New stock quantity", required=True),
    ],
)
def update_product_stock(args: dict[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(
        "PUT",
        f"{PRODUCTS}/{path_id(args, 'product_id')}",
        body={"amount": args["amount"]},
    )
