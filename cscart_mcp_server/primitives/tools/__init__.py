# primitives/tools/__init__.py
"""Tool modules, imported in catalog order (this triggers registration)."""

from . import product_tools  # noqa: F401
from . import category_tools  # noqa: F401
from . import order_tools  # noqa: F401
from . import user_tools  # noqa: F401
from . import statistics_tools  # noqa: F401
