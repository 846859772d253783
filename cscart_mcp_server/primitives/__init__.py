# primitives/__init__.py
"""MCP primitives module - tools and resources.

Importing this package registers every tool and resource.
"""

from . import tools  # noqa: F401
from . import resources  # noqa: F401
