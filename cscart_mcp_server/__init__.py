"""CS-Cart MCP Server.

Exposes a CS-Cart store's REST API (products, categories, orders, users,
sales statistics) as Model Context Protocol tools.
"""

__version__ = "0.1.0"
