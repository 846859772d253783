# primitives/resources/__init__.py
"""Resource modules (importing them triggers registration)."""

from . import status_codes_resource  # noqa: F401
