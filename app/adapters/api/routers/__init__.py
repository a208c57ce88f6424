# app/adapters/api/routers/__init__.py
"""
API Route Definitions.

This package contains the specific route handlers (controllers) organized by domain area.
- `provincial_connections`: Road graph, curated routes and route search (Core Value).
- `provinces`: Public listing of provinces with their localized names.
- `health`: System health checks.
"""

from . import provincial_connections
from . import provinces
from . import health

__all__ = [
    "provincial_connections",
    "provinces",
    "health",
]
