# app/core/domain/exceptions.py
"""
Domain-level errors raised by the routing use cases.

Routers translate these into HTTP responses; nothing in the core knows
about status codes.
"""


class DomainError(Exception):
    """Base class for all routing domain errors."""


class ProvinceNotFoundError(DomainError):
    """A province name (in any supported language) did not resolve."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Province not found: {name}")


class NoRouteFoundError(DomainError):
    """Both provinces resolved, but no path joins them."""

    def __init__(self, from_name: str, to_name: str):
        self.from_name = from_name
        self.to_name = to_name
        super().__init__(f"No route found from {from_name} to {to_name}")


class RouteDataError(DomainError):
    """The static routing tables are inconsistent and cannot be loaded."""
