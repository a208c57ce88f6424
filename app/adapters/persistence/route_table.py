# app/adapters/persistence/route_table.py
"""
app/adapters/persistence/route_table.py
---------------------------------------

In-memory index over the precomputed route strings.

Every entry is parsed and validated once, when the table is built:

- the key must split into two known provinces ("Maidan Wardak-Sar-e Pol"
  is split at the hyphen that yields two known names),
- the stored walk must have at least two non-empty steps, all known,
- the walk must start at the key's first province and end at its second.

Entries failing any check are kept out of the index, logged, and reported
through `rejected()`. A lookup for such a pair behaves exactly like a pair
that was never surveyed.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Collection, Dict, Iterable, Mapping, Optional, Tuple

import structlog

from app.core.domain.models import ROUTE_SEPARATOR, ProvinceId, RoutePath
from app.core.ports import RouteTable

from .routes_data import PROVINCIAL_ROUTES

logger = structlog.get_logger()

KEY_SEPARATOR = "-"


def route_key(a: ProvinceId, b: ProvinceId) -> str:
    return f"{a}{KEY_SEPARATOR}{b}"


def parse_route_path(text: str) -> Tuple[str, ...]:
    """
    Splits a stored route string into its steps.

    Empty steps are preserved (as "") so that callers can tell a truncated
    entry such as "Badghis →" from a complete one.
    """
    if not isinstance(text, str) or not text.strip():
        return ()
    return tuple(step.strip() for step in text.strip().split(ROUTE_SEPARATOR.strip()))


def split_route_key(key: str, known: Collection[ProvinceId]) -> Optional[Tuple[ProvinceId, ProvinceId]]:
    """Splits 'A-B' into (A, B), trying each hyphen until both halves are known."""
    start = 0
    while True:
        idx = key.find(KEY_SEPARATOR, start)
        if idx < 0:
            return None
        a, b = key[:idx], key[idx + 1:]
        if a in known and b in known:
            return a, b
        start = idx + 1


class StaticRouteTable(RouteTable):
    """Route table over a mapping of 'A-B' -> 'A → … → B' strings."""

    def __init__(
        self,
        known_provinces: Collection[ProvinceId],
        entries: Mapping[str, str] = PROVINCIAL_ROUTES,
    ):
        self._known = frozenset(known_provinces)
        accepted: Dict[str, RoutePath] = {}
        rejected: Dict[str, str] = {}

        for key, raw in entries.items():
            path, reason = self._validate(key, raw)
            if path is None:
                rejected[key] = reason
                logger.warning("route_table_entry_rejected", key=key, raw=raw, reason=reason)
                continue
            accepted[key] = path

        self._routes: Mapping[str, RoutePath] = MappingProxyType(accepted)
        self._rejected: Mapping[str, str] = MappingProxyType(rejected)
        logger.debug("route_table_loaded", accepted=len(accepted), rejected=len(rejected))

    def _validate(self, key: str, raw: str) -> Tuple[Optional[RoutePath], str]:
        endpoints = split_route_key(key, self._known)
        if endpoints is None:
            return None, "key does not name two known provinces"

        steps = parse_route_path(raw)
        if len(steps) < 2:
            return None, "route has fewer than two steps"
        if any(not step for step in steps):
            return None, "route has an empty step"

        unknown = [step for step in steps if step not in self._known]
        if unknown:
            return None, f"unknown provinces in route: {', '.join(unknown)}"

        start, end = endpoints
        if steps[0] != start or steps[-1] != end:
            return None, f"route does not run from {start} to {end}"

        return steps, ""

    # ------------------------------------------------------------------
    # RouteTable port
    # ------------------------------------------------------------------

    def lookup(self, a: ProvinceId, b: ProvinceId) -> Optional[RoutePath]:
        forward = self._routes.get(route_key(a, b))
        if forward is not None:
            return forward

        backward = self._routes.get(route_key(b, a))
        if backward is not None:
            return tuple(reversed(backward))

        return None

    def keys(self) -> Iterable[str]:
        return self._routes.keys()

    def pairs(self) -> Iterable[Tuple[ProvinceId, ProvinceId]]:
        return [(path[0], path[-1]) for path in self._routes.values()]

    def rejected(self) -> Dict[str, str]:
        return dict(self._rejected)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key: object) -> bool:
        return key in self._routes
