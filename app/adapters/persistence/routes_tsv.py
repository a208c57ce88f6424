# app/adapters/persistence/routes_tsv.py
"""
Reader for the tab-separated road survey export.

Format (first line is a header and is skipped):

    From<TAB>To<TAB>Route
    Kabul<TAB>Parwan<TAB>Kabul → Parwan
    ...

Rows with fewer than three non-empty cells are ignored. The route table built
from such a file goes through the same validation as the compiled-in one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Collection, Dict, List, Tuple, Union

import structlog

from app.core.domain.exceptions import RouteDataError
from app.core.domain.models import ProvinceId

from .route_table import StaticRouteTable, parse_route_path, route_key

logger = structlog.get_logger()


def parse_routes_tsv(text: str) -> Tuple[Dict[str, str], Dict[ProvinceId, List[ProvinceId]]]:
    """
    Parses survey text into (routes, neighbors).

    `routes` maps 'From-To' to the raw route string. `neighbors` is derived
    from consecutive steps of every route, in both directions, in first-seen
    order. The derived neighbors are an export artifact only: the running
    service never builds its graph from them.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    routes: Dict[str, str] = {}
    neighbors: Dict[ProvinceId, List[ProvinceId]] = {}

    def _link(a: str, b: str) -> None:
        bucket = neighbors.setdefault(a, [])
        if b not in bucket:
            bucket.append(b)

    for lineno, line in enumerate(lines[1:], start=2):
        parts = [part.strip() for part in line.split("\t") if part.strip()]
        if len(parts) < 3:
            logger.debug("routes_tsv_row_skipped", line=lineno, cells=len(parts))
            continue

        origin, destination, raw_route = parts[0], parts[1], parts[2]
        routes[route_key(origin, destination)] = raw_route

        neighbors.setdefault(origin, [])
        neighbors.setdefault(destination, [])

        steps = [step for step in parse_route_path(raw_route) if step]
        for current, nxt in zip(steps, steps[1:]):
            _link(current, nxt)
            _link(nxt, current)

    return routes, neighbors


class TsvRouteTable(StaticRouteTable):
    """Route table loaded from a survey export instead of the compiled-in data."""

    def __init__(self, path: Union[str, Path], known_provinces: Collection[ProvinceId]):
        self.path = Path(path)
        text = self.path.read_text(encoding="utf-8")
        routes, _ = parse_routes_tsv(text)
        logger.info("routes_tsv_loaded", path=str(self.path), rows=len(routes))
        super().__init__(known_provinces, entries=routes)


def load_route_table_tsv(path: Union[str, Path], known_provinces: Collection[ProvinceId]) -> TsvRouteTable:
    """Reads a survey export; a missing file raises RouteDataError."""
    source = Path(path)
    if not source.is_file():
        raise RouteDataError(f"Routes file not found: {source}")
    return TsvRouteTable(source, known_provinces)
