# app/core/use_cases/route_query.py
import structlog
from collections import deque
from typing import Any, Dict, List, Optional, Sequence, Tuple

from app.core.domain.exceptions import NoRouteFoundError, ProvinceNotFoundError
from app.core.domain.models import (
    ROUTE_SEPARATOR,
    LanguageTag,
    LocalizedRoute,
    LocalizedRouteSet,
    ProvinceId,
    ProvinceSummary,
    RouteQueryResult,
    RouteSearchResult,
    RouteSource,
    RouteStep,
    ShortestRouteResult,
)
from app.core.ports import ConnectivityGraph, ProvinceTranslator, RouteTable
from app.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

DEFAULT_MAX_HOPS = 3
MAX_HOPS_LIMIT = 12


class RouteQueryService:
    """
    Use Case: Answers route questions between two provinces.

    Two connectivity sources are consulted and never merged:
    - the curated route table (check_route), with the direct-adjacency
      graph as a weaker fallback;
    - the direct-adjacency graph alone (find_routes, shortest_route).

    Inputs may be canonical English ids or Dari/Pashto names. Every path that
    leaves this class is rendered in all three display languages.
    """

    def __init__(
        self,
        translator: ProvinceTranslator,
        graph: ConnectivityGraph,
        route_table: RouteTable,
        default_max_hops: int = DEFAULT_MAX_HOPS,
        max_hops_limit: int = MAX_HOPS_LIMIT,
    ):
        self.translator = translator
        self.graph = graph
        self.route_table = route_table
        self.default_max_hops = default_max_hops
        self.max_hops_limit = max(max_hops_limit, 1)

    # ------------------------------------------------------------------
    # Resolution & formatting
    # ------------------------------------------------------------------

    def resolve(self, name: str) -> ProvinceId:
        """Canonical id for `name`, or ProvinceNotFoundError carrying the raw input."""
        province = self.translator.resolve(name)
        if province is None or not self.graph.has_province(province):
            raise ProvinceNotFoundError(name)
        return province

    def format_path(self, path: Optional[Sequence[ProvinceId]], lang: LanguageTag) -> str:
        if not path:
            return ""
        return ROUTE_SEPARATOR.join(self.translator.to_localized(p, lang) for p in path)

    def localize_path(self, path: Optional[Sequence[ProvinceId]]) -> LocalizedRoute:
        return LocalizedRoute(
            en=self.format_path(path, LanguageTag.EN),
            prs=self.format_path(path, LanguageTag.PRS),
            pbt=self.format_path(path, LanguageTag.PBT),
        )

    def describe_steps(self, path: Optional[Sequence[ProvinceId]]) -> List[RouteStep]:
        return [
            RouteStep(
                province=p,
                en=self.translator.to_localized(p, LanguageTag.EN),
                prs=self.translator.to_localized(p, LanguageTag.PRS),
                pbt=self.translator.to_localized(p, LanguageTag.PBT),
            )
            for p in (path or ())
        ]

    def normalize_max_hops(self, value: Any) -> int:
        """
        Coerces a caller-supplied hop bound.

        Missing, non-integer or non-positive values fall back to the default;
        values above the ceiling are clamped to it.
        """
        try:
            hops = int(value)
        except (TypeError, ValueError):
            return self.default_max_hops
        if isinstance(value, float) and not value.is_integer():
            return self.default_max_hops
        if hops < 1:
            return self.default_max_hops
        if hops > self.max_hops_limit:
            logger.warning("max_hops_clamped", requested=hops, limit=self.max_hops_limit)
            return self.max_hops_limit
        return hops

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, name: str) -> Tuple[ProvinceId, Tuple[ProvinceId, ...]]:
        """(canonical id, direct neighbors) for a province given in any language."""
        province = self.resolve(name)
        return province, self.graph.neighbors(province)

    def list_provinces(self) -> List[ProvinceSummary]:
        return [
            ProvinceSummary(
                id=p,
                en=self.translator.to_localized(p, LanguageTag.EN),
                prs=self.translator.to_localized(p, LanguageTag.PRS),
                pbt=self.translator.to_localized(p, LanguageTag.PBT),
                neighbor_count=len(self.graph.neighbors(p)),
            )
            for p in self.graph.provinces()
        ]

    def check_route(self, from_name: str, to_name: str) -> RouteQueryResult:
        """
        Looks up the curated route between two provinces.

        Order of evidence:
        1. same province: trivially connected, zero hops;
        2. route table (either direction): full path;
        3. direct edge in the graph: connected, but no detailed path;
        4. otherwise not connected. This is a normal result, not an error.
        """
        with tracer.start_as_current_span("use_case.check_route") as span:
            origin = self.resolve(from_name)
            destination = self.resolve(to_name)
            span.set_attribute("route.from", origin)
            span.set_attribute("route.to", destination)

            path: Optional[Tuple[ProvinceId, ...]] = None
            if origin == destination:
                path = (origin,)
                source = RouteSource.SAME_PROVINCE
                connected = True
                message = f"{from_name} and {to_name} are the same province"
            else:
                path = self.route_table.lookup(origin, destination)
                if path is not None:
                    source = RouteSource.ROUTE_TABLE
                    connected = True
                    message = f"Road route found from {from_name} to {to_name}"
                elif self.graph.is_directly_connected(origin, destination):
                    source = RouteSource.DIRECT_CONNECTION
                    connected = True
                    message = (
                        f"Direct road connection exists from {from_name} to {to_name}, "
                        f"but no detailed route is available"
                    )
                else:
                    source = RouteSource.NONE
                    connected = False
                    message = f"No road connection from {from_name} to {to_name}"

            hops = len(path) - 1 if path else 0
            span.set_attribute("route.source", source.value)
            span.set_attribute("route.hops", hops)
            logger.info("check_route", origin=origin, destination=destination, source=source.value, hops=hops)

            return RouteQueryResult(
                from_name=from_name,
                to_name=to_name,
                from_province=origin,
                to_province=destination,
                connected=connected,
                path=list(path) if path is not None else None,
                hops=hops,
                source=source,
                route=self.localize_path(path),
                steps=self.describe_steps(path),
                message=message,
            )

    def find_routes(self, from_name: str, to_name: str, max_hops: Any = None) -> RouteSearchResult:
        """
        Enumerates simple paths over the road graph with at most `max_hops`
        edges, in depth-first order following the stored neighbor order.
        """
        with tracer.start_as_current_span("use_case.find_routes") as span:
            origin = self.resolve(from_name)
            destination = self.resolve(to_name)
            bound = self.normalize_max_hops(max_hops)
            span.set_attribute("route.from", origin)
            span.set_attribute("route.to", destination)
            span.set_attribute("route.max_hops", bound)

            paths = self.enumerate_paths(origin, destination, bound)
            span.set_attribute("route.count", len(paths))
            logger.info("find_routes", origin=origin, destination=destination, max_hops=bound, count=len(paths))

            return RouteSearchResult(
                from_name=from_name,
                to_name=to_name,
                from_province=origin,
                to_province=destination,
                max_hops=bound,
                paths=paths,
                routes=LocalizedRouteSet(
                    en=[self.format_path(p, LanguageTag.EN) for p in paths],
                    prs=[self.format_path(p, LanguageTag.PRS) for p in paths],
                    pbt=[self.format_path(p, LanguageTag.PBT) for p in paths],
                ),
            )

    def shortest_route(self, from_name: str, to_name: str) -> ShortestRouteResult:
        """
        Breadth-first search over the road graph.

        Raises NoRouteFoundError when the destination is unreachable.
        """
        with tracer.start_as_current_span("use_case.shortest_route") as span:
            origin = self.resolve(from_name)
            destination = self.resolve(to_name)
            span.set_attribute("route.from", origin)
            span.set_attribute("route.to", destination)

            path = self.breadth_first_path(origin, destination)
            if path is None:
                logger.info("shortest_route_unreachable", origin=origin, destination=destination)
                raise NoRouteFoundError(from_name, to_name)

            span.set_attribute("route.hops", len(path) - 1)
            logger.info("shortest_route", origin=origin, destination=destination, hops=len(path) - 1)

            return ShortestRouteResult(
                from_name=from_name,
                to_name=to_name,
                from_province=origin,
                to_province=destination,
                path=path,
                hops=len(path) - 1,
                route=self.localize_path(path),
                steps=self.describe_steps(path),
            )

    # ------------------------------------------------------------------
    # Graph search (canonical ids only)
    # ------------------------------------------------------------------

    def enumerate_paths(self, origin: ProvinceId, destination: ProvinceId, max_hops: int) -> List[List[ProvinceId]]:
        results: List[List[ProvinceId]] = []
        path: List[ProvinceId] = [origin]
        on_path = {origin}

        def _walk(node: ProvinceId) -> None:
            if node == destination:
                results.append(list(path))
                return
            if len(path) - 1 >= max_hops:
                return
            for nxt in self.graph.neighbors(node):
                if nxt in on_path:
                    continue
                path.append(nxt)
                on_path.add(nxt)
                _walk(nxt)
                on_path.discard(nxt)
                path.pop()

        _walk(origin)
        return results

    def breadth_first_path(self, origin: ProvinceId, destination: ProvinceId) -> Optional[List[ProvinceId]]:
        if origin == destination:
            return [origin]

        parents: Dict[ProvinceId, ProvinceId] = {}
        seen = {origin}
        queue = deque([origin])

        while queue:
            node = queue.popleft()
            for nxt in self.graph.neighbors(node):
                if nxt in seen:
                    continue
                seen.add(nxt)
                parents[nxt] = node
                if nxt == destination:
                    path = [nxt]
                    while path[-1] != origin:
                        path.append(parents[path[-1]])
                    path.reverse()
                    return path
                queue.append(nxt)

        return None
