# app/adapters/api/routers/provincial_connections.py
from typing import Any, Dict, Optional
from urllib.parse import unquote

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.domain.exceptions import NoRouteFoundError, ProvinceNotFoundError
from app.core.domain.models import LanguageTag
from app.core.ports import ConnectivityGraph
from app.core.use_cases.route_query import RouteQueryService
from app.adapters.api.dependencies import get_connectivity_graph, get_route_query_service

logger = structlog.get_logger()

# -----------------------------------------------------------------------------
# Router Definition
# Resource: /provincial-connections
# Mounted at: /api (in main.py) -> URL: /api/provincial-connections
# -----------------------------------------------------------------------------
router = APIRouter(
    prefix="/provincial-connections",
    tags=["Provincial Connections"],
)


def _decode(segment: str) -> str:
    """
    The framework already percent-decodes path segments; the legacy frontend
    encodes once more, so decode a second time and trim.
    """
    return unquote(segment).strip()


def _not_found(exc: ProvinceNotFoundError) -> HTTPException:
    logger.info("province_not_found", name=exc.name)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------

@router.get("", summary="All Provincial Road Connections")
async def list_connections(
    graph: ConnectivityGraph = Depends(get_connectivity_graph),
) -> Dict[str, Any]:
    """Returns the full direct-adjacency map, keyed by canonical province id."""
    return {
        "success": True,
        "connections": graph.as_dict(),
        "message": "Provincial road connections retrieved successfully",
    }


@router.get(
    "/check-route/{from_province}/{to_province}",
    summary="Check Route Between Provinces",
)
async def check_route(
    from_province: str,
    to_province: str,
    service: RouteQueryService = Depends(get_route_query_service),
) -> Dict[str, Any]:
    """
    Looks the pair up in the curated route table (either direction), falling
    back to the direct-adjacency graph. "Not connected" is a successful answer.

    The same province at both ends is reported as connected, with a one-step
    route and zero hops (`source: same_province`), rather than "not connected".
    """
    from_name, to_name = _decode(from_province), _decode(to_province)
    try:
        result = service.check_route(from_name, to_name)
    except ProvinceNotFoundError as e:
        raise _not_found(e)

    return {
        "success": True,
        "from": result.from_name,
        "to": result.to_name,
        "connected": result.connected,
        "route": result.route.model_dump(),
        "routeDetails": [step.model_dump() for step in result.steps],
        "hops": result.hops,
        "source": result.source.value,
        "message": result.message,
    }


@router.get(
    "/find-routes/{from_province}/{to_province}",
    summary="Find All Routes Between Provinces",
)
async def find_routes(
    from_province: str,
    to_province: str,
    max_hops: Optional[str] = Query(None, alias="maxHops", description="Maximum hops per route (default 3)"),
    service: RouteQueryService = Depends(get_route_query_service),
) -> Dict[str, Any]:
    """
    Enumerates simple paths over the direct-adjacency graph, up to `maxHops`
    edges each. Invalid `maxHops` values fall back to the default; large ones
    are clamped.
    """
    from_name, to_name = _decode(from_province), _decode(to_province)
    try:
        result = service.find_routes(from_name, to_name, max_hops)
    except ProvinceNotFoundError as e:
        raise _not_found(e)

    return {
        "success": True,
        "from": result.from_name,
        "to": result.to_name,
        "routes": result.routes.model_dump(),
        "routeDetails": [{"path": path, "hops": len(path) - 1} for path in result.paths],
        "count": result.count,
        "maxHops": result.max_hops,
    }


@router.get(
    "/shortest-route/{from_province}/{to_province}",
    summary="Shortest Route Between Provinces",
)
async def shortest_route(
    from_province: str,
    to_province: str,
    service: RouteQueryService = Depends(get_route_query_service),
) -> Dict[str, Any]:
    """Breadth-first search over the direct-adjacency graph (fewest hops)."""
    from_name, to_name = _decode(from_province), _decode(to_province)
    try:
        result = service.shortest_route(from_name, to_name)
    except ProvinceNotFoundError as e:
        raise _not_found(e)
    except NoRouteFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return {
        "success": True,
        "from": result.from_name,
        "to": result.to_name,
        "route": result.route.model_dump(),
        "routeDetails": [step.model_dump() for step in result.steps],
        "hops": result.hops,
    }


@router.get("/{province}", summary="Neighbors of a Province")
async def get_province_connections(
    province: str,
    service: RouteQueryService = Depends(get_route_query_service),
) -> Dict[str, Any]:
    """Direct road neighbors of one province, given in any supported language."""
    name = _decode(province)
    try:
        canonical, neighbors = service.neighbors(name)
    except ProvinceNotFoundError:
        logger.info("province_not_found", name=name)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No road connections found for province: {name}",
        )

    return {
        "success": True,
        "province": name,
        "canonical": canonical,
        "neighbors": list(neighbors),
        "localizedNeighbors": {
            lang.value: [service.translator.to_localized(n, lang) for n in neighbors]
            for lang in LanguageTag
        },
        "message": f"Road connections for {name} retrieved successfully",
    }
