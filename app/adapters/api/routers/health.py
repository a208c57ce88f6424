# app/adapters/api/routers/health.py
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.core.ports import ConnectivityGraph, RouteTable
from app.adapters.api.dependencies import get_connectivity_graph, get_route_table

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="Liveness / Readiness Probe")
async def health_check(
    graph: ConnectivityGraph = Depends(get_connectivity_graph),
    table: RouteTable = Depends(get_route_table),
) -> Any:
    """Ready once the static tables are loaded and non-empty."""
    provinces = len(graph.provinces())
    routes = len(list(table.keys()))
    body: Dict[str, Any] = {
        "status": "ok" if provinces and routes else "degraded",
        "provinces": provinces,
        "routes": routes,
        "rejectedRoutes": sorted(table.rejected()),
    }
    if body["status"] != "ok":
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
