# app/adapters/api/routers/provinces.py
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.core.use_cases.route_query import RouteQueryService
from app.adapters.api.dependencies import get_route_query_service

router = APIRouter(prefix="/provinces", tags=["Provinces"])

# --- DTOs (Data Transfer Objects) ---
class ProvinceOut(BaseModel):
    """
    Public API representation of a Province.
    Feeds the origin/destination dropdowns in every display language.
    """
    id: str
    en: str
    prs: str
    pbt: str
    neighborCount: int = 0

# --- Endpoints ---

@router.get("", response_model=List[ProvinceOut])
async def list_provinces(
    service: RouteQueryService = Depends(get_route_query_service),
) -> List[ProvinceOut]:
    """List every canonical province with its Dari and Pashto names."""
    return [
        ProvinceOut(
            id=p.id,
            en=p.en,
            prs=p.prs,
            pbt=p.pbt,
            neighborCount=p.neighbor_count,
        )
        for p in service.list_provinces()
    ]
