# app/core/domain/models.py
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

# A canonical province identifier (English name), e.g. "Kabul", "Sar-e Pol".
ProvinceId = str

# An ordered walk through the provinces, always starting at the origin.
RoutePath = Tuple[ProvinceId, ...]

# Separator used both in the stored route strings and in rendered output.
ROUTE_SEPARATOR = " → "


# --- Enums ---

class LanguageTag(str, Enum):
    """Display languages supported for province names."""
    EN = "en"    # English (canonical)
    PRS = "prs"  # Dari
    PBT = "pbt"  # Pashto


class RouteSource(str, Enum):
    """Where a route answer came from."""
    SAME_PROVINCE = "same_province"
    ROUTE_TABLE = "route_table"
    DIRECT_CONNECTION = "direct_connection"
    NONE = "none"


# --- Value Objects ---

class LocalizedRoute(BaseModel):
    """A path rendered once per display language."""
    en: str = ""
    prs: str = ""
    pbt: str = ""


class RouteStep(BaseModel):
    """A single province on a path, with its localized names."""
    province: ProvinceId
    en: str
    prs: str
    pbt: str


# --- Query Results ---

class RouteQueryResult(BaseModel):
    """
    Answer to "is there a road from A to B?".

    `path` is None when the provinces are only known to be directly connected
    (no detailed route is stored) or when they are not connected at all.
    Constructed fresh per request; never cached.
    """
    from_name: str = Field(..., description="Raw origin as supplied by the caller")
    to_name: str = Field(..., description="Raw destination as supplied by the caller")
    from_province: ProvinceId
    to_province: ProvinceId
    connected: bool
    path: Optional[List[ProvinceId]] = None
    hops: int = 0
    source: RouteSource = RouteSource.NONE
    route: LocalizedRoute = Field(default_factory=LocalizedRoute)
    steps: List[RouteStep] = Field(default_factory=list)
    message: str = ""


class LocalizedRouteSet(BaseModel):
    """Several paths rendered once per display language."""
    en: List[str] = Field(default_factory=list)
    prs: List[str] = Field(default_factory=list)
    pbt: List[str] = Field(default_factory=list)


class RouteSearchResult(BaseModel):
    """All simple paths found between two provinces within a hop bound."""
    from_name: str
    to_name: str
    from_province: ProvinceId
    to_province: ProvinceId
    max_hops: int
    paths: List[List[ProvinceId]] = Field(default_factory=list)
    routes: LocalizedRouteSet = Field(default_factory=LocalizedRouteSet)

    @property
    def count(self) -> int:
        return len(self.paths)


class ShortestRouteResult(BaseModel):
    """The hop-count shortest path between two provinces over the road graph."""
    from_name: str
    to_name: str
    from_province: ProvinceId
    to_province: ProvinceId
    path: List[ProvinceId]
    hops: int
    route: LocalizedRoute = Field(default_factory=LocalizedRoute)
    steps: List[RouteStep] = Field(default_factory=list)


class ProvinceSummary(BaseModel):
    """A province as listed for UI dropdowns."""
    id: ProvinceId
    en: str
    prs: str
    pbt: str
    neighbor_count: int = 0


class DataValidationReport(BaseModel):
    """Consistency report over the static routing tables."""
    province_count: int
    route_count: int
    rejected_routes: List[str] = Field(default_factory=list)
    asymmetric_edges: List[Tuple[ProvinceId, ProvinceId]] = Field(default_factory=list)
    isolated_provinces: List[ProvinceId] = Field(default_factory=list)
    missing_translations: List[Tuple[ProvinceId, LanguageTag]] = Field(default_factory=list)
    off_graph_steps: List[Tuple[ProvinceId, ProvinceId]] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (self.rejected_routes or self.missing_translations)
