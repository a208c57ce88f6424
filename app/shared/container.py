# app/shared/container.py
from dependency_injector import containers, providers
from app.shared.config import settings

# --- Adapters ---
from app.adapters.persistence.connectivity_graph import StaticConnectivityGraph
from app.adapters.persistence.province_names import StaticProvinceTranslator
from app.adapters.persistence.route_table import StaticRouteTable
from app.adapters.persistence.routes_tsv import load_route_table_tsv

# --- Use Cases ---
from app.core.use_cases.route_query import RouteQueryService

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.
    Acts as the "Switchboard" connecting the static data adapters to the
    route query use case.
    """

    # 1. Static Data Sources (built once, shared read-only)

    connectivity_graph = providers.Singleton(StaticConnectivityGraph)

    known_provinces = providers.Callable(
        lambda graph: graph.provinces(),
        connectivity_graph,
    )

    translator = providers.Singleton(
        StaticProvinceTranslator,
        known_provinces=known_provinces,
    )

    # Route Table (Selector: survey export vs compiled-in table)
    if settings.ROUTES_TSV_PATH:
        route_table = providers.Singleton(
            load_route_table_tsv,
            path=settings.ROUTES_TSV_PATH,
            known_provinces=known_provinces,
        )
    else:
        route_table = providers.Singleton(
            StaticRouteTable,
            known_provinces=known_provinces,
        )

    # 2. Use Cases (Application Logic)

    route_query_service = providers.Factory(
        RouteQueryService,
        translator=translator,
        graph=connectivity_graph,
        route_table=route_table,
        default_max_hops=settings.DEFAULT_MAX_HOPS,
        max_hops_limit=settings.MAX_HOPS_LIMIT,
    )

# Global Container Instance
container = Container()
