# app/adapters/api/dependencies.py
from fastapi import Depends
from dependency_injector.wiring import inject, Provide

from app.shared.container import Container

# Ports & Use Cases
from app.core.ports import ConnectivityGraph, RouteTable
from app.core.use_cases.route_query import RouteQueryService

# --- Use Case Injection ---

@inject
def get_route_query_service(
    service: RouteQueryService = Depends(Provide[Container.route_query_service])
) -> RouteQueryService:
    """Dependency to inject the RouteQueryService Interactor."""
    return service

@inject
def get_connectivity_graph(
    graph: ConnectivityGraph = Depends(Provide[Container.connectivity_graph])
) -> ConnectivityGraph:
    return graph

@inject
def get_route_table(
    table: RouteTable = Depends(Provide[Container.route_table])
) -> RouteTable:
    return table
