# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.adapters.persistence.connectivity_graph import StaticConnectivityGraph
from app.adapters.persistence.province_names import StaticProvinceTranslator
from app.adapters.persistence.route_table import StaticRouteTable
from app.core.use_cases.route_query import RouteQueryService


@pytest.fixture(scope="session")
def graph():
    """The compiled-in direct-adjacency graph."""
    return StaticConnectivityGraph()


@pytest.fixture(scope="session")
def translator(graph):
    return StaticProvinceTranslator(graph.provinces())


@pytest.fixture(scope="session")
def route_table(graph):
    """The compiled-in route table, validated at construction."""
    return StaticRouteTable(graph.provinces())


@pytest.fixture
def service(translator, graph, route_table):
    return RouteQueryService(translator=translator, graph=graph, route_table=route_table)


@pytest.fixture
def make_service(translator, graph):
    """
    Builds a service over custom data, for cases the real tables cannot
    produce (e.g. a direct edge without a stored route).
    """
    def _make(connections=None, routes=None, **kwargs):
        g = StaticConnectivityGraph(connections) if connections is not None else graph
        t = StaticProvinceTranslator(g.provinces())
        table = StaticRouteTable(g.provinces(), entries=routes if routes is not None else {})
        return RouteQueryService(translator=t, graph=g, route_table=table, **kwargs)

    return _make


@pytest.fixture(scope="module")
def app():
    from app.main import create_app
    return create_app()


@pytest.fixture(scope="module")
def client(app):
    return TestClient(app)
