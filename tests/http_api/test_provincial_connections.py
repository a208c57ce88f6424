# tests/http_api/test_provincial_connections.py
from unittest.mock import MagicMock
from urllib.parse import quote

from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from app.core.use_cases.route_query import RouteQueryService
from app.shared.config import AppEnv, settings
from app.shared.container import container

API_PREFIX = "/api/provincial-connections"


def _get(client, *segments, **params):
    path = "/".join(quote(s, safe="") for s in segments)
    return client.get(f"{API_PREFIX}/{path}" if path else API_PREFIX, params=params or None)


def test_routes_registered_and_tagged(app) -> None:
    routes = [r for r in app.routes if isinstance(r, APIRoute) and r.path.startswith(API_PREFIX)]
    assert {r.path for r in routes} >= {
        API_PREFIX,
        f"{API_PREFIX}/{{province}}",
        f"{API_PREFIX}/check-route/{{from_province}}/{{to_province}}",
        f"{API_PREFIX}/find-routes/{{from_province}}/{{to_province}}",
        f"{API_PREFIX}/shortest-route/{{from_province}}/{{to_province}}",
    }
    for route in routes:
        assert "Provincial Connections" in route.tags


# --- Listing -----------------------------------------------------------------

def test_list_connections(client) -> None:
    response = client.get(API_PREFIX)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert len(data["connections"]) == 34
    assert data["connections"]["Kabul"] == ["Parwan", "Maidan Wardak", "Laghman"]
    assert data["connections"]["Bamyan"] == []


def test_neighbors_by_dari_name(client) -> None:
    response = _get(client, "کابل")
    assert response.status_code == 200
    data = response.json()
    assert data["province"] == "کابل"
    assert data["canonical"] == "Kabul"
    assert data["neighbors"] == ["Parwan", "Maidan Wardak", "Laghman"]
    assert data["localizedNeighbors"]["prs"] == ["پروان", "وردک", "لغمان"]


def test_neighbors_double_encoded_segment(client) -> None:
    response = client.get(f"{API_PREFIX}/{quote(quote('Sar-e Pol'))}")
    assert response.status_code == 200
    assert response.json()["canonical"] == "Sar-e Pol"
    assert response.json()["neighbors"] == []


def test_neighbors_unknown_province(client) -> None:
    response = _get(client, "Atlantis")
    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "No road connections found for province: Atlantis",
    }


# --- check-route -------------------------------------------------------------

def test_check_route_reversed_entry(client) -> None:
    response = _get(client, "check-route", "Kabul", "Badakhshan")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["connected"] is True
    assert data["hops"] == 5
    assert data["route"]["en"] == "Kabul → Parwan → Baghlan → Kunduz → Takhar → Badakhshan"
    assert data["route"]["pbt"].startswith("کابل → پروان")
    assert [step["province"] for step in data["routeDetails"]] == [
        "Kabul", "Parwan", "Baghlan", "Kunduz", "Takhar", "Badakhshan",
    ]
    assert data["from"] == "Kabul" and data["to"] == "Badakhshan"


def test_check_route_localized_inputs(client) -> None:
    response = _get(client, "check-route", "کابل", "پروان")
    assert response.status_code == 200
    assert response.json()["route"]["en"] == "Kabul → Parwan"
    assert response.json()["hops"] == 1


def test_check_route_not_connected(client) -> None:
    response = _get(client, "check-route", "Bamyan", "Kabul")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["connected"] is False
    assert data["route"] == {"en": "", "prs": "", "pbt": ""}
    assert data["routeDetails"] == []


def test_check_route_same_province_is_connected(client) -> None:
    response = _get(client, "check-route", "Kabul", "کابل")
    assert response.status_code == 200
    data = response.json()
    assert data["connected"] is True
    assert data["hops"] == 0
    assert data["source"] == "same_province"
    assert data["route"]["en"] == "Kabul"
    assert [step["province"] for step in data["routeDetails"]] == ["Kabul"]


def test_check_route_unknown_province(client) -> None:
    response = _get(client, "check-route", "Atlantis", "Kabul")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Province not found: Atlantis"}


# --- find-routes -------------------------------------------------------------

def test_find_routes_with_hop_bound(client) -> None:
    response = _get(client, "find-routes", "Kabul", "Nangarhar", maxHops=2)
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert data["maxHops"] == 2
    assert data["routes"]["en"] == ["Kabul → Laghman → Nangarhar"]
    assert data["routeDetails"] == [{"path": ["Kabul", "Laghman", "Nangarhar"], "hops": 2}]


def test_find_routes_invalid_hop_bound_uses_default(client) -> None:
    response = _get(client, "find-routes", "Kabul", "Nangarhar", maxHops="lots")
    assert response.status_code == 200
    assert response.json()["maxHops"] == 3


def test_find_routes_huge_hop_bound_is_clamped(client) -> None:
    response = _get(client, "find-routes", "Kabul", "Parwan", maxHops=1000)
    assert response.status_code == 200
    assert response.json()["maxHops"] == 12


def test_find_routes_unknown_province(client) -> None:
    response = _get(client, "find-routes", "Kabul", "Atlantis")
    assert response.status_code == 404
    assert response.json()["success"] is False


# --- shortest-route ----------------------------------------------------------

def test_shortest_route(client) -> None:
    response = _get(client, "shortest-route", "Kabul", "Laghman")
    assert response.status_code == 200
    data = response.json()
    assert data["hops"] == 1
    assert data["route"]["en"] == "Kabul → Laghman"
    assert data["route"]["prs"] == "کابل → لغمان"


def test_shortest_route_no_path_is_404(client) -> None:
    response = _get(client, "shortest-route", "Bamyan", "Kabul")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "No route found from Bamyan to Kabul"}


# --- Error shaping -----------------------------------------------------------

def test_unknown_path_is_json_404(client) -> None:
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}


def _call_broken_service(app):
    broken = MagicMock(spec=RouteQueryService)
    broken.check_route.side_effect = RuntimeError("table exploded")

    with container.route_query_service.override(broken):
        client = TestClient(app, raise_server_exceptions=False)
        return client.get(f"{API_PREFIX}/check-route/Kabul/Parwan")


def test_internal_error_is_json_500_with_detail_in_debug(app, monkeypatch) -> None:
    monkeypatch.setattr(settings, "APP_ENV", AppEnv.DEVELOPMENT)
    monkeypatch.setattr(settings, "DEBUG", True)

    response = _call_broken_service(app)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Internal server error",
        "error": "table exploded",
    }


def test_internal_error_hides_detail_in_production(app, monkeypatch) -> None:
    monkeypatch.setattr(settings, "APP_ENV", AppEnv.PRODUCTION)
    monkeypatch.setattr(settings, "DEBUG", True)

    response = _call_broken_service(app)

    assert response.status_code == 500
    data = response.json()
    assert data == {"success": False, "message": "Internal server error"}
    assert "error" not in data


def test_internal_error_hides_detail_without_debug(app, monkeypatch) -> None:
    monkeypatch.setattr(settings, "DEBUG", False)

    response = _call_broken_service(app)

    assert response.status_code == 500
    assert "error" not in response.json()
