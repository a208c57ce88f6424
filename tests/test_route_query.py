"""
tests/test_route_query.py
-------------------------

RouteQueryService: curated route checks, graph search and localization.
"""

from __future__ import annotations

import itertools

import pytest

from app.core.domain.exceptions import NoRouteFoundError, ProvinceNotFoundError
from app.core.domain.models import LanguageTag, RouteSource

CONNECTED = [
    "Kabul", "Parwan", "Baghlan", "Kunduz", "Takhar", "Badakhshan", "Laghman",
    "Nangarhar", "Maidan Wardak", "Ghazni", "Zabul", "Kandahar", "Helmand",
    "Farah", "Herat", "Badghis", "Faryab", "Jowzjan", "Balkh", "Samangan",
]


# ---------------------------------------------------------------------------
# check_route
# ---------------------------------------------------------------------------

def test_check_route_direct_table_entry(service) -> None:
    result = service.check_route("Kabul", "Parwan")
    assert result.connected is True
    assert result.path == ["Kabul", "Parwan"]
    assert result.hops == 1
    assert result.source is RouteSource.ROUTE_TABLE


def test_check_route_badakhshan_takhar(service) -> None:
    result = service.check_route("Badakhshan", "Takhar")
    assert result.path == ["Badakhshan", "Takhar"]
    assert result.hops == 1


def test_check_route_uses_reversed_entry(service) -> None:
    result = service.check_route("Kabul", "Badakhshan")
    assert result.path == ["Kabul", "Parwan", "Baghlan", "Kunduz", "Takhar", "Badakhshan"]
    assert result.hops == 5
    assert result.route.en == "Kabul → Parwan → Baghlan → Kunduz → Takhar → Badakhshan"
    assert result.route.prs == "کابل → پروان → بغلان → کندز → تخار → بدخشان"
    assert [step.province for step in result.steps] == result.path


def test_check_route_accepts_localized_input_and_echoes_it(service) -> None:
    result = service.check_route("کابل", "پروان")
    assert result.from_name == "کابل"
    assert result.from_province == "Kabul"
    assert result.to_province == "Parwan"
    assert result.connected
    assert "کابل" in result.message


def test_check_route_not_connected_is_a_normal_result(service) -> None:
    result = service.check_route("Bamyan", "Kabul")
    assert result.connected is False
    assert result.path is None
    assert result.hops == 0
    assert result.route.en == "" and result.route.prs == "" and result.route.pbt == ""
    assert result.source is RouteSource.NONE


def test_check_route_rejected_entry_is_absent(service) -> None:
    """Badghis-Baghlan is a truncated survey row; no destination is guessed."""
    result = service.check_route("Badghis", "Baghlan")
    assert result.connected is False
    assert result.path is None


def test_check_route_falls_back_to_direct_connection(make_service) -> None:
    svc = make_service(routes={})
    result = svc.check_route("Kabul", "Parwan")
    assert result.connected is True
    assert result.path is None
    assert result.hops == 0
    assert result.source is RouteSource.DIRECT_CONNECTION
    assert "no detailed route" in result.message


def test_check_route_same_province(service) -> None:
    result = service.check_route("Kabul", "کابل")
    assert result.connected is True
    assert result.path == ["Kabul"]
    assert result.hops == 0
    assert result.source is RouteSource.SAME_PROVINCE


@pytest.mark.parametrize("origin, destination, missing", [
    ("Atlantis", "Kabul", "Atlantis"),
    ("Kabul", "اتلانتیس", "اتلانتیس"),
])
def test_unresolved_input_is_province_not_found(service, origin, destination, missing) -> None:
    with pytest.raises(ProvinceNotFoundError) as excinfo:
        service.check_route(origin, destination)
    assert excinfo.value.name == missing
    assert missing in str(excinfo.value)


# ---------------------------------------------------------------------------
# find_routes
# ---------------------------------------------------------------------------

def test_find_routes_kabul_nangarhar_two_hops(service) -> None:
    result = service.find_routes("Kabul", "Nangarhar", max_hops=2)
    assert ["Kabul", "Laghman", "Nangarhar"] in result.paths
    assert result.count == 1
    assert result.routes.en == ["Kabul → Laghman → Nangarhar"]
    assert result.routes.pbt == ["کابل → لغمان → ننگرهار"]


def test_find_routes_nothing_within_bound(service) -> None:
    assert service.find_routes("Kabul", "Nangarhar", max_hops=1).paths == []


def test_find_routes_from_isolated_province(service) -> None:
    """Bamyan has no graph edges, so the search finds nothing."""
    assert service.find_routes("Bamyan", "Kabul", max_hops=5).paths == []


def test_find_routes_follows_neighbor_order(make_service) -> None:
    svc = make_service(connections={
        "Kabul": ("Parwan", "Laghman"),
        "Parwan": ("Kabul", "Nangarhar"),
        "Laghman": ("Kabul", "Nangarhar"),
        "Nangarhar": ("Parwan", "Laghman"),
    })
    result = svc.find_routes("Kabul", "Nangarhar", max_hops=3)
    assert result.paths == [
        ["Kabul", "Parwan", "Nangarhar"],
        ["Kabul", "Laghman", "Nangarhar"],
    ]


@pytest.mark.parametrize("raw, expected", [
    (None, 3), ("abc", 3), (0, 3), (-2, 3), ("2.5", 3), (2.5, 3),
    ("4", 4), (7, 7), (12, 12), (500, 12),
])
def test_hop_bound_normalization(service, raw, expected) -> None:
    assert service.normalize_max_hops(raw) == expected


def test_find_routes_reports_effective_bound(service) -> None:
    assert service.find_routes("Kabul", "Parwan", max_hops="nope").max_hops == 3
    assert service.find_routes("Kabul", "Parwan", max_hops=10_000).max_hops == 12


def test_dfs_bound_and_simple_paths(service) -> None:
    for origin, destination in [("Kabul", "Herat"), ("Badakhshan", "Ghazni"), ("Balkh", "Kandahar")]:
        for bound in range(1, 9):
            for path in service.find_routes(origin, destination, max_hops=bound).paths:
                assert len(path) <= bound + 1
                assert len(set(path)) == len(path)
                assert path[0] == origin and path[-1] == destination


# ---------------------------------------------------------------------------
# shortest_route
# ---------------------------------------------------------------------------

def test_shortest_route_direct_edge(service) -> None:
    result = service.shortest_route("Kabul", "Laghman")
    assert result.path == ["Kabul", "Laghman"]
    assert result.hops == 1


def test_shortest_route_multi_hop(service) -> None:
    result = service.shortest_route("Badghis", "Baghlan")
    assert result.path == ["Badghis", "Faryab", "Jowzjan", "Balkh", "Samangan", "Baghlan"]
    assert result.route.en.startswith("Badghis → Faryab")


def test_shortest_route_unreachable_raises(service) -> None:
    with pytest.raises(NoRouteFoundError):
        service.shortest_route("Bamyan", "Kabul")


def test_shortest_route_same_province(service) -> None:
    assert service.shortest_route("Herat", "Herat").path == ["Herat"]


def test_bfs_never_longer_than_any_dfs_path(service) -> None:
    for origin, destination in itertools.permutations(CONNECTED[:8], 2):
        shortest = service.shortest_route(origin, destination)
        found = service.find_routes(origin, destination, max_hops=shortest.hops).paths
        assert found, (origin, destination)
        assert min(len(p) for p in found) == len(shortest.path)
        assert all(len(shortest.path) <= len(p) for p in found)


# ---------------------------------------------------------------------------
# formatting & listings
# ---------------------------------------------------------------------------

def test_format_empty_path(service) -> None:
    assert service.format_path(None, LanguageTag.EN) == ""
    assert service.format_path([], LanguageTag.PRS) == ""


def test_neighbors_by_localized_name(service) -> None:
    province, neighbors = service.neighbors("کابل")
    assert province == "Kabul"
    assert neighbors == ("Parwan", "Maidan Wardak", "Laghman")


def test_list_provinces(service) -> None:
    listing = {p.id: p for p in service.list_provinces()}
    assert len(listing) == 34
    assert listing["Kabul"].prs == "کابل"
    assert listing["Kabul"].neighbor_count == 3
    assert listing["Bamyan"].neighbor_count == 0
