"""
tests/test_routes_tsv.py
------------------------

Survey TSV import: parsing, derived neighbors and the table built from a file.
"""

from __future__ import annotations

import pytest

from app.adapters.persistence.routes_tsv import TsvRouteTable, load_route_table_tsv, parse_routes_tsv
from app.core.domain.exceptions import RouteDataError

SURVEY = (
    "From\tTo\tRoute\n"
    "Kabul\tBadakhshan\tKabul → Parwan → Baghlan → Kunduz → Takhar → Badakhshan\n"
    "Kabul\tLaghman\tKabul → Laghman\n"
    "\n"
    "Herat\t\t\n"
    "Herat\tBadghis\n"
    "Kabul\tAtlantis\tKabul → Atlantis\n"
)


def test_header_and_short_rows_are_skipped() -> None:
    routes, _ = parse_routes_tsv(SURVEY)
    assert routes == {
        "Kabul-Badakhshan": "Kabul → Parwan → Baghlan → Kunduz → Takhar → Badakhshan",
        "Kabul-Laghman": "Kabul → Laghman",
        "Kabul-Atlantis": "Kabul → Atlantis",
    }


def test_neighbors_derived_from_consecutive_steps() -> None:
    _, neighbors = parse_routes_tsv(SURVEY)
    assert neighbors["Kabul"] == ["Parwan", "Laghman", "Atlantis"]
    assert neighbors["Parwan"] == ["Kabul", "Baghlan"]
    assert neighbors["Badakhshan"] == ["Takhar"]
    assert "Herat" not in neighbors


def test_header_only_file_is_empty() -> None:
    assert parse_routes_tsv("From\tTo\tRoute\n") == ({}, {})


def test_table_from_file_is_validated(tmp_path, graph) -> None:
    source = tmp_path / "Provinces.txt"
    source.write_text(SURVEY, encoding="utf-8")

    table = TsvRouteTable(source, graph.provinces())

    assert len(table) == 2
    assert table.lookup("Laghman", "Kabul") == ("Laghman", "Kabul")
    assert table.lookup("Badakhshan", "Kabul")[0] == "Badakhshan"
    assert "key does not name" in table.rejected()["Kabul-Atlantis"]


def test_loader_builds_table(tmp_path, graph) -> None:
    source = tmp_path / "Provinces.txt"
    source.write_text(SURVEY, encoding="utf-8")
    table = load_route_table_tsv(str(source), graph.provinces())
    assert isinstance(table, TsvRouteTable)
    assert table.path == source


def test_loader_missing_file(tmp_path, graph) -> None:
    with pytest.raises(RouteDataError):
        load_route_table_tsv(tmp_path / "missing.txt", graph.provinces())
