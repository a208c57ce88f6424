"""
tests/test_manage.py
--------------------

The developer command line, driven through main(argv).
"""

from __future__ import annotations

import json

import pytest

import manage


def test_no_command_prints_help(capsys) -> None:
    assert manage.main([]) == 0
    assert "check-route" in capsys.readouterr().out


def test_check_route_text(capsys) -> None:
    assert manage.main(["check-route", "Kabul", "Badakhshan"]) == 0
    out = capsys.readouterr().out
    assert "Kabul → Parwan → Baghlan → Kunduz → Takhar → Badakhshan" in out
    assert "5 hops" in out


def test_check_route_json_in_dari(capsys) -> None:
    assert manage.main(["check-route", "کابل", "پروان", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["connected"] is True
    assert payload["path"] == ["Kabul", "Parwan"]
    assert payload["route"]["prs"] == "کابل → پروان"


def test_find_routes_with_bound(capsys) -> None:
    assert manage.main(["find-routes", "Kabul", "Nangarhar", "--max-hops", "2", "--lang", "pbt"]) == 0
    out = capsys.readouterr().out
    assert "1 route(s) within 2 hops" in out
    assert "کابل → لغمان → ننگرهار" in out


def test_shortest_route_without_path_fails(capsys) -> None:
    assert manage.main(["shortest-route", "Bamyan", "Kabul"]) == 1
    assert "No route found from Bamyan to Kabul" in capsys.readouterr().out


def test_unknown_province_fails(capsys) -> None:
    assert manage.main(["check-route", "Atlantis", "Kabul"]) == 1
    assert "Province not found: Atlantis" in capsys.readouterr().out


def test_validate_passes_without_strict(capsys) -> None:
    assert manage.main(["validate"]) == 0
    assert "Badghis-Baghlan" in capsys.readouterr().out


def test_validate_strict_fails_on_rejected_entries() -> None:
    assert manage.main(["validate", "--strict"]) == 1


def test_validate_json(capsys) -> None:
    assert manage.main(["validate", "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["province_count"] == 34
    assert report["route_count"] == 188


def test_import_routes_to_file(tmp_path) -> None:
    source = tmp_path / "Provinces.txt"
    source.write_text("From\tTo\tRoute\nKabul\tLaghman\tKabul → Laghman\n", encoding="utf-8")
    target = tmp_path / "routes.json"

    assert manage.main(["import-routes", str(source), "--output", str(target)]) == 0

    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["routes"] == {"Kabul-Laghman": "Kabul → Laghman"}
    assert payload["connections"] == {"Kabul": ["Laghman"], "Laghman": ["Kabul"]}


def test_import_routes_missing_file(tmp_path, capsys) -> None:
    assert manage.main(["import-routes", str(tmp_path / "nope.txt")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_unknown_command_exits() -> None:
    with pytest.raises(SystemExit):
        manage.main(["teleport"])
