#!/usr/bin/env python3
"""
=============================================================================
🚚 SHIPSMART PROVINCIAL ROUTING - UNIFIED COMMANDER
=============================================================================
Single entry point for developer operations.

Usage:
    python manage.py serve                        # Launch the API (uvicorn)
    python manage.py check-route Kabul Badakhshan # Curated route lookup
    python manage.py find-routes Kabul Nangarhar --max-hops 2
    python manage.py shortest-route کابل لغمان     # Names in any language
    python manage.py validate [--strict]          # Route data consistency report
    python manage.py import-routes Provinces.txt  # Survey TSV -> JSON tables
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

# --- CONFIGURATION ---
ROOT_DIR = Path(__file__).parent.resolve()


# Colors for terminal output
class Colors:
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'


def log(msg: str, color: str = Colors.ENDC) -> None:
    print(f"{color}{msg}{Colors.ENDC}")


def _service():
    from app.shared.container import container
    return container.route_query_service()


def _emit_json(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


# --- COMMANDS ---

def serve(host: str, port: int, reload: bool) -> None:
    import uvicorn

    log(f"🚀 Serving on http://{host}:{port}", Colors.HEADER)
    uvicorn.run("app.main:app", host=host, port=port, reload=reload)


def check_route(origin: str, destination: str, lang: str, as_json: bool) -> int:
    result = _service().check_route(origin, destination)
    if as_json:
        _emit_json(result.model_dump(mode="json"))
        return 0

    color = Colors.GREEN if result.connected else Colors.WARNING
    log(f"{'✅' if result.connected else '⚠️ '} {result.message}", color)
    rendered = getattr(result.route, lang)
    if rendered:
        log(f"    {rendered}  ({result.hops} hops)", Colors.CYAN)
    return 0


def find_routes(origin: str, destination: str, max_hops: Optional[int], lang: str, as_json: bool) -> int:
    result = _service().find_routes(origin, destination, max_hops)
    if as_json:
        _emit_json(result.model_dump(mode="json"))
        return 0

    log(f"🔎 {result.count} route(s) within {result.max_hops} hops", Colors.HEADER)
    for rendered, path in zip(getattr(result.routes, lang), result.paths):
        log(f"    {rendered}  ({len(path) - 1} hops)", Colors.CYAN)
    return 0


def shortest_route(origin: str, destination: str, lang: str, as_json: bool) -> int:
    result = _service().shortest_route(origin, destination)
    if as_json:
        _emit_json(result.model_dump(mode="json"))
        return 0

    log(f"🏁 {getattr(result.route, lang)}  ({result.hops} hops)", Colors.GREEN)
    return 0


def validate(strict: bool, as_json: bool) -> int:
    from app.shared.container import container
    from app.core.use_cases.validate_data import validate_data

    report = validate_data(
        container.connectivity_graph(),
        container.route_table(),
        container.translator(),
    )
    if as_json:
        _emit_json(report.model_dump(mode="json"))
    else:
        log("\n🩺 Route data report", Colors.HEADER)
        log(f"    📍 Provinces: {report.province_count}")
        log(f"    🛣️  Routes:    {report.route_count}")
        if report.rejected_routes:
            log(f"    ⚠️  Rejected route entries: {', '.join(report.rejected_routes)}", Colors.WARNING)
        if report.asymmetric_edges:
            edges = ", ".join(f"{a}->{b}" for a, b in report.asymmetric_edges)
            log(f"    ⚠️  One-way graph edges: {edges}", Colors.WARNING)
        if report.isolated_provinces:
            log(f"    ℹ️  No direct roads: {', '.join(report.isolated_provinces)}")
        if report.off_graph_steps:
            steps = ", ".join(f"{a}->{b}" for a, b in report.off_graph_steps)
            log(f"    ℹ️  Route steps missing from graph: {steps}")
        if report.missing_translations:
            missing = ", ".join(f"{p} ({lang.value})" for p, lang in report.missing_translations)
            log(f"    ❌ Missing translations: {missing}", Colors.FAIL)
        log("    ✅ Done." if report.ok else "    ❌ Problems found.", Colors.GREEN if report.ok else Colors.FAIL)

    if report.missing_translations:
        return 1
    if strict and report.rejected_routes:
        return 1
    return 0


def import_routes(path: Path, output: Optional[Path]) -> int:
    from app.adapters.persistence.routes_tsv import parse_routes_tsv

    if not path.exists():
        log(f"❌ File not found: {path}", Colors.FAIL)
        return 1

    routes, neighbors = parse_routes_tsv(path.read_text(encoding="utf-8"))
    payload = {"connections": neighbors, "routes": routes}
    text = json.dumps(payload, ensure_ascii=False, indent=2)

    if output is None:
        print(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        log(f"✅ Wrote {output}", Colors.GREEN)
    log(f"    Found {len(routes)} routes, {len(neighbors)} provinces with neighbors", Colors.CYAN)
    return 0


# --- MAIN ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ShipSmart Provincial Routing Commander")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=5000)
    serve_parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    def _route_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("origin", help="Origin province (English, Dari or Pashto)")
        p.add_argument("destination", help="Destination province (English, Dari or Pashto)")
        p.add_argument("--lang", choices=["en", "prs", "pbt"], default="en", help="Display language")
        p.add_argument("--json", action="store_true", help="Print the raw result as JSON")

    _route_args(subparsers.add_parser("check-route", help="Look up the curated route between two provinces"))

    find_parser = subparsers.add_parser("find-routes", help="All simple road-graph paths within a hop bound")
    _route_args(find_parser)
    find_parser.add_argument("--max-hops", type=int, default=None, help="Hop bound (default 3)")

    _route_args(subparsers.add_parser("shortest-route", help="Fewest-hops road-graph path"))

    validate_parser = subparsers.add_parser("validate", help="Consistency report over the routing tables")
    validate_parser.add_argument("--strict", action="store_true", help="Fail if any route entry was rejected")
    validate_parser.add_argument("--json", action="store_true", help="Print the report as JSON")

    import_parser = subparsers.add_parser("import-routes", help="Convert a survey TSV export into JSON tables")
    import_parser.add_argument("path", type=Path, help="Tab-separated From/To/Route file")
    import_parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    from app.core.domain.exceptions import DomainError
    from app.shared.logging_setup import init_logging

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    init_logging(level="WARNING")

    try:
        if args.command == "serve":
            serve(args.host, args.port, args.reload)
            return 0

        elif args.command == "check-route":
            return check_route(args.origin, args.destination, args.lang, args.json)

        elif args.command == "find-routes":
            return find_routes(args.origin, args.destination, args.max_hops, args.lang, args.json)

        elif args.command == "shortest-route":
            return shortest_route(args.origin, args.destination, args.lang, args.json)

        elif args.command == "validate":
            return validate(args.strict, args.json)

        elif args.command == "import-routes":
            return import_routes(args.path, args.output)

    except DomainError as e:
        log(f"❌ {e}", Colors.FAIL)
        return 1

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log("\n🛑 Aborted by user.", Colors.WARNING)
