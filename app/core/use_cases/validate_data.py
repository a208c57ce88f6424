# app/core/use_cases/validate_data.py
"""
Consistency checks over the routing tables.

Reports problems without repairing anything: the graph and the route table
are independent sources and stay that way.
"""

from __future__ import annotations

from typing import List, Tuple

import structlog

from app.core.domain.models import DataValidationReport, LanguageTag, ProvinceId
from app.core.ports import ConnectivityGraph, ProvinceTranslator, RouteTable

logger = structlog.get_logger()


def _asymmetric_edges(graph: ConnectivityGraph) -> List[Tuple[ProvinceId, ProvinceId]]:
    return [
        (a, b)
        for a in graph.provinces()
        for b in graph.neighbors(a)
        if not graph.is_directly_connected(b, a)
    ]


def _off_graph_steps(graph: ConnectivityGraph, table: RouteTable) -> List[Tuple[ProvinceId, ProvinceId]]:
    """Consecutive route steps that are not direct edges in the graph (deduplicated)."""
    found: List[Tuple[ProvinceId, ProvinceId]] = []
    for a, b in table.pairs():
        path = table.lookup(a, b) or ()
        for current, nxt in zip(path, path[1:]):
            edge = (current, nxt)
            if not graph.is_directly_connected(current, nxt) and edge not in found:
                found.append(edge)
    return found


def _has_translation(translator: ProvinceTranslator, province: ProvinceId, lang: LanguageTag) -> bool:
    localized = translator.to_localized(province, lang)
    return localized != province and translator.resolve(localized) == province


def validate_data(
    graph: ConnectivityGraph,
    table: RouteTable,
    translator: ProvinceTranslator,
) -> DataValidationReport:
    provinces = graph.provinces()
    missing = [
        (p, lang)
        for p in provinces
        for lang in (LanguageTag.PRS, LanguageTag.PBT)
        if not _has_translation(translator, p, lang)
    ]

    report = DataValidationReport(
        province_count=len(provinces),
        route_count=len(list(table.keys())),
        rejected_routes=sorted(table.rejected()),
        asymmetric_edges=_asymmetric_edges(graph),
        isolated_provinces=[p for p in provinces if not graph.neighbors(p)],
        missing_translations=missing,
        off_graph_steps=_off_graph_steps(graph, table),
    )

    logger.info(
        "route_data_validated",
        provinces=report.province_count,
        routes=report.route_count,
        rejected=len(report.rejected_routes),
        asymmetric=len(report.asymmetric_edges),
        missing_translations=len(report.missing_translations),
    )
    return report
