# app/adapters/persistence/connectivity_graph.py
"""
Direct road connections between provinces.

Key: canonical province id. Value: directly connected provinces, in the order
the road survey listed them. Provinces with an empty tuple have no surveyed
direct road; they can still appear in the precomputed route table, which is a
separate data source and is never used to fill this graph in.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple

from app.core.domain.models import ProvinceId
from app.core.ports import ConnectivityGraph

PROVINCIAL_CONNECTIONS: Mapping[ProvinceId, Tuple[ProvinceId, ...]] = MappingProxyType({
    "Badakhshan": ("Takhar",),
    "Badghis": ("Faryab", "Herat"),
    "Baghlan": ("Kunduz", "Samangan", "Parwan"),
    "Balkh": ("Samangan", "Jowzjan"),
    "Farah": ("Herat", "Helmand"),
    "Faryab": ("Jowzjan", "Badghis"),
    "Ghazni": ("Maidan Wardak", "Zabul"),
    "Helmand": ("Kandahar", "Farah"),
    "Herat": ("Badghis", "Farah"),
    "Jowzjan": ("Balkh", "Faryab"),
    "Kabul": ("Parwan", "Maidan Wardak", "Laghman"),
    "Kandahar": ("Zabul", "Helmand"),
    "Kunduz": ("Takhar", "Baghlan"),
    "Laghman": ("Kabul", "Nangarhar"),
    "Maidan Wardak": ("Kabul", "Ghazni"),
    "Nangarhar": ("Laghman",),
    "Parwan": ("Baghlan", "Kabul"),
    "Samangan": ("Baghlan", "Balkh"),
    "Takhar": ("Badakhshan", "Kunduz"),
    "Zabul": ("Ghazni", "Kandahar"),
    # No surveyed direct roads
    "Bamyan": (),
    "Daykundi": (),
    "Ghor": (),
    "Kapisa": (),
    "Khost": (),
    "Kunar": (),
    "Logar": (),
    "Nimruz": (),
    "Nuristan": (),
    "Paktia": (),
    "Paktika": (),
    "Panjshir": (),
    "Sar-e Pol": (),
    "Uruzgan": (),
})


class StaticConnectivityGraph(ConnectivityGraph):
    """Read-only adjacency list; built once and shared across requests."""

    def __init__(self, connections: Mapping[ProvinceId, Tuple[ProvinceId, ...]] = PROVINCIAL_CONNECTIONS):
        self._connections = MappingProxyType({p: tuple(n) for p, n in connections.items()})
        self._provinces = tuple(self._connections)

    def provinces(self) -> Tuple[ProvinceId, ...]:
        return self._provinces

    def neighbors(self, province: ProvinceId) -> Tuple[ProvinceId, ...]:
        return self._connections.get(province, ())

    def has_province(self, province: ProvinceId) -> bool:
        return province in self._connections

    def asymmetric_edges(self) -> List[Tuple[ProvinceId, ProvinceId]]:
        """Edges A->B stored without the matching B->A."""
        return [
            (a, b)
            for a, targets in self._connections.items()
            for b in targets
            if a not in self._connections.get(b, ())
        ]

    def isolated_provinces(self) -> List[ProvinceId]:
        return [p for p, targets in self._connections.items() if not targets]
