"""
Core Ports (Interfaces).

Abstract base classes for the three static data sources the routing use
cases read from. The adapters in `app.adapters.persistence` implement them
over compiled-in tables (or a TSV routes file); tests may swap in their own.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple

from app.core.domain.models import LanguageTag, ProvinceId, RoutePath

# =========================================================
# 1. TRANSLATION PORT
# =========================================================

class ProvinceTranslator(ABC):
    """
    Port for converting between canonical province ids and localized names.
    """
    @abstractmethod
    def resolve(self, name: str) -> Optional[ProvinceId]:
        """Canonical id for `name` in any supported language, or None."""
        pass

    @abstractmethod
    def to_localized(self, province: ProvinceId, lang: LanguageTag) -> str:
        """Display name of `province` in `lang`; unknown ids come back unchanged."""
        pass

    def to_canonical(self, name: str) -> str:
        """Best-effort variant of `resolve`: unresolved names come back unchanged."""
        resolved = self.resolve(name)
        return resolved if resolved is not None else name

# =========================================================
# 2. GRAPH PORT
# =========================================================

class ConnectivityGraph(ABC):
    """
    Port for the sparse direct-adjacency road graph.
    """
    @abstractmethod
    def provinces(self) -> Tuple[ProvinceId, ...]:
        """All canonical province ids, in storage order."""
        pass

    @abstractmethod
    def neighbors(self, province: ProvinceId) -> Tuple[ProvinceId, ...]:
        """Directly connected provinces; empty for isolated or unknown ids."""
        pass

    def has_province(self, province: ProvinceId) -> bool:
        return province in self.provinces()

    def is_directly_connected(self, a: ProvinceId, b: ProvinceId) -> bool:
        return b in self.neighbors(a)

    def as_dict(self) -> Dict[ProvinceId, List[ProvinceId]]:
        return {p: list(self.neighbors(p)) for p in self.provinces()}

# =========================================================
# 3. ROUTE TABLE PORT
# =========================================================

class RouteTable(ABC):
    """
    Port for the curated table of precomputed province-to-province paths.
    """
    @abstractmethod
    def lookup(self, a: ProvinceId, b: ProvinceId) -> Optional[RoutePath]:
        """Stored path from `a` to `b` (reversed if only `b-a` is stored), or None."""
        pass

    @abstractmethod
    def keys(self) -> Iterable[str]:
        """Keys of the accepted entries, e.g. 'Kabul-Parwan'."""
        pass

    @abstractmethod
    def pairs(self) -> Iterable[Tuple[ProvinceId, ProvinceId]]:
        """(from, to) of every accepted entry, in the stored direction."""
        pass

    @abstractmethod
    def rejected(self) -> Dict[str, str]:
        """Entries refused at load time: key -> reason."""
        pass

# =========================================================
# EXPORTS
# =========================================================
__all__ = [
    "ProvinceTranslator",
    "ConnectivityGraph",
    "RouteTable",
]
