# app/adapters/persistence/province_names.py
# =========================================================================
# PROVINCE NAMES: Localized display names for the canonical province ids
#
# The source tables map a localized name back to its canonical English id
# (Dari -> English, Pashto -> English). The forward tables used for display
# are derived from them once, at import time.
# =========================================================================

from __future__ import annotations

from types import MappingProxyType
from typing import Collection, Dict, Mapping, Optional

from app.core.domain.exceptions import RouteDataError
from app.core.domain.models import LanguageTag, ProvinceId
from app.core.ports import ProvinceTranslator

# --- SOURCE TABLES ---

# Dari (prs) -> canonical
PRS_TO_EN: Mapping[str, ProvinceId] = MappingProxyType({
    "کابل": "Kabul",
    "هرات": "Herat",
    "قندهار": "Kandahar",
    "بلخ": "Balkh",
    "ننگرهار": "Nangarhar",
    "بادغیس": "Badghis",
    "بدخشان": "Badakhshan",
    "بغلان": "Baghlan",
    "بامیان": "Bamyan",
    "دایکندی": "Daykundi",
    "فراه": "Farah",
    "فاریاب": "Faryab",
    "غزنی": "Ghazni",
    "غور": "Ghor",
    "هلمند": "Helmand",
    "جوزجان": "Jowzjan",
    "کاپیسا": "Kapisa",
    "خوست": "Khost",
    "کنر": "Kunar",
    "کندز": "Kunduz",
    "لغمان": "Laghman",
    "لوگر": "Logar",
    "نیمروز": "Nimruz",
    "نورستان": "Nuristan",
    "پکتیا": "Paktia",
    "پکتیکا": "Paktika",
    "پنجشیر": "Panjshir",
    "پروان": "Parwan",
    "سمنگان": "Samangan",
    "سرپل": "Sar-e Pol",
    "تخار": "Takhar",
    "ارزگان": "Uruzgan",
    "وردک": "Maidan Wardak",
    "زابل": "Zabul",
})

# Pashto (pbt) -> canonical
PBT_TO_EN: Mapping[str, ProvinceId] = MappingProxyType({
    "کابل": "Kabul",
    "هرات": "Herat",
    "کندهار": "Kandahar",
    "بلخ": "Balkh",
    "ننگرهار": "Nangarhar",
    "بادغیس": "Badghis",
    "بدخشان": "Badakhshan",
    "بغلان": "Baghlan",
    "بامیان": "Bamyan",
    "دایکندی": "Daykundi",
    "فراه": "Farah",
    "فاریاب": "Faryab",
    "غزني": "Ghazni",
    "غور": "Ghor",
    "هلمند": "Helmand",
    "جوزجان": "Jowzjan",
    "کاپیسا": "Kapisa",
    "خوست": "Khost",
    "کنړ": "Kunar",
    "کندز": "Kunduz",
    "لغمان": "Laghman",
    "لوگر": "Logar",
    "نیمروز": "Nimruz",
    "نورستان": "Nuristan",
    "پکتیا": "Paktia",
    "پکتیکا": "Paktika",
    "پنجشیر": "Panjshir",
    "پروان": "Parwan",
    "سمنګان": "Samangan",
    "سرپل": "Sar-e Pol",
    "تخار": "Takhar",
    "ارزګان": "Uruzgan",
    "وردګ": "Maidan Wardak",
    "زابل": "Zabul",
})

# Legacy English spellings -> canonical. Input-only; never used for display.
EN_ALIASES: Mapping[str, ProvinceId] = MappingProxyType({
    "Wardak": "Maidan Wardak",
})


def _invert(table: Mapping[str, ProvinceId], lang: LanguageTag) -> Dict[ProvinceId, str]:
    """Builds canonical -> localized, refusing tables that are not injective."""
    forward: Dict[ProvinceId, str] = {}
    for localized, canonical in table.items():
        if canonical in forward:
            raise RouteDataError(
                f"{lang.value} names '{forward[canonical]}' and '{localized}' "
                f"both map to '{canonical}'"
            )
        forward[canonical] = localized
    return forward


# --- DERIVED TABLES ---

EN_TO_PRS: Mapping[ProvinceId, str] = MappingProxyType(_invert(PRS_TO_EN, LanguageTag.PRS))
EN_TO_PBT: Mapping[ProvinceId, str] = MappingProxyType(_invert(PBT_TO_EN, LanguageTag.PBT))


class StaticProvinceTranslator(ProvinceTranslator):
    """
    Translator over the compiled-in name tables.

    Resolution order for an incoming name:
      1. already a known canonical id
      2. Dari table, if the translation is a known id
      3. Pashto table, if the translation is a known id
      4. legacy English alias, if the alias target is a known id
    Anything else is unresolved.
    """

    def __init__(self, known_provinces: Collection[ProvinceId]):
        self._known = frozenset(known_provinces)
        self._reverse_tables = (PRS_TO_EN, PBT_TO_EN, EN_ALIASES)
        self._forward_tables = {
            LanguageTag.PRS: EN_TO_PRS,
            LanguageTag.PBT: EN_TO_PBT,
        }

    def resolve(self, name: str) -> Optional[ProvinceId]:
        if not isinstance(name, str):
            return None
        key = name.strip()
        if not key:
            return None
        if key in self._known:
            return key
        for table in self._reverse_tables:
            match = table.get(key)
            if match is not None and match in self._known:
                return match
        return None

    def to_localized(self, province: ProvinceId, lang: LanguageTag) -> str:
        lang = LanguageTag(lang)
        if lang is LanguageTag.EN:
            return province
        return self._forward_tables[lang].get(province, province)

    def has_name(self, province: ProvinceId, lang: LanguageTag) -> bool:
        """True when `province` has a dedicated display name in `lang`."""
        lang = LanguageTag(lang)
        if lang is LanguageTag.EN:
            return True
        return province in self._forward_tables[lang]
