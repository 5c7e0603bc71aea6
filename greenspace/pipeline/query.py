"""Search and facet filtering over the loaded collection."""

from __future__ import annotations

from typing import Iterable

from greenspace.common.constants import ALL_FACET, MAJOR_SITES_FACET, TYPE_FACET_PREFIX
from greenspace.common.models import Park


def matches_search(park: Park, needle: str) -> bool:
    """``needle`` must already be lower-cased."""
    if needle in park.site_name.lower():
        return True
    if needle in park.location.lower():
        return True
    if needle in park.type.lower():
        return True
    return any(needle in facility.lower() for facility in park.facilities)


def matches_facet(park: Park, facet: str) -> bool:
    """``type:<name>`` selects one type. A bare value is a sentinel or an exact type name."""
    if facet.startswith(TYPE_FACET_PREFIX):
        return park.type == facet[len(TYPE_FACET_PREFIX):]
    if facet == ALL_FACET:
        return True
    if facet == MAJOR_SITES_FACET:
        return park.is_major_site
    return park.type == facet


def filter_parks(parks: Iterable[Park], search_term: str = "", facet: str = ALL_FACET) -> list[Park]:
    needle = search_term.lower()
    return [
        park
        for park in parks
        if (not needle or matches_search(park, needle)) and matches_facet(park, facet)
    ]
