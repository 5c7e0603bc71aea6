"""Filter facets built from the loaded collection."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from greenspace.common.constants import (
    ALL_FACET,
    ALL_FACET_LABEL,
    MAJOR_SITES_FACET,
    MAJOR_SITES_FACET_LABEL,
    TYPE_FACET_PREFIX,
)
from greenspace.common.models import FilterOption, Park


def build_facets(parks: Sequence[Park]) -> list[FilterOption]:
    major_count = 0
    type_counts: Counter[str] = Counter()
    for park in parks:
        if park.is_major_site:
            major_count += 1
        type_counts[park.type] += 1

    # Counter keeps first-seen order and sorted() is stable, so ties stay in that order.
    by_count = sorted(type_counts.items(), key=lambda item: -item[1])

    facets = [
        FilterOption(value=ALL_FACET, label=ALL_FACET_LABEL, count=len(parks)),
        FilterOption(value=MAJOR_SITES_FACET, label=MAJOR_SITES_FACET_LABEL, count=major_count),
    ]
    # Type values are prefixed and never equal a sentinel.
    facets.extend(
        FilterOption(value=f"{TYPE_FACET_PREFIX}{park_type}", label=park_type, count=count)
        for park_type, count in by_count
    )
    return facets
