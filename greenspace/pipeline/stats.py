"""Summary statistics over the whole collection."""

from __future__ import annotations

from typing import Sequence

from greenspace.common.constants import SQ_METRES_PER_HECTARE
from greenspace.common.models import Park, ParkStats
from greenspace.common.scoring import round_half_up


def compute_stats(parks: Sequence[Park]) -> ParkStats:
    if not parks:
        return ParkStats.empty()

    total_area_sq_m = sum(park.area for park in parks)
    total_rating = sum(park.rating for park in parks)

    return ParkStats(
        total_parks=len(parks),
        # Sum first, then convert once.
        total_area_hectares=int(total_area_sq_m / SQ_METRES_PER_HECTARE),
        average_rating=round_half_up(total_rating / len(parks), 1),
    )
