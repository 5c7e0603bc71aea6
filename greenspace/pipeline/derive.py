"""Derived attributes computed from canonical Park fields.

Every function here is pure: the same inputs always give the same output and
nothing outside the arguments is read. Lookups go through ``_resolve`` with an
explicit default so unknown site types still get a complete record.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, TypeVar

from greenspace.common.constants import DEFAULT_LAST_UPDATED
from greenspace.common.models import Park
from greenspace.common.scoring import DEFAULT_RATING_PROFILE, apply_rating_profile

T = TypeVar("T")

DESCRIPTION_TEMPLATES = {
    "Recreation Ground": "A busy recreation ground in {location} with open grass for sport and play.",
    "Nature Reserve": "A protected nature reserve in {location}, home to woodland, meadow and wildlife.",
    "Urban Square": "A historic urban square in {location}, popular for events and lunchtime breaks.",
    "Historic Square": "A Georgian square in {location} with lawns, trees and formal paths.",
    "Common Land": "Open common land in {location} with sweeping views and room to roam.",
    "Urban Park": "A compact urban park in {location}, a green break from the city streets.",
    "Community Park": "A community park in {location} with play areas and space for local events.",
    "Historic Park": "A historic estate park in {location} with landscaped grounds and heritage features.",
    "Parks and Gardens": "A formal park and garden in {location} with planted beds and paths.",
    "Amenity Green Space": "An amenity green space in {location} for informal recreation close to home.",
    "Natural Green Space": "A natural green space in {location} with rough grass, scrub and trees.",
    "Play Space": "A dedicated play space in {location} with equipment for children.",
    "Allotments": "Allotment gardens in {location} where residents grow their own food.",
    "Cemetery": "A peaceful cemetery in {location} with mature trees and quiet walks.",
    "Woodland": "Woodland in {location} with waymarked trails under the canopy.",
}

FACILITIES = {
    "Recreation Ground": ("Playground", "Sports Court", "Football Pitches"),
    "Nature Reserve": ("Walking Trails", "Wildlife Viewing", "Information Boards"),
    "Urban Square": ("Seating", "Events Space"),
    "Historic Square": ("Seating", "Events Space", "Heritage Statue"),
    "Common Land": ("Walking", "Observatory", "Golf Course"),
    "Urban Park": ("Seating", "Playground"),
    "Community Park": ("Playground", "Sports Facilities", "Lake"),
    "Historic Park": ("Walking Trails", "Cafe", "Historic House"),
    "Parks and Gardens": ("Formal Gardens", "Seating", "Toilets"),
    "Amenity Green Space": ("Open Grass", "Seating"),
    "Natural Green Space": ("Walking Trails", "Wildlife Viewing"),
    "Play Space": ("Playground", "Seating"),
    "Allotments": ("Allotment Plots", "Water Points"),
    "Cemetery": ("Seating", "Walking Paths"),
    "Woodland": ("Walking Trails", "Dog Walking"),
}
DEFAULT_FACILITIES = ("Green Space", "Walking Paths")

ACCESSIBILITY = {
    "Recreation Ground": "Level grass with step-free entrances and accessible paths",
    "Nature Reserve": "Some steep and uneven paths; main trail partly accessible",
    "Urban Square": "Fully step-free with paved surfaces",
    "Historic Square": "Fully step-free with paved surfaces",
    "Common Land": "Mostly level grassland; surfaced paths along the main routes",
    "Urban Park": "Step-free access with tarmac paths",
    "Community Park": "Step-free main entrance with accessible paths and toilets",
    "Historic Park": "Surfaced drive to the main house; woodland paths are steep",
    "Parks and Gardens": "Step-free paths throughout the formal gardens",
    "Play Space": "Step-free access with some inclusive play equipment",
    "Woodland": "Unsurfaced paths that can be muddy and uneven",
}
DEFAULT_ACCESSIBILITY = "Accessibility information not available; contact the site for details"

DAWN_TO_DUSK_KEYWORDS = ("nature", "common", "woodland", "natural", "informal")
DAWN_TO_DUSK = "Dawn to dusk"
ALWAYS_OPEN = "24 hours"


def _resolve(table: dict[str, T], key: str, default: T) -> T:
    return table.get(key, default)


def describe(park_type: str, location: str) -> str:
    template = DESCRIPTION_TEMPLATES.get(park_type)
    if template is None:
        return f"A {park_type.lower()} in {location}, offering green space for the local community."
    return template.format(location=location)


def facilities_for(park_type: str) -> tuple[str, ...]:
    return _resolve(FACILITIES, park_type, DEFAULT_FACILITIES)


def rate(major_site: str, area: float, profile: dict | None = None) -> float:
    rating, _explanation = apply_rating_profile(
        profile or DEFAULT_RATING_PROFILE,
        major_site=major_site,
        area=area,
    )
    return rating


def accessibility_for(park_type: str) -> str:
    return _resolve(ACCESSIBILITY, park_type, DEFAULT_ACCESSIBILITY)


def opening_hours_for(park_type: str) -> str:
    lowered = park_type.lower()
    if any(keyword in lowered for keyword in DAWN_TO_DUSK_KEYWORDS):
        return DAWN_TO_DUSK
    return ALWAYS_OPEN


def derive_park(
    park: Park,
    *,
    last_updated: str = DEFAULT_LAST_UPDATED,
    rating_profile: dict | None = None,
) -> Park:
    return replace(
        park,
        description=describe(park.type, park.location),
        facilities=facilities_for(park.type),
        rating=rate(park.major_site, park.area, rating_profile),
        accessibility=accessibility_for(park.type),
        opening_hours=opening_hours_for(park.type),
        last_updated=last_updated,
    )


def derive_parks(
    parks: Iterable[Park],
    *,
    last_updated: str = DEFAULT_LAST_UPDATED,
    rating_profile: dict | None = None,
) -> list[Park]:
    return [derive_park(park, last_updated=last_updated, rating_profile=rating_profile) for park in parks]
