"""Data models shared across the catalogue."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

RawRow = dict[str, str]


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class Park:
    object_id: int
    asset_id: str
    site_code: str
    feature_group: str
    site_name: str
    location: str
    type: str
    primary_measure: float
    unit: str
    coordinates: Coordinates
    area: float
    major_site: str
    validated: str
    # Derived fields, attached by the derivation stage.
    description: str = ""
    facilities: tuple[str, ...] = field(default_factory=tuple)
    rating: float = 0.0
    accessibility: str = ""
    opening_hours: str = ""
    last_updated: str = ""

    @property
    def is_major_site(self) -> bool:
        return self.major_site == "Yes"

    @property
    def is_derived(self) -> bool:
        return bool(self.description and self.facilities and self.rating and self.accessibility and self.opening_hours)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["facilities"] = list(self.facilities)
        return payload


@dataclass(frozen=True)
class FilterOption:
    value: str
    label: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ParkStats:
    total_parks: int
    total_area_hectares: int
    average_rating: float
    has_data: bool = True

    @classmethod
    def empty(cls) -> "ParkStats":
        return cls(total_parks=0, total_area_hectares=0, average_rating=0.0, has_data=False)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
