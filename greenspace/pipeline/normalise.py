"""Map raw rows onto canonical Park records with per-field fallbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from greenspace.common.constants import (
    DEFAULT_ASSET_ID,
    DEFAULT_FEATURE_GROUP,
    DEFAULT_LOCATION,
    DEFAULT_MAJOR_SITE,
    DEFAULT_SITE_CODE,
    DEFAULT_TYPE,
    DEFAULT_UNIT,
    DEFAULT_VALIDATED,
    MAX_RECORDS,
)
from greenspace.common.models import Park, RawRow
from greenspace.pipeline.coordinates import resolve_coordinates
from greenspace.pipeline.numbers import safe_int, safe_non_negative

DEFAULT_FIELDS: dict[str, list[str]] = {
    "object_id": ["OBJECTID"],
    "asset_id": ["ASSET_ID"],
    "site_code": ["SITE_CODE"],
    "feature_group": ["FEATURE_GROUP"],
    "site_name": ["SITE_NAME"],
    "location": ["LOCATION"],
    "type": ["FEATURE_ID"],
    "primary_measure": ["PRIM_MEAS"],
    "unit": ["UNIT"],
    "lat": ["CENTROID_Y"],
    "lng": ["CENTROID_X"],
    "area": ["FEATURE_AREA", "Shape__Area"],
    "major_site": ["MAJOR_SITE"],
    "validated": ["VALIDATED"],
}

_YES = {"yes", "y", "true", "1"}
_NO = {"no", "n", "false", "0"}


@dataclass(frozen=True)
class NormaliseResult:
    parks: list[Park]
    rows_in: int
    dropped_unnamed: int
    truncated: int


def _lookup_first(row: RawRow, candidates: list[str], coerce: Callable[[str], object | None] | None = None):
    for key in candidates:
        value = row.get(key)
        if value in (None, ""):
            continue
        if coerce is None:
            text = str(value).strip()
            if text:
                return text
            continue
        coerced = coerce(value)
        if coerced is not None:
            return coerced
    return None


def _yes_no(value: str) -> str | None:
    text = str(value).strip().lower()
    if text in _YES:
        return "Yes"
    if text in _NO:
        return "No"
    return None


def _raw_first(row: RawRow, candidates: list[str]) -> str | None:
    for key in candidates:
        value = row.get(key)
        if value not in (None, ""):
            return value
    return None


def normalise_row(
    row: RawRow,
    ordinal: int,
    *,
    fields: dict[str, list[str]] | None = None,
    crs_config: dict | None = None,
) -> Park | None:
    """Build one pre-derivation Park, or ``None`` when the row has no site name."""
    fields = fields or DEFAULT_FIELDS

    site_name = _lookup_first(row, fields["site_name"])
    if not site_name:
        return None

    object_id = _lookup_first(row, fields["object_id"], safe_int)
    primary_measure = _lookup_first(row, fields["primary_measure"], safe_non_negative)
    area = _lookup_first(row, fields["area"], safe_non_negative)

    return Park(
        object_id=object_id if object_id is not None else ordinal,
        asset_id=_lookup_first(row, fields["asset_id"]) or DEFAULT_ASSET_ID,
        site_code=_lookup_first(row, fields["site_code"]) or DEFAULT_SITE_CODE,
        feature_group=_lookup_first(row, fields["feature_group"]) or DEFAULT_FEATURE_GROUP,
        site_name=site_name,
        location=_lookup_first(row, fields["location"]) or DEFAULT_LOCATION,
        type=_lookup_first(row, fields["type"]) or DEFAULT_TYPE,
        primary_measure=primary_measure if primary_measure is not None else 0.0,
        unit=_lookup_first(row, fields["unit"]) or DEFAULT_UNIT,
        coordinates=resolve_coordinates(
            _raw_first(row, fields["lat"]),
            _raw_first(row, fields["lng"]),
            crs_config,
        ),
        area=area if area is not None else 0.0,
        major_site=_lookup_first(row, fields["major_site"], _yes_no) or DEFAULT_MAJOR_SITE,
        validated=_lookup_first(row, fields["validated"], _yes_no) or DEFAULT_VALIDATED,
    )


def run_normalise(
    rows: Iterable[RawRow],
    *,
    fields: dict[str, list[str]] | None = None,
    max_records: int = MAX_RECORDS,
    crs_config: dict | None = None,
) -> NormaliseResult:
    merged_fields = {**DEFAULT_FIELDS, **(fields or {})}
    parks: list[Park] = []
    rows_in = 0
    dropped = 0
    truncated = 0

    for ordinal, row in enumerate(rows):
        rows_in += 1
        park = normalise_row(row, ordinal, fields=merged_fields, crs_config=crs_config)
        if park is None:
            dropped += 1
            continue
        if len(parks) >= max_records:
            truncated += 1
            continue
        parks.append(park)

    return NormaliseResult(parks=parks, rows_in=rows_in, dropped_unnamed=dropped, truncated=truncated)


def normalise_rows(
    rows: Iterable[RawRow],
    *,
    fields: dict[str, list[str]] | None = None,
    max_records: int = MAX_RECORDS,
    crs_config: dict | None = None,
) -> list[Park]:
    return run_normalise(rows, fields=fields, max_records=max_records, crs_config=crs_config).parks
