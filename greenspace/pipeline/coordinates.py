"""Centroid coercion and transformation to WGS84."""

from __future__ import annotations

from functools import lru_cache

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from greenspace.common.constants import FALLBACK_LAT, FALLBACK_LNG
from greenspace.common.models import Coordinates
from greenspace.pipeline.numbers import safe_float

WGS84_EPSG = 4326
FALLBACK_POINT = Coordinates(lat=FALLBACK_LAT, lng=FALLBACK_LNG)


@lru_cache(maxsize=8)
def _transformer(source_epsg: int) -> Transformer:
    return Transformer.from_crs(CRS.from_epsg(source_epsg), CRS.from_epsg(WGS84_EPSG), always_xy=True)


def _valid_lat_lng(lat: float, lng: float) -> bool:
    return -90 <= lat <= 90 and -180 <= lng <= 180


def _within_bbox(lat: float, lng: float, bbox: dict) -> bool:
    return (
        bbox["min_lat"] <= lat <= bbox["max_lat"]
        and bbox["min_lng"] <= lng <= bbox["max_lng"]
    )


def _transform_to_wgs84(y: float, x: float, source_epsg: int) -> tuple[float, float] | None:
    try:
        lng, lat = _transformer(source_epsg).transform(x, y)
    except (CRSError, ProjError):
        return None
    lat_f = safe_float(lat)
    lng_f = safe_float(lng)
    if lat_f is None or lng_f is None:
        return None
    return lat_f, lng_f


def resolve_coordinates(raw_y: object, raw_x: object, crs_config: dict | None = None) -> Coordinates:
    """Coerce a raw centroid pair, falling back to the city-centre point.

    ``raw_y``/``raw_x`` are in ``crs_config["source_epsg"]`` (WGS84 when unset).
    Projected pairs are transformed and must land inside ``bbox_wgs84``.
    """
    y = safe_float(raw_y)
    x = safe_float(raw_x)
    if y is None or x is None:
        return FALLBACK_POINT

    crs_config = crs_config or {}
    source_epsg = int(crs_config.get("source_epsg") or WGS84_EPSG)

    if source_epsg == WGS84_EPSG:
        if not _valid_lat_lng(y, x):
            return FALLBACK_POINT
        return Coordinates(lat=y, lng=x)

    transformed = _transform_to_wgs84(y, x, source_epsg)
    if transformed is None:
        return FALLBACK_POINT
    lat, lng = transformed

    bbox = crs_config.get("bbox_wgs84")
    if not _valid_lat_lng(lat, lng) or (bbox and not _within_bbox(lat, lng, bbox)):
        return FALLBACK_POINT
    return Coordinates(lat=lat, lng=lng)
