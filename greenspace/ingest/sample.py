"""Built-in record set served when the live dataset is unavailable."""

from __future__ import annotations

from greenspace.common.models import RawRow


def _row(
    object_id: int,
    name: str,
    park_type: str,
    location: str,
    hectares: str,
    lat: str,
    lng: str,
    major_site: str,
) -> RawRow:
    area = str(int(round(float(hectares) * 10_000)))
    return {
        "OBJECTID": str(object_id),
        "ASSET_ID": f"PK{object_id:04d}",
        "SITE_CODE": f"BCC{object_id:03d}",
        "FEATURE_GROUP": "Parks and Green Spaces",
        "SITE_NAME": name,
        "LOCATION": location,
        "FEATURE_ID": park_type,
        "PRIM_MEAS": hectares,
        "UNIT": "hectares",
        "CENTROID_Y": lat,
        "CENTROID_X": lng,
        "FEATURE_AREA": area,
        "MAJOR_SITE": major_site,
        "VALIDATED": "Yes",
    }


FALLBACK_ROWS: tuple[RawRow, ...] = (
    _row(1, "Castle Street Park", "Urban Park", "City Centre", "2.3", "51.4545", "-2.5879", "No"),
    _row(2, "Brandon Hill Nature Park", "Nature Reserve", "Clifton", "8.5", "51.452", "-2.605", "Yes"),
    _row(3, "Queen Square", "Historic Square", "City Centre", "1.2", "51.45", "-2.6", "Yes"),
    _row(4, "The Downs", "Common Land", "Clifton", "162", "51.465", "-2.62", "Yes"),
    _row(5, "Victoria Park", "Community Park", "Bedminster", "4.7", "51.448", "-2.618", "No"),
    _row(6, "Eastville Park", "Community Park", "Eastville", "28", "51.478", "-2.553", "Yes"),
    _row(7, "Blaise Castle Estate", "Historic Park", "Henbury", "162", "51.501", "-2.641", "Yes"),
)


def fallback_rows() -> list[RawRow]:
    return [dict(row) for row in FALLBACK_ROWS]
