from greenspace.common.models import Coordinates, Park
from greenspace.pipeline.derive import derive_park
from greenspace.pipeline.stats import compute_stats


def _park(name: str, major_site: str, area: float) -> Park:
    return derive_park(
        Park(
            object_id=0,
            asset_id="Unknown",
            site_code="Unknown",
            feature_group="Green Space",
            site_name=name,
            location="Bristol",
            type="Recreation Ground",
            primary_measure=0.0,
            unit="hectares",
            coordinates=Coordinates(lat=51.4545, lng=-2.5879),
            area=area,
            major_site=major_site,
            validated="Yes",
        )
    )


def test_stats_for_major_and_minor_site():
    parks = [_park("Big", "Yes", 60_000), _park("Small", "No", 0)]

    assert [p.rating for p in parks] == [5.0, 3.5]
    stats = compute_stats(parks)

    assert stats.total_parks == 2
    assert stats.total_area_hectares == 6
    assert stats.average_rating == 4.3
    assert stats.has_data


def test_total_area_sums_before_converting():
    parks = [_park(str(idx), "No", 4_000) for idx in range(3)]
    # 0.4 ha each truncates to 0 per record, but 1.2 ha in total.
    assert compute_stats(parks).total_area_hectares == 1


def test_stats_on_empty_collection_return_no_data():
    stats = compute_stats([])
    assert stats.total_parks == 0
    assert stats.total_area_hectares == 0
    assert stats.average_rating == 0.0
    assert stats.has_data is False
