from __future__ import annotations

from pathlib import Path

import pytest

from greenspace.catalogue import ParkCatalogue
from greenspace.common.config_loader import load_all_configs

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "parks_sample.csv"


def _catalogue() -> ParkCatalogue:
    catalogue = ParkCatalogue(bundle=load_all_configs(Path("config")))
    catalogue.reload(FIXTURE)
    return catalogue


@pytest.mark.regression
def test_fixture_snapshot_records_are_stable():
    catalogue = _catalogue()

    assert [(p.object_id, p.site_name, p.type, p.rating) for p in catalogue.parks] == [
        (101, "Castle Street Park", "Recreation Ground", 3.9),
        (102, "Brandon Hill Nature Park", "Nature Reserve", 5.0),
        (103, "Queen Square", "Urban Square", 4.7),
        (105, "Eastville Park", "Recreation Ground", 5.0),
        (106, "The Downs", "Common Land", 5.0),
        (107, "St Andrews Park", "General Green Space", 3.5),
    ]

    st_andrews = catalogue.parks[-1]
    assert st_andrews.area == 5000.0
    assert st_andrews.primary_measure == 0
    assert st_andrews.location == "Montpelier"
    assert st_andrews.facilities == ("Green Space", "Walking Paths")
    assert (st_andrews.coordinates.lat, st_andrews.coordinates.lng) == (51.4545, -2.5879)


@pytest.mark.regression
def test_fixture_snapshot_facets_are_stable():
    facets = [(f.value, f.count) for f in _catalogue().facets]
    assert facets == [
        ("all", 6),
        ("major", 4),
        ("type:Recreation Ground", 2),
        ("type:Nature Reserve", 1),
        ("type:Urban Square", 1),
        ("type:Common Land", 1),
        ("type:General Green Space", 1),
    ]


@pytest.mark.regression
def test_export_is_byte_stable_for_same_inputs():
    assert _catalogue().export_csv() == _catalogue().export_csv()
