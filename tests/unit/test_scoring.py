from greenspace.common.scoring import (
    DEFAULT_RATING_PROFILE,
    apply_rating_profile,
    clamp,
    round_half_up,
)


def test_apply_rating_profile_applies_expected_rules():
    rating, explanation = apply_rating_profile(DEFAULT_RATING_PROFILE, major_site="Yes", area=20_000)

    assert rating == 4.7
    assert explanation["applied_rules"] == ["major_site", "area_over_1ha"]


def test_apply_rating_profile_caps_at_maximum():
    rating, explanation = apply_rating_profile(DEFAULT_RATING_PROFILE, major_site="Yes", area=60_000)

    assert rating == 5.0
    assert explanation["raw_rating"] > 5.0


def test_apply_rating_profile_ignores_unknown_conditions():
    profile = {
        "base": 3.5,
        "rules": [{"id": "mystery", "when": "has_lake", "add": 1.0}],
        "clamp": {"min": 3.5, "max": 5.0},
    }
    rating, explanation = apply_rating_profile(profile, major_site="Yes", area=0)
    assert rating == 3.5
    assert explanation["applied_rules"] == []


def test_round_half_up_rounds_halves_away_from_even():
    assert round_half_up(4.25) == 4.3
    assert round_half_up(4.24) == 4.2


def test_clamp_within_bounds():
    assert clamp(3.0, minimum=3.5, maximum=5.0) == 3.5
    assert clamp(4.0, minimum=3.5, maximum=5.0) == 4.0
    assert clamp(6.0, minimum=3.5, maximum=5.0) == 5.0
