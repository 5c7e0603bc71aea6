"""Config-driven rating utilities."""

from __future__ import annotations

import math

DEFAULT_RATING_PROFILE = {
    "base": 3.5,
    "rules": [
        {"id": "major_site", "when": "major_site", "add": 0.8},
        {"id": "area_over_1ha", "when": "area_gt(10000)", "add": 0.4},
        {"id": "area_over_5ha", "when": "area_gt(50000)", "add": 0.3},
    ],
    "clamp": {"min": 3.5, "max": 5.0},
}


def clamp(value: float, *, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like ``Math.round`` does: halves go up, not to even."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def _evaluate_condition(condition: str, *, major_site: str, area: float) -> bool:
    condition = condition.strip()
    if condition == "major_site":
        return major_site == "Yes"
    if condition.startswith("area_gt(") and condition.endswith(")"):
        threshold = float(condition[len("area_gt(") : -1])
        return area > threshold
    return False


def apply_rating_profile(
    profile: dict,
    *,
    major_site: str,
    area: float,
) -> tuple[float, dict]:
    raw_rating = float(profile.get("base", 0.0))
    applied_rules: list[str] = []

    for rule in profile.get("rules", []):
        condition = rule.get("when", "")
        if _evaluate_condition(condition, major_site=major_site, area=area):
            raw_rating += float(rule.get("add", 0.0))
            applied_rules.append(rule.get("id", "unnamed_rule"))

    clamp_cfg = profile.get("clamp", {"min": 0.0, "max": 5.0})
    rating = clamp(
        round_half_up(raw_rating, 1),
        minimum=float(clamp_cfg["min"]),
        maximum=float(clamp_cfg["max"]),
    )

    explanation = {
        "applied_rules": applied_rules,
        "raw_rating": raw_rating,
        "rating": rating,
    }
    return rating, explanation
