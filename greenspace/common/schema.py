"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from greenspace.common.errors import ConfigError

FIELD_KEYS = {
    "object_id",
    "asset_id",
    "site_code",
    "feature_group",
    "site_name",
    "location",
    "type",
    "primary_measure",
    "unit",
    "lat",
    "lng",
    "area",
    "major_site",
    "validated",
}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_positive_int(value, ctx: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{ctx} must be a positive integer")


def validate_dataset_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    top_required = {"dataset", "fields", "limits", "crs"}
    _assert_required_keys(cfg, top_required, "dataset config")
    _assert_no_unknown_keys(cfg, top_required, "dataset config", allow_unknown)

    _assert_required_keys(cfg["dataset"], {"name", "source", "delimiter", "last_updated"}, "dataset")
    if len(str(cfg["dataset"]["delimiter"])) != 1:
        raise ConfigError("dataset.delimiter must be a single character")

    _assert_required_keys(cfg["fields"], FIELD_KEYS, "fields")
    _assert_no_unknown_keys(cfg["fields"], FIELD_KEYS, "fields", allow_unknown)
    for name, candidates in cfg["fields"].items():
        if not isinstance(candidates, list) or not candidates:
            raise ConfigError(f"fields.{name} must be a non-empty list of column names")

    _assert_required_keys(cfg["limits"], {"max_records", "page_size"}, "limits")
    _assert_positive_int(cfg["limits"]["max_records"], "limits.max_records")
    _assert_positive_int(cfg["limits"]["page_size"], "limits.page_size")

    _assert_required_keys(cfg["crs"], {"source_epsg", "bbox_wgs84"}, "crs")
    _assert_required_keys(
        cfg["crs"]["bbox_wgs84"],
        {"min_lat", "max_lat", "min_lng", "max_lng"},
        "crs.bbox_wgs84",
    )

    return cfg


def validate_rating_config(cfg: dict) -> dict:
    _assert_required_keys(cfg, {"profiles"}, "rating_rules")
    if not isinstance(cfg["profiles"], dict) or not cfg["profiles"]:
        raise ConfigError("rating_rules.profiles must be a non-empty mapping")
    for name, profile in cfg["profiles"].items():
        _assert_required_keys(profile, {"base", "rules", "clamp"}, f"profiles.{name}")
        _assert_required_keys(profile["clamp"], {"min", "max"}, f"profiles.{name}.clamp")
        for idx, rule in enumerate(profile["rules"]):
            _assert_required_keys(rule, {"id", "when", "add"}, f"profiles.{name}.rules[{idx}]")
    return cfg
