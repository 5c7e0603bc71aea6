"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from greenspace.common.errors import ConfigError
from greenspace.common.fs import read_yaml
from greenspace.common.schema import validate_dataset_config, validate_rating_config


@dataclass(frozen=True)
class ConfigBundle:
    dataset: dict
    rating_rules: dict

    @property
    def source(self) -> str:
        return str(self.dataset["dataset"]["source"])

    @property
    def delimiter(self) -> str:
        return str(self.dataset["dataset"]["delimiter"])

    @property
    def last_updated(self) -> str:
        return str(self.dataset["dataset"]["last_updated"])

    @property
    def fields(self) -> dict[str, list[str]]:
        return self.dataset["fields"]

    @property
    def max_records(self) -> int:
        return int(self.dataset["limits"]["max_records"])

    @property
    def page_size(self) -> int:
        return int(self.dataset["limits"]["page_size"])

    @property
    def crs(self) -> dict:
        return self.dataset["crs"]

    def rating_profile(self, name: str = "default") -> dict:
        try:
            return self.rating_rules["profiles"][name]
        except KeyError as exc:
            raise ConfigError(f"Unknown rating profile: {name}") from exc


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Missing config file: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    return _deep_merge(base, overlay)


def load_all_configs(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> ConfigBundle:
    def _overlay(name: str) -> Path | None:
        if overlay_config_dir is None:
            return None
        return overlay_config_dir / name

    dataset = validate_dataset_config(
        _load_yaml_with_overlay(config_dir / "dataset.yml", _overlay("dataset.yml")),
        allow_unknown=allow_unknown,
    )
    rating = validate_rating_config(
        _load_yaml_with_overlay(config_dir / "rating_rules.yml", _overlay("rating_rules.yml"))
    )
    return ConfigBundle(dataset=dataset, rating_rules=rating)
