from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .formulas import WORDS_PER_MINUTE, WORDS_PER_PAGE

# Keys used as divisors by the page count and reading time formulas.
POSITIVE_INT_KEYS = ("words_per_page", "words_per_minute")


@dataclass(slots=True)
class StatisticsConfig:
    """Configuration options for document statistics."""

    segmenter: str = "unicode"
    incremental: bool = True
    words_per_page: int = WORDS_PER_PAGE
    words_per_minute: int = WORDS_PER_MINUTE

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _statistics_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    """Keep the known keys of data and reject divisors that are not positive ints."""
    known = {field.name for field in fields(StatisticsConfig)}
    kwargs = {key: value for key, value in data.items() if key in known}
    for key in POSITIVE_INT_KEYS:
        if key not in kwargs:
            continue
        value = kwargs[key]
        # bool is an int subclass; "true" in YAML is not a page size.
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"{key} must be a positive integer, got {value!r}.")
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> StatisticsConfig:
    """Build a StatisticsConfig from a dictionary-like input."""
    return StatisticsConfig(**_statistics_kwargs(data or {}))


def config_from_yaml(path: str | Path) -> StatisticsConfig:
    """Load configuration from a YAML file; an empty file yields the defaults."""
    with Path(path).open(encoding="utf-8") as handle:
        parsed = yaml.safe_load(handle)
    if parsed is not None and not isinstance(parsed, Mapping):
        raise ValueError(f"{path}: expected a mapping of statistics options.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> StatisticsConfig:
    return config_from_yaml(path) if path is not None else StatisticsConfig()
