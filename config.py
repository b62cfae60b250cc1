"""
Graph loading configuration.

Settings live in a small YAML file, for example::

    weight_dtype: int32
    encoding: utf-8

Any key left out keeps its default.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Union

from errors import ConfigError
from weights import weight_dtype


@dataclass(frozen=True)
class GraphConfig:
    weight_dtype: str = "float64"
    encoding: str = "utf-8"


def load_config(path: Union[str, Path]) -> GraphConfig:
    import yaml  # type: ignore

    try:
        data = yaml.safe_load(Path(path).read_text())
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return GraphConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(GraphConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown config keys in {path}: {', '.join(map(str, unknown))}")

    cfg = GraphConfig(**{key: str(value) for key, value in data.items()})
    try:
        weight_dtype(cfg.weight_dtype)
    except TypeError as e:
        raise ConfigError(f"unknown weight_dtype {cfg.weight_dtype!r}") from e
    except ValueError as e:
        raise ConfigError(str(e)) from e
    return cfg
