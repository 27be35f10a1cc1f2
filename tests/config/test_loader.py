"""Tests for configuration loading and validation module."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import BaseModel

from genecross.config.loader import (
    ConfigError,
    _resolve_config_path,
    load_config,
    save_config,
)
from genecross.config.schemas import CrossoverConfig
from genecross.ga.crossover import CrossoverFunction, LengthPolicy, crossover_factory


class SimpleConfig(BaseModel):
    """Simple test configuration."""

    name: str = "default"
    value: int = 10


@pytest.fixture
def crossover_file(tmp_path: Path) -> Path:
    config_file = tmp_path / "crossover.yaml"
    data = {"method": "MultiPoint", "length_policy": "strict", "seed": 5, "max_workers": 2}
    with open(config_file, "w") as f:
        yaml.dump(data, f)
    return config_file


@pytest.fixture
def invalid_yaml_file(tmp_path: Path) -> Path:
    invalid_file = tmp_path / "invalid.yaml"
    invalid_file.write_text("method: uniform\nseed: [unclosed list\n", encoding="utf-8")
    return invalid_file


def test_load_crossover_config(crossover_file: Path) -> None:
    config = load_config(crossover_file, CrossoverConfig)
    assert config.method is CrossoverFunction.MULTI_POINT
    assert config.length_policy is LengthPolicy.STRICT
    assert config.seed == 5
    assert config.max_workers == 2

    operator = crossover_factory(config)
    assert operator.function is CrossoverFunction.MULTI_POINT
    assert operator.length_policy is LengthPolicy.STRICT


def test_resolve_relative_to_project_root(tmp_path: Path, crossover_file: Path) -> None:
    assert _resolve_config_path("crossover.yaml", tmp_path) == crossover_file


def test_resolve_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _resolve_config_path("missing.yaml", tmp_path)


def test_missing_file_strict_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml", SimpleConfig)


def test_missing_file_lenient_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yaml", SimpleConfig, strict=False)
    assert config == SimpleConfig()


def test_invalid_yaml(invalid_yaml_file: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(invalid_yaml_file, CrossoverConfig)
    assert load_config(invalid_yaml_file, CrossoverConfig, strict=False) == CrossoverConfig()


def test_empty_file_raises(tmp_path: Path) -> None:
    empty = tmp_path / "empty.yaml"
    empty.touch()
    with pytest.raises(ConfigError, match="Empty"):
        load_config(empty, CrossoverConfig)


def test_validation_error_is_wrapped(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("method: blend\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="validation failed"):
        load_config(bad, CrossoverConfig)
    assert load_config(bad, CrossoverConfig, strict=False) == CrossoverConfig()


def test_save_and_reload(tmp_path: Path) -> None:
    config = CrossoverConfig(method="single_point", seed=3)
    path = save_config(config, "configs/out.yaml", project_root=tmp_path)
    assert path == tmp_path / "configs" / "out.yaml"
    saved = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert saved == {"method": "single_point", "length_policy": "truncate", "seed": 3}
    assert load_config(path, CrossoverConfig) == config
