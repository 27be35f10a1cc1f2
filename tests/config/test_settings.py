from __future__ import annotations

from pathlib import Path

import pytest

from genecross.config.settings import (
    ENV_PREFIX,
    Settings,
    get_settings,
    load_env_file,
    reset_settings_cache,
)


def test_defaults_relative_to_project_root(tmp_path: Path) -> None:
    settings = Settings.from_env(overrides={"project_root": tmp_path}, environ={})
    assert settings.logs_dir == tmp_path.resolve() / "logs"
    assert settings.random_seed is None
    assert settings.max_workers == 0
    assert settings.structured_logging is False


def test_environment_variables_are_parsed(tmp_path: Path) -> None:
    environ = {
        f"{ENV_PREFIX}RANDOM_SEED": "7",
        f"{ENV_PREFIX}MAX_WORKERS": "3",
        f"{ENV_PREFIX}STRUCTURED_LOGGING": "yes",
    }
    settings = Settings.from_env(overrides={"project_root": tmp_path}, environ=environ)
    assert settings.random_seed == 7
    assert settings.max_workers == 3
    assert settings.structured_logging is True


@pytest.mark.parametrize("raw", ["", "none", "NULL"])
def test_blank_seed_means_unseeded(tmp_path: Path, raw: str) -> None:
    settings = Settings.from_env(
        overrides={"project_root": tmp_path}, environ={f"{ENV_PREFIX}RANDOM_SEED": raw}
    )
    assert settings.random_seed is None


def test_env_file_is_loaded_and_environ_wins(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        f"# comment\n{ENV_PREFIX}RANDOM_SEED=5\n{ENV_PREFIX}LOGS_DIR=var/log\n",
        encoding="utf-8",
    )
    settings = Settings.from_env(
        overrides={"project_root": tmp_path},
        environ={f"{ENV_PREFIX}RANDOM_SEED": "9"},
    )
    assert settings.random_seed == 9
    assert settings.logs_dir == tmp_path.resolve() / "var" / "log"


def test_explicit_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "run.env"
    env_file.write_text(f"{ENV_PREFIX}MAX_WORKERS=6\n", encoding="utf-8")
    settings = Settings.from_env(
        overrides={"project_root": tmp_path}, env_file=env_file, environ={}
    )
    assert settings.max_workers == 6


def test_unknown_override_raises(tmp_path: Path) -> None:
    with pytest.raises(KeyError):
        Settings.from_env(overrides={"project_root": tmp_path, "SEED": 1}, environ={})


@pytest.mark.parametrize("name", ["MAX_WORKERS", "RANDOM_SEED"])
def test_negative_values_rejected(tmp_path: Path, name: str) -> None:
    with pytest.raises(ValueError):
        Settings.from_env(overrides={"project_root": tmp_path, name: "-1"}, environ={})


def test_load_env_file_missing(tmp_path: Path) -> None:
    assert dict(load_env_file(tmp_path / "absent.env")) == {}


def test_get_settings_is_cached() -> None:
    first = get_settings()
    assert get_settings() is first
    reset_settings_cache()
    assert get_settings() is not first
    assert first.to_dict()["random_seed"] is None
