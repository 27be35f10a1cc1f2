"""Configurações de execução do genecross.

Os valores vêm, em ordem crescente de precedência, dos padrões abaixo, de um
arquivo ``.env`` na raiz do projeto, das variáveis ``GENECROSS_*`` e dos
``overrides`` passados explicitamente. Apenas a biblioteca padrão é usada.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping, NamedTuple

__all__ = [
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "load_env_file",
    "reset_settings_cache",
]


ENV_PREFIX = "GENECROSS_"

_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}
_UNSET = {"", "none", "null"}


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _BOOL_TRUE:
        return True
    if lowered in _BOOL_FALSE:
        return False
    raise ValueError(f"Cannot interpret '{value}' as boolean")


def _parse_seed(value: Any) -> int | None:
    if value is None or (isinstance(value, str) and value.strip().lower() in _UNSET):
        return None
    seed = int(value)
    if seed < 0:
        raise ValueError("RANDOM_SEED must be non-negative")
    return seed


def _parse_workers(value: Any) -> int:
    workers = int(value)
    if workers < 0:
        raise ValueError("MAX_WORKERS must be non-negative")
    return workers


class _Field(NamedTuple):
    env_name: str
    default: Any
    parse: Callable[[Any], Any]


def load_env_file(path: Path) -> Mapping[str, str]:
    """Read ``KEY=value`` lines, skipping blanks and ``#`` comments."""

    entries: MutableMapping[str, str] = {}
    if not path.exists():
        return entries
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        entries[key.strip()] = value.strip()
    return entries


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


@dataclass(slots=True, frozen=True)
class Settings:
    """Configurações lidas pelo pacote.

    ``random_seed`` ``None`` faz cada passagem de recombinação sem semente
    explícita usar entropia nova; ``max_workers`` ``0`` deixa o
    ``ThreadPoolExecutor`` escolher o número de *threads*.
    """

    project_root: Path
    logs_dir: Path
    random_seed: int | None
    structured_logging: bool
    max_workers: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "project_root": str(self.project_root),
            "logs_dir": str(self.logs_dir),
            "random_seed": self.random_seed,
            "structured_logging": self.structured_logging,
            "max_workers": self.max_workers,
        }

    @classmethod
    def from_env(
        cls,
        *,
        overrides: Mapping[str, Any] | None = None,
        env_file: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "Settings":
        """Build settings; ``overrides`` use the variable names without prefix."""

        overrides = dict(overrides or {})
        system_environ = dict(os.environ if environ is None else environ)
        file_values = dict(load_env_file(Path(env_file).expanduser())) if env_file else {}

        root_value = overrides.pop("project_root", None)
        if root_value is None:
            root_value = file_values.get(f"{ENV_PREFIX}PROJECT_ROOT")
        if root_value is None:
            root_value = system_environ.get(f"{ENV_PREFIX}PROJECT_ROOT")
        project_root = (
            _project_root() if root_value is None else Path(str(root_value)).expanduser().resolve()
        )
        if env_file is None:
            file_values.update(load_env_file(project_root / ".env"))

        def parse_path(value: Any) -> Path:
            path = Path(str(value)).expanduser()
            return path if path.is_absolute() else project_root / path

        fields = {
            "logs_dir": _Field("LOGS_DIR", "logs", parse_path),
            "random_seed": _Field("RANDOM_SEED", None, _parse_seed),
            "structured_logging": _Field("STRUCTURED_LOGGING", False, _parse_bool),
            "max_workers": _Field("MAX_WORKERS", 0, _parse_workers),
        }

        values: dict[str, Any] = {}
        for attr, field in fields.items():
            key = f"{ENV_PREFIX}{field.env_name}"
            if field.env_name in overrides:
                raw = overrides.pop(field.env_name)
            elif key in system_environ:
                raw = system_environ[key]
            else:
                raw = file_values.get(key, field.default)
            values[attr] = field.parse(raw)

        if overrides:
            unknown = ", ".join(sorted(overrides))
            raise KeyError(f"Unknown override(s): {unknown}")

        return cls(project_root=project_root, **values)


_SETTINGS_CACHE: Settings | None = None


def get_settings(**kwargs: Any) -> Settings:
    """Return the cached settings; keyword arguments bypass the cache."""

    global _SETTINGS_CACHE
    if kwargs:
        return Settings.from_env(**kwargs)
    if _SETTINGS_CACHE is None:
        _SETTINGS_CACHE = Settings.from_env()
    return _SETTINGS_CACHE


def reset_settings_cache() -> None:
    global _SETTINGS_CACHE
    _SETTINGS_CACHE = None
