from __future__ import annotations

from pathlib import Path

import pytest

from genecross.config.settings import ENV_PREFIX, reset_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the cached settings at a scratch project root for every test."""

    monkeypatch.setenv(f"{ENV_PREFIX}PROJECT_ROOT", str(tmp_path))
    for name in ("RANDOM_SEED", "MAX_WORKERS", "LOGS_DIR", "STRUCTURED_LOGGING"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
