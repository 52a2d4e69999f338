from __future__ import annotations

from pathlib import Path

import pytest

from tmdb_data_provider import config as mod
from tmdb_data_provider.utils import env as env_mod


def test_resolve_config_prefers_flag_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "env-key")
    config = mod.resolve_config("flag-key", load_dotenv_file=False)
    assert config.api_key == "flag-key"
    assert config.image_workers == 1
    assert config.image_timeout_seconds is None


def test_resolve_config_falls_back_to_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "env-key")
    assert mod.resolve_config("", load_dotenv_file=False).api_key == "env-key"


def test_resolve_config_missing_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TMDB_API_KEY", raising=False)
    with pytest.raises(mod.MissingApiKeyError) as excinfo:
        mod.resolve_config(None, load_dotenv_file=False)
    assert "TMDB_API_KEY" in str(excinfo.value)


def test_resolve_config_validates_worker_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "env-key")
    with pytest.raises(ValueError):
        mod.resolve_config(image_workers=0, load_dotenv_file=False)
    with pytest.raises(ValueError):
        mod.resolve_config(image_timeout_seconds=0, load_dotenv_file=False)


def test_resolve_config_reads_dotenv_without_overriding(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("TMDB_API_KEY=dotenv-key\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    # Record the original value first so the key loaded from .env is undone on teardown.
    monkeypatch.setenv("TMDB_API_KEY", "placeholder")
    monkeypatch.delenv("TMDB_API_KEY")

    assert env_mod.find_env_file() == tmp_path / ".env"
    assert mod.resolve_config().api_key == "dotenv-key"

    monkeypatch.setenv("TMDB_API_KEY", "real-env-key")
    assert mod.resolve_config().api_key == "real-env-key"
