from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_API_URL, AppSettings, get_user_env_file, write_user_env_vars


def test_defaults():
    settings = AppSettings()
    assert settings.api_url == DEFAULT_API_URL
    assert settings.top_n == 10
    assert settings.search_debounce_ms == 50


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WORLD_COUNTRIES_TOP_N", "5")
    monkeypatch.setenv("WORLD_COUNTRIES_API_URL", "https://mirror.test/all")

    settings = AppSettings()
    assert settings.top_n == 5
    assert settings.api_url == "https://mirror.test/all"


def test_dotenv_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("WORLD_COUNTRIES_SEARCH_DEBOUNCE_MS=120\n", encoding="utf-8")
    assert AppSettings().search_debounce_ms == 120


def test_invalid_top_n_rejected():
    with pytest.raises(ValidationError):
        AppSettings(top_n=0)


def test_write_user_env_vars_merges_existing():
    write_user_env_vars({"WORLD_COUNTRIES_TOP_N": "7"})
    path = write_user_env_vars({"WORLD_COUNTRIES_API_URL": "https://a.test/all", "IGNORED": None})

    assert path == get_user_env_file()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "WORLD_COUNTRIES_TOP_N=7" in lines
    assert "WORLD_COUNTRIES_API_URL=https://a.test/all" in lines
    assert not any(line.startswith("IGNORED") for line in lines)
