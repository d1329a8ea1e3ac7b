"""Tests for configuration loading."""

from pathlib import Path

import pytest

from podcast_catalog.adapters.sources.listen_notes_source import DEFAULT_BASE_URL
from podcast_catalog.config import Settings, get_settings, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LISTEN_API_KEY", "PODCAST_CATALOG_BASE_URL", "PODCAST_CATALOG_FAVORITES"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    """Test settings defaults."""
    settings = Settings()
    
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 10.0
    assert settings.pagination.page_size == 20
    assert settings.near_end_threshold == 5
    assert settings.favorites_file == Path("favorites.yaml")
    assert settings.api_key is None


def test_missing_config_file(tmp_path: Path) -> None:
    """Test a missing file yields defaults."""
    assert load_config(tmp_path / "missing.yaml") == {}
    
    settings = get_settings(tmp_path / "missing.yaml")
    assert settings.base_url == DEFAULT_BASE_URL


def test_yaml_sections(tmp_path: Path) -> None:
    """Test YAML sections override defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "api:\n"
        "  base_url: https://api.example.com/v2\n"
        "  timeout: 3\n"
        "pagination:\n"
        "  near_end_threshold: 8\n"
        "paths:\n"
        "  favorites_file: data/favs.yaml\n",
        encoding="utf-8",
    )
    
    settings = get_settings(config_path)
    
    assert settings.base_url == "https://api.example.com/v2"
    assert settings.timeout == 3
    assert settings.near_end_threshold == 8
    assert settings.pagination.page_size == 20
    assert settings.favorites_file == Path("data/favs.yaml")


def test_empty_config_file(tmp_path: Path) -> None:
    """Test an empty file is the same as no file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")
    
    assert load_config(config_path) == {}


def test_environment_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test environment variables win over the file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("api:\n  base_url: https://file.example.com\n", encoding="utf-8")
    monkeypatch.setenv("LISTEN_API_KEY", "secret")
    monkeypatch.setenv("PODCAST_CATALOG_BASE_URL", "https://env.example.com")
    monkeypatch.setenv("PODCAST_CATALOG_FAVORITES", str(tmp_path / "favs.yaml"))
    
    settings = get_settings(config_path)
    
    assert settings.api_key == "secret"
    assert settings.base_url == "https://env.example.com"
    assert settings.favorites_file == tmp_path / "favs.yaml"


@pytest.mark.parametrize("threshold", [0, -2])
def test_rejects_threshold_below_one(tmp_path: Path, threshold: int) -> None:
    """Test a threshold that could never trigger a page load is refused."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"pagination:\n  near_end_threshold: {threshold}\n", encoding="utf-8")
    
    with pytest.raises(ValueError, match="near_end_threshold"):
        get_settings(config_path)


def test_empty_sections(tmp_path: Path) -> None:
    """Test sections without keys keep their defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("api:\npagination:\npaths:\n", encoding="utf-8")
    
    settings = get_settings(config_path)
    
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.near_end_threshold == 5
    assert settings.favorites_file == Path("favorites.yaml")
