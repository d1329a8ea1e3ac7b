"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from podcast_catalog.adapters.sources.listen_notes_source import DEFAULT_BASE_URL


@dataclass
class ApiConfig:
    """Remote API settings."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0


@dataclass
class PaginationConfig:
    """Pagination settings."""
    page_size: int = 20
    near_end_threshold: int = 5


@dataclass
class PathsConfig:
    """Path settings."""
    favorites_file: Path = Path("favorites.yaml")


@dataclass
class Settings:
    """Application settings."""
    
    # API key (from environment only)
    api_key: Optional[str] = None
    
    # Config sections
    api: ApiConfig = field(default_factory=ApiConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    
    @property
    def base_url(self) -> str:
        return self.api.base_url
    
    @property
    def timeout(self) -> float:
        return self.api.timeout
    
    @property
    def near_end_threshold(self) -> int:
        return self.pagination.near_end_threshold
    
    @property
    def favorites_file(self) -> Path:
        return self.paths.favorites_file


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    
    settings = Settings(api_key=os.getenv("LISTEN_API_KEY") or None)
    
    if "api" in config:
        for key, value in (config["api"] or {}).items():
            setattr(settings.api, key, value)
    
    if "pagination" in config:
        for key, value in (config["pagination"] or {}).items():
            setattr(settings.pagination, key, value)
    
    if "paths" in config:
        for key, value in (config["paths"] or {}).items():
            setattr(settings.paths, key, Path(value))
    
    # Environment wins over the file
    base_url = os.getenv("PODCAST_CATALOG_BASE_URL")
    if base_url:
        settings.api.base_url = base_url
    
    favorites_file = os.getenv("PODCAST_CATALOG_FAVORITES")
    if favorites_file:
        settings.paths.favorites_file = Path(favorites_file)

    # With 0 the last row never reaches the trigger index
    if settings.pagination.near_end_threshold < 1:
        raise ValueError(
            f"pagination.near_end_threshold must be at least 1, got {settings.pagination.near_end_threshold}"
        )

    return settings
