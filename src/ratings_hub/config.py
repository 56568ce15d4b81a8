"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ratings_hub.core.exceptions import ConfigurationError


@dataclass
class TrackerConfig:
    """Issue tracker settings."""
    owner: str = ""
    repo: str = ""
    label: str = "type:item"
    per_page: int = 100
    api_base: str = "https://api.github.com"
    web_base: str = "https://github.com"
    timeout: float = 30.0
    
    @property
    def repo_path(self) -> str:
        """``owner/repo``; raises when either part is missing."""
        if not self.owner or not self.repo:
            raise ConfigurationError(
                "Tracker owner and repo must be defined "
                "(config.yaml 'tracker' section or RATINGS_HUB_OWNER/RATINGS_HUB_REPO)"
            )
        return f"{self.owner}/{self.repo}"


@dataclass
class CatalogConfig:
    """Catalog presentation settings."""
    latest_limit: int = 5
    top_limit: int = 5
    title_prefix: str = "[Item]"
    concurrent_comments: bool = True


@dataclass
class Settings:
    """Application settings."""
    
    tracker: TrackerConfig = field(default_factory=TrackerConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    
    @property
    def label(self) -> str:
        return self.tracker.label
    
    @property
    def per_page(self) -> int:
        return self.tracker.per_page


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    
    settings = Settings()
    
    for key, value in (config.get("tracker") or {}).items():
        setattr(settings.tracker, key, value)
    
    for key, value in (config.get("catalog") or {}).items():
        setattr(settings.catalog, key, value)
    
    # Environment wins over the file
    settings.tracker.owner = os.getenv("RATINGS_HUB_OWNER", settings.tracker.owner)
    settings.tracker.repo = os.getenv("RATINGS_HUB_REPO", settings.tracker.repo)
    settings.tracker.label = os.getenv("RATINGS_HUB_LABEL", settings.tracker.label)
    
    return settings
