"""Tests for configuration loading."""

from pathlib import Path

import pytest

from ratings_hub.config import Settings, get_settings, load_config
from ratings_hub.core import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real environment variables out of the tests."""
    for name in ("RATINGS_HUB_OWNER", "RATINGS_HUB_REPO", "RATINGS_HUB_LABEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_file(tmp_path: Path) -> None:
    """Test defaults when config.yaml is missing."""
    settings = get_settings(tmp_path / "missing.yaml")
    
    assert load_config(tmp_path / "missing.yaml") == {}
    assert settings.label == "type:item"
    assert settings.per_page == 100
    assert settings.catalog.latest_limit == 5
    assert settings.catalog.title_prefix == "[Item]"


def test_yaml_values(tmp_path: Path) -> None:
    """Test values from the YAML file are applied."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "tracker:\n  owner: octo\n  repo: hub\n  per_page: 30\n"
        "catalog:\n  top_limit: 10\n  concurrent_comments: false\n",
        encoding="utf-8",
    )
    
    settings = get_settings(config_path)
    
    assert settings.tracker.repo_path == "octo/hub"
    assert settings.per_page == 30
    assert settings.catalog.top_limit == 10
    assert settings.catalog.concurrent_comments is False


def test_environment_overrides_file(tmp_path: Path, monkeypatch) -> None:
    """Test environment variables win over the file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("tracker:\n  owner: octo\n  repo: hub\n", encoding="utf-8")
    monkeypatch.setenv("RATINGS_HUB_REPO", "other")
    monkeypatch.setenv("RATINGS_HUB_LABEL", "approved")
    
    settings = get_settings(config_path)
    
    assert settings.tracker.repo_path == "octo/other"
    assert settings.label == "approved"


def test_empty_yaml_file(tmp_path: Path) -> None:
    """Test an empty file behaves like a missing one."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")
    
    assert load_config(config_path) == {}


def test_repo_path_requires_owner_and_repo() -> None:
    """Test missing identifiers raise a configuration error."""
    with pytest.raises(ConfigurationError):
        Settings().tracker.repo_path


def test_empty_sections(tmp_path: Path) -> None:
    """Test sections without keys keep the defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("tracker:\ncatalog:\n", encoding="utf-8")
    
    settings = get_settings(config_path)
    
    assert settings.label == "type:item"
    assert settings.catalog.top_limit == 5
