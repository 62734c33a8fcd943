"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from recipe_catalog.core.config import Settings, get_settings
from recipe_catalog.core.config.yaml_source import CONFIG_DIR_ENV_VAR, deep_merge


pytestmark = pytest.mark.unit


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated config directory with base files and a test override."""
    base = tmp_path / "base"
    base.mkdir()
    (base / "logging.yaml").write_text(
        yaml.safe_dump({"logging": {"level": "info", "format": "json"}})
    )
    (base / "catalog.yaml").write_text(
        yaml.safe_dump({"catalog": {"snapshot_path": "data/catalog.json"}})
    )

    env_dir = tmp_path / "environments" / "test"
    env_dir.mkdir(parents=True)
    (env_dir / "logging.yaml").write_text(
        yaml.safe_dump({"logging": {"format": "text"}})
    )

    monkeypatch.setenv(CONFIG_DIR_ENV_VAR, str(tmp_path))
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.delenv("LOGGING__LEVEL", raising=False)
    return tmp_path


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_merges_nested_dicts(self) -> None:
        """Should merge nested keys and let the override win."""
        base = {
            "logging": {"level": "INFO", "format": "json"},
            "catalog": {"default_group_id": None},
        }
        override = {"logging": {"level": "DEBUG"}}

        result = deep_merge(base, override)

        assert result == {
            "logging": {"level": "DEBUG", "format": "json"},
            "catalog": {"default_group_id": None},
        }
        assert base["logging"]["level"] == "INFO"

    def test_replaces_non_dict_values(self) -> None:
        """Should replace lists and scalars wholesale."""
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


class TestSettings:
    """Tests for Settings."""

    @pytest.mark.usefixtures("config_dir")
    def test_environment_overrides_base(self) -> None:
        """Should merge environment YAML over base YAML."""
        settings = Settings()

        assert settings.APP_ENV == "test"
        assert not settings.is_development
        assert settings.logging.level == "INFO"
        assert settings.logging.format == "text"
        assert settings.catalog.snapshot_path == "data/catalog.json"
        assert settings.catalog.default_group_id is None

    @pytest.mark.usefixtures("config_dir")
    def test_env_var_overrides_yaml(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should let nested environment variables win over YAML."""
        monkeypatch.setenv("LOGGING__LEVEL", "debug")
        monkeypatch.setenv("CATALOG__DEFAULT_GROUP_ID", "group-a")

        settings = Settings()

        assert settings.logging.level == "DEBUG"
        assert settings.catalog.default_group_id == "group-a"

    @pytest.mark.usefixtures("config_dir")
    def test_missing_environment_directory(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should fall back to base files for unknown environments."""
        monkeypatch.setenv("APP_ENV", "staging")

        settings = Settings()

        assert settings.logging.format == "json"
        assert settings.APP_ENV == "staging"
        assert not settings.is_development

    @pytest.mark.usefixtures("config_dir")
    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should reject unknown log levels."""
        monkeypatch.setenv("LOGGING__LEVEL", "VERBOSE")

        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings()

    @pytest.mark.usefixtures("config_dir")
    def test_invalid_log_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should reject unknown log formats."""
        monkeypatch.setenv("LOGGING__FORMAT", "xml")

        with pytest.raises(ValidationError, match="Invalid log format"):
            Settings()

    @pytest.mark.usefixtures("config_dir")
    def test_get_settings_is_cached(self) -> None:
        """Should return the same instance until the cache is cleared."""
        first = get_settings()

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first
