"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from matchlog.config import Settings, load_settings, normalize_database_url

ENV_VARS = ("PORT", "HOST", "DATA_DIR", "DATABASE_URL", "PUBLIC_DIR", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable Settings reads."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadSettings:
    """Test load_settings()."""

    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.data_file == Path("data") / "matches.json"
        assert settings.public_dir == Path("public")
        assert settings.log_level == "INFO"
        assert not settings.uses_database

    def test_reads_environment(self, clean_env):
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("DATA_DIR", "/var/lib/matchlog")
        clean_env.setenv("DATABASE_URL", "sqlite:///m.db")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = load_settings()
        assert settings.port == 8080
        assert settings.data_dir == Path("/var/lib/matchlog")
        assert settings.database_url == "sqlite:///m.db"
        assert settings.uses_database
        assert settings.log_level == "DEBUG"

    def test_empty_database_url_means_file_backend(self, clean_env):
        clean_env.setenv("DATABASE_URL", "")
        assert load_settings().database_url is None

    def test_empty_data_dir_uses_default(self, clean_env):
        clean_env.setenv("DATA_DIR", "")
        assert load_settings().data_dir == Path("data")

    def test_postgres_url_normalized(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgres://u:p@h/db")
        assert load_settings().database_url == "postgresql+psycopg://u:p@h/db"

    def test_invalid_port(self, clean_env):
        clean_env.setenv("PORT", "eighty")
        with pytest.raises(ValidationError):
            load_settings()

    def test_settings_are_frozen(self, clean_env):
        settings = load_settings()
        with pytest.raises(ValidationError):
            settings.port = 1


class TestSettingsConstructor:
    """Explicit arguments win over the environment."""

    def test_explicit_arguments(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite:///m.db")
        settings = Settings(database_url=None, data_dir=Path("/tmp/x"))
        assert not settings.uses_database
        assert settings.data_file == Path("/tmp/x/matches.json")


class TestNormalizeDatabaseUrl:
    """Postgres URLs get the psycopg driver."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("postgres://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
            ("postgresql://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
            ("postgresql+psycopg://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
            ("sqlite:///m.db", "sqlite:///m.db"),
        ],
    )
    def test_normalize(self, url, expected):
        assert normalize_database_url(url) == expected
