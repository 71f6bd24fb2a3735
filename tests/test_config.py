"""Tests for settings and the engine factory."""

from unittest.mock import patch

from finance_tracker.config import Settings
from finance_tracker.database import build_connect_args, create_db_engine


class TestSettings:
    """Test environment-driven configuration."""

    def test_database_url_from_parts(self):
        settings = Settings(
            _env_file=None,
            DB_HOST="db.internal",
            DB_PORT=4000,
            DB_USER="finance",
            DB_PASSWORD="p@ss/word",
            DB_NAME="Finance",
        )

        url = settings.database_url

        assert url.drivername == "mysql+pymysql"
        assert url.host == "db.internal"
        assert url.port == 4000
        assert url.username == "finance"
        assert url.password == "p@ss/word"
        assert url.database == "Finance"

    def test_database_url_override(self):
        settings = Settings(_env_file=None, DATABASE_URL="mysql+pymysql://u:p@h/d")

        assert settings.database_url == "mysql+pymysql://u:p@h/d"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DB_HOST", "from-env")
        monkeypatch.setenv("REACT_APP_BASE_URL", "https://app.example.com")
        monkeypatch.setenv("DB_SSL", "true")

        settings = Settings(_env_file=None)

        assert settings.db_host == "from-env"
        assert settings.app_base_url == "https://app.example.com"
        assert settings.db_ssl is True


class TestEngineFactory:
    """Test engine construction."""

    def test_ssl_connect_args(self):
        assert build_connect_args(True) == {"ssl": {"check_hostname": False}}
        assert build_connect_args(False) == {}

    def test_engine_uses_null_pool(self):
        with patch("finance_tracker.database.create_engine") as create_engine:
            create_db_engine("mysql+pymysql://u:p@h/d", use_ssl=True)

        args, kwargs = create_engine.call_args
        assert args == ("mysql+pymysql://u:p@h/d",)
        assert kwargs["poolclass"].__name__ == "NullPool"
        assert kwargs["connect_args"] == {"ssl": {"check_hostname": False}}
