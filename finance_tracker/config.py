"""Application configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field(default="Personal Finance Toolkit", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")  # "console" or "json"
    environment: str = Field(default="development", alias="ENVIRONMENT")

    # Database (MySQL wire protocol)
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=3306, alias="DB_PORT")
    db_user: str = Field(default="root", alias="DB_USER")
    db_password: str = Field(default="", alias="DB_PASSWORD")
    db_name: str = Field(default="personal_finance", alias="DB_NAME")
    db_ssl: bool = Field(default=False, alias="DB_SSL")
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")

    # Frontend links (reset emails point here)
    app_base_url: str | None = Field(default=None, alias="REACT_APP_BASE_URL")

    # Backend under smoke test
    api_base_url: str = Field(default="http://localhost:3001", alias="API_BASE_URL")
    request_timeout: float = Field(default=30.0, alias="REQUEST_TIMEOUT")
    smoke_startup_delay: float = Field(default=2.0, alias="SMOKE_STARTUP_DELAY")

    # Demo data
    demo_storage_path: str = Field(default="./demo_storage.json", alias="DEMO_STORAGE_PATH")

    @property
    def database_url(self) -> str | URL:
        """SQLAlchemy URL for the provisioning target.

        DATABASE_URL wins when set; otherwise the URL is assembled from the
        DB_* variables so passwords with special characters survive.
        """
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            "mysql+pymysql",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


# Global settings instance
settings = Settings()
