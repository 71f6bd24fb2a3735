"""Database engine factory for the provisioning scripts."""

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.pool import NullPool

from finance_tracker.config import settings
from finance_tracker.logging_config import get_logger

logger = get_logger(__name__)


def build_connect_args(use_ssl: bool) -> dict:
    """PyMySQL connect arguments.

    Hosted gateways (TiDB Cloud and similar) require TLS but do not ship a CA
    the client can verify, so TLS is enabled without certificate checks.
    """
    if use_ssl:
        return {"ssl": {"check_hostname": False}}
    return {}


def create_db_engine(url: str | URL | None = None, use_ssl: bool | None = None) -> Engine:
    """Create an engine whose connections are really closed on release.

    Args:
        url: Database URL, defaults to the configured one
        use_ssl: Enable TLS, defaults to DB_SSL

    Returns:
        Engine: SQLAlchemy engine without connection pooling
    """
    target = url if url is not None else settings.database_url
    ssl_enabled = settings.db_ssl if use_ssl is None else use_ssl

    engine = create_engine(
        target,
        poolclass=NullPool,
        connect_args=build_connect_args(ssl_enabled),
        echo=settings.debug,
        future=True,
    )
    logger.debug("Database engine created", url=engine.url.render_as_string(hide_password=True))
    return engine
