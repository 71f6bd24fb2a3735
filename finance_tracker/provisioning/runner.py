"""Shared plumbing for the one-off provisioning scripts.

Every script opens one connection, runs a fixed list of statements in order
and closes the connection whatever happens. Scripts differ only in whether a
failure is swallowed (logged, exit code 0) or re-raised (exit code 1).
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from finance_tracker.database import create_db_engine
from finance_tracker.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Statement:
    """A named SQL statement executed by a provisioning script."""

    name: str
    sql: str
    params: Optional[Sequence[Mapping[str, Any]]] = None

    def execute(self, connection: Connection) -> None:
        """Execute the statement, as executemany when params are given."""
        if self.params is not None:
            connection.execute(text(self.sql), list(self.params))
        else:
            connection.execute(text(self.sql))


def execute_statements(connection: Connection, statements: Sequence[Statement]) -> None:
    """Run statements one after the other, logging each success."""
    for statement in statements:
        statement.execute(connection)
        logger.info("Statement executed", step=statement.name)


def run_provisioning(
    script: str,
    work: Callable[[Connection], None],
    *,
    engine: Optional[Engine] = None,
    reraise: bool = False,
) -> bool:
    """Open a connection, hand it to ``work``, commit and close.

    Args:
        script: Script name used in log events
        work: Callable doing the actual statements
        engine: Engine to use, a fresh one from settings when omitted
        reraise: Propagate failures instead of swallowing them

    Returns:
        True when the work completed, False when a failure was swallowed

    Raises:
        Exception: Whatever ``work`` raised, when ``reraise`` is set
    """
    owns_engine = engine is None
    try:
        if engine is None:
            engine = create_db_engine()
        with engine.connect() as connection:
            logger.info("Connected to database", script=script)
            work(connection)
            connection.commit()
        logger.info("Database connection closed", script=script)
    except Exception as e:
        logger.error("Provisioning failed", script=script, error=str(e), exc_info=True)
        if reraise:
            raise
        return False
    finally:
        if owns_engine and engine is not None:
            engine.dispose()

    logger.info("Provisioning complete", script=script)
    return True
