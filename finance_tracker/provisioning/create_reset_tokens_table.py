"""Create the password_reset_tokens table on its own.

Usage:
  python -m finance_tracker.provisioning.create_reset_tokens_table
"""

import sys
from typing import Optional

from sqlalchemy.engine import Engine

from finance_tracker.logging_config import configure_logging
from finance_tracker.provisioning.runner import Statement, execute_statements, run_provisioning

CREATE_RESET_TOKENS_TABLE = """
CREATE TABLE IF NOT EXISTS password_reset_tokens (
    id INT AUTO_INCREMENT PRIMARY KEY,
    user_id INT NOT NULL,
    token VARCHAR(255) NOT NULL UNIQUE,
    expires_at TIMESTAMP NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE,
    INDEX idx_token (token),
    INDEX idx_expires_at (expires_at)
)
"""

STATEMENTS = [Statement("password_reset_tokens table", CREATE_RESET_TOKENS_TABLE)]


def create_reset_tokens_table(engine: Optional[Engine] = None) -> bool:
    """Create password_reset_tokens, swallowing any failure."""
    return run_provisioning(
        "create_reset_tokens_table",
        lambda connection: execute_statements(connection, STATEMENTS),
        engine=engine,
    )


def main() -> int:
    configure_logging()
    create_reset_tokens_table()
    return 0


if __name__ == "__main__":
    sys.exit(main())
