"""Create the core tables: users, accounts, transactions, reset tokens.

Failures are logged and swallowed; the script always exits 0.

Usage:
  python -m finance_tracker.provisioning.create_database_tables
"""

import sys
from typing import Optional

from sqlalchemy.engine import Connection, Engine

from finance_tracker.logging_config import configure_logging, get_logger
from finance_tracker.provisioning.create_reset_tokens_table import CREATE_RESET_TOKENS_TABLE
from finance_tracker.provisioning.runner import Statement, execute_statements, run_provisioning

logger = get_logger(__name__)

CREATE_USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id INT AUTO_INCREMENT PRIMARY KEY,
    first_name VARCHAR(100) NOT NULL,
    last_name VARCHAR(100) NOT NULL,
    email VARCHAR(255) UNIQUE NOT NULL,
    password_hash VARCHAR(255) NOT NULL,
    preferences JSON,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
)
"""

CREATE_ACCOUNTS_TABLE = """
CREATE TABLE IF NOT EXISTS accounts (
    id INT AUTO_INCREMENT PRIMARY KEY,
    user_id INT NOT NULL,
    account_type ENUM('checking', 'savings', 'credit', 'investment', 'cash') NOT NULL,
    account_name VARCHAR(100) NOT NULL,
    balance DECIMAL(15,2) DEFAULT 0.00,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE,
    INDEX idx_user_id (user_id),
    INDEX idx_account_type (account_type)
)
"""

CREATE_TRANSACTIONS_TABLE = """
CREATE TABLE IF NOT EXISTS transactions (
    id INT AUTO_INCREMENT PRIMARY KEY,
    account_id INT NOT NULL,
    amount DECIMAL(15,2) NOT NULL,
    category VARCHAR(50) NOT NULL,
    transaction_type ENUM('income', 'expense', 'transfer') NOT NULL,
    description TEXT,
    transaction_date DATE NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
    FOREIGN KEY (account_id) REFERENCES accounts(id) ON DELETE CASCADE,
    INDEX idx_account_id (account_id),
    INDEX idx_transaction_type (transaction_type),
    INDEX idx_category (category),
    INDEX idx_transaction_date (transaction_date)
)
"""

STATEMENTS = [
    Statement("users table", CREATE_USERS_TABLE),
    Statement("accounts table", CREATE_ACCOUNTS_TABLE),
    Statement("transactions table", CREATE_TRANSACTIONS_TABLE),
    Statement("password_reset_tokens table", CREATE_RESET_TOKENS_TABLE),
]


def _create_tables(connection: Connection) -> None:
    execute_statements(connection, STATEMENTS)
    logger.info("All database tables created successfully")


def create_database_tables(engine: Optional[Engine] = None) -> bool:
    """Create the core tables, swallowing any failure."""
    return run_provisioning("create_database_tables", _create_tables, engine=engine)


def main() -> int:
    configure_logging()
    create_database_tables()
    return 0


if __name__ == "__main__":
    sys.exit(main())
