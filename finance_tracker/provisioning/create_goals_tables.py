"""Create goals, goal_transactions and goal_progress.

Requires the core tables (users, transactions) to exist. Failures are
re-raised and the script exits with status 1.

Usage:
  python -m finance_tracker.provisioning.create_goals_tables
"""

import sys
from typing import Optional

from sqlalchemy.engine import Connection, Engine

from finance_tracker.logging_config import configure_logging, get_logger
from finance_tracker.provisioning.runner import Statement, execute_statements, run_provisioning

logger = get_logger(__name__)

CREATE_GOALS_TABLE = """
CREATE TABLE IF NOT EXISTS goals (
    id INT PRIMARY KEY AUTO_INCREMENT,
    user_id INT NOT NULL,
    goal_type ENUM('savings', 'investment', 'debt_payoff', 'purchase', 'income') NOT NULL,
    title VARCHAR(255) NOT NULL,
    description TEXT,
    target_amount DECIMAL(15,2) NOT NULL,
    current_amount DECIMAL(15,2) DEFAULT 0.00,
    deadline DATE,
    priority ENUM('high', 'medium', 'low') DEFAULT 'medium',
    status ENUM('active', 'completed', 'paused', 'cancelled') DEFAULT 'active',
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE,
    INDEX idx_user_id (user_id),
    INDEX idx_status (status),
    INDEX idx_goal_type (goal_type)
)
"""

CREATE_GOAL_TRANSACTIONS_TABLE = """
CREATE TABLE IF NOT EXISTS goal_transactions (
    id INT PRIMARY KEY AUTO_INCREMENT,
    goal_id INT NOT NULL,
    transaction_id INT,
    amount DECIMAL(15,2) NOT NULL,
    transaction_type ENUM('contribution', 'withdrawal', 'interest', 'dividend') DEFAULT 'contribution',
    transaction_date DATE NOT NULL,
    description TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (goal_id) REFERENCES goals(id) ON DELETE CASCADE,
    FOREIGN KEY (transaction_id) REFERENCES transactions(id) ON DELETE SET NULL,
    INDEX idx_goal_id (goal_id),
    INDEX idx_transaction_date (transaction_date)
)
"""

# Progress snapshots over time
CREATE_GOAL_PROGRESS_TABLE = """
CREATE TABLE IF NOT EXISTS goal_progress (
    id INT PRIMARY KEY AUTO_INCREMENT,
    goal_id INT NOT NULL,
    progress_amount DECIMAL(15,2) NOT NULL,
    progress_percentage DECIMAL(5,2) NOT NULL,
    recorded_date DATE NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (goal_id) REFERENCES goals(id) ON DELETE CASCADE,
    INDEX idx_goal_id (goal_id),
    INDEX idx_recorded_date (recorded_date)
)
"""

STATEMENTS = [
    Statement("goals table", CREATE_GOALS_TABLE),
    Statement("goal_transactions table", CREATE_GOAL_TRANSACTIONS_TABLE),
    Statement("goal_progress table", CREATE_GOAL_PROGRESS_TABLE),
]


def _create_tables(connection: Connection) -> None:
    execute_statements(connection, STATEMENTS)
    logger.info("All goals-related tables created successfully")


def create_goals_tables(engine: Optional[Engine] = None) -> None:
    """Create the goal tables.

    Raises:
        Exception: Any database failure, after it has been logged
    """
    run_provisioning("create_goals_tables", _create_tables, engine=engine, reraise=True)


def main() -> int:
    configure_logging()
    try:
        create_goals_tables()
    except Exception as e:
        logger.error("Failed to create goals tables", error=str(e))
        return 1
    logger.info("Goals tables creation completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
