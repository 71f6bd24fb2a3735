"""Update the schema for ML-assisted categorisation.

Adds the ML columns to ``transactions``, creates ``ml_training_data`` and
``ml_models``, seeds the initial model record and a handful of verified
training rows, then checks the result. Seed inserts are guarded with
``WHERE NOT EXISTS`` so re-running never duplicates rows.

Failures are re-raised and the script exits with status 1.

Usage:
  python -m finance_tracker.provisioning.update_database_for_ml
"""

import sys
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from finance_tracker.logging_config import configure_logging, get_logger
from finance_tracker.provisioning.runner import Statement, execute_statements, run_provisioning

logger = get_logger(__name__)

ADD_ML_COLUMNS = """
ALTER TABLE transactions
    ADD COLUMN IF NOT EXISTS ml_category VARCHAR(50),
    ADD COLUMN IF NOT EXISTS ml_confidence DECIMAL(3,2),
    ADD COLUMN IF NOT EXISTS is_ml_predicted BOOLEAN DEFAULT FALSE,
    ADD COLUMN IF NOT EXISTS manual_override BOOLEAN DEFAULT FALSE
"""

CREATE_ML_TRAINING_DATA_TABLE = """
CREATE TABLE IF NOT EXISTS ml_training_data (
    id INT AUTO_INCREMENT PRIMARY KEY,
    description TEXT NOT NULL,
    category VARCHAR(50) NOT NULL,
    merchant_name VARCHAR(255),
    amount DECIMAL(15,2),
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    is_verified BOOLEAN DEFAULT FALSE,
    INDEX idx_category (category),
    INDEX idx_created_at (created_at)
)
"""

CREATE_ML_MODELS_TABLE = """
CREATE TABLE IF NOT EXISTS ml_models (
    id INT AUTO_INCREMENT PRIMARY KEY,
    model_name VARCHAR(100) NOT NULL,
    version VARCHAR(20) NOT NULL,
    accuracy DECIMAL(5,4),
    training_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    is_active BOOLEAN DEFAULT TRUE,
    model_path VARCHAR(255),
    training_data_size INT DEFAULT 0,
    INDEX idx_model_name (model_name),
    INDEX idx_is_active (is_active)
)
"""

INSERT_INITIAL_MODEL = """
INSERT INTO ml_models (model_name, version, accuracy, is_active, training_data_size)
SELECT :model_name, :version, :accuracy, TRUE, :training_data_size
FROM DUAL
WHERE NOT EXISTS (
    SELECT 1 FROM ml_models WHERE model_name = :model_name AND version = :version
)
"""

INSERT_TRAINING_ROW = """
INSERT INTO ml_training_data (description, category, merchant_name, amount, is_verified)
SELECT :description, :category, :merchant_name, :amount, :is_verified
FROM DUAL
WHERE NOT EXISTS (
    SELECT 1 FROM ml_training_data WHERE description = :description AND category = :category
)
"""

INITIAL_MODEL = {
    "model_name": "expense_categorizer_v1",
    "version": "1.0.0",
    "accuracy": 0.85,
    "training_data_size": 50,
}

# (description, category, merchant_name, amount)
SAMPLE_TRAINING_DATA = [
    ("Monthly rent payment", "housing", "Landlord", 1200.00),
    ("Grocery shopping at Walmart", "food", "Walmart", 85.50),
    ("Gas station fill up", "transportation", "Shell", 45.00),
    ("Electric bill payment", "utilities", "Electric Company", 120.00),
    ("Doctor visit", "healthcare", "Medical Center", 150.00),
    ("Netflix subscription", "entertainment", "Netflix", 15.99),
    ("Amazon purchase", "shopping", "Amazon", 75.00),
    ("Coffee at Starbucks", "food", "Starbucks", 4.50),
    ("Uber ride", "transportation", "Uber", 12.00),
    ("Movie tickets", "entertainment", "AMC Theater", 25.00),
]


def training_rows() -> list[dict]:
    """Sample training rows as bind-parameter dicts."""
    return [
        {
            "description": description,
            "category": category,
            "merchant_name": merchant,
            "amount": amount,
            "is_verified": True,
        }
        for description, category, merchant, amount in SAMPLE_TRAINING_DATA
    ]


STATEMENTS = [
    Statement("ML columns on transactions", ADD_ML_COLUMNS),
    Statement("ml_training_data table", CREATE_ML_TRAINING_DATA_TABLE),
    Statement("ml_models table", CREATE_ML_MODELS_TABLE),
    Statement("initial model record", INSERT_INITIAL_MODEL, params=[INITIAL_MODEL]),
    Statement("sample training data", INSERT_TRAINING_ROW, params=training_rows()),
]


@dataclass
class MLSchemaReport:
    """What the verification step found after the update."""

    ml_column_count: int
    training_row_count: int
    active_model_name: Optional[str]
    active_model_version: Optional[str]


def verify_ml_schema(connection: Connection) -> MLSchemaReport:
    """Inspect the updated schema and log what was found."""
    ml_columns = connection.execute(
        text("SHOW COLUMNS FROM transactions LIKE :pattern"), {"pattern": "ml_%"}
    ).fetchall()
    logger.info("ML columns found on transactions", count=len(ml_columns))

    training_count = connection.execute(
        text("SELECT COUNT(*) AS count FROM ml_training_data")
    ).scalar_one()
    logger.info("Training data counted", count=training_count)

    active_model = connection.execute(
        text("SELECT model_name, version FROM ml_models WHERE is_active = TRUE")
    ).mappings().first()
    report = MLSchemaReport(
        ml_column_count=len(ml_columns),
        training_row_count=int(training_count),
        active_model_name=active_model["model_name"] if active_model else None,
        active_model_version=active_model["version"] if active_model else None,
    )
    logger.info(
        "Active model",
        model_name=report.active_model_name,
        version=report.active_model_version,
    )
    return report


def update_database_for_ml(engine: Optional[Engine] = None) -> MLSchemaReport:
    """Apply the ML schema update and return the verification report.

    Raises:
        Exception: Any database failure, after it has been logged
    """
    reports: list[MLSchemaReport] = []

    def _update(connection: Connection) -> None:
        execute_statements(connection, STATEMENTS)
        reports.append(verify_ml_schema(connection))
        logger.info("Database successfully updated for ML features")

    run_provisioning("update_database_for_ml", _update, engine=engine, reraise=True)
    return reports[0]


def main() -> int:
    configure_logging()
    try:
        update_database_for_ml()
    except Exception as e:
        logger.error("Database update failed", error=str(e))
        return 1
    logger.info("Database update completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
