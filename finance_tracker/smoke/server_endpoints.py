"""Smoke check for the model training endpoints.

Usage:
  python -m finance_tracker.smoke.server_endpoints
"""

import sys
from typing import Any, Optional

import httpx

from finance_tracker.logging_config import configure_logging, get_logger
from finance_tracker.smoke.session import SmokeSession, StepResult, wait_for_server

logger = get_logger(__name__)

DATASET_REQUEST = {
    "filePath": "./datasets/sample-financial-data.csv",
    "options": {
        "testRatio": 0.2,
        "targetColumns": ["savings_capacity", "spending_trend", "risk_score", "goal_achievement"],
        "algorithms": ["linear", "polynomial", "exponential"],
    },
}


def _dig(payload: Any, *keys: str) -> Any:
    """Walk nested dicts, returning None at the first missing key."""
    for key in keys:
        if not isinstance(payload, dict):
            return None
        payload = payload.get(key)
    return payload


def record_counts(payload: Any) -> tuple[int, int]:
    """Train/test record counts reported by a training response."""
    train = _dig(payload, "result", "dataset", "trainData", "features") or []
    test = _dig(payload, "result", "dataset", "testData", "features") or []
    return len(train), len(test)


def _log_training(label: str, response: httpx.Response) -> None:
    if response.is_success:
        train_records, test_records = record_counts(response.json())
        logger.info(
            f"{label} training successful",
            training_records=train_records,
            test_records=test_records,
        )
    else:
        logger.error(
            f"{label} training failed", status_code=response.status_code, body=response.text
        )


def run_server_endpoint_checks(session: SmokeSession) -> list[StepResult]:
    """Health, sample training, dataset training, then training history."""
    logger.info("Testing server endpoints", base_url=session.base_url)
    try:
        health = session.get("/api/health")
        if not health.is_success:
            logger.error("Health check failed", status_code=health.status_code)
            return session.results
        logger.info("Health check", response=health.json())

        _log_training("Sample", session.post("/api/training/train-sample"))
        _log_training("Dataset", session.post("/api/training/train-dataset", DATASET_REQUEST))

        history = session.get("/api/training/history")
        if history.is_success:
            entries = _dig(history.json(), "history") or []
            logger.info("Training history retrieved", history_entries=len(entries))
        else:
            logger.error("Training history failed", status_code=history.status_code)

        logger.info("Server endpoint testing completed")
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Error testing server endpoints", error=str(e))
    return session.results


def main(base_url: Optional[str] = None, startup_delay: Optional[float] = None) -> int:
    configure_logging()
    wait_for_server(startup_delay)
    with SmokeSession(base_url) as session:
        run_server_endpoint_checks(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
