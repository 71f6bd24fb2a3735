"""Smoke check for the ML categorisation endpoints.

Usage:
  python -m finance_tracker.smoke.ml_endpoint
"""

import sys
from typing import Optional

import httpx

from finance_tracker.logging_config import configure_logging, get_logger
from finance_tracker.smoke.session import SmokeSession, StepResult, wait_for_server
from finance_tracker.ui.confidence import needs_review

logger = get_logger(__name__)

SAMPLE_DESCRIPTIONS = ["Coffee at Starbucks", "Gas station fill up"]


def log_predictions(descriptions: list[str], payload: dict) -> None:
    """Log each prediction with its percentage and a review flag."""
    predictions = payload.get("predictions")
    if not isinstance(predictions, list):
        predictions = []
    for description, prediction in zip(descriptions, predictions):
        if not isinstance(prediction, dict):
            logger.warning(
                "Skipping malformed prediction", description=description, prediction=prediction
            )
            continue
        confidence = float(prediction.get("confidence") or 0)
        logger.info(
            "Prediction",
            description=description,
            category=prediction.get("category"),
            confidence_percent=round(confidence * 100),
            needs_review=needs_review(confidence),
        )


def run_ml_endpoint_checks(
    session: SmokeSession, descriptions: Optional[list[str]] = None
) -> list[StepResult]:
    """Health, categorize, then model info. Stops early if categorize fails."""
    descriptions = descriptions or SAMPLE_DESCRIPTIONS
    logger.info("Testing ML endpoint", base_url=session.base_url)
    try:
        health = session.get("/api/health")
        logger.info("Health check", response=health.json())

        categorize = session.post("/api/ml/categorize", {"descriptions": descriptions})
        if not categorize.is_success:
            logger.error(
                "ML endpoint failed",
                status_code=categorize.status_code,
                reason=categorize.reason_phrase,
                body=categorize.text,
            )
            return session.results
        categorized = categorize.json()
        logger.info("ML categorize response", response=categorized)
        if isinstance(categorized, dict):
            log_predictions(descriptions, categorized)

        info = session.get("/api/ml/info")
        logger.info("ML info response", response=info.json())

        logger.info("All tests passed")
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Test failed", error=str(e))
    return session.results


def main(base_url: Optional[str] = None, startup_delay: Optional[float] = None) -> int:
    configure_logging()
    wait_for_server(startup_delay)
    with SmokeSession(base_url) as session:
        run_ml_endpoint_checks(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
