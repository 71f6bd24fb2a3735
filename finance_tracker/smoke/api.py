"""Smoke check: is the API server up and serving the dashboard?

Usage:
  python -m finance_tracker.smoke.api
"""

import sys
from typing import Optional

import httpx

from finance_tracker.logging_config import configure_logging, get_logger
from finance_tracker.smoke.session import SmokeSession, StepResult

logger = get_logger(__name__)


def run_api_checks(session: SmokeSession, user_id: int = 1) -> list[StepResult]:
    """Hit the health and dashboard endpoints and log their payloads."""
    logger.info("Testing API server", base_url=session.base_url)
    try:
        health = session.get("/api/health")
        logger.info("Health check", response=health.json())

        dashboard = session.get(f"/api/dashboard/{user_id}")
        logger.info("Dashboard check", response=dashboard.json())
    except (httpx.HTTPError, ValueError) as e:
        logger.error("API test failed", error=str(e))
    return session.results


def main(base_url: Optional[str] = None) -> int:
    configure_logging()
    with SmokeSession(base_url) as session:
        run_api_checks(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
