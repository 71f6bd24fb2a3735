"""Demo data for running the frontend without a backend.

Seeds one demo user, two accounts and three transactions into a
localStorage-like store. Seeding happens once; the ``finance_demo_setup``
marker makes later calls no-ops.

Usage:
  python -m finance_tracker.demo_data [storage-path]
"""

import json
import sys
from datetime import datetime, timedelta, timezone
from typing import Optional

from finance_tracker.config import settings
from finance_tracker.logging_config import configure_logging, get_logger
from finance_tracker.storage import JsonFileStorage, KeyValueStorage, StorageError

logger = get_logger(__name__)

DEMO_SETUP_KEY = "finance_demo_setup"
USERS_KEY = "finance_users"

DEMO_USER_ID = "demo-user-1"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo123"  # plain text on purpose, demo only


def accounts_key(user_id: str) -> str:
    return f"finance_accounts_{user_id}"


def transactions_key(account_id: str) -> str:
    return f"finance_transactions_{account_id}"


def _iso(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_demo_user() -> dict:
    return {
        "id": DEMO_USER_ID,
        "firstName": "John",
        "lastName": "Doe",
        "email": DEMO_EMAIL,
        "password": DEMO_PASSWORD,
    }


def build_demo_accounts(now: datetime) -> list[dict]:
    return [
        {
            "id": "account-1",
            "userId": DEMO_USER_ID,
            "accountType": "checking",
            "accountName": "Main Checking",
            "balance": 2500.00,
            "createdAt": _iso(now),
        },
        {
            "id": "account-2",
            "userId": DEMO_USER_ID,
            "accountType": "savings",
            "accountName": "Emergency Fund",
            "balance": 5000.00,
            "createdAt": _iso(now),
        },
    ]


def build_demo_transactions(now: datetime) -> list[dict]:
    # Expenses carry negative amounts
    return [
        {
            "id": "trans-1",
            "accountId": "account-1",
            "amount": -50.00,
            "category": "groceries",
            "transactionType": "expense",
            "description": "Grocery shopping at Whole Foods",
            "date": _iso(now - timedelta(days=2)),
        },
        {
            "id": "trans-2",
            "accountId": "account-1",
            "amount": 3000.00,
            "category": "salary",
            "transactionType": "income",
            "description": "Monthly salary",
            "date": _iso(now - timedelta(days=5)),
        },
        {
            "id": "trans-3",
            "accountId": "account-1",
            "amount": -200.00,
            "category": "utilities",
            "transactionType": "expense",
            "description": "Electric bill",
            "date": _iso(now - timedelta(days=7)),
        },
    ]


def setup_demo_data(storage: KeyValueStorage, now: Optional[datetime] = None) -> bool:
    """Write the demo data set unless it is already there.

    Args:
        storage: Store to seed
        now: Reference time for generated dates, defaults to the current UTC time

    Returns:
        True if data was written, False if the marker was already present
    """
    if storage.get_item(DEMO_SETUP_KEY):
        logger.debug("Demo data already present, skipping")
        return False

    now = now or datetime.now(timezone.utc)

    storage.set_item(USERS_KEY, json.dumps([build_demo_user()]))
    storage.set_item(accounts_key(DEMO_USER_ID), json.dumps(build_demo_accounts(now)))
    storage.set_item(transactions_key("account-1"), json.dumps(build_demo_transactions(now)))
    storage.set_item(DEMO_SETUP_KEY, "true")

    logger.info("Demo data setup complete", email=DEMO_EMAIL, password=DEMO_PASSWORD)
    return True


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else settings.demo_storage_path
    try:
        setup_demo_data(JsonFileStorage(path))
    except StorageError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
