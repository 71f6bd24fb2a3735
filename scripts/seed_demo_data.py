"""Seed the demo user, accounts and transactions into a local JSON store."""

import sys

from finance_tracker.demo_data import main

if __name__ == "__main__":
    sys.exit(main())
