"""Check the health and dashboard endpoints of a running backend."""

import sys

from finance_tracker.smoke.api import main

if __name__ == "__main__":
    sys.exit(main())
