"""Check the ML categorize and info endpoints of a running backend."""

import sys

from finance_tracker.smoke.ml_endpoint import main

if __name__ == "__main__":
    sys.exit(main())
