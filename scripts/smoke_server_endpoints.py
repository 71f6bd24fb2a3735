"""Check the training endpoints of a running backend."""

import sys

from finance_tracker.smoke.server_endpoints import main

if __name__ == "__main__":
    sys.exit(main())
