"""Add ML columns and tables, then seed the initial model and training rows."""

import sys

from finance_tracker.provisioning.update_database_for_ml import main

if __name__ == "__main__":
    sys.exit(main())
