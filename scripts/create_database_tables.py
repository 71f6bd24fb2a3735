"""Create users, accounts, transactions and password_reset_tokens."""

import sys

from finance_tracker.provisioning.create_database_tables import main

if __name__ == "__main__":
    sys.exit(main())
