"""Create the password_reset_tokens table."""

import sys

from finance_tracker.provisioning.create_reset_tokens_table import main

if __name__ == "__main__":
    sys.exit(main())
