"""Create goals, goal_transactions and goal_progress."""

import sys

from finance_tracker.provisioning.create_goals_tables import main

if __name__ == "__main__":
    sys.exit(main())
