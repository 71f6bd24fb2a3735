"""One-off database provisioning scripts.

Each module is runnable with ``python -m finance_tracker.provisioning.<name>``:

- create_database_tables: users, accounts, transactions, password_reset_tokens
- create_reset_tokens_table: password_reset_tokens only
- create_goals_tables: goals, goal_transactions, goal_progress
- update_database_for_ml: ML columns, ml_training_data, ml_models and seed rows
"""
