"""Personal finance toolkit.

Database provisioning scripts, a demo-data seeder, a mock email service,
backend smoke checks and the suggestion review UI helpers.
"""
