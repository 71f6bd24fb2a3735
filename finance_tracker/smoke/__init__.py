"""Smoke checks run against an already running backend server."""
