"""Schemas package."""

from finance_tracker.schemas.suggestion import SuggestionCardRequest, SuggestionPayload

__all__ = ["SuggestionCardRequest", "SuggestionPayload"]
