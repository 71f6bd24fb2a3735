"""Presentation helpers for category suggestions."""

from finance_tracker.ui.confidence import ConfidenceTier, confidence_tier, needs_review
from finance_tracker.ui.confidence_indicator import (
    ConfidenceBadge,
    build_confidence_badge,
    render_confidence_badge,
)
from finance_tracker.ui.suggestion_card import (
    Suggestion,
    SuggestionCard,
    build_suggestion_card,
    render_suggestion_card,
    top_scores,
)

__all__ = [
    "ConfidenceTier",
    "confidence_tier",
    "needs_review",
    "ConfidenceBadge",
    "build_confidence_badge",
    "render_confidence_badge",
    "Suggestion",
    "SuggestionCard",
    "build_suggestion_card",
    "render_suggestion_card",
    "top_scores",
]
