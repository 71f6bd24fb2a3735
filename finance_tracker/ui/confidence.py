"""Confidence tiers shared by the suggestion card and the confidence badge."""

import math
from enum import Enum

HIGH_CONFIDENCE_THRESHOLD = 0.8
MEDIUM_CONFIDENCE_THRESHOLD = 0.6
REVIEW_THRESHOLD = 0.7


class ConfidenceTier(str, Enum):
    """Display bucket derived from a model confidence score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        return f"{self.short_label} Confidence"

    @property
    def short_label(self) -> str:
        return self.value.capitalize()

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    @property
    def card_classes(self) -> str:
        return f"border-{self.color}-200 bg-{self.color}-50"

    @property
    def badge_classes(self) -> str:
        return f"bg-{self.color}-100 text-{self.color}-800 border-{self.color}-200"

    @property
    def text_classes(self) -> str:
        return f"text-{self.color}-800"


_ICONS = {
    ConfidenceTier.HIGH: "✅",
    ConfidenceTier.MEDIUM: "⚠️",
    ConfidenceTier.LOW: "❌",
}

_COLORS = {
    ConfidenceTier.HIGH: "green",
    ConfidenceTier.MEDIUM: "yellow",
    ConfidenceTier.LOW: "red",
}


def confidence_tier(confidence: float) -> ConfidenceTier:
    """Bucket a confidence: >= 0.8 high, >= 0.6 medium, otherwise low."""
    if confidence >= HIGH_CONFIDENCE_THRESHOLD:
        return ConfidenceTier.HIGH
    if confidence >= MEDIUM_CONFIDENCE_THRESHOLD:
        return ConfidenceTier.MEDIUM
    return ConfidenceTier.LOW


def needs_review(confidence: float) -> bool:
    """Whether a prediction should be flagged for manual review.

    Independent of the tier: a 0.65 prediction is Medium and still flagged.
    """
    return confidence < REVIEW_THRESHOLD


def to_percent(value: float) -> int:
    """Round a 0-1 score to a whole percentage, halves rounding up."""
    return math.floor(value * 100 + 0.5)
