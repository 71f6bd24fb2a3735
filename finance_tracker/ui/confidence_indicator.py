"""Compact confidence pill shown next to categorised transactions."""

from dataclasses import dataclass

from finance_tracker.ui.confidence import ConfidenceTier, confidence_tier, to_percent
from finance_tracker.ui.templating import render_template

SIZE_CLASSES = {
    "xs": "px-2 py-1 text-xs",
    "sm": "px-2 py-1 text-sm",
    "md": "px-3 py-1.5 text-sm",
    "lg": "px-4 py-2 text-base",
}
DEFAULT_SIZE = "sm"


@dataclass
class ConfidenceBadge:
    tier: ConfidenceTier
    percent: int
    size_classes: str
    show_percentage: bool = True
    show_label: bool = False

    @property
    def css_classes(self) -> str:
        return (
            "inline-flex items-center space-x-1 rounded-full border "
            f"{self.tier.badge_classes} {self.size_classes}"
        )


def build_confidence_badge(
    confidence: float,
    size: str = DEFAULT_SIZE,
    show_percentage: bool = True,
    show_label: bool = False,
) -> ConfidenceBadge:
    """Build a badge; unknown sizes fall back to the small size."""
    return ConfidenceBadge(
        tier=confidence_tier(confidence),
        percent=to_percent(confidence),
        size_classes=SIZE_CLASSES.get(size, SIZE_CLASSES[DEFAULT_SIZE]),
        show_percentage=show_percentage,
        show_label=show_label,
    )


def render_confidence_badge(badge: ConfidenceBadge) -> str:
    return render_template("confidence_badge.html", badge=badge)
