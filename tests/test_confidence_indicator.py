"""Tests for the confidence badge."""

from finance_tracker.ui.confidence import ConfidenceTier
from finance_tracker.ui.confidence_indicator import (
    SIZE_CLASSES,
    build_confidence_badge,
    render_confidence_badge,
)


class TestConfidenceBadge:
    """Test badge construction and rendering."""

    def test_defaults(self):
        badge = build_confidence_badge(0.85)

        assert badge.tier == ConfidenceTier.HIGH
        assert badge.percent == 85
        assert badge.size_classes == SIZE_CLASSES["sm"]
        assert badge.show_percentage is True
        assert badge.show_label is False

    def test_sizes(self):
        assert build_confidence_badge(0.5, size="lg").size_classes == "px-4 py-2 text-base"
        assert build_confidence_badge(0.5, size="xs").size_classes == "px-2 py-1 text-xs"

    def test_unknown_size_falls_back_to_small(self):
        assert build_confidence_badge(0.5, size="huge").size_classes == SIZE_CLASSES["sm"]

    def test_css_classes_follow_tier(self):
        badge = build_confidence_badge(0.65, size="md")

        assert "bg-yellow-100 text-yellow-800 border-yellow-200" in badge.css_classes
        assert badge.css_classes.endswith("px-3 py-1.5 text-sm")

    def test_render_percentage_only(self):
        html = render_confidence_badge(build_confidence_badge(0.42))

        assert "42%" in html
        assert "❌" in html
        assert "Low" not in html

    def test_render_label_only(self):
        html = render_confidence_badge(
            build_confidence_badge(0.92, show_percentage=False, show_label=True)
        )

        assert "High" in html
        assert "92%" not in html
