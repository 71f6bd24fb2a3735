"""Tests for the suggestion review card."""

from unittest.mock import MagicMock

import pytest

from finance_tracker.schemas.suggestion import SuggestionPayload
from finance_tracker.ui.confidence import ConfidenceTier
from finance_tracker.ui.suggestion_card import (
    REVIEW_NOTICE,
    Suggestion,
    build_suggestion_card,
    render_suggestion_card,
    top_scores,
)


@pytest.fixture
def suggestion():
    """A medium-confidence grocery suggestion with scores."""
    return Suggestion(
        category="groceries",
        confidence=0.72,
        scores={"groceries": 0.72, "dining": 0.15, "shopping": 0.08, "other": 0.05},
    )


class TestBuildSuggestionCard:
    """Test card construction."""

    def test_no_suggestion_renders_nothing(self):
        """Without a suggestion there is no card and no markup."""
        assert build_suggestion_card(None) is None
        assert render_suggestion_card(None) == ""

    @pytest.mark.parametrize(
        "confidence,label",
        [
            (0.8, "High Confidence"),
            (0.79, "Medium Confidence"),
            (0.6, "Medium Confidence"),
            (0.59, "Low Confidence"),
        ],
    )
    def test_tier_label_at_boundaries(self, confidence, label):
        card = build_suggestion_card(Suggestion("food", confidence))

        assert card.tier.label == label

    def test_heading_and_percentage(self, suggestion):
        card = build_suggestion_card(suggestion)

        assert card.heading == "ML Suggestion: groceries"
        assert card.confidence_percent == 72
        assert card.tier_text == "Medium Confidence (72%)"

    def test_review_notice_below_threshold(self):
        card = build_suggestion_card(Suggestion("food", 0.69))

        assert card.needs_review is True
        assert card.review_notice == REVIEW_NOTICE

    def test_no_review_notice_at_threshold(self):
        card = build_suggestion_card(Suggestion("food", 0.70))

        assert card.needs_review is False
        assert card.review_notice is None

    def test_idle_actions(self, suggestion):
        card = build_suggestion_card(suggestion)

        assert card.accept_action.label == "Accept"
        assert card.reject_action.label == "Reject"
        assert not card.accept_action.disabled
        assert not card.reject_action.disabled

    def test_busy_disables_actions(self, suggestion):
        """While busy both buttons are disabled and accept shows progress."""
        card = build_suggestion_card(suggestion, busy=True)

        assert card.accept_action.label == "Processing..."
        assert card.reject_action.label == "Reject"
        assert card.accept_action.disabled
        assert card.reject_action.disabled


class TestCardActions:
    """Test accept/reject dispatch."""

    def test_accept_dispatches_callback(self, suggestion):
        on_accept = MagicMock()
        on_reject = MagicMock()
        card = build_suggestion_card(suggestion, on_accept=on_accept, on_reject=on_reject)

        assert card.accept() is True

        on_accept.assert_called_once_with(suggestion)
        on_reject.assert_not_called()

    def test_reject_dispatches_callback(self, suggestion):
        on_accept = MagicMock()
        on_reject = MagicMock()
        card = build_suggestion_card(suggestion, on_accept=on_accept, on_reject=on_reject)

        assert card.reject() is True

        on_reject.assert_called_once_with(suggestion)
        on_accept.assert_not_called()

    def test_busy_card_does_not_dispatch(self, suggestion):
        on_accept = MagicMock()
        on_reject = MagicMock()
        card = build_suggestion_card(
            suggestion, on_accept=on_accept, on_reject=on_reject, busy=True
        )

        assert card.accept() is False
        assert card.reject() is False

        on_accept.assert_not_called()
        on_reject.assert_not_called()

    def test_missing_callback_is_noop(self, suggestion):
        card = build_suggestion_card(suggestion)

        assert card.accept() is False


class TestTopScores:
    """Test score ranking."""

    def test_no_scores(self):
        assert top_scores(None) == []
        assert top_scores({}) == []

    def test_keeps_four_highest_descending_with_stable_ties(self):
        """Six entries with duplicates: four highest, ties in insertion order."""
        scores = {
            "transport": 0.10,
            "food": 0.30,
            "shopping": 0.20,
            "dining": 0.30,
            "bills": 0.20,
            "other": 0.05,
        }

        ranked = top_scores(scores)

        assert [entry.category for entry in ranked] == ["food", "dining", "shopping", "bills"]
        assert [entry.percent for entry in ranked] == [30, 30, 20, 20]

    def test_fewer_than_limit(self):
        ranked = top_scores({"a": 0.4, "b": 0.6})

        assert [entry.category for entry in ranked] == ["b", "a"]


class TestSuggestionFromMapping:
    """Test building suggestions from JSON-like data."""

    def test_with_scores(self):
        suggestion = Suggestion.from_mapping(
            {"category": "food", "confidence": "0.9", "scores": {"food": 0.9}}
        )

        assert suggestion.confidence == 0.9
        assert suggestion.scores == {"food": 0.9}

    def test_without_scores(self):
        suggestion = Suggestion.from_mapping({"category": "food", "confidence": 0.4})

        assert suggestion.scores is None


class TestRenderSuggestionCard:
    """Test the HTML fragment."""

    def test_renders_tier_and_scores(self, suggestion):
        html = render_suggestion_card(
            build_suggestion_card(suggestion), accept_url="/accept", reject_url="/reject"
        )

        assert "ML Suggestion: groceries" in html
        assert "Medium Confidence (72%)" in html
        assert 'data-tier="medium"' in html
        assert "Category Scores:" in html
        assert "groceries:</span>" in html
        assert 'formaction="/accept"' in html
        assert 'formaction="/reject"' in html
        assert REVIEW_NOTICE not in html

    def test_renders_review_notice_and_busy_state(self):
        card = build_suggestion_card(Suggestion("other", 0.5), busy=True)

        html = render_suggestion_card(card)

        assert REVIEW_NOTICE in html
        assert "Processing..." in html
        assert html.count(" disabled>") == 2
        assert "Category Scores:" not in html
        assert card.tier == ConfidenceTier.LOW

    def test_escapes_category(self):
        card = build_suggestion_card(Suggestion("<script>", 0.9))

        html = render_suggestion_card(card)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestSuggestionPayload:
    """Test conversion from the request schema."""

    def test_to_suggestion(self):
        payload = SuggestionPayload(
            category="groceries", confidence=0.72, scores={"groceries": 0.72, "food": 0.2}
        )

        suggestion = payload.to_suggestion()

        assert suggestion == Suggestion(
            category="groceries", confidence=0.72, scores={"groceries": 0.72, "food": 0.2}
        )

    def test_to_suggestion_without_scores(self):
        suggestion = SuggestionPayload(category="food", confidence=0.4).to_suggestion()

        assert suggestion.scores is None
        assert build_suggestion_card(suggestion).top_scores == []
