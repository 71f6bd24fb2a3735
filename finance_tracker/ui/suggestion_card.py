"""Review card for an ML category suggestion.

The card is pure presentation: it buckets the suggestion's confidence into a
tier, decides whether to show the manual-review notice, picks the top
category scores and wires up the accept/reject actions. It holds no state
and makes no network calls.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from finance_tracker.ui.confidence import (
    ConfidenceTier,
    confidence_tier,
    needs_review,
    to_percent,
)
from finance_tracker.ui.templating import render_template

REVIEW_NOTICE = "Low confidence prediction - please review manually"
TOP_SCORES_LIMIT = 4

SuggestionCallback = Callable[["Suggestion"], Any]


@dataclass(frozen=True)
class Suggestion:
    """A category suggestion produced by the categorisation model."""

    category: str
    confidence: float
    scores: Optional[Dict[str, float]] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Suggestion":
        scores = data.get("scores")
        return cls(
            category=str(data["category"]),
            confidence=float(data["confidence"]),
            scores=dict(scores) if scores else None,
        )


@dataclass(frozen=True)
class ScoreEntry:
    category: str
    score: float

    @property
    def percent(self) -> int:
        return to_percent(self.score)


@dataclass
class CardAction:
    """A button on the card bound to a callback."""

    label: str
    disabled: bool = False
    callback: Optional[SuggestionCallback] = None

    def dispatch(self, suggestion: "Suggestion") -> bool:
        """Invoke the callback unless the action is disabled.

        Returns:
            True if the callback ran
        """
        if self.disabled or self.callback is None:
            return False
        self.callback(suggestion)
        return True


@dataclass
class SuggestionCard:
    """Everything needed to draw the card."""

    suggestion: Suggestion
    tier: ConfidenceTier
    confidence_percent: int
    needs_review: bool
    top_scores: List[ScoreEntry] = field(default_factory=list)
    accept_action: CardAction = field(default_factory=lambda: CardAction("Accept"))
    reject_action: CardAction = field(default_factory=lambda: CardAction("Reject"))

    @property
    def heading(self) -> str:
        return f"ML Suggestion: {self.suggestion.category}"

    @property
    def tier_text(self) -> str:
        return f"{self.tier.label} ({self.confidence_percent}%)"

    @property
    def review_notice(self) -> Optional[str]:
        return REVIEW_NOTICE if self.needs_review else None

    def accept(self) -> bool:
        return self.accept_action.dispatch(self.suggestion)

    def reject(self) -> bool:
        return self.reject_action.dispatch(self.suggestion)


def top_scores(scores: Optional[Mapping[str, float]], limit: int = TOP_SCORES_LIMIT) -> List[ScoreEntry]:
    """Highest scores first, at most ``limit`` of them.

    The sort is stable, so equal scores keep the mapping's insertion order.
    """
    if not scores:
        return []
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [ScoreEntry(category, float(score)) for category, score in ranked[:limit]]


def build_suggestion_card(
    suggestion: Optional[Suggestion],
    on_accept: Optional[SuggestionCallback] = None,
    on_reject: Optional[SuggestionCallback] = None,
    busy: bool = False,
) -> Optional[SuggestionCard]:
    """Build the card for a suggestion.

    Args:
        suggestion: Suggestion to review; nothing is rendered without one
        on_accept: Called with the suggestion when the user accepts it
        on_reject: Called with the suggestion when the user rejects it
        busy: While set both actions are disabled and accept shows progress

    Returns:
        The card, or None when there is no suggestion
    """
    if suggestion is None:
        return None

    return SuggestionCard(
        suggestion=suggestion,
        tier=confidence_tier(suggestion.confidence),
        confidence_percent=to_percent(suggestion.confidence),
        needs_review=needs_review(suggestion.confidence),
        top_scores=top_scores(suggestion.scores),
        accept_action=CardAction(
            label="Processing..." if busy else "Accept", disabled=busy, callback=on_accept
        ),
        reject_action=CardAction(label="Reject", disabled=busy, callback=on_reject),
    )


def render_suggestion_card(
    card: Optional[SuggestionCard], accept_url: str = "", reject_url: str = ""
) -> str:
    """Render the card as an HTML fragment; empty string when there is no card."""
    if card is None:
        return ""
    return render_template(
        "suggestion_card.html", card=card, accept_url=accept_url, reject_url=reject_url
    )
