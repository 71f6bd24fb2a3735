"""HTML fragment endpoints for the suggestion review UI."""

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from finance_tracker.logging_config import get_logger
from finance_tracker.schemas.suggestion import SuggestionCardRequest
from finance_tracker.ui.confidence_indicator import (
    DEFAULT_SIZE,
    build_confidence_badge,
    render_confidence_badge,
)
from finance_tracker.ui.suggestion_card import build_suggestion_card, render_suggestion_card

logger = get_logger(__name__)

router = APIRouter()


@router.post("/suggestion-card", response_class=HTMLResponse)
async def suggestion_card(payload: SuggestionCardRequest) -> HTMLResponse:
    """Render the review card for a suggestion.

    Args:
        payload: Suggestion, busy flag and form targets for the two buttons

    Returns:
        HTML fragment, empty when no suggestion was given
    """
    suggestion = payload.suggestion.to_suggestion() if payload.suggestion else None
    card = build_suggestion_card(suggestion, busy=payload.busy)
    if card is not None:
        logger.debug(
            "Rendering suggestion card",
            category=suggestion.category,
            tier=card.tier.value,
            needs_review=card.needs_review,
        )
    return HTMLResponse(
        render_suggestion_card(card, accept_url=payload.accept_url, reject_url=payload.reject_url)
    )


@router.get("/confidence-badge", response_class=HTMLResponse)
async def confidence_badge(
    confidence: float = Query(..., ge=0, le=1, description="Model confidence"),
    size: str = Query(DEFAULT_SIZE, description="xs, sm, md or lg"),
    show_percentage: bool = Query(True),
    show_label: bool = Query(False),
) -> HTMLResponse:
    """Render a confidence pill."""
    badge = build_confidence_badge(
        confidence, size=size, show_percentage=show_percentage, show_label=show_label
    )
    return HTMLResponse(render_confidence_badge(badge))
