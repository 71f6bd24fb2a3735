"""Suggestion schemas for request validation."""

from typing import Dict, Optional

from pydantic import BaseModel, Field

from finance_tracker.ui.suggestion_card import Suggestion


class SuggestionPayload(BaseModel):
    """Schema for an ML category suggestion."""

    category: str = Field(..., min_length=1)
    confidence: float = Field(..., ge=0, le=1, description="Model confidence between 0 and 1")
    scores: Optional[Dict[str, float]] = Field(None, description="Score per candidate category")

    def to_suggestion(self) -> Suggestion:
        return Suggestion.from_mapping(self.model_dump())


class SuggestionCardRequest(BaseModel):
    """Schema for rendering a suggestion review card."""

    suggestion: Optional[SuggestionPayload] = None
    busy: bool = False
    accept_url: str = Field(default="", description="Form target for the accept button")
    reject_url: str = Field(default="", description="Form target for the reject button")
