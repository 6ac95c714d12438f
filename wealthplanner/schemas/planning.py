"""Data contracts for goal planning endpoints."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from wealthplanner.models import CashFlowEvent, ContributionSuggestion, WalletPosition


class SuggestionRequest(BaseModel):
    """Current standing against a wealth target."""

    model_config = ConfigDict(extra="forbid")

    currentPatrimony: float = Field(..., ge=0)
    targetPatrimony: float = Field(..., gt=0)
    timeHorizonYears: int = Field(..., ge=1, le=100, description="Years left to reach the target.")
    currentMonthlyContribution: float = Field(0.0, ge=0)


class SuggestionResponse(BaseModel):
    suggestions: List[ContributionSuggestion]


class AlignmentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    wallets: List[WalletPosition] = Field(default_factory=list)


class EventSummaryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    events: List[CashFlowEvent] = Field(default_factory=list)
