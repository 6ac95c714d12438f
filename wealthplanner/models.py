from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    INVESTMENT = "INVESTMENT"
    WITHDRAWAL = "WITHDRAWAL"
    BONUS = "BONUS"
    INHERITANCE = "INHERITANCE"
    LOAN = "LOAN"

    @property
    def sign(self) -> int:
        """+1 if the event adds to wealth, -1 if it draws from it."""
        try:
            return _KIND_SIGNS[self]
        except KeyError:
            raise ValueError(f"no sign defined for event kind {self.value}") from None


_KIND_SIGNS: Dict[EventKind, int] = {
    EventKind.INCOME: 1,
    EventKind.BONUS: 1,
    EventKind.INHERITANCE: 1,
    EventKind.INVESTMENT: 1,
    EventKind.EXPENSE: -1,
    EventKind.WITHDRAWAL: -1,
    EventKind.LOAN: -1,
}


class Recurrence(str, Enum):
    ONCE = "ONCE"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    ANNUALLY = "ANNUALLY"


class CashFlowEvent(BaseModel):
    """One recurring or one-off money movement.

    amount is always a magnitude; the direction comes from kind.
    Dates only matter down to the month.
    """

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    amount: float = Field(ge=0)
    recurrence: Recurrence
    startDate: date
    endDate: Optional[date] = None
    description: str = ""

    @property
    def signed_amount(self) -> float:
        return self.kind.sign * self.amount


class ProjectionParameters(BaseModel):
    initialValue: float
    annualInterestRate: float
    events: List[CashFlowEvent] = Field(default_factory=list)
    projectionYears: int


class ProjectionPoint(BaseModel):
    year: int
    projectedValue: float = Field(ge=0)


class PortfolioMetrics(BaseModel):
    finalValue: float
    totalGain: float
    totalGainPercent: float
    # percentage, e.g. 10.0 means 10% a year
    cagr: float
    projectionYears: int


class SuggestionType(str, Enum):
    CONGRATULATIONS = "CONGRATULATIONS"
    INCREASE_CONTRIBUTION = "INCREASE_CONTRIBUTION"
    ADJUST_ALLOCATION = "ADJUST_ALLOCATION"


class ContributionSuggestion(BaseModel):
    type: SuggestionType
    description: str
    suggestedValue: Optional[float] = None
    # months
    suggestedPeriod: Optional[int] = None


class AlignmentCategory(str, Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class WalletPosition(BaseModel):
    """A wallet as seen by the alignment check: what it holds vs. what the plan says."""

    currentValue: float = Field(ge=0)
    totalPatrimony: float = Field(ge=0)


class AlignmentData(BaseModel):
    currentPatrimony: float
    plannedPatrimony: float
    alignmentPercent: float
    category: AlignmentCategory


class EventSummary(BaseModel):
    totalEvents: int
    totalIncome: float
    totalExpenses: float
    totalInvestments: float
    netFlow: float
