"""Planning analytics computed from a wealth curve or a patrimony gap."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from wealthplanner.core.projection import MONTHS_PER_YEAR
from wealthplanner.core.rounding import round_half_up
from wealthplanner.log import get_logger
from wealthplanner.models import (
    AlignmentCategory,
    AlignmentData,
    CashFlowEvent,
    ContributionSuggestion,
    EventKind,
    EventSummary,
    PortfolioMetrics,
    ProjectionPoint,
    SuggestionType,
    WalletPosition,
)

logger = get_logger(__name__)

# Planning assumption for contribution sizing, independent of any simulated rate.
PLANNING_ANNUAL_RATE = 0.04
PLANNING_MONTHLY_RATE = PLANNING_ANNUAL_RATE / MONTHS_PER_YEAR

# accelerated plan: 70% of the horizon, never shorter than two years
ACCELERATED_HORIZON_SHARE = 0.7
ACCELERATED_MIN_MONTHS = 24

ALLOCATION_GAP_THRESHOLD = 0.5


def annuity_factor(monthly_rate: float, months: float) -> float:
    """Future value of 1 paid at the end of each month for `months` months."""
    return ((1 + monthly_rate) ** months - 1) / monthly_rate


def generate_suggestions(
    current_patrimony: float,
    target_patrimony: float,
    time_horizon_years: int,
    current_monthly_contribution: float = 0.0,
) -> List[ContributionSuggestion]:
    """
    Suggest how to close the gap between current and target patrimony.

    Order of the result:
      1) CONGRATULATIONS alone, if there is no gap
      2) INCREASE_CONTRIBUTION over the full horizon, if the current
         contribution is not enough
      3) INCREASE_CONTRIBUTION over a shorter horizon, if that asks for more
      4) ADJUST_ALLOCATION, if the gap is over half of the target
    """
    gap = target_patrimony - current_patrimony

    if gap <= 0:
        return [
            ContributionSuggestion(
                type=SuggestionType.CONGRATULATIONS,
                description="Congratulations! You have already reached your wealth goal.",
                suggestedValue=0,
                suggestedPeriod=0,
            )
        ]

    if time_horizon_years < 1:
        raise ValueError("time horizon must be at least one year to size contributions")

    suggestions: List[ContributionSuggestion] = []

    months_remaining = time_horizon_years * MONTHS_PER_YEAR
    required = gap / annuity_factor(PLANNING_MONTHLY_RATE, months_remaining)
    additional = required - current_monthly_contribution

    if additional > 0:
        amount = round_half_up(additional, 0)
        suggestions.append(
            ContributionSuggestion(
                type=SuggestionType.INCREASE_CONTRIBUTION,
                description=(
                    f"Increase your monthly contribution by {amount:,.0f} "
                    f"for {time_horizon_years} years to reach your goal."
                ),
                suggestedValue=amount,
                suggestedPeriod=months_remaining,
            )
        )

        shorter_period = max(ACCELERATED_MIN_MONTHS, months_remaining * ACCELERATED_HORIZON_SHARE)
        higher = gap / annuity_factor(PLANNING_MONTHLY_RATE, shorter_period) - current_monthly_contribution

        if higher > additional:
            higher_amount = round_half_up(higher, 0)
            suggestions.append(
                ContributionSuggestion(
                    type=SuggestionType.INCREASE_CONTRIBUTION,
                    description=(
                        f"Alternatively, increase it by {higher_amount:,.0f} "
                        f"for {round_half_up(shorter_period / MONTHS_PER_YEAR, 0):.0f} years "
                        "to reach your goal sooner."
                    ),
                    suggestedValue=higher_amount,
                    suggestedPeriod=int(round_half_up(shorter_period, 0)),
                )
            )

    # with no positive target, the whole gap is unplanned
    if target_patrimony <= 0 or gap / target_patrimony > ALLOCATION_GAP_THRESHOLD:
        suggestions.append(
            ContributionSuggestion(
                type=SuggestionType.ADJUST_ALLOCATION,
                description=(
                    "Consider reviewing your asset allocation towards a more "
                    "aggressive strategy aiming at higher returns."
                ),
            )
        )

    logger.debug("generated %s suggestions for gap=%.2f", len(suggestions), gap)
    return suggestions


def calculate_metrics(
    curve: Sequence[ProjectionPoint],
    initial_value: float,
) -> Optional[PortfolioMetrics]:
    """Summarize a wealth curve. Returns None for an empty curve."""
    if not curve:
        return None

    final_value = curve[-1].projectedValue
    total_years = len(curve) - 1

    # a zero start has no meaningful growth rate
    if total_years > 0 and initial_value > 0:
        cagr = (final_value / initial_value) ** (1 / total_years) - 1
    else:
        cagr = 0.0

    total_gain = final_value - initial_value
    total_gain_percent = total_gain / initial_value * 100 if initial_value > 0 else 0.0

    return PortfolioMetrics(
        finalValue=round_half_up(final_value, 2),
        totalGain=round_half_up(total_gain, 2),
        totalGainPercent=round_half_up(total_gain_percent, 2),
        cagr=round_half_up(cagr * 100, 2),
        projectionYears=total_years,
    )


def categorize_alignment(alignment_percent: float) -> AlignmentCategory:
    if alignment_percent > 90:
        return AlignmentCategory.EXCELLENT
    elif alignment_percent >= 70:
        return AlignmentCategory.GOOD
    elif alignment_percent >= 50:
        return AlignmentCategory.WARNING
    return AlignmentCategory.CRITICAL


def calculate_alignment(wallets: Iterable[WalletPosition]) -> AlignmentData:
    """How far the wallets' current value is along the planned patrimony."""
    wallets = list(wallets)
    current = sum(wallet.currentValue for wallet in wallets)
    planned = sum(wallet.totalPatrimony for wallet in wallets)

    alignment_percent = current / planned * 100 if planned > 0 else 0.0

    return AlignmentData(
        currentPatrimony=current,
        plannedPatrimony=planned,
        alignmentPercent=round_half_up(alignment_percent, 2),
        category=categorize_alignment(alignment_percent),
    )


def summarize_events(events: Iterable[CashFlowEvent]) -> EventSummary:
    """Totals per direction over the raw event amounts (recurrence is not expanded)."""
    events = list(events)
    income_kinds = {EventKind.INCOME, EventKind.BONUS, EventKind.INHERITANCE}
    expense_kinds = {EventKind.EXPENSE, EventKind.WITHDRAWAL, EventKind.LOAN}

    total_income = sum(e.amount for e in events if e.kind in income_kinds)
    total_expenses = sum(e.amount for e in events if e.kind in expense_kinds)
    total_investments = sum(e.amount for e in events if e.kind == EventKind.INVESTMENT)

    return EventSummary(
        totalEvents=len(events),
        totalIncome=total_income,
        totalExpenses=total_expenses,
        totalInvestments=total_investments,
        netFlow=total_income - total_expenses,
    )


__all__ = [
    "PLANNING_ANNUAL_RATE",
    "PLANNING_MONTHLY_RATE",
    "annuity_factor",
    "generate_suggestions",
    "calculate_metrics",
    "categorize_alignment",
    "calculate_alignment",
    "summarize_events",
]
