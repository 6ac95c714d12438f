from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from wealthplanner.core.recurrence import events_for_month
from wealthplanner.core.rounding import round_half_up
from wealthplanner.log import get_logger
from wealthplanner.models import ProjectionParameters, ProjectionPoint

logger = get_logger(__name__)

MONTHS_PER_YEAR = 12


def simulate_wealth_curve(
    params: ProjectionParameters,
    current_year: Optional[int] = None,
) -> List[ProjectionPoint]:
    """
    Walk the wealth forward month by month and sample it once a year.

    Returns projectionYears + 1 points, one per calendar year starting at
    current_year (defaults to this year, UTC).

    Year 0 is a baseline: its point is initialValue as given and none of
    that year's months are simulated. For every later year, each month:
      1) grow by annualInterestRate / 12 (plain division, not the 12th root)
      2) add/subtract every event firing that month, in the given order
      3) floor the value at zero

    Values keep full precision between months; only the yearly points are
    rounded to cents.
    """
    year0 = current_year if current_year is not None else datetime.now(timezone.utc).year
    monthly_rate = params.annualInterestRate / MONTHS_PER_YEAR

    logger.debug(
        "simulating wealth curve start_year=%s years=%s rate=%s events=%s",
        year0,
        params.projectionYears,
        params.annualInterestRate,
        len(params.events),
    )

    value = float(params.initialValue)
    points: List[ProjectionPoint] = []

    for offset in range(params.projectionYears + 1):
        target_year = year0 + offset

        if offset > 0:
            for month in range(1, MONTHS_PER_YEAR + 1):
                value = value * (1 + monthly_rate)

                for event in events_for_month(params.events, (target_year, month)):
                    value += event.signed_amount

                # negative carry is dropped, not remembered
                value = max(0.0, value)

        points.append(ProjectionPoint(year=target_year, projectedValue=round_half_up(value, 2)))

    return points


__all__ = [
    "MONTHS_PER_YEAR",
    "simulate_wealth_curve",
]
