"""Decide whether a cash-flow event fires in a given month."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Tuple

from wealthplanner.models import CashFlowEvent, Recurrence

YearMonth = Tuple[int, int]


def year_month(day: date) -> YearMonth:
    return (day.year, day.month)


def months_between(start: YearMonth, target: YearMonth) -> int:
    """Whole calendar months from start to target (negative if target is earlier)."""
    return (target[0] - start[0]) * 12 + (target[1] - start[1])


def event_applies(event: CashFlowEvent, target: YearMonth) -> bool:
    """
    Return True when event fires in the target (year, month).

    Bounds first:
      - never before the start month
      - never after the end month (the end month itself still counts)
    Then the recurrence rule:
      - ONCE:      only in the start month
      - MONTHLY:   every month in bounds
      - QUARTERLY: every third month counted from the start month
                   (not calendar quarters)
      - ANNUALLY:  every year in the start month
    """
    start = year_month(event.startDate)
    if start > target:
        return False
    if event.endDate is not None and year_month(event.endDate) < target:
        return False

    if event.recurrence == Recurrence.ONCE:
        return start == target
    elif event.recurrence == Recurrence.MONTHLY:
        return True
    elif event.recurrence == Recurrence.QUARTERLY:
        return months_between(start, target) % 3 == 0
    elif event.recurrence == Recurrence.ANNUALLY:
        return start[1] == target[1]

    raise ValueError(f"unsupported recurrence {event.recurrence!r}")


def events_for_month(events: Iterable[CashFlowEvent], target: YearMonth) -> List[CashFlowEvent]:
    """Events firing in target, in the order they were given."""
    return [event for event in events if event_applies(event, target)]


__all__ = [
    "YearMonth",
    "year_month",
    "months_between",
    "event_applies",
    "events_for_month",
]
