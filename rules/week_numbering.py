"""Local (week-of-month) and global (week-of-year) audit week numbers.

Weeks start on Sunday. A month's local weeks are 1-based and the first one
may be partial. Global numbers restart at 1 every January and continue
through December by summing the local week counts of earlier months.
Months are 0-based (0 = January) throughout.
"""
from __future__ import annotations

import calendar
import math
from datetime import date
from typing import List, Optional


def first_weekday_offset(year: int, month: int) -> int:
    """0-based weekday of the 1st of *month*, Sunday = 0."""
    return (date(year, month + 1, 1).weekday() + 1) % 7


def week_of_month(day: date) -> int:
    offset = first_weekday_offset(day.year, day.month - 1)
    return math.ceil((day.day + offset) / 7)


def local_weeks(year: int, month: int) -> List[int]:
    """Distinct local week numbers touched by the days of *month*, ascending."""
    days_in_month = calendar.monthrange(year, month + 1)[1]
    weeks: List[int] = []
    for day_number in range(1, days_in_month + 1):
        week = week_of_month(date(year, month + 1, day_number))
        if week not in weeks:
            weeks.append(week)
    return weeks


def count_weeks_in_month(year: int, month: int) -> int:
    return len(local_weeks(year, month))


def base_week_for_month(month: int, year: int, first_week_override: Optional[int] = None) -> int:
    if first_week_override is not None:
        return int(first_week_override)
    return sum(count_weeks_in_month(year, earlier) for earlier in range(month)) + 1


def get_global_week_numbers_for_month(month: int, year: int, first_week_override: Optional[int] = None) -> List[int]:
    base = base_week_for_month(month, year, first_week_override)
    return [base + (local - 1) for local in local_weeks(year, month)]
