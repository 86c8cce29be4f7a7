"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import List


def add_weeks(from_date: date, weeks: int) -> date:
    """Add whole weeks to a date"""
    return from_date + timedelta(weeks=weeks)


def weekly_due_dates(start: date, count: int) -> List[date]:
    """Due dates one week apart, the first falling one week after start"""
    return [add_weeks(start, i) for i in range(1, count + 1)]
