"""
Date interval math for project durations and tenure.
"""
from datetime import date
from typing import Optional

# Fractional policy: whole months plus (end.day - start.day) / 30 when the
# end day is later in the month, rounded to one decimal.
DURATION_POLICY = 'fractional'
DAYS_PER_MONTH = 30
DURATION_PRECISION = 1


def round_months(value: float) -> float:
    return round(value, DURATION_PRECISION)


def months_between(start: date, end: date) -> float:
    """
    Elapsed months between two dates.

    Never negative: swapped or malformed ranges yield 0.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day > start.day:
        months += (end.day - start.day) / DAYS_PER_MONTH
    return max(0.0, float(round_months(months)))


def tenure_months(start: Optional[date], today: Optional[date] = None) -> float:
    """
    Tenure measured directly from a recorded start date.

    A missing start date means no recorded tenure.
    """
    if start is None:
        return 0.0
    return months_between(start, today or date.today())
