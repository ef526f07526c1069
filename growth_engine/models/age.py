"""
Age helpers for turning visit dates into the ages the standards are keyed on.
"""
import calendar
import math
from datetime import date, datetime
from typing import Tuple, Union

from config.settings import DAYS_PER_MONTH

DateLike = Union[date, datetime, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value)


def age_in_months(birth_date: DateLike, measured_on: DateLike) -> float:
    """Started days between the two dates / 30.44, to one decimal."""
    delta = _as_datetime(measured_on) - _as_datetime(birth_date)
    days = math.ceil(abs(delta.total_seconds()) / 86400)
    return round(days / DAYS_PER_MONTH, 1)


def detailed_age(birth_date: DateLike, reference_date: DateLike = None) -> Tuple[int, int, int]:
    """Calendar age as (years, months, days), borrowing days from the previous month."""
    birth = _as_date(birth_date)
    ref = _as_date(reference_date) if reference_date is not None else date.today()

    years = ref.year - birth.year
    months = ref.month - birth.month
    days = ref.day - birth.day

    if days < 0:
        months -= 1
        prev_year, prev_month = (ref.year, ref.month - 1) if ref.month > 1 \
            else (ref.year - 1, 12)
        days += calendar.monthrange(prev_year, prev_month)[1]

    if months < 0:
        years -= 1
        months += 12

    return years, months, days
