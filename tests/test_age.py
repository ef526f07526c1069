from datetime import date, datetime

import pytest

from growth_engine import standards
from growth_engine.models.age import age_in_months, detailed_age


def test_age_in_months_from_strings():
    # 274 days
    assert age_in_months("2024-01-15", "2024-10-15") == 9.0


def test_age_in_months_counts_started_days():
    birth = datetime(2024, 1, 1, 0, 0)
    assert age_in_months(birth, datetime(2024, 1, 31, 1, 0)) == \
        round(31 / 30.44, 1)


def test_age_in_months_ignores_order():
    assert age_in_months(date(2024, 10, 15), date(2024, 1, 15)) == 9.0


def test_same_day_is_zero():
    assert age_in_months("2024-05-05", "2024-05-05") == 0.0


@pytest.mark.parametrize("birth,ref,expected", [
    ("2024-03-10", "2025-05-20", (1, 2, 10)),
    ("2024-01-15", "2026-01-10", (1, 11, 26)),
    ("2023-06-30", "2024-03-01", (0, 8, 0)),
    ("2020-02-29", "2024-02-29", (4, 0, 0)),
])
def test_detailed_age(birth, ref, expected):
    assert detailed_age(birth, ref) == expected


def test_detailed_age_defaults_to_today():
    years, months, days = detailed_age(date.today())
    assert (years, months, days) == (0, 0, 0)


def test_standards_surface_exposes_age_helpers():
    assert standards.age_in_months("2024-01-15", "2024-10-15") == 9.0
    assert standards.detailed_age("2024-01-15", "2026-01-10") == (1, 11, 26)
