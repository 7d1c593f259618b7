from datetime import date

from wst_core.common.dates import add_months, add_years, iter_days, month_bounds, previous_month


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 3, 31), 1) == date(2024, 4, 30)


def test_add_months_crosses_year_boundaries_both_ways():
    assert add_months(date(2024, 12, 15), 1) == date(2025, 1, 15)
    assert add_months(date(2025, 1, 15), -1) == date(2024, 12, 15)
    assert add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)


def test_add_years_from_leap_day():
    assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)
    assert add_years(date(2024, 1, 15), 1) == date(2025, 1, 15)


def test_previous_month_wraps_january():
    assert previous_month(month=1, year=2025) == (12, 2024)
    assert previous_month(month=7, year=2025) == (6, 2025)


def test_month_bounds_and_iter_days():
    start, end = month_bounds(month=2, year=2024)
    assert (start, end) == (date(2024, 2, 1), date(2024, 2, 29))

    days = list(iter_days(start, end))
    assert len(days) == 29
    assert days[0] == start and days[-1] == end

    assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []
