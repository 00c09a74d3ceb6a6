from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import erfa
import pytest

from solartimes.julian import (
    calendar_from_julian_day,
    day_of_year,
    is_leap_year,
    julian_day,
    julian_day_from_components,
    julian_day_from_date,
    julian_day_from_datetime,
)


@pytest.mark.parametrize(
    ("year", "month", "day", "expected"),
    [
        (1957, 10, 4.81, 2436116.31),
        (333, 1, 27.5, 1842713.0),
        (2000, 1, 1.5, 2451545.0),
        (1999, 1, 1.0, 2451179.5),
        (1987, 1, 27.0, 2446822.5),
        (1987, 6, 19.5, 2446966.0),
        (1988, 1, 27.0, 2447187.5),
        (1988, 6, 19.5, 2447332.0),
        (1900, 1, 1.0, 2415020.5),
        (1600, 1, 1.0, 2305447.5),
        (1600, 12, 31.0, 2305812.5),
        (837, 4, 10.3, 2026871.8),
        (-1000, 7, 12.5, 1356001.0),
        (-4712, 1, 1.5, 0.0),
    ],
)
def test_julian_day_reference_table(year: int, month: int, day: float, expected: float) -> None:
    assert julian_day(year, month, day) == pytest.approx(expected, abs=1e-6)


def test_julian_day_exact_for_half_days():
    assert julian_day(2000, 1, 1.5) == 2451545.0
    assert julian_day(-4712, 1, 1.5) == 0.0
    assert julian_day(-1000, 7, 12.5) == 1356001.0


def test_gregorian_cutover():
    # 1582-10-04 (Julian) is followed directly by 1582-10-15 (Gregorian).
    assert julian_day(1582, 10, 4.0) == 2299159.5
    assert julian_day(1582, 10, 15.0) == 2299160.5
    assert julian_day(1582, 11, 1.0) == 2299177.5
    assert julian_day(1582, 12, 1.0) == 2299207.5


def test_out_of_range_month_is_not_rejected():
    # Month 13 of 1999 is arithmetically January 2000.
    assert julian_day(1999, 13, 1.0) == julian_day(2000, 1, 1.0)


def test_components_fold_time_of_day():
    assert julian_day_from_components(1957, 10, 4, 19, 26, 24) == pytest.approx(2436116.31, abs=1e-6)
    assert julian_day_from_components(2000, 1, 1, 12) == 2451545.0


def test_datetime_conversion_uses_utc():
    local = datetime(2000, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert julian_day_from_datetime(local) == pytest.approx(2451545.0)


def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        julian_day_from_datetime(datetime(2000, 1, 1, 12))


@pytest.mark.parametrize(
    "value",
    [date(1858, 11, 17), date(1957, 10, 4), date(2000, 2, 29), date(2024, 12, 31), date(2100, 3, 1)],
)
def test_gregorian_dates_match_erfa(value: date) -> None:
    djm0, djm = erfa.cal2jd(value.year, value.month, value.day)
    assert julian_day_from_date(value) == pytest.approx(djm0 + djm, abs=1e-9)


@pytest.mark.parametrize("jd", [2436116.31, 2451545.0, 2460000.75, 2415020.5])
def test_calendar_from_julian_day_matches_erfa(jd: float) -> None:
    year, month, day, fraction = erfa.jd2cal(jd, 0.0)
    result = calendar_from_julian_day(jd)
    assert result[:2] == (year, month)
    assert result[2] == pytest.approx(day + fraction, abs=1e-6)


@pytest.mark.parametrize(
    ("year", "month", "day"),
    [(1957, 10, 4.81), (333, 1, 27.5), (-1000, 7, 12.5), (1582, 10, 15.0), (1582, 10, 4.0)],
)
def test_calendar_from_julian_day_inverts_julian_day(year: int, month: int, day: float) -> None:
    y, m, d = calendar_from_julian_day(julian_day(year, month, day))
    assert (y, m) == (year, month)
    assert d == pytest.approx(day, abs=1e-6)


def test_leap_years():
    assert is_leap_year(2000)
    assert is_leap_year(2024)
    assert not is_leap_year(1900)
    assert not is_leap_year(2023)


def test_day_of_year():
    # Meeus examples 7.f and 7.g.
    assert day_of_year(julian_day(1978, 11, 14.0)) == 318
    assert day_of_year(julian_day(1988, 4, 22.0)) == 113
    assert day_of_year(julian_day(2000, 1, 1.5)) == pytest.approx(1.5)
