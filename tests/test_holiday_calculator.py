"""Tests for Swedish holiday calculation."""

from datetime import date

import pytest

from resseltrafiken.application.services.holiday_calculator import (
    FIXED_HOLIDAYS,
    calculate_easter,
    calculate_midsummer,
    get_holidays,
    get_moving_holidays,
    holiday_name,
    is_holiday,
)

FIXED_DATES = ["01-01", "01-06", "05-01", "06-06", "12-24", "12-25", "12-26", "12-31"]


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (1818, date(1818, 3, 22)),
        (1943, date(1943, 4, 25)),
        (2000, date(2000, 4, 23)),
        (2008, date(2008, 3, 23)),
        (2019, date(2019, 4, 21)),
        (2023, date(2023, 4, 9)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2026, date(2026, 4, 5)),
        (2038, date(2038, 4, 25)),
        (2285, date(2285, 3, 22)),
    ],
)
def test_calculate_easter_matches_known_dates(year: int, expected: date) -> None:
    """Given a year, when calculating Easter, then the published Easter Sunday is returned."""
    assert calculate_easter(year) == expected


@pytest.mark.parametrize("year", [1582, 4100])
def test_calculate_easter_rejects_years_outside_algorithm_range(year: int) -> None:
    """Given a year outside 1583-4099, when calculating Easter, then ValueError is raised."""
    with pytest.raises(ValueError, match="Easter can only be calculated"):
        calculate_easter(year)


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (2023, date(2023, 6, 23)),
        (2024, date(2024, 6, 21)),
        (2025, date(2025, 6, 20)),
        (2026, date(2026, 6, 19)),  # June 19 itself is a Friday
        (2027, date(2027, 6, 25)),  # Last possible date
    ],
)
def test_calculate_midsummer_is_friday_between_june_19_and_25(year: int, expected: date) -> None:
    """Given a year, when calculating Midsummer Eve, then the Friday in June 19-25 is returned."""
    midsummer = calculate_midsummer(year)

    assert midsummer == expected
    assert midsummer.weekday() == 4


@pytest.mark.parametrize("year", [1999, 2024, 2025, 2100])
def test_fixed_holidays_are_holidays_every_year(year: int) -> None:
    """Given any year, when checking the fixed dates, then all eight are holidays."""
    for key in FIXED_DATES:
        month, day = int(key[:2]), int(key[3:])
        assert is_holiday(date(year, month, day)), f"{year}-{key} should be a holiday"


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (
            2023,
            {
                "04-07": "Långfredagen",
                "04-09": "Påskdagen",
                "04-10": "Annandag påsk",
                "05-18": "Kristi himmelsfärdsdag",
                "05-28": "Pingstdagen",
                "06-23": "Midsommarafton",
                "06-24": "Midsommardagen",
            },
        ),
        (
            2024,
            {
                "03-29": "Långfredagen",
                "03-31": "Påskdagen",
                "04-01": "Annandag påsk",
                "05-09": "Kristi himmelsfärdsdag",
                "05-19": "Pingstdagen",
                "06-21": "Midsommarafton",
                "06-22": "Midsommardagen",
            },
        ),
        (
            2025,
            {
                "04-18": "Långfredagen",
                "04-20": "Påskdagen",
                "04-21": "Annandag påsk",
                "05-29": "Kristi himmelsfärdsdag",
                "06-08": "Pingstdagen",
                "06-20": "Midsommarafton",
                "06-21": "Midsommardagen",
            },
        ),
    ],
)
def test_moving_holidays_match_swedish_calendar(year: int, expected: dict[str, str]) -> None:
    """Given a year, when computing moving holidays, then they match the Swedish calendar."""
    assert get_moving_holidays(year) == expected


def test_get_holidays_merges_fixed_and_moving() -> None:
    """Given a year, when building the holiday table, then it holds 8 fixed and 7 moving dates."""
    holidays = get_holidays(2025)

    assert len(holidays) == 15
    for key, name in FIXED_HOLIDAYS.items():
        assert holidays[key] == name
    assert holidays["04-20"] == "Påskdagen"


def test_get_holidays_returns_independent_copies() -> None:
    """Given a holiday table, when the caller mutates it, then later tables are unaffected."""
    holidays = get_holidays(2025)
    holidays.clear()

    assert len(get_holidays(2025)) == 15


def test_moving_holidays_use_the_dates_own_year() -> None:
    """Given Easter dates of different years, when checking, then each year's table is used."""
    assert is_holiday(date(2024, 3, 31))
    assert not is_holiday(date(2025, 3, 31))
    assert is_holiday(date(2025, 4, 20))
    assert not is_holiday(date(2024, 4, 20))


def test_ordinary_days_are_not_holidays() -> None:
    """Given ordinary dates, when checking, then they are not holidays."""
    assert not is_holiday(date(2025, 3, 11))
    assert not is_holiday(date(2025, 6, 19))
    assert not is_holiday(date(2025, 12, 23))


def test_holiday_name() -> None:
    """Given holiday and ordinary dates, when looking up names, then Swedish names are returned."""
    assert holiday_name(date(2025, 12, 24)) == "Julafton"
    assert holiday_name(date(2025, 6, 20)) == "Midsommarafton"
    assert holiday_name(date(2025, 3, 11)) is None
