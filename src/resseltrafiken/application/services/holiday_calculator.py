"""Swedish public holiday calculation."""

from datetime import date, timedelta
from functools import lru_cache

FIXED_HOLIDAYS: dict[str, str] = {
    "01-01": "Nyårsdagen",
    "01-06": "Trettondedag jul",
    "05-01": "Första maj",
    "06-06": "Nationaldagen",
    "12-24": "Julafton",
    "12-25": "Juldagen",
    "12-26": "Annandag jul",
    "12-31": "Nyårsafton",
}

EASTER_MIN_YEAR = 1583
EASTER_MAX_YEAR = 4099

_FRIDAY = 4


def format_month_day(day: date) -> str:
    """Format a date as the "MM-DD" key used by holiday tables."""
    return f"{day.month:02d}-{day.day:02d}"


def calculate_easter(year: int) -> date:
    """Calculate Easter Sunday with the Meeus/Jones/Butcher algorithm.

    Args:
        year: Gregorian year between 1583 and 4099.

    Returns:
        The date of Easter Sunday.

    Raises:
        ValueError: If the year is outside the algorithm's valid range.
    """
    if not EASTER_MIN_YEAR <= year <= EASTER_MAX_YEAR:
        raise ValueError(
            f"Easter can only be calculated for {EASTER_MIN_YEAR}-{EASTER_MAX_YEAR}, got {year}"
        )
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


def calculate_midsummer(year: int) -> date:
    """Return Midsummer Eve, the Friday between June 19 and June 25."""
    june_19 = date(year, 6, 19)
    days_to_friday = (_FRIDAY - june_19.weekday()) % 7
    return june_19 + timedelta(days=days_to_friday)


@lru_cache(maxsize=16)
def _moving_holidays(year: int) -> tuple[tuple[str, str], ...]:
    easter = calculate_easter(year)
    midsummer = calculate_midsummer(year)
    holidays = [
        (easter, "Påskdagen"),
        (easter - timedelta(days=2), "Långfredagen"),
        (easter + timedelta(days=1), "Annandag påsk"),
        (easter + timedelta(days=39), "Kristi himmelsfärdsdag"),
        (easter + timedelta(days=49), "Pingstdagen"),
        (midsummer, "Midsommarafton"),
        (midsummer + timedelta(days=1), "Midsommardagen"),
    ]
    return tuple((format_month_day(day), name) for day, name in holidays)


def get_moving_holidays(year: int) -> dict[str, str]:
    """Return the holidays whose date depends on the year, keyed by "MM-DD"."""
    return dict(_moving_holidays(year))


def get_holidays(year: int) -> dict[str, str]:
    """Return the full holiday table for a year, keyed by "MM-DD"."""
    holidays = dict(FIXED_HOLIDAYS)
    holidays.update(get_moving_holidays(year))
    return holidays


def holiday_name(day: date) -> str | None:
    """Return the name of the holiday falling on a date, or None."""
    key = format_month_day(day)
    if key in FIXED_HOLIDAYS:
        return FIXED_HOLIDAYS[key]
    return get_moving_holidays(day.year).get(key)


def is_holiday(day: date) -> bool:
    """Return True if the date is a fixed or moving Swedish holiday."""
    return holiday_name(day) is not None
