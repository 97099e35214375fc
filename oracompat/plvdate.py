"""Business-day calendar modelled on the PLVdate package."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

__all__ = [
    "CalendarError",
    "BusinessCalendar",
    "easter_sunday",
    "days_inmonth",
    "isleapyear",
    "version",
    "MAX_HOLIDAYS",
    "MAX_EXCEPTIONS",
    "DAY_NAMES",
    "COUNTRIES",
]

PLVDATE_VERSION = "PostgreSQL PLVdate, version 3.7, October 2018"

MAX_HOLIDAYS = 30
MAX_EXCEPTIONS = 50

# Index is the day-of-week number used throughout: 0 is Sunday.
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday",
             "Thursday", "Friday", "Saturday")
_SUNDAY = 0
_SATURDAY = 6
_ALL_DAYS = frozenset(range(7))

COUNTRIES = ("Czech", "Germany", "Poland", "Austria",
             "Slovakia", "Russia", "Gb", "Usa")
_CZECH = 0


class CalendarError(ValueError):
    """Raised for invalid calendar settings or dates out of range."""


def _md(pairs: Iterable[tuple[int, int]]) -> frozenset[tuple[int, int]]:
    """Turn (day, month) pairs into a set of (month, day) pairs."""
    return frozenset((month, day) for day, month in pairs)


@dataclass(frozen=True)
class _Culture:
    nonbizdays: frozenset[int]
    use_easter: bool
    use_great_friday: bool
    holidays: frozenset[tuple[int, int]]


_WEEKEND = frozenset({_SUNDAY, _SATURDAY})

_CULTURES = (
    _Culture(_WEEKEND, True, True, _md([
        (1, 1), (1, 5), (8, 5), (5, 7), (6, 7), (28, 9),
        (28, 10), (17, 11), (24, 12), (25, 12), (26, 12)])),
    _Culture(_WEEKEND, True, True, _md([
        (1, 1), (1, 5), (25, 5), (4, 6), (5, 6),
        (15, 8), (3, 10), (25, 12), (26, 12)])),
    _Culture(_WEEKEND, True, False, _md([
        (1, 1), (1, 5), (3, 5), (15, 6), (15, 8),
        (1, 11), (11, 11), (25, 12), (26, 12)])),
    _Culture(_WEEKEND, True, False, _md([
        (1, 1), (6, 1), (1, 5), (25, 5), (4, 6),
        (5, 6), (15, 6), (15, 8), (26, 10), (1, 11),
        (8, 12), (25, 12), (26, 12)])),
    _Culture(_WEEKEND, True, True, _md([
        (1, 1), (6, 1), (1, 5), (8, 5), (5, 7),
        (29, 8), (1, 9), (15, 9), (1, 11), (17, 11),
        (24, 12), (25, 12), (26, 12)])),
    _Culture(_WEEKEND, False, False, _md([
        (1, 1), (2, 1), (3, 1), (4, 1), (5, 1),
        (7, 1), (23, 2), (8, 3), (1, 5), (9, 5),
        (12, 6), (4, 11)])),
    _Culture(_WEEKEND, True, True, _md([
        (1, 1), (2, 1), (1, 5), (29, 5), (28, 8),
        (25, 12), (26, 12)])),
    _Culture(_WEEKEND, False, False, _md([
        (1, 1), (16, 1), (20, 2), (29, 5), (4, 7),
        (4, 9), (9, 10), (11, 11), (23, 11), (25, 12)])),
)


def _seq_search(value: str, names: Iterable[str], what: str) -> int:
    wanted = value.lower()
    for index, name in enumerate(names):
        if name.lower() == wanted:
            return index
    raise CalendarError(f"invalid value for {what}")


def _dow(day: date) -> int:
    """Day of week with 0 for Sunday."""
    return (day.weekday() + 1) % 7


def easter_sunday(year: int) -> date:
    """Date of Easter Sunday; defined for the years 1900 to 2099."""
    if year < 1900 or year > 2099:
        raise CalendarError(
            "date is out of range: Easter is defined only for years "
            "between 1900 and 2099")
    b = 255 - 11 * (year % 19)
    d = ((b - 21) % 30) + 21
    if d > 38:
        d -= 1
    e = (year + year // 4 + d + 1) % 7
    q = d + 7 - e
    if q < 32:
        return date(year, 3, q)
    return date(year, 4, q - 31)


def days_inmonth(day: date) -> int:
    """Number of days in the month of ``day``."""
    return calendar.monthrange(day.year, day.month)[1]


def isleapyear(day: date) -> bool:
    """Leap-year test as the calendar package defines it.

    Years divisible by 4 but not by 100 count, as do years before 400;
    other century years, 2000 among them, do not.
    """
    y = day.year
    return (y % 4 == 0 and y % 100 != 0) or (y // 400 == 0)


def version() -> str:
    """Version string of the calendar package."""
    return PLVDATE_VERSION


class BusinessCalendar:
    """Calendar of business days with weekly, yearly and one-off days off."""

    def __init__(self) -> None:
        self._nonbizdays: set[int] = set(_WEEKEND)
        self._use_easter = True
        self._use_great_friday = True
        self._include_start = True
        self._country: Optional[int] = None
        self._holidays: set[tuple[int, int]] = set()
        self._exceptions: set[date] = set()

    # -- checks -----------------------------------------------------------

    def _easter_holiday(self, day: date) -> bool:
        if not (self._use_great_friday or self._use_easter):
            return False
        if day.month not in (3, 4):
            return False
        sunday = easter_sunday(day.year)
        if self._use_easter and day in (sunday, sunday + timedelta(days=1)):
            return True
        if self._use_great_friday and day == sunday - timedelta(days=2):
            # Great Friday is a Czech holiday only since 2016.
            if self._country == _CZECH:
                return day.year >= 2016
            return True
        return False

    def _is_nonbizday(self, day: date, dow: int) -> bool:
        return (dow in self._nonbizdays
                or day in self._exceptions
                or self._easter_holiday(day)
                or (day.month, day.day) in self._holidays)

    # -- arithmetic -------------------------------------------------------

    def add_bizdays(self, day: date, days: int) -> date:
        """The date ``days`` business days after ``day`` (before, if negative)."""
        step = 1 if days > 0 else -1
        while days != 0:
            day += timedelta(days=step)
            if self._is_nonbizday(day, _dow(day)):
                continue
            days -= step
        return day

    def nearest_bizday(self, day: date) -> date:
        """The business day closest to ``day``; ties go to the earlier one."""
        before = self.add_bizdays(day, -1)
        after = self.add_bizdays(day, 1)
        if (day - before) > (after - day):
            return after
        return before

    def next_bizday(self, day: date) -> date:
        """The first business day after ``day``."""
        return self.add_bizdays(day, 1)

    def prev_bizday(self, day: date) -> date:
        """The last business day before ``day``."""
        return self.add_bizdays(day, -1)

    def bizdays_between(self, day1: date, day2: date) -> int:
        """Number of business days between two dates, in either order.

        The weekday test for each step is taken from the day before the
        one whose holidays are checked, as the package has always done.
        """
        if day1 > day2:
            day1, day2 = day2, day1
        count = 0
        start_is_bizday = False
        for offset in range((day2 - day1).days + 1):
            weekday_of = day1 + timedelta(days=offset)
            checked = weekday_of + timedelta(days=1)
            if self._is_nonbizday(checked, _dow(weekday_of)):
                continue
            if offset == 0:
                start_is_bizday = True
            count += 1
        if start_is_bizday and not self._include_start and count > 0:
            count -= 1
        return count

    def isbizday(self, day: date) -> bool:
        """Whether ``day`` is a business day."""
        return not self._is_nonbizday(day, _dow(day))

    # -- configuration ----------------------------------------------------

    def set_nonbizday_dow(self, dow: str) -> None:
        """Mark a weekday, given by name, as a day off every week."""
        d = _seq_search(dow, DAY_NAMES, "DAY/Day/day")
        if self._nonbizdays | {d} == _ALL_DAYS:
            raise CalendarError(
                "nonbizday registration error: one day in week have to be bizday")
        self._nonbizdays.add(d)

    def unset_nonbizday_dow(self, dow: str) -> None:
        """Make a weekday, given by name, a business day again."""
        d = _seq_search(dow, DAY_NAMES, "DAY/Day/day")
        self._nonbizdays.discard(d)

    def set_nonbizday_day(self, day: date, repeat: bool = False) -> None:
        """Register ``day`` as a day off; with ``repeat``, every year."""
        if repeat:
            if len(self._holidays) == MAX_HOLIDAYS:
                raise CalendarError(
                    "nonbizday registration error: too much registered nonbizdays")
            key = (day.month, day.day)
            if key in self._holidays:
                raise CalendarError(
                    "nonbizday registration error: date is registered")
            self._holidays.add(key)
        else:
            if len(self._exceptions) == MAX_EXCEPTIONS:
                raise CalendarError(
                    "nonbizday registration error: "
                    "too much registered nonrepeated nonbizdays")
            if day in self._exceptions:
                raise CalendarError(
                    "nonbizday registration error: date is registered")
            self._exceptions.add(day)

    def unset_nonbizday_day(self, day: date, repeat: bool = False) -> None:
        """Remove a registered day off; raise if it was not registered."""
        if repeat:
            key = (day.month, day.day)
            if key not in self._holidays:
                raise CalendarError(
                    "nonbizday unregistration error: nonbizday not found")
            self._holidays.remove(key)
        else:
            if day not in self._exceptions:
                raise CalendarError(
                    "nonbizday unregistration error: nonbizday not found")
            self._exceptions.remove(day)

    def use_easter(self, enabled: bool = True) -> None:
        """Whether Easter Sunday and Monday are days off."""
        self._use_easter = bool(enabled)

    def using_easter(self) -> bool:
        """Whether Easter Sunday and Monday are days off."""
        return self._use_easter

    def use_great_friday(self, enabled: bool = True) -> None:
        """Whether Great Friday is a day off."""
        self._use_great_friday = bool(enabled)

    def using_great_friday(self) -> bool:
        """Whether Great Friday is a day off."""
        return self._use_great_friday

    def include_start(self, enabled: bool = True) -> None:
        """Whether :meth:`bizdays_between` counts its first day."""
        self._include_start = bool(enabled)

    def including_start(self) -> bool:
        """Whether :meth:`bizdays_between` counts its first day."""
        return self._include_start

    def default_holidays(self, country: str) -> None:
        """Load the national settings of ``country``; one-off days are cleared."""
        index = _seq_search(country, COUNTRIES, "STATE/State/state")
        culture = _CULTURES[index]
        self._country = index
        self._nonbizdays = set(culture.nonbizdays)
        self._use_easter = culture.use_easter
        self._use_great_friday = culture.use_great_friday
        self._exceptions = set()
        self._holidays = set(culture.holidays)