"""
Calendar conversion core
========================
Converts a Gregorian (proleptic civil) date into

    - an Islamic (Hijri) date, using the tabular "Kuwaiti" arithmetic
      algorithm with a whole-day calibration adjustment, and
    - a Bengali solar date anchored to April 14 (1 Boishakh),

and renders numbers with Bengali numeral glyphs.

Everything here is a pure function of its arguments. Input is checked once,
in ``to_civil_date`` and ``_check_adjustment``; the arithmetic itself never
raises.

The Hijri result is an arithmetic approximation. It is not based on moon
sighting and can differ from the locally announced date by a day or two,
which is what the ``adjustment`` parameter is for.

Usage:
    >>> hijri_date(date(2000, 1, 1))
    HijriDate(day=24, month=9, month_name='Ramadan', year=1420)
    >>> bengali_date(date(2024, 4, 14)).month_name
    'Boishakh'
    >>> to_bangla_number("2024-03-15")
    '২০২৪-০৩-১৫'
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Tuple, Union

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """A caller supplied a date or adjustment the converters cannot accept."""


# =============================================================================
# Static tables
# =============================================================================

HIJRI_MONTHS: Tuple[str, ...] = (
    "Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani",
    "Jumada al-ula", "Jumada al-akhira", "Rajab", "Sha'ban",
    "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
)

BENGALI_MONTHS: Tuple[str, ...] = (
    "Boishakh", "Joishtho", "Ashar", "Shrabon", "Bhadro", "Ashwin",
    "Kartik", "Agrahayan", "Poush", "Magh", "Falgun", "Choitro",
)

BENGALI_MONTHS_BN: Tuple[str, ...] = (
    "বৈশাখ", "জ্যৈষ্ঠ", "আষাঢ়", "শ্রাবণ", "ভাদ্র", "আশ্বিন",
    "কার্তিক", "অগ্রহায়ণ", "পৌষ", "মাঘ", "ফাল্গুন", "চৈত্র",
)

# One season per two months, starting with Boishakh.
SEASONS: Tuple[str, ...] = (
    "গ্রীষ্মকাল", "বর্ষাকাল", "শরৎকাল", "হেমন্তকাল", "শীতকাল", "বসন্তকাল",
)

GREGORIAN_MONTHS_BN: Tuple[str, ...] = (
    "জানুয়ারি", "ফেব্রুয়ারি", "মার্চ", "এপ্রিল", "মে", "জুন",
    "জুলাই", "আগস্ট", "সেপ্টেম্বর", "অক্টোবর", "নভেম্বর", "ডিসেম্বর",
)

BANGLA_DIGITS = {
    '0': '০', '1': '১', '2': '২', '3': '৩', '4': '৪',
    '5': '৫', '6': '৬', '7': '৭', '8': '৮', '9': '৯',
}

_TO_BANGLA = str.maketrans(BANGLA_DIGITS)
_FROM_BANGLA = str.maketrans({v: k for k, v in BANGLA_DIGITS.items()})

# date.toordinal() of 0001-01-01 is 1; its Julian Day Number is 1721426.
_ORDINAL_TO_JDN = 1721425
_SECONDS_PER_DAY = 86400
_UNIX_EPOCH = date(1970, 1, 1)

# Bengali New Year falls on this Gregorian (month, day).
BENGALI_NEW_YEAR = (4, 14)
BENGALI_YEAR_OFFSET = 593


# =============================================================================
# Value types
# =============================================================================

@dataclass(frozen=True)
class HijriDate:
    day: int
    month: int
    month_name: str
    year: int

    def to_dict(self) -> dict:
        return {
            'day': self.day,
            'month': self.month,
            'month_name': self.month_name,
            'year': self.year,
        }


@dataclass(frozen=True)
class BengaliDate:
    day: int
    month: int
    month_name: str
    year: int
    season: str

    @property
    def month_name_bn(self) -> str:
        return BENGALI_MONTHS_BN[self.month - 1]

    def to_dict(self) -> dict:
        return {
            'day': self.day,
            'month': self.month,
            'month_name': self.month_name,
            'month_name_bn': self.month_name_bn,
            'year': self.year,
            'season': self.season,
        }


CivilDateLike = Union[date, datetime, Tuple[int, int, int], str, int, float]


# =============================================================================
# Input boundary
# =============================================================================

def to_civil_date(value: CivilDateLike) -> date:
    """
    Coerce ``value`` to a ``datetime.date``.

    Accepts a date, a datetime (time of day dropped; aware values are taken
    in UTC), a ``(year, month, day)`` tuple, an ISO ``YYYY-MM-DD`` string, or
    a POSIX timestamp in seconds (floored to its UTC day).

    Raises:
        InvalidInput: for anything that does not name a real calendar day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            try:
                value = value.astimezone(timezone.utc)
            except OverflowError:
                raise reject_input(f"datetime out of range in UTC: {value!r}")
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise reject_input(f"boolean is not a date: {value!r}")
    if isinstance(value, (int, float)):
        return _from_timestamp(value)
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), '%Y-%m-%d').date()
        except ValueError:
            raise reject_input(f"not an ISO date (YYYY-MM-DD): {value!r}")
    if isinstance(value, tuple) and len(value) == 3:
        year, month, day = value
        for part in value:
            if isinstance(part, bool) or not isinstance(part, int):
                raise reject_input(f"date components must be integers: {value!r}")
        try:
            return date(year, month, day)
        except ValueError as e:
            raise reject_input(f"invalid date {value!r}: {e}")
    raise reject_input(f"unsupported date value: {value!r}")


def _from_timestamp(value):
    if isinstance(value, float) and not math.isfinite(value):
        raise reject_input(f"timestamp must be finite: {value!r}")
    if isinstance(value, int):
        days = value // _SECONDS_PER_DAY
    else:
        days = math.floor(value / _SECONDS_PER_DAY)
    try:
        return _UNIX_EPOCH + timedelta(days=days)
    except OverflowError:
        raise reject_input(f"timestamp out of range: {value!r}")


def _check_adjustment(adjustment):
    if isinstance(adjustment, bool) or not isinstance(adjustment, int):
        raise reject_input(f"adjustment must be a whole number of days: {adjustment!r}")
    return adjustment


def reject_input(message):
    logger.debug("Rejected calendar input: %s", message)
    return InvalidInput(message)


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# =============================================================================
# Hijri
# =============================================================================

def julian_day_number(value: CivilDateLike) -> int:
    return to_civil_date(value).toordinal() + _ORDINAL_TO_JDN


def hijri_date(value: CivilDateLike, adjustment: int = 0) -> HijriDate:
    """
    Convert a civil date to the tabular Islamic calendar.

    ``adjustment`` shifts the result by whole days (moon-sighting
    calibration), exactly as if the input date had been shifted.
    """
    jdn = julian_day_number(value) + _check_adjustment(adjustment)
    return _jdn_to_hijri(jdn)


def _jdn_to_hijri(jdn):
    # Floor division keeps every intermediate in range for dates before the
    # Hijri epoch as well.
    l = jdn - 1948440 + 10632
    n = (l - 1) // 10631
    l = l - 10631 * n + 354
    j = ((10985 - l) // 5316) * ((50 * l) // 17719) + (l // 5670) * ((43 * l) // 15238)
    l = l - ((30 - j) // 15) * ((17719 * j) // 50) - (j // 16) * ((15238 * j) // 43) + 29
    month = (24 * l) // 709
    day = l - (709 * month) // 24
    year = 30 * n + j - 30
    return HijriDate(day=day, month=month, month_name=HIJRI_MONTHS[month - 1], year=year)


def is_hijri_leap(year: int) -> bool:
    """Leap years of the 30-year tabular cycle (11 per cycle)."""
    return (11 * year + 14) % 30 < 11


def hijri_month_length(year: int, month: int) -> int:
    if month == 12 and is_hijri_leap(year):
        return 30
    return 30 if month % 2 == 1 else 29


def hijri_to_gregorian(year: int, month: int, day: int, adjustment: int = 0) -> date:
    """
    Inverse of ``hijri_date``: the civil date that converts to the given
    Hijri day under the same ``adjustment``.
    """
    _check_adjustment(adjustment)
    for part in (year, month, day):
        if isinstance(part, bool) or not isinstance(part, int):
            raise reject_input(f"Hijri components must be integers: {(year, month, day)!r}")
    if not 1 <= month <= 12:
        raise reject_input(f"Hijri month must be in 1..12, got {month}")
    length = hijri_month_length(year, month)
    if not 1 <= day <= length:
        raise reject_input(f"Hijri day must be in 1..{length} for {HIJRI_MONTHS[month - 1]} {year}, got {day}")

    jdn = ((11 * year + 3) // 30 + 354 * year + 30 * month - (month - 1) // 2
           + day + 1948440 - 385)
    ordinal = jdn - _ORDINAL_TO_JDN - adjustment
    try:
        return date.fromordinal(ordinal)
    except (ValueError, OverflowError):
        raise reject_input(f"Hijri date {year}-{month}-{day} is outside the Gregorian range")


# =============================================================================
# Bengali
# =============================================================================

def bengali_month_lengths(falgun_leap: bool) -> Tuple[int, ...]:
    """Month lengths of one Bengali year, Boishakh first."""
    falgun = 31 if falgun_leap else 30
    return (31, 31, 31, 31, 31, 30, 30, 30, 30, 30, falgun, 30)


def bengali_date(value: CivilDateLike) -> BengaliDate:
    """
    Convert a civil date to the Bengali calendar.

    The Bengali year that owns the date starts on April 14 of ``start_year``.
    Falgun of that year falls in February of ``start_year + 1`` and takes the
    extra day when that Gregorian year is a leap year, so the month table
    always ends on the day before the next April 14.
    """
    civil = to_civil_date(value)
    month, day = BENGALI_NEW_YEAR
    new_year = date(civil.year, month, day)

    if civil >= new_year:
        start_year = civil.year
        start_ordinal = new_year.toordinal()
    else:
        start_year = civil.year - 1
        start_ordinal = new_year.toordinal() - (365 + int(is_gregorian_leap(civil.year)))

    diff = civil.toordinal() - start_ordinal
    index = 0
    for index, length in enumerate(bengali_month_lengths(is_gregorian_leap(start_year + 1))):
        if diff < length:
            break
        diff -= length

    return BengaliDate(
        day=diff + 1,
        month=index + 1,
        month_name=BENGALI_MONTHS[index],
        year=start_year - BENGALI_YEAR_OFFSET,
        season=SEASONS[index // 2],
    )


# =============================================================================
# Bengali numerals and display strings
# =============================================================================

def to_bangla_number(value) -> str:
    """Replace ASCII digits with Bengali numerals; other characters pass through."""
    return str(value).translate(_TO_BANGLA)


def from_bangla_number(text: str) -> str:
    return str(text).translate(_FROM_BANGLA)


def format_gregorian_bangla(value: CivilDateLike) -> str:
    civil = to_civil_date(value)
    return "%s %s, %s" % (
        to_bangla_number(civil.day),
        GREGORIAN_MONTHS_BN[civil.month - 1],
        to_bangla_number(civil.year),
    )


def format_hijri_bangla(hijri: HijriDate) -> str:
    return "%s %s %s হি." % (to_bangla_number(hijri.day), hijri.month_name,
                             to_bangla_number(hijri.year))


def format_bengali(bengali: BengaliDate) -> str:
    return "%s %s %s" % (to_bangla_number(bengali.day), bengali.month_name_bn,
                         to_bangla_number(bengali.year))
