import calendar
from datetime import timedelta

from calendar_core import InvalidInput, bengali_date, hijri_date, to_bangla_number, to_civil_date
from islamic_events import events_on

WEEKDAY_NAMES = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']


def weekday_headers(first_day_of_week=0):
    return WEEKDAY_NAMES[first_day_of_week:] + WEEKDAY_NAMES[:first_day_of_week]


def day_cell(day, adjustment=0, in_month=True, today=None):
    """All three calendars for one civil day, as rendered in the month grid."""
    hijri = hijri_date(day, adjustment)
    bengali = bengali_date(day)
    return {
        'date': day.isoformat(),
        'day': day.day,
        'in_month': in_month,
        'is_today': today is not None and day == today,
        'hijri': hijri.to_dict(),
        'bengali': bengali.to_dict(),
        'bengali_day_bn': to_bangla_number(bengali.day),
        'events': [e.name for e in events_on(hijri)],
    }


def build_month(year, month, adjustment=0, first_day_of_week=0, today=None):
    """
    Whole weeks covering one Gregorian month.

    ``first_day_of_week`` is 0 for Sunday-started weeks and 1 for Monday.
    Days from the neighbouring months that fill the first and last week are
    included with ``in_month`` set to False.
    """
    if first_day_of_week not in (0, 1):
        raise InvalidInput("first_day_of_week must be 0 (Sunday) or 1 (Monday), got %r"
                           % (first_day_of_week,))
    first = to_civil_date((year, month, 1))
    last = first.replace(day=calendar.monthrange(year, month)[1])

    # isoweekday() % 7 numbers Sunday as 0.
    try:
        start = first - timedelta(days=(first.isoweekday() % 7 - first_day_of_week) % 7)
        end = last + timedelta(days=(first_day_of_week + 6 - last.isoweekday() % 7) % 7)
    except OverflowError:
        raise InvalidInput("%04d-%02d cannot be shown as whole weeks" % (year, month))

    weeks = []
    current = start
    while current <= end:
        week = []
        for _ in range(7):
            week.append(day_cell(current, adjustment, current.month == month, today))
            current += timedelta(days=1)
        weeks.append(week)

    return {
        'year': year,
        'month': month,
        'month_name': first.strftime('%B'),
        'adjustment': adjustment,
        'first_day_of_week': first_day_of_week,
        'weekdays': weekday_headers(first_day_of_week),
        'weeks': weeks,
    }
