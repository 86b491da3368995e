"""Static table of Islamic observances and lookups over it."""

from dataclasses import dataclass

from calendar_core import (
    HIJRI_MONTHS,
    hijri_date,
    hijri_month_length,
    hijri_to_gregorian,
    reject_input,
    to_civil_date,
)


@dataclass(frozen=True)
class IslamicEvent:
    name: str
    month: int
    day: int

    @property
    def month_name(self):
        return HIJRI_MONTHS[self.month - 1]

    def to_dict(self):
        return {
            'name': self.name,
            'month': self.month,
            'month_name': self.month_name,
            'day': self.day,
        }


ISLAMIC_EVENTS = (
    IslamicEvent("Ramadan Start", 9, 1),
    IslamicEvent("Eid-ul-Fitr", 10, 1),
    IslamicEvent("Eid-ul-Adha", 12, 10),
    IslamicEvent("Ashura", 1, 10),
    IslamicEvent("Shab-e-Barat", 8, 15),
    IslamicEvent("Shab-e-Qadr", 9, 27),
    IslamicEvent("Milad-un-Nabi", 3, 12),
    IslamicEvent("Islamic New Year", 1, 1),
)


def events_on(hijri):
    """Observances that fall on the given Hijri day."""
    return [e for e in ISLAMIC_EVENTS if e.month == hijri.month and e.day == hijri.day]


def next_occurrence(event, from_date, adjustment=0):
    """First civil date on or after ``from_date`` on which ``event`` falls."""
    start = to_civil_date(from_date)
    year = hijri_date(start, adjustment).year
    # The observance is at most one Hijri year away.
    for candidate_year in (year, year + 1):
        if event.day > hijri_month_length(candidate_year, event.month):
            continue
        occurrence = hijri_to_gregorian(candidate_year, event.month, event.day, adjustment)
        if occurrence >= start:
            return occurrence
    raise reject_input(f"{event.name} has no occurrence after {start}")


def upcoming_events(from_date, adjustment=0, limit=None):
    """
    Every observance paired with its next occurrence, soonest first.

    Returns a list of dicts with the event fields plus ``date`` (ISO string)
    and ``days_until``.
    """
    if limit is not None and limit < 0:
        raise reject_input(f"limit must not be negative, got {limit}")
    start = to_civil_date(from_date)
    upcoming = []
    for event in ISLAMIC_EVENTS:
        occurrence = next_occurrence(event, start, adjustment)
        item = event.to_dict()
        item['date'] = occurrence.isoformat()
        item['days_until'] = (occurrence - start).days
        upcoming.append(item)
    upcoming.sort(key=lambda item: (item['days_until'], item['name']))
    if limit is not None:
        upcoming = upcoming[:limit]
    return upcoming
