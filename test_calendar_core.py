import unittest
from datetime import date, datetime, timedelta, timezone

from calendar_core import (
    InvalidInput, HijriDate, hijri_date, bengali_date, hijri_to_gregorian,
    hijri_month_length, is_hijri_leap, to_civil_date, to_bangla_number,
    from_bangla_number, format_gregorian_bangla, format_hijri_bangla,
    format_bengali, is_gregorian_leap,
)


def daterange(start, end):
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


class HijriConversionTestCase(unittest.TestCase):
    def test_pinned_fixtures(self):
        self.assertEqual(hijri_date(date(2000, 1, 1)),
                         HijriDate(day=24, month=9, month_name='Ramadan', year=1420))
        h = hijri_date(date(2024, 3, 11))
        self.assertEqual((h.day, h.month, h.year), (1, 9, 1445))

    def test_adjustment_shifts_input(self):
        for day in daterange(date(2023, 12, 1), date(2024, 2, 1)):
            self.assertEqual(hijri_date(day, 1), hijri_date(day + timedelta(days=1)))
            self.assertEqual(hijri_date(day, -2), hijri_date(day - timedelta(days=2)))

    def test_adjustment_crosses_month(self):
        # 1 Ramadan 1445 minus one day is the last day of Sha'ban (29 days)
        h = hijri_date(date(2024, 3, 11), -1)
        self.assertEqual((h.day, h.month, h.month_name), (29, 8, "Sha'ban"))

    def test_ranges_and_day_by_day_progression(self):
        previous = None
        for day in daterange(date(1995, 1, 1), date(2035, 12, 31)):
            h = hijri_date(day)
            self.assertTrue(1 <= h.day <= 30)
            self.assertTrue(1 <= h.month <= 12)
            if previous is not None:
                if h.day == 1:
                    # Previous day closed its month at the cycle's length
                    self.assertEqual(previous.day, hijri_month_length(previous.year, previous.month))
                    if previous.month == 12:
                        self.assertEqual((h.month, h.year), (1, previous.year + 1))
                    else:
                        self.assertEqual((h.month, h.year), (previous.month + 1, previous.year))
                else:
                    self.assertEqual((h.day, h.month, h.year),
                                     (previous.day + 1, previous.month, previous.year))
            previous = h

    def test_total_for_far_past_and_future(self):
        for day in (date(1, 1, 1), date(600, 7, 1), date(9999, 12, 31)):
            h = hijri_date(day)
            self.assertTrue(1 <= h.day <= 30)
            self.assertTrue(1 <= h.month <= 12)

    def test_inverse_conversion(self):
        self.assertEqual(hijri_to_gregorian(1420, 9, 24), date(2000, 1, 1))
        self.assertEqual(hijri_to_gregorian(1446, 9, 1), date(2025, 3, 1))
        self.assertEqual(hijri_to_gregorian(1445, 9, 1, adjustment=1), date(2024, 3, 10))
        for day in daterange(date(2024, 1, 1), date(2024, 12, 31)):
            h = hijri_date(day, 2)
            self.assertEqual(hijri_to_gregorian(h.year, h.month, h.day, 2), day)

    def test_leap_years_and_month_lengths(self):
        self.assertTrue(is_hijri_leap(1445))
        self.assertFalse(is_hijri_leap(1446))
        self.assertEqual(hijri_month_length(1445, 12), 30)
        self.assertEqual(hijri_month_length(1446, 12), 29)
        self.assertEqual(hijri_month_length(1446, 1), 30)
        self.assertEqual(hijri_month_length(1446, 2), 29)
        with self.assertRaises(InvalidInput):
            hijri_to_gregorian(1446, 12, 30)
        with self.assertRaises(InvalidInput):
            hijri_to_gregorian(1446, 13, 1)

    def test_to_dict(self):
        self.assertEqual(hijri_date(date(2000, 1, 1)).to_dict(),
                         {'day': 24, 'month': 9, 'month_name': 'Ramadan', 'year': 1420})


class BengaliConversionTestCase(unittest.TestCase):
    def test_new_year_anchor(self):
        for year in (1999, 2000, 2023, 2024, 2100):
            b = bengali_date(date(year, 4, 14))
            self.assertEqual((b.day, b.month, b.month_name, b.year), (1, 1, 'Boishakh', year - 593))
            self.assertEqual(b.season, 'গ্রীষ্মকাল')

    def test_day_before_new_year(self):
        b = bengali_date(date(2024, 4, 13))
        self.assertEqual((b.day, b.month, b.month_name, b.year), (30, 12, 'Choitro', 1430))
        self.assertEqual(b.season, 'বসন্তকাল')

    def test_before_april_within_previous_year(self):
        b = bengali_date(date(2000, 1, 1))
        self.assertEqual((b.day, b.month, b.month_name, b.year), (18, 9, 'Poush', 1406))
        self.assertEqual(b.season, 'শীতকাল')

    def test_falgun_in_leap_year(self):
        # Bengali 1430 started 2023-04-14; its Falgun falls in leap 2024
        self.assertEqual(bengali_date(date(2024, 2, 13)).month_name, 'Falgun')
        self.assertEqual(bengali_date(date(2024, 2, 13)).day, 1)
        b = bengali_date(date(2024, 3, 14))
        self.assertEqual((b.day, b.month_name), (31, 'Falgun'))
        b = bengali_date(date(2024, 3, 15))
        self.assertEqual((b.day, b.month_name), (1, 'Choitro'))

    def test_falgun_in_common_year(self):
        b = bengali_date(date(2025, 3, 14))
        self.assertEqual((b.day, b.month_name, b.year), (30, 'Falgun', 1431))
        b = bengali_date(date(2025, 3, 15))
        self.assertEqual((b.day, b.month_name), (1, 'Choitro'))

    def test_century_year_is_not_leap(self):
        # Bengali 1506 started 2099-04-14; its Falgun falls in common 2100
        b = bengali_date(date(2100, 3, 14))
        self.assertEqual((b.day, b.month_name, b.year), (30, 'Falgun', 1506))
        b = bengali_date(date(2100, 3, 15))
        self.assertEqual((b.day, b.month_name, b.year), (1, 'Choitro', 1506))
        b = bengali_date(date(2100, 4, 13))
        self.assertEqual((b.day, b.month_name, b.year), (30, 'Choitro', 1506))

    def test_gregorian_leap_rule(self):
        for year in (1900, 2100, 2023):
            self.assertFalse(is_gregorian_leap(year))
        for year in (2000, 2024, 2400):
            self.assertTrue(is_gregorian_leap(year))

    def test_every_day_in_range(self):
        previous = None
        for day in daterange(date(1999, 1, 1), date(2029, 12, 31)):
            b = bengali_date(day)
            self.assertTrue(1 <= b.day <= 31)
            self.assertTrue(1 <= b.month <= 12)
            if b.month == 11:
                self.assertLessEqual(b.day, 31 if is_gregorian_leap(b.year + 594) else 30)
            elif b.month > 5:
                self.assertLessEqual(b.day, 30)
            if previous is not None and b.day != 1:
                self.assertEqual((b.day, b.month, b.year),
                                 (previous.day + 1, previous.month, previous.year))
            if previous is not None and b.day == 1:
                if b.month == 1:
                    self.assertEqual((previous.month, b.year), (12, previous.year + 1))
                else:
                    self.assertEqual(b.month, previous.month + 1)
            previous = b

    def test_first_year_of_calendar_range(self):
        b = bengali_date(date(1, 1, 1))
        self.assertEqual(b.year, -593)
        self.assertTrue(1 <= b.day <= 31)

    def test_month_name_bn(self):
        b = bengali_date(date(2024, 4, 14))
        self.assertEqual(b.month_name_bn, 'বৈশাখ')
        self.assertEqual(b.to_dict()['month_name_bn'], 'বৈশাখ')


class CivilDateInputTestCase(unittest.TestCase):
    def test_accepted_forms(self):
        expected = date(2000, 1, 1)
        self.assertEqual(to_civil_date(expected), expected)
        self.assertEqual(to_civil_date(datetime(2000, 1, 1, 23, 59)), expected)
        self.assertEqual(to_civil_date((2000, 1, 1)), expected)
        self.assertEqual(to_civil_date('2000-01-01'), expected)
        self.assertEqual(to_civil_date(946684800), expected)
        self.assertEqual(to_civil_date(946684800 + 86399.5), expected)

    def test_timestamps_floor_to_utc_day(self):
        self.assertEqual(to_civil_date(-1), date(1969, 12, 31))
        self.assertEqual(to_civil_date(0), date(1970, 1, 1))

    def test_aware_datetime_taken_in_utc(self):
        late_evening = datetime(2000, 1, 1, 23, 0, tzinfo=timezone(timedelta(hours=-2)))
        self.assertEqual(to_civil_date(late_evening), date(2000, 1, 2))

    def test_aware_datetime_at_range_edge(self):
        edges = [datetime(1, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=5))),
                 datetime(9999, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5)))]
        for value in edges:
            with self.assertRaises(InvalidInput):
                hijri_date(value)
            with self.assertRaises(InvalidInput):
                bengali_date(value)

    def test_timestamp_and_date_agree(self):
        self.assertEqual(hijri_date(946684800, 3), hijri_date(date(2000, 1, 4)))

    def test_rejected_inputs(self):
        bad_values = [(2024, 13, 1), (2024, 2, 30), float('nan'), float('inf'),
                      'not-a-date', '2024-13-01', '2024-W10-1', '20240101',
                      '2024-03-15T10:00', True, None, [2024, 1, 1], (2024, 1)]
        for value in bad_values:
            with self.assertRaises(InvalidInput):
                hijri_date(value)
            with self.assertRaises(InvalidInput):
                bengali_date(value)

    def test_rejected_adjustments(self):
        for adjustment in (1.5, '1', None, True):
            with self.assertRaises(InvalidInput):
                hijri_date(date(2000, 1, 1), adjustment)

    def test_invalid_input_is_value_error(self):
        with self.assertRaises(ValueError):
            hijri_date((2024, 0, 1))


class BanglaNumeralTestCase(unittest.TestCase):
    def test_digits_replaced_punctuation_kept(self):
        self.assertEqual(to_bangla_number('2024-03-15'), '২০২৪-০৩-১৫')
        self.assertEqual(to_bangla_number('0123456789'), '০১২৩৪৫৬৭৮৯')
        self.assertEqual(to_bangla_number('10:30 AM'), '১০:৩০ AM')

    def test_integers(self):
        self.assertEqual(to_bangla_number(1431), '১৪৩১')
        self.assertEqual(to_bangla_number(-5), '-৫')
        self.assertEqual(to_bangla_number(0), '০')

    def test_reverse(self):
        self.assertEqual(from_bangla_number('১৪৩১ সাল'), '1431 সাল')

    def test_display_strings(self):
        self.assertEqual(format_gregorian_bangla(date(2024, 4, 14)), '১৪ এপ্রিল, ২০২৪')
        self.assertEqual(format_hijri_bangla(hijri_date(date(2000, 1, 1))), '২৪ Ramadan ১৪২০ হি.')
        self.assertEqual(format_bengali(bengali_date(date(2024, 4, 14))), '১ বৈশাখ ১৪৩১')


if __name__ == '__main__':
    unittest.main()
