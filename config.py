import os

class Config:
    # Whole days added to every Hijri conversion (local moon-sighting correction)
    HIJRI_ADJUSTMENT = int(os.environ.get('HIJRI_ADJUSTMENT', 0))

    # "Today" is taken in this fixed offset from UTC (GMT+6, Bangladesh)
    UTC_OFFSET_HOURS = int(os.environ.get('UTC_OFFSET_HOURS', 6))

    FIRST_DAY_OF_WEEK = int(os.environ.get('FIRST_DAY_OF_WEEK', 0)) # 0 Sunday, 1 Monday
    UPCOMING_EVENTS_LIMIT = int(os.environ.get('UPCOMING_EVENTS_LIMIT', 8))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
