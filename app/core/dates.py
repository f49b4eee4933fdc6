# app/core/dates.py

MIN_VALID_YEAR = 1800
MAX_VALID_YEAR = 9999

THIRTY_DAY_MONTHS = (4, 6, 9, 11)

# Widths of the YYYY, MM and DD segments
SEGMENT_WIDTHS = (4, 2, 2)


def is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _parse_segment(segment: str, width: int):
    """
    Parse one date segment; returns None when it is not exactly `width` ASCII digits.
    """
    if len(segment) != width or not (segment.isascii() and segment.isdigit()):
        return None
    return int(segment)


def is_date_valid(text) -> bool:
    """
    Check a YYYY-MM-DD string against the Gregorian calendar.

    Years outside [1800, 9999] are rejected even when the date exists.
    """
    if not isinstance(text, str) or len(text) != 10:
        return False

    segments = text.split("-")
    if len(segments) != len(SEGMENT_WIDTHS):
        return False

    parts = []
    for segment, width in zip(segments, SEGMENT_WIDTHS):
        value = _parse_segment(segment, width)
        if value is None:
            return False
        parts.append(value)

    year, month, day = parts

    if year < MIN_VALID_YEAR or year > MAX_VALID_YEAR:
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > 31:
        return False

    if month == 2:
        return day <= (29 if is_leap(year) else 28)

    if month in THIRTY_DAY_MONTHS:
        return day <= 30

    return True
