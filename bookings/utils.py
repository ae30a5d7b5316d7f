# bookings/utils.py
import re
from datetime import date, datetime

from .exceptions import InvalidDate, InvalidTimeFormat

TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    try:
        return datetime.strptime(str(value), "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise InvalidDate()


def parse_time(value):
    """
    "HH:MM" (24h) -> (hour, minute).
    Single-digit hours are accepted, "9:00" == "09:00".
    """
    match = TIME_PATTERN.match(str(value or "").strip())
    if not match:
        raise InvalidTimeFormat()

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat()

    return hour, minute


def to_minutes(value):
    hour, minute = parse_time(value)
    return hour * 60 + minute


def normalize_time(value):
    hour, minute = parse_time(value)
    return f"{hour:02}:{minute:02}"


def format_time_12h(value):
    # Display only; the overlap math always works on 24h minutes
    hour, minute = parse_time(value)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute:02} {suffix}"


def format_time_range(start, end):
    return f"{format_time_12h(start)} - {format_time_12h(end)}"
