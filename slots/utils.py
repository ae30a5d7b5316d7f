# slots/utils.py
from dataclasses import dataclass

from django.conf import settings

from bookings.utils import format_time_range, parse_date
from .constants import SlotStatus


@dataclass(frozen=True)
class Slot:
    hour: int
    start_time: str
    end_time: str
    label: str
    price: int
    status: str = SlotStatus.AVAILABLE


def generate_slot_grid(slot_date):
    """
    One slot per operating hour, contiguous and non-overlapping.
    Every slot starts out available; annotate_slots() tags past/booked.
    `slot_date` is only validated here, the grid is the same for every day.
    """
    parse_date(slot_date)

    venue = settings.VENUE
    slots = []

    for hour in range(venue["OPENING_HOUR"], venue["CLOSING_HOUR"]):
        start = f"{hour:02}:00"
        end = f"{hour + 1:02}:00"
        slots.append(Slot(
            hour=hour,
            start_time=start,
            end_time=end,
            label=format_time_range(start, end),
            price=venue["HOURLY_RATE"],
        ))

    return slots
