from bookings.services import annotate_slots, project_bookings
from bookings.utils import parse_date
from .utils import generate_slot_grid


def build_slots_response(slot_date, room_name=None, store=None, now=None):
    """
    Hourly grid for a date with each slot tagged available / booked / past.
    Every confirmed venue booking on the date counts unless `room_name`
    narrows it to one room, using the same name matching as the
    availability check.
    """
    slot_date = parse_date(slot_date)
    slots = generate_slot_grid(slot_date)
    bookings = project_bookings(store, sort=False)

    return annotate_slots(
        slots,
        slot_date,
        bookings,
        room_name=room_name,
        now=now,
    )
