"""
Venue bookings are not stored anywhere. They are projected from paid orders
on every request and checked with interval math:

    conflict  <=>  req_start < booked_end + BUFFER_MINUTES  and  req_end > booked_start

Known gap: the check and the payment callback that confirms an order are not
atomic, so two checkouts for overlapping ranges can both pass the check.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from datetime import timezone as dt_timezone
from typing import Any, Iterable, Optional

from django.conf import settings
from django.utils import timezone

from orders.stores import BaseOrderStore, get_order_store
from slots.constants import SlotStatus

from .constants import BUFFER_MINUTES, ROOM_NAME_SUFFIX, UNAVAILABLE_MESSAGE
from .exceptions import InvalidDate, InvalidTimeFormat
from .utils import normalize_time, parse_date, to_minutes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Booking:
    id: str
    booking_ref: str
    customer_name: str
    facility_name: str
    date: date
    start_time: str
    end_time: str
    status: str
    price: Any = None
    quantity: int = 1
    created_at: Optional[datetime] = None

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time)

    @property
    def effective_end_minutes(self) -> int:
        return self.end_minutes + BUFFER_MINUTES


# =========================================================
# BOOKING PROJECTOR
# =========================================================

def is_venue_item(item: dict) -> bool:
    venue = settings.VENUE
    item_id = str(item.get("id") or item.get("product") or "")
    name = str(item.get("name") or "")

    if item_id.startswith(venue["ITEM_PREFIX"]):
        return True
    if item.get("stall") == venue["STALL"]:
        return True
    if venue["ITEM_KEYWORD"] and venue["ITEM_KEYWORD"] in name:
        return True

    details = item.get("details")
    return isinstance(details, dict) and all(
        details.get(key) for key in ("date", "startTime", "endTime")
    )


def _booking_from_item(order, item, idx) -> Optional[Booking]:
    details = item.get("details")
    if not isinstance(details, dict):
        logger.warning(
            "Order %s item %s looks like a venue booking but has no details",
            order.id, idx,
        )
        return None

    try:
        booking_date = parse_date(details.get("date"))
        start = normalize_time(details.get("startTime"))
        end = normalize_time(details.get("endTime"))
    except (InvalidDate, InvalidTimeFormat):
        logger.warning("Order %s item %s has malformed booking details", order.id, idx)
        return None

    if to_minutes(start) >= to_minutes(end):
        logger.warning("Order %s item %s has start time after end time", order.id, idx)
        return None

    try:
        quantity = int(item.get("quantity") or 1)
    except (TypeError, ValueError):
        quantity = 1

    return Booking(
        id=f"{order.id}-{idx}",
        booking_ref=order.order_ref or order.id,
        customer_name=order.customer_name or "Guest",
        facility_name=str(item.get("name") or ""),
        date=booking_date,
        start_time=start,
        end_time=end,
        status=order.confirmation_status,
        price=item.get("price"),
        quantity=quantity,
        created_at=order.created_at,
    )


def project_bookings(store: Optional[BaseOrderStore] = None, sort: bool = True) -> list[Booking]:
    """
    Confirmed venue bookings derived from the order store.
    StoreUnavailable propagates; it must never read as "no bookings".
    """
    store = store or get_order_store()
    orders = store.find()

    bookings = []
    for order in orders:
        if not order.is_confirmed:
            continue

        for idx, item in enumerate(order.items):
            if not isinstance(item, dict) or not is_venue_item(item):
                continue

            booking = _booking_from_item(order, item, idx)
            if booking:
                bookings.append(booking)

    if sort:
        oldest = datetime.min.replace(tzinfo=dt_timezone.utc)
        bookings.sort(key=lambda b: b.created_at or oldest, reverse=True)

    return bookings


def list_bookings(store: Optional[BaseOrderStore] = None) -> list[Booking]:
    """Newest first, for the admin listing."""
    bookings = project_bookings(store, sort=True)
    logger.info("Found %s event bookings", len(bookings))
    return bookings


# =========================================================
# AVAILABILITY / CONFLICT CHECKER
# =========================================================

def room_matches(room_name: Optional[str], facility_name: str) -> bool:
    """
    Case-sensitive substring match. A trailing " Booking" on the requested
    name is ignored so cart item names can be passed straight through.
    """
    if not room_name:
        return True

    needle = room_name
    if needle.endswith(ROOM_NAME_SUFFIX) and needle != ROOM_NAME_SUFFIX:
        needle = needle[: -len(ROOM_NAME_SUFFIX)]

    return needle in facility_name


def overlaps(req_start: int, req_end: int, booking: Booking) -> bool:
    return req_start < booking.effective_end_minutes and req_end > booking.start_minutes


def find_conflict(
    bookings: Iterable[Booking],
    booking_date: date,
    req_start: int,
    req_end: int,
    room_name: Optional[str] = None,
) -> Optional[Booking]:
    for booking in bookings:
        if booking.date != booking_date:
            continue
        if not room_matches(room_name, booking.facility_name):
            continue
        if overlaps(req_start, req_end, booking):
            return booking
    return None


def check_availability(
    booking_date,
    start_time: str,
    end_time: str,
    room_name: str,
    store: Optional[BaseOrderStore] = None,
) -> dict[str, Any]:
    booking_date = parse_date(booking_date)
    req_start = to_minutes(start_time)
    req_end = to_minutes(end_time)

    if req_start >= req_end:
        raise InvalidTimeFormat("startTime must be before endTime")

    bookings = project_bookings(store, sort=False)
    conflict = find_conflict(bookings, booking_date, req_start, req_end, room_name)

    if conflict:
        logger.info(
            "Rejected %s %s-%s for %r: overlaps booking %s (%s-%s)",
            booking_date, start_time, end_time, room_name,
            conflict.id, conflict.start_time, conflict.end_time,
        )
        return {"available": False, "message": UNAVAILABLE_MESSAGE}

    return {"available": True}


def annotate_slots(slots, slot_date: date, bookings: Iterable[Booking], room_name=None, now=None):
    """
    past    -> the slot has already ended (wall clock only)
    booked  -> the slot overlaps a booking or its post-event buffer
    available otherwise
    """
    now = now or timezone.now()
    tz = timezone.get_current_timezone()
    day_bookings = [b for b in bookings if b.date == slot_date]

    annotated = []
    for slot in slots:
        slot_end = timezone.make_aware(
            datetime.combine(slot_date, datetime.min.time())
            + timedelta(hours=slot.hour + 1),
            tz,
        )

        if slot_end <= now:
            status = SlotStatus.PAST
        # Same overlap rule as check_availability: a partly covered hour is booked
        elif find_conflict(
            day_bookings,
            slot_date,
            slot.hour * 60,
            (slot.hour + 1) * 60,
            room_name,
        ):
            status = SlotStatus.BOOKED
        else:
            status = SlotStatus.AVAILABLE

        annotated.append(dataclasses.replace(slot, status=status))

    return annotated
