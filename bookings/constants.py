# bookings/constants.py

# Cleanup / reset window after an event ends (2hrs).
# Applied after a booking's end only, never before its start.
BUFFER_MINUTES = 120

# The event page adds items to the cart as "<room name> Booking"
ROOM_NAME_SUFFIX = " Booking"

UNAVAILABLE_MESSAGE = (
    "This slot is already booked. Please choose another time "
    "(events need a 2 hour gap after the previous booking ends)."
)
