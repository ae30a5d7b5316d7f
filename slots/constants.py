# slots/constants.py
class SlotStatus:
    AVAILABLE = "available"
    BOOKED = "booked"
    PAST = "past"
