# orders/constants.py
class OrderStatus:
    """
    Canonical order states.
    Checkout and the payment callback write free text into
    Order.status / Order.payment_status; normalize() maps it onto this set.
    """
    PENDING = "PENDING"
    PAID = "PAID"
    SUCCESS = "SUCCESS"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"

    CHOICES = (
        (PENDING, "Pending"),
        (PAID, "Paid"),
        (SUCCESS, "Success"),
        (CONFIRMED, "Confirmed"),
        (COMPLETED, "Completed"),
        (FAILED, "Failed"),
        (CANCELLED, "Cancelled"),
        (UNKNOWN, "Unknown"),
    )

    CONFIRMED_STATES = frozenset({PAID, SUCCESS, CONFIRMED, COMPLETED})

    @classmethod
    def normalize(cls, value):
        if not value:
            return cls.UNKNOWN

        key = str(value).strip().upper()
        if key in dict(cls.CHOICES):
            return key
        return cls.UNKNOWN


def is_confirmed(status, payment_status=None):
    """
    The one "is this order paid for" predicate.
    Only confirmed orders materialise as venue bookings.
    """
    return (
        OrderStatus.normalize(status) in OrderStatus.CONFIRMED_STATES
        or OrderStatus.normalize(payment_status) in OrderStatus.CONFIRMED_STATES
    )
