# orders/models.py
from django.db import models
from django.utils import timezone

from .constants import is_confirmed


class Order(models.Model):
    """
    A storefront order as written by the checkout flow.
    Venue bookings are line items inside `items`; this service only reads them.
    """

    # Gateway transaction id shown to customers
    order_ref = models.CharField(max_length=64, blank=True)

    customer_name = models.CharField(max_length=150, blank=True)
    phone = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)

    # Free text, see orders.constants.OrderStatus
    status = models.CharField(max_length=30, blank=True, default="pending")
    payment_status = models.CharField(max_length=30, blank=True, default="pending")

    # [{"id", "name", "price", "quantity", "details": {...}}, ...]
    items = models.JSONField(default=list, blank=True)

    total_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0
    )

    # Not auto_now_add: imported orders keep their original timestamp
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["payment_status"], name="order_payment_status_idx"),
        ]

    @property
    def is_confirmed(self):
        return is_confirmed(self.status, self.payment_status)

    def __str__(self):
        return f"{self.order_ref or self.pk} | {self.customer_name or 'Guest'} | {self.payment_status}"
