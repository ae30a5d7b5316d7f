from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .constants import OrderStatus, is_confirmed


@dataclass(frozen=True)
class OrderRecord:
    """
    Backend-neutral, read-only snapshot of one order.
    Both order stores hand these out so the booking code never touches
    model instances or raw JSON documents.
    """

    id: str
    order_ref: str = ""
    customer_name: str = ""
    phone: str = ""
    email: str = ""
    status: str = ""
    payment_status: str = ""
    items: list = field(default_factory=list)
    created_at: Optional[datetime] = None

    @property
    def is_confirmed(self) -> bool:
        return is_confirmed(self.status, self.payment_status)

    @property
    def confirmation_status(self) -> str:
        """Lower-cased canonical status that made this order confirmed."""
        for value in (self.status, self.payment_status):
            normalized = OrderStatus.normalize(value)
            if normalized in OrderStatus.CONFIRMED_STATES:
                return normalized.lower()
        return OrderStatus.normalize(self.status or self.payment_status).lower()

    @classmethod
    def from_model(cls, order) -> "OrderRecord":
        return cls(
            id=str(order.pk),
            order_ref=order.order_ref or str(order.pk),
            customer_name=order.customer_name or "Guest",
            phone=order.phone,
            email=order.email,
            status=order.status,
            payment_status=order.payment_status,
            items=list(order.items or []),
            created_at=order.created_at,
        )

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "OrderRecord":
        """Build a record from a storefront JSON order document."""
        order_id = str(doc.get("_id") or doc.get("id") or doc.get("txnid") or "")

        user = doc.get("user")
        user_name = user.get("name") if isinstance(user, dict) else None

        items = doc.get("items")
        if not isinstance(items, list):
            items = []

        return cls(
            id=order_id,
            order_ref=str(doc.get("txnid") or order_id),
            customer_name=(
                doc.get("customerName")
                or doc.get("firstname")
                or user_name
                or "Guest"
            ),
            phone=str(doc.get("phone") or ""),
            email=str(doc.get("email") or ""),
            status=str(doc.get("status") or ""),
            payment_status=str(doc.get("paymentStatus") or ""),
            items=items,
            created_at=_parse_timestamp(doc.get("createdAt")),
        )


def _parse_timestamp(value) -> Optional[datetime]:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = parse_datetime(value)
        except ValueError:
            return None
    else:
        return None

    if parsed is None:
        return None
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed
