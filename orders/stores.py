"""
Order stores.

The booking code only needs one capability from persistence: "give me the
orders, optionally filtered by equality on a field". Two backends provide it,
selected by settings.ORDER_STORE:

- DatabaseOrderStore reads the orders.Order table.
- FileOrderStore reads a JSON array of order documents (the storefront's
  file-backed mock database format).

Any read failure is raised as StoreUnavailable. Callers must never treat a
failed read as "no orders", that would approve conflicting reservations.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from django.conf import settings
from django.db import DatabaseError
from django.utils.module_loading import import_string

from .exceptions import StoreUnavailable
from .models import Order
from .records import OrderRecord

logger = logging.getLogger(__name__)


class BaseOrderStore:
    def __init__(self, **options):
        self.options = options

    def find(self, query: Optional[dict[str, Any]] = None) -> list[OrderRecord]:
        raise NotImplementedError


class DatabaseOrderStore(BaseOrderStore):
    """Equality filters use Order model field names."""

    def find(self, query=None):
        try:
            orders = list(Order.objects.filter(**(query or {})).order_by("pk"))
        except DatabaseError as exc:
            logger.exception("Order table read failed")
            raise StoreUnavailable() from exc

        return [OrderRecord.from_model(order) for order in orders]


class FileOrderStore(BaseOrderStore):
    """Equality filters use the document keys (`paymentStatus`, `txnid`, ...)."""

    def __init__(self, path=None, **options):
        super().__init__(**options)
        self.path = path

    def _load(self):
        if not self.path:
            raise StoreUnavailable("Order store path is not configured")

        try:
            with open(self.path, encoding="utf-8") as fh:
                documents = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.exception("Order file %s could not be read", self.path)
            raise StoreUnavailable() from exc

        if not isinstance(documents, list):
            logger.error("Order file %s does not hold a JSON array", self.path)
            raise StoreUnavailable()

        return documents

    def find(self, query=None):
        query = query or {}
        records = []

        for doc in self._load():
            if not isinstance(doc, dict):
                continue
            if all(doc.get(key) == value for key, value in query.items()):
                records.append(OrderRecord.from_document(doc))

        return records


def get_order_store() -> BaseOrderStore:
    config = settings.ORDER_STORE
    backend = import_string(config["BACKEND"])
    options = {
        key.lower(): value
        for key, value in config.get("OPTIONS", {}).items()
    }
    return backend(**options)
