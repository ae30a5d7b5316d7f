from decimal import Decimal, InvalidOperation

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from orders.exceptions import StoreUnavailable
from orders.models import Order
from orders.stores import FileOrderStore


class Command(BaseCommand):
    help = "Import storefront order documents from a JSON file into the Order table"

    def add_arguments(self, parser):
        parser.add_argument("path", help="JSON file holding an array of orders")
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing orders before importing",
        )

    def handle(self, *args, **options):
        try:
            records = FileOrderStore(path=options["path"]).find()
        except StoreUnavailable as exc:
            raise CommandError(f"Could not read {options['path']}") from exc

        with transaction.atomic():
            if options["clear"]:
                deleted, _ = Order.objects.all().delete()
                self.stdout.write(f"Deleted {deleted} existing orders")

            orders = [
                Order(
                    order_ref=record.order_ref,
                    customer_name=record.customer_name,
                    phone=record.phone,
                    email=record.email,
                    status=record.status,
                    payment_status=record.payment_status,
                    items=record.items,
                    total_amount=_total(record.items),
                    created_at=record.created_at or timezone.now(),
                )
                for record in records
            ]
            Order.objects.bulk_create(orders)

        self.stdout.write(
            self.style.SUCCESS(f"Imported {len(orders)} orders")
        )


def _total(items):
    total = Decimal("0.00")

    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            price = Decimal(str(item.get("price") or 0))
            quantity = int(item.get("quantity") or 1)
        except (InvalidOperation, TypeError, ValueError):
            continue
        total += price * quantity

    return total
