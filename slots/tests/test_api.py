"""Integration tests for the slot grid endpoint."""

from datetime import timedelta

from django.test import override_settings
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from bookings.tests.factories import venue_item
from orders.models import Order
from slots.constants import SlotStatus

SLOTS_URL = "/api/bookings/slots/"


class SlotListAPITests(APITestCase):
    def setUp(self):
        self.day = (timezone.localdate() + timedelta(days=30)).isoformat()
        Order.objects.create(
            order_ref="TXN1",
            payment_status="paid",
            items=[venue_item(date=self.day, start="10:00", end="11:00")],
        )
        Order.objects.create(
            order_ref="TXN2",
            payment_status="failed",
            items=[venue_item(date=self.day, start="17:00", end="19:00")],
        )

    def _statuses(self, response):
        return {slot["hour"]: slot["status"] for slot in response.data["slots"]}

    def test_slots_for_a_future_day(self):
        response = self.client.get(SLOTS_URL, {"date": self.day})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["slots"]), 13)
        self.assertEqual(
            response.data["slots"][0],
            {
                "hour": 9,
                "startTime": "09:00",
                "endTime": "10:00",
                "label": "9:00 AM - 10:00 AM",
                "status": SlotStatus.AVAILABLE,
                "price": 15000,
            },
        )

        statuses = self._statuses(response)
        self.assertEqual(
            [hour for hour, value in statuses.items() if value == SlotStatus.BOOKED],
            [10, 11, 12],
        )
        self.assertEqual(statuses[17], SlotStatus.AVAILABLE)

    def test_park_location_does_not_hide_bookings(self):
        plain = self.client.get(SLOTS_URL, {"date": self.day})
        response = self.client.get(SLOTS_URL, {"date": self.day, "location": "E3"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        statuses = self._statuses(response)
        for hour in (10, 11, 12):
            self.assertEqual(statuses[hour], SlotStatus.BOOKED)
        self.assertEqual(statuses, self._statuses(plain))

    def test_room_name_filters_rooms(self):
        response = self.client.get(SLOTS_URL, {"date": self.day, "roomName": "VIP Dining Suite"})

        self.assertEqual(set(self._statuses(response).values()), {SlotStatus.AVAILABLE})

        response = self.client.get(SLOTS_URL, {"date": self.day, "roomName": "Grand Function Hall"})

        self.assertEqual(self._statuses(response)[10], SlotStatus.BOOKED)

    def test_url_without_trailing_slash(self):
        response = self.client.get(SLOTS_URL.rstrip("/"), {"date": self.day})

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_elapsed_day_is_all_past(self):
        yesterday = (timezone.localdate() - timedelta(days=1)).isoformat()

        response = self.client.get(SLOTS_URL, {"date": yesterday})

        self.assertEqual(set(self._statuses(response).values()), {SlotStatus.PAST})

    def test_date_is_required(self):
        response = self.client.get(SLOTS_URL)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "date is required")

    def test_malformed_date(self):
        response = self.client.get(SLOTS_URL, {"date": "2025-13-01"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("YYYY-MM-DD", str(response.data["detail"]))

    @override_settings(ORDER_STORE={
        "BACKEND": "orders.stores.FileOrderStore",
        "OPTIONS": {"PATH": "/nonexistent/orders/Order.json"},
    })
    def test_store_failure_is_503(self):
        response = self.client.get(SLOTS_URL, {"date": self.day})

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
