"""Integration tests for the booking endpoints."""

from datetime import datetime, timedelta

from django.contrib.auth import get_user_model
from django.test import override_settings
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from bookings.constants import UNAVAILABLE_MESSAGE
from orders.models import Order

from .factories import venue_item

CHECK_URL = "/api/bookings/check-availability/"
LIST_URL = "/api/bookings/"

BROKEN_STORE = {
    "BACKEND": "orders.stores.FileOrderStore",
    "OPTIONS": {"PATH": "/nonexistent/orders/Order.json"},
}


class CheckAvailabilityAPITests(APITestCase):
    def setUp(self):
        Order.objects.create(
            order_ref="TXN1",
            customer_name="Asha",
            payment_status="paid",
            items=[venue_item(date="2025-06-01", start="10:00", end="11:00")],
        )
        # Unpaid order on the same evening must not block anything
        Order.objects.create(
            order_ref="TXN2",
            customer_name="Ravi",
            payment_status="failed",
            items=[venue_item(date="2025-06-01", start="18:00", end="20:00")],
        )

    def _payload(self, start, end, room="Grand Function Hall Booking", day="2025-06-01"):
        return {"date": day, "startTime": start, "endTime": end, "roomName": room}

    def test_conflicting_range_is_rejected(self):
        response = self.client.post(CHECK_URL, self._payload("12:30", "13:30"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data,
            {"available": False, "message": UNAVAILABLE_MESSAGE},
        )

    def test_free_range_is_available(self):
        response = self.client.post(CHECK_URL, self._payload("14:00", "15:00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"available": True})

    def test_failed_order_does_not_block(self):
        response = self.client.post(CHECK_URL, self._payload("18:00", "20:00"), format="json")

        self.assertTrue(response.data["available"])

    def test_url_without_trailing_slash(self):
        response = self.client.post(
            CHECK_URL.rstrip("/"), self._payload("13:00", "14:00"), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["available"])

    def test_invalid_payloads(self):
        cases = {
            "date": self._payload("10:00", "11:00", day="01-06-2025"),
            "startTime": self._payload("10am", "11:00"),
            "endTime": self._payload("10:00", "25:00"),
            "roomName": self._payload("10:00", "11:00", room=""),
        }
        for field, payload in cases.items():
            with self.subTest(field=field):
                response = self.client.post(CHECK_URL, payload, format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertIn(field, response.data)

    def test_start_after_end_is_rejected(self):
        response = self.client.post(CHECK_URL, self._payload("15:00", "14:00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_missing_fields(self):
        response = self.client.post(CHECK_URL, {"date": "2025-06-01"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ("startTime", "endTime", "roomName"):
            self.assertIn(field, response.data)

    @override_settings(ORDER_STORE=BROKEN_STORE)
    def test_store_failure_blocks_checkout(self):
        response = self.client.post(CHECK_URL, self._payload("14:00", "15:00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertNotIn("available", response.data)


class BookingListAPITests(APITestCase):
    def setUp(self):
        User = get_user_model()
        self.admin = User.objects.create_user(
            username="admin", password="AdminPass123", is_staff=True
        )
        self.customer = User.objects.create_user(
            username="customer", password="CustomerPass123"
        )

        Order.objects.create(
            order_ref="TXN-OLD",
            customer_name="Asha",
            payment_status="paid",
            items=[
                {"id": "ride-003", "name": "Bumper Cars", "price": 120, "quantity": 2},
                venue_item(date="2025-06-01", start="10:00", end="11:00"),
            ],
            created_at=timezone.make_aware(datetime(2025, 5, 1, 9, 0)),
        )
        self.newest = Order.objects.create(
            order_ref="TXN-NEW",
            customer_name="Ravi",
            status="confirmed",
            items=[venue_item(date="2025-06-02", start="14:00", end="17:00", room="VIP Dining Suite")],
            created_at=timezone.make_aware(datetime(2025, 5, 2, 9, 0)),
        )
        Order.objects.create(
            order_ref="TXN-FAILED",
            payment_status="failed",
            items=[venue_item()],
            created_at=timezone.now() - timedelta(days=1),
        )

    def test_anonymous_users_are_rejected(self):
        response = self.client.get(LIST_URL)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_customers_are_forbidden(self):
        self.client.force_authenticate(self.customer)

        response = self.client.get(LIST_URL)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_sees_confirmed_bookings_newest_first(self):
        self.client.force_authenticate(self.admin)

        response = self.client.get(LIST_URL)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["bookingId"] for row in response.data], ["TXN-NEW", "TXN-OLD"])

        row = response.data[0]
        self.assertEqual(row["id"], f"{self.newest.pk}-0")
        self.assertEqual(row["name"], "Ravi")
        self.assertEqual(row["facility"], "VIP Dining Suite Booking")
        self.assertEqual(row["date"], "2025-06-02")
        self.assertEqual(row["time"], "2:00 PM - 5:00 PM")
        self.assertEqual(row["status"], "confirmed")
        self.assertEqual(row["price"], 15000)
        self.assertEqual(row["quantity"], 1)
        self.assertIn("createdAt", row)

    def test_admin_with_jwt(self):
        token = self.client.post(
            "/api/auth/token/",
            {"username": "admin", "password": "AdminPass123"},
            format="json",
        )
        self.assertEqual(token.status_code, status.HTTP_200_OK)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.data['access']}")
        response = self.client.get(LIST_URL)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)

    @override_settings(ORDER_STORE=BROKEN_STORE)
    def test_store_failure_is_503(self):
        self.client.force_authenticate(self.admin)

        response = self.client.get(LIST_URL)

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
