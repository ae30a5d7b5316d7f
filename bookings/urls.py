from django.urls import path, re_path

from .views import BookingListView, CheckAvailabilityView

urlpatterns = [
    path("", BookingListView.as_view(), name="booking-list"),
    re_path(r"^check-availability/?$", CheckAvailabilityView.as_view(), name="booking-check-availability"),
]
