from django.urls import re_path

from .views import SlotListView

urlpatterns = [
    re_path(r"^slots/?$", SlotListView.as_view(), name="booking-slots"),
]
