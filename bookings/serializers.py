# bookings/serializers.py
from rest_framework import serializers

from .exceptions import InvalidDate, InvalidTimeFormat
from .utils import format_time_range, normalize_time, parse_date, to_minutes


class CheckAvailabilitySerializer(serializers.Serializer):
    date = serializers.CharField()
    startTime = serializers.CharField()
    endTime = serializers.CharField()
    roomName = serializers.CharField(min_length=1)

    def validate_date(self, value):
        try:
            return parse_date(value)
        except InvalidDate:
            raise serializers.ValidationError("Date must be YYYY-MM-DD")

    def _validate_time(self, value):
        try:
            return normalize_time(value)
        except InvalidTimeFormat:
            raise serializers.ValidationError("Time must be HH:MM")

    def validate_startTime(self, value):
        return self._validate_time(value)

    def validate_endTime(self, value):
        return self._validate_time(value)

    def validate(self, data):
        if to_minutes(data["startTime"]) >= to_minutes(data["endTime"]):
            raise serializers.ValidationError(
                "startTime must be before endTime"
            )
        return data


class BookingListSerializer(serializers.Serializer):
    """Admin listing row. `time` is display-formatted, e.g. "2:00 PM - 5:00 PM"."""

    id = serializers.CharField()
    bookingId = serializers.CharField(source="booking_ref")
    name = serializers.CharField(source="customer_name")
    facility = serializers.CharField(source="facility_name")
    date = serializers.DateField()
    time = serializers.SerializerMethodField()
    status = serializers.CharField()
    price = serializers.ReadOnlyField()
    quantity = serializers.IntegerField()
    createdAt = serializers.DateTimeField(source="created_at")

    def get_time(self, booking):
        return format_time_range(booking.start_time, booking.end_time)
