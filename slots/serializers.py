# slots/serializers.py
from rest_framework import serializers


class SlotSerializer(serializers.Serializer):
    hour = serializers.IntegerField()
    startTime = serializers.CharField(source="start_time")
    endTime = serializers.CharField(source="end_time")
    label = serializers.CharField()
    status = serializers.CharField()
    price = serializers.IntegerField()
