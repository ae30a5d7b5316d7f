from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import BookingListSerializer, CheckAvailabilitySerializer
from .services import check_availability, list_bookings


# -------------------------------------------------------------------
# EVENT BOOKINGS (ADMIN)
# -------------------------------------------------------------------
class BookingListView(APIView):
    """
    Admin API
    All confirmed venue bookings, newest first
    """
    permission_classes = [IsAdminUser]

    def get(self, request):
        bookings = list_bookings()
        serializer = BookingListSerializer(bookings, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)


# -------------------------------------------------------------------
# AVAILABILITY CHECK (GATES CHECKOUT)
# -------------------------------------------------------------------
class CheckAvailabilityView(APIView):
    """
    Public API
    Decides whether a date + time range can still be booked.
    Store errors surface as 503, never as "available".
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CheckAvailabilitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        result = check_availability(
            data["date"],
            data["startTime"],
            data["endTime"],
            data["roomName"],
        )

        return Response(result, status=status.HTTP_200_OK)
