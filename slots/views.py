from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny

from bookings.utils import parse_date
from slots.serializers import SlotSerializer
from slots.services import build_slots_response


class SlotListView(APIView):
    """
    Public API
    `location` is the park site (E3 / E4) and does not narrow the grid;
    the venue's bookings block slots whichever site the client is on.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        date_str = request.query_params.get("date")
        room_name = request.query_params.get("roomName") or None

        if not date_str:
            raise ValidationError({
                "detail": "date is required"
            })

        selected_date = parse_date(date_str)
        slots = build_slots_response(selected_date, room_name=room_name)

        return Response({
            "slots": SlotSerializer(slots, many=True).data
        })
