from rest_framework.exceptions import APIException
from rest_framework import status


class InvalidDate(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid date format. Use YYYY-MM-DD"
    default_code = "invalid_date"


class InvalidTimeFormat(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid time format. Use HH:MM"
    default_code = "invalid_time"
