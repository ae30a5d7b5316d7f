from rest_framework.exceptions import APIException
from rest_framework import status


class StoreUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Order store is unavailable, please try again later"
    default_code = "store_unavailable"
