from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_yasg.utils import swagger_auto_schema

from .serializers import StoreHoursSerializer, StoreHoursUpdateSerializer
from .services import get_store_hours, upsert_store_hours


class StoreHoursView(APIView):
    """
    get: Get the store hours
    patch: Set the hours of one or more days, creating the record on first use
    """

    @swagger_auto_schema(responses={200: StoreHoursSerializer, 404: 'Store hours not found'})
    def get(self, request):
        return Response(StoreHoursSerializer(get_store_hours()).data)

    @swagger_auto_schema(
        operation_description="Days left out keep their hours. On first use they are set to Closed.",
        request_body=StoreHoursUpdateSerializer,
        responses={
            200: StoreHoursSerializer,
            201: StoreHoursSerializer,
            400: 'Bad Request'
        }
    )
    def patch(self, request):
        serializer = StoreHoursUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        hours, created = upsert_store_hours(serializer.validated_data)

        return Response(
            StoreHoursSerializer(hours).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )
