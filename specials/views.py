from rest_framework import status, generics
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import filters
from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .models import Special
from .serializers import SpecialSerializer, SpecialWriteSerializer
from .services import specials, active_specials


class SpecialListView(generics.ListAPIView):
    """List all daily specials that are not deleted"""
    queryset = Special.objects.all()
    serializer_class = SpecialSerializer
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['is_active']
    ordering_fields = ['name', 'price', 'created_at']
    ordering = ['id']


class ActiveSpecialListView(generics.ListAPIView):
    """List the active daily special (an empty list when none is active)"""
    serializer_class = SpecialSerializer

    def get_queryset(self):
        return active_specials()


class SpecialDetailView(generics.RetrieveAPIView):
    """Get daily special details"""
    queryset = Special.objects.all()
    serializer_class = SpecialSerializer

    def get_object(self):
        return specials.get(self.kwargs['pk'])


class SpecialCreateView(generics.CreateAPIView):
    """Create a daily special. An active special switches off every other one."""
    serializer_class = SpecialWriteSerializer

    @swagger_auto_schema(
        operation_description="Create a daily special",
        request_body=SpecialWriteSerializer,
        responses={
            201: SpecialSerializer,
            400: 'Bad Request'
        }
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        special = specials.create(**serializer.validated_data)

        return Response(SpecialSerializer(special).data, status=status.HTTP_201_CREATED)


class SpecialUpdateDestroyView(generics.GenericAPIView):
    """
    patch: Update some fields of a daily special
    delete: Soft-delete a daily special
    """
    queryset = Special.objects.all()
    serializer_class = SpecialWriteSerializer

    @swagger_auto_schema(
        operation_description="Update a daily special. Setting is_active to true switches off every other special.",
        request_body=SpecialWriteSerializer,
        responses={200: SpecialSerializer, 400: 'Bad Request', 404: 'Special not found'}
    )
    def patch(self, request, pk):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        special = specials.update(pk, serializer.validated_data)

        return Response(SpecialSerializer(special).data)

    @swagger_auto_schema(
        operation_description="Soft-delete a daily special",
        responses={200: openapi.Response(description="Special soft-deleted"), 404: 'Special not found'}
    )
    def delete(self, request, pk):
        special = specials.soft_delete(pk)

        return Response({
            'message': 'Special soft-deleted successfully',
            'deleted_special': SpecialSerializer(special).data
        })


@swagger_auto_schema(
    method='delete',
    operation_description="Permanently remove a daily special that was soft-deleted first",
    responses={200: openapi.Response(description="Special deleted"), 400: 'Special is still active', 404: 'Special not found'}
)
@api_view(['DELETE'])
def hard_delete_special(request, pk):
    """Hard-delete a soft-deleted daily special"""
    special = specials.hard_delete(pk)

    return Response({
        'message': 'Special deleted successfully',
        'deleted_special': SpecialSerializer(special).data
    })


@swagger_auto_schema(
    method='post',
    operation_description="Bring back a soft-deleted daily special",
    responses={200: openapi.Response(description="Special restored"), 400: 'Special is not deleted', 404: 'Special not found'}
)
@api_view(['POST'])
def restore_special(request, pk):
    """Restore a soft-deleted daily special"""
    special = specials.restore(pk)

    return Response({
        'message': 'Special restored successfully',
        'restored_special': SpecialSerializer(special).data
    })
