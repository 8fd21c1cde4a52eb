from rest_framework import generics, status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import filters
from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .filters import MenuItemFilter
from .models import MenuItem
from .serializers import (
    MenuItemSerializer, MenuItemWriteSerializer, MenuNameLookupSerializer,
    MaxPriceSerializer, MenuItemDescriptionSerializer
)
from .services import menu_items, find_by_name, priced_up_to


# Menu Views
class MenuItemListCreateView(generics.ListCreateAPIView):
    """
    get: List all menu items that are not deleted
    post: Create a new menu item
    """
    queryset = MenuItem.objects.all()
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = MenuItemFilter
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'price', 'created_at']
    ordering = ['id']

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return MenuItemWriteSerializer
        return MenuItemSerializer

    @swagger_auto_schema(
        request_body=MenuItemWriteSerializer,
        responses={201: MenuItemSerializer, 400: 'Bad Request', 409: 'Name already in use'}
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = menu_items.create(**serializer.validated_data)

        return Response(MenuItemSerializer(item).data, status=status.HTTP_201_CREATED)


class MenuItemDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    get: Get menu item details
    patch: Update some fields of a menu item
    delete: Soft-delete a menu item
    """
    queryset = MenuItem.objects.all()
    http_method_names = ['get', 'patch', 'delete', 'head', 'options']

    def get_serializer_class(self):
        if self.request.method == 'PATCH':
            return MenuItemWriteSerializer
        return MenuItemSerializer

    def get_object(self):
        return menu_items.get(self.kwargs['pk'])

    @swagger_auto_schema(
        request_body=MenuItemWriteSerializer,
        responses={200: MenuItemSerializer, 404: 'Item not found', 409: 'Name already in use'}
    )
    def patch(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        item = menu_items.update(kwargs['pk'], serializer.validated_data)

        return Response(MenuItemSerializer(item).data)

    def delete(self, request, *args, **kwargs):
        item = menu_items.soft_delete(kwargs['pk'])

        return Response({
            'message': 'Item soft-deleted successfully',
            'deleted_item': MenuItemSerializer(item).data
        })


@swagger_auto_schema(
    method='delete',
    operation_description="Permanently remove a menu item that was soft-deleted first",
    responses={200: openapi.Response(description="Item deleted"), 400: 'Item is still active', 404: 'Item not found'}
)
@api_view(['DELETE'])
def hard_delete_menu_item(request, pk):
    """Hard-delete a soft-deleted menu item"""
    item = menu_items.hard_delete(pk)

    return Response({
        'message': 'Item deleted successfully',
        'deleted_item': MenuItemSerializer(item).data
    })


@swagger_auto_schema(
    method='post',
    operation_description="Bring back a soft-deleted menu item",
    responses={200: openapi.Response(description="Item restored"), 400: 'Item is not deleted', 404: 'Item not found'}
)
@api_view(['POST'])
def restore_menu_item(request, pk):
    """Restore a soft-deleted menu item"""
    item = menu_items.restore(pk)

    return Response({
        'message': 'Item restored successfully',
        'restored_item': MenuItemSerializer(item).data
    })


@api_view(['GET'])
def menu_item_description(request, pk):
    """Get a one-line description of a menu item"""
    item = menu_items.get(pk)
    return Response(MenuItemDescriptionSerializer(item).data)


@swagger_auto_schema(
    method='get',
    operation_description="Find a menu item by name (case-insensitive)",
    responses={200: MenuItemSerializer, 404: 'Item not found'}
)
@api_view(['GET'])
def menu_item_by_name(request, name):
    """Get a menu item by its name, ignoring case"""
    serializer = MenuNameLookupSerializer(data={'name': name})
    serializer.is_valid(raise_exception=True)

    item = find_by_name(serializer.validated_data['name'])
    if item is None:
        raise menu_items.not_found()

    return Response(MenuItemSerializer(item).data)


@swagger_auto_schema(
    method='get',
    operation_description="List menu items priced at or below max_price",
    responses={200: MenuItemSerializer(many=True)}
)
@api_view(['GET'])
def menu_items_by_max_price(request, max_price):
    """List menu items that cost at most max_price"""
    serializer = MaxPriceSerializer(data={'max_price': max_price})
    serializer.is_valid(raise_exception=True)

    items = priced_up_to(serializer.validated_data['max_price'])
    return Response(MenuItemSerializer(items, many=True).data)
