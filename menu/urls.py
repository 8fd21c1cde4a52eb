from django.urls import path
from . import views


urlpatterns = [
    # Menu URLs
    path('', views.MenuItemListCreateView.as_view(), name='menu-list-create'),
    path('<int:pk>/', views.MenuItemDetailView.as_view(), name='menu-detail'),

    # Lifecycle
    path('<int:pk>/hard-delete/', views.hard_delete_menu_item, name='menu-hard-delete'),
    path('<int:pk>/restore/', views.restore_menu_item, name='menu-restore'),

    # Lookups
    path('<int:pk>/description/', views.menu_item_description, name='menu-description'),
    path('name/<str:name>/', views.menu_item_by_name, name='menu-by-name'),
    path('price/<str:max_price>/', views.menu_items_by_max_price, name='menu-by-max-price'),
]
