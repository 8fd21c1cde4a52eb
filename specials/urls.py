from django.urls import path
from . import views

urlpatterns = [
    # Reads
    path('specials/', views.SpecialListView.as_view(), name='special-list'),
    path('specials/active/', views.ActiveSpecialListView.as_view(), name='special-active-list'),
    path('specials/<int:pk>/', views.SpecialDetailView.as_view(), name='special-detail'),

    # Writes
    path('special/', views.SpecialCreateView.as_view(), name='special-create'),
    path('special/<int:pk>/', views.SpecialUpdateDestroyView.as_view(), name='special-update-destroy'),

    # Lifecycle
    path('special/<int:pk>/hard-delete/', views.hard_delete_special, name='special-hard-delete'),
    path('special/<int:pk>/restore/', views.restore_special, name='special-restore'),
]
