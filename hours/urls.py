from django.urls import path
from . import views

urlpatterns = [
    path('', views.StoreHoursView.as_view(), name='store-hours'),
]
