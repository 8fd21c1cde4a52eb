from django.urls import path

from . import views

urlpatterns = [
    path('', views.welcome, name='welcome'),

    # =============== SYSTEM ===============
    path('health/', views.health_check, name='health_check'),
]
