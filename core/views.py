import logging

from django.db import DatabaseError, connection
from django.http import HttpResponse, JsonResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def welcome(request):
    return HttpResponse('Welcome to the Coffee Shop', content_type='text/plain')


@api_view(['GET'])
def health_check(request):
    try:
        # Test database connection
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")

        return Response({
            'status': 'healthy',
            'timestamp': timezone.now().isoformat(),
            'database': 'connected',
            'version': '1.0.0'
        })
    except DatabaseError:
        logger.exception("Health check could not reach the database")
        return Response({
            'status': 'unhealthy',
            'timestamp': timezone.now().isoformat(),
            'database': 'disconnected',
        }, status=status.HTTP_503_SERVICE_UNAVAILABLE)


# =============== ERROR HANDLERS (outside DRF views) ===============

def route_not_found(request, exception=None):
    return JsonResponse({
        'error': True,
        'code': 'route_not_found',
        'message': 'Route not found',
        'details': {},
        'status_code': 404
    }, status=404)


def server_error(request):
    return JsonResponse({
        'error': True,
        'code': 'server_error',
        'message': 'Something went wrong!',
        'details': {},
        'status_code': 500
    }, status=500)
