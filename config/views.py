from django.conf import settings
from django.http import JsonResponse
from django.views.static import serve
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema


@extend_schema(responses={200: dict})
@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness check."""
    return Response({'status': 'ok'})


def serve_media(request, path):
    """Serve an uploaded file from MEDIA_ROOT, also when DEBUG is off."""
    return serve(request, path, document_root=settings.MEDIA_ROOT)


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'success': False,
        'error': 'Not found',
        'code': 'not_found'
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'success': False,
        'error': 'Internal server error',
        'code': 'error'
    }, status=500)
