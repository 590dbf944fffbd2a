"""
Root URL configuration for the Agency Workflow backend.

The dashboard frontend runs separately and talks to /api/.
"""
from django.conf import settings
from django.http import JsonResponse
from django.urls import path, include

from workflow.utils import utcnow


def health_check(request):
    return JsonResponse({
        "status": "healthy",
        "timestamp": utcnow().isoformat(),
        "service": settings.SERVICE_NAME,
    })


urlpatterns = [
    path('api/', include('workflow.urls')),
    path('health', health_check),
]
