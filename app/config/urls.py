"""
URL configuration for config project.

- /api/auth/provider/ : Yahoo OAuth start / callback / refresh
- /api/yahoo/         : 리그 / 팀 / 로스터 동기화
- /api/diagnostics/   : 설정 진단
"""

from django.http import JsonResponse
from django.urls import include, path
from django.views.decorators.http import require_http_methods
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)


@require_http_methods(["GET"])
def health_check(request):
    """헬스체크 엔드포인트"""
    return JsonResponse({"status": "healthy", "message": "Service is running"})


urlpatterns = [
    path("api/auth/provider/", include("yahoo_auth.urls")),
    path("api/yahoo/", include("yahoo_sync.urls")),
    path("api/diagnostics/", include("diagnostics.urls")),
    # Health Check
    path("health/", health_check, name="health_check"),
    # API Documentation (Spectacular)
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "api/schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
]
