from diagnostics.application.container import build_env_diagnostics_usecase
from drf_spectacular.utils import OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

NO_CACHE = "no-store, no-cache, must-revalidate"


class EnvDiagnosticsView(APIView):
    """설정 변수 진단 (시크릿 값은 노출하지 않음)."""

    permission_classes = []

    @extend_schema(
        responses={200: OpenApiTypes.OBJECT},
        summary="Environment Diagnostics",
        description="Report which Yahoo OAuth settings are configured, without secrets.",
    )
    def get(self, request):
        report = build_env_diagnostics_usecase().execute()
        response = Response(report.model_dump(mode="json"), status=status.HTTP_200_OK)
        response["Cache-Control"] = NO_CACHE
        return response
