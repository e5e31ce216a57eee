"""
Yahoo OAuth Views

OAuth 인가 시작 / 콜백 / 토큰 갱신 엔드포인트 (Thin Controller)
"""

import logging
from dataclasses import asdict

from common.application.result import Err, Ok
from django.http import HttpResponseRedirect
from drf_spectacular.utils import OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from yahoo_auth.application.token_codec import encode_token_set
from yahoo_auth.domain.callback import YahooAuthorizationCallback
from yahoo_auth.serializers import (
    YahooOAuthCallbackSerializer,
    YahooOAuthStartSerializer,
    YahooTokenRefreshSerializer,
)
from yahoo_auth.services import YahooOAuthService

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    "CONFIG_MISSING": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_response(err: Err) -> Response:
    return Response(
        {"error_code": err.code, "message": err.message},
        status=_ERROR_STATUS.get(err.code, status.HTTP_400_BAD_REQUEST),
    )


class YahooOAuthStartView(APIView):
    permission_classes = []

    @extend_schema(
        parameters=[YahooOAuthStartSerializer],
        responses={200: OpenApiTypes.OBJECT},
        summary="Yahoo OAuth Start",
        description="Build the Yahoo authorization URL using the resolved redirect URI.",
    )
    def get(self, request):
        serializer = YahooOAuthStartSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        redirect_uri = YahooOAuthService.redirect_uri_for(request)
        result = YahooOAuthService.start_yahoo_oauth(
            redirect_uri=redirect_uri,
            state=serializer.validated_data.get("state") or None,
        )
        if isinstance(result, Err):
            return _error_response(result)

        assert isinstance(result, Ok)
        return Response(asdict(result.value), status=status.HTTP_200_OK)


class YahooOAuthCallbackView(APIView):
    """
    Yahoo 가 인가 후 브라우저를 돌려보내는 콜백.

    모든 결과는 애플리케이션 루트로의 302 리다이렉트로 끝납니다
    (yahoo_tokens 또는 yahoo_error 쿼리 파라미터).
    """

    permission_classes = []

    @extend_schema(
        parameters=[YahooOAuthCallbackSerializer],
        responses={302: OpenApiResponse(description="Redirect to application root")},
        summary="Yahoo OAuth Callback",
    )
    def get(self, request):
        # 시리얼라이저 검증을 거치지 않습니다. 값은 받은 그대로(공백, 제어문자 포함) 전달되고
        # 어떤 입력이든 리다이렉트로 끝나야 합니다.
        params = request.query_params
        try:
            callback = YahooAuthorizationCallback(
                code=params.get("code") or None,
                state=params.get("state") or None,
                error=params.get("error") or None,
                error_description=params.get("error_description") or None,
                received_params=tuple(params.keys()),
            )
            redirect_uri = YahooOAuthService.redirect_uri_for(request)
            location = YahooOAuthService.complete_yahoo_oauth(
                callback=callback, redirect_uri=redirect_uri
            )
        except Exception as e:
            logger.error("yahoo_oauth_callback_failed reason=%s", e, exc_info=True)
            return Response(
                {"error": "Failed to handle Yahoo OAuth callback"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return HttpResponseRedirect(location)


class YahooTokenRefreshView(APIView):
    permission_classes = []

    @extend_schema(
        request=YahooTokenRefreshSerializer,
        responses={200: OpenApiTypes.OBJECT},
        summary="Yahoo Token Refresh",
        description="Refresh the Yahoo access token when it is expired or about to expire.",
    )
    def post(self, request):
        serializer = YahooTokenRefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = YahooOAuthService.refresh_yahoo_tokens(
            refresh_token=serializer.validated_data["refresh_token"],
            expires_at=serializer.validated_data.get("expires_at"),
        )
        if isinstance(result, Err):
            return _error_response(result)

        assert isinstance(result, Ok)
        if not result.value.refreshed:
            return Response({"action": "token_valid"}, status=status.HTTP_200_OK)

        tokens = result.value.tokens
        return Response(
            {
                "action": "token_refreshed",
                "tokens": {k: v for k, v in asdict(tokens).items() if v is not None},
                "yahoo_tokens": encode_token_set(tokens),
            },
            status=status.HTTP_200_OK,
        )
