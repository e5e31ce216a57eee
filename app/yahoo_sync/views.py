"""
Yahoo Sync Views

리그 / 팀 / 로스터 동기화 엔드포인트 (Thin Controller)
"""

import logging
from dataclasses import asdict

from common.application.result import Err, Ok
from drf_spectacular.utils import OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from yahoo_auth.application.token_codec import encode_token_set
from yahoo_sync.application.usecases.yahoo_sync import (
    GET_LEAGUES,
    GET_TEAMS,
    TOKEN_REFRESHED,
)
from yahoo_sync.dtos import SyncedTeamDTO, YahooLeagueDTO, YahooTeamDTO
from yahoo_sync.serializers import YahooSyncSerializer
from yahoo_sync.services import YahooSyncService

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    "MISSING_ACCESS_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_EXPIRED": status.HTTP_401_UNAUTHORIZED,
    "LEAGUE_KEY_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "UNKNOWN_ACTION": status.HTTP_400_BAD_REQUEST,
    "NO_TEAMS": status.HTTP_404_NOT_FOUND,
}


def _error_response(err: Err) -> Response:
    return Response(
        {"error": err.message, "error_code": err.code},
        status=_ERROR_STATUS.get(err.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


class YahooSyncView(APIView):
    """
    Yahoo Fantasy API 프록시.

    action: get_leagues | get_teams | sync_league
    토큰이 만료되었으면 action 대신 {"action": "token_refreshed", "tokens": ...} 를 반환합니다.
    """

    permission_classes = []

    @extend_schema(
        request=YahooSyncSerializer,
        responses={200: OpenApiTypes.OBJECT},
        summary="Yahoo League Sync",
        description="Fetch leagues, teams or full team rosters from Yahoo Fantasy Sports.",
    )
    def post(self, request):
        serializer = YahooSyncSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            result = YahooSyncService.sync(
                action=data.get("action"),
                tokens=data.get("tokens"),
                league_key=data.get("league_key"),
                game_key=data.get("game_key"),
            )
        except Exception as e:
            logger.error("yahoo_sync_unexpected_error reason=%s", e, exc_info=True)
            return Response(
                {"error": "Failed to sync with Yahoo Fantasy Sports"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if isinstance(result, Err):
            return _error_response(result)

        assert isinstance(result, Ok)
        value = result.value
        if value.action == TOKEN_REFRESHED:
            return Response(
                {
                    "action": TOKEN_REFRESHED,
                    "tokens": {k: v for k, v in asdict(value.tokens).items() if v is not None},
                    "yahoo_tokens": encode_token_set(value.tokens),
                },
                status=status.HTTP_200_OK,
            )
        if value.action == GET_LEAGUES:
            leagues = [YahooLeagueDTO.model_validate(asdict(x)) for x in value.leagues]
            return Response(
                {"leagues": [x.model_dump(mode="json") for x in leagues]},
                status=status.HTTP_200_OK,
            )
        if value.action == GET_TEAMS:
            teams = [YahooTeamDTO.model_validate(asdict(x)) for x in value.teams]
            return Response(
                {"teams": [x.model_dump(mode="json") for x in teams]},
                status=status.HTTP_200_OK,
            )

        synced = [SyncedTeamDTO.model_validate(asdict(x)) for x in value.synced_teams]
        return Response(
            {
                "teams": [
                    x.model_dump(mode="json", by_alias=True, exclude_none=True) for x in synced
                ]
            },
            status=status.HTTP_200_OK,
        )
