from rest_framework import serializers


class YahooSyncTokensSerializer(serializers.Serializer):
    """브라우저가 보관 중인 토큰 세트 (callback 의 yahoo_tokens 를 디코딩한 값)."""

    access_token = serializers.CharField(required=False, allow_blank=True)
    refresh_token = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    expires_at = serializers.IntegerField(required=False, allow_null=True, min_value=0)


class YahooSyncSerializer(serializers.Serializer):
    # 요청 바디 키는 camelCase 를 유지
    action = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    leagueKey = serializers.CharField(
        source="league_key", required=False, allow_blank=True, allow_null=True
    )
    gameKey = serializers.CharField(
        source="game_key", required=False, allow_blank=True, allow_null=True
    )
    tokens = YahooSyncTokensSerializer(required=False, allow_null=True)
