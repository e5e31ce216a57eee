from rest_framework import serializers


class YahooOAuthStartSerializer(serializers.Serializer):
    state = serializers.CharField(max_length=2000, required=False, allow_blank=True)


class YahooOAuthCallbackSerializer(serializers.Serializer):
    """
    Yahoo OAuth 콜백 쿼리 파라미터.

    OpenAPI 문서용입니다. 뷰는 이 시리얼라이저로 검증하지 않고
    query_params 를 그대로 읽습니다. 해석은 유스케이스에서 합니다.
    """

    code = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    state = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    error = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    error_description = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False
    )


class YahooTokenRefreshSerializer(serializers.Serializer):
    refresh_token = serializers.CharField(max_length=4000)
    expires_at = serializers.IntegerField(required=False, allow_null=True, min_value=0)
