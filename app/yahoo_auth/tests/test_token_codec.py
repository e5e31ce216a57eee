import base64
import json
import urllib.parse

import pytest
from yahoo_auth.application.token_codec import (
    TokenDecodeError,
    decode_token_set,
    encode_token_set,
)
from yahoo_auth.domain.tokens import YahooTokenSet


class TestTokenCodec:
    def test_encoded_value_is_base64_json(self):
        tokens = YahooTokenSet(
            access_token="acc",
            refresh_token="ref",
            expires_in=3600,
            token_type="bearer",
            xoauth_yahoo_guid="GUID123",
            expires_at=1_700_003_600_000,
        )
        payload = json.loads(base64.b64decode(encode_token_set(tokens)))
        assert payload == {
            "access_token": "acc",
            "refresh_token": "ref",
            "expires_in": 3600,
            "token_type": "bearer",
            "xoauth_yahoo_guid": "GUID123",
            "expires_at": 1_700_003_600_000,
        }

    def test_decode_is_exact_inverse_after_query_string_transport(self):
        tokens = YahooTokenSet(
            access_token="a" * 61 + "?>~",
            refresh_token="r/+=",
            expires_in=3600,
            token_type="bearer",
            expires_at=123,
        )
        query = urllib.parse.urlencode({"yahoo_tokens": encode_token_set(tokens)})
        transported = urllib.parse.parse_qs(query)["yahoo_tokens"][0]
        assert decode_token_set(transported) == tokens

    def test_decode_tolerates_plus_turned_into_space(self):
        tokens = YahooTokenSet(access_token="x" * 61 + "?>")
        encoded = encode_token_set(tokens)
        assert decode_token_set(encoded.replace("+", " ")) == tokens

    def test_decode_rejects_garbage(self):
        with pytest.raises(TokenDecodeError):
            decode_token_set("not base64 !!!")

    def test_decode_rejects_payload_without_access_token(self):
        encoded = base64.b64encode(b'{"refresh_token":"r"}').decode("ascii")
        with pytest.raises(TokenDecodeError):
            decode_token_set(encoded)


class TestTokenExpiry:
    def test_token_within_five_minutes_is_expired(self):
        tokens = YahooTokenSet(access_token="a", expires_at=1_000_000 + 4 * 60 * 1000)
        assert tokens.is_expired(now_ms=1_000_000)

    def test_token_far_from_expiry_is_valid(self):
        tokens = YahooTokenSet(access_token="a", expires_at=1_000_000 + 60 * 60 * 1000)
        assert not tokens.is_expired(now_ms=1_000_000)

    def test_token_without_expiry_is_expired(self):
        assert YahooTokenSet(access_token="a").is_expired(now_ms=0)

    def test_expires_at_computed_from_provider_payload(self):
        tokens = YahooTokenSet.from_provider_payload(
            {"access_token": "a", "expires_in": "3600", "token_type": "bearer"},
            now_ms=1_000,
        )
        assert tokens.expires_in == 3600
        assert tokens.expires_at == 1_000 + 3_600_000
