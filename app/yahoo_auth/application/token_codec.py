from __future__ import annotations

import base64
import binascii
import json
from dataclasses import asdict, fields

from yahoo_auth.domain.tokens import YahooTokenSet

_FIELD_NAMES = {f.name for f in fields(YahooTokenSet)}


class TokenDecodeError(ValueError):
    pass


def encode_token_set(tokens: YahooTokenSet) -> str:
    """토큰 셋을 base64(JSON) 문자열로 인코딩합니다 (yahoo_tokens 파라미터 값)."""
    payload = {k: v for k, v in asdict(tokens).items() if v is not None}
    raw = json.dumps(payload, separators=(",", ":"), sort_keys=True)
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_token_set(encoded: str) -> YahooTokenSet:
    # 쿼리 스트링을 거치며 '+' 가 공백으로 바뀐 경우와 urlsafe 변형도 허용
    text = (encoded or "").strip().replace(" ", "+")
    text = text.replace("-", "+").replace("_", "/")
    text += "=" * (-len(text) % 4)
    try:
        payload = json.loads(base64.b64decode(text, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise TokenDecodeError("yahoo_tokens is not valid base64 JSON") from e

    if not isinstance(payload, dict) or not payload.get("access_token"):
        raise TokenDecodeError("yahoo_tokens has no access_token")
    return YahooTokenSet(**{k: v for k, v in payload.items() if k in _FIELD_NAMES})
