from __future__ import annotations

import re

_SECRET_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"(Bearer|Basic)\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
    re.compile(
        r"\b(access_token|refresh_token|client_secret|code|yahoo_tokens)\b"
        r"\"?\s*[:=]\s*\"?[^\s,&\"]+",
        re.IGNORECASE,
    ),
]

_MAX_LENGTH = 500


def mask_secrets(text: str) -> str:
    """
    로그에 토큰/시크릿/인가 코드가 섞이지 않도록 보수적으로 마스킹합니다.
    """
    if not text:
        return text
    masked = text
    for pat in _SECRET_PATTERNS:
        masked = pat.sub("[REDACTED]", masked)
    if len(masked) > _MAX_LENGTH:
        masked = masked[:_MAX_LENGTH] + "...[TRUNCATED]"
    return masked


def preview(value: str | None, *, length: int = 10) -> str | None:
    """민감하지 않은 설정값의 앞부분만 보여줍니다 (예: client_id)."""
    if not value:
        return None
    return f"{value[:length]}..."
