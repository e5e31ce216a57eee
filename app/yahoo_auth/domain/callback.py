from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class YahooAuthorizationCallback:
    """프로바이더가 콜백 URL로 넘겨준 쿼리 파라미터 (요청 단위로만 존재)."""

    code: str | None = None
    state: str | None = None
    error: str | None = None
    error_description: str | None = None
    received_params: tuple[str, ...] = field(default_factory=tuple)
