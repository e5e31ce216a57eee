from __future__ import annotations

from dataclasses import dataclass

# 만료 5분 전부터는 만료된 것으로 취급
EXPIRY_SKEW_MS = 5 * 60 * 1000


@dataclass(frozen=True, slots=True)
class YahooTokenSet:
    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    token_type: str | None = None
    xoauth_yahoo_guid: str | None = None
    expires_at: int | None = None  # epoch milliseconds

    @classmethod
    def from_provider_payload(cls, payload: dict, *, now_ms: int) -> "YahooTokenSet":
        expires_in = payload.get("expires_in")
        expires_in = int(expires_in) if expires_in is not None else None
        return cls(
            access_token=str(payload["access_token"]),
            refresh_token=payload.get("refresh_token"),
            expires_in=expires_in,
            token_type=payload.get("token_type"),
            xoauth_yahoo_guid=payload.get("xoauth_yahoo_guid"),
            expires_at=now_ms + expires_in * 1000 if expires_in is not None else None,
        )

    def is_expired(self, *, now_ms: int) -> bool:
        return is_expiring(self.expires_at, now_ms=now_ms)


def is_expiring(expires_at: int | None, *, now_ms: int) -> bool:
    if not expires_at:
        return True
    return expires_at < now_ms + EXPIRY_SKEW_MS
