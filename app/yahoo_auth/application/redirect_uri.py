from __future__ import annotations

import logging
import urllib.parse

from yahoo_auth.domain.redirect_uri import RedirectUriPolicy

logger = logging.getLogger(__name__)


def resolve_redirect_uri(
    policy: RedirectUriPolicy,
    *,
    host: str | None = None,
    forwarded_host: str | None = None,
    origin: str | None = None,
) -> str:
    """
    토큰 교환/인가 요청에 사용할 redirect_uri 를 결정합니다.

    우선순위:
    1) 설정값(YAHOO_REDIRECT_URI): trim + trailing slash 제거 후 그대로 사용
    2) 터널 서비스 host 헤더(cloudflare/ngrok) → https://<host><callback_path>
    3) 요청 origin + callback_path

    운영 배포(production host)로 판별되면 위 결과와 무관하게
    하드코딩된 운영 redirect_uri 를 사용합니다. 헤더는 신뢰하지 않습니다.
    실패해도 예외를 던지지 않으며, 잘못된 값은 이후 토큰 교환에서 거절됩니다.
    """
    request_host = _normalize_host(host or forwarded_host)

    configured = (policy.configured_redirect_uri or "").strip()
    if configured:
        resolved = _strip_trailing_slashes(configured)
        source = "config"
    elif request_host and _matches(request_host, policy.tunnel_host_suffixes):
        resolved = f"https://{request_host}{policy.callback_path}"
        source = "tunnel_host"
    else:
        base = _strip_trailing_slashes((origin or "").strip())
        resolved = f"{base}{policy.callback_path}"
        source = "origin"

    resolved_host = _normalize_host(urllib.parse.urlsplit(resolved).netloc)
    if _matches(request_host, policy.production_host_suffixes) or _matches(
        resolved_host, policy.production_host_suffixes
    ):
        if resolved != policy.production_redirect_uri:
            logger.warning(
                "redirect_uri_production_override source=%s resolved=%s forced=%s",
                source,
                resolved,
                policy.production_redirect_uri,
            )
        return policy.production_redirect_uri

    if not resolved.startswith("https://"):
        logger.warning(
            "redirect_uri_not_https source=%s resolved=%s", source, resolved
        )
    return resolved


def app_root_url(redirect_uri: str) -> str:
    """redirect_uri 에서 애플리케이션 루트(scheme://host/)를 얻습니다."""
    parts = urllib.parse.urlsplit(redirect_uri)
    if not parts.scheme or not parts.netloc:
        return "/"
    return f"{parts.scheme}://{parts.netloc}/"


def _strip_trailing_slashes(value: str) -> str:
    return value.rstrip("/")


def _normalize_host(host: str | None) -> str | None:
    if not host:
        return None
    # X-Forwarded-Host 는 "a, b" 형태일 수 있음
    first = host.split(",")[0].strip().lower()
    return first or None


def _matches(host: str | None, suffixes: tuple[str, ...]) -> bool:
    if not host:
        return False
    hostname = host.split(":")[0]
    return any(hostname == s or hostname.endswith("." + s) for s in suffixes)
