from __future__ import annotations

from dataclasses import dataclass

CALLBACK_PATH = "/api/auth/provider/callback"
PRODUCTION_REDIRECT_URI = "https://aitradr.netlify.app" + CALLBACK_PATH


@dataclass(frozen=True, slots=True)
class RedirectUriPolicy:
    configured_redirect_uri: str | None
    callback_path: str = CALLBACK_PATH
    production_redirect_uri: str = PRODUCTION_REDIRECT_URI
    production_host_suffixes: tuple[str, ...] = ("netlify.app",)
    tunnel_host_suffixes: tuple[str, ...] = (
        "trycloudflare.com",
        "ngrok-free.app",
        "ngrok.app",
        "ngrok.io",
    )
