# app/conftest.py
"""
pytest fixtures for Yahoo OAuth / diagnostics tests
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def yahoo_settings(settings):
    """
    환경 변수와 무관하게 매 테스트를 동일한 설정에서 시작합니다.
    """
    settings.ALLOWED_HOSTS = ["*"]
    settings.YAHOO_CLIENT_ID = "dummy-client-id"
    settings.YAHOO_CLIENT_SECRET = "dummy-client-secret"
    settings.YAHOO_REDIRECT_URI = None
    settings.YAHOO_GAME_KEY = None
    settings.YAHOO_PRODUCTION_REDIRECT_URI = (
        "https://aitradr.netlify.app/api/auth/provider/callback"
    )
    settings.YAHOO_PRODUCTION_HOST_SUFFIXES = ["netlify.app"]
    settings.YAHOO_TUNNEL_HOST_SUFFIXES = [
        "trycloudflare.com",
        "ngrok-free.app",
        "ngrok.app",
        "ngrok.io",
    ]
    return settings


@pytest.fixture
def api_client():
    return APIClient()
