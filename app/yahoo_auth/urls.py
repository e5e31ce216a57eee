from django.urls import path
from yahoo_auth.views import (
    YahooOAuthCallbackView,
    YahooOAuthStartView,
    YahooTokenRefreshView,
)

urlpatterns = [
    path("start", YahooOAuthStartView.as_view(), name="yahoo_oauth_start"),
    path("callback", YahooOAuthCallbackView.as_view(), name="yahoo_oauth_callback"),
    path("refresh", YahooTokenRefreshView.as_view(), name="yahoo_token_refresh"),
]
