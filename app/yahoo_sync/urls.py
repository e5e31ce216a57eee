from django.urls import path
from yahoo_sync.views import YahooSyncView

urlpatterns = [
    path("sync", YahooSyncView.as_view(), name="yahoo_sync"),
]
