from diagnostics.views import EnvDiagnosticsView
from django.urls import path

urlpatterns = [
    path("env", EnvDiagnosticsView.as_view(), name="env_diagnostics"),
]
