from __future__ import annotations

import os

from diagnostics.application.usecases.env_diagnostics import (
    EnvDiagnosticsUseCase,
    RuntimeInfo,
)
from django.conf import settings
from yahoo_auth.domain.redirect_uri import PRODUCTION_REDIRECT_URI

DIAGNOSED_VARIABLES = (
    "YAHOO_CLIENT_ID",
    "YAHOO_CLIENT_SECRET",
    "YAHOO_REDIRECT_URI",
    "YAHOO_GAME_KEY",
)


def build_env_diagnostics_usecase() -> EnvDiagnosticsUseCase:
    return EnvDiagnosticsUseCase(
        config={name: getattr(settings, name, None) for name in DIAGNOSED_VARIABLES},
        runtime=RuntimeInfo(
            debug=bool(settings.DEBUG),
            is_production=bool(getattr(settings, "IS_PRODUCTION", False)),
            settings_module=os.environ.get("DJANGO_SETTINGS_MODULE"),
        ),
        expected_redirect_uri=getattr(
            settings, "YAHOO_PRODUCTION_REDIRECT_URI", PRODUCTION_REDIRECT_URI
        ),
    )
