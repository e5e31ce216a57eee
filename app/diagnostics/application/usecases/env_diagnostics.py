from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Mapping

from common.masking import preview
from diagnostics.dtos import (
    DiagnosticsStatusDTO,
    EnvDiagnosticsReportDTO,
    EnvironmentDTO,
    PlainVariableStatusDTO,
    PublicVariableStatusDTO,
    RuntimeEnvDTO,
    SecretVariableStatusDTO,
    ServerSideEnvDTO,
)
from yahoo_sync.domain.fantasy import DEFAULT_GAME_KEY

SECRET_PLACEHOLDER = "***SET***"


@dataclass(frozen=True, slots=True)
class RuntimeInfo:
    debug: bool
    is_production: bool
    settings_module: str | None = None


class EnvDiagnosticsUseCase:
    """
    설정 변수 존재 여부 진단 유스케이스.

    - 시크릿은 is_set/length/고정 placeholder 만 노출
    - 누락/불일치 항목에 대한 조치 안내(recommendations) 생성
    - 부수효과 없음
    """

    def __init__(
        self,
        *,
        config: Mapping[str, str | None],
        runtime: RuntimeInfo,
        expected_redirect_uri: str,
        clock: Callable[[], datetime] | None = None,
    ):
        self._config = config
        self._runtime = runtime
        self._expected_redirect_uri = expected_redirect_uri
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(self) -> EnvDiagnosticsReportDTO:
        client_id = self._config.get("YAHOO_CLIENT_ID") or None
        client_secret = self._config.get("YAHOO_CLIENT_SECRET") or None
        redirect_uri = self._config.get("YAHOO_REDIRECT_URI") or None
        game_key = self._config.get("YAHOO_GAME_KEY") or None

        server_side = ServerSideEnvDTO(
            YAHOO_CLIENT_ID=PublicVariableStatusDTO(
                is_set=client_id is not None,
                length=len(client_id or ""),
                preview=preview(client_id),
                trimmed=len((client_id or "").strip()),
            ),
            YAHOO_CLIENT_SECRET=SecretVariableStatusDTO(
                is_set=client_secret is not None,
                length=len(client_secret or ""),
                preview=SECRET_PLACEHOLDER if client_secret else None,
            ),
            YAHOO_REDIRECT_URI=PlainVariableStatusDTO(
                is_set=redirect_uri is not None, value=redirect_uri
            ),
            YAHOO_GAME_KEY=PlainVariableStatusDTO(
                is_set=game_key is not None, value=game_key
            ),
        )

        server_side_ready = bool(
            server_side.YAHOO_CLIENT_ID.is_set
            and server_side.YAHOO_CLIENT_ID.trimmed > 0
            and server_side.YAHOO_CLIENT_SECRET.is_set
            and server_side.YAHOO_REDIRECT_URI.is_set
        )

        return EnvDiagnosticsReportDTO(
            status=DiagnosticsStatusDTO(
                overall="ready" if server_side_ready else "incomplete",
                server_side_ready=server_side_ready,
            ),
            environment=EnvironmentDTO(
                server_side=server_side,
                runtime=RuntimeEnvDTO(
                    debug=self._runtime.debug,
                    is_production=self._runtime.is_production,
                    settings_module=self._runtime.settings_module,
                ),
            ),
            recommendations=self._recommendations(server_side),
            timestamp=self._clock().isoformat(),
        )

    def _recommendations(self, server_side: ServerSideEnvDTO) -> list[str]:
        recommendations: list[str] = []
        expected = self._expected_redirect_uri

        if not server_side.YAHOO_CLIENT_ID.is_set:
            recommendations.append("Set YAHOO_CLIENT_ID in the deployment environment")
        elif server_side.YAHOO_CLIENT_ID.trimmed == 0:
            recommendations.append(
                "YAHOO_CLIENT_ID is set but empty (may have whitespace)"
            )

        if not server_side.YAHOO_CLIENT_SECRET.is_set:
            recommendations.append(
                "Set YAHOO_CLIENT_SECRET in the deployment environment"
            )

        redirect_uri = server_side.YAHOO_REDIRECT_URI.value
        if not redirect_uri:
            recommendations.append(
                "Set YAHOO_REDIRECT_URI in the deployment environment "
                f"(should be: {expected})"
            )
        else:
            if not redirect_uri.startswith("https://"):
                recommendations.append(
                    "YAHOO_REDIRECT_URI must use HTTPS; Yahoo rejects plain HTTP redirect URIs"
                )
            if redirect_uri != redirect_uri.strip().rstrip("/"):
                recommendations.append(
                    "YAHOO_REDIRECT_URI has surrounding whitespace or a trailing slash; "
                    "Yahoo requires an exact match"
                )
            if redirect_uri != expected:
                recommendations.append(
                    f"YAHOO_REDIRECT_URI should be: {expected} (currently: {redirect_uri})"
                )

        if not server_side.YAHOO_GAME_KEY.is_set:
            recommendations.append(
                "YAHOO_GAME_KEY is not set; league sync requests without gameKey "
                f"will use game {DEFAULT_GAME_KEY}"
            )
        return recommendations
