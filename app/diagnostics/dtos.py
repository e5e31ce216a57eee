from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PublicVariableStatusDTO(BaseModel):
    is_set: bool = Field(description="설정 여부")
    length: int = Field(default=0, description="값 길이")
    preview: Optional[str] = Field(default=None, description="앞 10자 미리보기")
    trimmed: int = Field(default=0, description="공백 제거 후 길이")


class SecretVariableStatusDTO(BaseModel):
    is_set: bool = Field(description="설정 여부")
    length: int = Field(default=0, description="값 길이")
    preview: Optional[str] = Field(
        default=None, description="설정된 경우 고정 placeholder(***SET***)"
    )


class PlainVariableStatusDTO(BaseModel):
    is_set: bool = Field(description="설정 여부")
    value: Optional[str] = Field(default=None, description="민감하지 않은 값 그대로")


class ServerSideEnvDTO(BaseModel):
    YAHOO_CLIENT_ID: PublicVariableStatusDTO
    YAHOO_CLIENT_SECRET: SecretVariableStatusDTO
    YAHOO_REDIRECT_URI: PlainVariableStatusDTO
    YAHOO_GAME_KEY: PlainVariableStatusDTO


class RuntimeEnvDTO(BaseModel):
    debug: bool
    is_production: bool
    settings_module: Optional[str] = None


class EnvironmentDTO(BaseModel):
    server_side: ServerSideEnvDTO
    runtime: RuntimeEnvDTO


class DiagnosticsStatusDTO(BaseModel):
    overall: str = Field(description="ready | incomplete")
    server_side_ready: bool


class EnvDiagnosticsReportDTO(BaseModel):
    status: DiagnosticsStatusDTO
    environment: EnvironmentDTO
    recommendations: list[str] = Field(default_factory=list)
    timestamp: str
