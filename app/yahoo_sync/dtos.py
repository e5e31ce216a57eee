from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class YahooLeagueDTO(BaseModel):
    league_key: str
    league_id: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    draft_status: str = Field(default="unknown", description="predraft / postdraft 등")
    num_teams: int = 0
    season: Optional[str] = Field(default=None, description="게임 시즌 (예: 2025)")
    game_key: Optional[str] = Field(default=None, description="league_key 의 앞부분")


class YahooTeamDTO(BaseModel):
    team_key: str
    team_id: str
    name: str
    url: Optional[str] = None
    logo_url: Optional[str] = None
    manager_name: Optional[str] = None
    manager_email: Optional[str] = None
    wins: int = 0
    losses: int = 0
    ties: int = 0


class SyncedPlayerDTO(BaseModel):
    """프론트엔드 Player 형식 (camelCase)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    position: str = Field(description="단일 포지션 또는 콤마 구분 (예: LW,RW)")
    team: str = Field(description="NHL/NBA 팀 약어")
    status: str = Field(default="healthy", description="healthy / DTD / IR / IR-LT / OUT")
    notes: Optional[str] = None
    rank: Optional[int] = None
    start_percentage: Optional[float] = Field(default=None, alias="startPercentage")
    ros_percentage: Optional[float] = Field(default=None, alias="rosPercentage")
    stats: Optional[dict[str, str]] = Field(default=None, description="stat_id -> 시즌 값")


class SyncedTeamDTO(BaseModel):
    id: str
    name: str
    owner: Optional[str] = None
    players: list[SyncedPlayerDTO] = Field(default_factory=list)
    record: Optional[str] = Field(default=None, description="W-L-T")
    rank: Optional[int] = None
