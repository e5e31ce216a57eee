from __future__ import annotations

from dataclasses import dataclass, field

# game_key 를 지정하지 않은 동기화 요청의 기본값
DEFAULT_GAME_KEY = "418"

# 모든 게임(시즌)의 리그를 조회할 때 쓰는 game_key 값
ALL_GAMES = "all"


@dataclass(frozen=True, slots=True)
class YahooLeague:
    league_key: str
    league_id: str | None
    name: str | None
    url: str | None
    draft_status: str = "unknown"
    num_teams: int = 0
    season: str | None = None
    game_key: str | None = None


@dataclass(frozen=True, slots=True)
class YahooTeam:
    team_key: str
    team_id: str
    name: str
    url: str | None = None
    logo_url: str | None = None
    manager_name: str | None = None
    manager_email: str | None = None
    wins: int = 0
    losses: int = 0
    ties: int = 0

    @property
    def has_record(self) -> bool:
        return bool(self.wins or self.losses or self.ties)


@dataclass(frozen=True, slots=True)
class YahooPlayer:
    player_key: str
    player_id: str
    full_name: str
    display_position: str = "N/A"
    primary_position: str = ""
    position: str = ""
    eligible_positions: tuple[str, ...] = ()
    editorial_team_abbr: str | None = None
    editorial_team_key: str | None = None
    status: str | None = None
    injury_note: str | None = None
    ownership: dict | None = None
    # stat_id -> value (시즌 스탯을 받지 못하면 비어 있음)
    stats: dict[str, str] = field(default_factory=dict)


def game_key_of(league_key: str | None) -> str | None:
    """league_key 형식은 {game_key}.l.{league_id} 입니다."""
    if not league_key:
        return None
    return league_key.split(".")[0] or None
