"""
Yahoo 팀/선수를 애플리케이션의 팀 형식으로 변환하는 순수 함수 모음.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from yahoo_sync.domain.fantasy import YahooPlayer, YahooTeam

logger = logging.getLogger(__name__)

_NON_SLUG = re.compile(r"[^a-z0-9]")
_DASHES = re.compile(r"-+")


@dataclass(frozen=True, slots=True)
class SyncedPlayer:
    id: str
    name: str
    position: str
    team: str
    status: str = "healthy"
    notes: str | None = None
    rank: int | None = None
    start_percentage: float | None = None
    ros_percentage: float | None = None
    stats: dict[str, str] | None = None


@dataclass(frozen=True, slots=True)
class SyncedTeam:
    id: str
    name: str
    players: tuple[SyncedPlayer, ...]
    owner: str | None = None
    record: str | None = None
    rank: int | None = None


def slugify(name: str) -> str:
    return _DASHES.sub("-", _NON_SLUG.sub("-", name.lower()))


def player_status(status: str | None, injury_note: str | None) -> str:
    if not status:
        return "healthy"
    lowered = status.lower()
    if "ir+" in lowered or "ir-" in lowered:
        return "IR"
    if "ir" in lowered:
        return "IR-LT"
    if "day-to-day" in lowered or "dtd" in lowered:
        return "DTD"
    if "out" in lowered or "suspended" in lowered:
        return "OUT"
    if injury_note:
        return "DTD"
    return "healthy"


def player_position(player: YahooPlayer) -> str:
    """복수 포지션 자격이면 콤마로 연결합니다 (예: "LW,RW")."""
    eligible = [p for p in player.eligible_positions if p and p.strip()]
    if eligible:
        return ",".join(eligible)
    display = player.display_position
    return display if display and display != "N/A" else "N/A"


def team_abbr(player: YahooPlayer) -> str:
    if player.editorial_team_abbr:
        return player.editorial_team_abbr
    # editorial_team_key 형식: {sport}.t.{id}
    parts = (player.editorial_team_key or "").split(".")
    if len(parts) > 1 and parts[1]:
        return parts[1].upper()
    return "N/A"


def player_id(team_name: str, player_key: str) -> str:
    parts = player_key.split(".")
    player_slug = parts[2] if len(parts) > 2 and parts[2] else player_key.replace(".", "-")
    return f"{slugify(team_name)}-{player_slug}"


def build_synced_player(player: YahooPlayer, *, team_name: str) -> SyncedPlayer:
    ownership = player.ownership or {}
    return SyncedPlayer(
        id=player_id(team_name, player.player_key),
        name=player.full_name,
        position=player_position(player),
        team=team_abbr(player),
        status=player_status(player.status, player.injury_note),
        notes=player.injury_note,
        rank=_to_int(ownership.get("value")),
        start_percentage=_to_float(ownership.get("percent_start")),
        ros_percentage=_to_float(ownership.get("percent_owned")),
        stats=dict(player.stats) or None,
    )


def build_synced_team(team: YahooTeam, roster: list[YahooPlayer]) -> SyncedTeam:
    if not team.has_record:
        logger.warning(
            "yahoo_sync_empty_record team_key=%s (standings may not be available yet)",
            team.team_key,
        )
    return SyncedTeam(
        id=slugify(team.name),
        name=team.name,
        owner=team.manager_name,
        players=tuple(build_synced_player(p, team_name=team.name) for p in roster),
        record=f"{team.wins}-{team.losses}-{team.ties}",
    )


def _to_int(value) -> int | None:
    if value in (None, ""):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _to_float(value) -> float | None:
    if value in (None, ""):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
