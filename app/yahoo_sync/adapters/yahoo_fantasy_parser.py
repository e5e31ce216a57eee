"""
Yahoo Fantasy API JSON 응답 해석

Yahoo 는 컬렉션을 {"0": {...}, "1": {...}, "count": N} 형태로,
리소스를 [데이터 객체(또는 객체 목록), 하위 리소스, ...] 배열로 돌려줍니다.
구조가 예상과 다르면 예외 대신 해당 항목을 건너뛰고 로그를 남깁니다.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterator

from yahoo_sync.domain.fantasy import YahooLeague, YahooPlayer, YahooTeam, game_key_of

logger = logging.getLogger(__name__)

_LEADING_YEAR = re.compile(r"^\s*(\d+)")
_RECORD_KEYS = ("wins", "win", "losses", "loss", "ties", "tie")


def normalize_node(node: Any) -> Any:
    """배열이면 첫 원소(데이터 객체)를, 아니면 노드 자체를 반환합니다."""
    if not node:
        return None
    if isinstance(node, list):
        return node[0]
    return node


def merge_objects(items: Any) -> dict:
    """[{"team_key": ...}, {"name": ...}, ...] 형태를 하나의 dict 로 합칩니다."""
    if isinstance(items, dict):
        return dict(items)
    merged: dict = {}
    for item in items or ():
        if isinstance(item, dict):
            merged.update(item)
    return merged


def child(node: Any, index: int) -> Any:
    if isinstance(node, list):
        return node[index] if len(node) > index else None
    if isinstance(node, dict):
        return node.get(str(index))
    return None


def iter_collection(collection: Any) -> Iterator[dict]:
    """숫자 문자열 키 컬렉션을 순서대로 순회합니다 ("count" 제외)."""
    if isinstance(collection, list):
        items = collection
    elif isinstance(collection, dict):
        items = [value for key, value in collection.items() if key != "count"]
    else:
        return
    for item in items:
        if isinstance(item, dict):
            yield item


def fantasy_content(payload: Any) -> dict:
    content = payload.get("fantasy_content") if isinstance(payload, dict) else None
    return content if isinstance(content, dict) else {}


def season_year(season: Any) -> str | None:
    """"2025-26" -> "2025"."""
    if season is None:
        return None
    year = str(season)[:4]
    return year if re.fullmatch(r"\d{4}", year) else None


def parse_user_leagues(payload: Any) -> list[YahooLeague]:
    leagues: list[YahooLeague] = []
    for user_entry in iter_collection(fantasy_content(payload).get("users")):
        user_resources = child(user_entry.get("user"), 1)
        games = user_resources.get("games") if isinstance(user_resources, dict) else None

        for game_entry in iter_collection(games):
            game = game_entry.get("game")
            if not isinstance(game, list):
                continue
            game_info = merge_objects(child(game, 0))
            game_resources = child(game, 1)
            league_collection = (
                game_resources.get("leagues") if isinstance(game_resources, dict) else None
            )

            for league_entry in iter_collection(league_collection):
                data = merge_objects(child(league_entry.get("league"), 0))
                league_key = data.get("league_key")
                if not league_key:
                    continue
                season = game_info.get("season")
                leagues.append(
                    YahooLeague(
                        league_key=league_key,
                        league_id=data.get("league_id"),
                        name=data.get("name"),
                        url=data.get("url"),
                        draft_status=data.get("draft_status") or "unknown",
                        num_teams=_to_int(data.get("num_teams")),
                        season=str(season) if season is not None else None,
                        game_key=game_key_of(league_key),
                    )
                )
    return leagues


def newest_season_only(leagues: list[YahooLeague]) -> list[YahooLeague]:
    years = {league.league_key: _leading_int(league.season) for league in leagues}
    newest = max(years.values(), default=0)
    if newest <= 0:
        return leagues
    return [league for league in leagues if years[league.league_key] == newest]


def parse_league_info(payload: Any) -> dict:
    return merge_objects(child(fantasy_content(payload).get("league"), 0))


def parse_game_season(payload: Any) -> str | None:
    season = merge_objects(child(fantasy_content(payload).get("game"), 0)).get("season")
    return str(season) if season else None


def parse_league_teams(payload: Any) -> list[YahooTeam]:
    resources = child(fantasy_content(payload).get("league"), 1)
    teams_node = resources.get("teams") if isinstance(resources, dict) else None
    if not teams_node:
        logger.info("yahoo_sync_no_teams_in_response")
        return []

    teams: list[YahooTeam] = []
    skipped = 0
    for entry in iter_collection(teams_node):
        team = parse_team_entry(entry)
        if team is None:
            skipped += 1
            continue
        teams.append(team)

    expected = _to_int(teams_node.get("count")) if isinstance(teams_node, dict) else 0
    if skipped:
        logger.warning("yahoo_sync_teams_skipped count=%s", skipped)
    if expected and len(teams) < expected:
        logger.error(
            "yahoo_sync_team_count_mismatch expected=%s parsed=%s", expected, len(teams)
        )
    return teams


def parse_standings(payload: Any) -> dict[str, YahooTeam]:
    """team_key -> 전적이 채워진 YahooTeam."""
    resources = child(fantasy_content(payload).get("league"), 1)
    standings = (
        normalize_node(resources.get("standings")) if isinstance(resources, dict) else None
    )
    teams_node = standings.get("teams") if isinstance(standings, dict) else None

    result: dict[str, YahooTeam] = {}
    for entry in iter_collection(teams_node):
        team = parse_team_entry(entry)
        if team is not None and team.has_record:
            result[team.team_key] = team
    return result


def parse_team_entry(entry: dict) -> YahooTeam | None:
    team_array = entry.get("team")
    if team_array is None and entry.get("team_key"):
        team_array = [entry]
    if not isinstance(team_array, list) or not team_array:
        return None

    data = merge_objects(team_array[0])
    team_key = data.get("team_key")
    if not team_key:
        logger.warning("yahoo_sync_team_missing_key keys=%s", ",".join(sorted(data)))
        return None

    sections: dict = {}
    for item in team_array[1:]:
        sections.update(merge_objects(item))

    manager_name, manager_email = _first_manager(data.get("managers") or sections.get("managers"))
    wins, losses, ties = (
        _outcome(sections.get("team_standings"))
        or _outcome(data.get("team_standings"))
        or _outcome(data)
        or (0, 0, 0)
    )
    team_id = str(data.get("team_id") or team_key.split(".")[-1])

    return YahooTeam(
        team_key=team_key,
        team_id=team_id,
        name=data.get("name") or f"Team {team_id}",
        url=data.get("url"),
        logo_url=_first_logo(data.get("team_logos")),
        manager_name=manager_name,
        manager_email=manager_email,
        wins=wins,
        losses=losses,
        ties=ties,
    )


def parse_team_roster(payload: Any) -> list[YahooPlayer]:
    team = fantasy_content(payload).get("team")
    if not isinstance(team, list) or len(team) < 2:
        logger.info("yahoo_sync_no_roster_in_response")
        return []

    roster = None
    resources = team[1]
    for item in resources if isinstance(resources, list) else [resources]:
        if isinstance(item, dict) and "roster" in item:
            roster = item["roster"]
            break

    players_node = None
    first = child(roster, 0)
    if isinstance(first, dict):
        players_node = first.get("players")
    if players_node is None and isinstance(roster, dict):
        players_node = roster.get("players")

    players: list[YahooPlayer] = []
    for entry in iter_collection(players_node):
        player = parse_player_entry(entry)
        if player is not None:
            players.append(player)
    return players


def parse_player_entry(entry: dict) -> YahooPlayer | None:
    player_array = entry.get("player")
    if not isinstance(player_array, list) or not isinstance(child(player_array, 0), list):
        return None

    data: dict = {}
    for item in player_array[0]:
        if isinstance(item, dict):
            data.update(item)

    player_key = data.get("player_key")
    if not player_key:
        logger.warning("yahoo_sync_player_missing_key keys=%s", ",".join(sorted(data)))
        return None

    name = data.get("name")
    full_name = name.get("full") if isinstance(name, dict) else name
    eligible = _positions(data.get("eligible_positions"))
    key_parts = player_key.split(".")

    return YahooPlayer(
        player_key=player_key,
        player_id=str(data.get("player_id") or (key_parts[2] if len(key_parts) > 2 else "")),
        full_name=full_name if isinstance(full_name, str) and full_name else "Unknown Player",
        display_position=_str_or(data.get("display_position"), "N/A"),
        primary_position=_str_or(data.get("primary_position"), ""),
        position=_first_str(
            data.get("position"),
            data.get("primary_position"),
            data.get("display_position"),
            eligible[0] if eligible else None,
        ),
        eligible_positions=eligible,
        editorial_team_abbr=data.get("editorial_team_abbr"),
        editorial_team_key=data.get("editorial_team_key"),
        status=data.get("status"),
        injury_note=data.get("injury_note"),
        ownership=_find_ownership(player_array[1:]),
    )


def parse_player_stats(payload: Any) -> dict[str, dict[str, str]]:
    """player_key -> {stat_id: value}."""
    result: dict[str, dict[str, str]] = {}
    for entry in iter_collection(fantasy_content(payload).get("players")):
        player_array = entry.get("player")
        if not isinstance(player_array, list):
            continue
        player_key = merge_objects(child(player_array, 0)).get("player_key")
        if not player_key:
            continue

        sections: dict = {}
        for item in player_array[1:]:
            sections.update(merge_objects(item))
        player_stats = normalize_node(sections.get("player_stats"))
        if not isinstance(player_stats, dict):
            continue

        stats: dict[str, str] = {}
        for stat_entry in iter_collection(player_stats.get("stats")):
            stat = normalize_node(stat_entry.get("stat"))
            if isinstance(stat, dict) and stat.get("stat_id") is not None:
                stats[str(stat["stat_id"])] = str(stat.get("value", ""))
        result[player_key] = stats
    return result


def _first_manager(managers: Any) -> tuple[str | None, str | None]:
    for entry in iter_collection(managers):
        manager = normalize_node(entry.get("manager"))
        if isinstance(manager, dict):
            return manager.get("nickname"), manager.get("email")
    return None, None


def _first_logo(logos: Any) -> str | None:
    for entry in iter_collection(logos):
        logo = entry.get("team_logo", entry)
        if isinstance(logo, dict) and logo.get("url"):
            return logo["url"]
    return None


def _outcome(node: Any) -> tuple[int, int, int] | None:
    if not isinstance(node, dict):
        return None
    totals = node.get("outcome_totals", node)
    if not isinstance(totals, dict) or not any(k in totals for k in _RECORD_KEYS):
        return None
    return (
        _to_int(totals.get("wins", totals.get("win"))),
        _to_int(totals.get("losses", totals.get("loss"))),
        _to_int(totals.get("ties", totals.get("tie"))),
    )


def _positions(node: Any) -> tuple[str, ...]:
    if isinstance(node, dict):
        node = node.get("position")
    if isinstance(node, str):
        node = [node]
    if not isinstance(node, list):
        return ()

    positions = []
    for item in node:
        value = item.get("position") if isinstance(item, dict) else item
        if isinstance(value, str) and value.strip():
            positions.append(value)
    return tuple(positions)


def _find_ownership(items: list) -> dict | None:
    found = None
    for item in items:
        candidates = item if isinstance(item, list) else [item]
        for candidate in candidates:
            if isinstance(candidate, dict) and isinstance(candidate.get("ownership"), dict):
                found = candidate["ownership"]
    if found and found.get("ownership_type"):
        return found
    return None


def _first_str(*values: Any) -> str:
    for value in values:
        if isinstance(value, str) and value:
            return value
    return ""


def _str_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _leading_int(value: Any) -> int:
    match = _LEADING_YEAR.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else 0


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    return _leading_int(value)
