from yahoo_sync.adapters.yahoo_fantasy_parser import (
    iter_collection,
    merge_objects,
    newest_season_only,
    normalize_node,
    parse_league_info,
    parse_league_teams,
    parse_player_stats,
    parse_standings,
    parse_team_roster,
    parse_user_leagues,
    season_year,
)
from yahoo_sync.domain.fantasy import YahooLeague


class TestYahooNodeHelpers:
    def test_normalize_node_takes_first_element_of_list(self):
        assert normalize_node([{"a": 1}, {"b": 2}]) == {"a": 1}
        assert normalize_node({"a": 1}) == {"a": 1}
        assert normalize_node([]) is None
        assert normalize_node(None) is None

    def test_merge_objects_skips_non_dicts(self):
        assert merge_objects([{"a": 1}, [], {"b": 2}, "x"]) == {"a": 1, "b": 2}

    def test_iter_collection_skips_count(self):
        collection = {"0": {"id": 0}, "1": {"id": 1}, "count": 2}
        assert [item["id"] for item in iter_collection(collection)] == [0, 1]

    def test_season_year(self):
        assert season_year("2025-26") == "2025"
        assert season_year(2024) == "2024"
        assert season_year("next") is None
        assert season_year(None) is None


class TestParseUserLeagues:
    def test_parses_leagues_with_game_season_and_key(self, user_leagues_payload):
        leagues = parse_user_leagues(user_leagues_payload)

        assert [league.league_key for league in leagues] == ["453.l.1", "465.l.9080"]
        current = leagues[1]
        assert current.name == "Office Hockey"
        assert current.draft_status == "postdraft"
        assert current.num_teams == 12
        assert current.season == "2025"
        assert current.game_key == "465"
        assert leagues[0].draft_status == "unknown"

    def test_newest_season_only(self, user_leagues_payload):
        leagues = newest_season_only(parse_user_leagues(user_leagues_payload))
        assert [league.league_key for league in leagues] == ["465.l.9080"]

    def test_newest_season_only_keeps_all_without_seasons(self):
        leagues = [
            YahooLeague(league_key="1.l.1", league_id="1", name="a", url=None),
            YahooLeague(league_key="1.l.2", league_id="2", name="b", url=None),
        ]
        assert newest_season_only(leagues) == leagues

    def test_empty_response(self):
        assert parse_user_leagues({"fantasy_content": {}}) == []


class TestParseLeagueTeams:
    def test_parses_manager_logo_and_record(self, league_teams_payload):
        teams = parse_league_teams(league_teams_payload())

        assert [team.team_key for team in teams] == ["465.l.9080.t.1", "465.l.9080.t.2"]
        first = teams[0]
        assert first.team_id == "1"
        assert first.name == "Puck Dynasty"
        assert first.manager_name == "Kim"
        assert first.manager_email == "kim@example.com"
        assert first.logo_url == "https://logo/1.png"
        assert (first.wins, first.losses, first.ties) == (10, 3, 1)

    def test_team_id_falls_back_to_team_key_suffix(self, league_teams_payload):
        second = parse_league_teams(league_teams_payload())[1]
        assert second.team_id == "2"
        assert second.has_record is False

    def test_parse_standings(self, league_standings_payload):
        team = parse_standings(league_standings_payload)["465.l.9080.t.1"]
        assert (team.wins, team.losses, team.ties) == (7, 5, 0)

    def test_league_info_merges_data_objects(self):
        payload = {
            "fantasy_content": {"league": [[{"league_key": "465.l.1"}, {"season": "2025"}]]}
        }
        assert parse_league_info(payload) == {"league_key": "465.l.1", "season": "2025"}


class TestParseTeamRoster:
    def test_parses_players_with_ownership(self, team_roster_payload):
        players = parse_team_roster(team_roster_payload)

        assert [p.player_key for p in players] == ["465.p.6743", "465.p.7000"]
        mcdavid = players[0]
        assert mcdavid.player_id == "6743"
        assert mcdavid.full_name == "Connor McDavid"
        assert mcdavid.position == "C"
        assert mcdavid.eligible_positions == ("C", "Util")
        assert mcdavid.status == "DTD"
        assert mcdavid.ownership["percent_start"] == "98"

    def test_player_without_ownership_or_id(self, team_roster_payload):
        draisaitl = parse_team_roster(team_roster_payload)[1]
        assert draisaitl.player_id == "7000"
        assert draisaitl.ownership is None
        assert draisaitl.eligible_positions == ()
        assert draisaitl.position == "C,LW"

    def test_missing_roster_returns_empty(self):
        payload = {"fantasy_content": {"team": [[{"team_key": "465.l.9080.t.1"}]]}}
        assert parse_team_roster(payload) == []

    def test_parse_player_stats(self, player_stats_payload):
        stats = parse_player_stats(player_stats_payload(["465.p.6743"]))
        assert stats == {"465.p.6743": {"1": "20", "2": "35"}}
