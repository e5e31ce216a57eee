"""
Yahoo Fantasy API 응답 샘플 (format=json 형태를 축약)
"""
import pytest
from django.core.cache import cache


def _user_leagues_payload():
    return {
        "fantasy_content": {
            "users": {
                "0": {
                    "user": [
                        [{"guid": "GUID"}],
                        {
                            "games": {
                                "0": {
                                    "game": [
                                        {"game_key": "453", "season": "2024"},
                                        {
                                            "leagues": {
                                                "0": {
                                                    "league": [
                                                        {
                                                            "league_key": "453.l.1",
                                                            "league_id": "1",
                                                            "name": "Last Year",
                                                            "url": "https://hockey.fantasysports.yahoo.com/2024/1",
                                                            "num_teams": "10",
                                                        }
                                                    ]
                                                },
                                                "count": 1,
                                            }
                                        },
                                    ]
                                },
                                "1": {
                                    "game": [
                                        {"game_key": "465", "season": "2025"},
                                        {
                                            "leagues": {
                                                "0": {
                                                    "league": [
                                                        {
                                                            "league_key": "465.l.9080",
                                                            "league_id": "9080",
                                                            "name": "Office Hockey",
                                                            "url": "https://hockey.fantasysports.yahoo.com/hockey/9080",
                                                            "draft_status": "postdraft",
                                                            "num_teams": "12",
                                                        }
                                                    ]
                                                },
                                                "count": 1,
                                            }
                                        },
                                    ]
                                },
                                "2": {
                                    "game": [
                                        {"game_key": "466", "season": "2025"},
                                        {"leagues": []},
                                    ]
                                },
                                "count": 3,
                            }
                        },
                    ]
                },
                "count": 1,
            }
        }
    }


def _league_teams_payload(*, with_standings=True):
    first_team = [
        [
            {"team_key": "465.l.9080.t.1"},
            {"team_id": "1"},
            {"name": "Puck Dynasty"},
            [],
            {"url": "https://hockey.fantasysports.yahoo.com/hockey/9080/1"},
            {"team_logos": [{"team_logo": {"size": "large", "url": "https://logo/1.png"}}]},
            {
                "managers": [
                    {
                        "manager": {
                            "manager_id": "1",
                            "nickname": "Kim",
                            "email": "kim@example.com",
                        }
                    }
                ]
            },
        ],
    ]
    if with_standings:
        first_team.append(
            {
                "team_standings": {
                    "rank": 1,
                    "outcome_totals": {"wins": "10", "losses": "3", "ties": 1},
                }
            }
        )

    return {
        "fantasy_content": {
            "league": [
                {"league_key": "465.l.9080", "name": "Office Hockey"},
                {
                    "teams": {
                        "0": {"team": first_team},
                        "1": {
                            "team": [
                                [{"team_key": "465.l.9080.t.2"}, {"name": "Ice Cold"}],
                            ]
                        },
                        "2": {"team": [[{"name": "Broken Team"}]]},
                        "count": 3,
                    }
                },
            ]
        }
    }


def _league_standings_payload():
    return {
        "fantasy_content": {
            "league": [
                {"league_key": "465.l.9080"},
                {
                    "standings": [
                        {
                            "teams": {
                                "0": {
                                    "team": [
                                        [{"team_key": "465.l.9080.t.1"}, {"name": "Puck Dynasty"}],
                                        {
                                            "team_standings": {
                                                "rank": "2",
                                                "outcome_totals": {
                                                    "wins": "7",
                                                    "losses": "5",
                                                    "ties": "0",
                                                },
                                            }
                                        },
                                    ]
                                },
                                "count": 1,
                            }
                        }
                    ]
                },
            ]
        }
    }


def _team_roster_payload():
    return {
        "fantasy_content": {
            "team": [
                [{"team_key": "465.l.9080.t.1"}, {"name": "Puck Dynasty"}],
                {
                    "roster": {
                        "coverage_type": "date",
                        "0": {
                            "players": {
                                "0": {
                                    "player": [
                                        [
                                            {"player_key": "465.p.6743"},
                                            {"player_id": "6743"},
                                            {"name": {"full": "Connor McDavid", "first": "Connor"}},
                                            {"editorial_team_abbr": "Edm"},
                                            {"display_position": "C"},
                                            {
                                                "eligible_positions": [
                                                    {"position": "C"},
                                                    {"position": "Util"},
                                                ]
                                            },
                                            {"status": "DTD"},
                                            {"injury_note": "Lower Body"},
                                        ],
                                        {"selected_position": [{"position": "C"}]},
                                        {
                                            "ownership": {
                                                "ownership_type": "team",
                                                "value": "1",
                                                "percent_owned": "99.5",
                                                "percent_start": "98",
                                            }
                                        },
                                    ]
                                },
                                "1": {
                                    "player": [
                                        [
                                            {"player_key": "465.p.7000"},
                                            {"name": {"full": "Leon Draisaitl"}},
                                            {"editorial_team_abbr": "Edm"},
                                            {"display_position": "C,LW"},
                                        ],
                                    ]
                                },
                                "2": {"player": [{"player_key": "not-nested"}]},
                                "count": 3,
                            }
                        },
                    }
                },
            ]
        }
    }


def _player_stats_payload(player_keys):
    players = {
        str(i): {
            "player": [
                [{"player_key": key}, {"name": {"full": key}}],
                {
                    "player_stats": {
                        "0": {"coverage_type": "season", "season": "2025"},
                        "stats": [
                            {"stat": {"stat_id": "1", "value": "20"}},
                            {"stat": {"stat_id": "2", "value": "35"}},
                        ],
                    }
                },
            ]
        }
        for i, key in enumerate(player_keys)
    }
    players["count"] = len(player_keys)
    return {"fantasy_content": {"players": players}}


@pytest.fixture(autouse=True)
def clear_season_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user_leagues_payload():
    return _user_leagues_payload()


@pytest.fixture
def league_teams_payload():
    return _league_teams_payload


@pytest.fixture
def league_standings_payload():
    return _league_standings_payload()


@pytest.fixture
def team_roster_payload():
    return _team_roster_payload()


@pytest.fixture
def player_stats_payload():
    return _player_stats_payload
