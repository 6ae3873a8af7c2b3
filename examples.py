#!/usr/bin/env python3
"""
Example usage of the football adapter client
"""
from football_adapter.client import FootballAdapterClient
from football_adapter.config import FOOTBALL_ADAPTER_API_KEY, FOOTBALL_ADAPTER_BASE_URL


def league_workflow(client):
    """Import a league season, then read it back"""

    print("=" * 80)
    print("FOOTBALL ADAPTER - LEAGUE WORKFLOW")
    print("=" * 80)

    print("\n1. ADD LEAGUE")
    print("-" * 80)
    print("League: Premier League (39), season 2018")

    added = client.add_league("39", "2018")
    print(f"Success: {added.success}")
    if added.message:
        print(f"Message: {added.message}")

    print("\n2. GET LEAGUE")
    print("-" * 80)
    league = client.get_league("39", "2018")
    print(f"{league.name} ({league.country.name}) - {league.type}")
    for season in league.seasons:
        marker = " (current)" if season.current else ""
        print(f"  {season.year}: {season.start} -> {season.end}{marker}")


def fixtures_workflow(client):
    """Look up fixtures a few different ways"""

    print("\n" + "=" * 80)
    print("FIXTURES")
    print("=" * 80)

    fixtures = client.get_fixture_by_date_and_league("2018-08-10", "39")
    print(f"\nFixtures on 2018-08-10: {fixtures.results}")
    for entry in fixtures.response:
        teams = entry.teams
        print(f"  {teams.home.name} {entry.goals.home}-{entry.goals.away} {teams.away.name}")

    last_five = client.get_fixtures({"team": 33, "season": 2018, "last": 5})
    print(f"\nLast 5 for team 33: {last_five.results} fixtures")

    if fixtures.response:
        fixture_id = str(fixtures.response[0].fixture.id)
        stored = client.add_fixture(fixture_id)
        print(f"\nTracking fixture {stored.fixture_id} (status {stored.status})")


def team_and_player_workflow(client):
    """Full and basic team/player lookups"""

    print("\n" + "=" * 80)
    print("TEAMS AND PLAYERS")
    print("=" * 80)

    team = client.get_team("33", "39", "2018")
    print(f"\n{team.team.name} - {team.venue.name}, {team.venue.city}")
    print(f"Squad size: {len(team.squad)}")
    for fixture in team.upcoming_fixtures:
        print(f"  next: {fixture.date} {fixture.home_team} vs {fixture.away_team}")

    player = client.get_player_basic("276")
    info = player.player
    print(f"\n{info.name} ({info.nationality}), age {info.age}")
    for stats in player.statistics:
        print(f"  {stats.league.name}: {stats.goals.total} goals in {stats.games.appearances} games")


if __name__ == '__main__':
    with FootballAdapterClient(FOOTBALL_ADAPTER_BASE_URL, FOOTBALL_ADAPTER_API_KEY) as adapter:
        league_workflow(adapter)
        fixtures_workflow(adapter)
        team_and_player_workflow(adapter)
