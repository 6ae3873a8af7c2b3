"""
Client for the football adapter service
"""
from football_adapter.fixture import FixtureEndpoints
from football_adapter.league import LeagueEndpoints
from football_adapter.player import PlayerEndpoints
from football_adapter.team import TeamEndpoints
from football_adapter.transport import Transport


class FootballAdapterClient(FixtureEndpoints, LeagueEndpoints, PlayerEndpoints,
                            TeamEndpoints, Transport):
    """
    Typed client for every adapter operation

    Example:
        with FootballAdapterClient('http://localhost:4343', 'api-key') as client:
            client.add_league('39', '2018')
            league = client.get_league('39', '2018')
    """
