"""
League endpoints
"""
from football_adapter.endpoints import Endpoint, call
from football_adapter.models import League, LeagueAddResponse, LeagueRequest

ADD_LEAGUE = Endpoint('add_league', 'POST', '/league/add',
                      LeagueAddResponse, 'posting league')
GET_LEAGUE = Endpoint('get_league', 'POST', '/league/get',
                      League, 'retrieving league')


class LeagueEndpoints:
    """League operations, mixed into the client alongside a Transport"""

    def add_league(self, league_id: str, season: str) -> LeagueAddResponse:
        """
        Ask the adapter to import a league season

        Args:
            league_id: Upstream league ID (e.g. "39" for the Premier League)
            season: Season year (e.g. "2018")

        Returns:
            Whether the adapter accepted the league
        """
        payload = LeagueRequest(league_id=league_id, season=season)
        return call(self, ADD_LEAGUE, payload=payload)

    def get_league(self, league_id: str, season: str) -> League:
        """Retrieve a league season the adapter already holds"""
        payload = LeagueRequest(league_id=league_id, season=season)
        return call(self, GET_LEAGUE, payload=payload)
