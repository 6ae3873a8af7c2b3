"""
Team endpoints
"""
from football_adapter.endpoints import Endpoint, call
from football_adapter.models import TeamResponse

GET_TEAM = Endpoint('get_team', 'GET', '/team/get/{}/{}/{}',
                    TeamResponse, 'retrieving team data', 'team response data')
GET_TEAM_BASIC = Endpoint('get_team_basic', 'GET', '/team/get/{}',
                          TeamResponse, 'retrieving basic team data', 'team response data')


class TeamEndpoints:
    """Team operations, mixed into the client alongside a Transport"""

    def get_team(self, team_id: str, league_id: str, season: str) -> TeamResponse:
        """
        Retrieve full team data for a league season

        Args:
            team_id: Upstream team ID
            league_id: League ID
            season: Season year (e.g. "2023")

        Returns:
            TeamResponse with team info, squad, venue, the last 5 results
            and the next 5 scheduled fixtures
        """
        return call(self, GET_TEAM, team_id, league_id, season)

    def get_team_basic(self, team_id: str) -> TeamResponse:
        """Team info and home venue only; squad and fixtures come back empty"""
        return call(self, GET_TEAM_BASIC, team_id)
