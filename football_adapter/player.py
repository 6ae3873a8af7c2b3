"""
Player endpoints
"""
from football_adapter.endpoints import Endpoint, call
from football_adapter.models import PlayerResponse

GET_PLAYER = Endpoint('get_player', 'GET', '/player/get/{}/{}/{}',
                      PlayerResponse, 'retrieving player data', 'player response data')
GET_PLAYER_BASIC = Endpoint('get_player_basic', 'GET', '/player/get/{}',
                            PlayerResponse, 'retrieving basic player data',
                            'player response data')


class PlayerEndpoints:
    """Player operations, mixed into the client alongside a Transport"""

    def get_player(self, player_id: str, league_id: str, season: str) -> PlayerResponse:
        """
        Retrieve full player data for a league season

        Args:
            player_id: Upstream player ID
            league_id: League the statistics are scoped to
            season: Season year (e.g. "2023")

        Returns:
            PlayerResponse with basic info, current and career statistics,
            transfer history, injury history and performance data
        """
        return call(self, GET_PLAYER, player_id, league_id, season)

    def get_player_basic(self, player_id: str) -> PlayerResponse:
        """
        Retrieve basic player data without league context

        Transfers and injuries come back empty.
        """
        return call(self, GET_PLAYER_BASIC, player_id)
