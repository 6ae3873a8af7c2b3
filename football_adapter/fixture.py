"""
Fixture endpoints
"""
from football_adapter.endpoints import Endpoint, call
from football_adapter.models import (
    FixtureParams,
    FixtureRequest,
    FixturesByDateAndLeagueRequest,
    FixturesResponse,
    GeneralFixtureData,
)
from football_adapter.transport import FIXTURE_CATALOGUE_ENDPOINT

ADD_FIXTURE = Endpoint('add_fixture', 'POST', '/fixture/add',
                       GeneralFixtureData, 'posting fixture')
GET_FIXTURE = Endpoint('get_fixture', 'GET', '/fixture/get/{}',
                       GeneralFixtureData, 'retrieving fixture')
GET_FIXTURE_BY_DATE_AND_LEAGUE = Endpoint('get_fixture_by_date_and_league', 'POST',
                                          '/fixture/get/bydateandleague',
                                          FixturesResponse, 'retrieving fixture')
GET_FIXTURES = Endpoint('get_fixtures', 'POST', '/fixtures',
                        FixturesResponse, 'retrieving fixtures', 'fixtures response')
LIST_FIXTURES = Endpoint('list_fixtures', 'GET', FIXTURE_CATALOGUE_ENDPOINT,
                         None, 'listing fixtures')


class FixtureEndpoints:
    """Fixture operations, mixed into the client alongside a Transport"""

    def add_fixture(self, fixture_id: str) -> GeneralFixtureData:
        """
        Ask the adapter to start tracking a fixture

        Args:
            fixture_id: Upstream fixture ID

        Returns:
            The fixture as the adapter stored it
        """
        payload = FixtureRequest(fixture_id=fixture_id)
        return call(self, ADD_FIXTURE, payload=payload)

    def get_fixture(self, fixture_id: str) -> GeneralFixtureData:
        """Retrieve one stored fixture by ID"""
        return call(self, GET_FIXTURE, fixture_id)

    def get_fixture_by_date_and_league(self, date: str, league: str) -> FixturesResponse:
        """
        Retrieve the fixtures a league plays on one day

        Args:
            date: Match day (YYYY-MM-DD)
            league: League ID
        """
        payload = FixturesByDateAndLeagueRequest(date=date, league=league)
        return call(self, GET_FIXTURE_BY_DATE_AND_LEAGUE, payload=payload)

    def get_fixtures(self, params: FixtureParams) -> FixturesResponse:
        """
        Retrieve fixtures matching any combination of query parameters

        The mapping is sent as the JSON body unchanged and the adapter
        forwards it upstream. See FIXTURE_QUERY_PARAMETERS for the keys
        it understands, e.g.:

            client.get_fixtures({'date': '2024-01-15'})
            client.get_fixtures({'live': 'all'})
            client.get_fixtures({'team': 33, 'season': 2024, 'last': 5})

        Args:
            params: Parameter name -> str, int or bool value

        Raises:
            SerializationError: a key isn't a string or a value isn't str/int/bool
        """
        return call(self, GET_FIXTURES, payload=params)

    def list_fixtures(self) -> bytes:
        """Raw, undecoded body of the adapter's fixture catalogue"""
        return call(self, LIST_FIXTURES)
