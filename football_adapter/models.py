"""
Typed request and response shapes exchanged with the adapter service.

Request payloads reject unknown fields. Response payloads keep unknown
fields (``extra="allow"``) so nothing the adapter sends is lost, and
every field has an empty default so keys the adapter omits decode to
their zero value. All models are frozen.
"""
from typing import Any, Dict, List, Optional, Union, get_args

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class RequestPayload(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')


class ResponsePayload(BaseModel):
    """
    Base for decoded adapter responses

    A JSON null in a field that can't hold None decodes to the field's
    default, the same as a missing key. Dumps use the upstream key names
    (e.g. "appearences", "in", "out").
    """

    model_config = ConfigDict(frozen=True, extra='allow', populate_by_name=True,
                              serialize_by_alias=True)

    @model_validator(mode='before')
    @classmethod
    def _null_as_default(cls, data):
        if not isinstance(data, dict):
            return data
        nullable = {}
        for name, field in cls.model_fields.items():
            accepts_none = _accepts_none(field.annotation)
            nullable[name] = accepts_none
            if field.alias:
                nullable[field.alias] = accepts_none
        return {key: value for key, value in data.items()
                if value is not None or nullable.get(key, True)}


def _accepts_none(annotation) -> bool:
    return annotation is Any or type(None) in get_args(annotation)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class FixtureRequest(RequestPayload):
    fixture_id: str


class FixturesByDateAndLeagueRequest(RequestPayload):
    date: str
    league: str


class LeagueRequest(RequestPayload):
    league_id: str
    season: str


# Free-form query for the flexible fixtures endpoint, sent as-is
FixtureParams = Dict[str, Union[str, int, bool]]

# Parameters the adapter forwards to the upstream football API
FIXTURE_QUERY_PARAMETERS = {
    'id': 'The ID of a specific fixture',
    'ids': 'Multiple fixture IDs as "id-id-id" (max 20)',
    'live': 'Live fixtures: "all" or "id-id" for specific leagues',
    'date': 'Date as YYYY-MM-DD',
    'league': 'The league ID',
    'season': 'The season year (YYYY)',
    'team': 'The team ID',
    'last': 'Last N fixtures (max 2 digits)',
    'next': 'Next N fixtures (max 2 digits)',
    'from': 'Start date of a range (YYYY-MM-DD)',
    'to': 'End date of a range (YYYY-MM-DD)',
    'round': 'The round of the fixture',
    'status': 'Fixture status like "NS", "FT" or combined "NS-PST-FT"',
    'venue': 'The venue ID',
    'timezone': 'Timezone for fixture times',
}


# ---------------------------------------------------------------------------
# Shared pieces
# ---------------------------------------------------------------------------

class Goals(ResponsePayload):
    home: Optional[int] = None
    away: Optional[int] = None


class Score(ResponsePayload):
    halftime: Goals = Field(default_factory=Goals)
    fulltime: Goals = Field(default_factory=Goals)
    extratime: Goals = Field(default_factory=Goals)
    penalty: Goals = Field(default_factory=Goals)


class TeamRef(ResponsePayload):
    id: int = 0
    name: str = ''
    logo: str = ''


class Country(ResponsePayload):
    name: str = ''
    code: Optional[str] = None
    flag: Optional[str] = None


class Venue(ResponsePayload):
    id: Optional[int] = None
    name: str = ''
    address: str = ''
    city: str = ''
    capacity: Optional[int] = None
    surface: str = ''
    image: str = ''


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

class FixtureSide(TeamRef):
    winner: Optional[bool] = None


class FixtureLeague(ResponsePayload):
    id: int = 0
    name: str = ''
    country: str = ''
    logo: str = ''
    flag: Optional[str] = None
    season: Optional[int] = None
    round: str = ''


class GeneralFixtureData(ResponsePayload):
    """A fixture as stored and returned by the adapter"""

    fixture_id: str = ''
    status: str = ''
    status_long: str = ''
    elapsed: Optional[int] = None
    date: str = ''
    timestamp: Optional[int] = None
    referee: Optional[str] = None
    venue: Venue = Field(default_factory=Venue)
    league: FixtureLeague = Field(default_factory=FixtureLeague)
    home_team: FixtureSide = Field(default_factory=FixtureSide)
    away_team: FixtureSide = Field(default_factory=FixtureSide)
    goals: Goals = Field(default_factory=Goals)
    score: Score = Field(default_factory=Score)


class FixtureStatus(ResponsePayload):
    long: str = ''
    short: str = ''
    elapsed: Optional[int] = None


class FixturePeriods(ResponsePayload):
    first: Optional[int] = None
    second: Optional[int] = None


class FixtureVenue(ResponsePayload):
    id: Optional[int] = None
    name: Optional[str] = None
    city: Optional[str] = None


class FixtureInfo(ResponsePayload):
    id: int = 0
    referee: Optional[str] = None
    timezone: str = ''
    date: str = ''
    timestamp: Optional[int] = None
    periods: FixturePeriods = Field(default_factory=FixturePeriods)
    venue: FixtureVenue = Field(default_factory=FixtureVenue)
    status: FixtureStatus = Field(default_factory=FixtureStatus)


class FixtureTeams(ResponsePayload):
    home: FixtureSide = Field(default_factory=FixtureSide)
    away: FixtureSide = Field(default_factory=FixtureSide)


class FixtureEntry(ResponsePayload):
    fixture: FixtureInfo = Field(default_factory=FixtureInfo)
    league: FixtureLeague = Field(default_factory=FixtureLeague)
    teams: FixtureTeams = Field(default_factory=FixtureTeams)
    goals: Goals = Field(default_factory=Goals)
    score: Score = Field(default_factory=Score)


class Paging(ResponsePayload):
    current: int = 0
    total: int = 0


class FixturesResponse(ResponsePayload):
    """Fixture list in the upstream football API envelope"""

    get: str = ''
    parameters: Dict[str, Any] = Field(default_factory=dict)
    # upstream sends [] when there are no errors and an object otherwise
    errors: Union[List[Any], Dict[str, Any]] = Field(default_factory=list)
    results: int = 0
    paging: Paging = Field(default_factory=Paging)
    response: List[FixtureEntry] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Leagues
# ---------------------------------------------------------------------------

class LeagueAddResponse(ResponsePayload):
    success: bool = False
    message: str = ''


class LeagueSeason(ResponsePayload):
    year: int = 0
    start: str = ''
    end: str = ''
    current: bool = False


class League(ResponsePayload):
    id: int = 0
    name: str = ''
    type: str = ''
    logo: str = ''
    country: Country = Field(default_factory=Country)
    seasons: List[LeagueSeason] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Players
# ---------------------------------------------------------------------------

class Birth(ResponsePayload):
    date: Optional[str] = None
    place: Optional[str] = None
    country: Optional[str] = None


class PlayerInfo(ResponsePayload):
    id: int = 0
    name: str = ''
    firstname: str = ''
    lastname: str = ''
    age: Optional[int] = None
    birth: Birth = Field(default_factory=Birth)
    nationality: str = ''
    height: Optional[str] = None
    weight: Optional[str] = None
    injured: bool = False
    photo: str = ''


class StatsLeague(ResponsePayload):
    id: Optional[int] = None
    name: str = ''
    country: str = ''
    logo: str = ''
    season: Optional[int] = None


class Games(ResponsePayload):
    # upstream spells it "appearences"
    appearances: Optional[int] = Field(default=None, alias='appearences')
    lineups: Optional[int] = None
    minutes: Optional[int] = None
    number: Optional[int] = None
    position: str = ''
    rating: Optional[str] = None
    captain: bool = False


class GoalStats(ResponsePayload):
    total: Optional[int] = None
    conceded: Optional[int] = None
    assists: Optional[int] = None
    saves: Optional[int] = None


class Cards(ResponsePayload):
    yellow: Optional[int] = None
    yellowred: Optional[int] = None
    red: Optional[int] = None


class PlayerStatistics(ResponsePayload):
    team: TeamRef = Field(default_factory=TeamRef)
    league: StatsLeague = Field(default_factory=StatsLeague)
    games: Games = Field(default_factory=Games)
    goals: GoalStats = Field(default_factory=GoalStats)
    cards: Cards = Field(default_factory=Cards)


class TransferTeams(ResponsePayload):
    incoming: TeamRef = Field(default_factory=TeamRef, alias='in')
    outgoing: TeamRef = Field(default_factory=TeamRef, alias='out')


class Transfer(ResponsePayload):
    date: str = ''
    type: Optional[str] = None
    teams: TransferTeams = Field(default_factory=TransferTeams)


class Injury(ResponsePayload):
    type: str = ''
    reason: str = ''
    date: str = ''
    team: TeamRef = Field(default_factory=TeamRef)
    league: StatsLeague = Field(default_factory=StatsLeague)


class PlayerResponse(ResponsePayload):
    """
    Player data returned by the adapter

    The basic variant (no league/season) leaves transfers and injuries empty.
    """

    player: PlayerInfo = Field(default_factory=PlayerInfo)
    statistics: List[PlayerStatistics] = Field(default_factory=list)
    career_statistics: List[PlayerStatistics] = Field(default_factory=list)
    transfers: List[Transfer] = Field(default_factory=list)
    injuries: List[Injury] = Field(default_factory=list)
    performance: Dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------

class TeamInfo(ResponsePayload):
    id: int = 0
    name: str = ''
    code: Optional[str] = None
    country: str = ''
    founded: Optional[int] = None
    national: bool = False
    logo: str = ''


class SquadPlayer(ResponsePayload):
    id: int = 0
    name: str = ''
    age: Optional[int] = None
    number: Optional[int] = None
    position: str = ''
    nationality: str = ''
    photo: str = ''


class TeamFixture(ResponsePayload):
    fixture_id: int = 0
    date: str = ''
    status: str = ''
    league: str = ''
    home_team: str = ''
    away_team: str = ''
    home_goals: Optional[int] = None
    away_goals: Optional[int] = None


class TeamResponse(ResponsePayload):
    """
    Team data returned by the adapter

    The basic variant (no league/season) carries team and venue only;
    squad and fixture lists come back empty.
    """

    team: TeamInfo = Field(default_factory=TeamInfo)
    venue: Venue = Field(default_factory=Venue)
    squad: List[SquadPlayer] = Field(default_factory=list)
    recent_fixtures: List[TeamFixture] = Field(default_factory=list)
    upcoming_fixtures: List[TeamFixture] = Field(default_factory=list)
