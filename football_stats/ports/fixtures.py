from typing import List, Literal, NotRequired, Optional, TypedDict

FixtureStatus = Literal["upcoming", "live", "finished"]


class FixtureTeam(TypedDict):
    id: int
    name: str
    shortName: str


class Fixture(TypedDict):
    id: str
    round: str
    homeTeam: FixtureTeam
    awayTeam: FixtureTeam
    utcTime: str
    status: FixtureStatus
    score: Optional[str]


class TodaysMatch(Fixture):
    leagueId: int
    leagueName: str


class TodaysMatchesGroup(TypedDict):
    leagueId: int
    leagueName: str
    leagueCountry: str
    leagueLogo: NotRequired[str]
    broadcasts: NotRequired[dict]
    matches: List[TodaysMatch]


class FixturesPort:
    def get_fixtures(self, competition_id: int, limit: Optional[int] = None) -> List[Fixture]: ...
