from typing import List, Optional, TypedDict


class TeamOverview(TypedDict):
    id: int
    name: str
    logo: str
    country: str
    leagueId: int
    leagueName: str
    seasonId: int


class TeamPlayerStat(TypedDict):
    id: int
    name: str
    photo: str
    value: int
    subValue: int
    appearances: int
    minutes: int
    rank: int
    country: str


class FormEntry(TypedDict):
    result: str
    opponent: str
    score: str
    date: str


class NextMatch(TypedDict):
    home: str
    away: str
    date: str
    tournament: str


class TeamStats(TypedDict):
    overview: TeamOverview
    scorers: List[TeamPlayerStat]
    assisters: List[TeamPlayerStat]
    form: List[FormEntry]
    nextMatch: Optional[NextMatch]


class TeamStatsPort:
    def get_team_stats(self, team_id: int) -> TeamStats: ...
