from typing import List, Optional, TypedDict


class PlayerMatchEntry(TypedDict):
    matchId: str
    date: str
    leagueId: int
    leagueName: str
    stage: Optional[str]
    teamName: str
    teamId: int
    opponentName: str
    opponentId: int
    isHome: bool
    homeScore: int
    awayScore: int
    goals: int
    assists: int
    minutesPlayed: int
    rating: Optional[str]
    isTopRating: bool
    playerOfTheMatch: bool
    yellowCards: int
    redCards: int
    onBench: bool


class PlayerProfile(TypedDict):
    id: int
    name: str
    photo: str
    teamId: int
    teamName: str
    teamLogo: str
    position: str
    country: str
    countryCode: str
    age: int
    height: str
    shirtNumber: Optional[int]
    seasonGoals: int
    seasonAssists: int
    seasonAppearances: int
    seasonMinutes: int
    seasonRating: Optional[str]
    matches: List[PlayerMatchEntry]   # only matches with a goal or assist


class PlayerProfilePort:
    def get_player_profile(self, player_id: int) -> PlayerProfile: ...
