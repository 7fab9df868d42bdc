from typing import List, Optional, TypedDict


class PlayerRef(TypedDict):
    id: int
    name: str
    firstname: str
    lastname: str
    age: int
    nationality: str
    photo: str


class TeamRef(TypedDict):
    id: int
    name: str                # blank until team-name enrichment runs
    logo: str


class TopScorer(TypedDict):
    rank: int                # 1-based list position
    player: PlayerRef
    team: TeamRef
    goals: int
    assists: int
    penalties: int           # penalty goals
    penaltyMissed: int
    appearances: int
    minutes: int
    rating: Optional[str]
    yellowCards: int
    redCards: int


class PlayerStatsPort:
    def get_top_scorers(self, competition_id: int) -> List[TopScorer]: ...

    def get_top_assists(self, competition_id: int) -> List[TopScorer]: ...
