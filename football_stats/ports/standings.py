from typing import Dict, List, TypedDict

from .stats import TeamRef


class StandingRow(TypedDict):
    rank: int
    team: TeamRef
    points: int
    played: int
    win: int
    draw: int
    lose: int
    goalsFor: int
    goalsAgainst: int
    goalsDiff: int           # provider figure, not recomputed
    form: str


class StandingsPort:
    def get_standings(self, competition_id: int) -> List[StandingRow]: ...

    def get_team_names(self, competition_id: int) -> Dict[int, str]: ...
