"""Static reference data: competition catalog, broadcasters and image URLs."""

from typing import Dict, List, Optional, TypedDict


class Competition(TypedDict):
    id: int
    name: str
    country: str
    flag: str


class BroadcastInfo(TypedDict):
    poland: List[str]
    uk: List[str]
    usa: List[str]


# ---- FotMob competition catalog ----
# Keys are FotMob's own tournament ids; they are not sequential.
COMPETITIONS: Dict[int, Competition] = {
    47: {"id": 47, "name": "Premier League", "country": "England", "flag": "🏴󠁧󠁢󠁥󠁮󠁧󠁿"},
    87: {"id": 87, "name": "LaLiga", "country": "Spain", "flag": "🇪🇸"},
    55: {"id": 55, "name": "Serie A", "country": "Italy", "flag": "🇮🇹"},
    54: {"id": 54, "name": "Bundesliga", "country": "Germany", "flag": "🇩🇪"},
    53: {"id": 53, "name": "Ligue 1", "country": "France", "flag": "🇫🇷"},
    42: {"id": 42, "name": "Champions League", "country": "Europe", "flag": "🇪🇺"},
    73: {"id": 73, "name": "Europa League", "country": "Europe", "flag": "🇪🇺"},
    10216: {"id": 10216, "name": "Conference League", "country": "Europe", "flag": "🇪🇺"},
    61: {"id": 61, "name": "Liga Portugal", "country": "Portugal", "flag": "🇵🇹"},
    57: {"id": 57, "name": "Eredivisie", "country": "Netherlands", "flag": "🇳🇱"},
    71: {"id": 71, "name": "Süper Lig", "country": "Turkey", "flag": "🇹🇷"},
    40: {"id": 40, "name": "First Division A", "country": "Belgium", "flag": "🇧🇪"},
    64: {"id": 64, "name": "Premiership", "country": "Scotland", "flag": "🏴󠁧󠁢󠁳󠁣󠁴󠁿"},
    536: {"id": 536, "name": "Saudi Pro League", "country": "Saudi Arabia", "flag": "🇸🇦"},
    130: {"id": 130, "name": "MLS", "country": "USA", "flag": "🇺🇸"},
    268: {"id": 268, "name": "Serie A", "country": "Brazil", "flag": "🇧🇷"},
    112: {"id": 112, "name": "Liga Profesional", "country": "Argentina", "flag": "🇦🇷"},
    196: {"id": 196, "name": "Ekstraklasa", "country": "Poland", "flag": "🇵🇱"},
}


def get_competition(competition_id: Optional[int]) -> Optional[Competition]:
    """Return the catalog entry for a FotMob id, or None if we don't track it."""

    if competition_id is None:
        return None
    return COMPETITIONS.get(competition_id)


# ---- Broadcasters per competition (2025/26 rights) ----
BROADCASTS: Dict[int, BroadcastInfo] = {
    42: {
        "poland": ["Canal+ Extra 1", "Canal+ Extra 2", "Canal+ Sport 3", "Canal+ Sport 4"],
        "uk": ["TNT Sports 1", "TNT Sports 2", "discovery+"],
        "usa": ["CBS Sports Network", "Paramount+", "UniMás", "TUDN"],
    },
    73: {
        "poland": ["Polsat Sport 1", "Polsat Sport 2", "Polsat Sport 3", "Polsat Box Go"],
        "uk": ["TNT Sports 1", "TNT Sports 2", "discovery+"],
        "usa": ["CBS Sports Network", "Paramount+", "UniMás"],
    },
    10216: {
        "poland": ["Polsat Sport 1", "Polsat Sport 2", "Polsat Box Go"],
        "uk": ["TNT Sports 1", "TNT Sports 2", "discovery+"],
        "usa": ["CBS Sports Golazo", "Paramount+"],
    },
    47: {
        "poland": ["Canal+ Sport", "Canal+ Sport 2", "Canal+ Extra 1", "Canal+ Extra 2", "Canal+ Extra 3", "Viaplay"],
        "uk": ["Sky Sports Main Event", "Sky Sports Premier League", "Sky Sports Ultra", "TNT Sports 1", "TNT Sports 2", "Amazon Prime Video"],
        "usa": ["NBC", "USA Network", "Peacock", "Telemundo", "Universo"],
    },
    132: {  # FA Cup
        "poland": ["Viaplay"],
        "uk": ["ITV1", "ITV4", "ITVX", "BBC One", "BBC iPlayer"],
        "usa": ["ESPN", "ESPN2", "ESPN+"],
    },
    133: {  # EFL Cup
        "poland": ["Viaplay"],
        "uk": ["Sky Sports Main Event", "Sky Sports Football", "Sky Sports+"],
        "usa": ["Paramount+"],
    },
    87: {
        "poland": ["Eleven Sports 1", "Eleven Sports 2", "Eleven Sports 3", "Eleven Sports 4"],
        "uk": ["Premier Sports 1", "Premier Sports 2", "LaLigaTV"],
        "usa": ["ESPN", "ESPN2", "ESPN+", "ESPN Deportes"],
    },
    138: {  # Copa del Rey
        "poland": ["Eleven Sports 1", "Eleven Sports 2"],
        "uk": ["Premier Sports 1"],
        "usa": ["ESPN+", "ESPN Deportes"],
    },
    55: {
        "poland": ["Eleven Sports 1", "Eleven Sports 2", "Eleven Sports 3", "Eleven Sports 4"],
        "uk": ["TNT Sports 1", "TNT Sports 2", "discovery+"],
        "usa": ["CBS Sports Network", "CBS Sports Golazo", "Paramount+"],
    },
    141: {  # Coppa Italia
        "poland": ["Eleven Sports 1", "Eleven Sports 2"],
        "uk": [],
        "usa": ["CBS Sports Network", "Paramount+"],
    },
    54: {
        "poland": ["Viaplay"],
        "uk": ["Sky Sports Main Event", "Sky Sports Football", "Sky Sports+"],
        "usa": ["ESPN", "ESPN2", "ESPN+"],
    },
    209: {  # DFB Pokal
        "poland": ["Viaplay"],
        "uk": [],
        "usa": ["ESPN+"],
    },
    53: {
        "poland": ["Eleven Sports 1", "Eleven Sports 2"],
        "uk": ["beIN Sports 1", "beIN Sports 2"],
        "usa": ["beIN Sports", "beIN Sports en Español", "beIN Sports XTRA"],
    },
    61: {"poland": ["Eleven Sports 1", "Eleven Sports 2"], "uk": [], "usa": ["GolTV"]},
    57: {"poland": ["Viaplay"], "uk": ["Viaplay"], "usa": ["ESPN+"]},
    71: {"poland": [], "uk": ["beIN Sports 1", "beIN Sports 2"], "usa": ["beIN Sports", "beIN Sports XTRA"]},
    40: {"poland": [], "uk": [], "usa": []},
    64: {
        "poland": ["Viaplay"],
        "uk": ["Sky Sports Main Event", "Sky Sports Football", "Sky Sports+"],
        "usa": ["CBS Sports Golazo", "Paramount+"],
    },
    536: {"poland": ["DAZN"], "uk": ["DAZN"], "usa": ["DAZN"]},
    130: {
        "poland": ["Apple TV (MLS Season Pass)"],
        "uk": ["Apple TV (MLS Season Pass)", "Sky Sports Main Event"],
        "usa": ["Apple TV (MLS Season Pass)", "FOX", "FS1", "FS2"],
    },
    268: {"poland": [], "uk": [], "usa": ["Paramount+", "beIN Sports XTRA"]},
    112: {"poland": [], "uk": [], "usa": ["Paramount+", "TyC Sports Internacional"]},
    196: {
        "poland": ["Canal+ Sport", "Canal+ Sport 2", "Canal+ Sport 3", "Canal+ Extra 1"],
        "uk": [],
        "usa": [],
    },
    197: {  # 1. Liga
        "poland": ["Polsat Sport 1", "Polsat Sport 2", "Polsat Sport Extra", "Polsat Box Go"],
        "uk": [],
        "usa": [],
    },
}


def broadcasts_for(competition_id: int) -> BroadcastInfo:
    """Channels per market; empty lists when we have no rights data."""

    info = BROADCASTS.get(competition_id)
    if info is None:
        return {"poland": [], "uk": [], "usa": []}
    return {"poland": list(info["poland"]), "uk": list(info["uk"]), "usa": list(info["usa"])}


# ---- Image URL builders ----
FOTMOB_IMAGE_BASE = "https://images.fotmob.com/image_resources"


def player_photo_url(player_id: int) -> str:
    return f"{FOTMOB_IMAGE_BASE}/playerimages/{player_id}.png"


def team_logo_url(team_id: int) -> str:
    return f"{FOTMOB_IMAGE_BASE}/logo/teamlogo/{team_id}.png"


def league_logo_url(competition_id: int) -> str:
    return f"{FOTMOB_IMAGE_BASE}/logo/leaguelogo/{competition_id}.png"


# ---- Upstream stat keys ----
STAT_GOALS = "goals"
STAT_ASSISTS = "goal_assist"
STAT_MINUTES = "mins_played"

TEAM_GOALS_TITLE = "goals_title"
TEAM_ASSISTS_TITLE = "goal_assist_title"

PENALTY_SITUATION = "Penalty"
GOAL_EVENT = "Goal"
