"""Fallback data.

Deterministic placeholder data used when the provider is unreachable or
its answer cannot be trusted:

- get_fallback_teams(): a small curated table of well-known teams per category
- synthesize_players(): a demo roster shaped like the team's sport

Everything here is pure (no I/O, no clock, no randomness) so repeated calls
with the same inputs return identical lists.
"""

from unidecode import unidecode

from sporttracker.core import Player, Team
from sporttracker.core.sports import normalize_category

SOCCER = "Soccer"
BASKETBALL = "Basketball"
BASEBALL = "Baseball"
AMERICAN_FOOTBALL = "American Football"

# Franchise name fragments that identify a non-soccer sport.
# Checked in order; anything unmatched is treated as soccer.
SPORT_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (BASKETBALL, ("lakers", "celtics", "warriors", "hawks")),
    (BASEBALL, ("yankees", "dodgers", "red sox")),
    (AMERICAN_FOOTBALL, ("patriots", "cowboys", "packers")),
)

POSITIONS: dict[str, tuple[str, ...]] = {
    SOCCER: ("Goalkeeper", "Defender", "Midfielder", "Forward", "Winger"),
    BASKETBALL: ("Point Guard", "Shooting Guard", "Small Forward", "Power Forward", "Center"),
    BASEBALL: (
        "Pitcher",
        "Catcher",
        "First Base",
        "Second Base",
        "Shortstop",
        "Third Base",
        "Left Field",
        "Center Field",
        "Right Field",
    ),
    AMERICAN_FOOTBALL: (
        "Quarterback",
        "Running Back",
        "Wide Receiver",
        "Tight End",
        "Offensive Line",
        "Defensive Line",
        "Linebacker",
        "Cornerback",
        "Safety",
    ),
}

SAMPLE_NAMES: dict[str, tuple[str, ...]] = {
    SOCCER: ("Demo Keeper", "Demo Defender 1", "Demo Midfielder 1", "Demo Forward 1", "Demo Winger"),
    BASKETBALL: ("Demo Player 1", "Demo Player 2", "Demo Player 3", "Demo Player 4", "Demo Player 5"),
    BASEBALL: (
        "Demo Pitcher",
        "Demo Catcher",
        "Demo Infielder 1",
        "Demo Infielder 2",
        "Demo Infielder 3",
        "Demo Infielder 4",
        "Demo Outfielder 1",
        "Demo Outfielder 2",
        "Demo Outfielder 3",
    ),
    AMERICAN_FOOTBALL: (
        "Demo QB",
        "Demo RB",
        "Demo WR1",
        "Demo WR2",
        "Demo TE",
        "Demo OL",
        "Demo DL",
        "Demo LB",
        "Demo DB",
    ),
}

_BADGE_BASE = "https://www.thesportsdb.com/images/media/team/badge"

FALLBACK_TEAMS: dict[str, tuple[Team, ...]] = {
    "soccer": (
        Team("133604", "Arsenal", SOCCER, "English Premier League", f"{_BADGE_BASE}/vysruo1448813175.png"),
        Team("133613", "Chelsea", SOCCER, "English Premier League", f"{_BADGE_BASE}/yvwvtu1448813215.png"),
        Team(
            "133602",
            "Manchester United",
            SOCCER,
            "English Premier League",
            f"{_BADGE_BASE}/xzqdr11517509072.png",
        ),
        Team("133616", "Liverpool", SOCCER, "English Premier League", f"{_BADGE_BASE}/tr61id1519401148.png"),
    ),
    "basketball": (
        Team("134859", "Los Angeles Lakers", BASKETBALL, "NBA", f"{_BADGE_BASE}/yqrxrs1420568796.png"),
        Team("134860", "Boston Celtics", BASKETBALL, "NBA", f"{_BADGE_BASE}/xqtxpy1418850263.png"),
        Team("134861", "Golden State Warriors", BASKETBALL, "NBA", f"{_BADGE_BASE}/qsuypq1420568103.png"),
    ),
    "baseball": (
        Team("135249", "New York Yankees", BASEBALL, "MLB", f"{_BADGE_BASE}/tpvstp1438783811.png"),
        Team("135252", "Los Angeles Dodgers", BASEBALL, "MLB", f"{_BADGE_BASE}/wywrtu1438823394.png"),
    ),
}

# League names accepted in place of a category for the curated table
FALLBACK_ALIASES: dict[str, str] = {
    "english premier league": "soccer",
}


def get_fallback_teams(category: str) -> list[Team]:
    """Curated teams for a category; empty for categories without a table."""
    key = normalize_category(category)
    key = FALLBACK_ALIASES.get(key, key)
    return list(FALLBACK_TEAMS.get(key, ()))


def infer_sport(team_name: str) -> str:
    """Guess a team's sport from its name.

    Accents are folded first (unidecode) so "Köln" and "Koln" behave the same.

    Examples:
        >>> infer_sport("Boston Celtics")
        'Basketball'
        >>> infer_sport("Chelsea")
        'Soccer'
    """
    if not team_name:
        return SOCCER

    name = unidecode(team_name).lower()
    for sport, keywords in SPORT_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return sport
    return SOCCER


def synthesize_players(team_id: str, team_name: str) -> list[Player]:
    """Build a demo roster for a team.

    Args:
        team_id: Requested team id, embedded in each player id
        team_name: Resolved team name, copied onto every player

    Returns:
        One player per position of the inferred sport, with ids
        demo_{team_id}_{index} and no cutout image
    """
    sport = infer_sport(team_name)
    positions = POSITIONS[sport]
    names = SAMPLE_NAMES[sport]

    return [
        Player(
            id=f"demo_{team_id}_{i}",
            name=names[i],
            position=positions[i],
            team=team_name,
            cutout_url="",
        )
        for i in range(min(len(positions), len(names)))
    ]
