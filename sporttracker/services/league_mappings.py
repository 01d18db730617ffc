"""League mappings.

Static table translating a logical sport category into the TheSportsDB
leagues that feed it. Lookups by provider league id are tried first; the
league name is the search fallback, so either may be left empty.

Ids are TheSportsDB idLeague values; names are strLeague values exactly as
search_all_teams.php expects them.
"""

from sporttracker.core import LeagueMapping
from sporttracker.core.sports import normalize_category

LEAGUE_MAPPINGS: dict[str, tuple[LeagueMapping, ...]] = {
    "soccer": (
        LeagueMapping("4328", "English Premier League"),
        LeagueMapping("4335", "Spanish La Liga"),
        LeagueMapping("4331", "German Bundesliga"),
        LeagueMapping("4332", "Italian Serie A"),
        LeagueMapping("4334", "French Ligue 1"),
        LeagueMapping("4346", "American Major League Soccer"),
    ),
    "basketball": (
        LeagueMapping("4387", "NBA"),
        LeagueMapping("", "NCAA"),
        LeagueMapping("4516", "WNBA"),
    ),
    "baseball": (
        LeagueMapping("4424", "MLB"),
        LeagueMapping("", "NCAA Baseball"),
    ),
    "football": (
        LeagueMapping("4391", "NFL"),
        LeagueMapping("", "NCAA Football"),
    ),
}


def get_league_mappings(category: str) -> list[LeagueMapping]:
    """Get the leagues for a sport category.

    Args:
        category: Sport category in any case/alias form ("Soccer", "american football")

    Returns:
        League mappings in declaration order; empty for unknown categories
    """
    return list(LEAGUE_MAPPINGS.get(normalize_category(category), ()))
