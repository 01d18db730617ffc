"""Sport category normalization.

Callers name categories loosely ("Soccer", "American Football", "NBA" is
not a category). This module maps those names to the canonical lowercase
category codes used in cache keys and league mapping lookups.
"""

# Categories with league mappings, in the order the team-name scan checks them
SPORT_CATEGORIES: tuple[str, ...] = ("soccer", "basketball", "baseball", "football")

# Map external sport names to canonical category codes
SPORT_ALIASES: dict[str, str] = {
    # TheSportsDB strSport values
    "Soccer": "soccer",
    "Basketball": "basketball",
    "Baseball": "baseball",
    "American Football": "football",
    # Common variations
    "american football": "football",
    "gridiron": "football",
    "association football": "soccer",
    "fútbol": "soccer",
    "futbol": "soccer",
}


def normalize_category(category: str) -> str:
    """Normalize a sport category to its canonical lowercase code.

    Unknown categories are returned lowercased and stripped; they simply
    have no league mappings.

    Examples:
        >>> normalize_category("American Football")
        'football'
        >>> normalize_category(" SOCCER ")
        'soccer'
        >>> normalize_category("curling")
        'curling'
    """
    if not category:
        return ""

    if category in SPORT_ALIASES:
        return SPORT_ALIASES[category]

    lower = " ".join(category.lower().split())
    if lower in SPORT_ALIASES:
        return SPORT_ALIASES[lower]

    return lower
