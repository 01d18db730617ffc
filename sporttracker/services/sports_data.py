"""Sports data service.

The aggregation pipeline between callers and the provider. For each query
it checks the cache, on a miss drives one or more provider calls in a
fixed order, validates what came back, writes through to the cache and
returns. No method here raises: every failure degrades to cached,
curated, synthesized or empty data.

Query flow:
    CheckCache -> hit: return
               -> miss: fetch -> valid: cache, return
                              -> empty/contaminated: synthesize (players), cache, return
                              -> failed: curated/synthesized/empty, return uncached
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from sporttracker import config
from sporttracker.core import Event, LeagueMapping, Player, SportsProvider, Team, UpstreamError
from sporttracker.core.sports import SPORT_CATEGORIES, normalize_category
from sporttracker.services.fallback import get_fallback_teams, synthesize_players
from sporttracker.services.league_mappings import get_league_mappings
from sporttracker.utilities.cache import TTLCache, make_cache_key

logger = logging.getLogger(__name__)

UNKNOWN_TEAM = "Unknown Team"


class SportsDataService:
    """Cached, failure-tolerant access to teams, events and rosters.

    The cache is passed in rather than created here so its lifetime belongs
    to whoever builds the service (the FastAPI lifespan, or a test).

    Thread-safe: the only shared state is the cache, and no cache lock is
    held while a provider call is outstanding.

    Args:
        provider: Upstream data source
        cache: Shared TTL cache
        teams_ttl_minutes / events_ttl_minutes / players_ttl_minutes: Cache lifetimes
        contaminated_club: Club whose roster the provider substitutes for ids it
            does not know; rosters made up entirely of this club are rejected
            for any other team
        max_workers: Parallel league fetches per teams query (1 = sequential)
    """

    def __init__(
        self,
        provider: SportsProvider,
        cache: TTLCache,
        teams_ttl_minutes: int | None = None,
        events_ttl_minutes: int | None = None,
        players_ttl_minutes: int | None = None,
        contaminated_club: str | None = None,
        max_workers: int | None = None,
    ):
        self._provider = provider
        self._cache = cache
        self._teams_ttl = 60 * (
            teams_ttl_minutes if teams_ttl_minutes is not None else config.TEAMS_TTL_MINUTES
        )
        self._events_ttl = 60 * (
            events_ttl_minutes if events_ttl_minutes is not None else config.EVENTS_TTL_MINUTES
        )
        self._players_ttl = 60 * (
            players_ttl_minutes if players_ttl_minutes is not None else config.PLAYERS_TTL_MINUTES
        )
        self._contaminated_club = (
            contaminated_club if contaminated_club is not None else config.CONTAMINATED_CLUB
        )
        self._max_workers = max(1, max_workers if max_workers is not None else config.MAX_WORKERS)

    @property
    def cache(self) -> TTLCache:
        return self._cache

    # =========================================================================
    # Teams
    # =========================================================================

    def get_teams(self, category: str) -> list[Team]:
        """Get all teams for a sport category.

        Fans out over every league mapped to the category. A league that
        fails is skipped; if every league fails, the curated table for the
        category is returned (and not cached, so the next call retries).

        Args:
            category: "soccer", "basketball", "baseball", "football" /
                "american football" (any case). Unknown categories give [].
        """
        category_code = normalize_category(category)
        key = make_cache_key("teams", category_code)

        cached = self._cache.get_list(key, Team)
        if cached is not None:
            logger.debug("[TEAMS] Cache hit: %s", key)
            return list(cached)

        try:
            logger.info("[TEAMS] Fetching teams for category: %s", category_code)
            mappings = get_league_mappings(category_code)
            teams, failed = self._fetch_league_teams(mappings)

            if mappings and failed == len(mappings):
                logger.error(
                    "[TEAMS] All %d leagues failed for %s, using fallback teams",
                    len(mappings),
                    category_code,
                )
                return get_fallback_teams(category_code)

            logger.info(
                "[TEAMS] Fetched %d teams for %s (%d/%d leagues failed)",
                len(teams),
                category_code,
                failed,
                len(mappings),
            )
            self._cache.set(key, teams, self._teams_ttl)
            return list(teams)

        except Exception:
            logger.exception("[TEAMS] Unexpected error fetching teams for %s", category_code)
            return get_fallback_teams(category_code)

    def _fetch_league_teams(self, mappings: list[LeagueMapping]) -> tuple[list[Team], int]:
        """Fetch teams for every mapping.

        Returns:
            (teams, failed_count). Team order across leagues is not guaranteed
            when fetched in parallel.
        """
        teams: list[Team] = []
        failed = 0

        if not mappings:
            return teams, failed

        if self._max_workers == 1 or len(mappings) == 1:
            for mapping in mappings:
                result = self._fetch_mapping_teams(mapping)
                if result is None:
                    failed += 1
                else:
                    teams.extend(result)
            return teams, failed

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(mappings))) as executor:
            futures = [executor.submit(self._fetch_mapping_teams, m) for m in mappings]
            for future in as_completed(futures):
                result = future.result()
                if result is None:
                    failed += 1
                else:
                    teams.extend(result)

        return teams, failed

    def _fetch_mapping_teams(self, mapping: LeagueMapping) -> list[Team] | None:
        """Fetch one league: by id first, then by name if the id gave nothing.

        Returns:
            Teams (possibly empty) if any path succeeded, None if every
            attempted path raised
        """
        succeeded = False
        teams: list[Team] = []
        provider_name = self._provider.name

        if mapping.provider_league_id:
            try:
                teams = self._provider.lookup_teams_by_league_id(mapping.provider_league_id)
                succeeded = True
            except UpstreamError as e:
                logger.warning(
                    "[TEAMS] %s league id lookup failed for %s (ID: %s): %s",
                    provider_name,
                    mapping.provider_league_name,
                    mapping.provider_league_id,
                    e,
                )
            except Exception:
                logger.exception(
                    "[TEAMS] %s league id lookup crashed for %s (ID: %s)",
                    provider_name,
                    mapping.provider_league_name,
                    mapping.provider_league_id,
                )

        if not teams and mapping.provider_league_name:
            try:
                teams = self._provider.search_teams_by_league_name(mapping.provider_league_name)
                succeeded = True
            except UpstreamError as e:
                logger.warning(
                    "[TEAMS] %s league search failed for %s: %s",
                    provider_name,
                    mapping.provider_league_name,
                    e,
                )
            except Exception:
                logger.exception(
                    "[TEAMS] %s league search crashed for %s",
                    provider_name,
                    mapping.provider_league_name,
                )

        if not succeeded:
            return None

        logger.debug(
            "[TEAMS] %d teams from %s (ID: %s)",
            len(teams),
            mapping.provider_league_name,
            mapping.provider_league_id or "-",
        )
        return teams

    # =========================================================================
    # Events
    # =========================================================================

    def get_events(self, team_id: str) -> list[Event]:
        """Get upcoming events for a team.

        Events are never synthesized: on failure the answer is an empty,
        uncached calendar. A successful empty answer is cached like any other.
        """
        key = make_cache_key("events", team_id)

        cached = self._cache.get_list(key, Event)
        if cached is not None:
            logger.debug("[EVENTS] Cache hit: %s", key)
            return list(cached)

        try:
            logger.info("[EVENTS] Fetching events for team: %s", team_id)
            events = self._provider.next_events_for_team(team_id)
        except UpstreamError as e:
            logger.error(
                "[EVENTS] %s error fetching events for team %s: %s", self._provider.name, team_id, e
            )
            return []
        except Exception:
            logger.exception("[EVENTS] Unexpected error fetching events for team %s", team_id)
            return []

        logger.info("[EVENTS] Fetched %d events for team: %s", len(events), team_id)
        self._cache.set(key, events, self._events_ttl)
        return list(events)

    # =========================================================================
    # Players
    # =========================================================================

    def get_players(self, team_id: str) -> list[Player]:
        """Get a team's roster.

        1. Resolve the team's name (cached team lists, then provider lookup)
        2. Players by team id; if none, players by team name
        3. Reject a contaminated roster (see is_contaminated)
        4. Nothing usable -> synthesized demo roster
        5. Cache the result, real or synthesized
        """
        key = make_cache_key("players", team_id)

        cached = self._cache.get_list(key, Player)
        if cached is not None:
            logger.debug("[PLAYERS] Cache hit: %s", key)
            return list(cached)

        try:
            logger.info("[PLAYERS] Fetching players for team: %s", team_id)
            team_name = self._resolve_team_name(team_id)
            label = team_name or UNKNOWN_TEAM
            logger.debug("[PLAYERS] Resolved team %s -> %s", team_id, label)

            players = self._fetch_players(team_id, team_name)

            if players and self.is_contaminated(team_name, players):
                logger.warning(
                    "[PLAYERS] Provider returned %s roster for %s (%s), using fallback players",
                    self._contaminated_club,
                    label,
                    team_id,
                )
                players = []

            if not players:
                logger.info("[PLAYERS] No usable players for %s (%s), using fallback", label, team_id)
                players = synthesize_players(team_id, label)

            logger.info("[PLAYERS] Returning %d players for team %s (%s)", len(players), team_id, label)
            self._cache.set(key, players, self._players_ttl)
            return list(players)

        except Exception:
            logger.exception("[PLAYERS] Unexpected error fetching players for team %s", team_id)
            return synthesize_players(team_id, UNKNOWN_TEAM)

    def is_contaminated(self, team_name: str | None, players: list[Player]) -> bool:
        """Detect the provider's substituted-roster defect.

        The free tier answers unknown team ids with one well-known club's
        roster. A roster is contaminated when the requested team is not that
        club but every player is tagged as belonging to it. Matching is a
        case-insensitive substring test on both sides.
        """
        club = self._contaminated_club.lower()
        if not club or not players:
            return False

        requested_is_club = bool(team_name) and club in team_name.lower()
        all_players_from_club = all(club in (p.team or "").lower() for p in players)
        return not requested_is_club and all_players_from_club

    def _fetch_players(self, team_id: str, team_name: str | None) -> list[Player]:
        """Primary path by id, secondary by name. Each failure is isolated."""
        players: list[Player] = []
        provider_name = self._provider.name

        try:
            players = self._provider.lookup_players_by_team_id(team_id)
            if players:
                logger.debug("[PLAYERS] %d players from id lookup for %s", len(players), team_id)
        except UpstreamError as e:
            logger.warning(
                "[PLAYERS] %s player lookup by team id failed for %s: %s", provider_name, team_id, e
            )
        except Exception:
            logger.exception(
                "[PLAYERS] %s player lookup by team id crashed for %s", provider_name, team_id
            )

        if not players and team_name:
            try:
                players = self._provider.search_players_by_team_name(team_name)
                if players:
                    logger.debug(
                        "[PLAYERS] %d players from name search for %s", len(players), team_name
                    )
            except UpstreamError as e:
                logger.warning(
                    "[PLAYERS] %s player search by team name failed for %s: %s",
                    provider_name,
                    team_name,
                    e,
                )
            except Exception:
                logger.exception(
                    "[PLAYERS] %s player search by team name crashed for %s",
                    provider_name,
                    team_name,
                )

        return players

    def _resolve_team_name(self, team_id: str) -> str | None:
        """Find a team's display name.

        Checks every cached category team list first, then asks the provider.
        The provider's lookup is only trusted when it echoes the requested id.
        """
        for category in SPORT_CATEGORIES:
            teams = self._cache.get_list(make_cache_key("teams", category), Team)
            if not teams:
                continue
            for team in teams:
                if team.id == team_id:
                    return team.name

        try:
            teams = self._provider.lookup_team_by_id(team_id)
        except UpstreamError as e:
            logger.warning(
                "[PLAYERS] %s team name lookup failed for %s: %s", self._provider.name, team_id, e
            )
            return None
        except Exception:
            logger.exception(
                "[PLAYERS] %s team name lookup crashed for %s", self._provider.name, team_id
            )
            return None

        for team in teams:
            if team.id == team_id:
                return team.name or None

        if teams:
            logger.warning(
                "[PLAYERS] Team lookup for %s returned a different team (%s), ignoring",
                team_id,
                teams[0].id,
            )
        return None
