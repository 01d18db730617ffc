"""TheSportsDB API HTTP client.

Handles raw HTTP requests to TSDB endpoints.
No data transformation - just fetch and return JSON.

Unlike a best-effort client that swallows failures, every failure here is
raised (TransportError / PayloadError) so the caller can tell "the provider
said nothing" apart from "we could not reach the provider".

Known free-tier quirks:
- Empty collections come back as null ({"player": null}), sometimes as an
  empty body
- lookup_all_players.php returns a fixed club's roster for ids it does not
  know (handled in SportsDataService)
"""

import logging
import random
import threading
import time

import httpx

from sporttracker import config
from sporttracker.core.exceptions import PayloadError, TransportError

logger = logging.getLogger(__name__)

# Retry backoff configuration
RETRY_BASE_DELAY = 1.0  # TSDB is slower than most, start at 1s
RETRY_MAX_DELAY = 10.0
RETRY_JITTER = 0.3  # ±30% randomization to prevent thundering herd

# Rate limit (429) handling - free tier allows ~30 requests/minute
RATE_LIMIT_BASE_DELAY = 5.0
RATE_LIMIT_MAX_DELAY = 60.0
RATE_LIMIT_MAX_RETRIES = 2


class TSDBClient:
    """Low-level TheSportsDB API client.

    API key resolution order:
    1. Explicit api_key parameter
    2. TSDB_API_KEY environment variable (via config)
    3. Free public key "3"

    Args:
        transport: Optional httpx transport, used by tests to stub the network
    """

    FREE_API_KEY = "3"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        retry_count: int | None = None,
        max_connections: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._api_key = api_key or config.TSDB_API_KEY or self.FREE_API_KEY
        self._base_url = (base_url or config.TSDB_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else config.TSDB_TIMEOUT
        self._retry_count = max(1, retry_count if retry_count is not None else config.TSDB_RETRY_COUNT)
        self._max_connections = (
            max_connections if max_connections is not None else config.TSDB_MAX_CONNECTIONS
        )
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                # Double-check after acquiring lock
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self._timeout,
                        limits=httpx.Limits(
                            max_connections=self._max_connections,
                            max_keepalive_connections=self._max_connections,
                        ),
                        transport=self._transport,
                    )
        return self._client

    def _calculate_delay(self, attempt: int) -> float:
        """Exponential backoff with jitter: 1, 2, 4... capped at 10s."""
        base_delay = RETRY_BASE_DELAY * (2**attempt)
        capped = min(base_delay, RETRY_MAX_DELAY)
        jitter = capped * RETRY_JITTER * (2 * random.random() - 1)
        return max(0.1, capped + jitter)

    def _rate_limit_delay(self, response: httpx.Response, retries: int) -> float:
        """Delay for a 429, honouring Retry-After when it is a number."""
        retry_after = response.headers.get("Retry-After")
        if retry_after:
            try:
                return min(float(retry_after), RATE_LIMIT_MAX_DELAY)
            except ValueError:
                pass
        return min(RATE_LIMIT_BASE_DELAY * (2 ** (retries - 1)), RATE_LIMIT_MAX_DELAY)

    def _request(self, endpoint: str, params: dict | None = None) -> dict:
        """GET an endpoint and return the decoded JSON object.

        Transport errors and 5xx responses are retried with backoff up to
        retry_count attempts; 429s get their own small retry budget.
        Other 4xx responses fail immediately.

        Raises:
            TransportError: The provider could not be reached or kept failing
            PayloadError: The body was not a JSON object
        """
        url = f"{self._base_url}/{self._api_key}/{endpoint}"
        attempt = 0
        rate_limit_retries = 0
        last_error: TransportError | None = None

        while attempt < self._retry_count:
            try:
                response = self._get_client().get(url, params=params)

                if response.status_code == 429:
                    rate_limit_retries += 1
                    if rate_limit_retries > RATE_LIMIT_MAX_RETRIES:
                        logger.error(
                            "[TSDB] Rate limit (429) persisted after %d retries for %s",
                            RATE_LIMIT_MAX_RETRIES,
                            endpoint,
                        )
                        raise TransportError(f"Rate limited on {endpoint}", status_code=429)
                    delay = self._rate_limit_delay(response, rate_limit_retries)
                    logger.warning(
                        "[TSDB] Rate limited (429). Retry %d/%d in %.1fs for %s",
                        rate_limit_retries,
                        RATE_LIMIT_MAX_RETRIES,
                        delay,
                        endpoint,
                    )
                    time.sleep(delay)
                    continue

                response.raise_for_status()
                logger.debug("[FETCH] %s %s", endpoint, params or "")
                return self._decode(response, endpoint)

            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                logger.warning("[TSDB] HTTP %d for %s", status_code, endpoint)
                last_error = TransportError(f"HTTP {status_code} for {endpoint}", status_code)
                if status_code < 500:
                    raise last_error from e
            except httpx.RequestError as e:
                logger.warning("[TSDB] Request failed for %s: %s", endpoint, e)
                last_error = TransportError(f"Request failed for {endpoint}: {e}")

            attempt += 1
            if attempt < self._retry_count:
                time.sleep(self._calculate_delay(attempt - 1))

        raise last_error or TransportError(f"Request failed for {endpoint}")

    def _decode(self, response: httpx.Response, endpoint: str) -> dict:
        """Decode a response body, treating an empty body as an empty object."""
        if not response.content.strip():
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise PayloadError(f"Invalid JSON from {endpoint}: {e}") from e
        if not isinstance(data, dict):
            raise PayloadError(f"Expected JSON object from {endpoint}, got {type(data).__name__}")
        return data

    # Teams

    def lookup_all_teams(self, league_id: str) -> dict:
        """All teams in a league by idLeague. Response key: teams."""
        return self._request("lookup_all_teams.php", {"id": league_id})

    def search_all_teams(self, league_name: str) -> dict:
        """All teams in a league by strLeague. Response key: teams."""
        return self._request("search_all_teams.php", {"l": league_name})

    def lookup_team(self, team_id: str) -> dict:
        """Team details by idTeam. Response key: teams."""
        return self._request("lookupteam.php", {"id": team_id})

    # Events

    def get_team_next_events(self, team_id: str) -> dict:
        """Upcoming events for a team. Response key: events.

        Note: free tier only returns HOME events.
        """
        return self._request("eventsnext.php", {"id": team_id})

    # Players

    def lookup_all_players(self, team_id: str) -> dict:
        """Roster by idTeam. Response key: player."""
        return self._request("lookup_all_players.php", {"id": team_id})

    def search_players(self, team_name: str) -> dict:
        """Players by team name. Response key: player."""
        return self._request("searchplayers.php", {"t": team_name})

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client:
                self._client.close()
                self._client = None
