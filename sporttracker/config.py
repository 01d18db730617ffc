"""Process configuration.

Read once from environment variables with defaults, the same way the
HTTP client tunables are handled:

    TSDB_API_KEY: TheSportsDB key (default: free public key "3")
    TSDB_BASE_URL: API root (default: https://www.thesportsdb.com/api/v1/json)
    TSDB_TIMEOUT: Request timeout in seconds (default: 30)
    TSDB_RETRY_COUNT: Transport retry attempts (default: 3)
    TSDB_MAX_CONNECTIONS: Connection pool size (default: 20)
    SPORTTRACKER_TEAMS_TTL_MINUTES: default 30
    SPORTTRACKER_EVENTS_TTL_MINUTES: default 5
    SPORTTRACKER_PLAYERS_TTL_MINUTES: default 60
    SPORTTRACKER_CONTAMINATED_CLUB: club whose roster TheSportsDB returns
        for unknown team ids (default: Arsenal)
    SPORTTRACKER_MAX_WORKERS: parallel league fetches per teams query (default: 6)
    SPORTTRACKER_CACHE_SWEEP_MINUTES: expired-entry sweep interval, 0 disables (default: 15)
    LOG_LEVEL: default INFO
    LOG_DIR: directory for rotating log files, unset logs to console only
"""

import os

TSDB_API_KEY = os.environ.get("TSDB_API_KEY", "3")
TSDB_BASE_URL = os.environ.get("TSDB_BASE_URL", "https://www.thesportsdb.com/api/v1/json")
TSDB_TIMEOUT = float(os.environ.get("TSDB_TIMEOUT", 30.0))
TSDB_RETRY_COUNT = int(os.environ.get("TSDB_RETRY_COUNT", 3))
TSDB_MAX_CONNECTIONS = int(os.environ.get("TSDB_MAX_CONNECTIONS", 20))

# Cache TTLs (minutes) per query kind
TEAMS_TTL_MINUTES = int(os.environ.get("SPORTTRACKER_TEAMS_TTL_MINUTES", 30))
EVENTS_TTL_MINUTES = int(os.environ.get("SPORTTRACKER_EVENTS_TTL_MINUTES", 5))
PLAYERS_TTL_MINUTES = int(os.environ.get("SPORTTRACKER_PLAYERS_TTL_MINUTES", 60))

CONTAMINATED_CLUB = os.environ.get("SPORTTRACKER_CONTAMINATED_CLUB", "Arsenal")
MAX_WORKERS = int(os.environ.get("SPORTTRACKER_MAX_WORKERS", 6))
CACHE_SWEEP_MINUTES = int(os.environ.get("SPORTTRACKER_CACHE_SWEEP_MINUTES", 15))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_DIR = os.environ.get("LOG_DIR")
