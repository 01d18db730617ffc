"""Shared utilities."""

from sporttracker.utilities.cache import TTLCache, make_cache_key

__all__ = ["TTLCache", "make_cache_key"]
