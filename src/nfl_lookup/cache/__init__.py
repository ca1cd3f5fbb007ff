from nfl_lookup.cache.temporal import CacheEntry, CacheSweeper, TemporalCache

__all__ = [
    "CacheEntry",
    "CacheSweeper",
    "TemporalCache",
]
