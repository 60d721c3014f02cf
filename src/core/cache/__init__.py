"""
Cache modules

Потокобезопасные write-once кэши для мемоизации чистых вычислений.
"""

from src.core.cache.memo_cache import CacheStats, MemoCache

__all__ = [
    "CacheStats",
    "MemoCache",
]
