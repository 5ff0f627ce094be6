"""lru_engine exception hierarchy.

Keep this module small and dependency-free: it is imported by the engine, the
config loader and tests.

Cache misses are not errors. ``LRUCache.get`` returns a default and
``LRUCache.delete`` returns ``False``; nothing here is raised for them.
"""


class LRUEngineError(Exception):
    """Base exception for all lru_engine errors."""


class LRUConfigError(LRUEngineError):
    """Raised for invalid or unreadable configuration."""


class LRUCapacityError(LRUEngineError, ValueError):
    """Raised when a cache limit is not a positive integer."""


class LRUMutatedDuringIteration(LRUEngineError, RuntimeError):
    """Raised when the cache changes while a traversal is in progress."""
