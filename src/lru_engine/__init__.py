from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from lru_engine.cache import DEFAULT_LIMIT, Entry, LRUCache
from lru_engine.config import CacheConfig, LRUEngineConfig, cache_from_config, load_config
from lru_engine.errors import (
    LRUCapacityError,
    LRUConfigError,
    LRUEngineError,
    LRUMutatedDuringIteration,
)


def _package_version() -> str:
    try:
        return version("lru-engine")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = [
    "DEFAULT_LIMIT",
    "CacheConfig",
    "Entry",
    "LRUCache",
    "LRUCapacityError",
    "LRUConfigError",
    "LRUEngineConfig",
    "LRUEngineError",
    "LRUMutatedDuringIteration",
    "__version__",
    "cache_from_config",
    "load_config",
]
