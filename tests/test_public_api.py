from __future__ import annotations

import lru_engine


def test_cache_is_exported() -> None:
    cache = lru_engine.LRUCache(2)
    cache.put("a", 1)
    assert cache.get("a") == 1
    assert lru_engine.DEFAULT_LIMIT == 42


def test_config_helpers_are_exported() -> None:
    assert callable(lru_engine.load_config)
    assert callable(lru_engine.cache_from_config)


def test_exceptions_are_exported() -> None:
    from lru_engine import (  # noqa: PLC0415
        LRUCapacityError,
        LRUConfigError,
        LRUEngineError,
        LRUMutatedDuringIteration,
    )

    for exc in (
        LRUEngineError,
        LRUConfigError,
        LRUCapacityError,
        LRUMutatedDuringIteration,
    ):
        assert issubclass(exc, Exception)


def test_version_is_a_string() -> None:
    assert isinstance(lru_engine.__version__, str)
    assert lru_engine.__version__
