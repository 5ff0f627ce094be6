"""Configuration loading for lru_engine.

This module is intentionally small and deterministic: it only reads
`lru_engine.toml` and validates the values it finds there.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lru_engine.cache import DEFAULT_LIMIT, LRUCache
from lru_engine.errors import LRUConfigError

logger = logging.getLogger("lru_engine.config")

CONFIG_FILENAME = "lru_engine.toml"


@dataclass(frozen=True, slots=True)
class CacheConfig:
    limit: int


@dataclass(frozen=True, slots=True)
class LRUEngineConfig:
    version: int
    cache: CacheConfig


def find_project_root(start: Path) -> Path:
    """Walk upward from `start` (file or directory) looking for `lru_engine.toml`."""

    cur = start
    try:
        if cur.is_file():
            cur = cur.parent
    except OSError:
        # Broken symlinks can't be stat'ed but can still be walked from.
        cur = cur.parent

    cur = cur.resolve()
    while True:
        if (cur / CONFIG_FILENAME).is_file():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent

    raise LRUConfigError(f"Could not find {CONFIG_FILENAME} by walking upward from start path.")


def _as_table(value: Any, *, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise LRUConfigError(f"Expected [{name}] to be a table.")
    return value


def _as_int(value: Any, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise LRUConfigError(f"Expected {name} to be an integer.")
    return value


def load_config(*, root: Path | None = None, config_path: Path | None = None) -> LRUEngineConfig:
    """Load and validate `lru_engine.toml`.

    If neither `root` nor `config_path` are provided, the config file is
    discovered by walking upward from the current working directory.
    """

    if config_path is None:
        if root is None:
            root = find_project_root(Path.cwd())
        config_path = root / CONFIG_FILENAME

    try:
        raw = config_path.read_bytes()
    except FileNotFoundError as e:
        raise LRUConfigError(f"Missing {CONFIG_FILENAME} at: {config_path}") from e
    except OSError as e:
        raise LRUConfigError(f"Failed reading config file: {config_path}") from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise LRUConfigError(f"Config is not valid UTF-8: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise LRUConfigError(f"Invalid TOML in {config_path}: {e}") from e

    version = data.get("version", None)
    if version is None:
        raise LRUConfigError(f"Missing required `version = 1` in {CONFIG_FILENAME}.")
    version_i = _as_int(version, name="version")
    if version_i != 1:
        raise LRUConfigError(f"Unsupported config version: {version_i} (expected 1).")

    cache_tbl = _as_table(data.get("cache"), name="cache")

    if "limit" in cache_tbl:
        limit = _as_int(cache_tbl["limit"], name="cache.limit")
    else:
        limit = DEFAULT_LIMIT

    if limit < 1:
        raise LRUConfigError("Invalid config: cache.limit must be >= 1.")

    logger.debug("Loaded %s (limit=%d)", config_path, limit)
    return LRUEngineConfig(version=version_i, cache=CacheConfig(limit=limit))


def cache_from_config(cfg: LRUEngineConfig) -> LRUCache[Any, Any]:
    """Construct an empty cache sized by `cfg`."""

    return LRUCache(cfg.cache.limit)
