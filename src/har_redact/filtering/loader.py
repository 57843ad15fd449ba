"""Filter policy loading from JSON configuration files.

A policy file is a JSON object with optional keys:

    {
        "reject": ["password", "Authorization"],
        "keep": ["password_hint"],
        "marker": "[REDACTED]"
    }

A null marker drops rejected keys instead of replacing their values.
"""

from __future__ import annotations

import json
import logging
from collections import OrderedDict
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from har_redact.filtering.policy import REDACTED, FilterPolicy

_LOGGER = logging.getLogger(__name__)

# Maximum number of cache entries to prevent unbounded growth
_MAX_CACHE_SIZE = 20

# LRU cache of parsed policy files, keyed by resolved path
_policy_cache: OrderedDict[str, Any] = OrderedDict()


def _cache_get(key: str) -> Any | None:
    """Get value from cache, moving it to end (most recently used)."""
    if key in _policy_cache:
        _policy_cache.move_to_end(key)
        return _policy_cache[key]
    return None


def _cache_set(key: str, value: Any) -> None:
    """Set value in cache with LRU eviction."""
    if key in _policy_cache:
        _policy_cache.move_to_end(key)
    _policy_cache[key] = value
    while len(_policy_cache) > _MAX_CACHE_SIZE:
        evicted_key = next(iter(_policy_cache))
        _policy_cache.pop(evicted_key)
        _LOGGER.debug("Policy cache evicted: %s", evicted_key)


class PolicyLoadError(Exception):
    """Raised when a policy file cannot be loaded."""


def load_json_file(path: Path | str) -> dict[str, Any]:
    """Load a JSON object from a file with error handling.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed JSON object

    Raises:
        PolicyLoadError: If the file cannot be read, parsed, or is not an object
    """
    path_str = str(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise PolicyLoadError(f"Policy file not found: {path_str}") from e
    except PermissionError as e:
        raise PolicyLoadError(f"Permission denied reading policy file: {path_str}") from e
    except json.JSONDecodeError as e:
        raise PolicyLoadError(f"Invalid JSON in policy file {path_str}: {e}") from e

    if not isinstance(data, dict):
        raise PolicyLoadError(f"Policy file must contain a JSON object: {path_str}")
    return data


def _read_policy_file(path: Path | str) -> dict[str, Any]:
    """Read and validate a policy file, using the cache."""
    cache_key = str(Path(path).resolve())
    cached = _cache_get(cache_key)
    if cached is not None:
        result: dict[str, Any] = cached
        return result

    data = load_json_file(path)
    for list_key in ("reject", "keep"):
        values = data.get(list_key, [])
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise PolicyLoadError(f"'{list_key}' must be a list of strings in policy file {path}")
    marker = data.get("marker", REDACTED)
    if marker is not None and not isinstance(marker, str):
        raise PolicyLoadError(f"'marker' must be a string or null in policy file {path}")

    _cache_set(cache_key, data)
    _LOGGER.debug("Loaded filter policy from %s", path)
    return data


def load_filter_policy(
    path: Path | str | None = None,
    *,
    reject: Iterable[str] | None = None,
    keep: Iterable[str] | None = None,
) -> FilterPolicy:
    """Build a FilterPolicy from a policy file and/or explicit key lists.

    Args:
        path: Optional path to a JSON policy file
        reject: Extra key names to reject, merged with the file's list
        keep: Extra key names to keep, merged with the file's list

    Returns:
        FilterPolicy combining file contents and arguments

    Raises:
        PolicyLoadError: If the policy file cannot be loaded or is malformed

    Example:
        >>> load_filter_policy(reject=["password"]).reject
        frozenset({'password'})
    """
    reject_keys: set[str] = set(reject or ())
    keep_keys: set[str] = set(keep or ())
    marker: str | None = REDACTED

    if path is not None:
        data = _read_policy_file(path)
        reject_keys.update(data.get("reject", []))
        keep_keys.update(data.get("keep", []))
        marker = data.get("marker", REDACTED)

    return FilterPolicy.create(reject=reject_keys, keep=keep_keys, marker=marker)


def clear_policy_cache() -> None:
    """Clear the policy cache.

    Useful for testing or when policy files have been modified.
    """
    _policy_cache.clear()
