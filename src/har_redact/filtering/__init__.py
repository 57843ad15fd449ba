"""Key-based redaction of nested data.

Exports:
    - FilterPolicy: reject/keep configuration
    - filter_value: recursive redaction with a marker value
    - load_filter_policy: build a policy from a JSON file
"""

from __future__ import annotations

from har_redact.filtering.loader import (
    PolicyLoadError,
    clear_policy_cache,
    load_filter_policy,
    load_json_file,
)
from har_redact.filtering.policy import REDACTED, Filterable, FilterPolicy, filter_value

__all__ = [
    # Policy
    "FilterPolicy",
    "Filterable",
    "REDACTED",
    "filter_value",
    # Loading
    "load_filter_policy",
    "load_json_file",
    "clear_policy_cache",
    "PolicyLoadError",
]
