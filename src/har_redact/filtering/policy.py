"""Filter policy and recursive key redaction.

A FilterPolicy names the mapping keys whose values must not be logged. The
filter_value function walks nested mappings and sequences and swaps the value
of every rejected key for the policy's redaction marker, leaving the shape of
the data untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

REDACTED = "[REDACTED]"

Filterable = Union[Mapping[str, Any], list, tuple, str, int, float, bool, None]


@dataclass(frozen=True)
class FilterPolicy:
    """Reject/keep configuration for redaction.

    Keys are matched exactly (case-sensitive) at any nesting depth. A key that
    appears in both sets is kept.

    Attributes:
        reject: Key names whose values are redacted.
        keep: Key names that are never redacted, even if rejected.
        marker: Value substituted for a rejected key's value. None drops
            rejected keys from mappings instead.
    """

    reject: frozenset[str] = field(default_factory=frozenset)
    keep: frozenset[str] = field(default_factory=frozenset)
    marker: str | None = REDACTED

    @classmethod
    def create(
        cls,
        reject: Iterable[str] | None = None,
        keep: Iterable[str] | None = None,
        marker: str | None = REDACTED,
    ) -> FilterPolicy:
        """Create a policy from any iterables of key names.

        Args:
            reject: Key names to redact (default: none)
            keep: Key names to always keep (default: none)
            marker: Redaction marker, or None to drop rejected keys

        Returns:
            Immutable FilterPolicy

        Example:
            >>> policy = FilterPolicy.create(reject=["password"])
            >>> policy.is_rejected("password")
            True
            >>> FilterPolicy.create().is_identity
            True
        """
        return cls(
            reject=frozenset(reject or ()),
            keep=frozenset(keep or ()),
            marker=marker,
        )

    def is_rejected(self, key: Any) -> bool:
        """Check whether a key's value must be hidden."""
        return key in self.reject and key not in self.keep

    @property
    def is_identity(self) -> bool:
        """True when this policy cannot reject anything."""
        return not (self.reject - self.keep)


def filter_value(value: Filterable, policy: FilterPolicy) -> Filterable:
    """Redact rejected keys in a nested value.

    Args:
        value: Mapping, list, tuple or scalar (possibly nested)
        policy: Policy deciding which keys are redacted

    Returns:
        New value with the same structure, where every rejected key maps to
        ``policy.marker`` (or is dropped when the marker is None). The input
        is never mutated.

    Example:
        >>> policy = FilterPolicy.create(reject=["token"])
        >>> filter_value({"user": "bob", "auth": [{"token": "abc"}]}, policy)
        {'user': 'bob', 'auth': [{'token': '[REDACTED]'}]}
    """
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if not policy.is_rejected(key):
                result[key] = filter_value(item, policy)
            elif policy.marker is not None:
                result[key] = policy.marker
        return result
    if isinstance(value, list):
        return [filter_value(item, policy) for item in value]
    if isinstance(value, tuple):
        return tuple(filter_value(item, policy) for item in value)
    return value
