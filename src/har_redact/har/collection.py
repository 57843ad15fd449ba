"""Filtered name/value collections for HAR headers and cookies.

Unlike filter_value, which keeps a rejected key and replaces its value,
a HarCollection drops rejected entries entirely from the
``[{"name", "value"}]`` lists HAR uses for headers and cookies.
"""

from __future__ import annotations

from typing import Any

from har_redact.filtering.policy import FilterPolicy, filter_value
from har_redact.har.accessors import HeaderSource, header_pairs
from har_redact.har.types import HarNameValue


class HarCollection:
    """Filtered view over a mapping or a list of (name, value) pairs."""

    def __init__(self, policy: FilterPolicy, raw: HeaderSource) -> None:
        self._policy = policy
        self._pairs = tuple(header_pairs(raw))

    def _filtered(self) -> list[tuple[str, Any]]:
        return [
            (name, filter_value(value, self._policy))
            for name, value in self._pairs
            if not self._policy.is_rejected(name)
        ]

    def to_dict(self) -> dict[str, Any]:
        """Return surviving entries as a dict (last duplicate wins).

        Example:
            >>> policy = FilterPolicy.create(reject=["reject"])
            >>> HarCollection(policy, {"keep": "keep", "reject": "reject"}).to_dict()
            {'keep': 'keep'}
        """
        return dict(self._filtered())

    def to_list(self) -> list[HarNameValue]:
        """Return surviving entries as HAR name/value pairs, in input order.

        Example:
            >>> policy = FilterPolicy.create(reject=["reject"])
            >>> HarCollection(policy, {"keep": "keep", "reject": "reject"}).to_list()
            [{'name': 'keep', 'value': 'keep'}]
        """
        return [{"name": name, "value": value} for name, value in self._filtered()]
