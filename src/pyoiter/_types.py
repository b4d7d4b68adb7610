from __future__ import annotations

from typing import NamedTuple


class Group[K, V](NamedTuple):
    """Represents a run of consecutive values sharing a common key.

    See `Iter.group_by()` for details.
    """

    key: K
    """The common key for the group."""
    values: list[V]
    """The values of the run, in order."""

    def __repr__(self) -> str:
        return f"({self.key.__repr__()}, {self.values.__repr__()})"
