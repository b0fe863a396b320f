"""Persistent mapping support.

Strategies that merge persistent maps talk to the ``PersistentMap``
protocol, not to a concrete type. ``ImmutableMap`` implements it on top of
``immutables.Map``, a hash array mapped trie where each updated key costs
O(log n) and the inputs are shared, not copied.
"""

from typing import Any, Dict, Hashable, Iterator, Mapping, Optional, Protocol, runtime_checkable

import immutables


@runtime_checkable
class PersistentMap(Protocol):
    """Immutable mapping whose merge returns a new value."""

    def merge(self, other: "PersistentMap") -> "PersistentMap":
        """Return ``self`` overlaid by ``other``; neither input changes."""
        ...

    def to_dict(self) -> Dict[Hashable, Any]:
        """Return a plain dict copy of the entries."""
        ...

    def __len__(self) -> int:
        ...

    def __getitem__(self, key: Hashable) -> Any:
        ...

    def __iter__(self) -> Iterator[Hashable]:
        ...


class ImmutableMap:
    """``PersistentMap`` backed by ``immutables.Map``."""

    __slots__ = ("_map",)

    def __init__(self, entries: Optional[Mapping] = None):
        if isinstance(entries, immutables.Map):
            self._map = entries
        else:
            self._map = immutables.Map(entries or {})

    def merge(self, other: PersistentMap) -> "ImmutableMap":
        if isinstance(other, ImmutableMap):
            return ImmutableMap(self._map.update(other._map))
        return ImmutableMap(self._map.update(other.to_dict()))

    def to_dict(self) -> Dict[Hashable, Any]:
        return dict(self._map.items())

    def __len__(self) -> int:
        return len(self._map)

    def __getitem__(self, key: Hashable) -> Any:
        return self._map[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImmutableMap):
            return self._map == other._map
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ImmutableMap({self.to_dict()!r})"


def persistent_map(entries: Optional[Mapping] = None) -> ImmutableMap:
    """Build a persistent map from any mapping."""
    return ImmutableMap(entries)
