"""MutableSet that deduplicates values by a caller-supplied key function."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, MutableSet
from typing import Any, Self, TypeVar, override

from keyed_set.errors import UnsupportedValueKindError
from keyed_set.serializers import identity


logger = logging.getLogger(__name__)

_T = TypeVar("_T")

Serializer = Callable[[Any], Hashable]
ConflictHandler = Callable[[Any, Any], Any]


def _keep_existing(existing: _T, _incoming: _T) -> _T:
    return existing


def _iter_values(values: Iterable[Any] | Mapping[Any, Any]) -> Iterable[Any]:
    if isinstance(values, (str, bytes, bytearray)):
        msg = (
            f"expected an iterable of values, got {type(values).__name__}; "
            "use from_value()/set_value() for a single value"
        )
        raise UnsupportedValueKindError(msg)
    if isinstance(values, Mapping):
        return list(values.values())
    if not isinstance(values, Iterable):
        msg = f"expected an iterable of values, got {type(values).__name__}"
        raise UnsupportedValueKindError(msg)
    return values


class KeyedSet(MutableSet[_T]):
    """Insertion-ordered set whose membership is decided by ``serializer(value)``.

    The store maps each derived key to the last value written under it.
    Iteration follows the order in which keys were first seen; overwriting a
    key replaces its value in place.

    Changing the serializer with :meth:`set_serializer` only affects keys
    derived afterwards. Entries already stored keep their old keys until they
    are written again or :meth:`rekey` is called.
    """

    def __init__(
        self,
        values: Iterable[_T] | Mapping[Any, _T] | None = None,
        serializer: Serializer | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Create a set from an iterable of values.

        Parameters
        ----------
        values
            Initial values, loaded in order. A mapping contributes its values.
            ``None`` creates an empty set.
        serializer
            Key-derivation function. Defaults to :func:`identity`.
        options
            Opaque settings kept on the instance and copied by :meth:`clone`.
        """
        super().__init__()
        self._serializer: Serializer = serializer if serializer is not None else identity
        self._store: dict[Hashable, _T] = {}
        self.options: dict[str, Any] = dict(options or {})
        self.set_values(values)

    @classmethod
    def from_value(
        cls,
        value: _T | None,
        serializer: Serializer | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Self:
        """Create a set holding a single value."""
        keyed = cls(serializer=serializer, options=options)
        keyed.add(value)
        return keyed

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    def key_of(self, value: _T) -> Hashable:
        """Return the key the current serializer derives for ``value``."""
        return self._serializer(value)

    # mutation

    def set_values(self, values: Iterable[_T] | Mapping[Any, _T] | None) -> None:
        """Replace the contents with ``values``; ``None`` just clears."""
        if values is None:
            self.clear()
            return
        self._store = self._keyed(_iter_values(values))

    def _keyed(self, values: Iterable[_T]) -> dict[Hashable, _T]:
        store: dict[Hashable, _T] = {}
        for value in list(values):
            store[self._serializer(value)] = value
        return store

    def set_value(self, value: _T | None) -> None:
        """Replace the contents with a single value; ``None`` just clears."""
        self._store = self._keyed([] if value is None else [value])

    @override
    def add(self, value: _T | None) -> None:
        """Store ``value`` under its key, overwriting any previous value."""
        if value is None:
            return
        self._store[self._serializer(value)] = value

    def add_all(self, *values: _T) -> None:
        for value in values:
            self.add(value)

    def delete(self, value: _T | None) -> None:
        """Remove the entry sharing ``value``'s key, if there is one."""
        if value is None:
            return
        _ = self._store.pop(self._serializer(value), None)

    def delete_all(self, *values: _T) -> None:
        for value in values:
            self.delete(value)

    @override
    def discard(self, value: _T) -> None:
        self.delete(value)

    @override
    def clear(self) -> None:
        self._store = {}

    def set_serializer(self, serializer: Serializer | None) -> None:
        """Use ``serializer`` for every key derived from now on.

        Stored entries keep the keys they were written with.
        """
        self._serializer = serializer if serializer is not None else identity
        logger.debug("serializer replaced on set of %d values; existing keys kept", len(self._store))

    def rekey(self) -> None:
        """Re-derive every stored key with the current serializer."""
        count = len(self._store)
        self._store = self._keyed(self._store.values())
        logger.debug("re-keyed %d values into %d keys", count, len(self._store))

    # read and export

    def has(self, value: _T) -> bool:
        return self._serializer(value) in self._store

    def values(self) -> list[_T]:
        """Return the stored values in first-seen-key order."""
        return list(self._store.values())

    def keys(self) -> list[_T]:
        """Return the stored values.

        Kept for callers written against the key/value iteration idiom; it
        does not return the derived keys. Use :meth:`derived_keys` for those.
        """
        return self.values()

    def derived_keys(self) -> list[Hashable]:
        """Return the stored keys in first-seen order."""
        return list(self._store)

    def entries(self) -> list[tuple[_T, _T]]:
        """Return ``(value, value)`` pairs in iteration order."""
        return [(value, value) for value in self._store.values()]

    def for_each(self, callback: Callable[[_T], Any]) -> None:
        for value in self.values():
            _ = callback(value)

    def clone(self) -> Self:
        """Return a new set owning a shallow copy of this one's store."""
        cloned = self.__class__(serializer=self._serializer, options=self.options)
        cloned._store = dict(self._store)
        return cloned

    def __copy__(self) -> Self:
        return self.clone()

    # algebra

    def union(self, other: Iterable[_T], conflict_handler: ConflictHandler | None = None) -> Self:
        """Return a new set holding the values of both sets.

        Values of ``other`` are keyed with this set's serializer, so the
        result lives in this set's key space even when ``other`` was built
        with a different serializer. On a key collision
        ``conflict_handler(existing, incoming)`` picks the stored value; the
        default keeps the existing one.
        """
        handler = conflict_handler if conflict_handler is not None else _keep_existing
        merged = self.clone()
        incoming_values = other.values() if isinstance(other, KeyedSet) else _iter_values(other)
        for incoming in incoming_values:
            key = self._serializer(incoming)
            if key in merged._store:
                logger.debug("union conflict on key %r", key)
                merged._store[key] = handler(merged._store[key], incoming)
            else:
                merged._store[key] = incoming
        return merged

    def intersect(self, other: KeyedSet[Any]) -> list[_T]:
        """Return this set's values whose stored key is also stored in ``other``."""
        other_store = self._store_of(other)
        return [value for key, value in self._store.items() if key in other_store]

    def complement(self, other: KeyedSet[Any]) -> list[_T]:
        """Return this set's values whose stored key is not stored in ``other``."""
        other_store = self._store_of(other)
        return [value for key, value in self._store.items() if key not in other_store]

    def is_subset_of(self, other: KeyedSet[Any]) -> bool:
        return not self.complement(other)

    def is_superset_of(self, other: KeyedSet[Any]) -> bool:
        return self._checked(other).is_subset_of(self)

    @staticmethod
    def _checked(other: Any) -> KeyedSet[Any]:
        if not isinstance(other, KeyedSet):
            msg = f"expected a KeyedSet, got {type(other).__name__}"
            raise TypeError(msg)
        return other

    def _store_of(self, other: Any) -> dict[Hashable, Any]:
        return self._checked(other)._store

    # collections.abc protocol

    @override
    def _from_iterable(self, values: Iterable[_T]) -> Self:
        return self.__class__(list(values), serializer=self._serializer, options=self.options)

    @override
    def __contains__(self, value: object) -> bool:
        return self.has(value)

    @override
    def __iter__(self) -> Iterator[_T]:
        return iter(self.values())

    @override
    def __len__(self) -> int:
        return len(self._store)

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.values()!r})"


def dedupe(values: Iterable[_T], serializer: Serializer | None = None) -> list[_T]:
    """Return ``values`` deduplicated by key, last value per key, first-seen order."""
    return KeyedSet(values, serializer=serializer).values()
