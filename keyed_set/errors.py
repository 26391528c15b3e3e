"""Exception types raised by keyed-set."""

from __future__ import annotations


class KeyedSetError(Exception):
    """Base class for keyed-set errors."""


class UnsupportedValueKindError(KeyedSetError, TypeError):
    """Raised when bulk input is neither a collection of values nor ``None``.

    Strings and bytes are rejected instead of being split into characters;
    load a single value with ``KeyedSet.from_value`` or ``set_value``.
    """
