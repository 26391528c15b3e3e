"""Key-derivation functions for attribute and item based keys."""

from __future__ import annotations

from operator import attrgetter, itemgetter
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable, Hashable


def identity(value: Any) -> Any:
    """Use the value itself as its key."""
    return value


def _check_names(names: tuple[Any, ...], kind: str) -> None:
    if not names:
        msg = f"at least one {kind} is required"
        raise ValueError(msg)
    for name in names:
        if isinstance(name, str) and not name:
            msg = f"{kind} names must not be empty"
            raise ValueError(msg)


def by_attribute(*names: str) -> Callable[[Any], Hashable]:
    """Key values by one attribute, or by a tuple of several.

    Dotted names such as ``"owner.id"`` follow nested attributes.
    """
    _check_names(names, "attribute")
    for name in names:
        if not isinstance(name, str):
            msg = f"attribute names must be strings, got {type(name).__name__}"
            raise TypeError(msg)
    return attrgetter(*names)


def by_item(*keys: Hashable) -> Callable[[Any], Hashable]:
    """Key values by one subscript, or by a tuple of several, e.g. ``obj["id"]``."""
    _check_names(keys, "item")
    return itemgetter(*keys)
