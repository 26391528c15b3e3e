"""Canonical JSON keys for values that are not hashable."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Set
from typing import Any


def _to_plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, Set):
        return sorted((_to_plain(item) for item in value), key=_canonical_dumps)
    return value


def _canonical_dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


class JsonKey:
    """Serializer that keys a value by its canonical JSON text.

    Mappings are emitted with sorted keys, tuples become lists and sets
    become sorted lists, so structurally equal values share a key regardless
    of insertion order. Values the encoder cannot handle raise its error.
    """

    def __init__(self, encoder: Callable[[Any], str] = _canonical_dumps, *, field: str | None = None) -> None:
        """Create a JSON serializer.

        Parameters
        ----------
        encoder
            Callable turning a plain value into text.
        field
            When given, only ``value[field]`` is encoded.
        """
        super().__init__()
        if field is not None and not field:
            msg = "field must not be empty"
            raise ValueError(msg)
        self._encoder = encoder
        self.field = field

    def __call__(self, value: Any) -> str:
        if self.field is not None:
            value = value[self.field]
        return self._encoder(_to_plain(value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field!r})"


def json_key(value: Any) -> str:
    """Return the canonical JSON key of ``value``."""
    return _canonical_dumps(_to_plain(value))
