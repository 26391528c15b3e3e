"""keyed-set - a set that deduplicates values by a derived key"""

from ._version import version as __version__
from .errors import KeyedSetError, UnsupportedValueKindError
from .serializers import JsonKey, by_attribute, by_item, identity, json_key
from .sets import KeyedSet, dedupe


__all__ = [
    "JsonKey",
    "KeyedSet",
    "KeyedSetError",
    "UnsupportedValueKindError",
    "__version__",
    "by_attribute",
    "by_item",
    "dedupe",
    "identity",
    "json_key",
]
