"""Ready-made key-derivation functions."""

from .builders import by_attribute, by_item, identity
from .canonical import JsonKey, json_key


__all__ = ["JsonKey", "by_attribute", "by_item", "identity", "json_key"]
