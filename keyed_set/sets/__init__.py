"""Keyed set container."""

from .keyed import ConflictHandler, KeyedSet, Serializer, dedupe


__all__ = ["ConflictHandler", "KeyedSet", "Serializer", "dedupe"]
