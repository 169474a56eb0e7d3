"""Exceptions raised while reading or updating values by path."""
from __future__ import annotations

from typing import Any, Hashable, Optional, Tuple


class PathError(Exception):
    """Base class for path failures.

    Carries the key at which the failure happened and the full path being
    applied, so callers can report exactly which step was wrong.
    """

    def __init__(self, message: str, key: Any = None, path: Optional[Tuple[Hashable, ...]] = None):
        super().__init__(message)
        self.key = key
        self.path = tuple(path) if path is not None else ()
        self._init_args: tuple = (message, key, path)

    def __reduce__(self):
        # rebuild from the subclass's own constructor arguments
        return (type(self), self._init_args)


class EmptyPath(PathError, ValueError):
    def __init__(self):
        super().__init__("path must contain at least one key")
        self._init_args = ()


class MalformedPath(PathError, ValueError):
    """Raised when a dotted path string cannot be parsed."""

    def __init__(self, message: str, path_text: str):
        super().__init__(f"{message} in path {path_text!r}")
        self.path_text = path_text
        self._init_args = (message, path_text)


class ReadThroughAbsent(PathError, LookupError):
    """Raised when a key has to be applied to a missing intermediate value."""

    def __init__(self, key: Any, path: Tuple[Hashable, ...]):
        super().__init__(f"cannot read {key!r} of an absent value (path {list(path)!r})", key, path)
        self._init_args = (key, path)


class InvalidContainer(PathError, TypeError):
    """Raised when the updater would have to index into something that is not a container."""

    def __init__(self, key: Any, path: Tuple[Hashable, ...], value: Any = None, reason: Optional[str] = None):
        detail = reason or f"{type(value).__name__} is not a container"
        super().__init__(f"cannot set {key!r}: {detail} (path {list(path)!r})", key, path)
        self.value = value
        self._init_args = (key, path, value, reason)


class SlotNotFound(PathError, LookupError):
    """Raised when the updater targets an index or field that does not exist."""

    def __init__(self, key: Any, path: Tuple[Hashable, ...], reason: str):
        super().__init__(f"cannot set {key!r}: {reason} (path {list(path)!r})", key, path)
        self._init_args = (key, path, reason)


__all__ = [
    "PathError",
    "EmptyPath",
    "MalformedPath",
    "ReadThroughAbsent",
    "InvalidContainer",
    "SlotNotFound",
]
