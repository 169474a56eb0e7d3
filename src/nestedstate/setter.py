"""Derive setters scoped to a nested path from a single root setter.

A setter accepts either a replacement value or a transform
``previous -> new``. :func:`provide` turns a root setter into one that
addresses a path inside the root, delegating the actual commit to the root
setter with a function of the previous root.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Union

from .paths import PathKey, PathLike, normalize_path
from .reader import read
from .updater import update

logger = logging.getLogger("nestedstate.setter")

S = TypeVar("S")


@dataclass(frozen=True)
class Replace:
    """Always replace with ``value``, even when it is callable."""

    value: Any


@dataclass(frozen=True)
class Transform:
    """Always call ``fn`` with the previous value."""

    fn: Callable[[Any], Any]


SetStateAction = Union[S, Callable[[S], S], Replace, Transform]
Dispatch = Callable[[Any], Any]


def is_function(value: Any) -> bool:
    return callable(value)


def apply_action(action: Any, previous: Any) -> Any:
    """Resolve a setter argument against the previous value."""
    if isinstance(action, Replace):
        return action.value
    if isinstance(action, Transform):
        return action.fn(previous)
    if is_function(action):
        return action(previous)
    return action


def _needs_previous(action: Any) -> bool:
    if isinstance(action, Replace):
        return False
    return isinstance(action, Transform) or is_function(action)


def provide(root_setter: Dispatch, path: PathLike) -> Dispatch:
    """Return a setter of the same shape as ``root_setter`` bound to ``path``.

    The scoped setter always hands ``root_setter`` a transform of the previous
    root. Path errors are raised when that transform runs, not here.
    """
    frozen_path = path if isinstance(path, str) else tuple(path)

    def scoped_setter(action: Any) -> Any:
        def next_root(previous_root: Any) -> Any:
            keys = normalize_path(frozen_path)
            if _needs_previous(action):
                new_value = apply_action(action, read(previous_root, keys))
            else:
                new_value = apply_action(action, None)
            logger.debug(f"Scoped setter committing at {list(keys)!r}")
            return update(previous_root, keys, new_value)

        return root_setter(next_root)

    scoped_setter.path = frozen_path  # type: ignore[attr-defined]
    return scoped_setter


def provide_nested_setter(root_setter: Dispatch, *keys: PathKey) -> Dispatch:
    """Variadic form of :func:`provide`: ``provide_nested_setter(set_state, "a", 0)``."""
    return provide(root_setter, keys)


__all__ = [
    "Replace",
    "Transform",
    "SetStateAction",
    "Dispatch",
    "is_function",
    "apply_action",
    "provide",
    "provide_nested_setter",
]
