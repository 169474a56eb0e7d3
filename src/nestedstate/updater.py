"""Immutable, structure-sharing updates of nested values.

Only the containers on the path from the root to the target key (the spine)
are copied. Every other container is carried over by reference, so callers
can rely on identity checks to detect what changed.
"""
from __future__ import annotations

import logging
from typing import Any, List, Tuple

from .containers import (
    ABSENT,
    Kind,
    kind_of,
    lookup,
    record_fields,
    replace_mapping_item,
    replace_record_field,
    replace_sequence_item,
    settable_fields,
)
from .errors import InvalidContainer, SlotNotFound
from .paths import Path, PathKey, PathLike, is_index, normalize_path

logger = logging.getLogger("nestedstate.updater")


def _check_slot(container: Any, kind: Kind, key: PathKey, keys: Path) -> None:
    if kind is Kind.SEQUENCE:
        if not is_index(key):
            raise InvalidContainer(key, keys, container, reason=f"sequence indices must be integers, got {type(key).__name__}")
        if not 0 <= key < len(container):
            raise SlotNotFound(key, keys, f"index out of range for sequence of length {len(container)}")
    elif kind is Kind.RECORD:
        if not isinstance(key, str):
            raise InvalidContainer(key, keys, container, reason=f"record fields must be strings, got {type(key).__name__}")
        if key not in record_fields(container):
            raise SlotNotFound(key, keys, f"{type(container).__name__} has no field {key!r}")
        if key not in settable_fields(container):
            raise SlotNotFound(key, keys, f"field {key!r} of {type(container).__name__} is not settable (init=False)")
    else:
        try:
            hash(key)
        except TypeError:
            raise InvalidContainer(key, keys, container, reason=f"unhashable key of type {type(key).__name__}")


def _replace(container: Any, kind: Kind, key: PathKey, new_value: Any) -> Any:
    if kind is Kind.SEQUENCE:
        return replace_sequence_item(container, key, new_value)
    if kind is Kind.RECORD:
        return replace_record_field(container, key, new_value)
    return replace_mapping_item(container, key, new_value)


def update(root: Any, path: PathLike, value: Any) -> Any:
    """Return a copy of ``root`` with ``value`` placed at ``path``.

    Args:
        root: Nested structure to start from. It is never mutated.
        path: Non-empty sequence of keys/indices, or a dotted path string.
        value: New value for the final key.

    Returns:
        A new root. Containers on the path are new instances, all others are
        shared with ``root``.

    Raises:
        EmptyPath: if ``path`` has no keys.
        InvalidContainer: if a step indexes into a non-container, or the key
            kind does not suit the container.
        SlotNotFound: if a sequence index or record field does not exist.
    """
    keys = normalize_path(path)

    # Walk down, remembering each container on the spine.
    spine: List[Tuple[Any, Kind, PathKey]] = []
    current = root
    for key in keys:
        kind = kind_of(current)
        if kind is None:
            logger.debug(f"Update hit non-container {type(current).__name__} at {key!r}")
            if current is ABSENT:
                raise InvalidContainer(key, keys, reason="no value present")
            raise InvalidContainer(key, keys, current)
        _check_slot(current, kind, key, keys)
        spine.append((current, kind, key))
        current = lookup(current, key)

    # Rebuild from the leaf upward.
    new_value = value
    for container, kind, key in reversed(spine):
        new_value = _replace(container, kind, key, new_value)

    logger.debug(f"Updated path {list(keys)!r}, rebuilt {len(spine)} containers")
    return new_value


def update_keys(root: Any, *keys: Any, value: Any) -> Any:
    """Variadic form of :func:`update`: ``update_keys(state, "a", 0, value=1)``."""
    return update(root, keys, value)


__all__ = ["update", "update_keys"]
