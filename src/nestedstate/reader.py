from __future__ import annotations

import logging
from typing import Any

from .containers import ABSENT, lookup
from .errors import ReadThroughAbsent
from .paths import PathLike, normalize_path

logger = logging.getLogger("nestedstate.reader")


def read(root: Any, path: PathLike, default: Any = ABSENT) -> Any:
    """Return the value found at ``path`` inside ``root``.

    A missing final key yields ``default`` (ABSENT unless given). A key that
    has to be applied to a missing intermediate value (ABSENT or None) raises
    :class:`ReadThroughAbsent` naming that key.
    """
    keys = normalize_path(path)
    current = root
    for key in keys:
        if current is ABSENT or current is None:
            logger.debug(f"Read through absent value at {key!r} for path {list(keys)!r}")
            raise ReadThroughAbsent(key, keys)
        current = lookup(current, key)
    if current is ABSENT:
        return default
    return current


def read_keys(root: Any, *keys: Any, default: Any = ABSENT) -> Any:
    """Variadic form of :func:`read`: ``read_keys(state, "a", 0, "b")``."""
    return read(root, keys, default=default)


__all__ = ["read", "read_keys"]
