from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .config import get_settings
from .paths import PathKey, PathLike, format_path, normalize_path
from .reader import read
from .setter import Dispatch, apply_action, provide

logger = logging.getLogger("nestedstate.store")


@dataclass
class EditEntry:
    field_path: str
    old: Any
    new: Any
    reason: Optional[str]
    ts: float


def log_edit(edits: List[EditEntry], field_path: str, old: Any, new: Any,
             reason: Optional[str] = None, limit: Optional[int] = None) -> List[EditEntry]:
    edits.append(EditEntry(field_path=field_path, old=old, new=new, reason=reason, ts=time.time()))
    if limit is not None:
        del edits[:max(len(edits) - limit, 0)]
    return edits


@dataclass
class StateHolder:
    """In-memory root state with a setter of the replace-or-transform shape.

    Not thread-safe. There is no notification mechanism: callers read
    ``state`` after committing.
    """

    state: Any = None
    edits: List[EditEntry] = field(default_factory=list)
    history_limit: Optional[int] = None

    def __post_init__(self):
        if self.history_limit is None:
            self.history_limit = get_settings().history_limit

    def get(self) -> Any:
        return self.state

    def set_state(self, action: Any) -> Any:
        """Commit a literal value or the result of a transform; return the new root."""
        self.state = apply_action(action, self.state)
        return self.state

    def nested_setter(self, *keys: PathKey, path: Optional[PathLike] = None,
                      reason: Optional[str] = None) -> Dispatch:
        """Scoped setter that records an edit per commit.

        Each positional argument is one key. Pass ``path=`` instead for a
        dotted path string such as ``"buyers[0].nif"``.
        """
        if path is not None and keys:
            raise TypeError("pass either keys or path=, not both")
        keys = normalize_path(path if path is not None else keys)
        field_path = format_path(keys)

        def tracking_setter(next_root) -> Any:
            previous = self.state
            new_root = self.set_state(next_root)
            if self.history_limit:
                log_edit(
                    self.edits,
                    field_path,
                    read(previous, keys),
                    read(new_root, keys),
                    reason=reason,
                    limit=self.history_limit,
                )
            logger.debug(f"Committed {field_path}")
            return new_root

        return provide(tracking_setter, keys)

    def reset(self, state: Any = None) -> None:
        self.state = state
        self.edits.clear()


__all__ = ["EditEntry", "StateHolder", "log_edit"]
