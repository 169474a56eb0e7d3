"""Path-addressed immutable updates for nested data, and scoped setters."""
from .containers import ABSENT
from .errors import EmptyPath, InvalidContainer, MalformedPath, PathError, ReadThroughAbsent, SlotNotFound
from .paths import format_path, normalize_path, parse_path
from .reader import read, read_keys
from .setter import Replace, Transform, apply_action, is_function, provide, provide_nested_setter
from .store import EditEntry, StateHolder
from .updater import update, update_keys

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "EditEntry",
    "EmptyPath",
    "InvalidContainer",
    "MalformedPath",
    "PathError",
    "ReadThroughAbsent",
    "Replace",
    "SlotNotFound",
    "StateHolder",
    "Transform",
    "apply_action",
    "format_path",
    "is_function",
    "normalize_path",
    "parse_path",
    "provide",
    "provide_nested_setter",
    "read",
    "read_keys",
    "update",
    "update_keys",
]
