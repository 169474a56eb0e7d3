from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Sequence, Tuple, Union

from .errors import EmptyPath, MalformedPath

PathKey = Hashable
Path = Tuple[PathKey, ...]
PathLike = Union[str, Sequence[PathKey]]


def is_index(key: PathKey) -> bool:
    """True for keys usable as a sequence index (bools are not indices)."""
    return isinstance(key, int) and not isinstance(key, bool)


def _parse_tokens(text: str) -> Iterator[PathKey]:
    token = ""
    pos = 0
    # True at the start and right after a dot, when a key must follow
    after_sep = True
    while pos < len(text):
        ch = text[pos]
        if ch == ".":
            if after_sep:
                raise MalformedPath("empty segment", text)
            if token:
                yield token
                token = ""
            after_sep = True
            pos += 1
        elif ch == "[":
            if after_sep and pos > 0:
                raise MalformedPath("empty segment", text)
            if token:
                yield token
                token = ""
            end = text.find("]", pos + 1)
            if end == -1:
                raise MalformedPath("unbalanced bracket", text)
            idx_str = text[pos + 1:end].strip()
            if not idx_str.isdecimal():
                raise MalformedPath(f"non-integer index {idx_str!r}", text)
            yield int(idx_str)
            after_sep = False
            pos = end + 1
        elif ch == "]":
            raise MalformedPath("unbalanced bracket", text)
        else:
            token += ch
            after_sep = False
            pos += 1
    if text and after_sep:
        raise MalformedPath("empty segment", text)
    if token:
        yield token


def parse_path(text: str) -> Path:
    """Split a dotted field path such as ``buyers[0].nif`` into keys."""
    return tuple(_parse_tokens(text))


def normalize_path(path: PathLike) -> Path:
    """Return ``path`` as a non-empty tuple of keys.

    Strings are parsed as dotted paths; any other iterable is taken key by key.
    """
    keys = parse_path(path) if isinstance(path, str) else tuple(path)
    if not keys:
        raise EmptyPath()
    return keys


def format_path(path: Iterable[PathKey]) -> str:
    """Render keys back into the dotted form, e.g. ``key1[0].key3``."""
    out = ""
    for key in path:
        if is_index(key):
            out += f"[{key}]"
        elif out:
            out += f".{key}"
        else:
            out = str(key)
    return out


__all__ = ["PathKey", "Path", "PathLike", "is_index", "parse_path", "normalize_path", "format_path"]
