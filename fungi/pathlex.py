"""Lexical path operations that never touch the filesystem.

Paths are accepted as ``str`` or any ``os.PathLike`` and returned as ``str``.
Components are returned as strings: ``"/"`` for the root, ``"."`` for the
current directory, ``".."`` for the parent directory and the plain name for
anything else.
"""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

ROOT = "/"
CUR_DIR = "."
PARENT_DIR = ".."

_PROTOCOLS = ("file://", "ftp://", "http://", "https://")


class PathError(ValueError):
    """Raised when a path is empty or lacks the part that was asked for."""


def _str(path: PathLike) -> str:
    return os.fspath(path)


def _is_normal(component: str) -> bool:
    return component not in (ROOT, CUR_DIR, PARENT_DIR)


def _join_components(parts: list[str]) -> str:
    if parts and parts[0] == ROOT:
        return ROOT + "/".join(parts[1:])
    return "/".join(parts)


def components(path: PathLike) -> list[str]:
    """Split a path into its components.

    Repeated separators and trailing slashes are ignored, and ``.`` is kept
    only when it begins a non-rooted path.
    """
    text = _str(path)
    rooted = text.startswith("/")
    result = [ROOT] if rooted else []
    for position, part in enumerate(text.split("/")):
        if not part:
            continue
        if part == CUR_DIR:
            if position == 0 and not rooted:
                result.append(CUR_DIR)
            continue
        result.append(part)
    return result


def clean(path: PathLike) -> str:
    """Return the shortest equivalent path by purely lexical processing.

    Duplicate separators, ``.`` elements and inner ``..`` elements are
    removed, ``..`` directly after the root is dropped and leading ``..``
    of a relative path is kept. An empty result becomes ``"."``.
    """
    kept: list[str] = []
    count = 0
    prev: str | None = None
    for component in components(path):
        if component == CUR_DIR and count == 0:
            continue
        if component == PARENT_DIR and count > 0 and prev != PARENT_DIR:
            if prev is not None and _is_normal(prev):
                count -= 1
                kept.pop()
                prev = kept[-1] if kept else None
            continue
        count += 1
        kept.append(component)
        prev = component
    return _join_components(kept) if kept else CUR_DIR


def mash(dir: PathLike, base: PathLike) -> str:
    """Join ``base`` onto ``dir``, dropping a leading ``/`` of ``base`` and any trailing ``/``."""
    head = _str(dir)
    tail = trim_prefix(base, "/")
    if tail.startswith("/") or not head:
        joined = tail
    elif head.endswith("/"):
        joined = head + tail
    else:
        joined = f"{head}/{tail}"
    return _join_components(components(joined))


def concat(path: PathLike, val: str) -> str:
    """Return the path with ``val`` appended as plain text."""
    return _str(path) + val


def dirname(path: PathLike) -> str:
    """Return the path without its final component."""
    parts = components(path)
    if not parts or parts == [ROOT]:
        raise PathError(f"parent not found for path: {_str(path)!r}")
    return _join_components(parts[:-1])


def base(path: PathLike) -> str:
    """Return the final component of the path if it is a name."""
    parts = components(path)
    if not parts or not _is_normal(parts[-1]):
        raise PathError(f"filename not found for path: {_str(path)!r}")
    return parts[-1]


def _extension(path: PathLike) -> str | None:
    try:
        filename = base(path)
    except PathError:
        return None
    stem, dot, suffix = filename.rpartition(".")
    if not dot or not stem:
        return None
    return suffix


def ext(path: PathLike) -> str:
    """Return the extension of the path's file name."""
    extension = _extension(path)
    if extension is None:
        raise PathError(f"extension not found for path: {_str(path)!r}")
    return extension


def trim_ext(path: PathLike) -> str:
    """Return the path with its file extension removed."""
    extension = _extension(path)
    if extension is None:
        return _str(path)
    return trim_suffix(path, f".{extension}")


def name(path: PathLike) -> str:
    """Return the final component without its extension."""
    return base(trim_ext(path))


def first(path: PathLike) -> str:
    """Return the first component of the path."""
    parts = components(path)
    if not parts:
        raise PathError(f"path has no components: {_str(path)!r}")
    return parts[0]


def last(path: PathLike) -> str:
    """Return the last component of the path."""
    parts = components(path)
    if not parts:
        raise PathError(f"path has no components: {_str(path)!r}")
    return parts[-1]


def trim_first(path: PathLike) -> str:
    """Return the path with its first component removed."""
    return _join_components(components(path)[1:])


def trim_last(path: PathLike) -> str:
    """Return the path with its last component removed."""
    return _join_components(components(path)[:-1])


def trim_prefix(path: PathLike, prefix: PathLike) -> str:
    """Return the path with ``prefix`` removed from its text, if present."""
    text, head = _str(path), _str(prefix)
    return text[len(head):] if text.startswith(head) else text


def trim_suffix(path: PathLike, suffix: PathLike) -> str:
    """Return the path with ``suffix`` removed from its text, if present."""
    text, tail = _str(path), _str(suffix)
    if tail and text.endswith(tail):
        return text[: len(text) - len(tail)]
    return text


def trim_protocol(path: PathLike) -> str:
    """Strip a leading ``file://``, ``ftp://``, ``http://`` or ``https://``, ignoring case."""
    text = _str(path)
    index = text.find("//")
    if index < 0:
        return text
    prefix, suffix = text[: index + 2], text[index + 2:]
    remainder = prefix.lower()
    for protocol in _PROTOCOLS:
        while remainder.startswith(protocol):
            remainder = remainder[len(protocol):]
    return suffix if remainder == "" else prefix + suffix


def has(path: PathLike, sub: PathLike) -> bool:
    """Return True if the path's text contains ``sub``."""
    return _str(sub) in _str(path)


def has_prefix(path: PathLike, prefix: PathLike) -> bool:
    """Return True if the path's text starts with ``prefix``."""
    return _str(path).startswith(_str(prefix))


def has_suffix(path: PathLike, suffix: PathLike) -> bool:
    """Return True if the path's text ends with ``suffix``."""
    return _str(path).endswith(_str(suffix))


def is_empty(path: PathLike) -> bool:
    """Return True if the path has no components at all."""
    return not components(path)


def parse_paths(value: str) -> list[str]:
    """Split a colon separated path list; an empty element means the current directory."""
    return [entry if entry else os.getcwd() for entry in value.split(":")]