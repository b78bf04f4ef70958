"""Path expansion and conversion between absolute and relative forms."""

from __future__ import annotations

import os

from fungi.pathlex import (
    CUR_DIR,
    PARENT_DIR,
    ROOT,
    PathError,
    PathLike,
    clean,
    components,
    dirname,
    first,
    last,
    mash,
    trim_first,
    trim_last,
    trim_protocol,
)
from fungi.user import home_dir


def _var(key: str) -> str:
    try:
        return os.environ[key]
    except KeyError:
        raise PathError(f"environment variable not found: {key}") from None


def _push(buffer: str, segment: str) -> str:
    """Append ``segment`` to ``buffer``; an absolute segment replaces it."""
    if segment.startswith("/") or not buffer:
        return segment
    if buffer.endswith("/"):
        return buffer + segment
    return f"{buffer}/{segment}"


def _join(parts: list[str]) -> str:
    if parts and parts[0] == ROOT:
        return ROOT + "/".join(parts[1:])
    return "/".join(parts)


def _is_absolute(path: str) -> bool:
    return path.startswith("/")


def expand(path: PathLike) -> str:
    """Expand a leading ``~`` and whole-component environment variables.

    Only complete components such as ``/foo/$BAR/blah`` or ``/foo/${BAR}``
    are expanded, not partial ones like ``/foo${BAR}ing``.
    """
    text = os.fspath(path)

    tildes = text.count("~")
    if tildes > 1:
        raise PathError(f"multiple home symbols in path: {text!r}")
    if tildes == 1:
        if text == "~":
            text = home_dir()
        elif text.startswith("~/"):
            text = mash(home_dir(), text[2:])
        else:
            raise PathError(f"invalid expansion for path: {text!r}")

    if "$" not in text:
        return text

    result = ""
    for component in components(text):
        if component in (ROOT, CUR_DIR, PARENT_DIR):
            result = _push(result, component)
            continue
        if component.startswith("${"):
            chunk = component[2:]
            if not chunk.endswith("}"):
                raise PathError(f"invalid expansion for path: {component!r}")
            value = _var(chunk[:-1])
        elif component.startswith("$"):
            value = _var(component[1:])
        else:
            value = component
        result = _push(result, value)
    return result


def abs_path(path: PathLike) -> str:
    """Return the path in an absolute, clean form.

    The home directory and variables are expanded, well known protocol
    prefixes removed, and relative paths resolved against the working
    directory.
    """
    text = os.fspath(path)
    if not components(text):
        raise PathError("path is empty")

    result = clean(trim_protocol(expand(text)))
    if _is_absolute(result):
        return result

    current = os.getcwd()
    while True:
        try:
            head = first(result)
        except PathError:
            return current
        if head == CUR_DIR:
            result = trim_first(result)
        elif head == PARENT_DIR:
            current = dirname(current)
            result = trim_first(result)
        else:
            return mash(current, result)


def abs_from(path: PathLike, base: PathLike) -> str:
    """Resolve a relative ``path`` against the directory holding ``base``.

    The last component of ``base`` is taken to be a file name. An absolute
    ``path`` is returned unchanged.
    """
    text = os.fspath(path)
    base_abs = abs_path(base)
    if _is_absolute(text) or components(text) == components(base_abs):
        return text

    result = trim_last(base_abs)
    parts = iter(components(text))
    for component in parts:
        if component == PARENT_DIR:
            result = trim_last(result)
        elif component not in (ROOT, CUR_DIR):
            rest = "/".join(parts)
            return clean(mash(mash(result, component), rest))
    raise PathError("path is empty")


def relative_from(path: PathLike, base: PathLike) -> str:
    """Return ``path`` expressed relative to ``base``.

    If both resolve to the same absolute path, that absolute path is
    returned.
    """
    target = abs_path(path)
    origin = abs_path(base)
    if target == origin:
        return target

    x = iter(components(target))
    y = iter(components(origin))
    parts: list[str] = []
    while True:
        a = next(x, None)
        b = next(y, None)
        if a is None and b is None:
            break
        if b is None:
            parts.append(a)
            parts.extend(x)
            break
        if a is None:
            parts.append(PARENT_DIR)
        elif not parts and a == b:
            continue
        elif b == CUR_DIR:
            parts.append(a)
        elif b == PARENT_DIR:
            return target
        else:
            parts.extend(PARENT_DIR for _ in y)
            parts.append(a)
            parts.extend(x)
            break
    return _join(parts)


def rel_to(dir: str) -> str:
    """Return the working directory trimmed back to the component named ``dir``."""
    path = expand(os.getcwd())
    if not dir:
        return path
    while last(path) != dir:
        path = trim_last(path)
    return path