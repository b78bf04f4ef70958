"""Directory listings, recursive walks and glob matching, all returning absolute paths."""

from __future__ import annotations

import errno
import fnmatch
import os
from collections.abc import Callable, Iterator

from fungi.expand import abs_path
from fungi.pathlex import ROOT, PathLike, components, mash

_MAGIC = frozenset("*?[")


def _checked_dir(path: PathLike) -> str:
    """Return the absolute form of ``path``, which must be an existing directory."""
    target = abs_path(path)
    if not os.path.exists(target):
        raise FileNotFoundError(errno.ENOENT, "path does not exist", target)
    if not os.path.isdir(target):
        raise NotADirectoryError(errno.ENOTDIR, "path is not a directory", target)
    return target


def _walk(root: str) -> Iterator[str]:
    """Yield every path below ``root`` depth first, siblings sorted by name.

    A directory is yielded before its contents; symlinks are not followed.
    """
    with os.scandir(root) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        yield entry.path
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)


def _collect_all(path: PathLike, keep: Callable[[str], bool]) -> list[str]:
    root = _checked_dir(path)
    return list(dict.fromkeys(p for p in _walk(root) if keep(p)))


def _collect_children(path: PathLike, keep: Callable[[str], bool]) -> list[str]:
    root = _checked_dir(path)
    with os.scandir(root) as entries:
        children = [entry.path for entry in entries]
    return sorted(p for p in children if keep(p))


def all_dirs(path: PathLike) -> list[str]:
    """Return every directory below ``path`` recursively, not including ``path`` itself."""
    return _collect_all(path, os.path.isdir)


def all_files(path: PathLike) -> list[str]:
    """Return every regular file below ``path`` recursively."""
    return _collect_all(path, os.path.isfile)


def all_paths(path: PathLike) -> list[str]:
    """Return every path below ``path`` recursively."""
    return _collect_all(path, lambda _: True)


def dirs(path: PathLike) -> list[str]:
    """Return the directories directly inside ``path``, sorted."""
    return _collect_children(path, os.path.isdir)


def files(path: PathLike) -> list[str]:
    """Return the regular files directly inside ``path``, sorted."""
    return _collect_children(path, os.path.isfile)


def paths(path: PathLike) -> list[str]:
    """Return every entry directly inside ``path``, sorted."""
    return _collect_children(path, lambda _: True)


def _sorted_names(directory: str) -> list[str]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entry.name for entry in entries)
    except (NotADirectoryError, FileNotFoundError, PermissionError):
        return []


def _subdirs(directory: str) -> Iterator[str]:
    for child in _sorted_names(directory):
        full = mash(directory, child)
        if os.path.isdir(full):
            yield full
            if not os.path.islink(full):
                yield from _subdirs(full)


def _expand_component(base: str, part: str) -> list[str]:
    if part == "**":
        return [base, *_subdirs(base)] if os.path.isdir(base) else []
    if _MAGIC.intersection(part):
        return [mash(base, n) for n in _sorted_names(base) if fnmatch.fnmatchcase(n, part)]
    return [mash(base, part)]


def glob(src: PathLike) -> list[str]:
    """Return the paths matching the glob pattern ``src``, sorted by name.

    The pattern is expanded and made absolute first. ``*``, ``?`` and ``[...]``
    match within one component, ``**`` matches any number of directories, and
    wildcards also match names starting with a dot.
    """
    pattern = abs_path(src)
    parts = components(pattern)
    candidates = [ROOT]
    for part in parts[1:]:
        candidates = [found for base in candidates for found in _expand_component(base, part)]
    return [abs_path(match) for match in dict.fromkeys(candidates) if os.path.lexists(match)]