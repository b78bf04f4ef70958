"""Filesystem queries on paths, with home and variable expansion."""

from __future__ import annotations

import os
import stat

from fungi.expand import abs_from, abs_path
from fungi.pathlex import PathError, PathLike


def metadata(path: PathLike) -> os.stat_result:
    """Return the stat result for the expanded, absolute path, following symlinks."""
    return os.stat(abs_path(path))


def _metadata_or_none(path: PathLike) -> os.stat_result | None:
    try:
        return metadata(path)
    except (OSError, PathError):
        return None


def exists(path: PathLike) -> bool:
    """Return True if the path exists."""
    return _metadata_or_none(path) is not None


def is_dir(path: PathLike) -> bool:
    """Return True if the path exists and is a directory."""
    meta = _metadata_or_none(path)
    return meta is not None and stat.S_ISDIR(meta.st_mode)


def is_file(path: PathLike) -> bool:
    """Return True if the path exists and is a regular file."""
    meta = _metadata_or_none(path)
    return meta is not None and stat.S_ISREG(meta.st_mode)


def is_exec(path: PathLike) -> bool:
    """Return True if the path exists and has any execute bit set."""
    meta = _metadata_or_none(path)
    return meta is not None and meta.st_mode & 0o111 != 0


def is_readonly(path: PathLike) -> bool:
    """Return True if the path exists and has no write bit set."""
    meta = _metadata_or_none(path)
    return meta is not None and meta.st_mode & 0o222 == 0


def readlink(path: PathLike) -> str:
    """Return the target of the symlink at the expanded, absolute path."""
    return os.readlink(abs_path(path))


def is_symlink(path: PathLike) -> bool:
    """Return True if the path is a symlink."""
    try:
        readlink(path)
    except (OSError, PathError):
        return False
    return True


def _symlink_target(path: PathLike) -> str | None:
    try:
        link = abs_path(path)
        return abs_from(os.readlink(link), link)
    except (OSError, PathError):
        return None


def is_symlink_dir(path: PathLike) -> bool:
    """Return True if the path is a symlink pointing at a directory."""
    target = _symlink_target(path)
    return target is not None and is_dir(target)


def is_symlink_file(path: PathLike) -> bool:
    """Return True if the path is a symlink pointing at a regular file."""
    target = _symlink_target(path)
    return target is not None and is_file(target)


def gid(path: PathLike) -> int:
    """Return the group id of the path's owner."""
    return metadata(path).st_gid


def uid(path: PathLike) -> int:
    """Return the user id of the path's owner."""
    return metadata(path).st_uid


def mode(path: PathLike) -> int:
    """Return the full mode of the path, file type bits included."""
    return os.stat(os.fspath(path)).st_mode


def chmod(path: PathLike, mode: int) -> None:
    """Set the permission bits of the path."""
    os.chmod(abs_path(path), mode)