"""Current-user information: XDG base directories, passwd lookups and id switching."""

from __future__ import annotations

import os
import pwd
import re
import secrets
import string
from dataclasses import dataclass

from fungi.pathlex import mash, parse_paths

_ALPHANUMERIC = string.ascii_letters + string.digits
_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_LIMIT = 2**32


class UserError(LookupError):
    """Raised when a user or a required user setting cannot be found."""


def _var(key: str) -> str:
    try:
        return os.environ[key]
    except KeyError:
        raise UserError(f"environment variable not found: {key}") from None


def _parse_u32(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value < _U32_LIMIT else None


def home_dir() -> str:
    """Return the current user's home directory from ``$HOME``."""
    return _var("HOME")


def config_dir() -> str:
    """Return ``$XDG_CONFIG_HOME``, defaulting to ``$HOME/.config``."""
    value = os.environ.get("XDG_CONFIG_HOME")
    return value if value is not None else mash(home_dir(), ".config")


def cache_dir() -> str:
    """Return ``$XDG_CACHE_HOME``, defaulting to ``$HOME/.cache``."""
    value = os.environ.get("XDG_CACHE_HOME")
    return value if value is not None else mash(home_dir(), ".cache")


def data_dir() -> str:
    """Return ``$XDG_DATA_HOME``, defaulting to ``$HOME/.local/share``."""
    value = os.environ.get("XDG_DATA_HOME")
    return value if value is not None else mash(home_dir(), ".local/share")


def runtime_dir() -> str:
    """Return ``$XDG_RUNTIME_DIR``, defaulting to ``/tmp``."""
    value = os.environ.get("XDG_RUNTIME_DIR")
    return value if value is not None else "/tmp"


def temp_dir(prefix: str) -> str:
    """Create and return a new unique directory ``/tmp/<prefix>-<random>``.

    The caller is responsible for removing it.
    """
    while True:
        suffix = "".join(secrets.choice(_ALPHANUMERIC) for _ in range(8))
        path = f"/tmp/{prefix}-{suffix}"
        if not os.path.exists(path):
            os.makedirs(path)
            return path


def data_dirs() -> list[str]:
    """Return the ``$XDG_DATA_DIRS`` entries."""
    value = os.environ.get("XDG_DATA_DIRS")
    if value is None:
        return ["/usr/local/share:/usr/share"]
    return parse_paths(value)


def config_dirs() -> list[str]:
    """Return the ``$XDG_CONFIG_DIRS`` entries, defaulting to ``/etc/xdg``."""
    value = os.environ.get("XDG_CONFIG_DIRS")
    if value is None:
        return ["/etc/xdg"]
    return parse_paths(value)


def path_dirs() -> list[str]:
    """Return the ``$PATH`` entries."""
    return parse_paths(_var("PATH"))


@dataclass
class User:
    """A user account, together with the real user behind sudo."""

    uid: int = 0
    gid: int = 0
    name: str = ""
    home: str = ""
    shell: str = ""
    ruid: int = 0
    rgid: int = 0
    realname: str = ""
    realhome: str = ""
    realshell: str = ""

    def is_root(self) -> bool:
        """Return True if this user is root."""
        return self.uid == 0


def getuid() -> int:
    """Return the real user id of this process."""
    return os.getuid()


def getgid() -> int:
    """Return the real group id of this process."""
    return os.getgid()


def geteuid() -> int:
    """Return the effective user id of this process."""
    return os.geteuid()


def getegid() -> int:
    """Return the effective group id of this process."""
    return os.getegid()


def getrids(uid: int, gid: int) -> tuple[int, int]:
    """Return the real ids behind sudo for root, else the given ids."""
    if uid != 0:
        return uid, gid
    sudo_uid = os.environ.get("SUDO_UID")
    sudo_gid = os.environ.get("SUDO_GID")
    if sudo_uid is None or sudo_gid is None:
        return uid, gid
    real_uid, real_gid = _parse_u32(sudo_uid), _parse_u32(sudo_gid)
    if real_uid is None or real_gid is None:
        return uid, gid
    return real_uid, real_gid


def is_root() -> bool:
    """Return True if the current user is root."""
    return getuid() == 0


def lookup(uid: int) -> User:
    """Look up a user by id in the passwd database."""
    try:
        entry = pwd.getpwuid(uid)
    except (KeyError, OverflowError):
        raise UserError(f"user does not exist by id: {uid}") from None
    gid = entry.pw_gid
    ruid, rgid = getrids(uid, gid)
    if uid != ruid:
        real = lookup(ruid)
        realname, realhome, realshell = real.name, real.home, real.shell
    else:
        realname, realhome, realshell = entry.pw_name, entry.pw_dir or "", entry.pw_shell or ""
    return User(
        uid=uid,
        gid=gid,
        name=entry.pw_name,
        home=entry.pw_dir or "",
        shell=entry.pw_shell or "",
        ruid=ruid,
        rgid=rgid,
        realname=realname,
        realhome=realhome,
        realshell=realshell,
    )


def current() -> User:
    """Return the current user."""
    return lookup(getuid())


def name() -> str:
    """Return the current user's name."""
    return current().name


def setuid(uid: int) -> None:
    """Set the user id of this process."""
    os.setuid(uid)


def seteuid(euid: int) -> None:
    """Set the effective user id of this process."""
    os.seteuid(euid)


def setgid(gid: int) -> None:
    """Set the group id of this process."""
    os.setgid(gid)


def setegid(egid: int) -> None:
    """Set the effective group id of this process."""
    os.setegid(egid)


def switchuser(ruid: int, euid: int, suid: int, rgid: int, egid: int, sgid: int) -> None:
    """Set the real, effective and saved user and group ids, groups first."""
    os.setresgid(rgid, egid, sgid)
    os.setresuid(ruid, euid, suid)


def drop_sudo() -> None:
    """Switch permanently to the real user behind sudo; no-op when not root."""
    if getuid() == 0:
        ruid, rgid = getrids(0, 0)
        switchuser(ruid, ruid, ruid, rgid, rgid, rgid)


def pause_sudo() -> None:
    """Switch to the real user behind sudo, keeping the ability to regain root."""
    if getuid() == 0:
        ruid, rgid = getrids(0, 0)
        switchuser(ruid, ruid, 0, rgid, rgid, 0)


def sudo() -> None:
    """Switch back to root; raises OSError if not permitted."""
    switchuser(0, 0, 0, 0, 0, 0)