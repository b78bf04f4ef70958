"""Local and UTC broken-down times formatted with C ``strftime`` directives."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass

# The formatted result, plus its terminating byte, must fit this many bytes;
# longer results come out empty.
_MAX_OUTPUT = 100


def _strftime(fmt: str, tm: time.struct_time) -> str:
    text = time.strftime(fmt, tm)
    if len(text.encode("utf-8", errors="replace")) >= _MAX_OUTPUT:
        return ""
    return text


@dataclass(frozen=True)
class Local:
    """A point in time broken down in the local time zone."""

    tm: time.struct_time

    @staticmethod
    def now() -> Local:
        """Return the current local time."""
        return Local(time.localtime(int(time.time())))

    @staticmethod
    def timestamp(secs: int) -> Local:
        """Return the local time for a unix timestamp."""
        return Local(time.localtime(secs))

    def format(self, fmt: str) -> str:
        """Format with C ``strftime`` directives."""
        return _strftime(fmt, self.tm)


@dataclass(frozen=True)
class Utc:
    """A point in time broken down in UTC."""

    tm: time.struct_time

    @staticmethod
    def now() -> Utc:
        """Return the current UTC time."""
        return Utc(time.gmtime(int(time.time())))

    @staticmethod
    def timestamp(secs: int) -> Utc:
        """Return the UTC time for a unix timestamp."""
        return Utc(time.gmtime(secs))

    def format(self, fmt: str) -> str:
        """Format with C ``strftime`` directives, naming the zone ``UTC``."""
        return _strftime(fmt, self.tm).replace("GMT", "UTC")


def set_timezone(tz: str) -> None:
    """Set ``TZ`` and reinitialise the process time zone."""
    os.environ["TZ"] = tz
    time.tzset()