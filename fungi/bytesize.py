"""Binary byte-size units and human readable formatting."""

from __future__ import annotations

KIBIBYTE = 1024
MEBIBYTE = KIBIBYTE * 1024
GIBIBYTE = MEBIBYTE * 1024
TEBIBYTE = GIBIBYTE * 1024

_UNITS = (
    (TEBIBYTE, "TiB"),
    (GIBIBYTE, "GiB"),
    (MEBIBYTE, "MiB"),
    (KIBIBYTE, "KiB"),
)


def to_human(val: int) -> str:
    """Format a byte count in the largest fitting binary unit, e.g. ``3.05 MiB``.

    Two decimals are shown, and a ``.00`` fraction is dropped.
    """
    value, unit = float(val), "bytes"
    for size, label in _UNITS:
        if val >= size:
            value, unit = val / size, label
            break
    text = f"{value:.2f}"
    if text.endswith(".00"):
        text = text[:-3]
    return f"{text} {unit}"


def to_kib(value: int) -> float:
    """Convert bytes to KiB."""
    return value / KIBIBYTE


def to_mib(value: int) -> float:
    """Convert bytes to MiB."""
    return value / MEBIBYTE


def to_gib(value: int) -> float:
    """Convert bytes to GiB."""
    return value / GIBIBYTE


def to_tib(value: int) -> float:
    """Convert bytes to TiB."""
    return value / TEBIBYTE