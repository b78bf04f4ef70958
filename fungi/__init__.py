"""Lexical paths, filesystem queries, listings, user and XDG directories, byte sizes and time formatting."""

__version__ = "0.1.0"
__all__ = ["bytesize", "expand", "fsquery", "listing", "pathlex", "timefmt", "user"]