"""Process-wide click counter shared by the HTMX endpoints.

The value lives for the lifetime of the process and starts at zero. It is
not persisted and increments are not synchronized: concurrent requests may
lose updates.
"""
from __future__ import annotations

_count = 0


def increase() -> int:
    """Add one to the counter and return the new value."""
    global _count
    _count += 1
    return _count


def current() -> int:
    return _count
