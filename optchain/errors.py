from __future__ import annotations


class EmptyAccess(Exception):
    """Raised when the value of an absent option is read."""
