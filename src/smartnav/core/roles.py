"""Role enumeration (source of truth).

``Role`` is the closed set of access tiers a caller can present. The session
layer owns authentication; this module only names the tiers and converts
loose input into members.

- Members: ``ADMIN``, ``MANAGER``, ``USER``, ``VENDOR`` with lowercase values.
- ``Role.parse(value)`` accepts a member or a string (case-insensitive,
  surrounding whitespace ignored) and returns the member, or ``None`` when the
  value names no known role.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

__all__ = ["Role", "ALL_ROLES"]


class Role(str, Enum):
    """Access tier of the current user."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"
    VENDOR = "vendor"

    @classmethod
    def parse(cls, value: Any) -> Optional["Role"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


ALL_ROLES = frozenset(Role)
