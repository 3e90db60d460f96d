"""Route definition model.

``RouteDefinition`` is a frozen pydantic model: one row of the navigation
table, built once at startup from static configuration and never mutated.
Validation happens at construction time:

- ``path_pattern`` and ``parent`` must start with ``/`` and are stored
  sanitized (``/vendors//:id/`` becomes ``/vendors/:id``).
- ``children`` entries are sanitized the same way.
- ``allowed_roles`` accepts role members or their string values (any case,
  surrounding whitespace ignored); an empty collection is rejected because it
  would make the route unreachable. Omit the field (``None``) to allow any
  authenticated role.

Display fields (``title``, ``description``, ``breadcrumb_label``, ``badge``,
``icon``) are opaque and passed through to the UI.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from smartnav.core.matcher import SEPARATOR, PathPattern, sanitize_route
from smartnav.core.roles import Role

__all__ = ["RouteDefinition"]


def _normalize_pattern(value: str) -> str:
    if not isinstance(value, str) or not value.startswith(SEPARATOR):
        raise ValueError(f"route pattern must start with '/': {value!r}")
    return sanitize_route(value)


class RouteDefinition(BaseModel):
    """A navigable location and its ownership metadata."""

    model_config = ConfigDict(frozen=True)

    path_pattern: str
    title: str = ""
    description: str = ""
    breadcrumb_label: Optional[str] = None
    requires_auth: bool = True
    allowed_roles: Optional[FrozenSet[Role]] = None
    sidebar_visible: bool = False
    exact_match: bool = True
    parent: Optional[str] = None
    children: Tuple[str, ...] = ()
    badge: Optional[str] = None
    icon: Optional[str] = None

    @field_validator("path_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        return _normalize_pattern(value)

    @field_validator("parent")
    @classmethod
    def _check_parent(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return _normalize_pattern(value)

    @field_validator("children")
    @classmethod
    def _check_children(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(_normalize_pattern(child) for child in value)

    @field_validator("allowed_roles", mode="before")
    @classmethod
    def _parse_roles(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple, set, frozenset)):
            return value
        return [Role.parse(item) or item for item in value]

    @field_validator("allowed_roles")
    @classmethod
    def _check_roles(cls, value: Optional[FrozenSet[Role]]) -> Optional[FrozenSet[Role]]:
        if value is not None and not value:
            raise ValueError(
                "allowed_roles cannot be empty; omit it to allow any authenticated role"
            )
        return value

    @property
    def label(self) -> str:
        return self.breadcrumb_label or self.title or self.path_pattern

    @property
    def matcher(self) -> PathPattern:
        return PathPattern(self.path_pattern, exact=self.exact_match)

    @property
    def param_names(self) -> Tuple[str, ...]:
        return self.matcher.param_names

    @property
    def is_public(self) -> bool:
        return not self.requires_auth

    def matches(self, path: str) -> bool:
        return self.matcher.matches(path)
