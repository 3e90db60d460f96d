"""Role-based access evaluation.

``AccessEvaluator.has_access(path, role)`` is a pure function of the registry,
the concrete path and the caller's role:

1. the path matches any public route (``requires_auth=False``) → allow. This
   is a classification by pattern over every public route, not only the first
   match;
2. no registered route matches → deny (callers render it as not found);
3. the matched route is public → allow;
4. no role supplied → deny;
5. the route has no ``allowed_roles`` → allow, any authenticated role will do;
6. allow only when the role is a member of ``allowed_roles``.

Roles may be given as ``Role`` members or strings. A string naming no known
role still counts as authenticated for step 5 but is never a member in step 6.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from smartnav.core.definition import RouteDefinition
from smartnav.core.registry import RouteRegistry
from smartnav.core.roles import Role

__all__ = ["AccessEvaluator", "RoleLike", "role_satisfies"]

RoleLike = Union[Role, str]


def role_satisfies(definition: RouteDefinition, role: Optional[RoleLike]) -> bool:
    """Apply the ``allowed_roles`` policy; an absent role is not filtered."""
    if not role or not definition.allowed_roles:
        return True
    return Role.parse(role) in definition.allowed_roles


class AccessEvaluator:
    """Decide whether a role may view a concrete path."""

    __slots__ = ("registry", "_logger", "_log_denials")

    def __init__(
        self,
        registry: RouteRegistry,
        *,
        logger: Optional[logging.Logger] = None,
        log_denials: bool = True,
    ) -> None:
        self.registry = registry
        self._logger = logger or logging.getLogger("smartnav")
        self._log_denials = log_denials

    def is_public(self, path: str) -> bool:
        return any(row.is_public and row.matches(path) for row in self.registry.all())

    def has_access(self, path: str, role: Optional[RoleLike] = None) -> bool:
        if self.is_public(path):
            return True
        route = self.registry.match(path)
        if route is None:
            self._denied(path, role, "no matching route")
            return False
        if route.is_public:
            return True
        if not role:
            self._denied(path, role, "authentication required")
            return False
        if not route.allowed_roles:
            return True
        if Role.parse(role) in route.allowed_roles:
            return True
        self._denied(path, role, f"role not in {sorted(r.value for r in route.allowed_roles)}")
        return False

    def _denied(self, path: str, role: Optional[RoleLike], reason: str) -> None:
        if self._log_denials:
            self._logger.debug("Access denied to %s for role %r: %s", path, role, reason)
