"""Public query surface (source of truth).

``RouteFacade`` composes the registry, the access evaluator and the hierarchy
resolver behind the calls the dashboard chrome makes on every navigation.
It holds no mutable state; every call is a pure read.

Constructor
-----------
``RouteFacade(routes, *, config=None, logger=None, get_default=None)``

- ``routes`` is a loaded ``RouteRegistry`` or an iterable of
  ``RouteDefinition`` rows, loaded with ``config.strict_order``.
- ``config`` defaults to ``SmartNavConfig()``.
- ``get_default`` seeds the ``default`` option of every
  ``get_route_metadata`` call (an explicit ``default`` wins, even ``None``).

Queries
-------
- ``get_route_metadata(path, **options)``: first matching route in
  registration order, else ``options["default"]`` (``None`` by default).
  ``default`` is the only option; any other key raises ``ValueError``.
- ``has_route_access(path, role=None)``: see ``AccessEvaluator``.
- ``get_breadcrumb_path(path)``: root → leaf definitions, ``[]`` when the path
  is unresolved.
- ``get_breadcrumb_trail(path)``: breadcrumb rendered as ``BreadcrumbItem``
  links with parameters filled in.
- ``get_sidebar_routes(role=None, current_path=None)``: navigation tree.
- ``get_default_route_for_role(role)``: landing page from
  ``config.default_routes``; unknown or absent roles get the landing page of
  ``config.fallback_role``.
- ``resolve_redirect(path, role=None)``: ``None`` when access is granted,
  otherwise the ``config.redirects`` target for not found, unauthenticated or
  unauthorized.
- ``is_public_route`` / ``is_protected_route`` / ``is_admin_route`` /
  ``is_manager_route``: classification helpers. Admin routes are restricted to
  ``{admin}``, manager routes to exactly ``{admin, manager}``.
- ``generate_path``, ``extract_params``, ``sanitize_route``: matcher helpers
  exposed as methods so callers only need the facade.

Lookup misses and denials are return values, never exceptions. Only a broken
parent graph (``CyclicRouteError``) can surface from a breadcrumb call.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from smartseeds import SmartOptions

from smartnav.config import SmartNavConfig
from smartnav.core import matcher
from smartnav.core.access import AccessEvaluator, RoleLike
from smartnav.core.definition import RouteDefinition
from smartnav.core.hierarchy import BreadcrumbItem, HierarchyResolver, NavigationNode
from smartnav.core.registry import RouteRegistry
from smartnav.core.roles import Role

__all__ = ["RouteFacade"]

_LOOKUP_OPTIONS = frozenset({"default"})
_MANAGER_ROLES = frozenset({Role.ADMIN, Role.MANAGER})


class RouteFacade:
    """Composed route lookup, access and navigation API."""

    __slots__ = ("registry", "config", "access", "hierarchy", "_logger", "_lookup_defaults")

    def __init__(
        self,
        routes: Union[RouteRegistry, Iterable[RouteDefinition]],
        *,
        config: Optional[SmartNavConfig] = None,
        logger: Optional[logging.Logger] = None,
        get_default: Optional[RouteDefinition] = None,
    ) -> None:
        self.config = config or SmartNavConfig()
        self._logger = logger or logging.getLogger("smartnav")
        if not isinstance(routes, RouteRegistry):
            routes = RouteRegistry.load(
                routes, strict_order=self.config.strict_order, logger=self._logger
            )
        self.registry = routes
        self.access = AccessEvaluator(
            routes, logger=self._logger, log_denials=self.config.log_denials
        )
        self.hierarchy = HierarchyResolver(routes)
        defaults: Dict[str, Any] = {}
        if get_default is not None:
            defaults["default"] = get_default
        self._lookup_defaults = defaults

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def get_route_metadata(self, path: str, **options: Any) -> Optional[RouteDefinition]:
        unknown = sorted(set(options) - _LOOKUP_OPTIONS)
        if unknown:
            raise ValueError(f"Unknown lookup options: {', '.join(unknown)}. Available: default")
        opts = SmartOptions(options, defaults=self._lookup_defaults)
        route = self.registry.match(path)
        if route is None:
            self._logger.debug("No route matches %s", path)
            return getattr(opts, "default", None)
        return route

    def has_route_access(self, path: str, role: Optional[RoleLike] = None) -> bool:
        return self.access.has_access(path, role)

    def is_public_route(self, path: str) -> bool:
        return self.access.is_public(path)

    def is_protected_route(self, path: str) -> bool:
        route = self.registry.match(path)
        return route is not None and route.requires_auth

    def is_admin_route(self, path: str) -> bool:
        route = self.registry.match(path)
        return route is not None and route.allowed_roles == frozenset({Role.ADMIN})

    def is_manager_route(self, path: str) -> bool:
        route = self.registry.match(path)
        return route is not None and route.allowed_roles == _MANAGER_ROLES

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------
    def get_breadcrumb_path(self, path: str) -> List[RouteDefinition]:
        route = self.registry.match(path)
        if route is None:
            return []
        return self.hierarchy.breadcrumb(route)

    def get_breadcrumb_trail(self, path: str) -> List[BreadcrumbItem]:
        return self.hierarchy.trail(path)

    def get_sidebar_routes(
        self, role: Optional[RoleLike] = None, current_path: Optional[str] = None
    ) -> List[NavigationNode]:
        return self.hierarchy.navigation_tree(role, current_path=current_path)

    # ------------------------------------------------------------------
    # Redirects
    # ------------------------------------------------------------------
    def get_default_route_for_role(self, role: Optional[RoleLike]) -> str:
        routes = self.config.default_routes
        parsed = Role.parse(role)
        if parsed is not None and parsed in routes:
            return routes[parsed]
        return routes[self.config.fallback_role]

    def resolve_redirect(self, path: str, role: Optional[RoleLike] = None) -> Optional[str]:
        if self.access.has_access(path, role):
            return None
        redirects = self.config.redirects
        if self.registry.match(path) is None:
            return redirects.not_found
        if not role:
            return redirects.unauthenticated
        return redirects.unauthorized

    # ------------------------------------------------------------------
    # Path helpers
    # ------------------------------------------------------------------
    @staticmethod
    def generate_path(pattern: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return matcher.generate_path(pattern, params)

    @staticmethod
    def extract_params(pattern: str, path: str) -> Dict[str, str]:
        return matcher.extract_params(pattern, path)

    @staticmethod
    def sanitize_route(path: str) -> str:
        return matcher.sanitize_route(path)
