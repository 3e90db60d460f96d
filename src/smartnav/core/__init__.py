"""Core runtime aggregator (source of truth).

Purpose: expose the navigation building blocks from a single module. No extra
logic beyond imports/exports.

Guarantees
----------
- Importing this module performs only imports; it does not load any route
  table or build a registry.
- ``roles`` is imported first: ``smartnav.config`` (pulled in by ``facade``)
  depends on it.
- Public API mirrors underlying modules 1:1:
  * ``roles`` → ``Role``
  * ``definition`` → ``RouteDefinition``
  * ``matcher`` → ``PathPattern`` and the path helpers
  * ``registry`` → ``RouteRegistry``
  * ``access`` → ``AccessEvaluator``
  * ``hierarchy`` → ``HierarchyResolver``, ``NavigationNode``, ``BreadcrumbItem``
  * ``facade`` → ``RouteFacade``
"""

from .roles import ALL_ROLES, Role
from .errors import (
    ConfigurationError,
    CyclicRouteError,
    DanglingParentError,
    ShadowedRouteError,
    SmartNavError,
)
from .matcher import PathPattern, extract_params, generate_path, same_section, sanitize_route
from .definition import RouteDefinition
from .registry import RouteRegistry
from .access import AccessEvaluator, role_satisfies
from .hierarchy import BreadcrumbItem, HierarchyResolver, NavigationNode
from .facade import RouteFacade

__all__ = [
    "ALL_ROLES",
    "AccessEvaluator",
    "BreadcrumbItem",
    "ConfigurationError",
    "CyclicRouteError",
    "DanglingParentError",
    "HierarchyResolver",
    "NavigationNode",
    "PathPattern",
    "Role",
    "RouteDefinition",
    "RouteFacade",
    "RouteRegistry",
    "ShadowedRouteError",
    "SmartNavError",
    "extract_params",
    "generate_path",
    "role_satisfies",
    "same_section",
    "sanitize_route",
]
