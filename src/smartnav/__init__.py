"""SmartNav public API surface (source of truth).

Recreate the module with these rules:
- Public exports: ``RouteDefinition``, ``RouteRegistry``, ``RouteFacade``,
  ``Role``, ``SmartNavConfig``, the error types and the path helpers.
- ``build_default_facade`` loads the dashboard's built-in route table.

Constraints
-----------
- Import must stay lightweight: no registry is loaded at import time; the
  default table is only validated when ``build_default_facade`` or
  ``default_definitions`` is called.
- Version string lives here as ``__version__`` and must remain available for
  packaging tools.
"""

__version__ = "0.3.0"

from .core import (
    AccessEvaluator,
    BreadcrumbItem,
    ConfigurationError,
    CyclicRouteError,
    DanglingParentError,
    HierarchyResolver,
    NavigationNode,
    PathPattern,
    Role,
    RouteDefinition,
    RouteFacade,
    RouteRegistry,
    ShadowedRouteError,
    SmartNavError,
    extract_params,
    generate_path,
    same_section,
    sanitize_route,
)
from .config import RedirectTargets, SmartNavConfig
from .defaults import build_default_facade, default_definitions

__all__ = [
    "AccessEvaluator",
    "BreadcrumbItem",
    "ConfigurationError",
    "CyclicRouteError",
    "DanglingParentError",
    "HierarchyResolver",
    "NavigationNode",
    "PathPattern",
    "RedirectTargets",
    "Role",
    "RouteDefinition",
    "RouteFacade",
    "RouteRegistry",
    "ShadowedRouteError",
    "SmartNavConfig",
    "SmartNavError",
    "build_default_facade",
    "default_definitions",
    "extract_params",
    "generate_path",
    "same_section",
    "sanitize_route",
]
