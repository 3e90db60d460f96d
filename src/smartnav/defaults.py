"""Route table of the vendor compliance dashboard.

The table is plain data validated into ``RouteDefinition`` rows. Order
matters: within each section the literal ``create`` page is registered before
the ``:id`` detail page it would otherwise be shadowed by.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from smartnav.config import SmartNavConfig
from smartnav.core.definition import RouteDefinition
from smartnav.core.facade import RouteFacade
from smartnav.core.registry import RouteRegistry

__all__ = ["DEFAULT_ROUTE_TABLE", "default_definitions", "build_default_facade"]

_STAFF = ["admin", "manager"]

DEFAULT_ROUTE_TABLE: List[Dict[str, Any]] = [
    # Public
    {"path_pattern": "/", "title": "Home",
     "description": "Welcome to Smart Vendor Compliance", "requires_auth": False},
    {"path_pattern": "/login", "title": "Login",
     "description": "Sign in to your account", "requires_auth": False},
    {"path_pattern": "/register", "title": "Register",
     "description": "Create a new account", "requires_auth": False},
    {"path_pattern": "/forgot-password", "title": "Forgot Password",
     "description": "Reset your password", "requires_auth": False},
    {"path_pattern": "/unauthorized", "title": "Unauthorized", "requires_auth": False},
    {"path_pattern": "/404", "title": "Not Found", "requires_auth": False},
    # Dashboard
    {"path_pattern": "/dashboard", "title": "Dashboard",
     "description": "Overview of vendor compliance metrics",
     "icon": "LayoutDashboard", "sidebar_visible": True, "breadcrumb_label": "Dashboard"},
    # Vendors
    {"path_pattern": "/vendors", "title": "Vendors",
     "description": "Manage vendor information and compliance",
     "icon": "Building2", "sidebar_visible": True, "breadcrumb_label": "Vendors"},
    {"path_pattern": "/vendors/create", "title": "Create Vendor", "parent": "/vendors",
     "allowed_roles": _STAFF, "breadcrumb_label": "Create Vendor"},
    {"path_pattern": "/vendors/:id", "title": "Vendor Details", "parent": "/vendors",
     "description": "View vendor information and compliance history",
     "breadcrumb_label": "Vendor Details"},
    {"path_pattern": "/vendors/:id/edit", "title": "Edit Vendor", "parent": "/vendors/:id",
     "allowed_roles": _STAFF, "breadcrumb_label": "Edit"},
    # Deliveries
    {"path_pattern": "/deliveries", "title": "Deliveries",
     "description": "Track and verify deliveries",
     "icon": "Package", "sidebar_visible": True, "breadcrumb_label": "Deliveries"},
    {"path_pattern": "/deliveries/create", "title": "Create Delivery", "parent": "/deliveries",
     "allowed_roles": ["admin", "manager", "vendor"], "breadcrumb_label": "Create Delivery"},
    {"path_pattern": "/deliveries/:id", "title": "Delivery Details", "parent": "/deliveries",
     "description": "View delivery information and verification status",
     "breadcrumb_label": "Delivery Details"},
    {"path_pattern": "/deliveries/:id/edit", "title": "Edit Delivery",
     "parent": "/deliveries/:id", "allowed_roles": ["admin", "manager", "vendor"],
     "breadcrumb_label": "Edit"},
    # Analytics
    {"path_pattern": "/analytics", "title": "Analytics",
     "description": "Compliance analytics and reports", "icon": "BarChart3",
     "allowed_roles": _STAFF, "sidebar_visible": True, "breadcrumb_label": "Analytics"},
    {"path_pattern": "/analytics/compliance", "title": "Compliance Reports",
     "description": "Detailed compliance reporting", "parent": "/analytics",
     "allowed_roles": _STAFF, "sidebar_visible": True, "breadcrumb_label": "Compliance Reports"},
    {"path_pattern": "/analytics/fraud", "title": "Fraud Detection", "parent": "/analytics",
     "allowed_roles": ["admin"], "sidebar_visible": True, "badge": "Admin",
     "breadcrumb_label": "Fraud Detection"},
    {"path_pattern": "/analytics/performance", "title": "Performance Metrics",
     "parent": "/analytics", "allowed_roles": _STAFF, "sidebar_visible": True,
     "breadcrumb_label": "Performance Metrics"},
    # Settings
    {"path_pattern": "/settings", "title": "Settings",
     "description": "Application settings and preferences", "icon": "Settings",
     "sidebar_visible": True, "breadcrumb_label": "Settings"},
    {"path_pattern": "/settings/profile", "title": "Profile", "parent": "/settings",
     "sidebar_visible": True},
    {"path_pattern": "/settings/theme", "title": "Theme", "parent": "/settings",
     "sidebar_visible": True},
    {"path_pattern": "/settings/system", "title": "System", "parent": "/settings",
     "allowed_roles": ["admin"], "sidebar_visible": True, "badge": "Admin"},
]


def default_definitions() -> Tuple[RouteDefinition, ...]:
    return tuple(RouteDefinition.model_validate(item) for item in DEFAULT_ROUTE_TABLE)


def build_default_facade(
    config: Optional[SmartNavConfig] = None, *, logger: Optional[logging.Logger] = None
) -> RouteFacade:
    """Load the dashboard table and wrap it in a facade."""
    config = config or SmartNavConfig()
    registry = RouteRegistry.from_mappings(
        DEFAULT_ROUTE_TABLE, strict_order=config.strict_order, logger=logger
    )
    return RouteFacade(registry, config=config, logger=logger)
