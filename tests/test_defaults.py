"""Tests against the built-in vendor compliance route table."""

import pytest

from smartnav import Role, build_default_facade, default_definitions
from smartnav.config import SmartNavConfig


@pytest.fixture(scope="module")
def facade():
    return build_default_facade()


def test_table_loads():
    rows = default_definitions()
    assert rows[0].path_pattern == "/"
    assert len({row.path_pattern for row in rows}) == len(rows)


def test_every_public_route_open_to_everyone(facade):
    public = [row.path_pattern for row in facade.registry.all() if row.is_public]
    assert "/login" in public
    for path in public:
        assert facade.has_route_access(path)
        for role in Role:
            assert facade.has_route_access(path, role)


def test_unrestricted_protected_routes(facade):
    for row in facade.registry.all():
        if row.is_public or row.allowed_roles or row.param_names:
            continue
        for role in Role:
            assert facade.has_route_access(row.path_pattern, role)
        assert not facade.has_route_access(row.path_pattern)


def test_admin_only_routes(facade):
    for path in ("/settings/system", "/analytics/fraud"):
        assert facade.is_admin_route(path)
        assert facade.has_route_access(path, "admin")
        assert not facade.has_route_access(path, "user")


def test_manager_routes(facade):
    for path in ("/analytics", "/analytics/compliance", "/analytics/performance"):
        assert facade.is_manager_route(path)
        assert facade.has_route_access(path, "manager")
        assert not facade.has_route_access(path, "vendor")
    assert not facade.is_manager_route("/analytics/fraud")
    assert not facade.is_manager_route("/dashboard")


def test_create_routes_resolve_to_literal(facade):
    assert facade.get_route_metadata("/vendors/create").title == "Create Vendor"
    assert facade.get_route_metadata("/deliveries/create").title == "Create Delivery"
    assert facade.get_route_metadata("/vendors/42").title == "Vendor Details"


def test_vendor_edit_breadcrumb(facade):
    trail = facade.get_breadcrumb_trail("/vendors/42/edit")
    assert [(item.label, item.href) for item in trail] == [
        ("Vendors", "/vendors"),
        ("Vendor Details", "/vendors/42"),
        ("Edit", "/vendors/42/edit"),
    ]


def test_vendor_sidebar(facade):
    tree = facade.get_sidebar_routes("vendor")
    paths = [node.path for node in tree]
    assert paths == ["/dashboard", "/vendors", "/deliveries", "/settings"]
    settings = tree[-1]
    assert [child.path for child in settings.children] == ["/settings/profile", "/settings/theme"]


def test_vendor_sidebar_excludes_restricted_routes(facade):
    def walk(nodes):
        for node in nodes:
            yield node
            yield from walk(node.children)

    for node in walk(facade.get_sidebar_routes("vendor")):
        roles = node.definition.allowed_roles
        assert roles is None or Role.VENDOR in roles

    sidebar = {node.path for node in walk(facade.get_sidebar_routes("vendor"))}
    for row in facade.registry.all():
        if row.sidebar_visible and not row.allowed_roles:
            assert row.path_pattern in sidebar


def test_admin_sidebar_shows_badges(facade):
    tree = facade.get_sidebar_routes("admin")
    analytics = next(node for node in tree if node.path == "/analytics")
    badges = {child.path: child.badge for child in analytics.children}
    assert badges["/analytics/fraud"] == "Admin"
    assert badges["/analytics/compliance"] is None


def test_guard_redirects(facade):
    assert facade.resolve_redirect("/analytics", "vendor") == "/unauthorized"
    assert facade.resolve_redirect("/analytics") == "/login"
    assert facade.resolve_redirect("/vendors/42/unknown", "admin") == "/404"


def test_build_with_config():
    facade = build_default_facade(SmartNavConfig(fallback_role=Role.VENDOR))
    assert facade.get_default_route_for_role("nobody") == "/deliveries"
