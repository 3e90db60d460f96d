"""Tests for breadcrumbs and navigation trees."""

import pytest

from smartnav import (
    CyclicRouteError,
    DanglingParentError,
    HierarchyResolver,
    Role,
    RouteDefinition,
    RouteRegistry,
)


def _registry():
    return RouteRegistry.load(
        [
            RouteDefinition(path_pattern="/dashboard", title="Dashboard", sidebar_visible=True),
            RouteDefinition(path_pattern="/vendors", title="Vendors", sidebar_visible=True),
            RouteDefinition(
                path_pattern="/vendors/create",
                title="Create Vendor",
                parent="/vendors",
                allowed_roles=["admin", "manager"],
            ),
            RouteDefinition(
                path_pattern="/vendors/:id",
                title="Vendor Details",
                breadcrumb_label="Details",
                parent="/vendors",
            ),
            RouteDefinition(
                path_pattern="/vendors/:id/edit", title="Edit Vendor", parent="/vendors/:id"
            ),
            RouteDefinition(
                path_pattern="/analytics",
                title="Analytics",
                sidebar_visible=True,
                allowed_roles=["admin", "manager"],
            ),
            RouteDefinition(
                path_pattern="/analytics/compliance",
                title="Compliance",
                parent="/analytics",
                sidebar_visible=True,
                allowed_roles=["admin", "manager", "vendor"],
            ),
            RouteDefinition(
                path_pattern="/analytics/fraud",
                title="Fraud",
                parent="/analytics",
                sidebar_visible=True,
                allowed_roles=["admin"],
                badge="Admin",
            ),
            RouteDefinition(path_pattern="/settings", title="Settings", sidebar_visible=True),
            RouteDefinition(
                path_pattern="/settings/theme", parent="/settings", sidebar_visible=True
            ),
            RouteDefinition(
                path_pattern="/settings/profile", parent="/settings", sidebar_visible=True
            ),
        ]
    )


class _StubRegistry:
    """Registry stand-in that skips load-time validation."""

    def __init__(self, rows):
        self.rows = list(rows)
        self.index = {row.path_pattern: row for row in self.rows}

    def by_pattern(self, pattern):
        return self.index.get(pattern)

    def all(self):
        return tuple(self.rows)

    def match(self, path):
        return next((row for row in self.rows if row.matches(path)), None)


def _paths(nodes):
    return [node.path for node in nodes]


def test_breadcrumb_three_levels_root_to_leaf():
    registry = _registry()
    leaf = registry.by_pattern("/vendors/:id/edit")
    crumbs = HierarchyResolver(registry).breadcrumb(leaf)
    assert [c.path_pattern for c in crumbs] == ["/vendors", "/vendors/:id", "/vendors/:id/edit"]
    assert crumbs[-1] == leaf


def test_breadcrumb_of_root_route_is_itself():
    registry = _registry()
    route = registry.by_pattern("/dashboard")
    assert HierarchyResolver(registry).breadcrumb(route) == [route]


def test_breadcrumb_cycle_terminates_with_error():
    rows = [
        RouteDefinition(path_pattern="/a", parent="/c"),
        RouteDefinition(path_pattern="/b", parent="/a"),
        RouteDefinition(path_pattern="/c", parent="/b"),
    ]
    resolver = HierarchyResolver(_StubRegistry(rows))
    with pytest.raises(CyclicRouteError) as excinfo:
        resolver.breadcrumb(rows[1])
    assert excinfo.value.chain == ("/b", "/a", "/c", "/b")


def test_breadcrumb_dangling_parent_in_stub():
    rows = [RouteDefinition(path_pattern="/a", parent="/gone")]
    with pytest.raises(DanglingParentError):
        HierarchyResolver(_StubRegistry(rows)).breadcrumb(rows[0])


def test_trail_fills_parameters():
    items = HierarchyResolver(_registry()).trail("/vendors/42/edit")
    assert [(item.label, item.href, item.is_active) for item in items] == [
        ("Vendors", "/vendors", False),
        ("Details", "/vendors/42", False),
        ("Edit Vendor", "/vendors/42/edit", True),
    ]
    assert items[-1].definition.path_pattern == "/vendors/:id/edit"


def test_trail_unresolved_path_is_empty():
    assert HierarchyResolver(_registry()).trail("/nowhere") == []


def test_tree_without_role_lists_every_sidebar_route():
    tree = HierarchyResolver(_registry()).navigation_tree()
    assert _paths(tree) == ["/dashboard", "/vendors", "/analytics", "/settings"]
    analytics = tree[2]
    assert _paths(analytics.children) == ["/analytics/compliance", "/analytics/fraud"]
    settings = tree[3]
    assert _paths(settings.children) == ["/settings/theme", "/settings/profile"]
    # Non-sidebar children are never listed.
    assert tree[1].children == []


def test_tree_for_admin():
    tree = HierarchyResolver(_registry()).navigation_tree("admin")
    analytics = next(node for node in tree if node.path == "/analytics")
    assert _paths(analytics.children) == ["/analytics/compliance", "/analytics/fraud"]
    assert analytics.children[1].badge == "Admin"


def test_tree_for_vendor_promotes_orphaned_child():
    tree = HierarchyResolver(_registry()).navigation_tree("vendor")
    assert _paths(tree) == ["/dashboard", "/vendors", "/analytics/compliance", "/settings"]
    assert all(
        node.definition.allowed_roles is None or Role.VENDOR in node.definition.allowed_roles
        for node in tree
    )


def test_tree_for_user_hides_restricted_routes():
    tree = HierarchyResolver(_registry()).navigation_tree("user")
    assert _paths(tree) == ["/dashboard", "/vendors", "/settings"]


def test_tree_marks_active_branch():
    tree = HierarchyResolver(_registry()).navigation_tree("admin", current_path="/analytics/fraud")
    analytics = next(node for node in tree if node.path == "/analytics")
    assert analytics.is_active
    assert [child.is_active for child in analytics.children] == [False, True]
    assert not any(node.is_active for node in tree if node.path != "/analytics")


def test_tree_active_for_non_sidebar_descendant():
    tree = HierarchyResolver(_registry()).navigation_tree(current_path="/vendors/42/edit")
    vendors = next(node for node in tree if node.path == "/vendors")
    assert vendors.is_active


def test_tree_as_dict():
    tree = HierarchyResolver(_registry()).navigation_tree("admin")
    data = tree[2].as_dict()
    assert data["path"] == "/analytics"
    assert data["title"] == "Analytics"
    assert data["is_active"] is False
    assert [child["path"] for child in data["children"]] == [
        "/analytics/compliance",
        "/analytics/fraud",
    ]


def test_tree_with_cyclic_stub_does_not_recurse_forever():
    rows = [
        RouteDefinition(path_pattern="/root", sidebar_visible=True, children=["/a"]),
        RouteDefinition(path_pattern="/a", sidebar_visible=True, parent="/root", children=["/root"]),
    ]
    tree = HierarchyResolver(_StubRegistry(rows)).navigation_tree()
    assert _paths(tree) == ["/root"]
    assert _paths(tree[0].children) == ["/a"]
    assert tree[0].children[0].children == []


def test_tree_children_follow_registration_order_not_declared_order():
    registry = RouteRegistry.load(
        [
            RouteDefinition(
                path_pattern="/s", sidebar_visible=True, children=["/s/t", "/s/p"]
            ),
            RouteDefinition(path_pattern="/s/p", parent="/s", sidebar_visible=True),
            RouteDefinition(path_pattern="/s/t", parent="/s", sidebar_visible=True),
        ]
    )
    assert registry.by_pattern("/s").children == ("/s/t", "/s/p")
    (section,) = HierarchyResolver(registry).navigation_tree()
    assert _paths(section.children) == ["/s/p", "/s/t"]
