"""Parent/child traversals over the route registry (source of truth).

Two independent walks share the registry's parent/children links.

Breadcrumb walk
---------------
``breadcrumb(definition)`` follows ``parent`` references from the given route
up to a route without parent and returns the visited routes root → leaf; the
last item is the route itself. A visited set guards the walk: meeting a
pattern twice raises ``CyclicRouteError`` with the chain walked so far. The
loader already rejects cycles, the guard keeps a hand-built or stubbed
registry from hanging the walk. A parent the registry cannot resolve raises
``DanglingParentError``.

``trail(path)`` resolves a concrete path and turns its breadcrumb into
``BreadcrumbItem`` rows: each ancestor pattern is filled with the parameters
extracted from the concrete path, so ``/vendors/42/edit`` yields links to
``/vendors``, ``/vendors/42`` and ``/vendors/42/edit``. Only the last item is
active. An unresolved path yields ``[]``.

Navigation tree
---------------
``navigation_tree(role=None, current_path=None)``

- candidates are the routes with ``sidebar_visible`` whose ``allowed_roles``
  policy the role satisfies (an absent role is not filtered);
- a candidate nests under its parent when the parent is a candidate too,
  otherwise it is a top-level node; visibility is never inherited;
- children are listed in registration order, through the same filter,
  recursively;
- with ``current_path``, every node on the current route's breadcrumb is
  marked ``is_active``.

The registry only needs ``by_pattern``, ``all`` and ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from smartnav.core.access import RoleLike, role_satisfies
from smartnav.core.definition import RouteDefinition
from smartnav.core.errors import CyclicRouteError, DanglingParentError
from smartnav.core.matcher import generate_path
from smartnav.core.registry import RouteRegistry

__all__ = ["BreadcrumbItem", "HierarchyResolver", "NavigationNode"]


@dataclass(frozen=True)
class BreadcrumbItem:
    """One link of a rendered breadcrumb trail."""

    label: str
    href: str
    is_active: bool = False
    definition: Optional[RouteDefinition] = None


@dataclass
class NavigationNode:
    """A sidebar entry and its visible children."""

    definition: RouteDefinition
    children: List["NavigationNode"] = field(default_factory=list)
    is_active: bool = False

    @property
    def path(self) -> str:
        return self.definition.path_pattern

    @property
    def title(self) -> str:
        return self.definition.title

    @property
    def badge(self) -> Optional[str]:
        return self.definition.badge

    @property
    def icon(self) -> Optional[str]:
        return self.definition.icon

    def as_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "title": self.title,
            "badge": self.badge,
            "icon": self.icon,
            "is_active": self.is_active,
            "children": [child.as_dict() for child in self.children],
        }


class HierarchyResolver:
    """Breadcrumb and navigation-tree builder over a registry."""

    __slots__ = ("registry",)

    def __init__(self, registry: RouteRegistry) -> None:
        self.registry = registry

    # ------------------------------------------------------------------
    # Breadcrumbs
    # ------------------------------------------------------------------
    def breadcrumb(self, definition: RouteDefinition) -> List[RouteDefinition]:
        trail: List[RouteDefinition] = []
        chain: List[str] = []
        visited: Set[str] = set()
        current: Optional[RouteDefinition] = definition
        while current is not None:
            pattern = current.path_pattern
            chain.append(pattern)
            if pattern in visited:
                raise CyclicRouteError(chain)
            visited.add(pattern)
            trail.append(current)
            if current.parent is None:
                break
            parent = self.registry.by_pattern(current.parent)
            if parent is None:
                raise DanglingParentError(pattern, current.parent)
            current = parent
        trail.reverse()
        return trail

    def trail(self, path: str) -> List[BreadcrumbItem]:
        route = self.registry.match(path)
        if route is None:
            return []
        params = route.matcher.extract(path)
        crumbs = self.breadcrumb(route)
        last = len(crumbs) - 1
        return [
            BreadcrumbItem(
                label=crumb.label,
                href=generate_path(crumb.path_pattern, params),
                is_active=index == last,
                definition=crumb,
            )
            for index, crumb in enumerate(crumbs)
        ]

    # ------------------------------------------------------------------
    # Navigation tree
    # ------------------------------------------------------------------
    def navigation_tree(
        self, role: Optional[RoleLike] = None, current_path: Optional[str] = None
    ) -> List[NavigationNode]:
        rows = self.registry.all()
        order = {row.path_pattern: index for index, row in enumerate(rows)}
        candidates = [row for row in rows if row.sidebar_visible and role_satisfies(row, role)]
        visible = {row.path_pattern for row in candidates}

        active: Set[str] = set()
        if current_path is not None:
            current = self.registry.match(current_path)
            if current is not None:
                active = {crumb.path_pattern for crumb in self.breadcrumb(current)}

        return [
            self._build_node(row, visible, active, order, set())
            for row in candidates
            if row.parent not in visible
        ]

    def _build_node(
        self,
        row: RouteDefinition,
        visible: Set[str],
        active: Set[str],
        order: Dict[str, int],
        seen: Set[str],
    ) -> NavigationNode:
        seen = seen | {row.path_pattern}
        node = NavigationNode(definition=row, is_active=row.path_pattern in active)
        child_patterns = sorted(
            (p for p in row.children if p in visible and p not in seen),
            key=lambda p: order.get(p, len(order)),
        )
        for pattern in child_patterns:
            child = self.registry.by_pattern(pattern)
            if child is not None:
                node.children.append(self._build_node(child, visible, active, order, seen))
        return node
