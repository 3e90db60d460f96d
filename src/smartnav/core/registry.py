"""Immutable route registry (source of truth).

The registry is the validated, ordered table of ``RouteDefinition`` rows. It is
built once at startup and only read afterwards; there is no module-level
instance, callers construct one and pass it to the components that need it.

Construction
------------
``RouteRegistry.load(definitions, *, strict_order=True, logger=None)`` (or the
constructor with the same signature) validates the table and fails fast with
a ``ConfigurationError`` subclass:

- duplicate ``path_pattern`` → ``ConfigurationError``;
- empty ``allowed_roles`` (only reachable through ``model_construct``) →
  ``ConfigurationError``;
- ``parent`` naming an unregistered pattern → ``DanglingParentError``;
- a loop in the parent graph → ``CyclicRouteError``;
- declared ``children`` that differ from the routes naming this one as
  ``parent`` → ``ConfigurationError``; when a route declares no children they
  are derived from parent pointers in registration order;
- a literal pattern matched by an earlier route (it could never be reached
  because the first match wins) → ``ShadowedRouteError``; with
  ``strict_order=False`` a warning is logged instead.

``RouteRegistry.from_mappings(items, **kwargs)`` validates plain dicts through
pydantic first and re-raises ``ValidationError`` as ``ConfigurationError``.

Queries
-------
- ``by_pattern(pattern)``: O(1) lookup by (sanitized) pattern string.
- ``all()``: tuple of definitions in registration order.
- ``match(path)``: first definition whose pattern matches ``path``, scanning
  in registration order; ``None`` when nothing matches.
- ``__len__``, ``__iter__`` and ``__contains__`` (by pattern) mirror ``all()``
  and ``by_pattern``.

Invariants
----------
- Registration order is preserved and decides match tie-breaks.
- Definitions are frozen; the registry never replaces them after load.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from smartnav.core.definition import RouteDefinition
from smartnav.core.errors import (
    ConfigurationError,
    CyclicRouteError,
    DanglingParentError,
    ShadowedRouteError,
)
from smartnav.core.matcher import PathPattern, sanitize_route

__all__ = ["RouteRegistry"]


class RouteRegistry:
    """Validated, ordered, read-only table of route definitions."""

    __slots__ = ("_definitions", "_by_pattern", "_matchers", "_logger")

    def __init__(
        self,
        definitions: Iterable[RouteDefinition] = (),
        *,
        strict_order: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or logging.getLogger("smartnav")
        rows = list(definitions)
        self._check_rows(rows)
        rows = self._link_children(rows)
        self._check_cycles(rows)
        self._check_order(rows, strict=strict_order)
        self._definitions: Tuple[RouteDefinition, ...] = tuple(rows)
        self._by_pattern: Dict[str, RouteDefinition] = {
            row.path_pattern: row for row in self._definitions
        }
        self._matchers: Tuple[Tuple[PathPattern, RouteDefinition], ...] = tuple(
            (row.matcher, row) for row in self._definitions
        )
        self._logger.info("Loaded %d route definitions", len(self._definitions))

    @classmethod
    def load(
        cls,
        definitions: Iterable[RouteDefinition],
        *,
        strict_order: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> "RouteRegistry":
        return cls(definitions, strict_order=strict_order, logger=logger)

    @classmethod
    def from_mappings(
        cls,
        items: Iterable[Union[RouteDefinition, Mapping[str, Any]]],
        **kwargs: Any,
    ) -> "RouteRegistry":
        """Validate plain mappings into definitions, then load them."""
        definitions: List[RouteDefinition] = []
        for item in items:
            if isinstance(item, RouteDefinition):
                definitions.append(item)
                continue
            try:
                definitions.append(RouteDefinition.model_validate(item))
            except ValidationError as exc:
                pattern = item.get("path_pattern") if isinstance(item, Mapping) else None
                raise ConfigurationError(f"Invalid route definition {pattern!r}: {exc}") from exc
        return cls.load(definitions, **kwargs)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def by_pattern(self, pattern: str) -> Optional[RouteDefinition]:
        return self._by_pattern.get(sanitize_route(pattern))

    def all(self) -> Tuple[RouteDefinition, ...]:
        return self._definitions

    def match(self, path: str) -> Optional[RouteDefinition]:
        for matcher, row in self._matchers:
            if matcher.matches(path):
                return row
        return None

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[RouteDefinition]:
        return iter(self._definitions)

    def __contains__(self, pattern: object) -> bool:
        return isinstance(pattern, str) and self.by_pattern(pattern) is not None

    def __repr__(self) -> str:
        return f"RouteRegistry({len(self._definitions)} routes)"

    # ------------------------------------------------------------------
    # Load-time validation
    # ------------------------------------------------------------------
    def _check_rows(self, rows: List[RouteDefinition]) -> None:
        seen: set[str] = set()
        for row in rows:
            if not isinstance(row, RouteDefinition):
                raise ConfigurationError(f"Expected RouteDefinition, got {type(row).__name__}")
            if row.path_pattern in seen:
                raise ConfigurationError(f"Duplicate route pattern: {row.path_pattern!r}")
            seen.add(row.path_pattern)
            if row.allowed_roles is not None and not row.allowed_roles:
                raise ConfigurationError(
                    f"Route {row.path_pattern!r} has an empty allowed_roles set"
                )
        for row in rows:
            if row.parent is not None and row.parent not in seen:
                raise DanglingParentError(row.path_pattern, row.parent)

    def _link_children(self, rows: List[RouteDefinition]) -> List[RouteDefinition]:
        derived: Dict[str, List[str]] = {row.path_pattern: [] for row in rows}
        for row in rows:
            if row.parent is not None:
                derived[row.parent].append(row.path_pattern)

        linked: List[RouteDefinition] = []
        for row in rows:
            expected = derived[row.path_pattern]
            if row.children:
                declared = list(row.children)
                if len(set(declared)) != len(declared) or set(declared) != set(expected):
                    raise ConfigurationError(
                        f"Route {row.path_pattern!r} declares children {declared} but "
                        f"routes naming it as parent are {expected}"
                    )
                linked.append(row)
            elif expected:
                self._logger.debug(
                    "Derived children of %s: %s", row.path_pattern, ", ".join(expected)
                )
                linked.append(row.model_copy(update={"children": tuple(expected)}))
            else:
                linked.append(row)
        return linked

    def _check_cycles(self, rows: List[RouteDefinition]) -> None:
        parents = {row.path_pattern: row.parent for row in rows}
        cleared: set[str] = set()
        for row in rows:
            chain: List[str] = []
            visited: set[str] = set()
            current: Optional[str] = row.path_pattern
            while current is not None and current not in cleared:
                if current in visited:
                    chain.append(current)
                    raise CyclicRouteError(chain)
                visited.add(current)
                chain.append(current)
                current = parents[current]
            cleared.update(visited)

    def _check_order(self, rows: List[RouteDefinition], *, strict: bool) -> None:
        for index, row in enumerate(rows):
            if not row.matcher.is_literal:
                continue
            for earlier in rows[:index]:
                if earlier.matches(row.path_pattern):
                    if strict:
                        raise ShadowedRouteError(row.path_pattern, earlier.path_pattern)
                    self._logger.warning(
                        "Route %s is shadowed by earlier route %s",
                        row.path_pattern,
                        earlier.path_pattern,
                    )
                    break
