"""SmartNav exception hierarchy.

Configuration problems are fatal and surface while the registry loads.
Lookup misses and access denials are ordinary return values and never use
these types.
"""

from __future__ import annotations

from typing import Sequence, Tuple

__all__ = [
    "SmartNavError",
    "ConfigurationError",
    "DanglingParentError",
    "CyclicRouteError",
    "ShadowedRouteError",
]


class SmartNavError(Exception):
    """Base for all smartnav-specific errors."""


class ConfigurationError(SmartNavError, ValueError):
    """Raised when the route table violates a load-time invariant."""


class DanglingParentError(ConfigurationError):
    """A route names a parent pattern that is not registered."""

    def __init__(self, pattern: str, parent: str) -> None:
        self.pattern = pattern
        self.parent = parent
        super().__init__(f"Route {pattern!r} references unknown parent {parent!r}")


class CyclicRouteError(ConfigurationError):
    """The parent graph loops back on itself.

    ``chain`` holds the patterns visited up to and including the repeated one.
    """

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain: Tuple[str, ...] = tuple(chain)
        super().__init__("Cyclic route configuration: " + " -> ".join(self.chain))


class ShadowedRouteError(ConfigurationError):
    """A literal route can never match because an earlier route matches it first."""

    def __init__(self, pattern: str, shadowed_by: str) -> None:
        self.pattern = pattern
        self.shadowed_by = shadowed_by
        super().__init__(
            f"Route {pattern!r} is unreachable: {shadowed_by!r} is registered "
            "earlier and matches it first"
        )
