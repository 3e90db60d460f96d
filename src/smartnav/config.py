"""SmartNav configuration.

``SmartNavConfig`` is a frozen pydantic model: validated once, immutable,
no string-key dict lookups at query time. Override what you need::

    config = SmartNavConfig(fallback_role="vendor", strict_order=False)
    config = SmartNavConfig.from_flags("strict_order:off,log_denials")

Flag strings use the ``name``, ``name:on``, ``name:off`` syntax; only boolean
fields may be set that way.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smartnav.core.roles import Role

__all__ = ["DEFAULT_ROUTE_BY_ROLE", "RedirectTargets", "SmartNavConfig", "parse_flags"]

DEFAULT_ROUTE_BY_ROLE: Dict[Role, str] = {
    Role.ADMIN: "/dashboard",
    Role.MANAGER: "/dashboard",
    Role.USER: "/dashboard",
    Role.VENDOR: "/deliveries",
}

_FLAG_FIELDS = frozenset({"strict_order", "log_denials"})


def parse_flags(flags: str) -> Dict[str, bool]:
    mapping: Dict[str, bool] = {}
    for chunk in flags.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        if ":" in chunk:
            name, value = chunk.split(":", 1)
            mapping[name.strip()] = value.strip().lower() != "off"
        else:
            mapping[chunk] = True
    return mapping


class RedirectTargets(BaseModel):
    """Where a route guard sends the user."""

    model_config = ConfigDict(frozen=True)

    authenticated: str = "/dashboard"
    unauthenticated: str = "/login"
    unauthorized: str = "/unauthorized"
    not_found: str = "/404"


class SmartNavConfig(BaseModel):
    """Facade and registry options. Immutable after creation."""

    model_config = ConfigDict(frozen=True)

    # Post-login landing page per role; partial maps are completed from the defaults
    default_routes: Dict[Role, str] = Field(default_factory=lambda: dict(DEFAULT_ROUTE_BY_ROLE))
    # Role whose landing page unknown roles get
    fallback_role: Role = Role.USER
    redirects: RedirectTargets = Field(default_factory=RedirectTargets)

    # Reject literal routes shadowed by earlier ones (warn only when off)
    strict_order: bool = True
    log_denials: bool = True

    @field_validator("default_routes")
    @classmethod
    def _complete_default_routes(cls, value: Dict[Role, str]) -> Dict[Role, str]:
        merged = dict(DEFAULT_ROUTE_BY_ROLE)
        merged.update(value)
        return merged

    @classmethod
    def from_flags(cls, flags: str, **overrides: Any) -> "SmartNavConfig":
        values: Dict[str, Any] = parse_flags(flags)
        unknown = sorted(set(values) - _FLAG_FIELDS)
        if unknown:
            raise ValueError(
                f"Unknown flags: {', '.join(unknown)}. Available: {', '.join(sorted(_FLAG_FIELDS))}"
            )
        values.update(overrides)
        return cls(**values)
