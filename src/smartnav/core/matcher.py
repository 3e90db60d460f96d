"""Path pattern matching (source of truth).

A route pattern is a ``/``-delimited template. Segments starting with ``:``
are named parameters that bind positionally; every other segment is a
literal. Patterns are parsed once and cached; matching is a segment-by-segment
comparison, no regular expressions are built per pattern.

Normalization
-------------
``sanitize_route(path)`` collapses runs of ``/`` into one and strips a
trailing ``/`` (the bare root ``/`` is kept). An empty string normalizes to
``/``. Both patterns and concrete paths are sanitized before splitting, so
``/vendors//42/`` and ``/vendors/42`` are the same path.

Matching
--------
``PathPattern(pattern, exact=True)``

- ``exact=True``: segment counts must be equal; literal segments compare by
  equality, parameter segments accept any value.
- ``exact=False``: the concrete path matches when it equals the pattern or
  extends it at a segment boundary (``/settings`` matches
  ``/settings/profile`` but not ``/settingsx``). The root pattern ``/`` only
  matches the bare root, never as a prefix of everything.

Extraction
----------
``extract(path)`` maps each parameter name to the concrete segment at the same
index. When the concrete path is shorter than the pattern, parameters past its
end get ``""`` instead of failing. Literal segments are not checked; callers
extract after a successful ``matches``. Prefix patterns extract with the same
positional rule.

Generation
----------
``generate_path(pattern, params)`` replaces each ``:name`` segment whose name
is in ``params``; placeholders without a value are left in place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Tuple

__all__ = [
    "PARAM_MARKER",
    "SEPARATOR",
    "PathSegment",
    "PathPattern",
    "sanitize_route",
    "split_path",
    "parse_pattern",
    "extract_params",
    "generate_path",
    "same_section",
]

PARAM_MARKER = ":"
SEPARATOR = "/"

_REPEATED_SEPARATORS = re.compile(r"/{2,}")


@dataclass(frozen=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal: ``vendors`` (is_param=False)
    Param:   ``:id``     (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: Optional[str] = None


def sanitize_route(path: str) -> str:
    """Collapse repeated separators and strip a trailing one (root excepted)."""
    if not path:
        return SEPARATOR
    collapsed = _REPEATED_SEPARATORS.sub(SEPARATOR, path)
    if len(collapsed) > 1 and collapsed.endswith(SEPARATOR):
        collapsed = collapsed[:-1]
    return collapsed


def split_path(path: str) -> List[str]:
    """Return the non-empty segments of ``path``; the root yields ``[]``."""
    cleaned = sanitize_route(path).strip(SEPARATOR)
    if not cleaned:
        return []
    return cleaned.split(SEPARATOR)


@lru_cache(maxsize=1024)
def parse_pattern(pattern: str) -> Tuple[PathSegment, ...]:
    segments: List[PathSegment] = []
    for part in split_path(pattern):
        if part.startswith(PARAM_MARKER) and len(part) > 1:
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:]))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


class PathPattern:
    """Compiled route pattern with a match predicate and a parameter extractor."""

    __slots__ = ("pattern", "exact", "segments")

    def __init__(self, pattern: str, exact: bool = True) -> None:
        self.pattern = sanitize_route(pattern)
        self.exact = bool(exact)
        self.segments = parse_pattern(self.pattern)

    @property
    def param_names(self) -> Tuple[str, ...]:
        return tuple(seg.param_name for seg in self.segments if seg.is_param)  # type: ignore[misc]

    @property
    def is_literal(self) -> bool:
        return not any(seg.is_param for seg in self.segments)

    def matches(self, path: str) -> bool:
        parts = split_path(path)
        if not self.segments:
            return not parts
        if self.exact and len(parts) != len(self.segments):
            return False
        if len(parts) < len(self.segments):
            return False
        return all(
            seg.is_param or seg.value == part for seg, part in zip(self.segments, parts)
        )

    def extract(self, path: str) -> Dict[str, str]:
        parts = split_path(path)
        params: Dict[str, str] = {}
        for index, seg in enumerate(self.segments):
            if not seg.is_param:
                continue
            params[seg.param_name] = parts[index] if index < len(parts) else ""  # type: ignore[index]
        return params

    def __repr__(self) -> str:
        mode = "exact" if self.exact else "prefix"
        return f"PathPattern({self.pattern!r}, {mode})"


def extract_params(pattern: str, path: str) -> Dict[str, str]:
    """Positional parameter extraction; see the module docstring for mismatches."""
    return PathPattern(pattern).extract(path)


def generate_path(pattern: str, params: Optional[Mapping[str, Any]] = None) -> str:
    values = dict(params or {})
    segments: List[str] = []
    for segment in sanitize_route(pattern).split(SEPARATOR):
        name = segment[1:] if segment.startswith(PARAM_MARKER) else None
        if name and name in values:
            segment = str(values[name])
        segments.append(segment)
    return SEPARATOR.join(segments)


def same_section(first: str, second: str) -> bool:
    """Return True when both paths share their first segment."""
    first_parts = split_path(first)
    second_parts = split_path(second)
    first_base = first_parts[0] if first_parts else ""
    second_base = second_parts[0] if second_parts else ""
    return first_base == second_base
