"""Sort Resolver — turns an untrusted sort string into a validated, always-defined sort.

Invariants:
    - resolve_sort() is total: any input yields a ResolvedSort, nothing raises
    - A parsed direction is applied even when the candidate key is rejected
    - A key is accepted only if sortable on the storage shape AND exposed on the
      external shape; the exact spelling is tried first, then its lower-cased form
    - With no sort string, both key and direction come from the default

Design Decisions:
    - Explicit fall-through branches, no try/except (ADR: degrade, never fail)
    - Lower-case retry only: "COMPLETED" → "completed", but camelCase keys must
      match exactly or in all-lower form
"""

from dataclasses import dataclass

from todo_api.core.domain_types import SortDirection
from todo_api.core.field_capabilities import (
    ShapeDescriptor, is_exposed, is_sortable,
)
from todo_api.core.sort_directive import parse_sort_directive


@dataclass(frozen=True)
class DefaultSort:
    key: str
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class ResolvedSort:
    """Final sort decision, reported verbatim in the X-Sort / X-Sort-Dir headers."""
    applied_key: str
    applied_direction: SortDirection


def _accepts(
    external_shape: ShapeDescriptor, storage_shape: ShapeDescriptor, key: str,
) -> bool:
    return is_sortable(storage_shape, key) and is_exposed(external_shape, key)


def resolve_sort(
    external_shape: ShapeDescriptor,
    storage_shape: ShapeDescriptor,
    raw_sort: str | None,
    default: DefaultSort,
) -> ResolvedSort:
    """Resolve raw_sort against both shapes, falling back to default per field."""
    applied_key = default.key
    applied_direction = default.direction

    directive = parse_sort_directive(raw_sort)
    if directive is None:
        return ResolvedSort(applied_key, applied_direction)

    applied_direction = directive.direction
    candidate = directive.candidate_key
    if _accepts(external_shape, storage_shape, candidate):
        applied_key = candidate
    elif _accepts(external_shape, storage_shape, candidate.lower()):
        applied_key = candidate.lower()

    return ResolvedSort(applied_key, applied_direction)
