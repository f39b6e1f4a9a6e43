"""Field Capabilities — static per-shape table answering "sortable?" and "exposed?".

Invariants:
    - A ShapeDescriptor is frozen; its capability table is built once in __post_init__
    - Lookups are plain dict reads — no reflection, no runtime type inspection
    - Blank or unknown field names resolve to sortable=False, exposed=False (never raise)
    - A field is hidden if its declaration, its read accessor OR its write accessor is marked hidden

Design Decisions:
    - Declarative FieldSpec tuples over introspecting ORM/Pydantic classes: the table is
      explicit, reviewable, and identical for every request (ADR: static capability table)
    - sortable_access is chosen per shape: READ (default) accepts any readable field,
      WRITE accepts only writable fields (ADR: sortable contract, see DESIGN.md)
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class SortableAccess(str, Enum):
    """Which accessor makes a stored field usable as an order-by term."""
    READ = "read"
    WRITE = "write"


@dataclass(frozen=True)
class FieldSpec:
    """One field declaration on a shape.

    ``hidden`` is the declaration-level marker; ``read_hidden`` and
    ``write_hidden`` are the accessor-level markers. Any one of them hides
    the field from the external view.
    """
    name: str
    readable: bool = True
    writable: bool = True
    hidden: bool = False
    read_hidden: bool = False
    write_hidden: bool = False

    @property
    def accessible(self) -> bool:
        return self.readable or self.writable

    @property
    def is_hidden(self) -> bool:
        return self.hidden or self.read_hidden or self.write_hidden


@dataclass(frozen=True)
class FieldCapability:
    """Derived answer for one (shape, field) pair."""
    name: str
    sortable: bool
    exposed: bool


@dataclass(frozen=True)
class ShapeDescriptor:
    """Immutable description of one record shape (stored or external)."""
    name: str
    fields: tuple[FieldSpec, ...]
    sortable_access: SortableAccess = SortableAccess.READ
    capabilities: Mapping[str, FieldCapability] = field(
        init=False, repr=False, compare=False,
    )

    def __post_init__(self) -> None:
        table = {
            spec.name: FieldCapability(
                name=spec.name,
                sortable=_is_sortable_spec(spec, self.sortable_access),
                exposed=spec.accessible and not spec.is_hidden,
            )
            for spec in self.fields
        }
        object.__setattr__(self, "capabilities", MappingProxyType(table))

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)


def _is_sortable_spec(spec: FieldSpec, access: SortableAccess) -> bool:
    if access is SortableAccess.WRITE:
        return spec.writable
    return spec.readable


def _is_blank(field_name: str | None) -> bool:
    return field_name is None or not field_name.strip()


def capability_of(shape: ShapeDescriptor, field_name: str | None) -> FieldCapability:
    """Look up a field's capability; unknown or blank names get an all-False answer."""
    if _is_blank(field_name):
        return FieldCapability(name=field_name or "", sortable=False, exposed=False)
    known = shape.capabilities.get(field_name)
    if known is None:
        return FieldCapability(name=field_name, sortable=False, exposed=False)
    return known


def is_sortable(shape: ShapeDescriptor, field_name: str | None) -> bool:
    """True if the field can be used as an order-by term on this shape."""
    return capability_of(shape, field_name).sortable


def is_exposed(shape: ShapeDescriptor, field_name: str | None) -> bool:
    """True if the field is accessible and not hidden on this shape."""
    return capability_of(shape, field_name).exposed
