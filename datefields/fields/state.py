# datefields/fields/state.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, Optional, Tuple

from datefields.fields.catalog import FIELD_NAMES, FieldIndex, Mode


@dataclass(frozen=True)
class FieldState:
    """
    One field slot.

    min / max are the currently resolved bounds, cached for inspection
    (None = unbounded on that side).
    """

    value: int
    min: Optional[int] = None
    max: Optional[int] = None


@dataclass(frozen=True)
class EngineState:
    """
    Immutable engine snapshot.

    - fields: six fixed slots addressed by FieldIndex
    - composite: always equal to compose(fields, mode) at second precision
    - never mutated in place; every accepted edit yields a new object
    """

    fields: Tuple[FieldState, ...]
    composite: datetime
    mode: Mode = Mode.LOCAL
    min_bound: Optional[datetime] = None
    max_bound: Optional[datetime] = None

    def __post_init__(self):
        if len(self.fields) != len(FieldIndex):
            raise ValueError(f"expected {len(FieldIndex)} field slots, got {len(self.fields)}")

    def field(self, index: FieldIndex) -> FieldState:
        return self.fields[index]

    def value_of(self, index: FieldIndex) -> int:
        return self.fields[index].value

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(f.value for f in self.fields)

    def with_field(self, index: FieldIndex, slot: FieldState) -> "EngineState":
        """New state with one slot replaced; the other slots are shared."""
        fields = self.fields[:index] + (slot,) + self.fields[index + 1:]
        return replace(self, fields=fields)

    def as_dict(self) -> Dict[str, FieldState]:
        return dict(zip(FIELD_NAMES, self.fields))
