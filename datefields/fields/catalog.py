# datefields/fields/catalog.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, datetime
from enum import Enum, IntEnum
from typing import Callable, Optional, Tuple, Union

from datefields.utils.datetime_utils import DateTimeUtils


class Mode(str, Enum):
    LOCAL = "local"
    UTC = "utc"

    @property
    def utc(self) -> bool:
        return self is Mode.UTC


class FieldIndex(IntEnum):
    """
    Field significance order (frozen).

    Boundary alignment and cascade order both depend on it.
    """

    YEAR = 0
    MONTH = 1
    DAY = 2
    HOUR = 3
    MINUTE = 4
    SECOND = 5

    @property
    def field_name(self) -> str:
        return self.name.lower()

    @classmethod
    def of(cls, field: Union["FieldIndex", str, int]) -> "FieldIndex":
        if isinstance(field, FieldIndex):
            return field
        if isinstance(field, str):
            try:
                return cls[field.upper()]
            except KeyError:
                raise ValueError(f"Unknown field: {field!r}") from None
        return cls(field)


@dataclass(frozen=True)
class FieldSpec:
    """
    Static description of one field.

    default_min / default_max apply when no external bound is aligned.
    `limits` is the range a ``datetime`` can actually hold.
    """

    index: FieldIndex
    extract: Callable[[datetime, bool], int]
    default_min: Optional[int]
    default_max: Optional[int]
    limits: Tuple[int, int]

    @property
    def name(self) -> str:
        return self.index.field_name


def _component(index: FieldIndex) -> Callable[[datetime, bool], int]:
    def extract(ts: datetime, utc: bool = False) -> int:
        return DateTimeUtils.components(ts, utc)[index]

    extract.__name__ = f"get_{index.field_name}"
    return extract


# day's default max is derived from year + month (see RangeResolver)
FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec(FieldIndex.YEAR, _component(FieldIndex.YEAR), None, None, (MINYEAR, MAXYEAR)),
    FieldSpec(FieldIndex.MONTH, _component(FieldIndex.MONTH), 0, 11, (0, 11)),
    FieldSpec(FieldIndex.DAY, _component(FieldIndex.DAY), 1, None, (1, 31)),
    FieldSpec(FieldIndex.HOUR, _component(FieldIndex.HOUR), 0, 23, (0, 23)),
    FieldSpec(FieldIndex.MINUTE, _component(FieldIndex.MINUTE), 0, 59, (0, 59)),
    FieldSpec(FieldIndex.SECOND, _component(FieldIndex.SECOND), 0, 59, (0, 59)),
)

FIELD_NAMES: Tuple[str, ...] = tuple(spec.name for spec in FIELDS)


def decompose(ts: datetime, mode: Mode) -> Tuple[int, ...]:
    """All six field values of a timestamp, in significance order."""
    return tuple(spec.extract(ts, mode.utc) for spec in FIELDS)
