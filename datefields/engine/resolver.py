# datefields/engine/resolver.py
from __future__ import annotations

from typing import Optional, Tuple

from datefields.engine.alignment import at_max, at_min
from datefields.fields.catalog import FIELDS, FieldIndex
from datefields.fields.state import EngineState
from datefields.utils.datetime_utils import DateTimeUtils

Range = Tuple[Optional[int], Optional[int]]


class RangeResolver:
    """
    RangeResolver Contract (Frozen)

    唯一职责：
      - 给定 state 与 field index，计算该字段当前合法的 (min, max)

    规则：
      - year  : 外部 bound 的 year；无 bound → None（不设限）
      - 其它  : 仅当所有更高位字段都钉在 bound 上时，取 bound 的对应分量；
                否则取 FieldCatalog 默认值
      - day   : 默认上限 = days_in_month(year, month)

    只读取更高位字段的 *值*，不读它们的 min / max。
    """

    @classmethod
    def resolve(cls, state: EngineState, index: FieldIndex) -> Range:
        return cls.resolve_min(state, index), cls.resolve_max(state, index)

    @classmethod
    def resolve_min(cls, state: EngineState, index: FieldIndex) -> Optional[int]:
        spec = FIELDS[index]
        if index == FieldIndex.YEAR:
            if state.min_bound is None:
                return None
            return spec.extract(state.min_bound, state.mode.utc)

        if at_min(state, index - 1):
            return spec.extract(state.min_bound, state.mode.utc)

        return spec.default_min

    @classmethod
    def resolve_max(cls, state: EngineState, index: FieldIndex) -> Optional[int]:
        spec = FIELDS[index]
        if index == FieldIndex.YEAR:
            if state.max_bound is None:
                return None
            return spec.extract(state.max_bound, state.mode.utc)

        if at_max(state, index - 1):
            return spec.extract(state.max_bound, state.mode.utc)

        if index == FieldIndex.DAY:
            return DateTimeUtils.days_in_month(
                state.value_of(FieldIndex.YEAR),
                state.value_of(FieldIndex.MONTH),
            )

        return spec.default_max
