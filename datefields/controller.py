# datefields/controller.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from datefields import logs
from datefields.config.engine_config import EngineConfig
from datefields.engine import reconciler
from datefields.engine.reconciler import ModeLike, UpdateResult
from datefields.fields.catalog import FieldIndex, Mode
from datefields.fields.state import EngineState, FieldState
from datefields.utils.datetime_utils import TimestampLike

OnChange = Callable[[datetime], Any]


class DateInputController:
    """
    Single-owner holder of one EngineState.

    职责：
      - 保存当前 state 引用，把编辑转交给 engine
      - 每个被接受且确实改变了 state 的批次，调用一次 on_change(composite)
      - sync() 做外部 value / min / max / mode 同步；无变化时不覆盖本地编辑

    非线程安全。
    """

    def __init__(
        self,
        value: Optional[TimestampLike] = None,
        min: Optional[TimestampLike] = None,
        max: Optional[TimestampLike] = None,
        mode: ModeLike = Mode.LOCAL,
        on_change: Optional[OnChange] = None,
        coerce_digits: bool = False,
    ):
        self.on_change = on_change
        self.coerce_digits = coerce_digits
        self._state = reconciler.init(value, min, max, mode)

        # fixed FieldIndex dispatch for the named setters
        self._setters: Dict[FieldIndex, Callable[[Any], bool]] = {
            index: self._setter(index) for index in FieldIndex
        }

    @classmethod
    def from_config(
        cls,
        cfg: EngineConfig,
        value: Optional[TimestampLike] = None,
        on_change: Optional[OnChange] = None,
    ) -> "DateInputController":
        return cls(
            value=value,
            min=cfg.min_bound,
            max=cfg.max_bound,
            mode=cfg.mode,
            on_change=on_change,
            coerce_digits=cfg.coerce_digit_strings,
        )

    # --------------------------------------------------
    # read accessors
    # --------------------------------------------------
    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def value(self) -> datetime:
        return reconciler.to_composite(self._state)

    def fields(self) -> Dict[str, FieldState]:
        return self._state.as_dict()

    # --------------------------------------------------
    # edits
    # --------------------------------------------------
    def _apply(self, result: UpdateResult) -> bool:
        self._state = result.state
        if result.changed and self.on_change is not None:
            self.on_change(self._state.composite)
        return result.changed

    def _setter(self, index: FieldIndex) -> Callable[[Any], bool]:
        def set_value(value: Any) -> bool:
            return self._apply(
                reconciler.set_field(self._state, index, value, coerce_digits=self.coerce_digits)
            )

        return set_value

    def set_year(self, value: Any) -> bool:
        return self._setters[FieldIndex.YEAR](value)

    def set_month(self, value: Any) -> bool:
        return self._setters[FieldIndex.MONTH](value)

    def set_day(self, value: Any) -> bool:
        return self._setters[FieldIndex.DAY](value)

    def set_hour(self, value: Any) -> bool:
        return self._setters[FieldIndex.HOUR](value)

    def set_minute(self, value: Any) -> bool:
        return self._setters[FieldIndex.MINUTE](value)

    def set_second(self, value: Any) -> bool:
        return self._setters[FieldIndex.SECOND](value)

    def set_fields(self, **values: Any) -> bool:
        return self._apply(
            reconciler.set_fields(self._state, values, coerce_digits=self.coerce_digits)
        )

    # --------------------------------------------------
    # external sync
    # --------------------------------------------------
    def sync(
        self,
        value: Optional[TimestampLike] = None,
        min: Optional[TimestampLike] = None,
        max: Optional[TimestampLike] = None,
        mode: Optional[ModeLike] = None,
    ) -> bool:
        """
        外部输入同步（不触发 on_change）。
        返回 state 是否被替换。
        """
        nxt = reconciler.reconcile_external(self._state, value, min, max, mode)
        if nxt is self._state:
            return False

        logs.debug(f"[Controller] synced -> {nxt.values}")
        self._state = nxt
        return True
