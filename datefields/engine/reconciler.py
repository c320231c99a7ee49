# datefields/engine/reconciler.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from datefields import logs
from datefields.engine.compositor import compose
from datefields.engine.updater import Updater, flow, passthrough, updater
from datefields.fields.catalog import FieldIndex, Mode, decompose
from datefields.fields.state import EngineState, FieldState
from datefields.utils.datetime_utils import DateTimeUtils, TimestampLike
from datefields.utils.errors import InvalidFieldValue

FieldKey = Union[FieldIndex, str, int]
ModeLike = Union[Mode, str]


@dataclass(frozen=True)
class UpdateResult:
    """Settled state plus whether the batch changed anything."""

    state: EngineState
    changed: bool

    def __iter__(self) -> Iterator[Any]:
        yield self.state
        yield self.changed


# ================================================================
# input validation
# ================================================================
def coerce_int(field: str, value: Any, coerce_digits: bool = False) -> int:
    """
    Accepts int (not bool) and integral floats.
    Digit-only strings ("1986") only when coerce_digits is on.
    """
    if isinstance(value, bool):
        raise InvalidFieldValue(field, value)

    if isinstance(value, int):
        return value

    if isinstance(value, float) and value.is_integer():
        return int(value)

    if coerce_digits and isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)

    raise InvalidFieldValue(field, value)


# ================================================================
# lifecycle
# ================================================================
def _settle_all() -> Updater:
    return flow(*(passthrough(index) for index in FieldIndex))


def init(
    composite: Optional[TimestampLike] = None,
    min_bound: Optional[TimestampLike] = None,
    max_bound: Optional[TimestampLike] = None,
    mode: ModeLike = Mode.LOCAL,
) -> EngineState:
    """
    Build the first settled state.

    composite defaults to the canonical zero timestamp (epoch 0).
    """
    mode = Mode(mode)
    utc = mode.utc

    if composite is None:
        value = DateTimeUtils.zero(utc)
    else:
        value = DateTimeUtils.parse(composite, utc)

    seed = EngineState(
        fields=tuple(FieldState(v) for v in decompose(value, mode)),
        composite=value,
        mode=mode,
        min_bound=DateTimeUtils.parse_optional(min_bound, utc),
        max_bound=DateTimeUtils.parse_optional(max_bound, utc),
    )
    settled = _settle_all()(seed)

    state = replace(settled, composite=compose(settled.fields, mode))
    logs.debug(f"[Engine] init mode={mode.value} values={state.values}")
    return state


def to_composite(state: EngineState) -> datetime:
    return state.composite


def field_range(state: EngineState, field: FieldKey):
    slot = state.field(FieldIndex.of(field))
    return slot.min, slot.max


# ================================================================
# batch commit
# ================================================================
def _commit(previous: EngineState, nxt: EngineState) -> UpdateResult:
    """
    Recompose once per batch.

    The previous composite object is kept when the new one is equal at
    second precision.
    """
    if nxt is previous:
        return UpdateResult(previous, False)

    composite = compose(nxt.fields, nxt.mode)
    if not DateTimeUtils.are_equal(composite, previous.composite):
        nxt = replace(nxt, composite=composite)

    logs.debug(f"[Engine] {previous.values} -> {nxt.values}")
    return UpdateResult(nxt, True)


def set_field(
    state: EngineState,
    field: FieldKey,
    value: Any,
    *,
    coerce_digits: bool = False,
) -> UpdateResult:
    """
    Edit one field and cascade over every less significant field.

    Less significant fields keep their value unless their re-resolved
    range no longer contains it.
    """
    index = FieldIndex.of(field)
    try:
        proposed = coerce_int(index.field_name, value, coerce_digits)
    except InvalidFieldValue as e:
        logs.warning(f"[Engine] rejected: {e}")
        raise

    cascade = [passthrough(i) for i in FieldIndex if i > index]
    nxt = flow(updater(index, proposed), *cascade)(state)
    return _commit(state, nxt)


def set_fields(
    state: EngineState,
    values: Mapping[FieldKey, Any],
    *,
    coerce_digits: bool = False,
) -> UpdateResult:
    """
    Edit any subset of fields as one transition.

    Walks fields in significance order:
      - explicit value      → validated, queued
      - after first explicit → queued as pass-through (bounds refresh)
      - before any explicit  → untouched
    Every value is validated before the first update runs.
    """
    explicit: Dict[FieldIndex, Any] = {}
    for key, raw in values.items():
        explicit[FieldIndex.of(key)] = raw

    queue: List[Updater] = []
    started = False
    for index in FieldIndex:
        if index in explicit:
            try:
                proposed = coerce_int(index.field_name, explicit[index], coerce_digits)
            except InvalidFieldValue as e:
                logs.warning(f"[Engine] rejected batch {dict(values)}: {e}")
                raise
            queue.append(updater(index, proposed))
            started = True
        elif started:
            queue.append(passthrough(index))

    return _commit(state, flow(*queue)(state))


# ================================================================
# external refresh (value / bounds / mode supplied by the owner)
# ================================================================
def reconcile_external(
    state: EngineState,
    composite: Optional[TimestampLike] = None,
    min_bound: Optional[TimestampLike] = None,
    max_bound: Optional[TimestampLike] = None,
    mode: Optional[ModeLike] = None,
) -> EngineState:
    """
    Fold externally supplied inputs into the state.

    Returns `state` itself when none of them differ, so a no-op refresh
    never overwrites a pending local edit. Timestamps compare at second
    precision and a missing value compares equal; mode None keeps the
    current mode.
    """
    new_mode = state.mode if mode is None else Mode(mode)
    utc = new_mode.utc

    value = DateTimeUtils.parse_optional(composite, utc)
    lo = DateTimeUtils.parse_optional(min_bound, utc)
    hi = DateTimeUtils.parse_optional(max_bound, utc)

    new_value = not DateTimeUtils.are_equal(state.composite, value)
    new_min = not DateTimeUtils.are_equal(state.min_bound, lo)
    new_max = not DateTimeUtils.are_equal(state.max_bound, hi)
    new_mode_flag = new_mode is not state.mode

    if not (new_value or new_min or new_max or new_mode_flag):
        return state

    kept_min, kept_max, source = state.min_bound, state.max_bound, state.composite
    if new_mode_flag:
        # stored timestamps → same instant in the new mode
        kept_min = DateTimeUtils.to_mode(kept_min, utc) if kept_min is not None else None
        kept_max = DateTimeUtils.to_mode(kept_max, utc) if kept_max is not None else None
        source = DateTimeUtils.to_mode(source, utc)

    nxt = replace(
        state,
        mode=new_mode,
        min_bound=lo if new_min else kept_min,
        max_bound=hi if new_max else kept_max,
    )

    if new_value:
        source = value
    nxt = flow(*(updater(i, v) for i, v in zip(FieldIndex, decompose(source, new_mode))))(nxt)

    composed = compose(nxt.fields, new_mode)
    if new_mode_flag or not DateTimeUtils.are_equal(composed, state.composite):
        nxt = replace(nxt, composite=composed)

    logs.debug(
        f"[Engine] external refresh value={new_value} min={new_min} "
        f"max={new_max} mode={new_mode_flag} -> {nxt.values}"
    )
    return nxt
