# datefields/engine/updater.py
from __future__ import annotations

from typing import Callable, Optional

from datefields.engine.resolver import RangeResolver
from datefields.fields.catalog import FIELDS, FieldIndex
from datefields.fields.state import EngineState, FieldState

Updater = Callable[[EngineState], EngineState]


def clamp(value: int, lo: Optional[int], hi: Optional[int]) -> int:
    """Clamp to hi first, then to lo; None means no constraint on that side."""
    if hi is not None:
        value = min(value, hi)
    if lo is not None:
        value = max(value, lo)
    return value


def update_field(state: EngineState, index: FieldIndex, proposed: int) -> EngineState:
    """
    Pure transition for one field.

    Returns `state` itself when value, min and max are all unchanged.
    """
    lo, hi = RangeResolver.resolve(state, index)

    value = clamp(proposed, lo, hi)
    value = clamp(value, *FIELDS[index].limits)

    current = state.fields[index]
    if value == current.value and lo == current.min and hi == current.max:
        return state

    return state.with_field(index, FieldState(value=value, min=lo, max=hi))


def updater(index: FieldIndex, proposed: int) -> Updater:
    """Deferred update_field, queued by the reconciler."""

    def apply(state: EngineState) -> EngineState:
        return update_field(state, index, proposed)

    return apply


def passthrough(index: FieldIndex) -> Updater:
    """Re-resolve a field using its own current value."""

    def apply(state: EngineState) -> EngineState:
        return update_field(state, index, state.value_of(index))

    return apply


def flow(*updaters: Updater) -> Updater:
    def run(state: EngineState) -> EngineState:
        for step in updaters:
            state = step(state)
        return state

    return run
