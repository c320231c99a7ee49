# datefields/engine/alignment.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from datefields.fields.catalog import FIELDS
from datefields.fields.state import EngineState


def at_bound(
    state: EngineState,
    bound: Optional[datetime],
    index: int,
    *,
    upper: bool,
) -> bool:
    """
    Whether fields 0..index of `state` are pinned to `bound`.

    Contract:
      - bound is None            → False
      - index < 0                → True (vacuous)
      - min bound (upper=False)  → bound field >= state field at every level
      - max bound (upper=True)   → bound field <= state field at every level

    On a settled state the ancestors are already clamped, so this is
    value equality against the bound's own fields.
    """
    if bound is None:
        return False

    utc = state.mode.utc
    for i in range(index, -1, -1):
        pinned = FIELDS[i].extract(bound, utc)
        value = state.fields[i].value
        if upper and not pinned <= value:
            return False
        if not upper and not pinned >= value:
            return False

    return True


def at_min(state: EngineState, index: int) -> bool:
    return at_bound(state, state.min_bound, index, upper=False)


def at_max(state: EngineState, index: int) -> bool:
    return at_bound(state, state.max_bound, index, upper=True)
