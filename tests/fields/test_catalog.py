#!filepath: tests/fields/test_catalog.py
from datetime import datetime, timezone

import pytest

from datefields.fields import FIELD_NAMES, FIELDS, EngineState, FieldIndex, FieldState, Mode, decompose


def test_significance_order_is_frozen():
    assert [i.name for i in FieldIndex] == ["YEAR", "MONTH", "DAY", "HOUR", "MINUTE", "SECOND"]
    assert FIELD_NAMES == ("year", "month", "day", "hour", "minute", "second")
    assert [spec.index for spec in FIELDS] == list(FieldIndex)


def test_default_ranges():
    defaults = {spec.name: (spec.default_min, spec.default_max) for spec in FIELDS}
    assert defaults == {
        "year": (None, None),
        "month": (0, 11),
        "day": (1, None),
        "hour": (0, 23),
        "minute": (0, 59),
        "second": (0, 59),
    }


def test_field_index_lookup():
    assert FieldIndex.of("Day") is FieldIndex.DAY
    assert FieldIndex.of(4) is FieldIndex.MINUTE
    assert FieldIndex.of(FieldIndex.HOUR) is FieldIndex.HOUR

    with pytest.raises(ValueError):
        FieldIndex.of("fortnight")
    with pytest.raises(ValueError):
        FieldIndex.of(6)


def test_extractors_are_mode_aware():
    ts = datetime(2020, 1, 1, 0, 30, 0, tzinfo=timezone.utc)
    assert decompose(ts, Mode.UTC) == (2020, 0, 1, 0, 30, 0)
    assert FIELDS[FieldIndex.MINUTE].extract(ts, True) == 30


def test_mode_from_string():
    assert Mode("utc") is Mode.UTC
    assert Mode.UTC.utc is True
    assert Mode.LOCAL.utc is False


def _state() -> EngineState:
    return EngineState(
        fields=tuple(FieldState(v) for v in (2020, 0, 1, 0, 0, 0)),
        composite=datetime(2020, 1, 1),
    )


def test_state_is_frozen():
    state = _state()
    with pytest.raises(AttributeError):
        state.mode = Mode.UTC


def test_state_requires_six_slots():
    with pytest.raises(ValueError):
        EngineState(fields=(FieldState(1),), composite=datetime(2020, 1, 1))


def test_with_field_shares_untouched_slots():
    state = _state()
    nxt = state.with_field(FieldIndex.DAY, FieldState(9, 1, 31))

    assert nxt is not state
    assert state.value_of(FieldIndex.DAY) == 1
    assert nxt.value_of(FieldIndex.DAY) == 9
    assert nxt.fields[FieldIndex.YEAR] is state.fields[FieldIndex.YEAR]
    assert nxt.composite is state.composite


def test_as_dict_uses_field_names():
    assert list(_state().as_dict()) == list(FIELD_NAMES)
