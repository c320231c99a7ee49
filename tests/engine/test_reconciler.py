#!filepath: tests/engine/test_reconciler.py
from datetime import datetime, timezone

import pytest

import datefields as df
from datefields.engine import compose
from datefields.fields import FieldIndex as F
from datefields.fields import decompose


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


# =============================
#   init
# =============================
def test_init_defaults_to_zero_timestamp():
    state = df.init(mode="utc")

    assert state.composite == utc(1970, 1, 1)
    assert state.values == (1970, 0, 1, 0, 0, 0)
    assert state.min_bound is None and state.max_bound is None


def test_init_local_mode_keeps_wall_clock():
    state = df.init(datetime(2018, 2, 10, 8, 15, 0))

    assert state.mode is df.Mode.LOCAL
    assert state.values == (2018, 1, 10, 8, 15, 0)
    assert state.composite == datetime(2018, 2, 10, 8, 15, 0)
    assert state.composite.tzinfo is None


def test_init_clamps_value_into_bounds(min_bound, max_bound):
    state = df.init(utc(1980, 1, 1), min_bound, max_bound, mode="utc")

    assert state.values == (1990, 8, 30, 18, 40, 40)
    assert state.composite == min_bound


def test_init_drops_sub_second_part():
    state = df.init(utc(2001, 1, 1, 0, 0, 0, 999_000), mode="utc")
    assert state.composite == utc(2001, 1, 1)


def test_init_accepts_iso_string_and_epoch():
    assert df.init("1993-07-20T12:30:30", mode="utc").values == (1993, 6, 20, 12, 30, 30)
    assert df.init(86400, mode="utc").values == (1970, 0, 2, 0, 0, 0)


# =============================
#   set_field
# =============================
def test_idempotent_edit_returns_same_state(bounded_state):
    for index in F:
        result = df.set_field(bounded_state, index, bounded_state.value_of(index))
        assert result.changed is False
        assert result.state is bounded_state


def test_result_unpacks_as_pair(bounded_state):
    state, changed = df.set_field(bounded_state, "year", 1993)
    assert state is bounded_state
    assert changed is False


def test_year_below_min_clamps_whole_cascade(bounded_state, min_bound):
    result = df.set_field(bounded_state, "year", 1987)

    assert result.changed is True
    assert result.state.values == (1990, 8, 30, 18, 40, 40)
    assert result.state.composite == min_bound


def test_year_above_max_clamps_whole_cascade(bounded_state, max_bound):
    result = df.set_field(bounded_state, "year", 1999)

    assert result.state.values == (1996, 4, 10, 6, 20, 20)
    assert result.state.composite == max_bound


def test_boundary_release_after_leaving_min_year(bounded_state, min_bound):
    pinned = df.set_field(bounded_state, "year", 1990).state
    assert pinned.field(F.MONTH).min == 8
    assert pinned.field(F.HOUR).min == 18

    released = df.set_field(pinned, "year", 1991).state

    assert released.field(F.MONTH).min == 0
    assert released.field(F.HOUR).min == 0
    # values survive, only ranges widen
    assert released.value_of(F.HOUR) == 18
    assert released.values == (1991, 8, 30, 18, 40, 40)


def test_day_follows_month_length(feb_2018):
    assert feb_2018.field(F.DAY).max == 28

    jan = df.set_field(feb_2018, "month", 0).state
    assert jan.value_of(F.DAY) == 10
    assert jan.field(F.DAY).max == 31

    jan_30 = df.set_field(jan, "day", 30).state
    assert jan_30.value_of(F.DAY) == 30

    feb = df.set_field(jan_30, "month", 1).state
    assert feb.value_of(F.DAY) == 28
    assert feb.composite == utc(2018, 2, 28, 8, 15, 0)


def test_edit_leaves_more_significant_fields_alone(feb_2018):
    nxt = df.set_field(feb_2018, F.MINUTE, 59).state

    assert nxt.field(F.YEAR) is feb_2018.field(F.YEAR)
    assert nxt.field(F.HOUR) is feb_2018.field(F.HOUR)
    assert nxt.composite == utc(2018, 2, 10, 8, 59, 0)


def test_out_of_range_edit_is_clamped_not_raised(feb_2018):
    result = df.set_field(feb_2018, "hour", 40)
    assert result.state.value_of(F.HOUR) == 23


def test_clamped_back_to_current_value_is_no_change(feb_2018):
    at_max = df.set_field(feb_2018, "day", 28).state

    result = df.set_field(at_max, "day", 31)

    assert result.changed is False
    assert result.state is at_max


@pytest.mark.parametrize("bad", [3.4, "foo", None, True, float("nan"), "1986"])
def test_set_field_rejects_non_integers(feb_2018, bad):
    with pytest.raises(df.InvalidFieldValue) as info:
        df.set_field(feb_2018, "year", bad)

    assert info.value.field == "year"
    assert info.value.value is bad


def test_error_message_names_field_and_value(feb_2018):
    with pytest.raises(TypeError, match=r"Expected int year\. Received 3\.4\."):
        df.set_field(feb_2018, "year", 3.4)


def test_integral_float_is_accepted(feb_2018):
    assert df.set_field(feb_2018, "year", 2001.0).state.value_of(F.YEAR) == 2001


def test_digit_strings_opt_in(feb_2018):
    result = df.set_field(feb_2018, "year", "1986", coerce_digits=True)
    assert result.state.value_of(F.YEAR) == 1986

    for bad in ["-5", " 1986", "19.5", ""]:
        with pytest.raises(df.InvalidFieldValue):
            df.set_field(feb_2018, "year", bad, coerce_digits=True)


def test_unknown_field_name(feb_2018):
    with pytest.raises(ValueError, match="Unknown field"):
        df.set_field(feb_2018, "week", 1)


# =============================
#   set_fields
# =============================
def test_set_fields_applies_in_significance_order(feb_2018):
    # month must land before day, otherwise day would clamp to 28
    result = df.set_fields(feb_2018, {"day": 31, "month": 0})

    assert result.changed is True
    assert result.state.values[:3] == (2018, 0, 31)


def test_set_fields_year_and_day_together():
    state = df.init(utc(2019, 2, 10), mode="utc")

    result = df.set_fields(state, {"year": 2020, "day": 29})

    assert result.state.values[:3] == (2020, 1, 29)
    assert result.state.composite == utc(2020, 2, 29)


def test_set_fields_leaves_earlier_fields_untouched(feb_2018):
    nxt = df.set_fields(feb_2018, {"hour": 3}).state

    for index in (F.YEAR, F.MONTH, F.DAY):
        assert nxt.field(index) is feb_2018.field(index)
    assert nxt.value_of(F.HOUR) == 3


def test_set_fields_refreshes_later_fields(bounded_state):
    result = df.set_fields(bounded_state, {"year": 1990, "month": 8})

    assert result.state.values == (1990, 8, 30, 18, 40, 40)
    assert result.state.field(F.SECOND).min == 40


def test_set_fields_empty_is_no_change(feb_2018):
    result = df.set_fields(feb_2018, {})
    assert result.changed is False
    assert result.state is feb_2018


def test_set_fields_is_atomic(feb_2018):
    before = feb_2018.fields

    with pytest.raises(df.InvalidFieldValue) as info:
        df.set_fields(feb_2018, {"month": 3, "day": 4, "year": "foo"})

    assert info.value.field == "year"
    assert feb_2018.fields is before


def test_set_fields_accepts_field_index_keys(feb_2018):
    result = df.set_fields(feb_2018, {F.SECOND: 30})
    assert result.state.value_of(F.SECOND) == 30


# =============================
#   composite
# =============================
def test_composite_tracks_fields(bounded_state):
    state = df.set_fields(bounded_state, {"month": 0, "hour": 23}).state
    assert state.composite == compose(state.fields, state.mode)
    assert df.to_composite(state) is state.composite


def test_round_trip_through_catalog(bounded_state):
    for state in (
        bounded_state,
        df.set_field(bounded_state, "year", 1987).state,
        df.init(datetime(2018, 12, 31, 23, 59, 59)),
    ):
        composite = compose(state.fields, state.mode)
        again = decompose(composite, state.mode)
        rebuilt = df.init(composite, mode=state.mode)

        assert again == state.values
        assert df.datetime_utils.are_equal(rebuilt.composite, composite)


def test_field_range_reads_cache(bounded_state):
    assert df.field_range(bounded_state, "year") == (1990, 1996)
    assert df.field_range(bounded_state, F.MONTH) == (0, 11)
