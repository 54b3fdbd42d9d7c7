from itertools import count

import pytest
from hypothesis import given, strategies as st

from iterkit.iter_index import InclusiveRange, get

data_st = st.lists(st.integers(), max_size=30)
pos_st = st.integers(min_value=0, max_value=35)


def _recording_source(pulled, n):
    for i in range(n):
        pulled.append(i)
        yield i


@given(data_st, pos_st, pos_st)
def test_half_open_range_matches_slicing(data, start, stop):
    assert list(get(data, slice(start, stop))) == data[start:stop]


@given(data_st, pos_st, pos_st)
def test_inclusive_range_matches_slicing(data, start, end):
    assert list(get(data, InclusiveRange(start, end))) == data[start : end + 1]


@given(data_st, pos_st)
def test_range_from(data, start):
    assert list(get(data, slice(start, None))) == data[start:]


@given(data_st, pos_st)
def test_range_to(data, stop):
    assert list(get(data, slice(None, stop))) == data[:stop]


@given(data_st, pos_st)
def test_range_to_inclusive(data, end):
    assert list(get(data, InclusiveRange(0, end))) == data[: end + 1]


@given(data_st)
def test_full_range(data):
    assert list(get(data, slice(None))) == data


def test_infinite_source():
    assert list(get(count(), slice(2, 5))) == list(range(2, 5))
    assert list(get(count(), InclusiveRange(2, 5))) == list(range(2, 6))


@given(data_st, pos_st)
def test_take_leaves_rest_of_source(data, stop):
    source = iter(data)
    taken = list(get(source, slice(None, stop)))
    assert taken + list(source) == data


def test_is_lazy():
    pulled = []
    it = get(_recording_source(pulled, 6), slice(1, 4))
    assert pulled == []
    assert list(it) == [1, 2, 3]
    assert pulled[:4] == [0, 1, 2, 3]


def test_negative_bounds_rejected():
    with pytest.raises(ValueError):
        get([1, 2], slice(-1, 2))
    with pytest.raises(ValueError):
        get([1, 2], slice(0, -1))
    with pytest.raises(ValueError):
        InclusiveRange(-1, 2)


def test_step_rejected():
    with pytest.raises(ValueError):
        get([1, 2, 3], slice(0, 3, 2))


def test_bad_index_type():
    with pytest.raises(TypeError):
        get([1, 2, 3], 1)
    with pytest.raises(TypeError):
        get([1, 2, 3], slice("a", 2))