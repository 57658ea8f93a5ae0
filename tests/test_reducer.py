import pytest
from foldxf import \
    NOTHING,        \
    Reduced,        \
    Reducer,        \
    arrayOf,        \
    as_reducer,     \
    ensure_reduced, \
    is_reduced,     \
    joinedWith,     \
    reduce,         \
    reduced,        \
    reducer,        \
    sumOf,          \
    unreduced
from foldxf.util import irange
from .conftest import CountingSource, Recorder, halt_at


def test_accumulators():
    assert reduce(lambda acc, x: acc + [x], [4], [1, 2, 3]) == [1, 2, 3, 4]
    assert reduce(lambda acc, x: acc.add(x) or acc, [4, 1], set([1, 2, 3])) == set([1, 2, 3, 4])

def test_reduced_helpers():
    r = reduced(5)
    assert isinstance(r, Reduced)
    assert is_reduced(r)
    assert not is_reduced(5)
    assert unreduced(r) == 5
    assert unreduced(5) == 5
    assert ensure_reduced(r) is r
    assert unreduced(ensure_reduced(5)) == 5

def test_reduce_plain_function():
    assert reduce(lambda acc, val: acc + [val], [1, 2, 3], []) == [1, 2, 3]
    assert reduce(lambda acc, val: acc + val, range(10), 0) == 45

def test_reduce_plain_function_requires_seed():
    with pytest.raises(TypeError):
        reduce(lambda acc, val: acc + val, [1, 2, 3])

def test_reduce_none_is_a_seed():
    assert reduce(lambda acc, val: val if acc is None else acc, [1, 2], None) == 1
    assert repr(NOTHING) == "<absent>"

def test_stock_reducers():
    assert reduce(arrayOf, [1, 2, 3]) == [1, 2, 3]
    assert reduce(sumOf, [1, 2, 3]) == 6
    assert reduce(joinedWith(', '), [1, 2, 3]) == "1, 2, 3"
    assert reduce(joinedWith('.'), []) == ""

def test_joinedWith_empty_elements():
    assert reduce(joinedWith(','), ['', 'a']) == ",a"
    assert reduce(joinedWith(','), ['a', '', '']) == "a,,"
    assert reduce(joinedWith('-'), ['']) == ""
    assert reduce(joinedWith('-'), ['', '']) == "-"

def test_array_of_fresh_seed():
    first = reduce(arrayOf, [1])
    second = reduce(arrayOf, [2])
    assert first == [1]
    assert second == [2]

def test_reducer_init_and_complete():
    rf = reducer(lambda acc, val: acc + val, init=lambda: 100, complete=str)
    assert reduce(rf, [1, 2, 3]) == "106"
    assert reduce(rf, [1, 2, 3], 0) == "6"

def test_as_reducer():
    rf = reducer(lambda acc, val: acc)
    assert as_reducer(rf) is rf
    assert isinstance(as_reducer(lambda acc, val: acc), Reducer)
    with pytest.raises(TypeError):
        as_reducer(5)

def test_lifecycle_natural():
    rec = Recorder()
    assert reduce(rec, [1, 2]) == (1, 2)
    assert rec.calls == [('init',), ('step', 1), ('step', 2), ('complete',)]

def test_lifecycle_seeded():
    rec = Recorder()
    assert reduce(rec, [], [0]) == (0,)
    assert rec.calls == [('complete',)]

def test_early_termination_stops_pulling(counting):
    # 0 + 1 + 2 = 3, 3 + 3 = 6 >= 5
    assert reduce(halt_at(5), counting) == 6
    assert counting.pulled == 4

def test_early_termination_completes_once():
    calls = []
    def step(acc, val):
        return reduced(acc + val)
    def complete(acc):
        calls.append(acc)
        return acc
    assert reduce(reducer(step, complete=complete), irange(1, 1), 0) == 1
    assert calls == [1]

def test_faults_propagate():
    source = CountingSource([1, 2, 3])
    def step(acc, val):
        if val == 2:
            raise ValueError(val)
        return acc + val
    with pytest.raises(ValueError):
        reduce(step, source, 0)
    assert source.pulled == 2
