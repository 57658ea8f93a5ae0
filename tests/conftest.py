import pytest
from foldxf import Reducer, reducer, reduced
from foldxf.util import irange


class CountingSource:
    """Single pass source which records how many elements were pulled."""

    def __init__(self, coll):
        self.pulled = 0
        self._items = iter(coll)

    def __iter__(self):
        return self

    def __next__(self):
        val = next(self._items)
        self.pulled += 1
        return val


@pytest.fixture
def counting():
    return CountingSource(irange(0, 1))


@pytest.fixture
def one2ten():
    return list(range(1, 10 + 1))


def halt_at(limit):
    """Sum reducer which halts once the total reaches limit."""
    def step(acc, val):
        acc = acc + val
        if acc >= limit:
            return reduced(acc)
        return acc
    return reducer(step, init=int)


class Recorder(Reducer):
    """Reducer which logs every init, step and complete call."""

    def __init__(self):
        self.calls = []

    def init(self):
        self.calls.append(('init',))
        return []

    def step(self, acc, val):
        self.calls.append(('step', val))
        acc.append(val)
        return acc

    def complete(self, acc):
        self.calls.append(('complete',))
        return tuple(acc)
