from typing import TypeVar, Callable, Generic, Iterable

A = TypeVar("A")
T = TypeVar("T")

StepFn = Callable[[A, T], A]


class _Absent:
    """Marker for a missing seed. None is a legitimate accumulator."""

    def __repr__(self):
        return "<absent>"


NOTHING = _Absent()


class Reduced(Generic[A]):
    """
    Early termination sentinel.
    A step which returns Reduced(acc) asks the driver to stop pulling elements.
    acc is the final accumulator, it still goes through complete.
    """

    __slots__ = ("value",)

    def __init__(self, value: A):
        self.value = value

    def __repr__(self):
        return "Reduced(%r)" % (self.value,)


def reduced(value):
    return Reduced(value)


def is_reduced(value):
    return isinstance(value, Reduced)


def ensure_reduced(value):
    return value if is_reduced(value) else Reduced(value)


def unreduced(value):
    return value.value if is_reduced(value) else value


class Reducer(Generic[A, T]):
    """
    A reducing function: init, step and complete.
    init() -> A seeds the accumulator when the caller supplied none.
    step(A, T) -> A | Reduced[A] folds one element in.
    complete(A) -> A finalizes the accumulator, exactly once, last.
    """

    def init(self) -> A:
        raise TypeError("%r has no init, a seed is required" % (self,))

    def step(self, acc: A, val: T):
        raise NotImplementedError()

    def complete(self, acc: A) -> A:
        return acc


class FnReducer(Reducer[A, T]):

    def __init__(self, step: StepFn, init=None, complete=None):
        self._step = step
        self._init = init
        self._complete = complete

    def init(self):
        if self._init is None:
            return super().init()
        return self._init()

    def step(self, acc, val):
        return self._step(acc, val)

    def complete(self, acc):
        if self._complete is None:
            return acc
        return self._complete(acc)

    def __repr__(self):
        return "reducer(%s)" % getattr(self._step, "__name__", repr(self._step))


def reducer(step: StepFn, init=None, complete=None) -> Reducer:
    return FnReducer(step, init, complete)


def as_reducer(rf) -> Reducer:
    """Lifts a plain (acc, val) -> acc function. Reducers pass through."""
    if isinstance(rf, Reducer):
        return rf
    if not callable(rf):
        raise TypeError("Can't reduce with %r" % (rf,))
    return FnReducer(rf)


class Reducible:
    """
    A source which knows how to reduce itself.
    reduce(rf, init) must honor the reduce contract, including calling
    rf.complete exactly once.
    """

    def reduce(self, rf: Reducer, init):
        raise NotImplementedError()


def _append(acc, val):
    acc.append(val)
    return acc


arrayOf = FnReducer(_append, init=list)
arrayOf.__doc__ = \
"""
Array accumulator which appends in place instead of reallocating on every step.
"""

sumOf = FnReducer(lambda acc, val: acc + val, init=int)
sumOf.__doc__ = """Reducer which computes a sum"""


def joinedWith(separator):
    """
    Joins str(val) of every element with separator.
    Pieces are collected in a list and joined once, on completion.
    """
    def joint(acc, val):
        acc.append("%s" % (val,))
        return acc
    return FnReducer(joint, init=list, complete=separator.join)


def reduce(rf, coll: Iterable[T], init=NOTHING):
    """
    Drives rf over coll. Think foldl from Haskell, with an exit.
    rf is a Reducer, or a plain (acc, val) -> acc function.
    init is the seed. When absent, rf.init() supplies it.
    Stops pulling from coll as soon as a step returns Reduced.
    """
    rf = as_reducer(rf)
    acc = rf.init() if init is NOTHING else init
    if isinstance(coll, Reducible):
        return coll.reduce(rf, acc)
    for val in coll:
        acc = rf.step(acc, val)
        if is_reduced(acc):
            acc = acc.value
            break
    return rf.complete(acc)
