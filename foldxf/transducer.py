from collections import deque
from typing import Callable, TypeVar
from func_prototypes import typed
from foldxf import config
from foldxf.compose import Wrapping, Transducer, compose
from foldxf.reducer import Reduced, ensure_reduced, is_reduced, unreduced
from foldxf.util import finvert

A = TypeVar("A")
B = TypeVar("B")


class Mapping(Wrapping):

    def __init__(self, f: Callable[[A], B], rf):
        super().__init__(rf)
        self.f = f

    def step(self, acc, val):
        return self.rf.step(acc, self.f(val))


def map(f: Callable[[A], B]) -> Transducer:
    """map(f) feeds f(val) downstream in place of val."""
    return Transducer(Mapping, f, name="map", stateless=True)


class Filtering(Wrapping):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, acc, val):
        if self.pred(val):
            return self.rf.step(acc, val)
        return acc


def filter(pred: Callable[[A], bool]) -> Transducer:
    """
    pred is (a -> Bool)
    Values failing pred never reach the downstream reducer.
    """
    return Transducer(Filtering, pred, name="filter", stateless=True)


def remove(pred: Callable[[A], bool]) -> Transducer:
    return Transducer(Filtering, finvert(pred), name="remove", stateless=True)


def keep(f: Callable[[A], B]) -> Transducer:
    """Like map, but results which are None are dropped."""
    return compose(map(f), filter(lambda x: x is not None))


class MappingIndexed(Wrapping):

    def __init__(self, f, rf):
        super().__init__(rf)
        self.f = f
        self.index = 0

    def step(self, acc, val):
        index = self.index
        self.index += 1
        return self.rf.step(acc, self.f(index, val))


def mapIndexed(f: Callable[[int, A], B]) -> Transducer:
    """
    mapIndexed(f) feeds f(index, val) downstream, index counting from 0.
    The counter belongs to one run. Each application of the transducer starts
    over, so instantiate per run rather than sharing a built reducer.
    """
    return Transducer(MappingIndexed, f, name="mapIndexed")


class Windowing(Wrapping):

    def __init__(self, n, stride, flush, rf):
        super().__init__(rf)
        self.stride = stride
        self.flush = flush
        self.buffer = deque(maxlen=n)
        self.halted = False
        self.skip = 0

    def step(self, acc, val):
        if self.skip > 0:
            self.skip -= 1
            return acc
        buffer = self.buffer
        buffer.append(val)
        if len(buffer) < buffer.maxlen:
            return acc
        result = self.rf.step(acc, list(buffer))
        if self.stride >= buffer.maxlen:
            # Elements between windows are dropped unseen.
            buffer.clear()
            self.skip = self.stride - buffer.maxlen
        else:
            for _ in range(self.stride):
                buffer.popleft()
        if is_reduced(result):
            self.halted = True
        return result

    def complete(self, acc):
        # Partial windows are only emitted when the downstream has not halted.
        if self.flush and self.buffer and not self.halted:
            acc = unreduced(self.rf.step(acc, list(self.buffer)))
        self.buffer.clear()
        return self.rf.complete(acc)


def windowed(n: int, step: int = 1, flush=None) -> Transducer:
    """
    Sliding windows of n elements, advancing step elements at a time.
    Each window is a fresh list, later slides never alter it.
    A step larger than n skips the elements between windows.
    A trailing window shorter than n is discarded, unless flush is set.
    flush defaults to config.WINDOW_FLUSH.
    """
    if not isinstance(n, int) or not isinstance(step, int):
        raise TypeError("windowed sizes must be integers, got %r, %r" % (n, step))
    if n < 1:
        raise ValueError("window size must be positive, got %d" % n)
    if step < 1:
        raise ValueError("window step must be positive, got %d" % step)
    flush = config.options(flush=flush)['flush']
    return Transducer(Windowing, n, step, flush, name="windowed")


@typed(int)
def partitionAll(n):
    """Consecutive chunks of n elements. The last chunk may be short."""
    return windowed(n, n, flush=True)


class Concatenating(Wrapping):

    def step(self, acc, coll):
        for val in coll:
            acc = self.rf.step(acc, val)
            if is_reduced(acc):
                # Stop inside the nested source, leave the rest unread.
                return acc
        return acc


cat = Transducer(Concatenating, name="cat", stateless=True)
cat.__doc__ = \
"""
Flattens one level. Each element is a source whose elements are fed downstream
one at a time.
"""


def mapcat(f: Callable[[A], object]) -> Transducer:
    return compose(map(f), cat)


class Taking(Wrapping):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.remaining = n

    def step(self, acc, val):
        if self.remaining <= 0:
            return Reduced(acc)
        self.remaining -= 1
        acc = self.rf.step(acc, val)
        if self.remaining <= 0:
            return ensure_reduced(acc)
        return acc


@typed(int)
def take(n):
    """Passes the first n elements, then halts without pulling another."""
    return Transducer(Taking, n, name="take")


class TakingWhile(Wrapping):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, acc, val):
        if self.pred(val):
            return self.rf.step(acc, val)
        return Reduced(acc)


def takeWhile(pred: Callable[[A], bool]) -> Transducer:
    return Transducer(TakingWhile, pred, name="takeWhile", stateless=True)


class Dropping(Wrapping):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.remaining = n

    def step(self, acc, val):
        if self.remaining > 0:
            self.remaining -= 1
            return acc
        return self.rf.step(acc, val)


@typed(int)
def drop(n):
    return Transducer(Dropping, n, name="drop")


class DroppingWhile(Wrapping):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred
        self.dropping = True

    def step(self, acc, val):
        if self.dropping and self.pred(val):
            return acc
        self.dropping = False
        return self.rf.step(acc, val)


def dropWhile(pred: Callable[[A], bool]) -> Transducer:
    return Transducer(DroppingWhile, pred, name="dropWhile")


class Distinct(Wrapping):

    def __init__(self, rf):
        super().__init__(rf)
        self.seen = set()

    def step(self, acc, val):
        if val in self.seen:
            return acc
        self.seen.add(val)
        return self.rf.step(acc, val)


distinct = Transducer(Distinct, name="distinct")
