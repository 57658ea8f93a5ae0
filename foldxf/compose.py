from foldxf.reducer import Reducer, as_reducer


class Wrapping(Reducer):
    """
    Base of every reducer a transducer builds.
    init and complete are forwarded to the wrapped reducer, step is
    forwarded unchanged until a subclass intercepts it.
    """

    def __init__(self, rf):
        self.rf = as_reducer(rf)

    def init(self):
        return self.rf.init()

    def step(self, acc, val):
        return self.rf.step(acc, val)

    def complete(self, acc):
        return self.rf.complete(acc)


class Transducer:
    """
    Transforms a downstream reducer into an upstream one: xf(rf) -> Reducer.
    Every call builds a fresh reducer_cls(*params, rf), so private state
    owned by the reducer lives for exactly one run.
    stateless marks stages with no private cell, deterministic per element.
    """

    def __init__(self, reducer_cls, *params, name=None, stateless=False):
        self.reducer_cls = reducer_cls
        self.params = params
        self.name = name or reducer_cls.__name__
        self.stateless = stateless

    def __call__(self, rf):
        return self.reducer_cls(*(self.params + (as_reducer(rf),)))

    def __repr__(self):
        args = ", ".join(getattr(p, "__name__", repr(p)) for p in self.params)
        return "%s(%s)" % (self.name, args) if self.params else self.name


class Lifted(Transducer):
    """A plain rf -> rf callable treated as a transducer."""

    def __init__(self, fn, stateless=False):
        self.fn = fn
        self.name = getattr(fn, "__name__", repr(fn))
        self.params = ()
        self.stateless = stateless

    def __call__(self, rf):
        return as_reducer(self.fn(as_reducer(rf)))

    def __eq__(self, other):
        return isinstance(other, Lifted) and self.fn is other.fn

    def __hash__(self):
        return hash(self.fn)


def lift(fn, stateless=False):
    if isinstance(fn, Transducer):
        return fn
    if not callable(fn):
        raise TypeError("Can't use %r as a transducer" % (fn,))
    return Lifted(fn, stateless)


class Composition(Transducer):
    """
    t1, t2, ..., tn applied as t1(t2(...tn(rf))).
    Elements flow through t1 first and tn last.
    """

    def __init__(self, xforms):
        self.xforms = tuple(xforms)
        self.name = "compose"
        self.params = self.xforms
        self.stateless = all(xf.stateless for xf in self.xforms)

    def __call__(self, rf):
        rf = as_reducer(rf)
        for xf in reversed(self.xforms):
            rf = xf(rf)
        return rf

    def __eq__(self, other):
        return isinstance(other, Composition) and self.xforms == other.xforms

    def __hash__(self):
        return hash(self.xforms)

    def __len__(self):
        return len(self.xforms)


def _flatten(xforms):
    for xf in xforms:
        if isinstance(xf, Composition):
            yield from xf.xforms
        else:
            yield lift(xf)


def compose(*xforms):
    """
    Composes transducers left to right in element order.
    compose(a, b)(rf) == a(b(rf)). Nested compositions are flattened, so the
    grouping of an incrementally assembled pipeline never matters.
    """
    flat = tuple(_flatten(xforms))
    if len(flat) == 1:
        return flat[0]
    return Composition(flat)
