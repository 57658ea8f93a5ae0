from collections import deque
from foldxf.compose import compose
from foldxf.reducer import NOTHING, arrayOf, as_reducer, is_reduced, reduce


def transduce(xf, rf, coll, init=NOTHING):
    """
    xf is a transducer, (rf -> rf)
    rf is the reducer results are accumulated with
    coll is the source, [a]
    init is the seed, rf.init() when absent.
    The transformed reducer completes through its wrapping layers, which
    complete rf itself exactly once.
    """
    rf = as_reducer(rf)
    if init is NOTHING:
        init = rf.init()
    return reduce(compose(xf)(rf), coll, init)


def into(to, xf, coll=NOTHING):
    """
    Appends the elements of coll, transformed by xf, to a copy of to.
    into(to, coll) and into(to, None, coll) append coll untransformed.
    """
    if coll is NOTHING:
        xf, coll = None, xf
    if xf is None:
        xf = compose()
    return transduce(xf, arrayOf, coll, list(to))


def sequence(xf, coll):
    """
    Lazily yields coll transformed by xf.
    Elements are pulled from coll only when the buffered output runs dry, and
    never after a halt. The generator is single use. For a view which can be
    consumed again, see eduction.
    """
    rf = compose(xf)(arrayOf)
    buffer = deque()
    for val in coll:
        result = rf.step(buffer, val)
        while buffer:
            yield buffer.popleft()
        if is_reduced(result):
            break
    rf.complete(buffer)
    while buffer:
        yield buffer.popleft()
