import logging
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from contextlib import closing
from foldxf import config
from foldxf.compose import compose
from foldxf.reducer import NOTHING, arrayOf, is_reduced, reduce

logger = logging.getLogger(__name__)


def _transform(rf, val):
    """Runs one element through rf. Returns (outputs, halted)."""
    outputs = []
    result = rf.step(outputs, val)
    return outputs, is_reduced(result)


def _ordered(concurrency, rf, coll, limit):
    executor = ThreadPoolExecutor(max_workers=concurrency)
    # Futures in source order. The head is always the next position to write.
    pending = deque()
    position = 0
    items = iter(coll)
    exhausted = False
    logger.debug("pipeline started with %d workers, %d in flight", concurrency, limit)
    try:
        while True:
            while not exhausted and len(pending) < limit:
                try:
                    val = next(items)
                except StopIteration:
                    exhausted = True
                    break
                pending.append(executor.submit(_transform, rf, val))
            if not pending:
                break
            future = pending.popleft()
            try:
                outputs, halted = future.result()
            except Exception:
                logger.debug("pipeline fault at position %d", position)
                raise
            for out in outputs:
                yield out
            if halted:
                logger.debug("pipeline halted at position %d", position)
                break
            position += 1
        for out in rf.complete([]):
            yield out
    finally:
        if pending:
            logger.debug("pipeline cancelling %d queued elements", len(pending))
        for future in pending:
            future.cancel()
        # In flight elements are allowed to finish.
        executor.shutdown(wait=True)


def psequence(concurrency, xf, coll, buffer_size=None):
    """
    Lazily yields coll transformed by xf, using concurrency worker threads.

    Output order is source order, whichever worker finishes first. At most
    concurrency + buffer_size elements are pulled from coll ahead of the
    consumer. Only stateless transducers are accepted, each element is
    transformed on its own.

    A worker fault is raised, unchanged, once every earlier position has been
    yielded. Closing the generator stops pulling from coll, cancels queued
    elements and waits for the ones already running.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be at least 1, got %d" % concurrency)
    xf = compose(xf)
    if not xf.stateless:
        raise ValueError("%r is stateful and can't run in a pipeline" % (xf,))
    opts = config.options(buffer_size=buffer_size)
    if opts['buffer_size'] < 0:
        raise ValueError("buffer_size can't be negative, got %d" % opts['buffer_size'])
    rf = xf(arrayOf)
    return _ordered(concurrency, rf, coll, concurrency + opts['buffer_size'])


def pipeline(concurrency, xf, coll, sink, init=NOTHING, buffer_size=None):
    """
    Transforms coll with xf on concurrency workers, reducing the ordered
    results into sink. A halt from sink cancels the outstanding work.
    """
    with closing(psequence(concurrency, xf, coll, buffer_size)) as results:
        return reduce(sink, results, init)
