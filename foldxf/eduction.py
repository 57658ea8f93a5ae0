from func_prototypes import returned
from foldxf.compose import compose
from foldxf.reducer import Reducible, reduce
from foldxf.transduce import sequence


class Eduction(Reducible):
    """
    A transducer paired with a source, doing no work until consumed.

    Iterating runs sequence(xf, coll), reducing runs xf over coll fused with
    the consumer's reducer. Either way every consumption is an independent
    run with fresh transducer state, and nothing is cached.

    Replay is only as good as the source. A list or range gives the same
    elements on every consumption. A single pass source (a generator, a
    channel) is drained by the first consumption, later ones see nothing.
    Consuming the same Eduction from two threads over a single pass source
    races on that source, the caller must not do that.
    """

    def __init__(self, xf, coll):
        self.xf = compose(xf)
        self.coll = coll

    def __iter__(self):
        return sequence(self.xf, self.coll)

    def reduce(self, rf, init):
        return reduce(self.xf(rf), self.coll, init)

    def __repr__(self):
        return "Eduction(%r, %r)" % (self.xf, self.coll)


@returned(Eduction)
def eduction(xf, coll):
    return Eduction(xf, coll)
