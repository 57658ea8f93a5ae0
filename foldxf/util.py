import tqdm


def identity(x):
    return x


def invert(v):
    return not v


def finvert(f):
    def inverted(*args, **kwargs):
        return invert(f(*args, **kwargs))
    inverted.__name__ = "inverted_" + getattr(f, "__name__", "fn")
    return inverted


def irange(start, increment):
    """Endless counting source: start, start + increment, ..."""
    while True:
        yield start
        start += increment


def consume(collection):
    for _ in collection:
        pass


def pbar(desc='', total=None, quiet=False):
    """
    Returns a source wrapper which reports progress through tqdm as elements
    are pulled. Pulls are lazy, so a halting reduction stops the bar too.
    """
    def _pbar(coll):
        with tqdm.tqdm(coll, desc=desc, total=total, disable=quiet, leave=False, delay=1) as bar:
            for val in bar:
                yield val
    _pbar.__name__ = "pbar_" + (desc or "source")
    return _pbar
