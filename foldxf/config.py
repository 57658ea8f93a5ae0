from delnone import delnone

# Results allowed in flight beyond one per worker.
BUFFER_SIZE = 16

# Whether windowed emits a short trailing window on completion.
WINDOW_FLUSH = False


def defaults():
    return dict(buffer_size=BUFFER_SIZE,
                flush=WINDOW_FLUSH)


def options(**overrides):
    """
    Returns the library defaults, overlaid with every override which is not
    None. Keyword arguments left unset by a caller fall back to the default.
    """
    opts = defaults()
    opts.update(delnone(overrides))
    return opts
