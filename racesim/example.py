"""A trivial helper."""

import operator


def do_something(x: int) -> int:
    """Return ``x`` as an integer; raise TypeError if it is not integral."""
    return operator.index(x)