# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

def deflatten (iterable, size = 2):
    """Deflatten a flat iterable into an iterable of tuples.

    Args:
        iterable (Iterable):    The flat container to iterate over.
        size (Optional[int]):   The size of each tuple. Defaults to 2.

    Yields:
        tuple:                  A tuple of elements from iterable. Any
                                incomplete final group is skipped.

    Examples:
        Rationals are stored as flat runs of numerators and
        denominators, so the default is pairs:

        >>> list(deflatten([1, 2, 3, 4, 5]))
        [(1, 2), (3, 4)]
        >>> list(deflatten(range(6), 3))
        [(0, 1, 2), (3, 4, 5)]

    """

    # We want the actual iterator, plus something to mark its end.
    obj     = iter(iterable)
    done    = object()

    while True:
        group = tuple(next(obj, done) for i in range(size))

        if any(x is done for x in group):
            # Either the iterable is done or it ran out partway
            # through this group.
            return

        yield group
