"""Index arithmetic shared by positional deque operations."""


def resolve_insert_index(index, size):
    """Clamp a signed insert position into ``[0, size - 1]``.

    Negative indices count from the tail. A negative index past the head
    lands on 0, a positive index at or past the tail lands on ``size - 1``,
    i.e. just before the current last element. An empty deque always
    inserts at 0.
    """
    if index < 0:
        if -index > size:
            return 0
        return size + index
    if index >= size:
        return max(size - 1, 0)
    return index


def normalize_index(index, size):
    """Map a signed lookup index to an absolute one, or raise IndexError."""
    if index >= size or index < -size:
        raise IndexError(f'deque index out of range, index: {index} size: {size}')
    return size + index if index < 0 else index


def resolve_window(start, stop, size):
    """Bounds of the half-open search window, normalized like slice bounds."""
    stop = size if stop is None else stop
    r = range(size)[start:stop]
    return r.start, max(r.stop, r.start)
