"""Capacity handling for pushes onto a bounded deque."""
from collections import namedtuple

# push directions, same convention as the ring buffer's ``dir`` argument
LEFT = -1
RIGHT = 1


class Eviction(namedtuple('Eviction', ['count', 'dir', 'accept'])):
    '''
    count:  number of elements to drop before the push
    dir:    end to drop them from
    accept: False when the incoming element itself must be discarded
    '''
    __slots__ = ()


_NOTHING = Eviction(0, RIGHT, True)


class EvictionPolicy(object):
    def __init__(self, maxlen=None):
        self._maxlen = maxlen

    @property
    def maxlen(self):
        return self._maxlen

    @staticmethod
    def opposite(dir):
        if dir not in (LEFT, RIGHT):
            raise ValueError(f'invalid push direction {dir}, expected: {LEFT}, {RIGHT}')
        return -dir

    def full(self, size):
        return self._maxlen is not None and size >= self._maxlen

    def plan(self, size, dir):
        """Decide what must leave the deque before pushing one element at ``dir``."""
        evict_dir = self.opposite(dir)
        maxlen = self._maxlen
        if maxlen is None or size < maxlen:
            return _NOTHING
        if maxlen == 0:
            return Eviction(0, evict_dir, False)
        # an over-bound deque (lazy bound at construction) is brought back under
        return Eviction(size - maxlen + 1, evict_dir, True)
