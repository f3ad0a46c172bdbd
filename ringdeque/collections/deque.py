import logging
from ringdeque.core.error import *
from ringdeque.core.assertion import assert_type, assert_index, assert_maxlen
from ringdeque.core.host import ObjectModel, PYTHON
from . import compare
from .eviction import EvictionPolicy, LEFT, RIGHT
from .index import resolve_insert_index, normalize_index, resolve_window
from .reprguard import ReprGuard, PLACEHOLDER

logger = logging.getLogger(__name__)

_MIN_CAPACITY = 8


class BoundedDeque(object):
    '''
    Double-ended queue over a growable ring buffer.

    _M:     slot storage, len(_M) is the ring capacity (not the bound)
    _head:  slot of the first element
    _size:  number of live elements
    _state: bumped on every mutation, checked by live iterators
    '''

    __hash__ = None

    def __init__(self, iterable=(), maxlen=None, *, model=None):
        self._policy = EvictionPolicy(assert_maxlen(maxlen))
        assert_type(model, ObjectModel, null=True, name='model')
        self._model = PYTHON if model is None else model
        self._M = [None] * _MIN_CAPACITY
        self._head = 0
        self._size = 0
        self._state = 0

        # the bound is applied lazily, by the pushes that follow
        for value in iterable:
            self._push(value, RIGHT)

        if self.maxlen is not None and self._size > self.maxlen:
            logger.debug(
                'deque built over its bound, size: %d maxlen: %d', self._size, self.maxlen
            )

    @property
    def maxlen(self):
        return self._policy.maxlen

    @property
    def model(self):
        return self._model

    # ring primitives

    def _slot(self, index):
        return (self._head + index) % len(self._M)

    def _grow(self):
        M, h, cap = self._M, self._head, len(self._M)
        self._M = M[h:] + M[:h] + [None] * cap
        self._head = 0

    def _push(self, value, dir):
        if self._size == len(self._M):
            self._grow()
        M = self._M
        if dir < 0:
            self._head = (self._head - 1) % len(M)
            M[self._head] = value
        else:
            M[self._slot(self._size)] = value
        self._size += 1
        self._state += 1

    def _pop(self, dir):
        if self._size == 0:
            raise EmptyContainerError()
        M = self._M
        if dir < 0:
            slot = self._head
            self._head = (self._head + 1) % len(M)
        else:
            slot = self._slot(self._size - 1)
        value, M[slot] = M[slot], None
        self._size -= 1
        self._state += 1
        return value

    def _append(self, value, dir):
        plan = self._policy.plan(self._size, dir)
        if not plan.accept:
            return
        if plan.count > 1:
            logger.debug('deque over its bound, evicting %d elements', plan.count)
        for _ in range(plan.count):
            self._pop(plan.dir)
        self._push(value, dir)

    def _values(self):
        M, h, cap = self._M, self._head, len(self._M)
        return [M[(h + i) % cap] for i in range(self._size)]

    def _reset(self, values):
        values = list(values)
        cap = _MIN_CAPACITY
        while cap < len(values):
            cap *= 2
        self._M = values + [None] * (cap - len(values))
        self._head = 0
        self._size = len(values)
        self._state += 1

    def _iterate(self, indexes):
        state = self._state
        for i in indexes:
            if self._state != state:
                raise MutatedDuringIterationError()
            if i >= self._size:
                return
            yield self._M[self._slot(i)]

    # container protocol

    def __len__(self):
        return self._size

    def __iter__(self):
        return self._iterate(range(self._size))

    def __reversed__(self):
        return self._iterate(range(self._size - 1, -1, -1))

    def __contains__(self, value):
        same = self._model.same
        for x in self._iterate(range(self._size)):
            if same(x, value):
                return True
        return False

    def __getitem__(self, index):
        index = normalize_index(assert_index(index), self._size)
        return self._M[self._slot(index)]

    def __setitem__(self, index, value):
        index = normalize_index(assert_index(index), self._size)
        self._M[self._slot(index)] = value

    def __delitem__(self, index):
        self._delete(normalize_index(assert_index(index), self._size))

    def __copy__(self):
        o = type(self)(maxlen=self.maxlen, model=self._model)
        o._reset(self._values())
        return o

    def __add__(self, other):
        o = self.copy()
        o.extend(other)
        return o

    def __iadd__(self, other):
        self._extend(other, RIGHT)
        return self

    def __mul__(self, size):
        o = self.copy()
        o *= size
        return o

    def __rmul__(self, size):
        return self.__mul__(size)

    def __imul__(self, size):
        size = assert_index(size, name='size')
        values = self._values()
        if size <= 0:
            self._clear()
            return self
        for _ in range(size - 1):
            self._extend(values, RIGHT)
        return self

    def __repr__(self):
        with ReprGuard(self) as guard:
            if not guard.entered:
                return PLACEHOLDER
            elements = ', '.join([self._model.repr(x) for x in self._values()])
            bound = '' if self.maxlen is None else f', maxlen={self.maxlen}'
            return f'{type(self).__name__}([{elements}]{bound})'

    # comparisons

    def _compare(self, other, op, identical):
        if self is other:
            return identical
        if not isinstance(other, BoundedDeque):
            return NotImplemented
        # snapshots, so a hook that mutates either deque cannot shift the walk
        return op(self._values(), other._values(), self._model)

    def __eq__(self, other): return self._compare(other, compare.eq, True)
    def __lt__(self, other): return self._compare(other, compare.lt, False)
    def __le__(self, other): return self._compare(other, compare.le, True)
    def __gt__(self, other): return self._compare(other, compare.gt, False)
    def __ge__(self, other): return self._compare(other, compare.ge, True)

    # deque operations

    def append(self, value):
        self._append(value, RIGHT)

    def appendleft(self, value):
        self._append(value, LEFT)

    def pop(self):
        return self._pop(RIGHT)

    def popleft(self):
        return self._pop(LEFT)

    def extend(self, values):
        self._extend(values, RIGHT)

    def extendleft(self, values):
        self._extend(values, LEFT)

    def insert(self, index, value):
        index = assert_index(index)
        if self._policy.full(self._size):
            logger.debug('insert rejected, deque is full, maxlen: %d', self.maxlen)
            raise ContainerFullError(self.maxlen)
        index = resolve_insert_index(index, self._size)
        self._rotate(-index)
        self._push(value, LEFT)
        self._rotate(index)

    def remove(self, value):
        same = self._model.same
        state = self._state
        for i in range(self._size):
            hit = same(self._M[self._slot(i)], value)
            if self._state != state:
                raise MutatedDuringIterationError(desc='deque.remove(x)')
            if hit:
                self._delete(i)
                return
        raise ValueNotFoundError(self._model.repr(value), desc='deque.remove(x)')

    def index(self, value, start=0, stop=None):
        start = assert_index(start, name='start')
        stop = stop if stop is None else assert_index(stop, name='stop')
        st, ed = resolve_window(start, stop, self._size)
        same = self._model.same
        for i, x in enumerate(self._iterate(range(st, ed))):
            if same(x, value):
                return i
        raise ValueNotFoundError(self._model.repr(value), desc='deque.index(x)')

    def count(self, value):
        same = self._model.same
        c = 0
        for x in self._iterate(range(self._size)):
            if same(x, value):
                c += 1
        return c

    def clear(self):
        self._clear()

    def copy(self):
        return self.__copy__()

    def reverse(self):
        self._reset(reversed(self._values()))

    def rotate(self, n=1):
        self._rotate(assert_index(n, name='n'))

    def _extend(self, values, dir):
        if values is self:
            values = self._values()
        for value in values:
            self._append(value, dir)

    def _delete(self, index):
        self._rotate(-index)
        self._pop(LEFT)
        self._rotate(index)

    def _clear(self):
        self._M = [None] * _MIN_CAPACITY
        self._head = 0
        self._size = 0
        self._state += 1

    def _rotate(self, n):
        size = self._size
        if size <= 1:
            return
        n %= size
        if n == 0:
            return
        # move the shorter side
        if n <= size // 2:
            for _ in range(n):
                self._push(self._pop(RIGHT), LEFT)
        else:
            for _ in range(size - n):
                self._push(self._pop(LEFT), RIGHT)

    def full(self):
        return self._policy.full(self._size)

    def _info(self):
        return {
            'M': self._M,
            'head': self._head,
            'size': self._size,
            'maxlen': self.maxlen,
        }


deque = BoundedDeque
