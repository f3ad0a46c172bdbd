from ringdeque.collections.deque import BoundedDeque
from ringdeque.collections.reprguard import ReprGuard, PLACEHOLDER
from .rwlock import RWLock


def _reading(f):
    def locked_f(self, *args, **kw):
        with self._lock.rlock():
            return f(self, *args, **kw)
    locked_f.__name__ = f.__name__
    locked_f.__doc__ = f.__doc__
    return locked_f


def _writing(f):
    def locked_f(self, *args, **kw):
        with self._lock.wlock():
            return f(self, *args, **kw)
    locked_f.__name__ = f.__name__
    locked_f.__doc__ = f.__doc__
    return locked_f


_READS = (
    '__len__', '__contains__', '__getitem__', 'count', 'index', 'full',
)
_WRITES = (
    '__setitem__', '__delitem__', '__iadd__', '__imul__',
    'append', 'appendleft', 'pop', 'popleft', 'extend', 'extendleft',
    'insert', 'remove', 'clear', 'reverse', 'rotate',
)


class SharedDeque(BoundedDeque):
    """A BoundedDeque safe to mutate from several threads.

    Queries hold the read side of an RWLock, mutations the write side.
    Host hooks run while the lock is held. The write side is re-entrant for
    its own thread, so a hook called from a mutation may read the same
    deque. A hook called from a query must not mutate it.
    """

    def __init__(self, iterable=(), maxlen=None, *, model=None, w_first=False):
        self._lock = RWLock(w_first=w_first)
        super().__init__(iterable, maxlen, model=model)

    @property
    def lock(self):
        return self._lock

    def __copy__(self):
        with self._lock.rlock():
            o = type(self)(maxlen=self.maxlen, model=self._model, w_first=self._lock.w_first)
            o._reset(self._values())
            return o

    def __iter__(self):
        with self._lock.rlock():
            return iter(self._values())

    def __reversed__(self):
        with self._lock.rlock():
            return iter(self._values()[::-1])

    def __repr__(self):
        if ReprGuard.rendering(self):
            return PLACEHOLDER
        with self._lock.rlock():
            return super().__repr__()

    def _compare(self, other, op, identical):
        if self is other or not isinstance(other, BoundedDeque):
            return super()._compare(other, op, identical)
        with self._lock.rlock():
            if isinstance(other, SharedDeque):
                with other._lock.rlock():
                    return super()._compare(other, op, identical)
            return super()._compare(other, op, identical)


for _name in _READS:
    setattr(SharedDeque, _name, _reading(getattr(BoundedDeque, _name)))
for _name in _WRITES:
    setattr(SharedDeque, _name, _writing(getattr(BoundedDeque, _name)))
del _name
