"""Capabilities the deque borrows from the host object system.

Elements are opaque handles: the deque never orders, compares or renders
them itself. Everything goes through an ``ObjectModel`` instance, which
defaults to plain Python semantics.
"""
import operator


class ObjectModel(object):
    '''
    eq:    (a, b) -> bool
    order: (a, b) -> bool, one of lt / le / gt / ge
    repr:  value -> str
    is_:   identity test
    '''

    def eq(self, a, b):
        return bool(operator.eq(a, b))

    def lt(self, a, b):
        return bool(operator.lt(a, b))

    def le(self, a, b):
        return bool(operator.le(a, b))

    def gt(self, a, b):
        return bool(operator.gt(a, b))

    def ge(self, a, b):
        return bool(operator.ge(a, b))

    def repr(self, value):
        return repr(value)

    def is_(self, a, b):
        return a is b

    def same(self, a, b):
        """Identity first, then equality, the way Python containers match items."""
        return self.is_(a, b) or self.eq(a, b)

    def order(self, op):
        if op not in ('lt', 'le', 'gt', 'ge'):
            raise ValueError(f'unknown ordering {op}, expected: lt, le, gt, ge')
        return getattr(self, op)


class CallbackModel(ObjectModel):
    """An ObjectModel assembled from plain callables.

    `lt` may be a partial order: le and ge are derived from lt and eq, never
    from the negation of lt.
    """

    def __init__(self, eq=None, lt=None, repr=None):
        self._eq = eq
        self._lt = lt
        self._repr = repr

    def eq(self, a, b):
        if self._eq is None: return super().eq(a, b)
        return bool(self._eq(a, b))

    def lt(self, a, b):
        if self._lt is None: return super().lt(a, b)
        return bool(self._lt(a, b))

    def le(self, a, b):
        if self._lt is None: return super().le(a, b)
        return self.lt(a, b) or self.eq(a, b)

    def gt(self, a, b):
        if self._lt is None: return super().gt(a, b)
        return self.lt(b, a)

    def ge(self, a, b):
        if self._lt is None: return super().ge(a, b)
        return self.lt(b, a) or self.eq(a, b)

    def repr(self, value):
        if self._repr is None: return super().repr(value)
        return self._repr(value)


PYTHON = ObjectModel()
