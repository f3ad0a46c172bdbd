"""Lexicographic comparison of two deques through the host object model."""
import operator

_LENGTH_ORDER = {
    'lt': operator.lt,
    'le': operator.le,
    'gt': operator.gt,
    'ge': operator.ge,
}


class SequenceComparison(object):
    """Transient context for one comparison call.

    lhs and rhs are indexable sequences owned by the caller, used as given.
    """

    def __init__(self, lhs, rhs, model):
        self._lhs = lhs
        self._rhs = rhs
        self._model = model

    def _mismatch(self):
        lhs, rhs, same = self._lhs, self._rhs, self._model.same
        for i in range(min(len(lhs), len(rhs))):
            if not same(lhs[i], rhs[i]):
                return i
        return None

    def equal(self):
        if len(self._lhs) != len(self._rhs):
            return False
        return self._mismatch() is None

    def compare(self, op):
        """Evaluate ``lhs <op> rhs`` where op is one of lt, le, gt, ge."""
        order = self._model.order(op)
        i = self._mismatch()
        if i is None:
            # one side is a prefix of the other
            return _LENGTH_ORDER[op](len(self._lhs), len(self._rhs))
        return order(self._lhs[i], self._rhs[i])


def lt(lhs, rhs, model): return SequenceComparison(lhs, rhs, model).compare('lt')
def le(lhs, rhs, model): return SequenceComparison(lhs, rhs, model).compare('le')
def gt(lhs, rhs, model): return SequenceComparison(lhs, rhs, model).compare('gt')
def ge(lhs, rhs, model): return SequenceComparison(lhs, rhs, model).compare('ge')
def eq(lhs, rhs, model): return SequenceComparison(lhs, rhs, model).equal()
