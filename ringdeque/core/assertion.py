import numbers
from .error import ArgumentTypeError, InvalidArgumentError


def assert_type(arg, *types, strict=False, null=False, name='unknown'):
    if null and arg is None: return
    if strict:
        tp = type(arg)
        for t in types:
            if tp == t: return
    elif isinstance(arg, tuple(types)):
        return
    raise ArgumentTypeError(name, arg, types)


def assert_index(arg, name='index'):
    # bool is an int subclass but never a meaningful position
    if isinstance(arg, bool) or not isinstance(arg, numbers.Integral):
        raise ArgumentTypeError(name, arg, (int,))
    return int(arg)


def assert_maxlen(maxlen):
    if maxlen is None: return None
    maxlen = assert_index(maxlen, name='maxlen')
    if maxlen < 0:
        raise InvalidArgumentError('maxlen', maxlen, desc='maxlen must be non-negative')
    return maxlen
