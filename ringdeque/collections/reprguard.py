import threading as _th

PLACEHOLDER = '[...]'

_local = _th.local()


def _active():
    keys = getattr(_local, 'keys', None)
    if keys is None:
        keys = _local.keys = set()
    return keys


class ReprGuard(object):
    '''
    Marks a container as being rendered on the current thread.
    `entered` is False when the container is already being rendered
    further up the stack.
    '''
    def __init__(self, obj):
        self._key = id(obj)
        self.entered = False

    def __enter__(self):
        keys = _active()
        if self._key not in keys:
            keys.add(self._key)
            self.entered = True
        return self

    def __exit__(self, exc, val, tb):
        if self.entered:
            _active().discard(self._key)
            self.entered = False

    @staticmethod
    def rendering(obj):
        return id(obj) in _active()
