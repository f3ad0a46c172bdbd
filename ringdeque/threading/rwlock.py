import time
import threading as _th


class _Side(object):
    def __init__(self, acquire, release):
        self._acquire = acquire
        self._release = release

    def __enter__(self):
        self.acquire()

    def __exit__(self, exc, val, tb):
        self.release()

    @staticmethod
    def _timeout(block, timeout):
        if timeout is not None and timeout < 0:
            raise ValueError(f'Invalid timeout {timeout}')
        if not block and timeout is not None:
            raise ValueError("Can't specify a timeout when non-blocking")
        return 0 if not block else timeout

    def acquire(self, block=True, timeout=None):
        return self._acquire(self._timeout(block, timeout))

    def release(self):
        return self._release()


class RWLock(object):
    '''
    _state:
          0: free
         >0: number of readers
         -1: held by a writer
    _owner:  thread holding the write side
    _nested: re-entrant acquires made by the owner while it writes
    w_first: waiting writers block new readers
    '''
    def __init__(self, w_first=False):
        self._w_first = w_first
        self._cond = _th.Condition()
        self._state = 0
        self._n_w_wait = 0
        self._owner = None
        self._nested = 0
        self._rlock = _Side(self.acquire_read, self.release)
        self._wlock = _Side(self.acquire_write, self.release)

    def __enter__(self):
        self.acquire_write()

    def __exit__(self, exc, val, tb):
        self.release()

    @property
    def w_first(self): return self._w_first

    def locked(self): return self._state != 0

    def rlocked(self): return self._state > 0

    def wlocked(self): return self._state < 0

    def rlock(self): return self._rlock

    def wlock(self): return self._wlock

    def acquire_read(self, timeout=None):
        with self._cond:
            return self._wait_for(self._try_read, timeout)

    def acquire_write(self, timeout=None):
        with self._cond:
            self._n_w_wait += 1
            try:
                return self._wait_for(self._try_write, timeout)
            finally:
                self._n_w_wait -= 1

    def release(self):
        with self._cond:
            if self._state == 0:
                raise RuntimeError('release unlocked lock')
            if self._nested > 0:
                self._nested -= 1
                return
            if self._state > 0:
                self._state -= 1
            else:
                self._state = 0
                self._owner = None
            if self._state == 0:
                self._cond.notify_all()

    def _wait_for(self, predicate, timeout):
        end_time = None if timeout is None else time.monotonic() + timeout
        result = predicate()
        while not result:
            wait_time = None
            if end_time is not None:
                wait_time = end_time - time.monotonic()
                if wait_time <= 0: break
            self._cond.wait(wait_time)
            result = predicate()
        return result

    def _reenter(self):
        if self._state < 0 and self._owner == _th.get_ident():
            self._nested += 1
            return True
        return False

    def _try_read(self):
        if self._reenter(): return True
        if self._state < 0 or (self._w_first and self._n_w_wait > 0):
            return False
        self._state += 1
        return True

    def _try_write(self):
        if self._reenter(): return True
        if self._state != 0: return False
        self._state = -1
        self._owner = _th.get_ident()
        return True
