from .rwlock import RWLock
from .deque import SharedDeque
