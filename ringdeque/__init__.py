from .core import *
from .collections import BoundedDeque, deque
from .threading import SharedDeque, RWLock

__version__ = '0.1'
