from .deque import BoundedDeque, deque
from .eviction import EvictionPolicy, LEFT, RIGHT
from .compare import SequenceComparison
from .reprguard import ReprGuard
