from .error import *
from .assertion import assert_type, assert_index, assert_maxlen
from .host import ObjectModel, CallbackModel, PYTHON
