# Base
class DequeError(Exception):
    def __init__(self, err, desc=None):
        text = err
        if desc is not None: text += f' ({desc})'
        text += '.'
        super().__init__(text)

# Argument
class ArgumentTypeError(DequeError, TypeError):
    def __init__(self, name, arg, expect_types, **kwargs):
        expects = ','.join([tp.__name__ for tp in expect_types])
        super().__init__(f'Type of {name} is {type(arg)}, expect: {expects}', **kwargs)

class InvalidArgumentError(DequeError, ValueError):
    def __init__(self, name, value, **kwargs):
        super().__init__(f'Argument {name}={value} is invalid', **kwargs)


# Container
class EmptyContainerError(DequeError, IndexError):
    def __init__(self, **kwargs):
        super().__init__('pop from an empty deque', **kwargs)

class ContainerFullError(DequeError, IndexError):
    def __init__(self, maxlen, **kwargs):
        super().__init__(f'deque already at its maximum size {maxlen}', **kwargs)

class ValueNotFoundError(DequeError, ValueError):
    def __init__(self, value_repr, **kwargs):
        super().__init__(f'{value_repr} is not in deque', **kwargs)

class MutatedDuringIterationError(DequeError, RuntimeError):
    def __init__(self, **kwargs):
        super().__init__('deque mutated during iteration', **kwargs)
