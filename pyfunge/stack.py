""" The value stack of the befunge machine. """

from .common import InvalidValue


class Stack:
    """ Stack of integers.

    Popping from an empty stack is not an error, it yields zero.
    """
    def __init__(self, values=()):
        self._values = []
        for value in values:
            self.push(value)

    def __repr__(self):
        return 'Stack({})'.format(self._values)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other):
        if isinstance(other, Stack):
            return self._values == other._values
        if isinstance(other, list):
            return self._values == other
        return NotImplemented

    @property
    def values(self):
        return list(self._values)

    def push(self, value):
        """ Push an integer value onto the stack """
        if isinstance(value, bool):
            raise InvalidValue(value)
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int):
            raise InvalidValue(value)
        self._values.append(value)

    def pop(self):
        """ Pop an integer from the stack, or 0 if the stack is empty """
        if self._values:
            return self._values.pop()
        else:
            return 0

    def peek(self):
        if self._values:
            return self._values[-1]
        else:
            return 0

    def clear(self):
        self._values.clear()
