""" The befunge instruction set.

Each instruction is a function taking the machine as its only argument. The
functions are registered into a table keyed by their character with the
``instruction`` decorator.
"""

import decimal
import enum
import types


class Direction(enum.Enum):
    """ Travel direction of the instruction pointer """
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]


_table = {}


def instruction(*chars):
    """ Register the decorated function for the given characters """
    def wrapper(f):
        for char in chars:
            assert char not in _table, 'Duplicate instruction {}'.format(char)
            _table[char] = f
        return f
    return wrapper


def truncated_divide(b, a):
    """ Integer division rounding toward zero """
    quotient = abs(b) // abs(a)
    return -quotient if (a < 0) != (b < 0) else quotient


def truncated_modulo(b, a):
    """ Remainder which takes the sign of the dividend """
    return b - a * truncated_divide(b, a)


def decimal_text(value):
    """ Decimal digits of an integer of any size """
    return format(decimal.Decimal(value), 'f')


def char_code(value):
    """ Character with the given code, codes wrap at 16 bits """
    return chr(value % 0x10000)


@instruction(' ')
def nop(m):
    pass


@instruction(*'0123456789')
def push_digit(m):
    m.stack.push(int(m.op))


@instruction('+')
def add(m):
    a, b = m.stack.pop(), m.stack.pop()
    m.stack.push(a + b)


@instruction('-')
def subtract(m):
    a, b = m.stack.pop(), m.stack.pop()
    m.stack.push(b - a)


@instruction('*')
def multiply(m):
    a, b = m.stack.pop(), m.stack.pop()
    m.stack.push(a * b)


@instruction('/')
def divide(m):
    a, b = m.stack.pop(), m.stack.pop()
    m.stack.push(truncated_divide(b, a) if a else 0)


@instruction('%')
def modulo(m):
    a, b = m.stack.pop(), m.stack.pop()
    m.stack.push(truncated_modulo(b, a) if a else 0)


@instruction('!')
def logical_not(m):
    m.stack.push(1 if m.stack.pop() == 0 else 0)


@instruction('`')
def greater_than(m):
    a, b = m.stack.pop(), m.stack.pop()
    m.stack.push(1 if b > a else 0)


@instruction('>')
def go_right(m):
    m.direction = Direction.RIGHT


@instruction('<')
def go_left(m):
    m.direction = Direction.LEFT


@instruction('^')
def go_up(m):
    m.direction = Direction.UP


@instruction('v')
def go_down(m):
    m.direction = Direction.DOWN


@instruction('?')
def go_random(m):
    m.direction = m.rng.choice(list(Direction))


@instruction('_')
def horizontal_if(m):
    if m.stack.pop() == 0:
        m.direction = Direction.RIGHT
    else:
        m.direction = Direction.LEFT


@instruction('|')
def vertical_if(m):
    if m.stack.pop() == 0:
        m.direction = Direction.DOWN
    else:
        m.direction = Direction.UP


@instruction('"')
def toggle_string_mode(m):
    m.string_mode = not m.string_mode


@instruction(':')
def duplicate(m):
    value = m.stack.pop()
    m.stack.push(value)
    m.stack.push(value)


@instruction('\\')
def swap(m):
    a, b = m.stack.pop(), m.stack.pop()
    m.stack.push(a)
    m.stack.push(b)


@instruction('$')
def drop(m):
    m.stack.pop()


@instruction('.')
def output_int(m):
    m.emit(decimal_text(m.stack.pop()))


@instruction(',')
def output_char(m):
    m.emit(char_code(m.stack.pop()))


@instruction('#')
def bridge(m):
    # The main loop moves once more after this
    m.move()


@instruction('p')
def put(m):
    """ Self modifying code! """
    y, x, v = m.stack.pop(), m.stack.pop(), m.stack.pop()
    m.grid.write(x, y, char_code(v))


@instruction('g')
def get(m):
    y, x = m.stack.pop(), m.stack.pop()
    m.stack.push(ord(m.grid.read(x, y)))


operations = types.MappingProxyType(_table)
