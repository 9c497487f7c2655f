""" The befunge machine.

The machine fetches the character under the instruction pointer, looks it up
in the instruction table and advances the pointer, until it reads a halt cell.

See also: https://en.wikipedia.org/wiki/Befunge

"""

import logging
import random
from .common import SourceLocation, UnknownOperation
from .grid import Grid, parse, wrap
from .ops import Direction, operations
from .stack import Stack


class BefungeInterpreter:
    """ Befunge machine.

    The machine owns the grid, the stack, the instruction pointer and the
    output. Use ``interpret`` to run a program from scratch, or
    ``load_code`` and ``single_step`` to drive the machine by hand.

    The ``rng`` is used by the random direction instruction, pass a seeded
    ``random.Random`` to get reproducible runs.
    """
    logger = logging.getLogger('befunge')

    def __init__(self, source=None, rng=None, verbose=False):
        self.verbose = verbose
        self.rng = random.Random() if rng is None else rng
        self.grid = Grid([[' ']])
        self.reset()
        if source is not None:
            self.load_code(source)

    def load_code(self, source):
        self.grid = parse(source)
        self.logger.info(
            'Loaded %s x %s grid', self.grid.width, self.grid.height)

    def reset(self):
        """ Reset machine state """
        self.stack = Stack()
        self.x = 0
        self.y = 0
        self.direction = Direction.RIGHT
        self.string_mode = False
        self.op = None
        self.steps = 0
        self._output = []

    @property
    def output(self):
        return ''.join(self._output)

    def emit(self, text):
        """ Append text to the output """
        self._output.append(text)

    def interpret(self, source):
        """ Run the given program from a clean state and return its output """
        self.reset()
        self.load_code(source)
        return self.run()

    def run(self):
        """ Run until the halt cell is reached. """
        self.logger.debug('Running program')
        while self.single_step():
            pass
        self.logger.debug('Halted after %s steps', self.steps)
        return self.output

    def single_step(self):
        """ Execute a single cell.

        Returns False when the pointer is on the halt cell.
        """
        op = self.fetch()
        if op == '@':
            return False

        if self.verbose:
            self.logger.debug(
                'at %s,%s %s execute %r stack=%s',
                self.x, self.y, self.direction.name, op, self.stack.values)

        self.execute(op)
        self.steps += 1
        return True

    def fetch(self):
        """ Get the character under the pointer, wrapping the pointer
        around the edges of the grid.
        """
        self.x = wrap(self.x, self.grid.width)
        self.y = wrap(self.y, self.grid.height)
        return self.grid.read(self.x, self.y)

    def execute(self, op):
        """ Execute the given character at the current position """
        if self.string_mode and op != '"':
            self.stack.push(ord(op))
            self.move()
            return

        if op not in operations:
            raise UnknownOperation(op, loc=self.location())
        self.op = op
        operations[op](self)
        self.move()

    def move(self):
        """ Advance the pointer one cell """
        self.x += self.direction.dx
        self.y += self.direction.dy

    def location(self):
        """ Source location of the cell under the pointer """
        return SourceLocation(
            None, wrap(self.y, self.grid.height) + 1,
            wrap(self.x, self.grid.width) + 1, 1, source=str(self.grid))
