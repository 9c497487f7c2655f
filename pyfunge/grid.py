""" The playfield of a befunge program.

The source text is laid out on a rectangular grid of characters. The grid
behaves like a torus: stepping off one edge brings you back at the opposite
edge.
"""


def wrap(coordinate, dimension):
    """ Normalize a coordinate into the range [0, dimension) """
    if coordinate < 0:
        coordinate += dimension
    return coordinate % dimension


def parse(source):
    """ Parse source text into a rectangular grid.

    Short rows are padded on the right with spaces, which are no-ops.
    """
    rows = [list(line) for line in source.split('\n')]
    width = max(1, max(len(row) for row in rows))
    for row in rows:
        row.extend(' ' * (width - len(row)))
    return Grid(rows)


class Grid:
    """ Mutable 2D field of characters, indexed as (x, y) """

    def __init__(self, rows):
        assert rows, 'A grid has at least one row'
        self.rows = rows
        self.height = len(rows)
        self.width = len(rows[0])
        assert all(len(row) == self.width for row in rows)

    def __repr__(self):
        return 'Grid({}x{})'.format(self.width, self.height)

    def __str__(self):
        return '\n'.join(self.lines())

    def lines(self):
        return [''.join(row) for row in self.rows]

    def read(self, x, y):
        """ Get the character at the given position """
        return self.rows[wrap(y, self.height)][wrap(x, self.width)]

    def write(self, x, y, char):
        """ Store a character at the given position, the program modifies
        itself this way.
        """
        assert len(char) == 1
        self.rows[wrap(y, self.height)][wrap(x, self.width)] = char
