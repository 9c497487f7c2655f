"""
   Error handling routines
   Source location structures
"""

logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class SourceLocation:
    """ A location that refers to a cell in a befunge program """

    __slots__ = ['filename', 'row', 'col', 'length', 'source']

    def __init__(self, filename, row, col, ln, source=None):
        self.filename = filename
        self.row = row
        self.col = col
        self.length = ln
        self.source = source

    def __repr__(self):
        return '({}, {}, {}, {})'.format(
            self.filename, self.row, self.col, self.length)

    def get_source_line(self):
        """ Return the source line indicated by this location """
        if self.source is None:
            return 'Could not load source'
        lines = self.source.split('\n')
        return lines[self.row - 1]

    def print_message(self, message, lines=None, file=None):
        """ Print a message at this location in the given source lines """
        if lines is None:
            lines = (self.source or '').split('\n')

        if self.filename:
            print('File : "{}"'.format(self.filename), file=file)

        print_message(
            lines, self.row, self.col, self.length, message, file=file)


def print_message(lines, row: int, col: int, length: int, message: str,
                  file=None):
    """ Render a message nicely embedded in surrounding source """
    prerow = max(row - 2, 1)
    afterrow = min(row + 3, len(lines))

    for r in range(prerow, afterrow + 1):
        print('{:5} :{}'.format(r, lines[r - 1]), file=file)

        if r == row:
            base_txt = '      :'
            length = max(length, 1)
            marker = '^' * length
            indent1_txt = base_txt + ' ' * (col - 1)
            indent2_txt = indent1_txt + ' ' * (length // 2)
            print('{}{}'.format(indent1_txt, marker), file=file)
            print('{}|'.format(indent2_txt), file=file)
            print('{}+---- {}'.format(indent2_txt, message), file=file)


class FungeError(Exception):
    """ Base class of all errors raised while running a program """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        if loc:
            assert isinstance(loc, SourceLocation), \
                '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error inside some nice context """
        if self.loc:
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class UnknownOperation(FungeError):
    """ The character under the pointer is not an instruction """
    def __init__(self, op, loc=None):
        super().__init__('Unknown operation: {!r}'.format(op), loc=loc)
        self.op = op


class InvalidValue(FungeError):
    """ A value that is not a whole number was pushed """
    def __init__(self, value):
        super().__init__(
            'Value must be an integer, got {!r}'.format(value))
        self.value = value
