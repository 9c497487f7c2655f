""" An interpreter for the befunge programming language implemented in
pure Python.

Example usage:

>>> from pyfunge import interpret
>>> interpret('52*"!ih">:#,_@')
'hi!\\n'

"""

from .api import interpret
from .common import FungeError, InvalidValue, UnknownOperation
from .interpreter import BefungeInterpreter

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))

__all__ = [
    'interpret', 'BefungeInterpreter', 'FungeError', 'InvalidValue',
    'UnknownOperation']
