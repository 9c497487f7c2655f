""" Functions to run befunge programs. """

from .interpreter import BefungeInterpreter


def interpret(source, rng=None):
    """ Run a befunge program and return the text it printed.

    Errors raised while running propagate to the caller.

    >>> interpret('"olleh",,,,,@')
    'hello'

    """
    return BefungeInterpreter(rng=rng).interpret(source)
