import random
import unittest
import pyfunge
from pyfunge import interpret, UnknownOperation, FungeError


class InterpretTestCase(unittest.TestCase):
    """ Run some basic befunge programs """
    def test_numbers(self):
        self.assertEqual(
            "123456789", interpret(">987v>.v\nv456<  :\n>321 ^ _@"))

    def test_hello_world(self):
        self.assertEqual(
            "Hello, World!\n", interpret('64+"!dlroW ,olleH">:#,_@'))

    def test_halt(self):
        self.assertEqual("", interpret("@"))

    def test_unknown_operation(self):
        with self.assertRaises(UnknownOperation):
            interpret("&@")

    def test_errors_share_base(self):
        with self.assertRaises(FungeError):
            interpret('"a"..x@')

    def test_countdown(self):
        """ Loop with a counter kept on the stack """
        source = '5>:.1-:v\n ^     _@'
        self.assertEqual("54321", interpret(source))

    def test_seeded_rng(self):
        """ Going up returns to the random cell, the other ways print """
        source = '   v\n\n@.3?2.@\n   4\n   .\n   @'
        results = {
            interpret(source, rng=random.Random(seed)) for seed in range(40)}
        self.assertEqual({'2', '3', '4'}, results)

    def test_print_huge_number(self):
        output = interpret('2' + ':*' * 14 + '.@')
        self.assertEqual(4933, len(output))
        self.assertFalse(output.startswith('-'))

    def test_independent_runs(self):
        """ State does not leak from one call into the next """
        self.assertEqual("7", interpret("7.@"))
        self.assertEqual("0", interpret(".@"))

    def test_version(self):
        self.assertEqual(
            pyfunge.__version__,
            '.'.join(map(str, pyfunge.__version_info__)))


if __name__ == '__main__':
    unittest.main()
