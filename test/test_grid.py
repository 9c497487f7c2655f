import unittest
from pyfunge.grid import parse, wrap


class ParseTestCase(unittest.TestCase):
    def test_parse(self):
        """ Parse an input into a rectangular 2D field """
        grid = parse(">987v>.v\nv456<  :\n>321 ^ _@")
        expected = [
            [">", "9", "8", "7", "v", ">", ".", "v", " "],
            ["v", "4", "5", "6", "<", " ", " ", ":", " "],
            [">", "3", "2", "1", " ", "^", " ", "_", "@"]]
        self.assertEqual(expected, grid.rows)
        self.assertEqual(9, grid.width)
        self.assertEqual(3, grid.height)

    def test_empty_source(self):
        grid = parse("")
        self.assertEqual([[" "]], grid.rows)
        self.assertEqual(1, grid.width)
        self.assertEqual(1, grid.height)

    def test_trailing_newline(self):
        """ A trailing newline gives an extra blank row """
        grid = parse("12\n")
        self.assertEqual(["12", "  "], grid.lines())

    def test_no_truncation(self):
        grid = parse("1\n12345\n12")
        self.assertEqual(["1    ", "12345", "12   "], grid.lines())

    def test_str(self):
        grid = parse("ab\nc")
        self.assertEqual("ab\nc ", str(grid))


class GridTestCase(unittest.TestCase):
    def setUp(self):
        self.grid = parse("123+\n456-\n789/")

    def test_read(self):
        self.assertEqual("1", self.grid.read(0, 0))
        self.assertEqual("3", self.grid.read(2, 0))
        self.assertEqual("6", self.grid.read(2, 1))

    def test_read_wraps(self):
        self.assertEqual("1", self.grid.read(4, 0))
        self.assertEqual("1", self.grid.read(0, 3))
        self.assertEqual("+", self.grid.read(-1, 0))
        self.assertEqual("/", self.grid.read(-1, -1))
        self.assertEqual("7", self.grid.read(0, -1))

    def test_write(self):
        self.grid.write(1, 0, "H")
        self.assertEqual("H", self.grid.read(1, 0))
        self.assertEqual(["1H3+", "456-", "789/"], self.grid.lines())

    def test_write_wraps(self):
        self.grid.write(-1, 3, "x")
        self.assertEqual("x", self.grid.read(3, 0))


class WrapTestCase(unittest.TestCase):
    def test_in_range(self):
        self.assertEqual(0, wrap(0, 4))
        self.assertEqual(3, wrap(3, 4))

    def test_overflow(self):
        self.assertEqual(0, wrap(4, 4))
        self.assertEqual(1, wrap(9, 4))

    def test_underflow(self):
        self.assertEqual(3, wrap(-1, 4))
        self.assertEqual(2, wrap(-10, 4))


if __name__ == '__main__':
    unittest.main()
