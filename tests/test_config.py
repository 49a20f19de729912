import io
import logging
import unittest

from symtab.config import parse_config


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = parse_config()
        self.assertEqual(config.frequency.implementation, 'redblack')
        self.assertEqual(config.frequency.min_length, 1)
        self.assertFalse(config.frequency.check_invariants)
        self.assertEqual(config.logging.level, logging.WARNING)

    def test_empty_file(self):
        config = parse_config(io.StringIO(''))
        self.assertEqual(config.frequency.implementation, 'redblack')

    def test_full(self):
        f = io.StringIO("""\
[frequency]
implementation = binarysearch
min_length = 8
check_invariants = yes

[logging]
level = debug
""")
        config = parse_config(f)
        self.assertEqual(config.frequency.implementation, 'binarysearch')
        self.assertEqual(config.frequency.min_length, 8)
        self.assertTrue(config.frequency.check_invariants)
        self.assertEqual(config.logging.level, logging.DEBUG)

    def test_partial(self):
        config = parse_config(io.StringIO('[frequency]\nmin_length = 3\n'))
        self.assertEqual(config.frequency.implementation, 'redblack')
        self.assertEqual(config.frequency.min_length, 3)

    def test_booleans(self):
        for value in ['yes', 'on', 'true', '1']:
            f = io.StringIO('[frequency]\ncheck_invariants = %s\n' % value)
            self.assertTrue(parse_config(f).frequency.check_invariants)
        for value in ['no', 'off', 'false', '0']:
            f = io.StringIO('[frequency]\ncheck_invariants = %s\n' % value)
            self.assertFalse(parse_config(f).frequency.check_invariants)

    def test_invalid(self):
        for contents in [
                '[frequency]\nimplementation = avl\n',
                '[frequency]\nmin_length = many\n',
                '[frequency]\nmin_length = -1\n',
                '[frequency]\ncheck_invariants = maybe\n',
                '[logging]\nlevel = loud\n']:
            with self.subTest(contents=contents):
                self.assertRaises(ValueError, parse_config, io.StringIO(contents))
