# -*- coding: utf-8 -*-
#
#    LksLib - Python LKS Chain Network Library
#    Unit Tests for Encoding methods
#    © 2024 - 2026 October - LksLib Developers
#

import unittest

from lkslib.encoding import *


class TestEncodingIntegerBuffer(unittest.TestCase):

    def test_integer_as_buffer_network_magic(self):
        self.assertEqual(integer_as_buffer(0xbf0c6bbd), b'\xbf\x0c\x6b\xbd')
        self.assertEqual(integer_as_buffer(0xcee2caff), b'\xce\xe2\xca\xff')
        self.assertEqual(integer_as_buffer(0xfcc1b7dc).hex(), 'fcc1b7dc')

    def test_integer_as_buffer_padding(self):
        self.assertEqual(integer_as_buffer(1), b'\x00\x00\x00\x01')
        self.assertEqual(integer_as_buffer(0), b'\x00\x00\x00\x00')
        self.assertEqual(integer_as_buffer(0x0102, length=2), b'\x01\x02')

    def test_integer_as_buffer_errors(self):
        self.assertRaisesRegex(EncodingError, "does not fit in 4 unsigned bytes", integer_as_buffer, 1 << 32)
        self.assertRaisesRegex(EncodingError, "does not fit in 4 unsigned bytes", integer_as_buffer, -1)
        self.assertRaisesRegex(EncodingError, "Input must be an integer", integer_as_buffer, '0xbf0c6bbd')
        self.assertRaisesRegex(EncodingError, "Input must be an integer", integer_as_buffer, 1.5)
        self.assertRaisesRegex(EncodingError, "Input must be an integer", integer_as_buffer, True)


class TestEncodingHexstring(unittest.TestCase):

    def test_to_hexstring(self):
        self.assertEqual(to_hexstring(b'\x12\xaa\xdd'), '12aadd')
        self.assertEqual(to_hexstring('12aadd'), '12aadd')
        self.assertEqual(to_hexstring(b''), '')


if __name__ == '__main__':
    unittest.main()
