#!/usr/bin/env python
# encoding: utf-8

__author__ = 'aldur'

import twister.util
import unittest


class UtilTestCase(unittest.TestCase):
    def test_xor(self):
        a = bytearray.fromhex("1c0111001f010100061a024b53535009181c")
        b = bytearray.fromhex("686974207468652062756c6c277320657965")
        c = bytearray(twister.util.xor(a, b))
        truth = bytearray.fromhex("746865206b696420646f6e277420706c6179")

        self.assertEqual(c, truth)
        self.assertRaises(AssertionError, twister.util.xor, b"a", b"ab")

    def test_int_lsb(self):
        self.assertEqual(twister.util.int_32_lsb(2 ** 32 + 7), 7)
        self.assertEqual(twister.util.int_32_lsb(-1), 0xffffffff)

    def test_big_endian_ints(self):
        b = twister.util.to_big_endian_unsigned_ints((0x8c7f0aac, 1))
        self.assertEqual(b, bytes.fromhex("8c7f0aac00000001"))

    def test_random_bytes_random_range(self):
        low = 5
        high = 6
        r = twister.util.random_bytes_random_range(low, high)
        self.assertTrue(
            low <= len(r) <= high
        )

        low = 0
        high = 10
        rs = [
            twister.util.random_bytes_random_range(low, high) for _ in range(500)
        ]
        self.assertTrue(
            low <= len(min(rs, key=lambda x: len(x))) <= high
        )
        self.assertTrue(
            low <= len(max(rs, key=lambda x: len(x))) <= high
        )


if __name__ == '__main__':
    unittest.main()
