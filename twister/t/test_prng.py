#!/usr/bin/env python
# encoding: utf-8

"""
Test the MT19937 PRNG.
"""

import unittest
import random
import itertools

import twister.prng

__author__ = 'aldur'


class MT19937TestCase(unittest.TestCase):

    def test_reference_vectors(self):
        mt_prng = twister.prng.MT19937(0)
        self.assertEqual(
            [mt_prng.extract_number() for _ in range(6)],
            [2357136044, 2546248239, 3071714933,
             3626093760, 2588848963, 3684848379]
        )

        mt_prng = twister.prng.MT19937(5489)
        self.assertEqual(mt_prng.extract_number(), 3499211612)

    def test_seed_expansion(self):
        mt_prng = twister.prng.MT19937(5489)
        self.assertEqual(len(mt_prng.mt), twister.prng.N)
        self.assertEqual(mt_prng.mt[0], 5489)
        self.assertEqual(mt_prng.mt[1], 1301868182)
        self.assertEqual(mt_prng.index, twister.prng.N)

    def test_determinism(self):
        seed = random.randint(0, 2 ** 32 - 1)
        a = twister.prng.MT19937(seed)
        b = twister.prng.MT19937(seed)

        for _ in range(2 * twister.prng.N + 10):
            self.assertEqual(a.extract_number(), b.extract_number())

    def test_reseed(self):
        mt_prng = twister.prng.MT19937(1)
        first = [mt_prng.extract_number() for _ in range(700)]

        mt_prng.seed(1)
        self.assertEqual(mt_prng.index, twister.prng.N)
        self.assertEqual(
            [mt_prng.extract_number() for _ in range(700)],
            first
        )

    def test_matches_python_random(self):
        """CPython's random module runs the same generator."""
        mt_prng = twister.prng.MT19937(random.randint(0, 2 ** 32 - 1))
        python_prng = random.Random()
        python_prng.setstate(
            (3, tuple(mt_prng.copy_state() + [twister.prng.N]), None)
        )

        for _ in range(3 * twister.prng.N):
            self.assertEqual(
                mt_prng.extract_number(),
                python_prng.getrandbits(32)
            )

    def test_twist(self):
        mt_prng = twister.prng.MT19937(0)
        self.assertEqual(mt_prng.index, twister.prng.N)

        mt_prng.extract_number()
        self.assertEqual(mt_prng.index, 1)

        for _ in range(twister.prng.N - 1):
            mt_prng.extract_number()
        self.assertEqual(mt_prng.index, twister.prng.N)

        mt_prng.extract_number()
        self.assertEqual(mt_prng.index, 1)

    def test_broken_index(self):
        mt_prng = twister.prng.MT19937(0)
        mt_prng.index = twister.prng.N + 1
        self.assertRaises(AssertionError, mt_prng.extract_number)

    def test_bad_seed(self):
        self.assertRaises(AssertionError, twister.prng.MT19937, -1)
        self.assertRaises(AssertionError, twister.prng.MT19937, 2 ** 32)

    def test_byte_iter(self):
        mt_prng = twister.prng.MT19937(0)
        b = bytes(itertools.islice(mt_prng.byte_iter(), 6))
        self.assertEqual(b, bytes.fromhex("8c7f0aac97c4"))

        # Bytes 5 and 6 were taken from the second number,
        # the rest of it has been thrown away.
        self.assertEqual(mt_prng.extract_number(), 3071714933)

    def test_iterator(self):
        self.assertEqual(
            list(itertools.islice(twister.prng.MT19937(0), 3)),
            [2357136044, 2546248239, 3071714933]
        )

    def test_from_state(self):
        original = twister.prng.MT19937(random.randint(0, 2 ** 32 - 1))
        state = original.copy_state()

        mt_prng = twister.prng.MT19937.from_state(state)
        self.assertEqual(mt_prng.index, twister.prng.N)

        state[0] ^= 0xffffffff
        self.assertNotEqual(mt_prng.mt[0], state[0])

        for _ in range(100):
            self.assertEqual(
                original.extract_number(),
                mt_prng.extract_number()
            )

    def test_from_state_invalid_length(self):
        f = twister.prng.MT19937.from_state

        for length in (0, twister.prng.N - 1, twister.prng.N + 1):
            with self.assertRaises(
                    twister.prng.InvalidStateLengthException
            ) as context:
                f([0] * length)
            self.assertEqual(context.exception.length, length)


class TemperTestCase(unittest.TestCase):

    def test_temper(self):
        self.assertEqual(twister.prng.temper(0), 0)
        self.assertLessEqual(twister.prng.temper(0xffffffff), 0xffffffff)

    def test_untemper(self):
        f = twister.prng.untemper
        g = twister.prng.temper

        for v in (0, 1, 0x80000000, 0x7fffffff, 0xffffffff):
            self.assertEqual(f(g(v)), v)

        for _ in range(10000):
            v = random.randint(0, 2 ** 32 - 1)
            self.assertEqual(f(g(v)), v)

    def test_untemper_right(self):
        f = twister.prng.untemper_right

        for _ in range(1000):
            x = random.randint(0, 2 ** 32 - 1)
            self.assertEqual(f(x ^ x >> 11, 11, 0xffffffff), x)
            self.assertEqual(f(x ^ x >> 18, 18, 0xffffffff), x)
            self.assertEqual(f(x ^ x >> 3 & 0x12345678, 3, 0x12345678), x)

    def test_untemper_left(self):
        f = twister.prng.untemper_left

        for _ in range(1000):
            x = random.randint(0, 2 ** 32 - 1)
            self.assertEqual(
                f(x ^ x << twister.prng.S & twister.prng.B,
                  twister.prng.S, twister.prng.B),
                x
            )
            self.assertEqual(
                f(x ^ x << twister.prng.T & twister.prng.C,
                  twister.prng.T, twister.prng.C),
                x
            )


if __name__ == '__main__':
    unittest.main()
