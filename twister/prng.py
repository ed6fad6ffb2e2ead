#!/usr/bin/env python
# encoding: utf-8

__author__ = 'aldur'

"""Handle PRN generation."""

import typing

import twister.util

"""
Hardcoded constants:
(w, n, m, r) = (32, 624, 397, 31)
a = 9908B0DF16
(u, d) = (11, FFFFFFFF16)
(s, b) = (7, 9D2C568016)
(t, c) = (15, EFC6000016)
l = 18
f = 6C07896516
"""
N = 624
M = 397

A = 0x9908b0df
F = 0x6c078965

U, D = 11, 0xffffffff
S, B = 7, 0x9d2c5680
T, C = 15, 0xefc60000
L = 18

LOWER_MASK = 0x7fffffff
UPPER_MASK = twister.util.int_32_lsb(~LOWER_MASK)


class InvalidStateLengthException(Exception):
    """
    Thrown when trying to build a generator from a state
    that doesn't hold exactly N words.
    """

    def __init__(self, length: int):
        super().__init__(
            "State should have exactly {} words (had {}).".format(N, length)
        )
        self.length = length


def temper(y: int) -> int:
    """
    Temper a raw state word into an output word.

    :param y: The raw state word.
    :return: The tempered word.
    """
    y ^= (y >> U) & D
    y ^= (y << S) & B
    y ^= (y << T) & C
    y ^= y >> L

    return twister.util.int_32_lsb(y)


def untemper_right(y: int, shift: int, mask: int) -> int:
    """
    Reverse y = x ^ (x >> shift) & mask.

    The topmost `shift` bits of y are those of x.
    Each lower window of `shift` bits is then fixed
    by using the bits right above it, that have already been recovered.
    Windows must be processed from the MSB towards the LSB.

    :param y: The result of the transformation.
    :param shift: The shift amount.
    :param mask: The AND mask.
    :return: The value x that produced y.
    """
    assert 0 < shift < 32

    for window in reversed(range(0, 32, shift)):
        bitmask = twister.util.int_32_lsb(((1 << shift) - 1) << window)
        y ^= (y >> shift) & mask & bitmask

    return y


def untemper_left(y: int, shift: int, mask: int) -> int:
    """
    Reverse y = x ^ (x << shift) & mask.

    The lowest `shift` bits of y are those of x.
    Each higher window is fixed by using the bits right below it.
    Windows must be processed from the LSB towards the MSB.

    :param y: The result of the transformation.
    :param shift: The shift amount.
    :param mask: The AND mask.
    :return: The value x that produced y.
    """
    assert 0 < shift < 32

    for window in range(0, 32, shift):
        bitmask = twister.util.int_32_lsb(((1 << shift) - 1) << window)
        y ^= (y << shift) & mask & bitmask

    return twister.util.int_32_lsb(y)


def untemper(y: int) -> int:
    """Invert the tempering function.
    We're interested in finding x, given y.
        temper(x) = y
        untemper(y) = x

    :param y: The tempering result.
    :return: The value x that produced y.
    """
    assert 0 <= y <= 0xffffffff

    x = untemper_right(y, L, D)
    x = untemper_left(x, T, C)
    x = untemper_left(x, S, B)
    x = untemper_right(x, U, D)

    return x


class MT19937:

    """
    The Mersenne Twister PRNG.
    Code courtesy of Wikipedia
    (https://en.wikipedia.org/wiki/Mersenne_Twister)
    :param seed: The PRNG seed.
    """

    def __init__(self, seed: int):
        self.index = N
        self.mt = [0] * N
        self.seed(seed)

    @classmethod
    def from_state(cls, state: typing.Sequence[int]) -> "MT19937":
        """
        Build a generator owning a copy of the given state.
        The index is set to N, so that the first extraction twists.

        :param state: N untempered words.
        :return: The new generator.
        :raise InvalidStateLengthException: If len(state) != N.
        """
        state = list(state)
        if len(state) != N:
            raise InvalidStateLengthException(len(state))
        assert all(0 <= w <= 0xffffffff for w in state)

        mt_prng = cls.__new__(cls)
        mt_prng.mt = state
        mt_prng.index = N
        return mt_prng

    def seed(self, seed: int):
        """
        Replace the whole state with the one derived from seed.

        :param seed: A 32 bit unsigned int.
        """
        assert isinstance(seed, int), "Seed must be an int."
        assert 0 <= seed <= 0xffffffff, "Seed must fit into 32 bits."

        self.mt[0] = seed  # Initialize the initial state to the seed
        for i in range(1, N):
            self.mt[i] = twister.util.int_32_lsb(
                F * (self.mt[i - 1] ^ self.mt[i - 1] >> 30) + i
            )
        self.index = N

    def copy_state(self) -> list:
        """
        :return: A copy of the raw state words.
        """
        return list(self.mt)

    def extract_number(self) -> int:
        """
        Extract a tempered value based on MT[index]
        calling twist() every n numbers

        :return: A new PRN.
        """
        assert self.index <= N, \
            "Index ({}) got past {} without twisting.".format(self.index, N)

        if self.index == N:
            self.twist()

        y = temper(self.mt[self.index])
        self.index += 1

        return y

    def twist(self):
        """
        Generate the next n values.
        The state is updated in place: words read through
        the (i + 1) and (i + M) wrap-arounds are the already twisted ones.
        """
        for i in range(0, N):
            # Get the most significant bit and add it to the less significant
            # bits of the next number
            y = (self.mt[i] & UPPER_MASK) + \
                (self.mt[(i + 1) % N] & LOWER_MASK)
            self.mt[i] = self.mt[(i + M) % N] ^ y >> 1

            if y % 2 != 0:
                self.mt[i] ^= A
        self.index = 0

    def byte_iter(self) -> typing.Iterator[int]:
        """
        Endless stream of bytes, each PRN split in big endian order.
        Shares the generator state, only re-seeding restarts it.

        :return: A generator of bytes (as ints).
        """
        while True:
            yield from twister.util.to_big_endian_unsigned_ints(
                (self.extract_number(),)
            )

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.extract_number()
