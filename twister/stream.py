#!/usr/bin/env python
# encoding: utf-8

"""Handle stream operations here."""

import itertools
import time
import typing

import twister.prng
import twister.util

__author__ = 'aldur'


def seed_from_16_bit_key(key: int) -> int:
    """
    A 16 bit key becomes the 16 LSB of the seed.

    :param key: The 16 bit key.
    :return: The MT seed.
    """
    assert 0 <= key <= 2 ** 16 - 1
    return key


def seed_from_32_bit_key(key: int) -> int:
    """
    :param key: The 32 bit key.
    :return: The MT seed.
    """
    assert 0 <= key <= 2 ** 32 - 1
    return key


def seed_from_timestamp(timestamp: float=None) -> int:
    """
    Seed from the Unix timestamp (in seconds).

    :param timestamp: The timestamp, defaults to now.
    :return: The timestamp truncated to 32 bits.
    """
    if timestamp is None:
        timestamp = time.time()
    assert timestamp >= 0

    return twister.util.int_32_lsb(int(timestamp))


def mt19937_keystream(key: int) -> typing.Iterator[int]:
    """
    The endless key stream produced by a freshly seeded MT.

    :param key: The MT seed.
    :return: An iterator of key bytes.
    """
    return twister.prng.MT19937(key).byte_iter()


def mt19937_stream(b: bytes, key: int) -> bytes:
    """Encrypt/decrypt by using MT19937 generated numbers as key stream.

    :param b: The buffer to be encrypted/decrypted.
    :param key: The MT seed.
    :returns: The encrypted/decrypted buffer.
    """
    assert 0 <= key <= 2 ** 32 - 1

    return twister.util.xor(
        b, bytes(itertools.islice(mt19937_keystream(key), len(b)))
    )


encrypt = mt19937_stream
decrypt = mt19937_stream
