#!/usr/bin/env python
# encoding: utf-8

__author__ = "aldur"

"""Various utils."""

import struct
import functools
import random


def xor(a: bytes, b: bytes) -> bytes:
    """Return a xor b.

    :param a: Some bytes.
    :param b: Some bytes.
    :returns: a xor b
    """
    assert len(a) == len(b), \
        "Arguments must have same length."

    a, b = bytearray(a), bytearray(b)
    return bytes(map(lambda i: a[i] ^ b[i], range(len(a))))


def int_32_lsb(x: int):
    """
    Get the 32 least significant bits.

    :param x: A number.
    :return: The 32 LSBits of x.
    """
    return int(0xFFFFFFFF & x)


def _int_bytes_conversion(
        argument,
        is_big_endian: bool,
        format_specifier: str,
        is_packing: bool
):
    """
    Encode/decode input to/from big/little endian bytes.

    :param argument: The argument to be encoded/decoded.
    :param is_big_endian: Whether to encode/decode in big endianess.
    :param format_specifier: The single struct element format specifier.
    :param is_packing: Whether to pack or unpack.
    """
    return struct.pack(
        "{}{}{}".format(
            ">" if is_big_endian else "<",
            len(argument),
            format_specifier,
        ), *argument
    ) if is_packing else struct.unpack(
        "{}{}{}".format(
            ">" if is_big_endian else "<",
            len(argument) // struct.calcsize(format_specifier),
            format_specifier,
        ), argument
    )


to_big_endian_unsigned_ints = functools.partial(
    _int_bytes_conversion,
    is_big_endian=True,
    format_specifier="I",
    is_packing=True
)


def random_bytes(n: int) -> bytes:
    """
    Return n truly random bytes.
    Never use an MT19937 generator here,
    those are exactly the bytes we want to tell apart.

    :param n: The number of bytes.
    :return: n random bytes.
    """
    assert n >= 0
    return bytes(random.SystemRandom().getrandbits(8) for _ in range(n))


def random_bytes_random_range(low: int, high: int) -> bytes:
    """
    Random bytes, in random number.

    :param low: The minimum number of bytes (included).
    :param high: The maximum number of bytes (included).
    :return: Between low and high random bytes.
    """
    assert 0 <= low <= high
    return random_bytes(random.randint(low, high))
