#!/usr/bin/env python
# encoding: utf-8

"""
The attacker tools will implemented here.
"""

import abc
import time
import typing

import twister.oracle
import twister.prng
import twister.stream

__author__ = 'aldur'


class MisalignedCaptureException(Exception):
    """
    Thrown when a cloned PRNG doesn't reproduce
    the outputs observed right after the captured window,
    i.e. the window did not start at a twist boundary.
    """

    def __init__(self, position: int):
        super().__init__(
            "Cloned PRNG diverged at output {} after the captured window.".format(
                position
            )
        )
        self.position = position


class Attacker(abc.ABC):
    """The generic, abstract, attacker."""

    @abc.abstractmethod
    def __init__(self, oracle: twister.oracle.Oracle):
        self.oracle = oracle

    @abc.abstractmethod
    def attack(self) -> bool:
        """
        Perform the attack against the oracle.
        The default implementation does nothing.

        :return: True if the attack was successful.
        """
        return False


def clone_mt19937(
        outputs: typing.Sequence[int],
        following: typing.Sequence[int]=()
) -> twister.prng.MT19937:
    """
    Clone an MT PRNG from N consecutive outputs.
    The outputs must be captured starting from a twist boundary
    (e.g. right after seeding), otherwise the state is a mix
    of two generations and the clone silently diverges.

    :param outputs: N consecutive PRNG outputs.
    :param following: The outputs observed right after the window, if any.
        When given, they are checked against the clone.
    :return: A PRNG that will output the same numbers as the original.
    :raise InvalidStateLengthException: If len(outputs) != N.
    :raise MisalignedCaptureException: If the clone doesn't match `following`.
    """
    mt_prng = twister.prng.MT19937.from_state(
        twister.prng.untemper(y) for y in outputs
    )
    if not following:
        return mt_prng

    check = twister.prng.MT19937.from_state(mt_prng.copy_state())
    for i, y in enumerate(following):
        if check.extract_number() != y:
            raise MisalignedCaptureException(i)

    return mt_prng


def search_stream_seed(
        ciphertext: bytes,
        known_plaintext: bytes,
        seeds: typing.Iterable[int]=range(2 ** 16)
) -> typing.Optional[int]:
    """
    Brute-force the MT19937 stream seed,
    given a ciphertext whose plaintext ends with known_plaintext.

    :param ciphertext: The encrypted buffer.
    :param known_plaintext: The known plaintext suffix.
    :param seeds: The candidates, tried in order.
    :return: The first matching seed, None if there's none.
    """
    assert known_plaintext

    if len(ciphertext) < len(known_plaintext):
        return None

    for seed in seeds:
        if twister.stream.decrypt(
                ciphertext, seed
        ).endswith(known_plaintext):
            return seed

    return None


def search_timestamp_seed(
        token: bytes,
        marker: bytes,
        before: int,
        after: int
) -> typing.Optional[int]:
    """
    Look for the timestamp that seeded the encryption of token,
    between before and after (both included).

    :param token: The encrypted token.
    :param marker: The plaintext suffix we expect.
    :param before: A timestamp preceding the encryption.
    :param after: A timestamp following the encryption.
    :return: The seed, None if the token doesn't decrypt in the window.
    """
    assert before <= after

    return search_stream_seed(
        token,
        marker,
        (
            twister.stream.seed_from_timestamp(t)
            for t in range(int(before), int(after) + 1)
        )
    )


def is_mt19937_token(
        token: bytes,
        marker: bytes,
        now: float=None,
        tolerance: int=100
) -> bool:
    """
    Whether token was produced by an MT19937 stream
    seeded with a timestamp at most tolerance seconds old.

    :param token: The token.
    :param marker: The plaintext suffix of every token.
    :param now: The current timestamp, defaults to time.time().
    :param tolerance: How many seconds to look back.
    :return: True if the token comes from MT19937.
    """
    assert tolerance >= 0

    if now is None:
        now = time.time()
    now = int(now)

    return search_timestamp_seed(
        token, marker, max(now - tolerance, 0), now
    ) is not None


def search_first_output_seed(
        output: int,
        before: int,
        after: int
) -> typing.Optional[int]:
    """
    Look for the timestamp seed whose PRNG first output is output.

    :param output: The first PRNG output.
    :param before: A timestamp preceding the seeding.
    :param after: A timestamp following the seeding.
    :return: The seed, None if not found.
    """
    assert before <= after

    for t in range(int(before), int(after) + 1):
        seed = twister.stream.seed_from_timestamp(t)
        if twister.prng.MT19937(seed).extract_number() == output:
            return seed

    return None


class AttackerMT19937Seed(Attacker):
    """
    Guess the oracle's seed by brute-force.
    Try the possible combinations of seed/output
    after calling the oracle.

    :param oracle: The oracle to be attacked.
    :param clock: The function telling the current timestamp.
    """

    def __init__(
            self,
            oracle: twister.oracle.OracleMT19937Seed,
            clock: typing.Callable[[], float]=time.time
    ):
        super().__init__(oracle)
        self.discovered_seed = None
        self._clock = clock

    def attack(self) -> bool:
        """
        Guess the oracle's seed.

        :return: The attack result.
        """
        before = int(self._clock())
        challenge = self.oracle.challenge()
        after = int(self._clock())

        self.discovered_seed = search_first_output_seed(
            challenge, before, after
        )
        return self.oracle.guess(self.discovered_seed)


class AttackerMT19937Clone(Attacker):
    """
    Clone the MT PRNG hold by the Oracle,
    by inverting the tempering function
    for each of the values output by the oracle,
    and passing the result to a newly created MT clone.

    :param oracle: The oracle to be attacked.
    """

    def __init__(self, oracle: twister.oracle.OracleMT19937Clone):
        super().__init__(oracle)
        self.next_random_numbers = []

    def attack(self) -> bool:
        """
        Clone the oracle's PRNG.
        :return: True whether the attacks is successful.
        """
        mt_prng = clone_mt19937(self.oracle.challenge())

        self.next_random_numbers = list(
            mt_prng.extract_number()
            for _ in range(10)
        )

        return self.oracle.guess(self.next_random_numbers)


class AttackerMT19937Stream(Attacker):
    """
    Guess the oracle's seed (i.e. the encryption key).

    :param oracle: The oracle to be attacked.
    """

    def __init__(self, oracle: twister.oracle.OracleMT19937Stream):
        super().__init__(oracle)
        self.key = None

    def attack(self) -> bool:
        """
        Brute-force the 16 bits keyspace.
        :return: True whether the attacks is successful.
        """
        self.key = search_stream_seed(
            self.oracle.challenge(),
            self.oracle.known_plaintext
        )

        return self.key is not None and self.oracle.guess(self.key)


class AttackerMT19937ResetToken(Attacker):
    """
    Tell whether the oracle's token was generated through MT19937.

    :param oracle: The oracle to be attacked.
    :param tolerance: How many seconds to look back.
    :param clock: The function telling the current timestamp.
    """

    def __init__(
            self,
            oracle: twister.oracle.OracleMT19937ResetToken,
            tolerance: int=100,
            clock: typing.Callable[[], float]=time.time
    ):
        super().__init__(oracle)
        self.tolerance = tolerance
        self.is_mt19937 = None
        self._clock = clock

    def attack(self) -> bool:
        """
        Look for the token seed in the last seconds.
        :return: True whether the attacks is successful.
        """
        token = self.oracle.challenge()
        self.is_mt19937 = is_mt19937_token(
            token,
            self.oracle.marker,
            self._clock(),
            self.tolerance
        )

        return self.oracle.guess(self.is_mt19937)
