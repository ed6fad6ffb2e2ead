#!/usr/bin/env python
# encoding: utf-8

"""
The oracle related stuff.
Random generations, games, and so on.
"""

import random
import abc
import time
import typing

import twister.util
import twister.prng
import twister.stream

__author__ = 'aldur'


class CheatingException(Exception):
    """
    Thrown when the oracle detects that the attacker is trying to cheat.
    """
    pass


class Oracle(abc.ABC):
    """
    The base oracle abstract class.
    """

    @abc.abstractmethod
    def challenge(self):
        """
        Challenge the oracle.
        Usually this function can be called only once.

        :return: The observations the attacker works on.
        """
        return None

    @abc.abstractmethod
    def guess(self, guess: bool) -> bool:
        """
        Given a guess, return true if correct.
        Usually this function can be called only once.

        :param guess: The guess done by the attacker.
        :return: True if the attacker correctly guessed.
        """
        return guess


class OracleMT19937Seed(Oracle):
    """
    This oracle will deliver the challenge in the following way:
    - wait a random number of seconds
    - seed the MT_PRNG with the Unix timestamp
    - wait a random number of seconds
    - return to the caller the first generated number

    The attacker's goal is to guess the seed.

    :param sleep_min: Minimum seconds to wait.
    :param sleep_max: Maximum seconds to wait.
    :param sleep: The function used to wait.
    :param clock: The function telling the current timestamp.
    """

    def __init__(
            self,
            sleep_min: int=40,
            sleep_max: int=100,
            sleep: typing.Callable[[float], None]=time.sleep,
            clock: typing.Callable[[], float]=time.time
    ):
        super().__init__()
        assert 0 <= sleep_min <= sleep_max

        self._seed = None
        self._guessed = False
        self.sleep_min = sleep_min
        self.sleep_max = sleep_max
        self._sleep = sleep
        self._clock = clock

    def challenge(self) -> int:
        """
        Deliver the challenge to the caller.
        :return: The first output of the MT PRNG.
        """
        self._sleep(
            random.randint(self.sleep_min, self.sleep_max)
        )
        self._seed = twister.stream.seed_from_timestamp(self._clock())
        mt_prng = twister.prng.MT19937(self._seed)
        self._sleep(
            random.randint(self.sleep_min, self.sleep_max)
        )
        return mt_prng.extract_number()

    def guess(self, guess: int) -> bool:
        """
        Compare the caller's guess with the stored seed.
        :param guess: The attacker's guess.
        :return: True if the guess is correct.
        """
        assert self._seed is not None

        if self._guessed:
            raise CheatingException(
                "You can only guess once!"
            )

        self._guessed = True
        return guess == self._seed


class OracleMT19937Clone(Oracle):
    """
    By using an MT PRNG, generate 624 random outputs
    (i.e. output the MT internal state).

    The attacker's goal is to clone the state generator,
    by using the previously output state.

    :param seed: The PRNG seed, defaults to the current timestamp.
    """

    def __init__(self, seed: int=None):
        super().__init__()
        self._mt_prng = twister.prng.MT19937(
            twister.stream.seed_from_timestamp() if seed is None else seed
        )
        self._guessed = False

    def guess(self, guess: list) -> bool:
        """
        Compare the attacker's guess with the next
        10 outputs of the PRNG.

        :param guess: The attacker's guess about the next generated numbers.
        :return: True if the guess is correct.
        :raise CheatingException: If called more than once.
        """
        assert guess

        if self._guessed:
            raise CheatingException(
                "You can only guess once!"
            )

        self._guessed = True

        truth = [
            self._mt_prng.extract_number()
            for _ in range(10)
        ]
        return len(truth) == len(guess) and \
            all(truth[i] == g for i, g in enumerate(guess))

    def challenge(self) -> tuple:
        """
        Return a tuple of the first 624
        randomly generated numbers to the caller.

        :return: The first 624 randomly generated numbers.
        """
        challenge = tuple(
            self._mt_prng.extract_number()
            for _ in range(twister.prng.N)
        )

        assert len(challenge) == twister.prng.N
        return challenge


class OracleMT19937Stream(Oracle):
    """
    Encrypt a string of the following form:
        <random_number_of_bytes> || AAA...AAA (14 As)
    The encryption takes places through MT19937-generated numbers
    used as key stream.

    The attacker's goal is to discover the MT19937 seed
    (16 bits, by definition).

    :param key: The 16 bit key, random if not specified.
    """

    def __init__(self, key: int=None):
        super().__init__()
        self._seed = twister.stream.seed_from_16_bit_key(
            random.randint(0, 2 ** 16 - 1) if key is None else key
        )
        self.known_plaintext = b"A" * 14
        self._plaintext = twister.util.random_bytes_random_range(
            0, 31
        ) + self.known_plaintext

        self._guessed = False

    def challenge(self) -> bytes:
        """
        Return to the caller the encryption of the plaintext.

        :return: The encryption of the hidden plaintext.
        """
        return twister.stream.encrypt(
            self._plaintext,
            self._seed
        )

    def guess(self, guess: int) -> bool:
        """
        Compare the attacker's guess against the stored seed.

        :param guess: The attacker's guessed seed.
        :return: True whether the attack is successful.
        """
        if self._guessed:
            raise CheatingException(
                "You can only guess once."
            )

        self._guessed = True
        return guess == self._seed


class OracleMT19937ResetToken(Oracle):
    """
    Issue a "password reset token":
        <random_number_of_bytes> || reset password token
    encrypted with an MT19937 key stream seeded by the current time.
    Flip a coin first: on tails the token is made of truly random bytes.

    The attacker's goal is to tell whether the token
    was produced by the MT19937 stream.

    :param clock: The function telling the current timestamp.
    """

    marker = b"reset password token"

    def __init__(self, clock: typing.Callable[[], float]=time.time):
        super().__init__()
        self._clock = clock
        self._truth = random.random() >= 0.5  # using MT19937
        self._guessed = False

    def challenge(self) -> bytes:
        """
        Return the token.

        :return: The token.
        """
        plaintext = twister.util.random_bytes_random_range(
            0, 31
        ) + self.marker

        if not self._truth:
            return twister.util.random_bytes(len(plaintext))

        return twister.stream.encrypt(
            plaintext,
            twister.stream.seed_from_timestamp(self._clock())
        )

    def guess(self, guess: bool) -> bool:
        """
        Compare the attacker's guess against the truth.

        :param guess: True if the attacker thinks the token comes from MT19937.
        :return: True whether the attack is successful.
        """
        if self._guessed:
            raise CheatingException(
                "You can only guess once."
            )

        self._guessed = True
        return guess == self._truth
