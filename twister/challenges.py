#!/usr/bin/env python
# encoding: utf-8

"""The main file."""

import twister.oracle
import twister.attacker
import twister.prng

import argparse
import io
import sys
import contextlib
import functools
import colorama

__author__ = "aldur"


def challenge(challenge_f):
    """
    Decorator for challenges function.

    :param challenge_f: The challenge function.
    :return: The decorated function.
    """

    class Tee(io.StringIO):
        """
        Print standard output as usual,
        and at the same time keep track of what
        is being printed.
        """

        def write(self, b: str):
            """
            Write the buffer on the standard output
            before calling the super implementation.

            :param b: The buffer to be written.
            """
            sys.__stdout__.write(b)
            return super().write(b)

    @functools.wraps(challenge_f)
    def decorated_challenge():
        """
        Execute the function and return to screen the result.
        """
        captured_stdout = Tee()
        print("Executing challenge: {}.\n".format(challenge_f.__name__))

        with contextlib.redirect_stdout(captured_stdout):
            result = challenge_f()

        v = captured_stdout.getvalue()
        if v and not v.endswith("\n\n"):
            print("")

        if result is not None:
            print(
                "{}Challenge {}.{}".format(
                    colorama.Fore.GREEN if result else colorama.Fore.RED,
                    "completed" if result else "failed",
                    colorama.Fore.RESET
                ))
        else:
            print("Challenge did not require explicit completion, you're good to go.")

        return result

    return decorated_challenge


@challenge
def twentyone():
    """http://cryptopals.com/sets/3/challenges/21/"""
    mt_prng = twister.prng.MT19937(42)
    print("Randomly generated numbers: {}".format(
        [mt_prng.extract_number() for _ in range(10)]
    ))

    reference = [
        2357136044, 2546248239, 3071714933,
        3626093760, 2588848963, 3684848379,
    ]
    mt_prng.seed(0)
    numbers = [mt_prng.extract_number() for _ in range(len(reference))]
    print("Seeded with 0: {}".format(numbers))
    return numbers == reference


@challenge
def twentytwo():
    """http://cryptopals.com/sets/3/challenges/22/"""
    print("Please wait while the oracle does its job...")
    oracle = twister.oracle.OracleMT19937Seed()
    attacker = twister.attacker.AttackerMT19937Seed(oracle)
    result = attacker.attack()
    print("Discovered seed:\n{}".format(
        attacker.discovered_seed
    ))
    return result


@challenge
def twentythree():
    """http://cryptopals.com/sets/3/challenges/23/"""
    oracle = twister.oracle.OracleMT19937Clone()
    attacker = twister.attacker.AttackerMT19937Clone(oracle)
    result = attacker.attack()
    print("Discovered next random numbers:\n{}".format(
        attacker.next_random_numbers
    ))
    return result


@challenge
def twentyfour():
    """http://cryptopals.com/sets/3/challenges/24/"""
    oracle = twister.oracle.OracleMT19937Stream()
    attacker = twister.attacker.AttackerMT19937Stream(oracle)
    print("Please wait while brute-forcing the oracle's seed...")
    result = attacker.attack()
    print("Discovered seed:\n{}".format(
        attacker.key
    ))

    oracle = twister.oracle.OracleMT19937ResetToken()
    attacker = twister.attacker.AttackerMT19937ResetToken(oracle)
    result = attacker.attack() and result
    print("Is the token MT19937 generated?\n{}".format(
        attacker.is_mt19937
    ))
    return result


def main():
    """
    Read the argument from the command line,
    and execute the related challenge.
    """
    _num2words = {
        21: 'twentyone', 22: 'twentytwo',
        23: 'twentythree', 24: 'twentyfour',
    }

    problem_meta_var = "problem_number"

    def _create_parser() -> argparse.ArgumentParser:
        """
        Create the command line argument parser.

        :return: The command line argument parser for this module.
        """
        parser = argparse.ArgumentParser(
            description='MT19937 cloning and seed recovery demos.'
        )

        parser.add_argument(
            problem_meta_var,
            metavar=problem_meta_var,
            type=int,
            choices=sorted(_num2words),
            help='the number of the problem to be solved'
        )

        return parser

    colorama.init()

    command_line_parser = _create_parser()
    args = vars(command_line_parser.parse_args())

    problem = globals().get(_num2words[args[problem_meta_var]], None)
    assert callable(problem)
    problem()
