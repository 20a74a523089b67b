"""Guess-the-number console game."""

import argparse
import random

TOO_BIG = "Your number is too big."
TOO_SMALL = "Your number is too small."
CORRECT = "Congratulation! You win."


def generate_random_number(rng=None):
    """Return a secret number from 1 to 100."""
    rng = rng if rng is not None else random.Random()
    return rng.randint(1, 100)


def evaluate_guess(guess, secret):
    """Return the message telling the player how the guess compares."""
    if guess > secret:
        return TOO_BIG
    if guess < secret:
        return TOO_SMALL
    return CORRECT


def main(argv=None):
    """Play until the number is guessed; return 1 if input runs out first."""
    argparse.ArgumentParser(description="Guess a number between 1 and 100.").parse_args(argv)
    secret = generate_random_number()
    while True:
        print()
        try:
            entry = input("Enter your guess(1...100): ")
        except EOFError:
            return 1
        try:
            guess = int(entry.strip())
        except ValueError:
            print("Please enter a whole number.")
            continue
        print(evaluate_guess(guess, secret))
        if guess == secret:
            return 0