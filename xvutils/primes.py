"""Print the primes found by a staged sieve."""

import sys

MSGSIZE = 36


def sieve(size=MSGSIZE):
    """Return the primes below size, found one sieve stage at a time."""
    marks = [False, False] + [True] * max(size - 2, 0)
    marks = marks[:max(size, 0)]
    primes = []
    while True:
        val = next((i for i, alive in enumerate(marks) if alive), 0)
        if val == 0:
            return primes
        primes.append(val)
        for i in range(val, len(marks), val):
            marks[i] = False


def main(argv=None):
    for p in sieve(MSGSIZE):
        sys.stdout.write(f"prime {p}\n")
    return 0