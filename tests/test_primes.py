import pytest

from xvutils.primes import MSGSIZE, main, sieve


def test_default_sieve():
    assert sieve() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]


@pytest.mark.parametrize("size", [0, 1, 2])
def test_tiny_sizes_are_empty(size):
    assert sieve(size) == []


def test_results_are_prime_and_below_size():
    for p in sieve(200):
        assert p < 200
        assert all(p % d for d in range(2, p))


def test_no_prime_missed():
    found = set(sieve(100))
    for n in range(2, 100):
        if all(n % d for d in range(2, n)):
            assert n in found


def test_ascending():
    result = sieve(120)
    assert result == sorted(result)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "prime 2"
    assert lines == [f"prime {p}" for p in sieve(MSGSIZE)]