import time

import pytest

from app.routes.utility_routes import MAX_PRIME_INPUT, is_prime, parse_number
from decklogic.errors import InvalidArgument


def test_is_prime_small_numbers():
    primes = [n for n in range(-10, 60) if is_prime(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59]


def test_is_prime_rejects_strong_pseudoprimes():
    # Carmichael numbers and a base-2 strong pseudoprime
    for n in [561, 1105, 1729, 2047, 3215031751, 3825123056546413051]:
        assert is_prime(n) is False


def test_is_prime_is_fast_near_the_limit():
    start = time.perf_counter()
    assert is_prime(10 ** 16 + 61) is True
    assert is_prime(MAX_PRIME_INPUT - 111) is True
    assert is_prime(MAX_PRIME_INPUT - 1) is False
    assert time.perf_counter() - start < 1.0


def test_parse_number_bounds():
    assert parse_number(str(MAX_PRIME_INPUT)) == MAX_PRIME_INPUT
    assert parse_number(" -7 ") == -7
    with pytest.raises(InvalidArgument):
        parse_number(str(MAX_PRIME_INPUT + 1))
    with pytest.raises(InvalidArgument):
        parse_number("1" * 40)
