"""
Upper-bound estimates for the n-th prime and the mod-6 wheel index mapping.

The estimate ``n * (ln n + ln ln n) + 3`` approximates the 0-indexed n-th
prime. It is empirical: for a few small n (n = 4 gives 10, the answer is 11)
it falls short, so callers grow the bound with :func:`grow` and sieve again.
"""
from collections import namedtuple
from math import ceil, isqrt, log

Bound = namedtuple('Bound', ['limit', 'root'])

SMALL_PRIMES = (2, 3, 5)


def estimate(n):
    """Estimate the magnitude of the n-th prime.

    Args:
        n: 0-indexed rank, n >= 0

    Returns:
        Bound(limit, root) with root = isqrt(limit) + 1
    """
    if n < len(SMALL_PRIMES):
        limit = SMALL_PRIMES[n]
    else:
        limit = ceil(n * (log(n) + log(log(n))) + 3)
    return Bound(limit, isqrt(limit) + 1)


def grow(bound, factor):
    """Return a strictly larger bound, scaled by factor."""
    limit = max(ceil(bound.limit * factor), bound.limit + 1)
    return Bound(limit, isqrt(limit) + 1)


def wheel_index(v):
    """
    Number of integers >= 5 in [0, v] not divisible by 2 or 3.

    Used as an exclusive upper bound on wheel indices.
    """
    q, r = divmod(v, 6)
    if r == 0:
        return 2 * q - 1
    elif r == 5:
        return 2 * q + 1
    else:
        return 2 * q


def wheel_value(k):
    """The integer represented by wheel index k (5, 7, 11, 13, 17, ...)."""
    return 3 * k + 5 - (k & 1)
