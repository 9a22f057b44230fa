"""
Entry points: the n-th prime and the primes up to the n-th.

:func:`nth_prime` always runs the bit-packed wheel sieve, the only strategy
that reaches n = 10**8 within a few hundred megabytes. :func:`primes_up_to_nth`
needs the whole sequence, which the wheel sieve never builds, and runs the
segmented sieve; it is meant for n up to about 10**7. The other strategies
stay available through :func:`nthprime.sieve.get_sieve`.
"""
from typing import List

from nthprime.sieve import SegmentedSieve, WheelSieve, check_rank

DEFAULT_SIEVE = WheelSieve
SEQUENCE_SIEVE = SegmentedSieve


def nth_prime(n: int) -> int:
    """第 n 个质数, 0-indexed: nth_prime(0) == 2"""
    return DEFAULT_SIEVE().nth_prime(check_rank(n))


def primes_up_to_nth(n: int) -> List[int]:
    """The n+1 smallest primes, ascending."""
    return SEQUENCE_SIEVE().primes(check_rank(n))


__all__ = ['nth_prime', 'primes_up_to_nth']
