import logging
from math import isqrt

import numpy as np

from nthprime import bound
from nthprime.sieve.base import SequenceSieve, check_rank

log = logging.getLogger(__name__)


def sieve_upto(composite):
    """
    Mark every composite index of ``composite`` in place.

    composite[i] is False while i is a prime candidate; entries 0 and 1 are
    marked as well.
    """
    composite[:2] = True
    for i in range(2, isqrt(len(composite) - 1) + 1):
        if not composite[i]:
            composite[i * i::i] = True
    return composite


def primes_upto(limit):
    """All primes p <= limit, ascending, as a numpy int64 array."""
    if limit < 2:
        return np.empty(0, dtype=np.int64)
    composite = sieve_upto(np.zeros(limit + 1, dtype=bool))
    return np.flatnonzero(~composite).astype(np.int64)


class EratosthenesSieve(SequenceSieve):
    """
    Classic sieve of Eratosthenes over the whole estimated range.

    Memory grows linearly with the bound, one byte per integer, so it is only
    practical up to n around 10**7.
    """

    name = 'eratosthenes'

    def primes(self, n):
        n = check_rank(n)
        if n < len(bound.SMALL_PRIMES):
            return list(bound.SMALL_PRIMES[:n + 1])

        b = self.estimate(n)
        while True:
            log.debug('%s: n=%d limit=%d', self.name, n, b.limit)
            composite = sieve_upto(self.allocate(n, b.limit + 1))
            primes = np.flatnonzero(~composite)
            del composite
            if len(primes) > n:
                return primes[:n + 1].tolist()
            b = self.grow(n, b, len(primes))
