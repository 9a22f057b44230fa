import logging
from math import isqrt

import numpy as np

from nthprime import bound
from nthprime.sieve.base import SequenceSieve, check_rank
from nthprime.sieve.eratosthenes import sieve_upto

log = logging.getLogger(__name__)


class SegmentedSieve(SequenceSieve):
    """
    Segmented sieve of Eratosthenes.

    The primes below sqrt(limit) are found with a plain sieve, then reused to
    sieve successive windows of the same width. Peak memory is O(sqrt(limit))
    for the buffer, plus the primes returned.
    """

    name = 'segmented'

    def primes(self, n):
        n = check_rank(n)
        if n < len(bound.SMALL_PRIMES):
            return list(bound.SMALL_PRIMES[:n + 1])

        b = self.estimate(n)
        while True:
            primes = self._sieve(n, b.limit)
            if len(primes) > n:
                return primes[:n + 1].tolist()
            b = self.grow(n, b, len(primes))

    def _sieve(self, n, limit):
        segment_size = isqrt(limit) + 1
        log.debug('%s: n=%d limit=%d segment_size=%d', self.name, n, limit,
                  segment_size)

        seeds = np.flatnonzero(~sieve_upto(self.allocate(n, segment_size)))
        found = [seeds]
        count = len(seeds)

        bottom, top = segment_size, 2 * segment_size
        while bottom <= limit and count <= n:
            if top > limit:
                top = limit + 1
            composite = self.allocate(n, segment_size + 1)
            for p in seeds.tolist():
                lowest = -(-bottom // p) * p
                composite[lowest - bottom:top - bottom:p] = True
            window = np.flatnonzero(~composite[:top - bottom]) + bottom
            found.append(window)
            count += len(window)
            bottom += segment_size
            top += segment_size
        return np.concatenate(found)
