import logging
from math import ceil

import numpy as np

from nthprime import bound
from nthprime.sieve.base import Sieve, check_rank

log = logging.getLogger(__name__)


class OddSieve(Sieve):
    """
    Sieve of Eratosthenes over odd numbers only.

    Index i stands for 2i+3, which halves the buffer of
    :class:`EratosthenesSieve`. Only the n-th prime is returned.
    """

    name = 'odd'

    def nth_prime(self, n):
        n = check_rank(n)
        if n < len(bound.SMALL_PRIMES):
            return bound.SMALL_PRIMES[n]

        b = self.estimate(n)
        while True:
            size = (b.limit - 1) // 2
            root = ceil(b.root / 2 - 1)
            log.debug('%s: n=%d limit=%d size=%d', self.name, n, b.limit,
                      size)
            composite = self.allocate(n, size)
            for i in range(root):
                if not composite[i]:
                    p = 2 * i + 3
                    composite[2 * i * (i + 3) + 3::p] = True
            candidates = np.flatnonzero(~composite)
            del composite
            # 2 is not in the buffer
            if len(candidates) >= n:
                return 2 * int(candidates[n - 1]) + 3
            b = self.grow(n, b, len(candidates) + 1)
